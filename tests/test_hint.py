"""
Tests for hint derivation and solution playback

Usage:
    pytest tests/test_hint.py
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import jugsolver.hint as hint_module
from jugsolver import JugState, Move, MoveType, SolutionCursor, get_hint, solve


def test_hint_already_at_goal(monkeypatch):
    """No search runs when the player is already at the goal."""
    def fail(*args, **kwargs):
        raise AssertionError("solve() should not be called")

    monkeypatch.setattr(hint_module, "solve", fail)
    hint = get_hint([4, 0], [4, 0], [5, 3], "BFS")

    assert hint.steps_to_goal == 0
    assert hint.message == "You've already reached the goal! Great job."
    assert hint.next_move.type is MoveType.EMPTY
    assert hint.next_move.description == "Goal reached"
    assert hint.is_reachable


@pytest.mark.parametrize("algorithm", ["BFS", "DFS", "IDDFS", "UCS", "A*"])
def test_hint_unreachable(algorithm):
    hint = get_hint([0, 0], [2, 2], [5, 3], algorithm)

    assert hint.steps_to_goal == -1
    assert not hint.is_reachable
    assert hint.next_move.description == "No solution"
    assert hint.message == (
        f"The AI ({algorithm}) couldn't find a solution from this state. "
        f"Try a different strategy or reset."
    )


def test_hint_fill():
    hint = get_hint([0, 0], [4, 0], [5, 3], "BFS")

    assert hint.next_move == Move.fill(0)
    assert hint.steps_to_goal == 7
    assert hint.message == "Try filling Jug 1. You are 7 steps away from the goal using BFS."


def test_hint_empty_single_step():
    hint = get_hint([4, 3], [4, 0], [5, 3], "BFS")

    assert hint.next_move == Move.empty(1)
    assert hint.steps_to_goal == 1
    assert hint.message == "Try emptying Jug 2. You are 1 step away from the goal using BFS."


def test_hint_pour():
    hint = get_hint([5, 2], [4, 0], [5, 3], "UCS")

    assert hint.next_move == Move.pour(0, 1)
    assert hint.steps_to_goal == 2
    assert hint.message == (
        "Try pouring Jug 1 into Jug 2. You are 2 steps away from the goal using UCS."
    )


def test_hint_defaults_to_bfs():
    hint = get_hint([0, 0], [2, 0], [6, 4])

    assert hint.message.endswith("using BFS.")
    assert hint.steps_to_goal == 3


def test_hint_matches_solution_first_move():
    result = solve([0, 0, 0], [2, 2, 3], [7, 5, 3], "A*")
    hint = get_hint([0, 0, 0], [2, 2, 3], [7, 5, 3], "A*")

    assert hint.next_move == result.moves[0]
    assert hint.steps_to_goal == result.move_count


def test_hint_to_dict():
    data = get_hint([4, 3], [4, 0], [5, 3]).to_dict()

    assert data["stepsToGoal"] == 1
    assert data["nextMove"]["type"] == "EMPTY"
    assert data["nextMove"]["jugIndex"] == 1


def test_solution_cursor_playback():
    result = solve([0, 0], [2, 0], [6, 4], "BFS")
    cursor = SolutionCursor(result=result)

    assert cursor.total_moves == 3
    assert cursor.current_move == Move.fill(0)
    assert cursor.expected_state_before == JugState.from_list([0, 0])
    assert cursor.expected_state_after == JugState.from_list([6, 0])
    assert cursor.matches([0, 0])
    assert not cursor.matches([6, 0])
    assert cursor.peek_moves(2) == [Move.fill(0), Move.pour(0, 1)]

    assert cursor.advance() == Move.fill(0)
    assert cursor.moves_remaining == 2
    assert cursor.matches(JugState.from_list([6, 0]))

    cursor.advance()
    cursor.advance()
    assert cursor.is_exhausted
    assert cursor.current_move is None
    assert cursor.expected_state_after is None
    assert cursor.advance() is None
    assert cursor.peek_moves() == []

    cursor.reset()
    assert cursor.move_index == 0


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
