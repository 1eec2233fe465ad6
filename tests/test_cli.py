"""
Tests for the command line entry point

Usage:
    pytest tests/test_cli.py
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from main import main


@pytest.fixture
def config(tmp_path):
    return str(tmp_path / "config.json")


def test_solve_prints_moves(capsys, config):
    code = main(["-c", "5", "3", "-g", "4", "0", "--config", config])
    out = capsys.readouterr().out

    assert code == 0
    assert "BFS: 7 moves" in out
    assert "Fill Jug 1" in out
    assert "Nodes expanded:" in out


def test_unreachable_exit_code(capsys, config):
    code = main(["-c", "5", "3", "-g", "2", "2", "-a", "DFS", "--config", config])

    assert code == 1
    assert "No solution" in capsys.readouterr().out


def test_invalid_puzzle_exit_code(config):
    assert main(["-c", "5", "3", "-g", "6", "0", "--config", config]) == 2
    assert main(["-c", "5", "3", "-i", "0", "-g", "4", "0", "--config", config]) == 2


def test_hint(capsys, config):
    code = main(["-c", "5", "3", "-i", "4", "3", "-g", "4", "0", "--hint", "--config", config])

    assert code == 0
    assert capsys.readouterr().out.strip() == (
        "Try emptying Jug 2. You are 1 step away from the goal using BFS."
    )


def test_json_output(capsys, config):
    code = main(["-c", "6", "4", "-g", "2", "0", "-a", "A*", "--json", "--config", config])
    data = json.loads(capsys.readouterr().out)

    assert code == 0
    assert data["path"] == [[0, 0], [6, 0], [2, 4], [2, 0]]
    assert data["analytics"]["algorithm"] == "A*"


def test_tree_output_and_image(capsys, config, tmp_path):
    image_path = tmp_path / "tree.png"
    code = main([
        "-c", "5", "3", "-g", "4", "0", "-a", "IDDFS",
        "--tree", "--tree-image", str(image_path), "--config", config,
    ])
    out = capsys.readouterr().out

    assert code == 0
    assert "Search tree (8 nodes):" in out
    assert image_path.exists()


def test_save_and_reuse_algorithm(capsys, config):
    assert main(["-c", "6", "4", "-g", "2", "0", "-a", "UCS", "--save", "--config", config]) == 0
    assert json.loads(Path(config).read_text(encoding="utf-8"))["algorithm"] == "UCS"

    capsys.readouterr()
    main(["-c", "6", "4", "-g", "2", "0", "--config", config])
    assert "UCS: 3 moves" in capsys.readouterr().out


def test_unknown_algorithm_in_settings(caplog, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"algorithm": "GREEDY"}), encoding="utf-8")

    code = main(["-c", "5", "3", "-g", "4", "0", "--config", str(path)])

    assert code == 2
    assert "Unknown algorithm" in caplog.text


def test_zero_tree_cap_is_honoured(capsys, config):
    code = main(["-c", "5", "3", "-g", "4", "0", "--tree", "--max-tree-nodes", "0", "--config", config])

    assert code == 0
    assert "Search tree (0 nodes):" in capsys.readouterr().out


def test_negative_tree_cap_is_rejected(config):
    assert main(["-c", "5", "3", "-g", "4", "0", "--max-tree-nodes", "-1", "--config", config]) == 2


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
