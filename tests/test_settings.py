"""
Tests for settings persistence and puzzle validation

Usage:
    pytest tests/test_settings.py
"""

import json
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jugsolver import PuzzleConfigError, validate_puzzle
from jugsolver.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "config.json")

    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_round_trip(tmp_path):
    path = tmp_path / "config.json"
    settings = load_settings(path)
    settings["algorithm"] = "A*"
    save_settings(settings, path)

    assert load_settings(path)["algorithm"] == "A*"


def test_partial_file_merges_with_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"algorithm": "DFS"}), encoding="utf-8")

    settings = load_settings(path)

    assert settings["algorithm"] == "DFS"
    assert settings["max_tree_nodes"] == DEFAULT_SETTINGS["max_tree_nodes"]


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_invalid_file_gives_defaults(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS


def test_save_failure_is_logged(tmp_path, caplog):
    # A directory cannot be opened for writing
    save_settings({"algorithm": "BFS"}, tmp_path)

    assert "Failed to save settings" in caplog.text


def test_validate_puzzle_accepts_well_formed():
    validate_puzzle([5, 3], [0, 0], [4, 0])
    validate_puzzle([10], [10], [0])


@pytest.mark.parametrize("capacities,initial,goal", [
    ([], [], []),
    ([5, 3], [0], [4, 0]),
    ([5, 3], [0, 0], [4, 0, 0]),
    ([5, 0], [0, 0], [4, 0]),
    ([5, -3], [0, 0], [4, 0]),
    ([5, 3], [6, 0], [4, 0]),
    ([5, 3], [0, 0], [4, -1]),
])
def test_validate_puzzle_rejects_malformed(capacities, initial, goal):
    with pytest.raises(PuzzleConfigError):
        validate_puzzle(capacities, initial, goal)


def test_config_error_is_value_error():
    assert issubclass(PuzzleConfigError, ValueError)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
