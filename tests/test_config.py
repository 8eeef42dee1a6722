"""Unit tests for configuration loading."""

import json

import pytest
from sudoku_core.config import (
    DEFAULT_CONFIG,
    DEFAULT_MAX_ATTEMPTS,
    SudokuConfig,
    load_config,
)
from sudoku_core.generator import Difficulty


def write_json(path, data):
    path.write_text(json.dumps(data))
    return str(path)


class TestSudokuConfig:
    """Tests for SudokuConfig."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.max_attempts == DEFAULT_MAX_ATTEMPTS == 20_000_000
        assert DEFAULT_CONFIG.removal_range(Difficulty.EASY) == (33, 37)
        assert DEFAULT_CONFIG.removal_range("medium") == (41, 45)
        assert DEFAULT_CONFIG.removal_range("hard") == (50, 55)

    def test_unknown_difficulty(self):
        with pytest.raises(ValueError):
            DEFAULT_CONFIG.removal_range("expert")

    @pytest.mark.parametrize("ranges", [
        {"easy": (40, 30)},
        {"easy": (-1, 5)},
        {"easy": (10, 82)},
        {"easy": (1, 2, 3)},
        {"easy": [33.5, 37]},
        {"easy": [33, "37"]},
        {"easy": [True, 37]},
        {"easy": 33},
        {"easy": None},
        {"nightmare": (60, 64)},
    ])
    def test_invalid_ranges(self, ranges):
        with pytest.raises(ValueError):
            SudokuConfig(removal_ranges=ranges)

    @pytest.mark.parametrize("max_attempts", [0, -5, True, 1.5, "100"])
    def test_invalid_max_attempts(self, max_attempts):
        with pytest.raises(ValueError):
            SudokuConfig(max_attempts=max_attempts)

    def test_is_hashable_and_immutable(self):
        config = SudokuConfig(removal_ranges={"easy": [20, 25]}, max_attempts=100)
        same = SudokuConfig(removal_ranges={"easy": (20, 25)}, max_attempts=100)

        assert config == same
        assert hash(config) == hash(same)
        assert {config: "cached"}[same] == "cached"
        assert config.removal_range("easy") == (20, 25)
        with pytest.raises(TypeError):
            config.removal_ranges["easy"] = (1, 2)

    def test_source_mapping_is_copied(self):
        ranges = {"easy": (20, 25)}
        config = SudokuConfig(removal_ranges=ranges)
        ranges["easy"] = (1, 2)
        assert config.removal_range("easy") == (20, 25)

    def test_to_dict(self):
        data = DEFAULT_CONFIG.to_dict()
        assert data["removal_ranges"]["hard"] == [50, 55]
        assert data["max_attempts"] == DEFAULT_MAX_ATTEMPTS


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_path(self):
        assert load_config() is DEFAULT_CONFIG

    def test_partial_override(self, tmp_path):
        path = write_json(tmp_path / "sudoku.json", {
            "max_attempts": 5000,
            "removal_ranges": {"easy": [20, 25]},
        })
        config = load_config(path)

        assert config.max_attempts == 5000
        assert config.removal_range("easy") == (20, 25)
        assert config.removal_range("hard") == (50, 55)

    def test_invalid_file(self, tmp_path):
        path = write_json(tmp_path / "bad.json", {"removal_ranges": {"hard": [60, 50]}})
        with pytest.raises(ValueError):
            load_config(path)

    @pytest.mark.parametrize("data", [
        {"removal_ranges": {"easy": [33.5, 37]}},
        {"removal_ranges": {"easy": 33}},
        {"removal_ranges": {"easy": [33]}},
        {"removal_ranges": [["easy", [33, 37]]]},
        {"max_attempts": 2.5},
        {"max_attempts": False},
        [1, 2, 3],
    ])
    def test_rejects_mistyped_values(self, tmp_path, data):
        path = write_json(tmp_path / "typed.json", data)
        with pytest.raises(ValueError):
            load_config(path)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
