"""Tests for the command-line interface."""

import json

import pytest
from sudoku_core.cli import main
from sudoku_core.core.board import SudokuBoard


PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


class TestCLI:
    """Tests for cli.main."""

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_generate_json(self, tmp_path, capsys):
        output = tmp_path / "puzzles.json"
        code = main(["generate", "-n", "2", "-d", "hard", "-s", "1",
                     "--with-solution", "-o", str(output)])

        assert code == 0
        data = json.loads(output.read_text())
        assert len(data) == 2
        for entry in data:
            assert entry["difficulty"] == "hard"
            assert 50 <= entry["blanks"] <= 55
            puzzle = SudokuBoard.from_string(entry["puzzle"])
            solution = SudokuBoard.from_string(entry["solution"])
            assert solution.is_solved()
            assert puzzle.count_empty() == entry["blanks"]
        assert "Total puzzles generated: 2" in capsys.readouterr().out

    def test_generate_failure_exit_code(self, tmp_path, capsys):
        config = tmp_path / "cfg.json"
        config.write_text(json.dumps({"max_attempts": 3}))

        assert main(["generate", "-d", "easy", "-c", str(config)]) == 1
        assert "timeout" in capsys.readouterr().out

    def test_solve(self, capsys):
        assert main(["solve", "-p", PUZZLE, "-s", "0", "-v"]) == 0
        out = capsys.readouterr().out
        assert "Solved" in out
        assert str(SudokuBoard.from_string(SOLUTION)) in out

    def test_solve_conflict(self, capsys):
        assert main(["solve", "-p", "55" + PUZZLE[2:]]) == 1
        assert "conflict" in capsys.readouterr().out

    def test_solve_bad_string(self, capsys):
        assert main(["solve", "-p", "123"]) == 1
        assert "Error parsing puzzle" in capsys.readouterr().out

    def test_solve_zero_max_attempts(self, capsys):
        assert main(["solve", "-p", PUZZLE, "--max-attempts", "0"]) == 1
        assert "--max-attempts must be positive" in capsys.readouterr().out

    def test_check_conflicts(self, capsys):
        board = "535070000" + PUZZLE[9:]
        assert main(["check", "-p", board]) == 1
        assert "(0, 0), (0, 2)" in capsys.readouterr().out

    def test_check_in_progress(self, capsys):
        assert main(["check", "-p", PUZZLE]) == 0
        assert "next empty at (0, 2)" in capsys.readouterr().out

    def test_check_complete(self, capsys):
        assert main(["check", "-p", SOLUTION]) == 0
        assert "complete and valid" in capsys.readouterr().out

    def test_benchmark_without_charts(self, tmp_path):
        out_dir = tmp_path / "results"
        code = main(["benchmark", "-n", "1", "-d", "easy", "-o", str(out_dir), "--no-charts"])

        assert code == 0
        summary = json.loads((out_dir / "benchmark_summary.json").read_text())
        assert summary["results_by_difficulty"]["easy"]["runs"] == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
