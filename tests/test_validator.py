"""Unit tests for placement validation and conflict detection."""

import pytest
from sudoku_core.core.board import SudokuBoard
from sudoku_core.core.validator import (
    board_status,
    find_empty_cell,
    find_invalid_cells,
    is_valid_board,
    is_valid_placement,
    validate_solution,
)


PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def board_with_first_row(row):
    return [list(row)] + [[0] * 9 for _ in range(8)]


class TestIsValidPlacement:
    """Tests for is_valid_placement."""

    def test_row_duplicate(self):
        board = board_with_first_row([5, 3, 0, 0, 7, 0, 0, 0, 0])
        assert not is_valid_placement(board, 0, 2, 5)
        assert is_valid_placement(board, 0, 2, 1)

    def test_column_and_box(self):
        """Test placement validation."""
        board = SudokuBoard().with_value(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

    def test_does_not_exclude_target_cell(self):
        """A digit already sitting in the target cell counts against itself."""
        board = SudokuBoard().with_value(4, 4, 6)
        assert not is_valid_placement(board, 4, 4, 6)
        assert is_valid_placement(board.cleared(4, 4), 4, 4, 6)

    def test_out_of_range_digit(self):
        board = SudokuBoard()
        assert not is_valid_placement(board, 0, 0, 0)
        assert not is_valid_placement(board, 0, 0, 10)


class TestFindInvalidCells:
    """Tests for the invalid-cell detector."""

    def test_legal_boards_have_no_conflicts(self):
        assert find_invalid_cells(SudokuBoard()) == set()
        assert find_invalid_cells(SudokuBoard.from_string(PUZZLE)) == set()
        assert find_invalid_cells(SudokuBoard.from_string(SOLUTION)) == set()

    def test_row_pair_reports_both_cells(self):
        board = board_with_first_row([5, 3, 5, 0, 7, 0, 0, 0, 0])
        assert find_invalid_cells(board) == {(0, 0), (0, 2)}

    def test_column_conflict(self):
        board = SudokuBoard().with_value(0, 3, 8).with_value(7, 3, 8)
        assert find_invalid_cells(board) == {(0, 3), (7, 3)}

    def test_box_conflict(self):
        board = SudokuBoard().with_value(3, 3, 2).with_value(5, 5, 2)
        assert find_invalid_cells(board) == {(3, 3), (5, 5)}

    def test_triple_reports_all(self):
        board = board_with_first_row([9, 0, 0, 9, 0, 0, 9, 0, 0])
        assert find_invalid_cells(board) == {(0, 0), (0, 3), (0, 6)}

    def test_edit_on_solved_board(self):
        board = SudokuBoard.from_string(SOLUTION).with_value(0, 0, 3)
        # row 0 and the top-left box already hold 3 at (0, 1), column 0 at (8, 0)
        assert find_invalid_cells(board) == {(0, 0), (0, 1), (8, 0)}

    def test_does_not_modify_input(self):
        data = board_with_first_row([5, 3, 5, 0, 7, 0, 0, 0, 0])
        find_invalid_cells(data)
        assert data[0] == [5, 3, 5, 0, 7, 0, 0, 0, 0]

    def test_row_permutation_within_band(self):
        """Swapping rows inside a band relabels conflicts and nothing else."""
        board = SudokuBoard.from_string(PUZZLE).with_value(0, 2, 6).with_value(2, 4, 9)
        invalid = find_invalid_cells(board)
        assert invalid

        grid = board.to_list()
        grid[0], grid[1] = grid[1], grid[0]
        swap = {0: 1, 1: 0}
        swapped = find_invalid_cells(grid)
        assert swapped == {(swap.get(r, r), c) for r, c in invalid}

    def test_band_permutation(self):
        board = SudokuBoard.from_string(PUZZLE).with_value(3, 1, 4).with_value(8, 8, 1)
        invalid = find_invalid_cells(board)
        assert invalid

        grid = board.to_list()
        permuted = grid[3:6] + grid[0:3] + grid[6:9]
        relabel = {r: (r + 3) % 6 if r < 6 else r for r in range(9)}
        assert find_invalid_cells(permuted) == {(relabel[r], c) for r, c in invalid}

    def test_legal_placement_is_not_flagged(self):
        board = SudokuBoard.from_string(PUZZLE)
        digit = next(d for d in range(1, 10) if is_valid_placement(board, 0, 2, d))
        placed = board.with_value(0, 2, digit)
        assert (0, 2) not in find_invalid_cells(placed)
        assert find_invalid_cells(placed) == set()

    def test_is_valid_board(self):
        assert is_valid_board(SudokuBoard.from_string(PUZZLE))
        assert not is_valid_board(board_with_first_row([1, 1, 0, 0, 0, 0, 0, 0, 0]))


class TestFindEmptyCell:
    """Tests for find_empty_cell."""

    def test_full_board(self):
        assert find_empty_cell(SudokuBoard.from_string(SOLUTION)) is None

    def test_first_zero_row_major(self):
        assert find_empty_cell(SudokuBoard.from_string(PUZZLE)) == (0, 2)
        assert find_empty_cell(SudokuBoard()) == (0, 0)

    def test_single_gap(self):
        board = SudokuBoard.from_string(SOLUTION).cleared(6, 4)
        assert find_empty_cell(board) == (6, 4)


class TestBoardStatus:
    """Tests for the after-edit status snapshot."""

    def test_in_progress(self):
        status = board_status(SudokuBoard.from_string(PUZZLE))
        assert status.invalid_cells == set()
        assert status.empty_cell == (0, 2)
        assert not status.is_complete

    def test_complete(self):
        status = board_status(SudokuBoard.from_string(SOLUTION))
        assert status.empty_cell is None
        assert status.is_complete

    def test_full_but_conflicting(self):
        board = SudokuBoard.from_string(SOLUTION).with_value(0, 0, 3)
        status = board_status(board)
        assert status.empty_cell is None
        assert status.invalid_cells
        assert not status.is_complete


class TestValidateSolution:
    """Tests for validate_solution."""

    def test_matching_solution(self):
        assert validate_solution(SudokuBoard.from_string(PUZZLE), SudokuBoard.from_string(SOLUTION))

    def test_solution_ignoring_givens(self):
        puzzle = SudokuBoard.from_string(PUZZLE).with_value(0, 2, 1)
        assert not validate_solution(puzzle, SudokuBoard.from_string(SOLUTION))

    def test_incomplete_solution(self):
        partial = SudokuBoard.from_string(SOLUTION).cleared(8, 8)
        assert not validate_solution(SudokuBoard.from_string(PUZZLE), partial)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
