"""Validation utilities for Sudoku boards."""

from __future__ import annotations
from typing import Any, NamedTuple, Optional, Set, Tuple

import numpy as np

from .board import SudokuBoard
from .geometry import SIZE, EMPTY

Coordinate = Tuple[int, int]


class BoardStatus(NamedTuple):
    """Snapshot of a board during play."""
    invalid_cells: Set[Coordinate]
    empty_cell: Optional[Coordinate]
    is_complete: bool


def is_valid_placement(board: Any, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    The check runs against the board as it is, including whatever already
    sits at (row, col). Clear the cell first when re-testing a filled one.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > SIZE:
        return False

    board = SudokuBoard.coerce(board)

    # Check row
    if value in board.get_row(row):
        return False

    # Check column
    if value in board.get_col(col):
        return False

    # Check box
    if value in board.get_box(row, col):
        return False

    return True


def find_invalid_cells(board: Any) -> Set[Coordinate]:
    """
    Find every filled cell that clashes with another cell in its row,
    column, or box.

    Each filled cell is taken out of a working copy of the grid and its
    digit is re-checked against the rest, so both cells of a duplicate pair
    are reported.

    Args:
        board: Any board, legal or not.

    Returns:
        Set of (row, col) coordinates in conflict. Empty for a legal board.
    """
    board = SudokuBoard.coerce(board)
    work = board.grid.copy()
    invalid = set()

    for row, col in zip(*np.nonzero(work)):
        digit = work[row, col]
        work[row, col] = EMPTY
        if not is_valid_placement(SudokuBoard(work), row, col, int(digit)):
            invalid.add((int(row), int(col)))
        work[row, col] = digit

    return invalid


def find_empty_cell(board: Any) -> Optional[Coordinate]:
    """
    Locate the first empty cell scanning rows top to bottom.

    Returns:
        (row, col) of the first empty cell, or None if the board is full.
    """
    board = SudokuBoard.coerce(board)
    rows, cols = np.nonzero(board.grid == EMPTY)
    if len(rows) == 0:
        return None
    return int(rows[0]), int(cols[0])


def is_valid_board(board: Any) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    return not find_invalid_cells(board)


def board_status(board: Any) -> BoardStatus:
    """Conflicts, next blank cell and completion flag after an edit."""
    invalid = find_invalid_cells(board)
    empty = find_empty_cell(board)
    return BoardStatus(
        invalid_cells=invalid,
        empty_cell=empty,
        is_complete=empty is None and not invalid,
    )


def validate_solution(puzzle: Any, solution: Any) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    puzzle = SudokuBoard.coerce(puzzle)
    solution = SudokuBoard.coerce(solution)

    # Check that solution respects original clues
    givens = puzzle.grid != EMPTY
    if not np.array_equal(puzzle.grid[givens], solution.grid[givens]):
        return False

    # Check that solution is complete and valid
    return solution.is_solved()
