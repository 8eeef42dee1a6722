"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard
from .errors import SudokuError, SolveError, GenerationError
from .validator import (
    BoardStatus,
    board_status,
    find_empty_cell,
    find_invalid_cells,
    is_valid_board,
    is_valid_placement,
    validate_solution,
)

__all__ = [
    "SudokuBoard",
    "SudokuError",
    "SolveError",
    "GenerationError",
    "BoardStatus",
    "board_status",
    "find_empty_cell",
    "find_invalid_cells",
    "is_valid_board",
    "is_valid_placement",
    "validate_solution",
]
