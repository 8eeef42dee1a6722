"""Sudoku puzzle generation, validation and backtracking solving."""

from .core import (
    SudokuBoard,
    SudokuError,
    SolveError,
    GenerationError,
    board_status,
    find_empty_cell,
    find_invalid_cells,
    is_valid_placement,
)
from .generator import Difficulty, GenerationResult, SudokuGenerator, generate
from .solvers import SolveResult, solve

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "SudokuError",
    "SolveError",
    "GenerationError",
    "Difficulty",
    "GenerationResult",
    "SolveResult",
    "SudokuGenerator",
    "board_status",
    "find_empty_cell",
    "find_invalid_cells",
    "generate",
    "is_valid_placement",
    "solve",
]
