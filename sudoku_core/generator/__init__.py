"""Generator module for creating Sudoku puzzles."""

from .generator import SudokuGenerator, Difficulty, GenerationResult, generate

__all__ = ["SudokuGenerator", "Difficulty", "GenerationResult", "generate"]
