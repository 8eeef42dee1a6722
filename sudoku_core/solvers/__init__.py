"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats, SolveResult
from .backtracking_solver import AttemptBudget, RandomizedBacktrackingSolver, solve

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SolveResult",
    "AttemptBudget",
    "RandomizedBacktrackingSolver",
    "solve",
]
