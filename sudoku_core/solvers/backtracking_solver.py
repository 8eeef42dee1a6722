"""Randomized backtracking solver used to fill and complete boards."""

from __future__ import annotations
import random
from typing import Any, Optional

from .base_solver import BaseSolver, SolveResult, SolverStats
from ..config import DEFAULT_MAX_ATTEMPTS
from ..core.board import SudokuBoard
from ..core.errors import SolveError, CONFLICT, TIMEOUT, UNSOLVABLE
from ..core.geometry import DIGITS
from ..core.validator import find_empty_cell, find_invalid_cells, is_valid_placement


class AttemptBudget:
    """Counts candidate digits tried during one solve call."""

    def __init__(self, limit: int):
        self.limit = limit
        self.used = 0

    def spend(self) -> None:
        if self.used >= self.limit:
            raise SolveError(TIMEOUT, f"Gave up after {self.used:,} attempts")
        self.used += 1


class RandomizedBacktrackingSolver(BaseSolver):
    """
    Depth-first search that fills the first empty cell (row-major) with
    each digit 1-9 in a freshly shuffled order.

    Shuffling the candidates is what makes repeated runs on the same
    partial board land on different complete solutions. Each placement
    builds a new board, so abandoning a branch needs no undo step.
    """

    name = "RandomizedBacktracking"

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the solver.

        Args:
            max_attempts: Candidate digits tried before giving up with a
                          timeout error.
            rng: Random source for candidate ordering. Takes precedence
                 over ``seed``.
            seed: Random seed for reproducibility.
        """
        if max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else random.Random(seed)

    def _solve(self, board: SudokuBoard, stats: SolverStats) -> SudokuBoard:
        if find_invalid_cells(board):
            raise SolveError(CONFLICT, "Board already contains conflicting cells")

        budget = AttemptBudget(self.max_attempts)
        try:
            solution = self._backtrack(board, budget, stats)
        finally:
            stats.iterations = budget.used

        if solution is None:
            raise SolveError(UNSOLVABLE, "No legal completion exists")
        return solution

    def _backtrack(
        self,
        board: SudokuBoard,
        budget: AttemptBudget,
        stats: SolverStats,
    ) -> Optional[SudokuBoard]:
        """Return a completed board, or None if this branch is a dead end."""
        stats.nodes_explored += 1

        cell = find_empty_cell(board)
        if cell is None:
            return board

        row, col = cell
        candidates = list(DIGITS)
        self.rng.shuffle(candidates)

        for digit in candidates:
            budget.spend()
            if not is_valid_placement(board, row, col, digit):
                continue

            result = self._backtrack(board.with_value(row, col, digit), budget, stats)
            if result is not None:
                return result
            stats.backtracks += 1

        return None


def solve(
    board: Any,
    *,
    max_attempts: Optional[int] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> SolveResult:
    """
    Complete a legal partial board.

    Args:
        board: Board or nested list of ints. Never modified.
        max_attempts: Attempt bound (default: DEFAULT_MAX_ATTEMPTS).
        seed: Random seed for candidate ordering.
        rng: Random source, overrides ``seed``.

    Returns:
        SolveResult with the completed board, or a SolveError whose reason
        is "conflict", "unsolvable" or "timeout".
    """
    solver = RandomizedBacktrackingSolver(
        max_attempts=DEFAULT_MAX_ATTEMPTS if max_attempts is None else max_attempts,
        rng=rng,
        seed=seed,
    )
    return solver.solve(board, track_memory=False)
