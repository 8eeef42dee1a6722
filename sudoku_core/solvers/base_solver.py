"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import time
import tracemalloc

from ..core.board import SudokuBoard
from ..core.errors import SolveError


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Algorithm-specific metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a solve call: a board or an error, never both."""
    board: Optional[SudokuBoard]
    error: Optional[SolveError]
    stats: SolverStats

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> SudokuBoard:
        """Return the solved board or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.board


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def solve(self, board: Any, track_memory: bool = True) -> SolveResult:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        Args:
            board: The puzzle to solve. It is never modified.
            track_memory: Record peak allocation with tracemalloc.

        Returns:
            SolveResult holding the solution or a SolveError, plus stats.
        """
        board = SudokuBoard.coerce(board)
        stats = SolverStats(algorithm=self.name)

        # tracemalloc is process-wide; leave it alone if someone else started it
        own_tracing = track_memory and not tracemalloc.is_tracing()
        if own_tracing:
            tracemalloc.start()

        start_time = time.perf_counter()
        try:
            solution = self._solve(board, stats)
            error = None
        except SolveError as e:
            solution = None
            error = e
            stats.extra["error"] = e.reason
        finally:
            stats.time_seconds = time.perf_counter() - start_time
            if own_tracing:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                stats.memory_bytes = peak

        stats.solved = solution is not None and solution.is_solved()
        return SolveResult(board=solution, error=error, stats=stats)

    @abstractmethod
    def _solve(self, board: SudokuBoard, stats: SolverStats) -> SudokuBoard:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: The puzzle to solve.
            stats: Stats for this call, to be filled in by the subclass.

        Returns:
            The solved board.

        Raises:
            SolveError: If no solution was found.
        """
