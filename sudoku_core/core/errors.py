"""Error types returned by the solver and the generator."""

from __future__ import annotations


CONFLICT = "conflict"
UNSOLVABLE = "unsolvable"
TIMEOUT = "timeout"


class SudokuError(Exception):
    """
    Base class for recoverable Sudoku failures.

    These are handed back inside result objects rather than raised; callers
    only see them raised when they call ``unwrap()`` on a failed result.
    """

    def __init__(self, reason: str, message: str = ""):
        self.reason = reason
        self.message = message or reason
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(reason={self.reason!r}, message={self.message!r})"


class SolveError(SudokuError):
    """A board has no legal completion, or the attempt bound ran out."""


class GenerationError(SudokuError):
    """The seeded board could not be completed within the attempt bound."""

    @classmethod
    def from_solve_error(cls, error: SolveError) -> GenerationError:
        return cls(error.reason, f"Could not complete seeded board: {error.message}")
