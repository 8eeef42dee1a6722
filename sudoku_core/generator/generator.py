"""Sudoku puzzle generator with configurable difficulty levels."""

from __future__ import annotations
import os
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Optional, Union

import numpy as np

from ..config import SudokuConfig, DEFAULT_CONFIG
from ..core.board import SudokuBoard
from ..core.errors import GenerationError
from ..core.geometry import BOX_SIZE, DIGITS, SIZE, EMPTY, box_cells
from ..solvers.backtracking_solver import RandomizedBacktrackingSolver
from ..solvers.base_solver import SolverStats


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def removal_range(self) -> Tuple[int, int]:
        """Inclusive range of cells to blank out, from the default table."""
        return DEFAULT_CONFIG.removal_range(self)

    @classmethod
    def parse(cls, value: Union[Difficulty, str]) -> Difficulty:
        """Accept an enum member or its name, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {value!r} (choose from {choices})") from None


@dataclass(frozen=True)
class GenerationResult:
    """A generated puzzle with its solution, or the error that stopped it."""
    difficulty: Difficulty
    puzzle: Optional[SudokuBoard]
    solution: Optional[SudokuBoard]
    error: Optional[GenerationError]
    stats: SolverStats

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> SudokuBoard:
        """Return the puzzle or raise the stored GenerationError."""
        if self.error is not None:
            raise self.error
        return self.puzzle


class SudokuGenerator:
    """
    Generator for Sudoku puzzles with various difficulty levels.

    Algorithm:
    1. Fill the three diagonal boxes with independent shuffles of 1-9
    2. Complete the board with randomized backtracking
    3. Blank a random number of cells drawn from the difficulty's range

    Uniqueness of the puzzle's solution is not checked.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        config: Optional[SudokuConfig] = None,
        track_memory: bool = False,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            rng: Random source, overrides ``seed``.
            config: Difficulty table and attempt bound.
            track_memory: Record peak memory of the completion step.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.config = config or DEFAULT_CONFIG
        self.track_memory = track_memory

    def generate(self, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM) -> GenerationResult:
        """
        Generate a Sudoku puzzle with the specified difficulty.

        Args:
            difficulty: Desired difficulty level.

        Returns:
            GenerationResult with the puzzle and its solution, or a
            GenerationError if the seeded board could not be completed.
        """
        difficulty = Difficulty.parse(difficulty)

        # Step 1: Seed the diagonal boxes
        seeded = self.seed_diagonal_boxes()

        # Step 2: Complete the board
        solver = RandomizedBacktrackingSolver(
            max_attempts=self.config.max_attempts,
            rng=self.rng,
        )
        outcome = solver.solve(seeded, track_memory=self.track_memory)
        if not outcome.ok:
            return GenerationResult(
                difficulty=difficulty,
                puzzle=None,
                solution=None,
                error=GenerationError.from_solve_error(outcome.error),
                stats=outcome.stats,
            )

        # Step 3: Remove cells to create puzzle
        solution = outcome.board
        puzzle = self.remove_cells(solution, self.removal_count(difficulty))

        return GenerationResult(
            difficulty=difficulty,
            puzzle=puzzle,
            solution=solution,
            error=None,
            stats=outcome.stats,
        )

    def generate_batch(
        self,
        count: int,
        difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
    ) -> List[GenerationResult]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.

        Returns:
            List of GenerationResult, one per attempt.
        """
        return [self.generate(difficulty) for _ in range(count)]

    def seed_diagonal_boxes(self) -> SudokuBoard:
        """
        Return an empty board with the top-left, center and bottom-right
        boxes each filled with a random permutation of 1-9.

        These boxes share no row, column or box, so no cross-checking
        is needed.
        """
        grid = np.zeros((SIZE, SIZE), dtype=np.int32)
        for start in range(0, SIZE, BOX_SIZE):
            values = list(DIGITS)
            self.rng.shuffle(values)
            for (row, col), value in zip(box_cells(start, start), values):
                grid[row, col] = value
        return SudokuBoard(grid)

    def removal_count(self, difficulty: Union[Difficulty, str]) -> int:
        """Draw how many cells to blank for a difficulty."""
        low, high = self.config.removal_range(Difficulty.parse(difficulty))
        return self.rng.randint(low, high)

    def remove_cells(self, board: SudokuBoard, count: int) -> SudokuBoard:
        """
        Blank ``count`` distinct filled cells picked uniformly at random.

        A pick that lands on an already empty cell does not count and is
        drawn again. The input board is left as is.
        """
        filled = board.count_filled()
        if count > filled:
            raise ValueError(f"Cannot remove {count} cells from a board with {filled} filled")

        grid = board.grid.copy()
        remaining = count
        while remaining > 0:
            row = self.rng.randint(0, SIZE - 1)
            col = self.rng.randint(0, SIZE - 1)
            if grid[row, col] == EMPTY:
                continue
            grid[row, col] = EMPTY
            remaining -= 1

        return SudokuBoard(grid)

    @staticmethod
    def save_to_folder(
        results: List[GenerationResult],
        folder_path: str,
        prefix: str = "puzzle",
    ) -> List[str]:
        """
        Save generated puzzles to a folder as individual text files.

        Failed results are skipped.

        Args:
            results: Generation results.
            folder_path: Directory to save the puzzles.
            prefix: Prefix for the filename (default: "puzzle").

        Returns:
            Paths of the written files.
        """
        os.makedirs(folder_path, exist_ok=True)

        paths = []
        for i, result in enumerate(results, 1):
            if not result.ok:
                continue
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(result.puzzle.to_string())
                f.write("\n\nPretty format:\n")
                f.write(str(result.puzzle))
                f.write("\n")
            paths.append(file_path)
        return paths


def generate(
    difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
    *,
    seed: Optional[int] = None,
    config: Optional[SudokuConfig] = None,
) -> GenerationResult:
    """Generate one puzzle with a fresh generator."""
    return SudokuGenerator(seed=seed, config=config).generate(difficulty)
