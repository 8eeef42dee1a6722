"""Immutable 9x9 Sudoku board value."""

from __future__ import annotations
import numpy as np
from typing import Any, List, Sequence, Tuple

from . import geometry
from .geometry import SIZE, BOX_SIZE, EMPTY


class SudokuBoard:
    """
    A 9x9 Sudoku grid with 3x3 boxes.

    The board is a value: its grid is a read-only numpy array and every
    change produces a new board, so a caller can keep the original puzzle
    next to any number of edited copies.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Any = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial grid (9x9, values 0-9). If None, creates
                  an empty board.
        """
        if grid is None:
            arr = np.zeros((SIZE, SIZE), dtype=np.int32)
        else:
            arr = np.asarray(grid)
            if arr.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
            if arr.dtype.kind not in "iu":
                raise ValueError(f"Cell values must be integers, got dtype {arr.dtype}")
            if arr.min() < EMPTY or arr.max() > SIZE:
                raise ValueError(f"Cell values must be 0-{SIZE}")
            arr = np.array(arr, dtype=np.int32)
        arr.flags.writeable = False
        self._grid = arr

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cells."""
        return self._grid

    @classmethod
    def coerce(cls, board: Any) -> SudokuBoard:
        """Accept a board, a nested list of ints or an ndarray."""
        if isinstance(board, SudokuBoard):
            return board
        return cls(board)

    def with_value(self, row: int, col: int, value: int) -> SudokuBoard:
        """Return a new board with ``value`` at (row, col). Use 0 to clear."""
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Value must be an integer, got {value!r}")
        if value < EMPTY or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        arr = self._grid.copy()
        arr[row, col] = value
        return SudokuBoard(arr)

    def cleared(self, row: int, col: int) -> SudokuBoard:
        """Return a new board with the cell at (row, col) emptied."""
        return self.with_value(row, col, EMPTY)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self._grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self._grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        return geometry.row(self, row)

    def get_col(self, col: int) -> np.ndarray:
        return geometry.column(self, col)

    def get_box(self, row: int, col: int) -> np.ndarray:
        return geometry.box(self, row, col)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions, row-major."""
        rows, cols = np.nonzero(self._grid == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self._grid == EMPTY))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self._grid != EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [self.get_box(r, c)
                  for r in range(0, SIZE, BOX_SIZE)
                  for c in range(0, SIZE, BOX_SIZE)]

        for unit in units:
            non_zero = unit[unit != EMPTY]
            if len(non_zero) != len(set(non_zero)):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Compact 81-character form, 0 for empty cells."""
        return ''.join(str(v) for v in self._grid.flatten())

    def to_list(self) -> List[List[int]]:
        """Nested list of plain ints."""
        return self._grid.tolist()

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
               Whitespace is ignored.
        """
        s = ''.join(s.split())
        if len(s) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(EMPTY)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid cell character {c!r}")

        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(data)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self._grid[i, j]
                row_str += ' .' if val == EMPTY else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self._grid, other._grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
