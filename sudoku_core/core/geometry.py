"""Row, column and box accessors for the 9x9 grid."""

from __future__ import annotations
from typing import List, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .board import SudokuBoard

SIZE = 9
BOX_SIZE = 3
EMPTY = 0
DIGITS = tuple(range(1, SIZE + 1))


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left coordinate of the box containing (row, col)."""
    return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE


def _grid(board) -> np.ndarray:
    return np.asarray(getattr(board, "grid", board))


def row(board: SudokuBoard, r: int) -> np.ndarray:
    """The 9 cells of row r."""
    return _grid(board)[r, :]


def column(board: SudokuBoard, c: int) -> np.ndarray:
    """The 9 cells of column c, in row order."""
    return _grid(board)[:, c]


def box(board: SudokuBoard, r: int, c: int) -> np.ndarray:
    """
    The 9 cells of the box containing (r, c).

    Cells come back in row-major order within the box: box-local row
    outer, box-local column inner.
    """
    box_row, box_col = box_origin(r, c)
    return _grid(board)[box_row:box_row + BOX_SIZE,
                          box_col:box_col + BOX_SIZE].flatten()


def box_cells(r: int, c: int) -> List[Tuple[int, int]]:
    """Coordinates of the box containing (r, c), row-major."""
    box_row, box_col = box_origin(r, c)
    return [(box_row + i, box_col + j)
            for i in range(BOX_SIZE)
            for j in range(BOX_SIZE)]
