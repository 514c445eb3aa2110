"""Grid representation with materialized row, column and block views."""

from __future__ import annotations
from numbers import Integral
from typing import List, Optional, Sequence, Tuple, Union
import math

import numpy as np

from .errors import DuplicateValueError, InvalidDimensionError, InvalidValueError
from .validator import check_consistent, check_dimension
from .candidates import CandidateMatrix, compute_candidates

Cell = Optional[int]
PuzzleInput = Union[Sequence[Sequence[Cell]], np.ndarray]

EMPTY_CHARS = "0._"


def block_index(row: int, col: int, box_size: int) -> int:
    """Index of the block holding (row, col), in row-major block order."""
    return (row // box_size) * box_size + (col // box_size)


def derive_columns(cells: np.ndarray) -> np.ndarray:
    """Return a column-major copy of the cells: columns[c, r] == cells[r, c]."""
    return cells.T.copy()


def derive_blocks(cells: np.ndarray, box_size: int) -> np.ndarray:
    """
    Return the k x k blocks of the cells as an array of shape (N, k, k).

    Block 0 is the top-left block; blocks proceed left-to-right, then
    top-to-bottom.
    """
    size = cells.shape[0]
    blocks = np.zeros((size, box_size, box_size), dtype=cells.dtype)
    for b in range(size):
        r0 = (b // box_size) * box_size
        c0 = (b % box_size) * box_size
        blocks[b] = cells[r0:r0 + box_size, c0:c0 + box_size]
    return blocks


def clone(grid: Grid) -> Grid:
    """Deep copy of a grid; nothing is shared with the original."""
    return grid.copy()


def _to_cells(data: PuzzleInput) -> np.ndarray:
    """Convert caller input to an int32 array, 0 marking unassigned cells."""
    if isinstance(data, np.ndarray):
        if data.ndim != 2 or data.shape[0] == 0 or data.shape[0] != data.shape[1]:
            raise InvalidDimensionError(f"Grid must be a non-empty square, got shape {data.shape}")
        rows = data.tolist()
    else:
        rows = [list(row) for row in data]

    size = len(rows)
    if size == 0:
        raise InvalidDimensionError("Grid must not be empty")
    for i, row in enumerate(rows):
        if len(row) != size:
            raise InvalidDimensionError(
                f"Grid not square: row {i} has {len(row)} cells, expected {size}"
            )
    check_dimension(size)

    cells = np.zeros((size, size), dtype=np.int32)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise InvalidValueError(r, c, value, size)
            if value < 0 or value > size:
                raise InvalidValueError(r, c, value, size)
            cells[r, c] = value
    return cells


class Grid:
    """
    An N x N puzzle grid, N = k * k.

    Values live in three materialized views: ``cells`` (row-major),
    ``columns`` (transposed) and ``blocks`` (shape (N, k, k)). Writes go
    through :meth:`commit`, which updates all three.

    0 marks an unassigned cell internally; :meth:`to_list` reports it as None.
    """

    def __init__(self, data: PuzzleInput):
        """
        Build a grid from a nested sequence of optional ints.

        The input is copied, never aliased.

        Raises:
            InvalidDimensionError: empty, non-square, or side not a perfect square.
            InvalidValueError: a value outside 1..N (None or 0 mean empty).
            DuplicateValueError: givens repeat inside a row, column or sub-grid.
        """
        self.cells = _to_cells(data)
        self.size = self.cells.shape[0]
        self.box_size = math.isqrt(self.size)
        self.refresh_views()
        check_consistent(self)

    @classmethod
    def _from_arrays(cls, cells: np.ndarray, columns: np.ndarray, blocks: np.ndarray) -> Grid:
        grid = cls.__new__(cls)
        grid.cells = cells
        grid.columns = columns
        grid.blocks = blocks
        grid.size = cells.shape[0]
        grid.box_size = math.isqrt(grid.size)
        return grid

    @classmethod
    def empty(cls, size: int = 9) -> Grid:
        """Create a grid with every cell unassigned."""
        check_dimension(size)
        return cls(np.zeros((size, size), dtype=np.int32))

    @classmethod
    def from_string(cls, s: str, size: Optional[int] = None) -> Grid:
        """
        Create a grid from a row-major string.

        Args:
            s: One character per cell. 0, . or _ for empty, 1-9 for values,
               A, B, ... for 10 and up. Whitespace is ignored.
            size: Grid side. Inferred from the string length when omitted.
        """
        s = "".join(s.split())
        if size is None:
            size = math.isqrt(len(s))
        if size < 1 or len(s) != size * size:
            raise InvalidDimensionError(
                f"String length must be a square number of cells, got {len(s)}"
            )

        rows: List[List[Cell]] = []
        for i in range(size):
            row: List[Cell] = []
            for ch in s[i * size:(i + 1) * size]:
                if ch in EMPTY_CHARS:
                    row.append(None)
                elif ch.isdigit():
                    row.append(int(ch))
                elif ch.isalpha():
                    row.append(ord(ch.upper()) - ord("A") + 10)
                else:
                    raise InvalidValueError(i, len(row), ch, size)
            rows.append(row)
        return cls(rows)

    def copy(self) -> Grid:
        """Create a deep copy of the grid and its views."""
        return self._from_arrays(self.cells.copy(), self.columns.copy(), self.blocks.copy())

    def refresh_views(self) -> None:
        """Recompute the column and block views from the cells."""
        self.columns = derive_columns(self.cells)
        self.blocks = derive_blocks(self.cells, self.box_size)

    def commit(self, row: int, col: int, value: int) -> None:
        """Write value to (row, col) in the cells, column view and block view."""
        if value < 1 or value > self.size:
            raise ValueError(f"Value must be 1-{self.size}, got {value}")
        k = self.box_size
        self.cells[row, col] = value
        self.columns[col, row] = value
        self.blocks[block_index(row, col, k)][row % k, col % k] = value

    def block_index(self, row: int, col: int) -> int:
        return block_index(row, col, self.box_size)

    def get(self, row: int, col: int) -> int:
        """Get value at (row, col). 0 means unassigned."""
        return int(self.cells[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        return self.cells[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.columns[col, :]

    def get_block(self, row: int, col: int) -> np.ndarray:
        """Get the flattened values of the block containing (row, col)."""
        return self.blocks[self.block_index(row, col)].flatten()

    def candidates(self) -> CandidateMatrix:
        """Candidate sets for every cell, from the current views."""
        return compute_candidates(self.cells, self.columns, self.blocks)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Unassigned cell positions in row-major order."""
        rows, cols = np.nonzero(self.cells == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.sum(self.cells == 0))

    def count_filled(self) -> int:
        return int(np.sum(self.cells != 0))

    def is_complete(self) -> bool:
        """True when no cell is unassigned."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """True when no row, column or block repeats an assigned value."""
        try:
            check_consistent(self)
        except DuplicateValueError:
            return False
        return True

    def is_solved(self) -> bool:
        """Check if the grid is completely and correctly filled."""
        return self.is_complete() and self.is_valid()

    def to_list(self) -> List[List[Cell]]:
        """Row-major nested lists, None for unassigned cells."""
        return [[int(v) if v else None for v in row] for row in self.cells]

    def to_string(self) -> str:
        """
        Compact row-major string: 0 for empty, 1-9, then A, B, ... for 10 and up.
        """
        chars = []
        for val in self.cells.flat:
            if val == 0:
                chars.append("0")
            elif val <= 9:
                chars.append(str(val))
            else:
                chars.append(chr(ord("A") + val - 10))
        return "".join(chars)

    def __str__(self) -> str:
        """Bordered text table with sub-grid separators."""
        lines = []
        horizontal_sep = "+" + (("-" * (self.box_size * 2 + 1)) + "+") * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = "|"
            for j in range(self.size):
                val = self.cells[i, j]
                if val == 0:
                    row_str += " ."
                elif val <= 9:
                    row_str += f" {val}"
                else:
                    row_str += f' {chr(ord("A") + val - 10)}'

                if (j + 1) % self.box_size == 0:
                    row_str += " |"

            lines.append(row_str)

        lines.append(horizontal_sep)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.cells, other.cells)

    __hash__ = None
