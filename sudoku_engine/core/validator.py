"""Consistency checks for puzzle grids."""

from __future__ import annotations
from collections import Counter
from typing import TYPE_CHECKING, Iterable
import math

import numpy as np

from .errors import DuplicateValueError, InvalidDimensionError

if TYPE_CHECKING:
    from .grid import Grid


def check_dimension(size: int) -> int:
    """
    Validate a grid side length.

    Returns:
        The sub-grid size k, with size == k * k.

    Raises:
        InvalidDimensionError: size is not a positive perfect square.
    """
    if size < 1:
        raise InvalidDimensionError(f"Grid size must be positive, got {size}")
    box_size = math.isqrt(size)
    if box_size * box_size != size:
        raise InvalidDimensionError(f"Invalid grid size: {size} is not a perfect square")
    return box_size


def _first_duplicate(values: Iterable[int]) -> int:
    """Return the first assigned value seen more than once, or 0."""
    counts = Counter(int(v) for v in values if v != 0)
    for value, count in counts.items():
        if count > 1:
            return value
    return 0


def check_consistent(grid: Grid) -> None:
    """
    Ensure no assigned value repeats within a row, column or sub-grid.

    Only assigned cells are examined; empty cells never conflict.

    Raises:
        DuplicateValueError: naming the offending unit and its index.
    """
    for i, row in enumerate(grid.cells):
        dup = _first_duplicate(row)
        if dup:
            raise DuplicateValueError("row", i, dup)

    for i, col in enumerate(grid.columns):
        dup = _first_duplicate(col)
        if dup:
            raise DuplicateValueError("column", i, dup)

    for i, block in enumerate(grid.blocks):
        dup = _first_duplicate(block.flatten())
        if dup:
            raise DuplicateValueError("sub-grid", i, dup)


def is_valid_placement(grid: Grid, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) keeps the grid consistent.

    The cell itself is expected to be empty.
    """
    if value < 1 or value > grid.size:
        return False
    if value in grid.get_row(row):
        return False
    if value in grid.get_col(col):
        return False
    if value in grid.get_block(row, col):
        return False
    return True


def validate_solution(puzzle: Grid, solution: Grid) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Returns:
        True if the solution is complete, consistent and keeps every given.
    """
    if puzzle.size != solution.size:
        return False

    givens = puzzle.cells != 0
    if not np.array_equal(puzzle.cells[givens], solution.cells[givens]):
        return False

    return solution.is_solved()
