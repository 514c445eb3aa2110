"""Candidate sets derived from row, column and block constraints."""

from __future__ import annotations
from typing import List, Set

import numpy as np

from .errors import OverConstrainedError

CandidateMatrix = List[List[Set[int]]]


def _missing(unit: np.ndarray, all_values: Set[int]) -> Set[int]:
    """Values in 1..N not yet assigned within a unit."""
    return all_values - {int(v) for v in unit.flat if v != 0}


def compute_candidates(
    cells: np.ndarray,
    columns: np.ndarray,
    blocks: np.ndarray,
) -> CandidateMatrix:
    """
    For each cell, collect the values that satisfy the current row, column
    and sub-grid constraints.

    The candidates of an unassigned cell are the intersection of the values
    missing from its row, its column and its block. Assigned cells get an
    empty set.

    Args:
        cells: Row-major grid values, 0 for unassigned.
        columns: Column view, columns[c, r] == cells[r, c].
        blocks: Block view of shape (N, k, k).

    Returns:
        N x N nested lists of candidate sets.

    Raises:
        OverConstrainedError: an unassigned cell has no candidates left.
    """
    size = cells.shape[0]
    box_size = blocks.shape[1]
    all_values = set(range(1, size + 1))

    missing_in_row = [_missing(cells[i], all_values) for i in range(size)]
    missing_in_col = [_missing(columns[j], all_values) for j in range(size)]
    missing_in_block = [_missing(blocks[b], all_values) for b in range(size)]

    candidates: CandidateMatrix = [[set() for _ in range(size)] for _ in range(size)]
    for r in range(size):
        for c in range(size):
            if cells[r, c] != 0:
                continue
            b = (r // box_size) * box_size + (c // box_size)
            options = missing_in_row[r] & missing_in_col[c] & missing_in_block[b]
            if not options:
                raise OverConstrainedError(r, c)
            candidates[r][c] = options
    return candidates
