"""Fixed-point propagation of forced (single-candidate) cells."""

from __future__ import annotations
from typing import Optional
import logging

import numpy as np

from ..core.errors import UnderConstrainedError
from ..core.grid import Grid
from .base_solver import SolverStats

log = logging.getLogger(__name__)


def _conflicting_unit(grid: Grid, row: int, col: int, value: int) -> Optional[str]:
    """Name the unit already holding value, checked through the views."""
    if value in grid.cells[row]:
        return "row"
    if value in grid.columns[col]:
        return "column"
    if value in grid.blocks[grid.block_index(row, col)].flatten():
        return "sub-grid"
    return None


def apply_unique(grid: Grid, stats: Optional[SolverStats] = None) -> int:
    """
    Commit every cell whose candidate set has exactly one member.

    Candidates are computed once, before any commit in the pass. Each forced
    value is checked again against the live views before it is written.

    Returns:
        Number of cells committed.

    Raises:
        OverConstrainedError: an unassigned cell has no candidates.
        UnderConstrainedError: a forced value is already present in the
            cell's row, column or sub-grid.
    """
    candidates = grid.candidates()
    committed = 0
    for r in range(grid.size):
        for c in range(grid.size):
            if len(candidates[r][c]) != 1:
                continue
            value = next(iter(candidates[r][c]))
            unit = _conflicting_unit(grid, r, c, value)
            if unit is not None:
                raise UnderConstrainedError(r, c, value, unit)
            grid.commit(r, c, value)
            committed += 1
            if stats is not None:
                stats.forced_cells += 1
    return committed


def propagate(grid: Grid, stats: Optional[SolverStats] = None) -> Grid:
    """
    Repeatedly assign forced cells until a full pass changes nothing.

    The grid is modified in place. Views are re-derived first so that any
    direct writes to ``grid.cells`` are picked up. Unassigned cells may
    remain when no further cell is forced.

    Returns:
        The same grid, at its fixed point.

    Raises:
        OverConstrainedError, UnderConstrainedError: the current assignment
            has no legal continuation.
    """
    grid.refresh_views()
    while True:
        previous = grid.cells.copy()
        if stats is not None:
            stats.propagation_passes += 1
        apply_unique(grid, stats)
        if np.array_equal(grid.cells, previous):
            break
        log.debug("Propagation pass filled cells, %d left", grid.count_empty())
    return grid
