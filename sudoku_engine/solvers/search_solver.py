"""Constraint propagation with most-constrained-cell branching."""

from __future__ import annotations
from typing import Optional, Tuple, Union
import logging
import random

from .base_solver import BaseSolver
from .propagation import propagate
from ..core.candidates import CandidateMatrix
from ..core.errors import OverConstrainedError, UnderConstrainedError
from ..core.grid import Grid, PuzzleInput

log = logging.getLogger(__name__)


def select_minimal(candidates: CandidateMatrix) -> Optional[Tuple[int, int]]:
    """
    Find the (first) cell with the fewest candidate values.

    Cells are scanned in row-major order; assigned cells (empty candidate
    sets) are skipped and ties go to the earliest cell.

    Returns:
        (row, col) of the minimal cell, or None if every set is empty.
    """
    best = None
    min_size = 0
    for r, row in enumerate(candidates):
        for c, options in enumerate(row):
            n = len(options)
            if n and (best is None or n < min_size):
                best = (r, c)
                min_size = n
    return best


class SearchSolver(BaseSolver):
    """
    Propagation plus branch search.

    Each call propagates forced cells to a fixed point, then branches on
    the cell with the fewest candidates. Every branch works on its own clone
    of the grid and the first completed branch wins.

    Branch values are tried in random order, so repeated runs on a puzzle
    with several solutions can return different ones. Pass ``seed`` or
    ``rng`` for reproducible runs.
    """

    name = "Propagation+Search"

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the solver.

        Args:
            seed: Seed for a private random.Random instance.
            rng: Random source to use instead. Mutually exclusive with seed.
        """
        super().__init__()
        if rng is not None and seed is not None:
            raise ValueError("Pass either seed or rng, not both")
        self.rng = rng if rng is not None else random.Random(seed)

    def _solve(self, grid: Grid) -> Optional[Grid]:
        return self.search(grid)

    def search(self, grid: Grid, depth: int = 0) -> Optional[Grid]:
        """
        Solve grid in place, branching on clones when propagation stalls.

        Returns:
            A completed grid, or None if no solution is reachable from this
            state. Constraint failures are never raised.
        """
        self.stats.iterations += 1

        try:
            propagate(grid, self.stats)
            candidates = grid.candidates()
        except OverConstrainedError as e:
            log.debug("Depth %d: dead branch, %s", depth, e)
            self.stats.backtracks += 1
            return None
        except UnderConstrainedError as e:
            log.debug("Depth %d: dead branch, %s", depth, e)
            self.stats.under_constrained += 1
            self.stats.backtracks += 1
            return None

        if grid.is_complete():
            return grid

        cell = select_minimal(candidates)
        if cell is None:
            return None
        row, col = cell

        values = sorted(candidates[row][col])
        self.rng.shuffle(values)
        log.debug("Depth %d: branching on (%d, %d) over %s", depth, row, col, values)

        for value in values:
            self.stats.nodes_explored += 1
            variant = grid.copy()
            variant.commit(row, col, value)
            result = self.search(variant, depth + 1)
            if result is not None:
                return result

        return None


def solve(
    puzzle: Union[Grid, PuzzleInput],
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Optional[Grid]:
    """
    Solve a puzzle given as a Grid or a nested sequence of optional ints.

    The input is never modified.

    Returns:
        The solved grid, or None if the puzzle has no solution.

    Raises:
        InvalidDimensionError, InvalidValueError, DuplicateValueError: the
            puzzle itself is malformed.
    """
    grid = puzzle.copy() if isinstance(puzzle, Grid) else Grid(puzzle)
    return SearchSolver(seed=seed, rng=rng).search(grid)
