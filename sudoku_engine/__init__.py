"""Generalized Sudoku solving by constraint propagation and branch search."""

from .core import (
    Grid,
    ConstraintError,
    InvalidDimensionError,
    InvalidValueError,
    DuplicateValueError,
    OverConstrainedError,
    UnderConstrainedError,
)
from .solvers import SearchSolver, SolverStats, propagate, solve

__version__ = "1.0.0"

__all__ = [
    "Grid",
    "ConstraintError",
    "InvalidDimensionError",
    "InvalidValueError",
    "DuplicateValueError",
    "OverConstrainedError",
    "UnderConstrainedError",
    "SearchSolver",
    "SolverStats",
    "propagate",
    "solve",
]
