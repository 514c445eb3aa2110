"""Solvers module for grid puzzles."""

from .base_solver import BaseSolver, SolverStats
from .propagation import propagate, apply_unique
from .search_solver import SearchSolver, select_minimal, solve

__all__ = [
    "BaseSolver",
    "SolverStats",
    "propagate",
    "apply_unique",
    "SearchSolver",
    "select_minimal",
    "solve",
]
