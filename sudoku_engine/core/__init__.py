"""Core module for grid representation, candidates and validation."""

from .errors import (
    ConstraintError,
    InvalidDimensionError,
    InvalidValueError,
    DuplicateValueError,
    OverConstrainedError,
    UnderConstrainedError,
)
from .grid import Grid, clone, derive_columns, derive_blocks, block_index
from .candidates import CandidateMatrix, compute_candidates
from .validator import check_consistent, check_dimension, is_valid_placement, validate_solution

__all__ = [
    "ConstraintError",
    "InvalidDimensionError",
    "InvalidValueError",
    "DuplicateValueError",
    "OverConstrainedError",
    "UnderConstrainedError",
    "Grid",
    "clone",
    "derive_columns",
    "derive_blocks",
    "block_index",
    "CandidateMatrix",
    "compute_candidates",
    "check_consistent",
    "check_dimension",
    "is_valid_placement",
    "validate_solution",
]
