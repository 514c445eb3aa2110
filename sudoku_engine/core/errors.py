"""Error types raised while building and solving grids."""

from __future__ import annotations
from typing import Optional


class ConstraintError(ValueError):
    """Base class for grid constraint failures."""

    kind: str = "Constraint"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class InvalidDimensionError(ConstraintError):
    """Grid is empty, not square, or its side has no integer square root."""

    kind = "InvalidDimension"


class InvalidValueError(ConstraintError):
    """A given cell value is not an integer in 0..N."""

    kind = "InvalidValue"

    def __init__(self, row: int, col: int, value: object, size: int):
        self.row = row
        self.col = col
        self.value = value
        super().__init__(
            f"Value at ({row}, {col}) must be empty or 1-{size}, got {value!r}"
        )


class DuplicateValueError(ConstraintError):
    """The givens already repeat a value inside a row, column or sub-grid."""

    kind = "DuplicateValue"

    def __init__(self, unit: str, index: int, value: int):
        self.unit = unit
        self.index = index
        self.value = value
        super().__init__(f"duplicate {unit} values: {value} repeated in {unit} {index}")


class OverConstrainedError(ConstraintError):
    """An unassigned cell has no legal candidate left."""

    kind = "OverConstrained"

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Over-constrained: no candidates for cell ({row}, {col})")


class UnderConstrainedError(ConstraintError):
    """A forced value is already present in the cell's row, column or sub-grid."""

    kind = "UnderConstrained"

    def __init__(self, row: int, col: int, value: int, unit: Optional[str] = None):
        self.row = row
        self.col = col
        self.value = value
        self.unit = unit
        where = f" (already in {unit})" if unit else ""
        super().__init__(
            f"Under-constrained: {value} => ({row}, {col}) not allowed{where}"
        )
