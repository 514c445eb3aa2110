"""Bundled example puzzles."""

from __future__ import annotations
from typing import Dict, List, Optional

from .core.grid import Grid

_ = None

# Unique solution; needs branching after propagation stalls.
CLASSIC_HARD: List[List[Optional[int]]] = [
    [8, _, _, _, _, _, _, _, _],
    [_, _, 3, 6, _, _, _, _, _],
    [_, 7, _, _, 9, _, 2, _, _],
    [_, 5, _, _, _, 7, _, _, _],
    [_, _, _, _, 4, 5, 7, _, _],
    [_, _, _, 1, _, _, _, 3, _],
    [_, _, 1, _, _, _, _, 6, 8],
    [_, _, 8, 5, _, _, _, 1, _],
    [_, 9, _, _, _, _, 4, _, _],
]

EASY = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

EXAMPLES: Dict[str, object] = {
    "classic-hard": CLASSIC_HARD,
    "easy": EASY,
    "empty-4": [[_] * 4 for _i in range(4)],
    "empty-9": [[_] * 9 for _i in range(9)],
}


def load_example(name: str) -> Grid:
    """Build a fresh Grid from a bundled puzzle."""
    try:
        puzzle = EXAMPLES[name]
    except KeyError:
        raise KeyError(f"Unknown example {name!r}, choose from {sorted(EXAMPLES)}") from None
    if isinstance(puzzle, str):
        return Grid.from_string(puzzle)
    return Grid(puzzle)
