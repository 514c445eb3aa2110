"""Shared puzzles for the test suite."""

import pytest

_ = None

CLASSIC_HARD_SOLUTION = (
    "812753649"
    "943682175"
    "675491283"
    "154237896"
    "369845721"
    "287169534"
    "521974368"
    "438526917"
    "796318452"
)

EASY_PUZZLE = (
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

EASY_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def solved_rows():
    """The classic hard solution as nested lists."""
    return [[int(ch) for ch in CLASSIC_HARD_SOLUTION[i * 9:(i + 1) * 9]] for i in range(9)]


@pytest.fixture
def dead_end_4x4():
    """Consistent 4x4 givens where (0, 0) has no candidates."""
    return [
        [_, 1, 2, _],
        [_, 4, _, _],
        [3, _, _, _],
        [_, _, _, _],
    ]


@pytest.fixture
def clashing_singles_4x4():
    """Consistent 4x4 givens where (0, 0) and (0, 1) are both forced to 3."""
    return [
        [_, _, 1, 2],
        [4, _, _, _],
        [_, _, _, _],
        [_, _, _, _],
    ]
