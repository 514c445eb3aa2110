"""Unit tests for the grid and its views."""

import numpy as np
import pytest

from sudoku_engine.core.errors import (
    ConstraintError,
    DuplicateValueError,
    InvalidDimensionError,
    InvalidValueError,
)
from sudoku_engine.core.grid import Grid, block_index, clone, derive_blocks, derive_columns

_ = None


class TestGridConstruction:
    """Tests for building grids from caller input."""

    def test_create_empty_grid(self):
        """Test creating an empty 9x9 grid."""
        grid = Grid.empty()
        assert grid.size == 9
        assert grid.box_size == 3
        assert grid.count_empty() == 81
        assert grid.count_filled() == 0

    def test_create_16x16_grid(self):
        grid = Grid.empty(16)
        assert grid.size == 16
        assert grid.box_size == 4

    def test_none_and_zero_are_empty(self):
        grid = Grid([[1, None, 0, _], [_, _, _, _], [_, _, _, _], [_, _, _, _]])
        assert grid.get(0, 0) == 1
        assert grid.is_empty(0, 1)
        assert grid.is_empty(0, 2)
        assert grid.to_list()[0] == [1, None, None, None]

    def test_input_not_aliased(self, solved_rows):
        """Test that the caller's rows are copied, never mutated."""
        solved_rows[0][0] = None
        grid = Grid(solved_rows)
        grid.commit(0, 0, 8)
        assert solved_rows[0][0] is None

    @pytest.mark.parametrize("data", [
        [],
        [[1, 2], [3]],
        [[_] * 3 for _i in range(3)],
        [[_] * 8 for _i in range(8)],
        [[_] * 4 for _i in range(3)],
    ])
    def test_invalid_dimension(self, data):
        with pytest.raises(InvalidDimensionError) as excinfo:
            Grid(data)
        assert excinfo.value.kind == "InvalidDimension"

    def test_empty_size_must_be_square(self):
        with pytest.raises(InvalidDimensionError):
            Grid.empty(8)

    @pytest.mark.parametrize("value", [5, -1, 2.0, "1", True])
    def test_invalid_value(self, value):
        data = [[_] * 4 for _i in range(4)]
        data[1][2] = value
        with pytest.raises(InvalidValueError) as excinfo:
            Grid(data)
        assert (excinfo.value.row, excinfo.value.col) == (1, 2)

    def test_duplicate_in_row(self):
        """Two 5s in row 0 fail before any solving."""
        data = [[_] * 9 for _i in range(9)]
        data[0][0] = 5
        data[0][7] = 5
        with pytest.raises(DuplicateValueError) as excinfo:
            Grid(data)
        assert excinfo.value.kind == "DuplicateValue"
        assert excinfo.value.unit == "row"
        assert excinfo.value.index == 0
        assert excinfo.value.value == 5

    def test_duplicate_in_column(self):
        data = [[_] * 9 for _i in range(9)]
        data[0][4] = 2
        data[8][4] = 2
        with pytest.raises(DuplicateValueError) as excinfo:
            Grid(data)
        assert excinfo.value.unit == "column"
        assert excinfo.value.index == 4

    def test_duplicate_in_sub_grid(self):
        data = [[_] * 9 for _i in range(9)]
        data[3][6] = 9
        data[5][8] = 9
        with pytest.raises(DuplicateValueError) as excinfo:
            Grid(data)
        assert excinfo.value.unit == "sub-grid"
        assert excinfo.value.index == 5

    def test_errors_are_value_errors(self):
        assert issubclass(DuplicateValueError, ConstraintError)
        assert issubclass(ConstraintError, ValueError)

    def test_from_string(self):
        grid = Grid.from_string("0" * 80 + "9")
        assert grid.get(8, 8) == 9

    def test_from_string_empty_markers(self):
        grid = Grid.from_string("1._0 ____ ____ ____")
        assert grid.size == 4
        assert grid.get(0, 0) == 1
        assert grid.count_filled() == 1

    def test_from_string_letters(self):
        s = "G" + "0" * 255
        grid = Grid.from_string(s)
        assert grid.size == 16
        assert grid.get(0, 0) == 16
        assert grid.to_string() == s

    def test_from_string_bad_length(self):
        with pytest.raises(InvalidDimensionError):
            Grid.from_string("0" * 80)


class TestViews:
    """Tests for the column and block views."""

    def test_block_index(self):
        assert block_index(0, 0, 3) == 0
        assert block_index(0, 8, 3) == 2
        assert block_index(4, 4, 3) == 4
        assert block_index(8, 0, 3) == 6
        assert block_index(3, 1, 2) == 2
        assert block_index(2, 3, 2) == 3

    def test_derive_columns(self, solved_rows):
        cells = np.array(solved_rows, dtype=np.int32)
        columns = derive_columns(cells)
        assert columns[2, 7] == cells[7, 2]
        columns[0, 0] = 0
        assert cells[0, 0] == 8

    def test_derive_blocks_order(self, solved_rows):
        cells = np.array(solved_rows, dtype=np.int32)
        blocks = derive_blocks(cells, 3)
        assert blocks.shape == (9, 3, 3)
        assert blocks[0].tolist() == [[8, 1, 2], [9, 4, 3], [6, 7, 5]]
        assert blocks[1].tolist() == [[7, 5, 3], [6, 8, 2], [4, 9, 1]]
        assert blocks[8].tolist() == [[3, 6, 8], [9, 1, 7], [4, 5, 2]]

    def test_commit_updates_all_views(self):
        grid = Grid.empty(9)
        grid.commit(4, 7, 6)
        assert grid.get(4, 7) == 6
        assert grid.columns[7, 4] == 6
        assert grid.blocks[5][1, 1] == 6
        assert np.array_equal(grid.columns, derive_columns(grid.cells))
        assert np.array_equal(grid.blocks, derive_blocks(grid.cells, 3))

    def test_commit_rejects_out_of_range(self):
        grid = Grid.empty(4)
        with pytest.raises(ValueError):
            grid.commit(0, 0, 5)

    def test_get_block(self, solved_rows):
        grid = Grid(solved_rows)
        assert sorted(grid.get_block(7, 7).tolist()) == list(range(1, 10))
        assert grid.get_block(0, 0).tolist() == [8, 1, 2, 9, 4, 3, 6, 7, 5]

    def test_clone_is_independent(self):
        grid = Grid.empty(4)
        grid.commit(0, 0, 1)
        copy = clone(grid)
        copy.commit(3, 3, 2)

        assert copy.get(0, 0) == 1
        assert grid.is_empty(3, 3)
        assert grid.columns[3, 3] == 0
        assert grid.blocks[3][1, 1] == 0
        assert copy == clone(copy)
        assert copy != grid


class TestGridState:
    """Tests for completion and validity queries."""

    def test_is_solved(self, solved_rows):
        grid = Grid(solved_rows)
        assert grid.is_complete()
        assert grid.is_valid()
        assert grid.is_solved()

    def test_incomplete_is_not_solved(self, solved_rows):
        solved_rows[2][2] = None
        grid = Grid(solved_rows)
        assert not grid.is_complete()
        assert grid.is_valid()
        assert not grid.is_solved()
        assert grid.get_empty_cells() == [(2, 2)]

    def test_candidates_after_commits(self):
        grid = Grid.empty(9)
        grid.commit(0, 0, 5)
        grid.commit(0, 1, 3)
        candidates = grid.candidates()
        assert candidates[0][2] == {1, 2, 4, 6, 7, 8, 9}
        assert candidates[0][0] == set()

    def test_is_valid_detects_duplicates(self):
        """Test that a duplicate written past the constructor is reported."""
        grid = Grid.empty(9)
        assert grid.is_valid()

        grid.commit(0, 0, 5)
        grid.commit(0, 1, 5)
        assert not grid.is_valid()
        assert not grid.is_solved()

    def test_str_has_separators(self):
        grid = Grid.from_string("1234341221434321")
        lines = str(grid).splitlines()
        assert lines[0] == "+-----+-----+"
        assert lines[1] == "| 1 2 | 3 4 |"
        assert len(lines) == 7

    def test_str_marks_empty(self):
        grid = Grid.empty(4)
        assert "| . . | . . |" in str(grid)
