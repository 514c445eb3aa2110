"""Tests for the candidate engine and consistency checks."""

import pytest

from sudoku_engine.core.candidates import compute_candidates
from sudoku_engine.core.errors import InvalidDimensionError, OverConstrainedError
from sudoku_engine.core.grid import Grid
from sudoku_engine.core.validator import (
    check_consistent,
    check_dimension,
    is_valid_placement,
    validate_solution,
)
from sudoku_engine.puzzles import load_example

from conftest import CLASSIC_HARD_SOLUTION

_ = None


class TestCandidates:
    """Tests for compute_candidates."""

    def test_intersection_of_row_column_block(self):
        grid = Grid([
            [1, _, _, _],
            [_, _, 2, _],
            [_, 3, _, _],
            [_, _, _, _],
        ])
        candidates = compute_candidates(grid.cells, grid.columns, grid.blocks)
        # Row 0 misses {2,3,4}, column 1 misses {1,2,4}, block 0 misses {2,3,4}.
        assert candidates[0][1] == {2, 4}
        assert candidates[3][3] == {1, 2, 3, 4}
        assert candidates[1][3] == {1, 3, 4}

    def test_assigned_cells_are_empty(self):
        grid = load_example("classic-hard")
        candidates = grid.candidates()
        assert candidates[0][0] == set()
        assert all(candidates[r][c] for r, c in grid.get_empty_cells())

    def test_known_values(self):
        grid = load_example("classic-hard")
        candidates = grid.candidates()
        assert candidates[0][1] == {1, 2, 4, 6}
        assert candidates[4][0] == {1, 2, 3, 6, 9}
        assert candidates[8][8] == {2, 3, 5, 7}

    def test_over_constrained(self, dead_end_4x4):
        grid = Grid(dead_end_4x4)
        with pytest.raises(OverConstrainedError) as excinfo:
            grid.candidates()
        assert excinfo.value.kind == "OverConstrained"
        assert (excinfo.value.row, excinfo.value.col) == (0, 0)

    def test_solved_grid_has_no_candidates(self, solved_rows):
        candidates = Grid(solved_rows).candidates()
        assert all(not cell for row in candidates for cell in row)


class TestValidator:
    """Tests for validation utilities."""

    @pytest.mark.parametrize("size,box_size", [(1, 1), (4, 2), (9, 3), (16, 4), (25, 5)])
    def test_check_dimension(self, size, box_size):
        assert check_dimension(size) == box_size

    @pytest.mark.parametrize("size", [0, 2, 8, 10, -4])
    def test_check_dimension_rejects(self, size):
        with pytest.raises(InvalidDimensionError):
            check_dimension(size)

    def test_consistent_is_idempotent_on_solution(self, solved_rows):
        grid = Grid(solved_rows)
        check_consistent(grid)
        check_consistent(grid)

    def test_is_valid_placement(self):
        grid = Grid.empty()
        grid.commit(0, 0, 5)

        assert not is_valid_placement(grid, 0, 5, 5)
        assert not is_valid_placement(grid, 5, 0, 5)
        assert not is_valid_placement(grid, 1, 1, 5)
        assert is_valid_placement(grid, 0, 5, 7)
        assert not is_valid_placement(grid, 0, 5, 10)

    def test_validate_solution(self):
        puzzle = load_example("classic-hard")
        solution = Grid.from_string(CLASSIC_HARD_SOLUTION)
        assert validate_solution(puzzle, solution)

    def test_validate_solution_rejects_changed_given(self, solved_rows):
        puzzle = Grid.from_string("9" + "0" * 80)
        assert not validate_solution(puzzle, Grid(solved_rows))

    def test_validate_solution_rejects_incomplete(self):
        puzzle = load_example("classic-hard")
        assert not validate_solution(puzzle, puzzle.copy())
