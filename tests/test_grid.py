# tests/test_grid.py
import pytest

from conftest import CLASSIC, HIDDEN_SINGLES, SOLVED_4X4
from sudoku_solver.candidates import CandidateSet
from sudoku_solver.coords import House, HouseLayout, SudokuSize, rotate_clockwise
from sudoku_solver.errors import (
    ConflictingInputError,
    InputLengthError,
    InputParseError,
    InvalidLocationError,
    ValueNotPossibleError,
)
from sudoku_solver.grid import PuzzleGrid
from sudoku_solver.moves import CellCandidates
from sudoku_solver.parsing import parse_digits


def cs(*digits):
    return CandidateSet.from_digits(digits)


def grid_of(text):
    return PuzzleGrid(parse_digits(text))


def assert_aggregates_consistent(grid):
    """Every house aggregate is the union of its fixed values."""
    layout = grid.layout
    for agg, houses in ((grid.rows, layout.rows), (grid.cols, layout.cols), (grid.boxes, layout.boxes)):
        for number, cells in enumerate(houses):
            expected = CandidateSet.from_digits((grid.cells[i].value for i in cells), grid.width)
            assert agg[number] == expected


def test_layout_tables():
    layout = HouseLayout.for_dim(3)
    assert layout.houses_of[40] == (4, 4, 4)
    assert layout.boxes[4] == (30, 31, 32, 39, 40, 41, 48, 49, 50)
    assert len(layout.peers[0]) == 20
    assert 0 not in layout.peers[0]
    assert layout.line_index(House.COL, 2, 5) == 47
    assert layout.band(7) == 2
    assert HouseLayout.for_dim(3) is layout


def test_size_from_length():
    assert SudokuSize.from_length(81).dim == 3
    assert SudokuSize.from_length(16).house_size == 4
    assert SudokuSize.from_length(256).house_size == 16
    with pytest.raises(InputLengthError):
        SudokuSize.from_length(80)


def test_rotate_clockwise():
    values = list(range(16))
    once = rotate_clockwise(values, 4)
    # the left column, read bottom up, becomes the top row
    assert once[:4] == [12, 8, 4, 0]
    assert rotate_clockwise(values, 4, 4) == values


def test_initial_candidates(classic):
    grid = grid_of(classic)
    assert grid.candidates(2) == cs(1, 2, 4)
    assert grid.remaining == CLASSIC.count("0")
    assert grid.cells[0].given and grid.cells[0].is_fixed
    assert not grid.cells[0].candidates
    assert_aggregates_consistent(grid)


def test_wrong_length_raises():
    with pytest.raises(InputLengthError) as e:
        grid_of(CLASSIC[:80])
    assert e.value.length == 80
    with pytest.raises(InputLengthError):
        PuzzleGrid([0] * 16, SudokuSize(3))


def test_conflicting_givens_raise():
    with pytest.raises(ConflictingInputError):
        grid_of(".78..7...." + HIDDEN_SINGLES[10:])


def test_digit_above_house_size_raises():
    with pytest.raises(InputParseError):
        PuzzleGrid([5] + [0] * 15)


def test_negative_digit_raises():
    with pytest.raises(InputParseError):
        PuzzleGrid([-1] + [0] * 15)


def test_blank_grids_build():
    grid = PuzzleGrid([0] * 81)
    assert grid.remaining == 81
    assert all(c.candidates == grid.full for c in grid.cells)
    small = PuzzleGrid([0] * 16)
    assert small.width == 8
    assert small.candidates(5) == CandidateSet.full(4)


def test_solved_4x4():
    grid = grid_of(SOLVED_4X4)
    assert grid.is_complete()
    assert grid.conflicts() == []


def test_assign_records_own_and_peer_removals(hidden_singles):
    grid = grid_of(hidden_singles)
    assert grid.candidates(37) == cs(4, 5, 6, 8)
    move = grid.assign(37, 5)
    assert move.value_set == (37, 5)
    assert move.removed[0] == CellCandidates(37, cs(4, 5, 6, 8))
    assert {36, 41, 45, 64} <= move.removed_indices()
    assert all(pair.candidates == cs(5) for pair in move.removed[1:])
    assert grid.value(37) == 5
    assert not grid.candidates(37)
    for i in grid.layout.peers[37]:
        assert 5 not in grid.candidates(i)
    assert_aggregates_consistent(grid)


def test_undo_restores_snapshot(hidden_singles):
    grid = grid_of(hidden_singles)
    before = grid.snapshot()
    move = grid.assign(37, 5)
    grid.undo(move)
    assert grid.snapshot() == before

    move = grid.remove_candidates([CellCandidates(37, cs(4, 8)), CellCandidates(36, cs(4))])
    assert grid.candidates(37) == cs(5, 6)
    grid.undo(move)
    assert grid.snapshot() == before


def test_assign_not_a_candidate_leaves_grid_untouched(hidden_singles):
    grid = grid_of(hidden_singles)
    before = grid.snapshot()
    with pytest.raises(ValueNotPossibleError):
        grid.assign(37, 1)
    with pytest.raises(ValueNotPossibleError):
        grid.assign(1, 2)  # given cell
    with pytest.raises(InvalidLocationError):
        grid.assign(81, 1)
    assert grid.snapshot() == before


def test_remove_candidate_twice_fails(hidden_singles):
    grid = grid_of(hidden_singles)
    grid.remove_candidate(37, 4)
    with pytest.raises(ValueNotPossibleError):
        grid.remove_candidate(37, 4)


def test_remove_candidates_is_all_or_nothing(hidden_singles):
    grid = grid_of(hidden_singles)
    before = grid.snapshot()
    with pytest.raises(ValueNotPossibleError):
        grid.remove_candidates([CellCandidates(37, cs(4)), CellCandidates(1, cs(9))])
    assert grid.snapshot() == before


def test_copy_is_independent(classic):
    grid = grid_of(classic)
    dup = grid.copy()
    dup.assign(2, 4)
    assert grid.value(2) == 0
    assert grid.candidates(2) == cs(1, 2, 4)
    assert 4 not in grid.rows[0]
