# tests/test_brute.py
import pytest

from conftest import CLASSIC_SOLUTION, SOLVED_4X4
from sudoku_solver.brute import BruteForce
from sudoku_solver.errors import (
    ExcessiveSolutionsError,
    HasNotBeenSolvedError,
    MultipleSolutionError,
    NoSolutionError,
)
from sudoku_solver.grid import PuzzleGrid
from sudoku_solver.parsing import parse_digits
from sudoku_solver.solution import ExactlyOne, Many, NoSolution, NotYetComputed
from sudoku_solver.sudoku import Sudoku


def grid_of(text):
    return PuzzleGrid(parse_digits(text))


def is_valid_solution(values, n=9):
    grid = PuzzleGrid(list(values))
    return grid.is_complete() and not grid.conflicts() and len(values) == n * n


def test_unique_solution(classic, classic_solution):
    result = BruteForce().solve(grid_of(classic))
    assert isinstance(result, ExactlyOne)
    assert result.get() == classic_solution
    assert result.num_solutions() == 1
    assert result.is_unique()


def test_brute_force_leaves_grid_untouched(classic):
    grid = grid_of(classic)
    before = grid.snapshot()
    BruteForce().solve(grid)
    assert grid.snapshot() == before


def test_two_solutions(two_solutions):
    result = BruteForce().solve(grid_of(two_solutions))
    assert isinstance(result, Many)
    assert result.num_solutions() == 2
    first, second = result.solutions
    assert first != second
    assert is_valid_solution(first) and is_valid_solution(second)
    with pytest.raises(MultipleSolutionError) as e:
        result.get()
    assert e.value.count == 2


def test_cap_exceeded(two_solutions):
    with pytest.raises(ExcessiveSolutionsError) as e:
        BruteForce(max_solutions=1).solve(grid_of(two_solutions))
    assert e.value.cap == 1


def test_cap_reached_exactly_is_still_many(two_solutions):
    result = BruteForce(max_solutions=2).solve(grid_of(two_solutions))
    assert isinstance(result, Many)
    assert result.num_solutions() == 2


MIDDLE_ROWS = "198342567" "859761423" "426853791" "713924856" "961537284"


@pytest.mark.parametrize(
    "text",
    [
        "200000000" + "0" * 9 + MIDDLE_ROWS + "0" * 18,
        "0" * 18 + "0" + MIDDLE_ROWS[1:] + "0" * 18,
    ],
)
def test_two_empty_rows_have_too_many_solutions(text):
    # counts checked with thonky.com/sudoku/solution-count
    with pytest.raises(ExcessiveSolutionsError) as e:
        BruteForce().solve(grid_of(text))
    assert e.value.cap == 5
    with pytest.raises(ExcessiveSolutionsError):
        Sudoku(text)


def test_cap_must_be_positive():
    with pytest.raises(ValueError):
        BruteForce(0)


def test_no_solution():
    # cell r0c3 must hold 4 but column 3 already has one
    result = BruteForce().solve(grid_of("1230000000040000"))
    assert isinstance(result, NoSolution)
    assert result.num_solutions() == 0
    with pytest.raises(NoSolutionError):
        result.get()


def test_small_grid():
    result = BruteForce().solve(grid_of("0234301221034320"))
    assert isinstance(result, ExactlyOne)
    assert result.get() == tuple(int(ch) for ch in SOLVED_4X4)


def test_complete_grid_is_its_own_solution():
    result = BruteForce().solve(grid_of(CLASSIC_SOLUTION))
    assert result.get() == tuple(int(ch) for ch in CLASSIC_SOLUTION)


def test_blank_grids_have_too_many_solutions():
    with pytest.raises(ExcessiveSolutionsError):
        BruteForce().solve(PuzzleGrid([0] * 16))
    with pytest.raises(ExcessiveSolutionsError):
        Sudoku([0] * 81)
    # the grid itself is fine without solving
    assert Sudoku([0] * 81, solve=False).remaining == 81


def test_not_yet_computed():
    pending = NotYetComputed()
    with pytest.raises(HasNotBeenSolvedError):
        pending.get()
    with pytest.raises(HasNotBeenSolvedError):
        pending.num_solutions()
    assert not pending.is_unique()


def test_sudoku_caches_solution(classic, classic_solution):
    puzzle = Sudoku(classic)
    assert puzzle.unique_solution() == classic_solution
    assert puzzle.num_solutions() == 1
    lazy = Sudoku(classic, solve=False)
    with pytest.raises(HasNotBeenSolvedError):
        lazy.unique_solution()
    lazy.brute_force()
    assert lazy.unique_solution() == classic_solution
