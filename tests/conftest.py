# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "sudoku_solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Puzzles below come from hodoku.sourceforge.net technique pages unless noted.
CLASSIC = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
CLASSIC_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"
ALL_SINGLE_POSS = "534070000602195000098000060800060003400803001010020006060000280000419005000080079"
HIDDEN_SINGLES = ".28..7....16.83.7.....2.85113729.......73........463.729..7.......86.14....3..7.."
TWO_SOLUTIONS = (
    "295743861"
    "431865900"
    "876192543"
    "387459216"
    "612387495"
    "549216738"
    "763524189"
    "928671354"
    "154938600"
)
SOLVED_4X4 = "1234341221434321"


@pytest.fixture
def classic():
    return CLASSIC


@pytest.fixture
def classic_solution():
    return tuple(int(ch) for ch in CLASSIC_SOLUTION)


@pytest.fixture
def all_single_poss():
    return ALL_SINGLE_POSS


@pytest.fixture
def hidden_singles():
    return HIDDEN_SINGLES


@pytest.fixture
def two_solutions():
    return TWO_SOLUTIONS


@pytest.fixture
def classic_rows():
    return [[int(ch) for ch in CLASSIC[r * 9:(r + 1) * 9]] for r in range(9)]
