"""Placement techniques: single candidates (naked singles), single possibilities (hidden singles) and the guess fallback."""

# singles.py
from __future__ import annotations

from typing import Iterator

from .candidates import CandidateSet
from .coords import House
from .grid import PuzzleGrid
from .moves import Hint, placement
from .solution import Solution
from .techniques import Technique

HOUSE_ORDER = (House.ROW, House.COL, House.BOX)


def iter_single_candidates(grid: PuzzleGrid) -> Iterator[Hint]:
    for cell in grid.cells:
        if len(cell.candidates) == 1:
            yield placement(Technique.SINGLE_CANDIDATE, cell.index, cell.candidates.first())


def single_possibility_in_house(grid: PuzzleGrid, kind: House, number: int) -> Hint | None:
    """A digit that appears as a candidate in exactly one cell of the house."""
    ones = multi = CandidateSet.empty(grid.width)
    house = grid.house_cells(kind, number)
    for i in house:
        poss = grid.cells[i].candidates
        multi = multi | (ones & poss)
        ones = ones | poss
    singles = ones - multi
    if not singles:
        return None
    for i in house:
        hit = grid.cells[i].candidates & singles
        if len(hit) == 1:
            return placement(Technique.SINGLE_POSSIBILITY, i, hit.first())
    return None


def iter_single_possibilities(grid: PuzzleGrid) -> Iterator[Hint]:
    for number in range(grid.house_size):
        for kind in HOUSE_ORDER:
            hint = single_possibility_in_house(grid, kind, number)
            if hint is not None:
                yield hint


def iter_guess(grid: PuzzleGrid, solution: Solution) -> Iterator[Hint]:
    """Commit the solution value of the most constrained open cell (first on ties)."""
    if not solution.is_unique():
        return
    values = solution.get()
    best = None
    for cell in grid.cells:
        n = len(cell.candidates)
        if n and (best is None or n < len(best.candidates)):
            best = cell
    if best is None:
        return
    value = values[best.index]
    if value in best.candidates:
        yield placement(Technique.GUESS, best.index, value)
