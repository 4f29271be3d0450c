"""Fish patterns (X-Wing, Swordfish, Jellyfish) and their finned variants.

For one digit and one base orientation (rows, then columns), every base line is a bucket whose
positions are the cross lines where the digit is still a candidate. k base lines confined to
k cross lines (the cover) let the digit be removed from the rest of each cover line. A finned
fish spans k+1 cross lines: one occurrence, the fin, sits outside the cover, so only cells that
also share the fin's box can lose the digit.
"""

# fish.py
from __future__ import annotations

from typing import Iterator

from .candidates import CandidateSet
from .coords import House
from .grid import PuzzleGrid
from .moves import CellCandidates, Hint, elimination
from .subsets import Bucket, OccurrenceCounter, positions_of
from .techniques import finned_fish, fish

BASE_ORDER = (House.ROW, House.COL)


def line_counter(grid: PuzzleGrid, base: House, digit: int) -> OccurrenceCounter:
    counter = OccurrenceCounter(grid.house_size, grid.width)
    for line in range(grid.house_size):
        for pos, i in enumerate(grid.house_cells(base, line)):
            if digit in grid.cells[i].candidates:
                counter.insert(pos, line)
    return counter


def _basic_closure(k: int):
    def closure(chosen: Bucket, rest: Bucket):
        if len(chosen.positions) == k:
            return positions_of(chosen.keys), positions_of(chosen.positions)
        return None

    return closure


def fish_for_digit(grid: PuzzleGrid, base: House, digit: int, k: int) -> Iterator[Hint]:
    layout = grid.layout
    mark = CandidateSet.from_digits((digit,), grid.width)
    for lines, cover in line_counter(grid, base, digit).combinations(k, _basic_closure(k)):
        base_lines = set(lines)
        used, removed = [], []
        for line in lines:
            for pos in cover:
                i = layout.line_index(base, line, pos)
                if digit in grid.cells[i].candidates:
                    used.append(CellCandidates(i, mark))
        for pos in cover:
            for line in range(grid.house_size):
                if line in base_lines:
                    continue
                i = layout.line_index(base, line, pos)
                if digit in grid.cells[i].candidates:
                    removed.append(CellCandidates(i, mark))
        hint = elimination(fish(k), used, removed)
        if hint is not None:
            yield hint


def fish_in(grid: PuzzleGrid, base: House, k: int) -> Iterator[Hint]:
    """Fish with `base` lines (rows or columns), digit by digit."""
    for digit in range(1, grid.house_size + 1):
        yield from fish_for_digit(grid, base, digit, k)


def iter_fish(grid: PuzzleGrid, k: int) -> Iterator[Hint]:
    if not 2 <= k <= grid.house_size // 2:
        return
    for base in BASE_ORDER:
        yield from fish_in(grid, base, k)


# finned


def is_extra_covered(grid: PuzzleGrid, fin_pos: int, cover: list[int]) -> bool:
    """Some cover line runs through the fin's box."""
    band = grid.layout.band(fin_pos)
    return any(grid.layout.band(p) == band for p in cover)


def is_not_overlapped(grid: PuzzleGrid, fin_line: int, lines: list[int]) -> bool:
    """At most one other base line shares the fin line's band."""
    band = grid.layout.band(fin_line)
    return sum(1 for line in lines if line != fin_line and grid.layout.band(line) == band) <= 1


def _finned_closure(k: int):
    def closure(chosen: Bucket, rest: Bucket):
        if len(chosen.positions) == k + 1:
            return positions_of(chosen.keys), positions_of(chosen.positions)
        return None

    return closure


def finned_fish_for_digit(grid: PuzzleGrid, base: House, digit: int, k: int) -> Iterator[Hint]:
    layout = grid.layout
    mark = CandidateSet.from_digits((digit,), grid.width)
    counter = line_counter(grid, base, digit)
    for lines, spread in counter.combinations(k, _finned_closure(k)):
        base_lines = set(lines)
        for fin_pos in spread:
            holders = [line for line in lines if fin_pos + 1 in counter.positions(line)]
            if len(holders) != 1:
                continue
            fin_line = holders[0]
            cover = [p for p in spread if p != fin_pos]
            if not is_extra_covered(grid, fin_pos, cover) or not is_not_overlapped(grid, fin_line, lines):
                continue
            fin = layout.line_index(base, fin_line, fin_pos)
            fin_box = layout.houses_of[fin][2]
            removed = []
            for i in layout.boxes[fin_box]:
                line, pos = _line_and_pos(grid, base, i)
                if line in base_lines or pos not in cover:
                    continue
                if digit in grid.cells[i].candidates:
                    removed.append(CellCandidates(i, mark))
            if not removed:
                continue
            used = []
            for line in lines:
                for pos in cover:
                    i = layout.line_index(base, line, pos)
                    if digit in grid.cells[i].candidates:
                        used.append(CellCandidates(i, mark))
            used.append(CellCandidates(fin, mark))
            hint = elimination(finned_fish(k), used, removed)
            if hint is not None:
                yield hint


def _line_and_pos(grid: PuzzleGrid, base: House, index: int) -> tuple[int, int]:
    row, col = grid.layout.row_col(index)
    return (row, col) if base is House.ROW else (col, row)


def finned_fish_in(grid: PuzzleGrid, base: House, k: int) -> Iterator[Hint]:
    for digit in range(1, grid.house_size + 1):
        yield from finned_fish_for_digit(grid, base, digit, k)


def iter_finned_fish(grid: PuzzleGrid, k: int) -> Iterator[Hint]:
    if not 2 <= k <= grid.house_size // 2:
        return
    for base in BASE_ORDER:
        yield from finned_fish_in(grid, base, k)
