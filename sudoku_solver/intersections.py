"""Locked candidates: pointing (box confines a digit to a line) and claiming (line confines a digit to a box)."""

# intersections.py
# For every row/column and every box segment it crosses:
#   both     = candidates in the segment (line cells inside the box)
#   line_out = candidates on the line outside the box
#   box_out  = candidates in the box outside the segment
# pointing digits = (both - box_out) & line_out  -> removed from line_out cells
# claiming digits = (both - line_out) & box_out  -> removed from box_out cells
from __future__ import annotations

from typing import Iterator

from .candidates import CandidateSet
from .coords import House
from .grid import PuzzleGrid
from .moves import CellCandidates, Hint, elimination
from .techniques import Technique

LINES = (House.ROW, House.COL)


def _segment_sets(grid: PuzzleGrid, line: tuple[int, ...], box: tuple[int, ...]):
    empty = CandidateSet.empty(grid.width)
    both = line_out = box_out = empty
    in_box = set(box)
    for i in line:
        if i in in_box:
            both = both | grid.cells[i].candidates
        else:
            line_out = line_out | grid.cells[i].candidates
    in_line = set(line)
    for i in box:
        if i not in in_line:
            box_out = box_out | grid.cells[i].candidates
    return both, line_out, box_out


def _segments(grid: PuzzleGrid, kind: House, number: int):
    """(line cells, box number, box cells) for each box the line passes through."""
    layout = grid.layout
    line = layout.house(kind, number)
    for seg in range(layout.dim):
        first = line[seg * layout.dim]
        r, c, b = layout.houses_of[first]
        yield line, b, layout.boxes[b]


def pointing_in_line(grid: PuzzleGrid, kind: House, number: int) -> Hint | None:
    for line, _, box in _segments(grid, kind, number):
        both, line_out, box_out = _segment_sets(grid, line, box)
        digits = (both - box_out) & line_out
        if not digits:
            continue
        in_box = set(box)
        used, removed = [], []
        for i in line:
            hit = grid.cells[i].candidates & digits
            if not hit:
                continue
            (used if i in in_box else removed).append(CellCandidates(i, hit))
        hint = elimination(Technique.POINTING, used, removed)
        if hint is not None:
            return hint
    return None


def claiming_in_line(grid: PuzzleGrid, kind: House, number: int) -> Hint | None:
    for line, _, box in _segments(grid, kind, number):
        both, line_out, box_out = _segment_sets(grid, line, box)
        digits = (both - line_out) & box_out
        if not digits:
            continue
        in_line = set(line)
        used, removed = [], []
        for i in box:
            hit = grid.cells[i].candidates & digits
            if not hit:
                continue
            (used if i in in_line else removed).append(CellCandidates(i, hit))
        hint = elimination(Technique.CLAIMING, used, removed)
        if hint is not None:
            return hint
    return None


def iter_pointing(grid: PuzzleGrid) -> Iterator[Hint]:
    for number in range(grid.house_size):
        for kind in LINES:
            hint = pointing_in_line(grid, kind, number)
            if hint is not None:
                yield hint


def iter_claiming(grid: PuzzleGrid) -> Iterator[Hint]:
    for number in range(grid.house_size):
        for kind in LINES:
            hint = claiming_in_line(grid, kind, number)
            if hint is not None:
                yield hint
