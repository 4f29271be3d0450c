"""Shared subset search and the naked / hidden tuple techniques built on it.

An OccurrenceCounter keeps one bucket per key (a digit for tuples, a line for fish). A bucket
records which keys it stands for and the positions where its key occurs. Positions are stored
offset by one in a CandidateSet so position 0 is bit 0. `combinations` walks every k-subset of
non-empty buckets with an include/exclude recursion and hands the merged selection, plus the
merged remainder, to a closure that decides whether the subset forms a pattern.
"""

# subsets.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, TypeVar

from .candidates import CandidateSet
from .coords import House
from .grid import PuzzleGrid
from .moves import CellCandidates, Hint, elimination
from .techniques import hidden_tuple, naked_tuple

T = TypeVar("T")

TUPLE_ORDER = (House.ROW, House.COL, House.BOX)


@dataclass(frozen=True)
class Bucket:
    keys: CandidateSet
    positions: CandidateSet

    def merge(self, other: Bucket) -> Bucket:
        return Bucket(self.keys | other.keys, self.positions | other.positions)


class OccurrenceCounter:
    def __init__(self, count: int, width: int):
        self.width = width
        empty = CandidateSet.empty(width)
        self.buckets = [Bucket(CandidateSet.from_digits((k + 1,), width), empty) for k in range(count)]

    def insert(self, position: int, key: int) -> None:
        """Record that `key` (0-based) occurs at `position` (0-based)."""
        b = self.buckets[key]
        self.buckets[key] = Bucket(b.keys, b.positions.insert(position + 1))

    def positions(self, key: int) -> CandidateSet:
        return self.buckets[key].positions

    def _empty(self) -> Bucket:
        empty = CandidateSet.empty(self.width)
        return Bucket(empty, empty)

    def combinations(self, k: int, closure: Callable[[Bucket, Bucket], T | None]) -> list[T]:
        found: list[T] = []
        self._combine(k, 0, 0, self._empty(), self._empty(), closure, found)
        return found

    def _combine(self, k, start, depth, chosen, rest, closure, found) -> None:
        i = start
        while i < len(self.buckets) and not self.buckets[i].positions:
            i += 1
        if depth == k:
            for j in range(i, len(self.buckets)):
                rest = rest.merge(self.buckets[j])
            if not rest.positions:
                return  # nothing outside the subset
            result = closure(chosen, rest)
            if result is not None:
                found.append(result)
            return
        if i >= len(self.buckets):
            return
        self._combine(k, i + 1, depth + 1, chosen.merge(self.buckets[i]), rest, closure, found)
        self._combine(k, i + 1, depth, chosen, rest.merge(self.buckets[i]), closure, found)


def positions_of(s: CandidateSet) -> list[int]:
    return [p - 1 for p in s]


def digit_counter(grid: PuzzleGrid, house: tuple[int, ...]) -> OccurrenceCounter:
    counter = OccurrenceCounter(grid.house_size, grid.width)
    for pos, i in enumerate(house):
        for d in grid.cells[i].candidates:
            counter.insert(pos, d - 1)
    return counter


def naked_closure(k: int) -> Callable[[Bucket, Bucket], tuple[CandidateSet, CandidateSet] | None]:
    def closure(chosen: Bucket, rest: Bucket):
        # cells that hold nothing but the chosen digits
        cells = chosen.positions - rest.positions
        if len(cells) == k and len(chosen.keys) == k:
            return cells, chosen.keys
        return None

    return closure


def hidden_closure(k: int) -> Callable[[Bucket, Bucket], tuple[CandidateSet, CandidateSet] | None]:
    def closure(chosen: Bucket, rest: Bucket):
        if len(chosen.positions) == k and len(chosen.keys) == k:
            return chosen.positions, chosen.keys
        return None

    return closure


def naked_tuples_in_house(grid: PuzzleGrid, kind: House, number: int, k: int) -> Iterator[Hint]:
    house = grid.house_cells(kind, number)
    for cells, digits in digit_counter(grid, house).combinations(k, naked_closure(k)):
        members = set(positions_of(cells))
        used, removed = [], []
        for pos, i in enumerate(house):
            hit = grid.cells[i].candidates & digits
            if not hit:
                continue
            (used if pos in members else removed).append(CellCandidates(i, hit))
        hint = elimination(naked_tuple(k), used, removed)
        if hint is not None:
            yield hint


def hidden_tuples_in_house(grid: PuzzleGrid, kind: House, number: int, k: int) -> Iterator[Hint]:
    house = grid.house_cells(kind, number)
    for cells, digits in digit_counter(grid, house).combinations(k, hidden_closure(k)):
        used, removed = [], []
        for pos in positions_of(cells):
            i = house[pos]
            poss = grid.cells[i].candidates
            used.append(CellCandidates(i, poss & digits))
            removed.append(CellCandidates(i, poss - digits))
        hint = elimination(hidden_tuple(k), used, removed)
        if hint is not None:
            yield hint


def iter_naked_tuples(grid: PuzzleGrid, k: int) -> Iterator[Hint]:
    if not 2 <= k < grid.house_size:
        return
    for number in range(grid.house_size):
        for kind in TUPLE_ORDER:
            yield from naked_tuples_in_house(grid, kind, number, k)


def iter_hidden_tuples(grid: PuzzleGrid, k: int) -> Iterator[Hint]:
    if not 2 <= k < grid.house_size:
        return
    for number in range(grid.house_size):
        for kind in TUPLE_ORDER:
            yield from hidden_tuples_in_house(grid, kind, number, k)
