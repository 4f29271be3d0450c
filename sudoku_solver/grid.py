"""Puzzle grid: cells, house aggregates and the transactional mutation contract (assign, remove, undo)."""

# grid.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from .candidates import CandidateSet, width_for
from .coords import House, HouseLayout, SudokuSize
from .errors import ConflictingInputError, InputLengthError, InvalidLocationError, ValueNotPossibleError
from .moves import CellCandidates, Move, ValueSet
from .parsing import check_digit_range
from .techniques import SizedTechnique, Technique


@dataclass
class Cell:
    index: int
    value: int = 0  # 0 = open
    given: bool = False
    candidates: CandidateSet = CandidateSet()

    @property
    def is_fixed(self) -> bool:
        return self.value != 0


class PuzzleGrid:
    def __init__(self, digits: Sequence[int], size: SudokuSize | None = None):
        digits = list(digits)
        if size is None:
            size = SudokuSize.from_length(len(digits))
        elif len(digits) != size.total:
            raise InputLengthError(len(digits))
        check_digit_range(digits, size)
        self.size = size
        self.layout: HouseLayout = size.layout()
        n = size.house_size
        self.width = width_for(n)
        self.full = CandidateSet.full(n, self.width)
        empty = CandidateSet.empty(self.width)
        self.rows = [empty] * n
        self.cols = [empty] * n
        self.boxes = [empty] * n
        self.cells: list[Cell] = []
        self.unsolved = 0
        for i, d in enumerate(digits):
            if d:
                self.cells.append(Cell(i, d, True, empty))
                self._add_to_houses(i, d)
            else:
                self.cells.append(Cell(i))
                self.unsolved += 1
        for cell in self.cells:
            if not cell.is_fixed:
                cell.candidates = self.full - self._used_around(cell.index)
        bad = self.conflicts()
        if bad:
            i = bad[0]
            raise ConflictingInputError(i, self.cells[i].value)

    # houses
    def _used_around(self, index: int) -> CandidateSet:
        r, c, b = self.layout.houses_of[index]
        return self.rows[r] | self.cols[c] | self.boxes[b]

    def _add_to_houses(self, index: int, value: int) -> None:
        r, c, b = self.layout.houses_of[index]
        self.rows[r] = self.rows[r].insert(value)
        self.cols[c] = self.cols[c].insert(value)
        self.boxes[b] = self.boxes[b].insert(value)

    def _drop_from_houses(self, index: int, value: int) -> None:
        r, c, b = self.layout.houses_of[index]
        self.rows[r] = self.rows[r].remove(value)
        self.cols[c] = self.cols[c].remove(value)
        self.boxes[b] = self.boxes[b].remove(value)

    def house_cells(self, kind: House, number: int) -> tuple[int, ...]:
        return self.layout.house(kind, number)

    @property
    def house_size(self) -> int:
        return self.size.house_size

    # queries
    def _check_index(self, index: int) -> Cell:
        if not 0 <= index < len(self.cells):
            raise InvalidLocationError(index)
        return self.cells[index]

    def value(self, index: int) -> int:
        return self._check_index(index).value

    def candidates(self, index: int) -> CandidateSet:
        return self._check_index(index).candidates

    def values(self) -> list[int]:
        return [cell.value for cell in self.cells]

    @property
    def remaining(self) -> int:
        return self.unsolved

    def is_complete(self) -> bool:
        return self.unsolved == 0

    def was_valid_entry(self, index: int) -> bool:
        """A fixed value is valid when its row, column and box scans see it exactly 3 times (itself in each)."""
        value = self.cells[index].value
        if not value:
            return True
        r, c, b = self.layout.houses_of[index]
        seen = 0
        for house in (self.layout.rows[r], self.layout.cols[c], self.layout.boxes[b]):
            seen += sum(1 for i in house if self.cells[i].value == value)
        return seen == 3

    def conflicts(self) -> list[int]:
        return [cell.index for cell in self.cells if cell.is_fixed and not self.was_valid_entry(cell.index)]

    def snapshot(self) -> tuple:
        cells = tuple((c.value, c.given, c.candidates.bits) for c in self.cells)
        houses = tuple(tuple(s.bits for s in agg) for agg in (self.rows, self.cols, self.boxes))
        return cells, houses, self.unsolved

    def copy(self) -> PuzzleGrid:
        dup = object.__new__(PuzzleGrid)
        dup.__dict__.update(self.__dict__)
        dup.cells = [replace(c) for c in self.cells]
        dup.rows = list(self.rows)
        dup.cols = list(self.cols)
        dup.boxes = list(self.boxes)
        return dup

    # mutation
    def assign(self, index: int, value: int, technique: Technique | SizedTechnique | None = None) -> Move:
        """Fix `value` in an open cell and remove it from every open peer."""
        cell = self._check_index(index)
        if value not in cell.candidates:
            raise ValueNotPossibleError(index, value)
        removed = [CellCandidates(index, cell.candidates)]
        cell.value = value
        cell.candidates = CandidateSet.empty(self.width)
        self.unsolved -= 1
        self._add_to_houses(index, value)
        r, c, b = self.layout.houses_of[index]
        for house in (self.layout.rows[r], self.layout.cols[c], self.layout.boxes[b]):
            for i in house:
                peer = self.cells[i]
                if value in peer.candidates:
                    peer.candidates = peer.candidates.remove(value)
                    removed.append(CellCandidates(i, CandidateSet.from_digits((value,), self.width)))
        return Move(technique, ValueSet(index, value), (), tuple(removed))

    def remove_candidate(self, index: int, value: int) -> Move:
        cell = self._check_index(index)
        if value not in cell.candidates:
            raise ValueNotPossibleError(index, value)
        cell.candidates = cell.candidates.remove(value)
        return Move(removed=(CellCandidates(index, CandidateSet.from_digits((value,), self.width)),))

    def remove_candidates(
        self,
        pairs: Iterable[CellCandidates],
        technique: Technique | SizedTechnique | None = None,
        used: Iterable[CellCandidates] = (),
    ) -> Move:
        """Remove a batch of candidates. Validated in full before anything changes."""
        pairs = tuple(pairs)
        for index, cands in pairs:
            cell = self._check_index(index)
            if not cands or not cands.is_subset(cell.candidates):
                raise ValueNotPossibleError(index, (cands - cell.candidates).first())
        for index, cands in pairs:
            cell = self.cells[index]
            cell.candidates = cell.candidates - cands
        return Move(technique, None, tuple(used), pairs)

    def undo(self, move: Move) -> None:
        if move.value_set is not None:
            index, value = move.value_set
            cell = self.cells[index]
            cell.value = 0
            self.unsolved += 1
            self._drop_from_houses(index, value)
        for index, cands in move.removed:
            cell = self.cells[index]
            cell.candidates = cell.candidates | cands

    def __repr__(self) -> str:
        return f"PuzzleGrid(dim={self.size.dim}, remaining={self.unsolved})"
