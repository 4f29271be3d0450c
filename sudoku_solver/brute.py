"""Bounded exhaustive search: counts the solutions of a grid (none, one, or many up to a cap)."""

# brute.py
# A single cursor walks the open cells in index order. At each step it either
# increments the trial value at the cursor, advances to the next open cell, or
# backtracks once the cell's candidates are exhausted. Placed digits are kept in
# per-house masks so the validity check does not rescan the houses.
from __future__ import annotations

import logging

from .errors import ExcessiveSolutionsError
from .grid import PuzzleGrid
from .solution import ExactlyOne, Many, NoSolution, Solution

log = logging.getLogger(__name__)

MAX_SOLUTIONS = 5


class _SearchState:
    def __init__(self, grid: PuzzleGrid):
        layout = grid.layout
        n = layout.house_size
        self.values = grid.values()
        self.open_cells = [i for i, v in enumerate(self.values) if v == 0]
        self.houses = [layout.houses_of[i] for i in self.open_cells]
        self.options = [tuple(grid.cells[i].candidates) for i in self.open_cells]
        self.tried = [-1] * len(self.open_cells)
        self.placed = [False] * len(self.open_cells)
        self.rows = [0] * n
        self.cols = [0] * n
        self.boxes = [0] * n
        for i, v in enumerate(self.values):
            if v:
                r, c, b = layout.houses_of[i]
                bit = 1 << (v - 1)
                self.rows[r] |= bit
                self.cols[c] |= bit
                self.boxes[b] |= bit

    def _current_bit(self, pos: int) -> int:
        return 1 << (self.options[pos][self.tried[pos]] - 1)

    def _unplace(self, pos: int) -> None:
        if not self.placed[pos]:
            return
        r, c, b = self.houses[pos]
        mask = ~self._current_bit(pos)
        self.rows[r] &= mask
        self.cols[c] &= mask
        self.boxes[b] &= mask
        self.values[self.open_cells[pos]] = 0
        self.placed[pos] = False

    def increment(self, pos: int) -> bool:
        """Move to the next untried candidate; False once they are exhausted."""
        self._unplace(pos)
        if self.tried[pos] + 1 >= len(self.options[pos]):
            return False
        self.tried[pos] += 1
        return True

    def is_valid(self, pos: int) -> bool:
        r, c, b = self.houses[pos]
        return (self.rows[r] | self.cols[c] | self.boxes[b]) & self._current_bit(pos) == 0

    def place(self, pos: int) -> None:
        r, c, b = self.houses[pos]
        bit = self._current_bit(pos)
        self.rows[r] |= bit
        self.cols[c] |= bit
        self.boxes[b] |= bit
        self.values[self.open_cells[pos]] = self.options[pos][self.tried[pos]]
        self.placed[pos] = True

    def reset(self, pos: int) -> None:
        self._unplace(pos)
        self.tried[pos] = -1


class BruteForce:
    def __init__(self, max_solutions: int = MAX_SOLUTIONS):
        if max_solutions < 1:
            raise ValueError("max_solutions must be at least 1")
        self.max_solutions = max_solutions

    def solve(self, grid: PuzzleGrid) -> Solution:
        """Enumerate solutions depth first; more than `max_solutions` raises ExcessiveSolutionsError."""
        if grid.conflicts():
            return NoSolution()
        state = _SearchState(grid)
        if not state.open_cells:
            return ExactlyOne(tuple(state.values))
        solutions = []
        back_marker = len(state.open_cells) - 1
        position = 0
        while position >= 0:
            if not state.increment(position):
                # backtrack
                state.reset(position)
                position -= 1
                continue
            if not state.is_valid(position):
                continue
            state.place(position)
            if position < back_marker:
                position += 1
                continue
            solutions.append(tuple(state.values))
            log.debug("brute force found solution %d", len(solutions))
            if len(solutions) > self.max_solutions:
                raise ExcessiveSolutionsError(self.max_solutions)
            # resume from the back marker; the next increment unplaces its value
            for pos in range(position, back_marker, -1):
                state.reset(pos)
            position = back_marker
        if not solutions:
            return NoSolution()
        if len(solutions) == 1:
            return ExactlyOne(solutions[0])
        return Many(tuple(solutions))
