"""The puzzle object handed to applications: a grid, its cached solution and the ledger of applied moves."""

# sudoku.py
from __future__ import annotations

import logging
from typing import Any, Iterable

import numpy as np

from .brute import BruteForce
from .candidates import CandidateSet
from .config import SolverConfig
from .coords import SudokuSize
from .engine import HumanSolver
from .errors import IllegalOperationError, NotSolvedError
from .grid import PuzzleGrid
from .moves import CellCandidates, Hint, Move
from .parsing import output_string, parse_digits, to_rows
from .solution import HumanSolved, NotYetComputed, Solution

log = logging.getLogger(__name__)


class Sudoku:
    def __init__(
        self,
        digits: Any,
        size: SudokuSize | None = None,
        *,
        solve: bool = True,
        config: SolverConfig | None = None,
    ):
        """Build from any input `parse_digits` accepts.

        With `solve=True` the brute force runs immediately, so construction fails with
        ExcessiveSolutionsError on puzzles that have too many solutions.
        """
        self.config = config or SolverConfig()
        self.grid = PuzzleGrid(parse_digits(digits), size)
        self.moves: list[Move] = []
        self.solution: Solution = NotYetComputed()
        if solve:
            self.brute_force()

    @classmethod
    def from_string(cls, text: str, **kwargs) -> Sudoku:
        return cls(text, **kwargs)

    def brute_force(self) -> Solution:
        self.solution = BruteForce(self.config.max_solutions).solve(self.grid)
        log.debug("puzzle has %s", type(self.solution).__name__)
        return self.solution

    def copy(self) -> Sudoku:
        dup = object.__new__(Sudoku)
        dup.config = self.config
        dup.grid = self.grid.copy()
        dup.moves = list(self.moves)
        dup.solution = self.solution
        return dup

    # state
    @property
    def size(self) -> SudokuSize:
        return self.grid.size

    @property
    def remaining(self) -> int:
        return self.grid.remaining

    def value(self, index: int) -> int:
        return self.grid.value(index)

    def candidates(self, index: int) -> CandidateSet:
        return self.grid.candidates(index)

    def values(self) -> list[int]:
        return self.grid.values()

    def to_array(self) -> np.ndarray:
        n = self.size.house_size
        return np.array(self.values(), dtype=np.int64).reshape(n, n)

    def rows(self) -> list[list[int]]:
        return to_rows(self.values(), self.size.house_size)

    def output_string(self, empty: str = ".", delimiter: str = "") -> str:
        return output_string(self.values(), empty, delimiter)

    # mutation
    def assign(self, index: int, value: int) -> Move:
        move = self.grid.assign(index, value)
        self.moves.append(move)
        return move

    def remove_candidate(self, index: int, value: int) -> Move:
        move = self.grid.remove_candidate(index, value)
        self.moves.append(move)
        return move

    def eliminate(self, pairs: Iterable[CellCandidates]) -> Move:
        """Remove a batch of candidates at once (all or nothing)."""
        move = self.grid.remove_candidates(pairs)
        self.moves.append(move)
        return move

    def apply(self, hint: Hint) -> Move:
        move = hint.apply(self.grid)
        self.moves.append(move)
        log.debug("applied %s", hint.technique.label)
        return move

    def undo(self) -> Move:
        """Reverse the most recent move."""
        if not self.moves:
            raise IllegalOperationError("there is no move to undo")
        move = self.moves.pop()
        self.grid.undo(move)
        return move

    # solution
    def unique_solution(self) -> tuple[int, ...]:
        return self.solution.get()

    def num_solutions(self) -> int:
        return self.solution.num_solutions()

    def compare_with_solution(self) -> tuple[int, int]:
        """(cells still empty, filled cells that disagree with the unique solution)."""
        solved = self.unique_solution()
        missing = conflicts = 0
        for have, want in zip(self.values(), solved):
            if not have:
                missing += 1
            elif have != want:
                conflicts += 1
        return missing, conflicts

    def validate_against_solution(self) -> None:
        missing, conflicts = self.compare_with_solution()
        if missing or conflicts:
            raise NotSolvedError(missing, conflicts)

    def is_solved(self) -> bool:
        missing, conflicts = self.compare_with_solution()
        return missing == 0 and conflicts == 0

    # human solving
    def solver(self) -> HumanSolver:
        return HumanSolver.from_config(self.config)

    def hint(self) -> Hint | None:
        return self.solver().next_hint(self)

    def solve_human(self) -> HumanSolved:
        return self.solver().solve_human(self)

    def __repr__(self) -> str:
        delimiter = "" if self.size.house_size <= 9 else ","
        return f"Sudoku({self.output_string(delimiter=delimiter)!r})"
