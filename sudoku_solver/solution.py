"""Solution states cached on a puzzle: none, not yet computed, exactly one, many (capped) or solved by hand."""

# solution.py
from __future__ import annotations

from dataclasses import dataclass

from .errors import HasNotBeenSolvedError, MultipleSolutionError, NoSolutionError
from .moves import Move

Values = tuple[int, ...]


class Solution:
    def num_solutions(self) -> int:
        raise NotImplementedError

    def get(self) -> Values:
        """The unique solution's values."""
        raise NotImplementedError

    def is_unique(self) -> bool:
        return False


@dataclass(frozen=True)
class NoSolution(Solution):
    def num_solutions(self) -> int:
        return 0

    def get(self) -> Values:
        raise NoSolutionError()


@dataclass(frozen=True)
class NotYetComputed(Solution):
    def num_solutions(self) -> int:
        raise HasNotBeenSolvedError()

    def get(self) -> Values:
        raise HasNotBeenSolvedError()


@dataclass(frozen=True)
class ExactlyOne(Solution):
    values: Values

    def num_solutions(self) -> int:
        return 1

    def get(self) -> Values:
        return self.values

    def is_unique(self) -> bool:
        return True


@dataclass(frozen=True)
class Many(Solution):
    # enumeration order, not a stable contract
    solutions: tuple[Values, ...]

    def num_solutions(self) -> int:
        return len(self.solutions)

    def get(self) -> Values:
        raise MultipleSolutionError(len(self.solutions))


@dataclass(frozen=True)
class HumanSolved(Solution):
    values: Values
    moves: tuple[Move, ...]

    def num_solutions(self) -> int:
        return 1

    def get(self) -> Values:
        return self.values

    def is_unique(self) -> bool:
        return True
