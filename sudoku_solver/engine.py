"""Human-style solving: ask the technique catalogue for the easiest applicable hint, apply it, repeat."""

# engine.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable, Iterator

from .errors import HumanSolveError
from .fish import iter_finned_fish, iter_fish
from .grid import PuzzleGrid
from .intersections import iter_claiming, iter_pointing
from .moves import Hint, Move
from .singles import iter_guess, iter_single_candidates, iter_single_possibilities
from .solution import HumanSolved, Solution
from .subsets import iter_hidden_tuples, iter_naked_tuples
from .techniques import CATALOGUE, SizedTechnique, Technique, catalogue_for, sort_by_difficulty

if TYPE_CHECKING:
    from .config import SolverConfig
    from .sudoku import Sudoku

log = logging.getLogger(__name__)

Search = Callable[[PuzzleGrid, Solution], Iterator[Hint]]
AnyTechnique = Technique | SizedTechnique


def _search(fn, *args) -> Search:
    return lambda grid, solution: fn(grid, *args)


SEARCHES: dict[Technique, Search] = {
    Technique.SINGLE_CANDIDATE: _search(iter_single_candidates),
    Technique.SINGLE_POSSIBILITY: _search(iter_single_possibilities),
    Technique.POINTING: _search(iter_pointing),
    Technique.CLAIMING: _search(iter_claiming),
    Technique.NAKED_DOUBLE: _search(iter_naked_tuples, 2),
    Technique.NAKED_TRIPLE: _search(iter_naked_tuples, 3),
    Technique.NAKED_QUAD: _search(iter_naked_tuples, 4),
    Technique.HIDDEN_DOUBLE: _search(iter_hidden_tuples, 2),
    Technique.HIDDEN_TRIPLE: _search(iter_hidden_tuples, 3),
    Technique.HIDDEN_QUAD: _search(iter_hidden_tuples, 4),
    Technique.X_WING: _search(iter_fish, 2),
    Technique.SWORDFISH: _search(iter_fish, 3),
    Technique.JELLYFISH: _search(iter_fish, 4),
    Technique.FINNED_X_WING: _search(iter_finned_fish, 2),
    Technique.FINNED_SWORDFISH: _search(iter_finned_fish, 3),
    Technique.FINNED_JELLYFISH: _search(iter_finned_fish, 4),
    Technique.GUESS: iter_guess,
}

# sized techniques, by family
SIZED_SEARCHES = {
    "NAKED_TUPLE": iter_naked_tuples,
    "HIDDEN_TUPLE": iter_hidden_tuples,
    "FISH": iter_fish,
    "FINNED_FISH": iter_finned_fish,
}


def find_hint(technique: AnyTechnique, grid: PuzzleGrid, solution: Solution) -> Hint | None:
    """First hint of one technique, in its enumeration order."""
    if isinstance(technique, SizedTechnique):
        return next(SIZED_SEARCHES[technique.family](grid, technique.n), None)
    return next(SEARCHES[technique](grid, solution), None)


class HumanSolver:
    """Without an explicit catalogue the solver also uses the sized tuples and fish that fit the grid."""

    def __init__(self, catalogue: Iterable[AnyTechnique] | None = None, allow_guess: bool = True):
        self.extend_by_size = catalogue is None
        techniques = list(CATALOGUE if catalogue is None else catalogue)
        if not allow_guess:
            techniques = [t for t in techniques if t is not Technique.GUESS]
        self.allow_guess = allow_guess
        self.techniques = sort_by_difficulty(techniques)
        self._by_size: dict[int, list[AnyTechnique]] = {}

    @classmethod
    def from_config(cls, config: SolverConfig) -> HumanSolver:
        catalogue = None
        if config.techniques:
            catalogue = [Technique.from_name(name) for name in config.techniques]
        return cls(catalogue, allow_guess=config.allow_guess)

    def techniques_for(self, house_size: int) -> list[AnyTechnique]:
        if not self.extend_by_size:
            return self.techniques
        if house_size not in self._by_size:
            extra = [t for t in catalogue_for(house_size) if isinstance(t, SizedTechnique)]
            self._by_size[house_size] = sort_by_difficulty(self.techniques + extra)
        return self._by_size[house_size]

    def _scan(self, sudoku: Sudoku, techniques: Iterable[AnyTechnique]) -> Hint | None:
        for technique in techniques:
            hint = find_hint(technique, sudoku.grid, sudoku.solution)
            if hint is not None:
                return hint
        return None

    def next_hint(self, sudoku: Sudoku) -> Hint | None:
        return self._scan(sudoku, self.techniques_for(sudoku.grid.house_size))

    def next_hint_up_to(self, sudoku: Sudoku, technique: AnyTechnique) -> Hint | None:
        """Only techniques no harder than `technique` (inclusive)."""
        usable = self.techniques_for(sudoku.grid.house_size)
        return self._scan(sudoku, [t for t in usable if t.difficulty <= technique.difficulty])

    def _hint_or_guess(self, sudoku: Sudoku) -> Hint | None:
        hint = self.next_hint(sudoku)
        if hint is None and self.allow_guess and Technique.GUESS not in self.techniques:
            hint = find_hint(Technique.GUESS, sudoku.grid, sudoku.solution)
        return hint

    def solve_human(self, sudoku: Sudoku) -> HumanSolved:
        """Solve a copy of `sudoku` with techniques only, guessing as a last resort."""
        work = sudoku.copy()
        start = len(work.moves)
        while work.remaining > 0:
            hint = self._hint_or_guess(work)
            if hint is None:
                raise HumanSolveError(work.remaining)
            if hint.technique is Technique.GUESS:
                log.debug("guessing %s at cell %d", hint.value_set.value, hint.value_set.index)
            work.apply(hint)
        moves = tuple(work.moves[start:])
        log.info("human solve finished in %d moves", len(moves))
        return HumanSolved(tuple(work.values()), moves)

    def solve_to(self, sudoku: Sudoku, technique: AnyTechnique) -> list[Move]:
        """Apply hints in place until the next one would be `technique` (harder ones may be used)."""
        applied = []
        while sudoku.remaining > 0:
            hint = self.next_hint(sudoku)
            if hint is None or hint.technique == technique:
                break
            applied.append(sudoku.apply(hint))
        return applied

    def solve_up_to(self, sudoku: Sudoku, technique: AnyTechnique) -> list[Move]:
        """Apply hints in place using techniques up to and including `technique`."""
        applied = []
        while sudoku.remaining > 0:
            hint = self.next_hint_up_to(sudoku, technique)
            if hint is None:
                break
            applied.append(sudoku.apply(hint))
        return applied
