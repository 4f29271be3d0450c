"""Moves (applied, undoable state changes), hints (proposed moves) and move reports."""

# moves.py
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple

from .candidates import CandidateSet
from .techniques import SizedTechnique, Technique

if TYPE_CHECKING:
    from .grid import PuzzleGrid


class CellCandidates(NamedTuple):
    index: int
    candidates: CandidateSet


class ValueSet(NamedTuple):
    index: int
    value: int


@dataclass(frozen=True)
class Move:
    """One applied change to a grid. The audit record and the unit of undo.

    When `value_set` is present, `removed[0]` is the assigned cell's own prior candidate
    set and `used_to_solve` is empty.
    """

    technique: Technique | SizedTechnique | None = None
    value_set: ValueSet | None = None
    used_to_solve: tuple[CellCandidates, ...] = ()
    removed: tuple[CellCandidates, ...] = ()

    @property
    def removed_count(self) -> int:
        return sum(len(pair.candidates) for pair in self.removed)

    def involved(self) -> set[int]:
        return {pair.index for pair in self.used_to_solve}

    def removed_indices(self) -> set[int]:
        return {pair.index for pair in self.removed}


@dataclass(frozen=True)
class Hint:
    """A move found by a technique search, not yet applied to any grid."""

    technique: Technique | SizedTechnique
    value_set: ValueSet | None = None
    used_to_solve: tuple[CellCandidates, ...] = ()
    removed: tuple[CellCandidates, ...] = ()

    @property
    def is_placement(self) -> bool:
        return self.value_set is not None

    def involved(self) -> set[int]:
        return {pair.index for pair in self.used_to_solve}

    def removed_indices(self) -> set[int]:
        return {pair.index for pair in self.removed}

    def apply(self, grid: PuzzleGrid) -> Move:
        if self.value_set is not None:
            return grid.assign(self.value_set.index, self.value_set.value, technique=self.technique)
        return grid.remove_candidates(self.removed, technique=self.technique, used=self.used_to_solve)


def placement(technique: Technique | SizedTechnique, index: int, value: int) -> Hint:
    return Hint(technique, value_set=ValueSet(index, value))


def elimination(technique: Technique | SizedTechnique, used: list[CellCandidates], removed: list[CellCandidates]) -> Hint | None:
    """Build an elimination hint, or None when nothing would actually be removed."""
    removed = [pair for pair in removed if pair.candidates]
    if not removed:
        return None
    return Hint(technique, used_to_solve=tuple(used), removed=tuple(removed))


@dataclass
class MoveReport:
    counts: dict[str, int] = field(default_factory=dict)
    total_difficulty: float = 0.0
    placements: int = 0
    eliminations: int = 0

    def as_dict(self) -> dict[str, Any]:
        return {
            "counts": dict(self.counts),
            "total_difficulty": round(self.total_difficulty, 2),
            "placements": self.placements,
            "eliminations": self.eliminations,
        }

    def text(self) -> str:
        lines = [f"{name}: {n}" for name, n in self.counts.items()]
        lines.append(f"Placements: {self.placements}, candidates removed: {self.eliminations}")
        lines.append(f"Total difficulty: {self.total_difficulty:.1f}")
        return "\n".join(lines)


def report(moves) -> MoveReport:
    """Summarize a move trail by technique; the difficulty of every technique move is summed."""
    counts: Counter = Counter()
    out = MoveReport()
    for m in moves:
        if m.value_set is not None:
            out.placements += 1
            # the assigned cell's own candidates are cleared too, they are not deductions
            out.eliminations += sum(len(p.candidates) for p in m.removed[1:])
        else:
            out.eliminations += m.removed_count
        if m.technique is None:
            continue
        counts[m.technique] += 1
        out.total_difficulty += m.technique.difficulty
    # catalogue order, then sized techniques by family and size
    named = [t for t in Technique if counts[t]]
    extra = sorted((t for t in counts if isinstance(t, SizedTechnique)), key=lambda t: (t.family, t.n))
    out.counts = {t.label: counts[t] for t in named + extra}
    return out
