"""Catalogue of human solving techniques with their display names and difficulty weights."""

# techniques.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Technique(Enum):
    # (display name, difficulty); declaration order is the catalogue order
    SINGLE_CANDIDATE = ("Single Candidates", 0.2)
    SINGLE_POSSIBILITY = ("Single Possibilities", 1.3)
    POINTING = ("Pointing Candidates", 1.8)
    CLAIMING = ("Claiming Candidates", 2.1)
    NAKED_DOUBLE = ("Naked Double", 1.0)
    NAKED_TRIPLE = ("Naked Triple", 1.7)
    NAKED_QUAD = ("Naked Quadruple", 2.2)
    HIDDEN_DOUBLE = ("Hidden Double", 2.1)
    HIDDEN_TRIPLE = ("Hidden Triple", 2.9)
    HIDDEN_QUAD = ("Hidden Quadruple", 3.7)
    X_WING = ("X-Wing", 3.4)
    SWORDFISH = ("Swordfish", 4.0)
    JELLYFISH = ("Jellyfish", 5.0)
    FINNED_X_WING = ("Finned X-Wing", 4.1)
    FINNED_SWORDFISH = ("Finned Swordfish", 4.9)
    FINNED_JELLYFISH = ("Finned Jellyfish", 5.9)
    GUESS = ("Guess", 8.0)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def difficulty(self) -> float:
        return self.value[1]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_name(cls, name: str) -> Technique | SizedTechnique:
        """Accept the enum name ("x_wing"), the display name ("X-Wing") or a sized name ("naked_tuple_5")."""
        key = name.strip()
        upper = key.upper().replace("-", "_").replace(" ", "_")
        if upper in cls.__members__:
            return cls[upper]
        for t in cls:
            if t.label.lower() == key.lower():
                return t
        family, _, size = upper.rpartition("_")
        if family in FAMILIES and size.isdigit():
            return sized(family, int(size))
        raise ValueError(f"unknown technique: {name}")


# family: (display name, weight at size 4, named members for sizes 2..4)
FAMILIES = {
    "NAKED_TUPLE": ("Naked Tuple", 2.2, (Technique.NAKED_DOUBLE, Technique.NAKED_TRIPLE, Technique.NAKED_QUAD)),
    "HIDDEN_TUPLE": ("Hidden Tuple", 3.7, (Technique.HIDDEN_DOUBLE, Technique.HIDDEN_TRIPLE, Technique.HIDDEN_QUAD)),
    "FISH": ("Fish", 5.0, (Technique.X_WING, Technique.SWORDFISH, Technique.JELLYFISH)),
    "FINNED_FISH": (
        "Finned Fish",
        5.9,
        (Technique.FINNED_X_WING, Technique.FINNED_SWORDFISH, Technique.FINNED_JELLYFISH),
    ),
}


@dataclass(frozen=True)
class SizedTechnique:
    """A tuple or fish technique of size 5 or more, only reachable on grids of 16x16 and up."""

    family: str
    n: int

    def __post_init__(self):
        if self.family not in FAMILIES:
            raise ValueError(f"unknown technique family: {self.family}")
        if self.n < 5:
            raise ValueError(f"size {self.n} has a named technique")

    @property
    def name(self) -> str:
        return f"{self.family}_{self.n}"

    @property
    def label(self) -> str:
        return f"{FAMILIES[self.family][0]} ({self.n})"

    @property
    def difficulty(self) -> float:
        return FAMILIES[self.family][1] + 0.5 * (self.n - 4)

    def __str__(self) -> str:
        return self.label


def sized(family: str, n: int) -> Technique | SizedTechnique:
    """Named member for sizes 2..4, a SizedTechnique above."""
    if n < 2:
        raise ValueError(f"size {n} is too small for a tuple or fish")
    named = FAMILIES[family][2]
    return named[n - 2] if n <= len(named) + 1 else SizedTechnique(family, n)


def naked_tuple(n: int) -> Technique | SizedTechnique:
    return sized("NAKED_TUPLE", n)


def hidden_tuple(n: int) -> Technique | SizedTechnique:
    return sized("HIDDEN_TUPLE", n)


def fish(n: int) -> Technique | SizedTechnique:
    return sized("FISH", n)


def finned_fish(n: int) -> Technique | SizedTechnique:
    return sized("FINNED_FISH", n)


CATALOGUE: tuple[Technique, ...] = tuple(Technique)


def catalogue_for(house_size: int) -> tuple[Technique | SizedTechnique, ...]:
    """The named catalogue plus every sized tuple and fish that fits a house of `house_size` cells."""
    extra = tuple(SizedTechnique(family, n) for family in FAMILIES for n in range(5, house_size // 2 + 1))
    return CATALOGUE + extra


def sort_by_difficulty(techniques) -> list[Technique | SizedTechnique]:
    # sorted() is stable, so equal weights keep catalogue order
    return sorted(techniques, key=lambda t: t.difficulty)
