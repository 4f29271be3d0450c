"""Candidate sets: fixed-width bit vectors recording which digits are still possible in a cell.

Digit d (d >= 1) is stored in bit d-1; digit 0 is the "no value" sentinel and maps to the
empty set. The width is picked once from the house size and never changes, so every set
produced by an operation is masked back to that width.
"""

# candidates.py
from __future__ import annotations

from typing import Iterable, Iterator

WIDTHS = (8, 16, 32, 64, 128)


def width_for(house_size: int) -> int:
    """Smallest supported integer width that can hold `house_size` digits."""
    for w in WIDTHS:
        if w >= house_size:
            return w
    raise ValueError(f"house size {house_size} exceeds {WIDTHS[-1]} bits")


def digit_bit(digit: int) -> int:
    if digit <= 0:
        return 0
    return 1 << (digit - 1)


class CandidateSet:
    __slots__ = ("_bits", "_width")

    def __init__(self, bits: int = 0, width: int = 16):
        self._width = width
        self._bits = bits & ((1 << width) - 1)

    # constructors
    @classmethod
    def empty(cls, width: int = 16) -> CandidateSet:
        return cls(0, width)

    @classmethod
    def full(cls, house_size: int, width: int | None = None) -> CandidateSet:
        """Lowest `house_size` bits set.

        Starts from all ones at the chosen width and clears the top bit until the
        population count fits, which handles house sizes that are not a power of two.
        """
        if width is None:
            width = width_for(house_size)
        bits = (1 << width) - 1
        while bits.bit_count() > house_size:
            bits >>= 1
        return cls(bits, width)

    @classmethod
    def from_digits(cls, digits: Iterable[int], width: int = 16) -> CandidateSet:
        bits = 0
        for d in digits:
            bits |= digit_bit(d)
        return cls(bits, width)

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def width(self) -> int:
        return self._width

    def _new(self, bits: int) -> CandidateSet:
        return CandidateSet(bits, self._width)

    def insert(self, digit: int) -> CandidateSet:
        return self._new(self._bits | digit_bit(digit))

    def remove(self, digit: int) -> CandidateSet:
        return self._new(self._bits & ~digit_bit(digit))

    def union(self, other: CandidateSet) -> CandidateSet:
        return self._new(self._bits | other._bits)

    def intersect(self, other: CandidateSet) -> CandidateSet:
        return self._new(self._bits & other._bits)

    def difference(self, other: CandidateSet) -> CandidateSet:
        return self._new(self._bits & ~other._bits)

    def symmetric_difference(self, other: CandidateSet) -> CandidateSet:
        return self._new(self._bits ^ other._bits)

    def is_disjoint(self, other: CandidateSet) -> bool:
        return self._bits & other._bits == 0

    def is_subset(self, other: CandidateSet) -> bool:
        return self._bits & ~other._bits == 0

    def contains(self, digit: int) -> bool:
        bit = digit_bit(digit)
        return bit != 0 and self._bits & bit != 0

    def count(self) -> int:
        return self._bits.bit_count()

    def first(self) -> int:
        """Lowest digit in the set, 0 when empty."""
        return (self._bits & -self._bits).bit_length()

    def digits(self) -> list[int]:
        return list(self)

    __or__ = union
    __and__ = intersect
    __sub__ = difference
    __xor__ = symmetric_difference
    __contains__ = contains
    __len__ = count

    def __iter__(self) -> Iterator[int]:
        bits = self._bits
        while bits:
            low = bits & -bits
            yield low.bit_length()
            bits ^= low

    def __bool__(self) -> bool:
        return self._bits != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"CandidateSet({self.digits()})"
