"""Index math for N x N puzzles: sizes, row/column/box membership tables, cell keys and rotation."""

# coords.py
# Cells are addressed by a linear row-major index (row stride = house size).
# Rows, columns and boxes ("houses") are numbered from 0; cell keys used by the
# tool layer ("r1c1") stay 1-based.
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from .errors import InputLengthError

MIN_DIM = 2
MAX_DIM = 10

Cell = tuple[int, int]  # (row, col) 1-based


class House(Enum):
    ROW = "row"
    COL = "col"
    BOX = "box"


@dataclass(frozen=True)
class SudokuSize:
    dim: int  # box side, 3 for a classic puzzle

    def __post_init__(self):
        if not MIN_DIM <= self.dim <= MAX_DIM:
            raise ValueError(f"box dimension {self.dim} is not supported")

    @property
    def house_size(self) -> int:
        return self.dim * self.dim

    @property
    def total(self) -> int:
        return self.house_size * self.house_size

    @classmethod
    def from_length(cls, length: int) -> SudokuSize:
        for dim in range(MIN_DIM, MAX_DIM + 1):
            if dim**4 == length:
                return cls(dim)
        raise InputLengthError(length)

    @classmethod
    def from_house_size(cls, house_size: int) -> SudokuSize:
        for dim in range(MIN_DIM, MAX_DIM + 1):
            if dim * dim == house_size:
                return cls(dim)
        raise InputLengthError(house_size * house_size)

    def layout(self) -> HouseLayout:
        return HouseLayout.for_dim(self.dim)


def rc_to_key(r: int, c: int) -> str:
    return f"r{r}c{c}"


def key_to_rc(key: str) -> Cell:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    return (r, c)


class HouseLayout:
    """Precomputed membership tables for one puzzle size. Shared by every grid of that size."""

    def __init__(self, dim: int):
        self.dim = dim
        n = dim * dim
        self.house_size = n
        self.total = n * n
        self.rows = [tuple(r * n + c for c in range(n)) for r in range(n)]
        self.cols = [tuple(r * n + c for r in range(n)) for c in range(n)]
        self.boxes = []
        for b in range(n):
            r0 = (b // dim) * dim
            c0 = (b % dim) * dim
            self.boxes.append(tuple((r0 + i) * n + c0 + j for i in range(dim) for j in range(dim)))
        # (row, col, box) of every cell
        self.houses_of = [(i // n, i % n, self.box_of(i // n, i % n)) for i in range(self.total)]
        self.peers = []
        for i in range(self.total):
            r, c, b = self.houses_of[i]
            seen = []
            for idx in self.rows[r] + self.cols[c] + self.boxes[b]:
                if idx != i and idx not in seen:
                    seen.append(idx)
            self.peers.append(tuple(seen))

    @classmethod
    def for_dim(cls, dim: int) -> HouseLayout:
        return _layout(dim)

    def box_of(self, row: int, col: int) -> int:
        return (row // self.dim) * self.dim + col // self.dim

    def row_col(self, index: int) -> tuple[int, int]:
        return divmod(index, self.house_size)

    def index(self, row: int, col: int) -> int:
        return row * self.house_size + col

    def band(self, position: int) -> int:
        """Which box-aligned band a row or column position falls in."""
        return position // self.dim

    def house(self, kind: House, number: int) -> tuple[int, ...]:
        if kind is House.ROW:
            return self.rows[number]
        if kind is House.COL:
            return self.cols[number]
        return self.boxes[number]

    def line_index(self, kind: House, line: int, position: int) -> int:
        """Cell index of `position` along row or column `line`."""
        if kind is House.ROW:
            return self.index(line, position)
        return self.index(position, line)


@lru_cache(maxsize=None)
def _layout(dim: int) -> HouseLayout:
    return HouseLayout(dim)


def rotate_clockwise(values: list[int], house_size: int, turns: int = 1) -> list[int]:
    """Rotate a flat row-major grid by quarter turns, clockwise."""
    out = list(values)
    n = house_size
    for _ in range(turns % 4):
        out = [out[(n - 1 - c) * n + r] for r in range(n) for c in range(n)]
    return out
