# types_sudoku.py
from __future__ import annotations

from typing import Any, TypedDict

Grid = list[list[int]]
"""An N x N Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits."""


class MovePayload(TypedDict, total=False):
    """A single human-style solving action, as returned by the tool layer and the API."""

    index: int  # 1-based order in the sequence
    technique: str  # e.g., 'single_candidate', 'x_wing'
    label: str  # display name, e.g., 'X-Wing'
    difficulty: float
    type: str  # 'placement' or 'elimination'
    digit: int  # the digit being placed, or eliminated when only one digit is involved
    cell: str  # for placements, target cell (e.g., 'r4c7')
    eliminate: list[str]  # cells losing `digit` (single-digit eliminations)
    eliminations: dict[str, list[int]]  # cell -> digits removed
    highlights: dict[str, Any]  # cells that justify the move
    caption: str  # human-friendly explanation


class SolvePayload(TypedDict, total=False):
    status: str  # 'none', 'unique', 'multiple', 'human'
    count: int
    solutions: list[Grid]
    moves: list[MovePayload]
    report: dict[str, Any]
