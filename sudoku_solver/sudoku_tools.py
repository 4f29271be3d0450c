from __future__ import annotations
from types_sudoku import Grid, Candidates, MovePayload, SolvePayload
"""Tool-friendly wrappers around the engine: sanity checks, candidates, next moves with chaining, and solving. Grids are lists of rows; cells are keyed 'r{row}c{col}' (1-based)."""


# sudoku_tools.py
import logging

from .candidates import CandidateSet
from .config import SolverConfig
from .coords import House, SudokuSize, key_to_rc, rc_to_key
from .engine import HumanSolver
from .errors import InputParseError, InvalidLocationError
from .grid import PuzzleGrid
from .moves import CellCandidates, Hint, Move, report
from .parsing import parse_digits, to_rows
from .solution import Many, NoSolution
from .sudoku import Sudoku
from .techniques import Technique

log = logging.getLogger(__name__)


def _key(grid: PuzzleGrid, index: int) -> str:
    r, c = grid.layout.row_col(index)
    return rc_to_key(r + 1, c + 1)


def _index(grid: PuzzleGrid, key: str) -> int:
    try:
        r, c = key_to_rc(key)
    except (ValueError, IndexError):
        raise InputParseError(f"bad cell key {key!r}") from None
    n = grid.house_size
    if not (1 <= r <= n and 1 <= c <= n):
        raise InvalidLocationError(key)
    return grid.layout.index(r - 1, c - 1)


def _field(move: dict, name: str):
    if move.get(name) is None:
        raise InputParseError(f"move {move!r} needs '{name}'")
    return move[name]


def sanity_check(original: Grid, current: Grid) -> dict:
    size = SudokuSize.from_house_size(len(current))
    layout = size.layout()
    n = size.house_size
    flat_orig = parse_digits(original)
    flat = parse_digits(current)
    issues = []
    for i, (given, found) in enumerate(zip(flat_orig, flat)):
        if given != 0 and found not in (0, given):
            r, c = layout.row_col(i)
            issues.append({"type": "given_overwritten", "cell": rc_to_key(r + 1, c + 1), "given": given, "found": found})

    def duplicates_in_unit(vals):
        seen = set(); dups = set()
        for v in vals:
            if v == 0: continue
            if v in seen: dups.add(v)
            seen.add(v)
        return dups

    for kind, prefix in ((House.ROW, "r"), (House.COL, "c"), (House.BOX, "b")):
        for number in range(n):
            cells = layout.house(kind, number)
            dups = duplicates_in_unit([flat[i] for i in cells])
            if dups:
                bad = []
                for i in cells:
                    if flat[i] in dups:
                        r, c = layout.row_col(i)
                        bad.append(rc_to_key(r + 1, c + 1))
                issues.append({"type": "duplicate", "unit": f"{prefix}{number + 1}", "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def candidates_of(grid: PuzzleGrid) -> Candidates:
    return {_key(grid, c.index): c.candidates.digits() for c in grid.cells if not c.is_fixed}


def compute_candidates_tool(current: Grid) -> dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'candidates': {'r1c2': [1, 2, 5], ...}}."""
    return {"candidates": candidates_of(PuzzleGrid(parse_digits(current)))}


def restrict_candidates(sudoku: Sudoku, candidates: Candidates) -> None:
    """Narrow the grid's candidates to the pencil marks a caller already holds."""
    grid = sudoku.grid
    drop = []
    for key, digits in candidates.items():
        index = _index(grid, key)
        if grid.value(index):
            continue
        keep = CandidateSet.from_digits(digits, grid.width)
        gone = grid.candidates(index) - keep
        if gone:
            drop.append(CellCandidates(index, gone))
    if drop:
        sudoku.eliminate(drop)


def move_payload(grid: PuzzleGrid, step: Hint | Move, index: int | None = None) -> MovePayload:
    technique = step.technique
    out: MovePayload = {}
    if index is not None:
        out["index"] = index
    if technique is not None:
        out["technique"] = technique.name.lower()
        out["label"] = technique.label
        out["difficulty"] = technique.difficulty
    out["highlights"] = {"cells": [_key(grid, pair.index) for pair in step.used_to_solve]}
    if step.value_set is not None:
        cell = _key(grid, step.value_set.index)
        out.update(type="placement", cell=cell, digit=step.value_set.value)
        out["caption"] = f"{out.get('label', 'Placement')}: {cell} = {step.value_set.value}"
        return out
    elims = {_key(grid, pair.index): pair.candidates.digits() for pair in step.removed}
    out["type"] = "elimination"
    out["eliminations"] = elims
    digits = sorted({d for ds in elims.values() for d in ds})
    if len(digits) == 1:
        out["digit"] = digits[0]
        out["eliminate"] = list(elims)
    out["caption"] = f"{out.get('label', 'Elimination')}: remove {digits} from {', '.join(elims)}"
    return out


def next_moves(
    current: Grid,
    candidates: Candidates | None = None,
    max_difficulty: str = "Claiming Candidates",
    max_moves: int = 5,
    chain: bool = True,
) -> dict:
    """Up to `max_moves` moves using techniques no harder than `max_difficulty`.

    With `chain=True` every move is applied before looking for the next one, so
    follow-up moves are discovered; otherwise only the first move is returned.
    """
    limit = Technique.from_name(max_difficulty)
    sudoku = Sudoku(current, solve=False)
    if candidates is not None:
        restrict_candidates(sudoku, candidates)
    solver = HumanSolver(allow_guess=False)
    out_moves: list[MovePayload] = []
    while len(out_moves) < max_moves and sudoku.remaining > 0:
        hint = solver.next_hint_up_to(sudoku, limit)
        if hint is None:
            break
        out_moves.append(move_payload(sudoku.grid, hint, len(out_moves) + 1))
        if not chain:
            break
        sudoku.apply(hint)
    return {"moves": out_moves, "snapshot": {"current": sudoku.rows(), "candidates": candidates_of(sudoku.grid)}}


def apply_action(current: Grid, candidates: Candidates | None, move: dict) -> dict:
    sudoku = Sudoku(current, solve=False)
    if candidates is not None:
        restrict_candidates(sudoku, candidates)
    grid = sudoku.grid
    kind = move.get("type") or ("elimination" if "eliminations" in move or "eliminate" in move else "placement")
    if kind == "placement":
        sudoku.assign(_index(grid, _field(move, "cell")), int(_field(move, "digit")))
    else:
        elims = move.get("eliminations")
        if not elims:
            elims = {key: [_field(move, "digit")] for key in move.get("eliminate", [])}
        pairs = []
        for key, digits in elims.items():
            index = _index(grid, key)
            present = grid.candidates(index) & CandidateSet.from_digits(digits, grid.width)
            if present:
                pairs.append(CellCandidates(index, present))
        if pairs:
            sudoku.eliminate(pairs)
    return {"current": sudoku.rows(), "candidates": candidates_of(grid)}


def solve_tool(current: Grid, mode: str = "brute", config: SolverConfig | None = None) -> SolvePayload:
    config = config or SolverConfig()
    sudoku = Sudoku(current, config=config)
    n = sudoku.size.house_size
    solution = sudoku.solution
    if isinstance(solution, NoSolution):
        return {"status": "none", "count": 0, "solutions": []}
    if isinstance(solution, Many):
        return {"status": "multiple", "count": solution.num_solutions(), "solutions": [to_rows(s, n) for s in solution.solutions]}
    if mode != "human":
        return {"status": "unique", "count": 1, "solutions": [to_rows(solution.get(), n)]}
    human = sudoku.solver().solve_human(sudoku)
    payload: SolvePayload = {
        "status": "human",
        "count": 1,
        "solutions": [to_rows(human.values, n)],
        "moves": [move_payload(sudoku.grid, m, i + 1) for i, m in enumerate(human.moves)],
        "report": report(human.moves).as_dict(),
    }
    log.info("human solve used %d moves", len(human.moves))
    return payload

