"""Command-line front end: solve one puzzle by brute force, by human techniques, or ask for the next hints."""

# solve_cli.py
# - Reads a puzzle from --puzzle (81-char string, '.' or '0' for blanks) or --file
# - brute: counts solutions (capped) and prints them
# - human: solves with techniques and prints the move trail and a difficulty report
# - hint:  prints the next moves up to --max-difficulty
#
# Usage:
#   python -m apps.cli.solve_cli --puzzle "53..7....6..195..." --mode human
#   python -m apps.cli.solve_cli --file puzzle.txt --mode brute --config configs/solver.yaml

import argparse
import json
import logging
import sys
from pathlib import Path

from sudoku_solver.config import load_config
from sudoku_solver.errors import SudokuError
from sudoku_solver.parsing import parse_digits, to_rows
from sudoku_solver.coords import SudokuSize
from sudoku_solver.sudoku_tools import next_moves, solve_tool

log = logging.getLogger(__name__)


def read_puzzle(args) -> list[list[int]]:
    text = args.puzzle if args.puzzle is not None else Path(args.file).read_text(encoding="utf-8")
    digits = parse_digits(text)
    size = SudokuSize.from_length(len(digits))
    return to_rows(digits, size.house_size)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=__doc__)
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--puzzle", type=str)
    src.add_argument("--file", type=str)
    ap.add_argument("--mode", type=str, default="brute", choices=["brute", "human", "hint"])
    ap.add_argument("--config", type=str, default=None, help="YAML solver config")
    ap.add_argument("--set", dest="overrides", action="append", default=[], help="config override key=value")
    ap.add_argument("--max-difficulty", type=str, default="Claiming Candidates")
    ap.add_argument("--max-moves", type=int, default=5)
    ap.add_argument("--log-level", type=str, default=None)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config, args.overrides)
    logging.basicConfig(level=(args.log_level or cfg.log_level).upper(), format="%(levelname)s %(name)s: %(message)s")
    try:
        grid = read_puzzle(args)
        if args.mode == "hint":
            payload = next_moves(grid, None, args.max_difficulty, args.max_moves, chain=True)
        else:
            payload = solve_tool(grid, args.mode, cfg)
    except SudokuError as e:
        log.error("%s", e)
        print(json.dumps({"error": type(e).__name__, "detail": str(e)}, indent=2))
        return 1
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
