"""Batch solver: runs every puzzle of a file (one per line) through brute force and human solving, in parallel across puzzles."""

# bench_cli.py
# Usage:
#   python -m apps.cli.bench_cli --file puzzles.txt --workers 4 --out bench.json

import argparse
import json
import logging
import sys
import time
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path

from tqdm import tqdm

from sudoku_solver.config import SolverConfig, load_config
from sudoku_solver.errors import SudokuError
from sudoku_solver.moves import report
from sudoku_solver.sudoku import Sudoku

log = logging.getLogger(__name__)


def run_one(line: str, config: SolverConfig) -> dict:
    t0 = time.perf_counter()
    rec = {"puzzle": line}
    try:
        sudoku = Sudoku(line, config=config)
        rec["solutions"] = sudoku.num_solutions()
        if sudoku.solution.is_unique():
            human = sudoku.solve_human()
            summary = report(human.moves)
            rec["moves"] = len(human.moves)
            rec["difficulty"] = round(summary.total_difficulty, 2)
            rec["techniques"] = summary.counts
    except SudokuError as e:
        rec["error"] = f"{type(e).__name__}: {e}"
    rec["seconds"] = round(time.perf_counter() - t0, 4)
    return rec


def load_puzzles(path: str) -> list[str]:
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [ln.strip() for ln in lines if ln.strip() and not ln.lstrip().startswith("#")]


def run_batch(puzzles: list[str], config: SolverConfig, workers: int = 1, progress: bool = True) -> list[dict]:
    if workers <= 1:
        return [run_one(p, config) for p in tqdm(puzzles, disable=not progress, desc="puzzles")]
    with ProcessPoolExecutor(max_workers=workers) as pool:
        it = pool.map(run_one, puzzles, [config] * len(puzzles))
        return list(tqdm(it, total=len(puzzles), disable=not progress, desc="puzzles"))


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--file", required=True)
    ap.add_argument("--workers", type=int, default=1)
    ap.add_argument("--config", type=str, default=None)
    ap.add_argument("--set", dest="overrides", action="append", default=[])
    ap.add_argument("--out", type=str, default=None, help="write results JSON here instead of stdout")
    ap.add_argument("--no-progress", action="store_true")
    args = ap.parse_args(argv)

    cfg = load_config(args.config, args.overrides)
    logging.basicConfig(level=cfg.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    puzzles = load_puzzles(args.file)
    results = run_batch(puzzles, cfg, args.workers, progress=not args.no_progress)
    failed = sum(1 for r in results if "error" in r)
    payload = {
        "count": len(results),
        "failed": failed,
        "seconds": round(sum(r["seconds"] for r in results), 4),
        "results": results,
    }
    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2), encoding="utf-8")
        log.info("wrote %d results to %s", len(results), args.out)
    else:
        print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
