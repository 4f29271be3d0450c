# tests/test_config_cli.py
import json

import pytest

from apps.cli import bench_cli, solve_cli
from conftest import ALL_SINGLE_POSS, CLASSIC, CLASSIC_SOLUTION, ROOT, TWO_SOLUTIONS
from sudoku_solver.config import SolverConfig, load_config, parse_overrides


def test_default_config_file_loads():
    cfg = load_config(ROOT / "configs" / "solver.yaml")
    assert cfg == SolverConfig()


def test_yaml_and_overrides(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text("max_solutions: 3\ntechniques: [single_candidate, x_wing]\nbanner: hello\n", encoding="utf-8")
    cfg = load_config(path, ["allow_guess=false", "max_solutions=7"])
    assert cfg.max_solutions == 7
    assert cfg.allow_guess is False
    assert cfg.techniques == ["single_candidate", "x_wing"]
    assert cfg.extra == {"banner": "hello"}
    assert cfg.as_dict()["max_solutions"] == 7


def test_bad_overrides():
    with pytest.raises(ValueError):
        parse_overrides(["max_solutions"])
    with pytest.raises(ValueError):
        load_config(None, ["max_solutions=0"])


def test_solve_cli_brute(capsys):
    assert solve_cli.main(["--puzzle", CLASSIC, "--mode", "brute"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["status"] == "unique"
    flat = "".join(str(v) for row in out["solutions"][0] for v in row)
    assert flat == CLASSIC_SOLUTION


def test_solve_cli_human_from_file(tmp_path, capsys):
    path = tmp_path / "puzzle.txt"
    path.write_text(ALL_SINGLE_POSS + "\n", encoding="utf-8")
    assert solve_cli.main(["--file", str(path), "--mode", "human"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["status"] == "human"
    assert out["report"]["placements"] == ALL_SINGLE_POSS.count("0")


def test_solve_cli_hint(capsys):
    assert solve_cli.main(["--puzzle", CLASSIC, "--mode", "hint", "--max-moves", "2"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert len(out["moves"]) == 2


def test_solve_cli_reports_errors(capsys):
    assert solve_cli.main(["--puzzle", CLASSIC[:80], "--mode", "brute"]) == 1
    out = json.loads(capsys.readouterr().out)
    assert out["error"] == "InputLengthError"

    assert solve_cli.main(["--puzzle", TWO_SOLUTIONS, "--set", "max_solutions=1"]) == 1
    out = json.loads(capsys.readouterr().out)
    assert out["error"] == "ExcessiveSolutionsError"


def test_bench_batch(tmp_path):
    path = tmp_path / "puzzles.txt"
    path.write_text(f"# sample\n{CLASSIC}\n\n{TWO_SOLUTIONS}\n{CLASSIC[:80]}\n", encoding="utf-8")
    puzzles = bench_cli.load_puzzles(str(path))
    assert len(puzzles) == 3
    results = bench_cli.run_batch(puzzles, SolverConfig(), workers=1, progress=False)
    assert results[0]["solutions"] == 1
    assert results[0]["moves"] >= CLASSIC.count("0")
    assert results[1]["solutions"] == 2
    assert "moves" not in results[1]
    assert results[2]["error"].startswith("InputLengthError")


def test_bench_cli_writes_output(tmp_path):
    src = tmp_path / "puzzles.txt"
    src.write_text(CLASSIC + "\n", encoding="utf-8")
    out = tmp_path / "bench.json"
    assert bench_cli.main(["--file", str(src), "--out", str(out), "--no-progress"]) == 0
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["count"] == 1
    assert payload["failed"] == 0
