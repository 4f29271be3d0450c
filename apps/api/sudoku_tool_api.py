# sudoku_tool_api.py
# FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from sudoku_solver.config import SolverConfig
from sudoku_solver.errors import SudokuError
from sudoku_solver.sudoku_tools import (
    sanity_check, compute_candidates_tool, next_moves as _next_moves,
    apply_action as _apply_action, solve_tool,
)

app = FastAPI(title="Sudoku Solver Tool API")


@app.exception_handler(SudokuError)
def sudoku_error_handler(request: Request, exc: SudokuError):
    return JSONResponse(status_code=422, content={"error": type(exc).__name__, "detail": str(exc)})


@app.exception_handler(ValueError)
def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=400, content={"error": "ValueError", "detail": str(exc)})


class GridModel(BaseModel):
    grid: list[list[int]]

class SanityRequest(BaseModel):
    original: list[list[int]]
    current: list[list[int]]

class NextMovesRequest(BaseModel):
    current: list[list[int]]
    candidates: dict[str, list[int]] | None = None
    max_difficulty: str = "Claiming Candidates"
    max_moves: int = 3
    chain: bool = True

class MoveModel(BaseModel):
    # type defaults to placement unless eliminations are given
    type: str | None = None
    cell: str | None = None
    digit: int | None = None
    eliminate: list[str] | None = None
    eliminations: dict[str, list[int]] | None = None

class ApplyMoveRequest(BaseModel):
    current: list[list[int]]
    candidates: dict[str, list[int]] | None = None
    move: MoveModel

class SolveRequest(BaseModel):
    grid: list[list[int]]
    max_solutions: int = 5

@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)

@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)

@app.post("/next_moves")
def api_moves(req: NextMovesRequest):
    return _next_moves(req.current, req.candidates, req.max_difficulty, req.max_moves, req.chain)

@app.post("/apply_move")
def api_apply(req: ApplyMoveRequest):
    return _apply_action(req.current, req.candidates, req.move.model_dump(exclude_none=True))

@app.post("/solve")
def api_solve(req: SolveRequest):
    return solve_tool(req.grid, "brute", SolverConfig(max_solutions=req.max_solutions))

@app.post("/human_solve")
def api_human_solve(req: SolveRequest):
    return solve_tool(req.grid, "human", SolverConfig(max_solutions=req.max_solutions))
