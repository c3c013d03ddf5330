# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from fastapi import FastAPI
from pydantic import BaseModel

from backtrack.sudoku_tools import render_tool, sanity_check, solve_tool

app = FastAPI(title="Sudoku Backtracking Solver API")


class GridModel(BaseModel):
    grid: list[list[int]]


class SanityRequest(BaseModel):
    original: list[list[int]] | None = None
    current: list[list[int]]


@app.post("/solve")
def api_solve(payload: GridModel):
    return solve_tool(payload.grid)


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)


@app.post("/render")
def api_render(payload: GridModel):
    return render_tool(payload.grid)
