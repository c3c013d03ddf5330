"""Tool-friendly wrappers: plain grids in, JSON-ready dicts out. Used by the CLI json mode and the HTTP API."""

# sudoku_tools.py
from __future__ import annotations

from typing import Optional

from types_sudoku import Grid, Issue, SolvePayload

from .errors import InvalidBoard, SudokuError
from .search import Progress, SearchStats, solve
from .solver_core import UNKNOWN, Board, duplicates, rc_to_key


def solve_tool(grid: Grid, progress: Optional[Progress] = None) -> SolvePayload:
    """Solve ``grid``. Failures come back as ``ok: False`` with an error block and no solution."""
    stats = SearchStats()
    try:
        solved = solve(Board(grid), stats=stats, progress=progress)
    except SudokuError as e:
        return {"ok": False, "solution": None, "stats": stats.as_dict(), "error": e.as_dict()}
    return {"ok": True, "solution": solved.rows(), "stats": stats.as_dict()}


def sanity_check(original: Optional[Grid], current: Grid) -> dict:
    """List duplicate digits per unit and, when ``original`` is given, givens that were overwritten."""
    try:
        board = Board(current)
        given = Board(original) if original is not None else None
    except InvalidBoard as e:
        return {"ok": False, "complete": False, "valid": False, "issues": [], "error": e.as_dict()}
    if given is not None and given.size != board.size:
        e = InvalidBoard("original and current differ in size")
        return {"ok": False, "complete": False, "valid": False, "issues": [], "error": e.as_dict()}

    issues: list[Issue] = []
    if given is not None:
        for r in range(board.size):
            for c in range(board.size):
                g = given[r, c]
                if g != UNKNOWN and board[r, c] not in (UNKNOWN, g):
                    issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                                   "given": g, "found": board[r, c]})
    for unit, cells in board.units():
        dups = duplicates(board[rc] for rc in cells)
        if dups:
            bad = [rc_to_key(r, c) for r, c in cells if board[r, c] in dups]
            issues.append({"type": "duplicate", "unit": unit, "digits": sorted(dups), "cells": bad})

    valid = board.is_valid()
    return {"ok": len(issues) == 0, "complete": board.is_complete(), "valid": valid, "issues": issues}


def render_tool(grid: Grid) -> dict:
    try:
        return {"ok": True, "text": Board(grid).render()}
    except InvalidBoard as e:
        return {"ok": False, "text": None, "error": e.as_dict()}
