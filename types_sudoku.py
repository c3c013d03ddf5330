# types_sudoku.py
from __future__ import annotations

from typing import Any, Optional, TypedDict

Grid = list[list[int]]
"""An NxN Sudoku grid as rows of integers (0 = unknown)."""

Cell = tuple[int, int]
"""(row, col), 0-based."""


class ErrorInfo(TypedDict):
    """Failure block attached to tool payloads."""

    kind: str  # 'InvalidBoard' or 'CannotSolveBoard'
    code: int  # process exit code (10 / 11)
    message: str  # 'invalid board' / 'cannot solve board'


class SolvePayload(TypedDict, total=False):
    """Result of a solve as handed to the CLI json mode and the HTTP API."""

    ok: bool
    solution: Optional[Grid]  # None whenever ok is False
    stats: dict[str, Any]  # nodes, backtracks, max_depth, elapsed
    error: ErrorInfo


class Issue(TypedDict, total=False):
    """One problem found by the sanity check."""

    type: str  # 'duplicate' or 'given_overwritten'
    unit: str  # e.g. 'r1', 'c4', 'b9'
    digits: list[int]
    cells: list[str]  # e.g. ['r1c1', 'r1c5']
    cell: str
    given: int
    found: int
