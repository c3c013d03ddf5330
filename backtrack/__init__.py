"""Brute-force backtracking Sudoku solver: board model, search, text I/O and tool wrappers."""

from .errors import CannotSolveBoard, InvalidBoard, SudokuError
from .search import SearchStats, solve
from .solver_core import UNKNOWN, Board

__all__ = [
    "Board",
    "CannotSolveBoard",
    "InvalidBoard",
    "SearchStats",
    "SudokuError",
    "UNKNOWN",
    "solve",
]
