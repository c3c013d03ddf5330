"""Recursive backtracking search.

No propagation and no cell-ordering heuristic: every call re-checks the whole
board, branches on the first unknown cell in row-major order and tries the
digits ``1..N`` in ascending order. Each call works on its own clone, so the
caller's board is never modified.
"""

# search.py
from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Callable, Optional

from .errors import CannotSolveBoard, InvalidBoard, SudokuError
from .solver_core import Board


@dataclass
class SearchStats:
    nodes: int = 0  # recursive entries, including the top-level call
    backtracks: int = 0  # candidates whose subtree failed
    depth: int = 0  # depth of the node being visited
    max_depth: int = 0
    elapsed: float = 0.0  # seconds

    def as_dict(self) -> dict:
        d = asdict(self)
        d.pop("depth")
        d["elapsed"] = round(self.elapsed, 4)
        return d


Progress = Callable[[SearchStats], None]


def solve(board: Board, *, stats: Optional[SearchStats] = None, progress: Optional[Progress] = None) -> Board:
    """Return a complete, valid board, or raise.

    Raises:
        InvalidBoard: ``board`` already repeats a digit in a row, column or pod.
        CannotSolveBoard: ``board`` is valid but has no completion.

    A board that is already solved is returned as-is (same object).
    """
    if stats is None:
        stats = SearchStats()
    t0 = time.perf_counter()
    try:
        return _search(board, 0, stats, progress)
    finally:
        stats.elapsed += time.perf_counter() - t0


def _search(board: Board, depth: int, stats: SearchStats, progress: Optional[Progress]) -> Board:
    stats.nodes += 1
    stats.depth = depth
    if depth > stats.max_depth:
        stats.max_depth = depth
    if progress is not None:
        progress(stats)

    complete = board.is_complete()
    valid = board.is_valid()

    if complete and valid:
        return board
    if not valid:
        raise InvalidBoard()

    work = board.clone()
    cell = work.first_unknown()
    for digit in range(1, work.size + 1):
        work[cell] = digit
        try:
            return _search(work, depth + 1, stats, progress)
        except SudokuError:
            stats.backtracks += 1

    raise CannotSolveBoard()
