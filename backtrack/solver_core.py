"""Board state for the backtracking solver: unit math, duplicate checks and the Board type."""

# solver_core.py
# - valid_set: duplicate check over one unit (0 never counts)
# - which_pod: (row, col) -> pod index for an NxN board with sqrt(N) boxes
# - Board: square grid with completeness / validity checks and deep clone
# Rows and columns are 0-based here; the r1c1-style keys used in reports are 1-based.

from __future__ import annotations

from math import isqrt
from typing import Iterable, Iterator, Optional

from types_sudoku import Cell, Grid

from .errors import InvalidBoard

UNKNOWN = 0


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_side(size: int) -> int:
    side = isqrt(size)
    if size < 1 or side * side != size:
        raise InvalidBoard(f"dimension {size} has no integer square root")
    return side


def which_pod(r: int, c: int, size: int = 9) -> int:
    side = box_side(size)
    return side * (r // side) + (c // side)


def valid_set(values: Iterable[int]) -> bool:
    """True if no nonzero value appears twice."""
    seen = set()
    for v in values:
        if v != UNKNOWN and v in seen:
            return False
        seen.add(v)
    return True


def duplicates(values: Iterable[int]) -> set:
    seen = set()
    dups = set()
    for v in values:
        if v == UNKNOWN:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


class Board:
    """A square Sudoku grid. 0 marks an unknown cell.

    The constructor copies ``rows`` so the caller's lists are never aliased,
    and rejects anything that is not a square grid of ints in ``[0, N]``
    with :class:`InvalidBoard`.
    """

    def __init__(self, rows: Iterable[Iterable[int]]):
        vals = [list(row) for row in rows]
        size = len(vals)
        if size == 0:
            raise InvalidBoard("empty grid")
        for r, row in enumerate(vals):
            if len(row) != size:
                raise InvalidBoard(f"row {r + 1} has {len(row)} cells, expected {size}")
            for v in row:
                if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= size:
                    raise InvalidBoard(f"cell value {v!r} out of range 0..{size}")
        self._box = box_side(size)
        self._vals: Grid = vals

    @classmethod
    def empty(cls, size: int = 9) -> "Board":
        return cls([[UNKNOWN] * size for _ in range(size)])

    @property
    def size(self) -> int:
        return len(self._vals)

    @property
    def box(self) -> int:
        return self._box

    def rows(self) -> Grid:
        return clone_grid(self._vals)

    def __getitem__(self, rc: Cell) -> int:
        r, c = rc
        return self._vals[r][c]

    def __setitem__(self, rc: Cell, value: int) -> None:
        r, c = rc
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= self.size:
            raise InvalidBoard(f"cell value {value!r} out of range 0..{self.size}")
        self._vals[r][c] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._vals == other._vals

    def __repr__(self) -> str:
        return f"Board(size={self.size}, unknown={self.count_unknown()})"

    def __str__(self) -> str:
        return self.render()

    def count_unknown(self) -> int:
        return sum(row.count(UNKNOWN) for row in self._vals)

    def is_complete(self) -> bool:
        for row in self._vals:
            for v in row:
                if v == UNKNOWN:
                    return False
        return True

    def is_valid(self) -> bool:
        return self._valid_rows() and self._valid_cols() and self._valid_pods()

    def _valid_rows(self) -> bool:
        return all(valid_set(row) for row in self._vals)

    def _valid_cols(self) -> bool:
        return all(valid_set(col) for col in self.columns())

    def _valid_pods(self) -> bool:
        return all(valid_set(pod) for pod in self.pods())

    def columns(self) -> Grid:
        return [list(col) for col in zip(*self._vals)]

    def pods(self) -> Grid:
        n = self.size
        pods: Grid = [[] for _ in range(n)]
        for r, row in enumerate(self._vals):
            for c, v in enumerate(row):
                pods[which_pod(r, c, n)].append(v)
        return pods

    def units(self) -> Iterator[tuple[str, list[Cell]]]:
        """Yield ``(label, cells)`` for every row, column and pod (labels 1-based: r1, c1, b1)."""
        n = self.size
        for r in range(n):
            yield f"r{r + 1}", [(r, c) for c in range(n)]
        for c in range(n):
            yield f"c{c + 1}", [(r, c) for r in range(n)]
        side = self._box
        for b in range(n):
            r0 = side * (b // side)
            c0 = side * (b % side)
            yield f"b{b + 1}", [(r0 + i, c0 + j) for i in range(side) for j in range(side)]

    def first_unknown(self) -> Optional[Cell]:
        for r, row in enumerate(self._vals):
            for c, v in enumerate(row):
                if v == UNKNOWN:
                    return (r, c)
        return None

    def clone(self) -> "Board":
        dup = Board.__new__(Board)
        dup._box = self._box
        dup._vals = clone_grid(self._vals)
        return dup

    def render(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self._vals)
