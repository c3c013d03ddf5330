"""Text in, text out.

Input is one board row per line, cells separated by whitespace. The first
line fixes the width W; exactly W lines are read and the rest of the input is
ignored. Any token that is not a non-negative integer is read as 0
(unknown), so ``.``, ``_`` or ``x`` all work as blanks.
"""

# board_io.py
from __future__ import annotations

import io
from typing import Iterable, TextIO

from .errors import InvalidBoard
from .solver_core import UNKNOWN, Board


def parse_token(tok: str) -> int:
    # int() also takes '1_0' and non-ASCII digits; those are blanks here
    if not tok.isascii() or "_" in tok:
        return UNKNOWN
    try:
        v = int(tok)
    except ValueError:
        return UNKNOWN
    return v if v >= 0 else UNKNOWN


def parse_rows(lines: Iterable[str]) -> list[list[int]]:
    rows: list[list[int]] = []
    width = -1
    for line in lines:
        tokens = line.split()
        if width == -1:
            width = len(tokens)
            if width == 0:
                raise InvalidBoard("first line is empty")
        if len(tokens) != width:
            raise InvalidBoard(f"line {len(rows) + 1} has {len(tokens)} cells, expected {width}")
        rows.append([parse_token(t) for t in tokens])
        if len(rows) == width:
            return rows
    raise InvalidBoard(f"expected {max(width, 1)} lines, got {len(rows)}")


def parse_board(lines: Iterable[str]) -> Board:
    return Board(parse_rows(lines))


def parse_board_text(text: str) -> Board:
    return parse_board(io.StringIO(text))


def read_board(stream: TextIO) -> Board:
    return parse_board(stream)


def format_board(board: Board) -> str:
    return board.render() + "\n"
