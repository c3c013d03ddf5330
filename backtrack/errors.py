"""Failure taxonomy for the solver. Each kind carries a stable exit code and message."""

from __future__ import annotations

from types_sudoku import ErrorInfo


class SudokuError(Exception):
    code = 1
    message = "sudoku error"

    def __init__(self, detail: str | None = None):
        super().__init__(self.message)
        self.detail = detail

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return self.message

    def as_dict(self) -> ErrorInfo:
        return {"kind": self.kind, "code": self.code, "message": self.message}


class InvalidBoard(SudokuError):
    """A row, column or pod repeats a digit, or the input is not a square grid."""

    code = 10
    message = "invalid board"


class CannotSolveBoard(SudokuError):
    """The board is valid but no assignment of the unknown cells completes it."""

    code = 11
    message = "cannot solve board"
