# tests/test_solver_basics.py
import pytest

from backtrack.errors import CannotSolveBoard, InvalidBoard
from backtrack.search import SearchStats, solve
from backtrack.solver_core import Board


def _givens_kept(puzzle, solved):
    return all(v == 0 or solved[r, c] == v for r, row in enumerate(puzzle) for c, v in enumerate(row))


def test_solves_classic_board(classic, classic_solution):
    stats = SearchStats()
    solved = solve(Board(classic), stats=stats)
    assert solved.rows()[0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]
    assert solved.rows() == classic_solution
    assert solved.is_valid()
    assert solved.is_complete()
    assert stats.nodes > 1
    assert stats.max_depth == sum(row.count(0) for row in classic)


def test_solve_leaves_input_untouched(easy):
    board = Board(easy)
    before = board.rows()
    solve(board)
    assert board.rows() == before


def test_solved_board_is_returned_unchanged(classic_solution):
    board = Board(classic_solution)
    stats = SearchStats()
    assert solve(board, stats=stats) is board
    assert stats.nodes == 1


def test_solves_partially_filled(easy):
    solved = solve(Board(easy))
    assert solved.is_complete() and solved.is_valid()
    assert _givens_kept(easy, solved)


def test_solves_4x4():
    puzzle = [
        [1, 0, 0, 4],
        [0, 4, 0, 0],
        [0, 0, 4, 0],
        [4, 0, 0, 1],
    ]
    solved = solve(Board(puzzle))
    assert solved.is_complete() and solved.is_valid()
    assert _givens_kept(puzzle, solved)


def test_duplicate_in_row_is_rejected_without_search():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = 5
    grid[0][4] = 5
    stats = SearchStats()
    with pytest.raises(InvalidBoard) as exc:
        solve(Board(grid), stats=stats)
    assert stats.nodes == 1
    assert exc.value.code == 10
    assert str(exc.value) == "invalid board"


def test_complete_but_invalid_is_rejected(classic_solution):
    classic_solution[0][0] = 3
    with pytest.raises(InvalidBoard):
        solve(Board(classic_solution))


def test_unsolvable_board(unsolvable):
    board = Board(unsolvable)
    assert board.is_valid()
    stats = SearchStats()
    with pytest.raises(CannotSolveBoard) as exc:
        solve(board, stats=stats)
    assert exc.value.code == 11
    assert str(exc.value) == "cannot solve board"
    # one root plus the nine rejected candidates for r1c9
    assert stats.nodes == 10
    assert stats.backtracks == 9


def test_progress_called_per_node(unsolvable):
    seen = []
    with pytest.raises(CannotSolveBoard):
        solve(Board(unsolvable), progress=lambda s: seen.append((s.nodes, s.depth)))
    assert seen[0] == (1, 0)
    assert len(seen) == 10
    assert all(depth == 1 for _, depth in seen[1:])
