# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "backtrack" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

CLASSIC = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def classic():
    return [row[:] for row in CLASSIC]


@pytest.fixture
def classic_solution():
    return [row[:] for row in CLASSIC_SOLUTION]


@pytest.fixture
def easy(classic_solution):
    # the known solution with its main diagonal and last row blanked
    grid = [row[:] for row in classic_solution]
    for i in range(9):
        grid[i][i] = 0
        grid[8][i] = 0
    return grid


@pytest.fixture
def unsolvable():
    # valid as given, but r1c9 can take neither 1..8 (row) nor 9 (column)
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[3][8] = 9
    return grid
