"""Puzzles on rectangular grids: islands, dungeons and a knight on a board."""

from __future__ import annotations

import math
from collections.abc import Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_KNIGHT_MOVES = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)


def _neighbours(row: int, col: int, rows: int, cols: int):
    for d_row, d_col in _STEPS:
        next_row, next_col = row + d_row, col + d_col
        if 0 <= next_row < rows and 0 <= next_col < cols:
            yield next_row, next_col


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the area of the largest 4-connected group of 1 cells."""
    cells = [list(row) for row in grid]
    if not cells or not cells[0]:
        return 0
    rows, cols = len(cells), len(cells[0])
    best = 0
    for row in range(rows):
        for col in range(cols):
            if cells[row][col] != 1:
                continue
            cells[row][col] = 2
            stack = [(row, col)]
            area = 0
            while stack:
                current_row, current_col = stack.pop()
                area += 1
                for next_row, next_col in _neighbours(current_row, current_col, rows, cols):
                    if cells[next_row][next_col] == 1:
                        cells[next_row][next_col] = 2
                        stack.append((next_row, next_col))
            best = max(best, area)
    return best


def _fill(cells: list[list[int]], row: int, col: int) -> None:
    """Turn the start cell into land and flood every water cell reachable from it."""
    rows, cols = len(cells), len(cells[0])
    cells[row][col] = 1
    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        for next_row, next_col in _neighbours(current_row, current_col, rows, cols):
            if cells[next_row][next_col] == 0:
                cells[next_row][next_col] = 1
                stack.append((next_row, next_col))


def closed_island(grid: Sequence[Sequence[int]]) -> int:
    """Count groups of 0 cells that are not reached from the grid's border.

    The flood starts from every border cell, land or water, so water lying
    next to a border cell is removed along with water on the border itself.
    """
    cells = [list(row) for row in grid]
    if not cells or not cells[0]:
        return 0
    rows, cols = len(cells), len(cells[0])
    for row in range(rows):
        for col in range(cols):
            if row in (0, rows - 1) or col in (0, cols - 1):
                _fill(cells, row, col)
    count = 0
    for row in range(rows):
        for col in range(cols):
            if cells[row][col] == 0:
                count += 1
                _fill(cells, row, col)
    return count


def calculate_minimum_hp(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the least starting health to cross the dungeon to its bottom-right room.

    Health must stay at least 1 at every step; the path moves right or down.
    """
    if not dungeon or not dungeon[0]:
        raise ValueError("the dungeon must have at least one room")
    rows, cols = len(dungeon), len(dungeon[0])
    need = [[math.inf] * (cols + 1) for _ in range(rows + 1)]
    need[rows][cols - 1] = 1
    need[rows - 1][cols] = 1
    for row in reversed(range(rows)):
        for col in reversed(range(cols)):
            required = min(need[row + 1][col], need[row][col + 1]) - dungeon[row][col]
            need[row][col] = max(1, required)
    return int(need[0][0])


def knight_probability(n: int, k: int, row: int, column: int) -> float:
    """Probability that a knight making k random moves stays on an n-by-n board."""
    if not (0 <= row < n and 0 <= column < n):
        raise ValueError("the knight must start on the board")
    stay = [[1.0] * n for _ in range(n)]
    for _ in range(k):
        stay = [
            [
                sum(
                    stay[r + d_row][c + d_col]
                    for d_row, d_col in _KNIGHT_MOVES
                    if 0 <= r + d_row < n and 0 <= c + d_col < n
                )
                / 8
                for c in range(n)
            ]
            for r in range(n)
        ]
    return stay[row][column]