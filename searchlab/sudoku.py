"""Sudoku solved by exhaustive backtracking over the empty cells."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

SIZE = 9
BOX = 3
EMPTY = "."
DIGITS = "123456789"

Grid = list[list[str]]

PUZZLE = (
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
)


def _as_grid(board: Sequence[Sequence[str]]) -> Grid:
    grid = [list(row) for row in board]
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("a sudoku board must have 9 rows of 9 cells")
    for row in grid:
        for cell in row:
            if cell != EMPTY and cell not in DIGITS:
                raise ValueError(f"invalid cell {cell!r}")
    return grid


def is_valid(board: Sequence[Sequence[str]], row: int, col: int, digit: str) -> bool:
    """True when ``digit`` appears nowhere in the row, column or box of ``(row, col)``."""
    if digit in board[row] or any(line[col] == digit for line in board):
        return False
    top, left = row // BOX * BOX, col // BOX * BOX
    return all(
        board[r][c] != digit for r in range(top, top + BOX) for c in range(left, left + BOX)
    )


def solve_sudoku(board: Sequence[Sequence[str]]) -> Grid:
    """Return a solved copy of ``board``; cells are digit characters or ``'.'``.

    The whole search tree is explored and the last solution found is returned.
    Raises ValueError when the board is malformed or has no solution.
    """
    grid = _as_grid(board)
    empties = [(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == EMPTY]
    answer: Grid | None = None

    def fill(index: int) -> None:
        nonlocal answer
        if index == len(empties):
            answer = [row[:] for row in grid]
            return
        r, c = empties[index]
        for digit in DIGITS:
            if is_valid(grid, r, c, digit):
                grid[r][c] = digit
                fill(index + 1)
                grid[r][c] = EMPTY

    fill(0)
    if answer is None:
        raise ValueError("the puzzle has no solution")
    return answer


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Each row's cells followed by a space, one row per line."""
    return "\n".join("".join(f"{cell} " for cell in row) for row in board)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the built-in puzzle and print it."""
    parser = argparse.ArgumentParser(description="Solve a sudoku puzzle.")
    parser.parse_args(argv)

    try:
        solved = solve_sudoku(PUZZLE)
    except ValueError as exc:
        print(exc)
        return 1
    print("Solved Sudoku:")
    print(format_board(solved))
    return 0