"""The N-queens puzzle solved by backtracking, one row at a time."""

from __future__ import annotations

import argparse
import itertools
from collections.abc import Iterator, Sequence


def is_safe(board: Sequence[int], row: int, col: int) -> bool:
    """True when a queen at ``(row, col)`` shares no column or diagonal with rows above it.

    ``board[i]`` is the column of the queen in row ``i``; only rows before ``row`` count.
    """
    return all(
        placed != col and abs(placed - col) != abs(i - row)
        for i, placed in enumerate(board[:row])
    )


def _place(board: list[int], n: int) -> Iterator[tuple[int, ...]]:
    row = len(board)
    if row == n:
        yield tuple(board)
        return
    for col in range(n):
        if is_safe(board, row, col):
            board.append(col)
            yield from _place(board, n)
            board.pop()


def solve_nqueens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` queens, as the column of the queen in each row.

    Placements come in the order a left-to-right backtracking search finds them.
    """
    if n <= 0:
        raise ValueError("Invalid input! N must be positive.")
    return _place([], n)


def format_board(board: Sequence[int]) -> str:
    """The board drawn with ``Q`` for queens and ``.`` for empty squares."""
    n = len(board)
    return "\n".join(
        "".join(" Q " if placed == col else " . " for col in range(n)) for placed in board
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for N and whether to list every solution, then print the boards."""
    parser = argparse.ArgumentParser(description="Place N queens on an N by N board.")
    parser.parse_args(argv)

    try:
        n = int(input("Enter the number of queens (N): "))
    except (ValueError, EOFError):
        print("Invalid input! N must be positive.")
        return 1
    if n <= 0:
        print("Invalid input! N must be positive.")
        return 1

    try:
        choice = input("Do you want to find all solutions? (y/n): ").strip()
    except EOFError:
        choice = ""
    find_all = choice[:1] in ("y", "Y")

    solutions: Iterator[tuple[int, ...]] = solve_nqueens(n)
    if not find_all:
        solutions = itertools.islice(solutions, 1)

    found = False
    for board in solutions:
        found = True
        print("Solution:")
        print(format_board(board))
        print()
    if not found:
        print(f"No solution exists for N = {n}")
    return 0