"""Tic-tac-toe against an AI that searches the whole game tree with minimax."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

SIZE = 3
EMPTY = " "
MAX_PLAYER = "X"
MIN_PLAYER = "O"
WIN = 10

Board = list[list[str]]


def _copy(board: Sequence[Sequence[str]]) -> Board:
    grid = [list(row) for row in board]
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("a board must have 3 rows of 3 cells")
    return grid


def _lines(board: Sequence[Sequence[str]]) -> Iterator[tuple[str, str, str]]:
    for i in range(SIZE):
        yield board[i][0], board[i][1], board[i][2]
        yield board[0][i], board[1][i], board[2][i]
    yield board[0][0], board[1][1], board[2][2]
    yield board[0][2], board[1][1], board[2][0]


def evaluate(board: Sequence[Sequence[str]], ai: str) -> int:
    """10 when the first completed line belongs to ``ai``, -10 for anyone else, else 0."""
    for a, b, c in _lines(board):
        if a != EMPTY and a == b == c:
            return WIN if a == ai else -WIN
    return 0


def moves_left(board: Sequence[Sequence[str]]) -> bool:
    """True while some cell is empty."""
    return any(cell == EMPTY for row in board for cell in row)


def _minimax(grid: Board, depth: int, maximizing: bool, ai: str, user: str) -> int:
    score = evaluate(grid, ai)
    if score in (WIN, -WIN):
        return score - depth
    if not moves_left(grid):
        return 0

    mark = ai if maximizing else user
    values = []
    for row in grid:
        for col, cell in enumerate(row):
            if cell == EMPTY:
                row[col] = mark
                values.append(_minimax(grid, depth + 1, not maximizing, ai, user))
                row[col] = EMPTY
    return max(values, default=-1000) if maximizing else min(values, default=1000)


def minimax(
    board: Sequence[Sequence[str]], depth: int, maximizing: bool, ai: str, user: str
) -> int:
    """The minimax value of ``board`` for ``ai``; a decided game scores its result less ``depth``."""
    return _minimax(_copy(board), depth, maximizing, ai, user)


def _scored_moves(board: Sequence[Sequence[str]], ai: str, user: str) -> list[tuple[int, int, int]]:
    grid = _copy(board)
    scored = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == EMPTY:
                row[c] = ai
                scored.append((r, c, _minimax(grid, 0, False, ai, user)))
                row[c] = EMPTY
    return scored


def _choose(scored: list[tuple[int, int, int]]) -> tuple[int, int, int]:
    if not scored:
        raise ValueError("no moves are left")
    best = scored[0]
    for move in scored[1:]:
        if move[2] > best[2]:
            best = move
    return best


def best_move(board: Sequence[Sequence[str]], ai: str, user: str) -> tuple[int, int, int]:
    """``(row, col, score)`` of the first move with the highest minimax score for ``ai``."""
    return _choose(_scored_moves(board, ai, user))


def format_board(board: Sequence[Sequence[str]]) -> str:
    """The board with ``|`` between cells and ``---+---+---`` between rows."""
    rows = [" " + " | ".join(row) for row in board]
    return "\n---+---+---\n".join(rows)


def _show(board: Board) -> None:
    print()
    print(format_board(board))
    print()


def _user_move(board: Board, user: str) -> None:
    while True:
        parts = input("Enter your move (row and column 0-2): ").split()
        try:
            row, col = int(parts[0]), int(parts[1])
        except (IndexError, ValueError):
            row = col = -1
        if 0 <= row < SIZE and 0 <= col < SIZE and board[row][col] == EMPTY:
            board[row][col] = user
            return
        print("Invalid move. Try again.")


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game of tic-tac-toe against the minimax AI."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against a minimax AI.")
    parser.parse_args(argv)

    try:
        user = input("Choose your symbol (X or O): ").strip()[:1].upper()
        if not user:
            print("A symbol is required.")
            return 1
        ai = "O" if user == "X" else "X"
        int(input("Enter search depth (ply): "))
    except ValueError:
        print("The search depth must be a whole number.")
        return 1
    except EOFError:
        return 1

    board: Board = [[EMPTY] * SIZE for _ in range(SIZE)]
    _show(board)
    user_turn = user == "X"
    try:
        while True:
            if user_turn:
                _user_move(board, user)
            else:
                scored = _scored_moves(board, ai, user)
                for r, c, value in scored:
                    print(f"Evaluated AI move ({r}, {c}) => Heuristic: {value}")
                r, c, value = _choose(scored)
                board[r][c] = ai
                print(f"AI chooses move ({r}, {c}) with heuristic {value}")

            _show(board)

            score = evaluate(board, ai)
            if score in (WIN, -WIN):
                if (score > 0 and ai == MAX_PLAYER) or (score < 0 and ai == MIN_PLAYER):
                    print("AI wins!")
                else:
                    print("You win!")
                break
            if not moves_left(board):
                print("It's a draw!")
                break
            user_turn = not user_turn
    except EOFError:
        return 1
    return 0