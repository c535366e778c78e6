"""Tic-tac-toe against a rule-based computer, with wins found on a magic square."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

SIZE = 3
WIN_SUM = 15
EMPTY = 0
X = 1
O = 2

MAGIC_SQUARE = ((8, 1, 6), (3, 5, 7), (4, 9, 2))

_LINES = (
    tuple(tuple((r, c) for c in range(SIZE)) for r in range(SIZE))
    + tuple(tuple((r, c) for r in range(SIZE)) for c in range(SIZE))
    + (tuple((i, i) for i in range(SIZE)), tuple((i, SIZE - 1 - i) for i in range(SIZE)))
)
_PREFERRED = ((1, 1), (0, 0), (0, 2), (2, 0), (2, 2))
_SYMBOLS = {EMPTY: " . ", X: " X ", O: " O "}

Board = list[list[int]]


def _copy(board: Sequence[Sequence[int]]) -> Board:
    grid = [list(row) for row in board]
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("a board must have 3 rows of 3 cells")
    return grid


def check_win(board: Sequence[Sequence[int]], player: int) -> bool:
    """True when the magic numbers under ``player``'s marks add up to 15 along some line."""
    return any(
        sum(MAGIC_SQUARE[r][c] for r, c in line if board[r][c] == player) == WIN_SUM
        for line in _LINES
    )


def computer_move(
    board: Sequence[Sequence[int]], computer: int, player: int
) -> tuple[int, int]:
    """The cell the computer takes: a win, then a block, then centre, corners, anything.

    The board is left unchanged. Raises ValueError when no cell is free.
    """
    grid = _copy(board)
    empties = [(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == EMPTY]
    if not empties:
        raise ValueError("the board is full")

    for who in (computer, player):
        for r, c in empties:
            grid[r][c] = who
            won = check_win(grid, who)
            grid[r][c] = EMPTY
            if won:
                return r, c

    for r, c in _PREFERRED:
        if grid[r][c] == EMPTY:
            return r, c
    return empties[0]


def format_board(board: Sequence[Sequence[int]]) -> str:
    """The board with ``X``, ``O`` and ``.`` for empty cells, one row per line."""
    return "\n".join("".join(_SYMBOLS[cell] for cell in row) for row in board)


def _show(board: Board) -> None:
    print("\nCurrent Board:")
    print(format_board(board))


def _player_move(board: Board, player: int) -> None:
    while True:
        text = input("Enter your move (1-9): ")
        try:
            move = int(text.strip()) - 1
        except ValueError:
            move = -1
        if 0 <= move < SIZE * SIZE:
            r, c = divmod(move, SIZE)
            if board[r][c] == EMPTY:
                board[r][c] = player
                return
        print("Invalid move. Try again.")


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game of tic-tac-toe against the computer."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against the computer.")
    parser.parse_args(argv)

    try:
        choice = input("Do you want to be X or O? ").strip()
    except EOFError:
        return 1
    if choice[:1] in ("X", "x"):
        player, computer = X, O
    else:
        player, computer = O, X

    board: Board = [[EMPTY] * SIZE for _ in range(SIZE)]
    turn = X
    moves = 0
    try:
        while True:
            _show(board)
            if turn == player:
                _player_move(board, player)
                if check_win(board, player):
                    _show(board)
                    print("Player wins!")
                    break
            else:
                r, c = computer_move(board, computer, player)
                board[r][c] = computer
                if check_win(board, computer):
                    _show(board)
                    print("Computer wins!")
                    break
            turn = O if turn == X else X
            moves += 1
            if moves == SIZE * SIZE:
                _show(board)
                print("It's a draw!")
                break
    except EOFError:
        return 1
    return 0