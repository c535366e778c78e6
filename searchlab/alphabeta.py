"""Tic-tac-toe against an AI playing O, searched with alpha-beta pruning."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

SIZE = 3
EMPTY = " "
AI = "O"
HUMAN = "X"
_RULE = "-------------"

Board = list[list[str]]


def _copy(board: Sequence[Sequence[str]]) -> Board:
    grid = [list(row) for row in board]
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("a board must have 3 rows of 3 cells")
    return grid


def _score(mark: str) -> int | None:
    if mark == AI:
        return 1
    if mark == HUMAN:
        return -1
    return None


def evaluate(board: Sequence[Sequence[str]]) -> int:
    """1 when O holds the first completed line, -1 when X does, else 0."""
    lines = []
    for i in range(SIZE):
        lines.append((board[i][0], board[i][1], board[i][2]))
        lines.append((board[0][i], board[1][i], board[2][i]))
    lines.append((board[0][0], board[1][1], board[2][2]))
    lines.append((board[0][2], board[1][1], board[2][0]))
    for a, b, c in lines:
        if a == b == c:
            score = _score(a)
            if score is not None:
                return score
    return 0


def is_draw(board: Sequence[Sequence[str]]) -> bool:
    """True when no cell is empty."""
    return all(cell != EMPTY for row in board for cell in row)


def _search(grid: Board, depth: int, is_max: bool, alpha: int, beta: int) -> int:
    score = evaluate(grid)
    if score:
        return score
    if is_draw(grid):
        return 0

    mark = AI if is_max else HUMAN
    best = -1000 if is_max else 1000
    for row in grid:
        # A cut-off ends the scan of the current row only.
        for col in range(SIZE):
            if row[col] != EMPTY:
                continue
            row[col] = mark
            value = _search(grid, depth + 1, not is_max, alpha, beta)
            row[col] = EMPTY
            if is_max:
                best = max(best, value)
                alpha = max(alpha, best)
            else:
                best = min(best, value)
                beta = min(beta, best)
            if beta <= alpha:
                break
    return best


def alpha_beta(
    board: Sequence[Sequence[str]], depth: int, is_max: bool, alpha: int, beta: int
) -> int:
    """The game value of ``board`` for O (1 win, 0 draw, -1 loss) within ``alpha``..``beta``."""
    return _search(_copy(board), depth, is_max, alpha, beta)


def find_best_move(board: Sequence[Sequence[str]]) -> tuple[int, int]:
    """The first cell with the highest value for O. Raises ValueError when none is free."""
    grid = _copy(board)
    best_value = -1000
    best: tuple[int, int] | None = None
    for r, row in enumerate(grid):
        for c in range(SIZE):
            if row[c] == EMPTY:
                row[c] = AI
                value = _search(grid, 0, False, -1000, 1000)
                row[c] = EMPTY
                if value > best_value:
                    best_value, best = value, (r, c)
    if best is None:
        raise ValueError("no moves are left")
    return best


def format_board(board: Sequence[Sequence[str]]) -> str:
    """The board in a box, empty cells showing their block number 0-8."""
    lines = [_RULE]
    for r, row in enumerate(board):
        cells = "".join(
            f"{r * SIZE + c if cell == EMPTY else cell} | " for c, cell in enumerate(row)
        )
        lines.append("| " + cells)
        lines.append(_RULE)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Play tic-tac-toe as X against the alpha-beta AI."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against an alpha-beta AI.")
    parser.parse_args(argv)

    board: Board = [[EMPTY] * SIZE for _ in range(SIZE)]
    print("Welcome to Tic Tac Toe!")
    print("Board positions are numbered 0-8 as follows:")
    print(format_board(board))

    while True:
        try:
            text = input("Enter your move (block number 0-8): ")
        except EOFError:
            return 1
        try:
            block = int(text.strip())
        except ValueError:
            block = -1
        if not 0 <= block <= 8:
            print("Invalid block number. Please enter a number between 0-8.")
            continue
        row, col = divmod(block, SIZE)
        if board[row][col] != EMPTY:
            print("Invalid move. This position is already taken. Try again.")
            continue

        board[row][col] = HUMAN
        print(format_board(board))
        if evaluate(board) == -1:
            print("You win!")
            break
        if is_draw(board):
            print("It's a draw!")
            break

        print("AI is making a move...")
        row, col = find_best_move(board)
        board[row][col] = AI
        print(format_board(board))
        if evaluate(board) == 1:
            print("AI wins!")
            break
        if is_draw(board):
            print("It's a draw!")
            break
    return 0