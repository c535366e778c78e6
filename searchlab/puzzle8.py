"""Eight-puzzle solvers: A* and greedy best-first search on the Manhattan heuristic."""

from __future__ import annotations

import argparse
import heapq
import itertools
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

Board = tuple[tuple[int, ...], ...]

SIZE = 3
_DIRECTIONS = (("up", -1, 0), ("down", 1, 0), ("left", 0, -1), ("right", 0, 1))
_RULE = "---------"


def _as_board(board: Sequence[Sequence[int]]) -> Board:
    """Return ``board`` as a tuple of rows, checking it holds 0-8 exactly once."""
    rows = tuple(tuple(int(value) for value in row) for row in board)
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise ValueError("a board must have 3 rows of 3 numbers")
    values = [value for row in rows for value in row]
    if sorted(values) != list(range(SIZE * SIZE)):
        raise ValueError("Invalid or duplicate number!")
    return rows


def parse_board(text: str) -> Board:
    """Parse nine whitespace-separated numbers, row by row, into a board."""
    tokens = text.split()
    if len(tokens) != SIZE * SIZE:
        raise ValueError(f"expected 9 numbers, got {len(tokens)}")
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError("Invalid or duplicate number!") from exc
    return _as_board([values[start:start + SIZE] for start in range(0, SIZE * SIZE, SIZE)])


def manhattan_distance(board: Sequence[Sequence[int]], goal: Sequence[Sequence[int]]) -> int:
    """Sum of the Manhattan distances of every tile from its place in ``goal``."""
    targets = {value: (r, c) for r, row in enumerate(goal) for c, value in enumerate(row)}
    distance = 0
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == 0:
                continue
            if value not in targets:
                raise ValueError(f"tile {value} does not appear in the goal")
            gr, gc = targets[value]
            distance += abs(r - gr) + abs(c - gc)
    return distance


def is_solvable(board: Sequence[Sequence[int]]) -> bool:
    """True when the board has an even number of inversions among its tiles."""
    tiles = [value for row in board for value in row if value != 0]
    inversions = sum(
        1 for i, first in enumerate(tiles) for second in tiles[i + 1:] if first > second
    )
    return inversions % 2 == 0


def _blank(board: Board) -> tuple[int, int]:
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == 0:
                return r, c
    raise ValueError("board has no blank")


def neighbors(board: Sequence[Sequence[int]]) -> Iterator[tuple[str, Board]]:
    """Yield ``(direction, board)`` for each slide of the blank: up, down, left, right."""
    rows = _as_board(board)
    br, bc = _blank(rows)
    for name, dr, dc in _DIRECTIONS:
        nr, nc = br + dr, bc + dc
        if 0 <= nr < SIZE and 0 <= nc < SIZE:
            cells = [list(row) for row in rows]
            cells[br][bc], cells[nr][nc] = cells[nr][nc], cells[br][bc]
            yield name, tuple(tuple(row) for row in cells)


@dataclass(eq=False)
class PuzzleState:
    """A node of the search tree."""

    board: Board
    depth: int
    heuristic: int
    parent: PuzzleState | None = None
    move: str = "start"

    @property
    def total_cost(self) -> int:
        return self.depth + self.heuristic

    def key(self) -> str:
        """The board's digits read row by row."""
        return "".join(str(value) for row in self.board for value in row)

    def format(self) -> str:
        """The board with its costs, blank shown as spaces."""
        lines = [_RULE]
        lines.extend(
            "".join("  " if value == 0 else f"{value} " for value in row) for row in self.board
        )
        lines.append(_RULE)
        lines.append(f"Depth (g(n)): {self.depth}")
        lines.append(f"Heuristic (h(n)): {self.heuristic}")
        lines.append(f"Total cost (f(n) = g + h): {self.total_cost}")
        if self.move and self.move != "start":
            lines.append(f"Move: {self.move}")
        return "\n".join(lines)

    def path(self) -> list[PuzzleState]:
        """The states from the root of the search down to this one."""
        states: list[PuzzleState] = []
        node: PuzzleState | None = self
        while node is not None:
            states.append(node)
            node = node.parent
        states.reverse()
        return states


@dataclass
class SearchResult:
    """The states taken off the open list, in order, and the goal state if reached."""

    trace: list[PuzzleState] = field(default_factory=list)
    goal_state: PuzzleState | None = None

    @property
    def solved(self) -> bool:
        return self.goal_state is not None

    @property
    def explored(self) -> int:
        return len(self.trace)

    @property
    def path(self) -> list[PuzzleState]:
        return self.goal_state.path() if self.goal_state is not None else []

    @property
    def moves(self) -> int:
        if self.goal_state is None:
            raise ValueError("no solution was found")
        return self.goal_state.depth


def solve_astar(initial: Sequence[Sequence[int]], goal: Sequence[Sequence[int]]) -> SearchResult:
    """A* search ordered by depth plus Manhattan distance."""
    start_board = _as_board(initial)
    goal_board = _as_board(goal)
    order = itertools.count()
    start = PuzzleState(start_board, 0, manhattan_distance(start_board, goal_board))
    open_set = [(start.total_cost, next(order), start)]
    visited: set[Board] = set()
    result = SearchResult()

    while open_set:
        _, _, current = heapq.heappop(open_set)
        result.trace.append(current)
        if current.board == goal_board:
            result.goal_state = current
            return result
        if current.board in visited:
            continue
        visited.add(current.board)
        for move, board in neighbors(current.board):
            if board not in visited:
                child = PuzzleState(
                    board, current.depth + 1, manhattan_distance(board, goal_board), current, move
                )
                heapq.heappush(open_set, (child.total_cost, next(order), child))
    return result


def solve_best_first(
    initial: Sequence[Sequence[int]], goal: Sequence[Sequence[int]]
) -> SearchResult:
    """Greedy best-first search ordered by Manhattan distance alone."""
    start_board = _as_board(initial)
    goal_board = _as_board(goal)
    order = itertools.count()
    start = PuzzleState(start_board, 0, manhattan_distance(start_board, goal_board))
    open_list = [(start.heuristic, next(order), start)]
    visited: set[Board] = {start_board}
    result = SearchResult()

    while open_list:
        _, _, current = heapq.heappop(open_list)
        result.trace.append(current)
        if current.board == goal_board:
            result.goal_state = current
            return result
        for move, board in neighbors(current.board):
            if board not in visited:
                visited.add(board)
                child = PuzzleState(
                    board, current.depth + 1, manhattan_distance(board, goal_board), current, move
                )
                heapq.heappush(open_list, (child.heuristic, next(order), child))
    return result


def _plain_rows(board: Board) -> str:
    return "\n".join("".join(f"{value} " for value in row) for row in board)


def _format_cost(state: PuzzleState) -> str:
    return f"{_plain_rows(state.board)}\n{_RULE}\nCost (Manhattan distance): {state.heuristic}\n"


def _read_board(header: str) -> Board:
    print(header)
    rows = [input(f"Row {number}: ") for number in range(1, SIZE + 1)]
    return parse_board(" ".join(rows))


def _run_astar(initial: Board, goal: Board) -> None:
    print("Starting A* search...")
    result = solve_astar(initial, goal)
    for number, state in enumerate(result.trace, start=1):
        print(f"Exploring state #{number}:")
        if state.parent is not None:
            print("Derived from:")
            print(state.parent.format())
            print()
        print(state.format())
        print()
    if not result.solved:
        print(f"No solution found after exploring {result.explored} states.")
        return
    print("\nSolution found!")
    print(f"\nSolution requires {result.moves} moves (explored {result.explored} states).")
    for step, state in enumerate(result.path):
        print(f"\nStep {step}:")
        print(state.format())
        print()


def _run_best_first(initial: Board, goal: Board) -> None:
    print("\nInitial board:")
    print(_format_cost(PuzzleState(initial, 0, manhattan_distance(initial, goal))))
    print("Solving using Best-First Search...\n")
    result = solve_best_first(initial, goal)
    for number, state in enumerate(result.trace, start=1):
        print(f"Exploring state #{number}:")
        if state.parent is not None:
            print("Derived from:")
            print(_plain_rows(state.parent.board))
            print()
        print(_format_cost(state))
    if not result.solved:
        print("No solution found.")
        return
    print("Goal state reached!")
    print("Solution steps:")
    for step, state in enumerate(result.path):
        print(f"Step {step}:\n{_RULE}")
        print(_format_cost(state))
    print(f"Total moves: {result.moves}")
    print(f"Total states explored: {result.explored}")


def main(argv: Sequence[str] | None = None) -> int:
    """Read an initial and a goal board from standard input and solve the puzzle."""
    parser = argparse.ArgumentParser(description="Solve the eight-puzzle.")
    parser.add_argument("--method", choices=("astar", "best-first"), default="astar")
    args = parser.parse_args(argv)

    try:
        if args.method == "astar":
            initial = _read_board("Enter initial state (row-wise, use 0 for blank):")
            goal = _read_board("Enter goal state (row-wise, use 0 for blank):")
        else:
            initial = _read_board("Enter the initial state (0 for empty space):")
            goal = _read_board("\nEnter the goal state:")
    except (ValueError, EOFError):
        print("Invalid or duplicate number!")
        return 1

    if not is_solvable(initial):
        if args.method == "astar":
            print("This puzzle is not solvable!")
        else:
            print("This puzzle is unsolvable.")
        return 0

    if args.method == "astar":
        _run_astar(initial, goal)
    else:
        _run_best_first(initial, goal)
    return 0