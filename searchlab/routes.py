"""Route finding on a grid of free (0) and blocked (1) cells."""

from __future__ import annotations

import argparse
import heapq
import itertools
from collections.abc import Sequence
from dataclasses import dataclass

Point = tuple[int, int]

ASTAR_GRID = (
    (0, 1, 0, 0, 0),
    (0, 1, 0, 1, 0),
    (0, 0, 0, 1, 0),
    (1, 1, 0, 0, 0),
    (0, 0, 0, 0, 0),
)

BEST_FIRST_GRID = (
    (0, 0, 0, 0),
    (1, 1, 0, 1),
    (0, 0, 0, 0),
    (0, 1, 1, 0),
    (0, 0, 0, 0),
)

_ASTAR_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_BEST_FIRST_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(eq=False)
class _Node:
    point: Point
    cost: int
    parent: _Node | None = None

    def path(self) -> list[Point]:
        points: list[Point] = []
        node: _Node | None = self
        while node is not None:
            points.append(node.point)
            node = node.parent
        points.reverse()
        return points


def manhattan(a: Point, b: Point) -> int:
    """Manhattan distance between two grid points."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _check(grid: Sequence[Sequence[int]], *points: Point) -> tuple[int, int]:
    rows = len(grid)
    if rows == 0 or len(grid[0]) == 0:
        raise ValueError("grid is empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows differ in length")
    for x, y in points:
        if not (0 <= x < rows and 0 <= y < cols):
            raise ValueError(f"point ({x}, {y}) lies outside the grid")
    return rows, cols


def astar_path(grid: Sequence[Sequence[int]], start: Point, goal: Point) -> list[Point]:
    """Shortest path from ``start`` to ``goal`` by A*, or an empty list if none exists."""
    rows, cols = _check(grid, start, goal)
    start, goal = tuple(start), tuple(goal)
    order = itertools.count()
    root = _Node(start, 0)
    open_list = [(manhattan(start, goal), next(order), root)]
    closed: set[Point] = set()

    while open_list:
        _, _, current = heapq.heappop(open_list)
        if current.point == goal:
            return current.path()
        closed.add(current.point)
        x, y = current.point
        for dx, dy in _ASTAR_DIRECTIONS:
            nxt = (x + dx, y + dy)
            if not (0 <= nxt[0] < rows and 0 <= nxt[1] < cols):
                continue
            if grid[nxt[0]][nxt[1]] == 1 or nxt in closed:
                continue
            neighbor = _Node(nxt, current.cost + 1, current)
            heapq.heappush(
                open_list, (neighbor.cost + manhattan(nxt, goal), next(order), neighbor)
            )
    return []


def best_first_path(grid: Sequence[Sequence[int]], start: Point, goal: Point) -> list[Point]:
    """Path found by greedy best-first search on Manhattan distance, or an empty list."""
    rows, cols = _check(grid, start, goal)
    start, goal = tuple(start), tuple(goal)
    order = itertools.count()
    open_list = [(manhattan(start, goal), next(order), _Node(start, 0))]
    visited: set[Point] = {start}

    while open_list:
        _, _, current = heapq.heappop(open_list)
        if current.point == goal:
            return current.path()
        x, y = current.point
        for dx, dy in _BEST_FIRST_DIRECTIONS:
            nxt = (x + dx, y + dy)
            if (
                0 <= nxt[0] < rows
                and 0 <= nxt[1] < cols
                and grid[nxt[0]][nxt[1]] == 0
                and nxt not in visited
            ):
                visited.add(nxt)
                heapq.heappush(
                    open_list,
                    (manhattan(nxt, goal), next(order), _Node(nxt, current.cost + 1, current)),
                )
    return []


def main(argv: Sequence[str] | None = None) -> int:
    """Find a route across the built-in grid and print it."""
    parser = argparse.ArgumentParser(description="Find a route across a grid.")
    parser.add_argument("--method", choices=("astar", "best-first"), default="astar")
    args = parser.parse_args(argv)

    if args.method == "astar":
        path = astar_path(ASTAR_GRID, (0, 0), (4, 4))
        header = "Path found:"
    else:
        path = best_first_path(BEST_FIRST_GRID, (0, 0), (4, 3))
        header = "Goal reached!"

    if not path:
        print("No path found.")
        return 0
    print(header)
    for x, y in path:
        print(f"({x}, {y})")
    return 0