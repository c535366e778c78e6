"""The four- and three-litre water jug puzzle: measure exactly two litres in the larger jug."""

from __future__ import annotations

import argparse
import random
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

BIG = 4
SMALL = 3
TARGET = 2


@dataclass(frozen=True, order=True)
class JugState:
    """Litres held by the four-litre and the three-litre jug."""

    four: int
    three: int

    @property
    def is_goal(self) -> bool:
        return self.four == TARGET

    def __str__(self) -> str:
        return f"({self.four}, {self.three})"


def next_states(state: JugState) -> list[JugState]:
    """States after filling, emptying or pouring each jug, in that order."""
    four, three = state.four, state.three
    return [
        JugState(BIG, three),
        JugState(four, SMALL),
        JugState(0, three),
        JugState(four, 0),
        JugState(max(0, four - (SMALL - three)), min(SMALL, three + four)),
        JugState(min(BIG, four + three), max(0, three - (BIG - four))),
    ]


def bfs_trace() -> list[JugState]:
    """States in the order breadth-first search visits them, ending at the goal if found."""
    visited: set[JugState] = set()
    queue = deque([JugState(0, 0)])
    trace: list[JugState] = []
    while queue:
        current = queue.popleft()
        if current in visited:
            continue
        visited.add(current)
        trace.append(current)
        if current.is_goal:
            return trace
        queue.extend(nxt for nxt in next_states(current) if nxt not in visited)
    return trace


def dfs_path(rng: random.Random | None = None) -> list[JugState]:
    """A path from empty jugs to the goal, trying moves in shuffled order; empty if none."""
    rng = rng if rng is not None else random.Random()
    visited: set[JugState] = set()
    path: list[JugState] = []

    def explore(current: JugState) -> bool:
        if current in visited:
            return False
        visited.add(current)
        path.append(current)
        if current.is_goal:
            return True
        moves = next_states(current)
        rng.shuffle(moves)
        if any(explore(nxt) for nxt in moves):
            return True
        path.pop()
        return False

    explore(JugState(0, 0))
    return path


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the jug puzzle and print the states."""
    parser = argparse.ArgumentParser(description="Solve the water jug puzzle.")
    parser.add_argument("--method", choices=("bfs", "dfs"), default="bfs")
    parser.add_argument("--seed", type=int, default=None, help="seed for the move order")
    args = parser.parse_args(argv)

    if args.method == "bfs":
        trace = bfs_trace()
        for state in trace:
            print(state)
        if trace and trace[-1].is_goal:
            print("Solution found!")
        else:
            print("No solution found.")
        return 0

    path = dfs_path(random.Random(args.seed))
    if not path:
        print("No solution found.")
        return 0
    print("Solution found! Path:")
    for state in path:
        print(state)
    return 0