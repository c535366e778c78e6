"""Missionaries and cannibals river crossing, solved by breadth- or depth-first search."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

LEFT = 0
RIGHT = 1


@dataclass(frozen=True, order=True)
class State:
    """People left on the starting bank and the side the boat is on (0 left, 1 right)."""

    m_left: int
    c_left: int
    boat: int

    def __str__(self) -> str:
        side = "Left" if self.boat == LEFT else "Right"
        return f"(M_left: {self.m_left}, C_left: {self.c_left}, Boat: {side})"


def generate_moves(capacity: int) -> list[tuple[int, int]]:
    """Every (missionaries, cannibals) boat load carrying between 1 and ``capacity`` people."""
    return [
        (m, c)
        for m in range(capacity + 1)
        for c in range(capacity + 1)
        if 1 <= m + c <= capacity
    ]


@dataclass(frozen=True)
class RiverCrossing:
    """A crossing problem with its head counts and boat capacity."""

    missionaries: int
    cannibals: int
    capacity: int

    def __post_init__(self) -> None:
        if min(self.missionaries, self.cannibals, self.capacity) < 0:
            raise ValueError("counts and capacity must not be negative")

    @property
    def start(self) -> State:
        return State(self.missionaries, self.cannibals, LEFT)

    @property
    def goal(self) -> State:
        return State(0, 0, RIGHT)

    def is_valid(self, m_left: int, c_left: int) -> bool:
        """True when the counts are in range and no bank has missionaries outnumbered."""
        m_right = self.missionaries - m_left
        c_right = self.cannibals - c_left
        if not (0 <= m_left <= self.missionaries and 0 <= c_left <= self.cannibals):
            return False
        if 0 < m_left < c_left:
            return False
        if 0 < m_right < c_right:
            return False
        return True

    def successors(self, state: State) -> list[State]:
        """Valid states one crossing away, in the order of ``generate_moves``."""
        result = []
        for m, c in generate_moves(self.capacity):
            if state.boat == LEFT:
                nxt = State(state.m_left - m, state.c_left - c, RIGHT)
            else:
                nxt = State(state.m_left + m, state.c_left + c, LEFT)
            if self.is_valid(nxt.m_left, nxt.c_left):
                result.append(nxt)
        return result

    def solve_bfs(self) -> list[State]:
        """A shortest sequence of states from start to goal, or an empty list."""
        visited = {self.start}
        queue = deque([[self.start]])
        while queue:
            path = queue.popleft()
            current = path[-1]
            if current == self.goal:
                return path
            for nxt in self.successors(current):
                if nxt not in visited:
                    visited.add(nxt)
                    queue.append(path + [nxt])
        return []

    def solve_dfs(self) -> list[State]:
        """A sequence of states from start to goal found depth first, or an empty list."""
        visited: set[State] = set()
        stack = [[self.start]]
        while stack:
            path = stack.pop()
            current = path[-1]
            if current == self.goal:
                return path
            if current in visited:
                continue
            visited.add(current)
            for nxt in self.successors(current):
                if nxt not in visited:
                    stack.append(path + [nxt])
        return []


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for the head counts and boat capacity, then print a solution."""
    parser = argparse.ArgumentParser(description="Solve missionaries and cannibals.")
    parser.add_argument("--method", choices=("bfs", "dfs"), default="bfs")
    args = parser.parse_args(argv)

    try:
        missionaries = int(input("Enter number of missionaries: "))
        cannibals = int(input("Enter number of cannibals: "))
        capacity = int(input("Enter boat capacity: "))
        problem = RiverCrossing(missionaries, cannibals, capacity)
    except (ValueError, EOFError) as exc:
        print(f"\nInvalid input: {exc}")
        return 1

    if args.method == "bfs":
        solution, label = problem.solve_bfs(), "BFS"
    else:
        solution, label = problem.solve_dfs(), "DFS"

    if not solution:
        print("No solution found.")
        return 0
    print(f"\nSolution found ({label}):")
    for step, state in enumerate(solution):
        print(f"Step {step}: {state}")
    return 0