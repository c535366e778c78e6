"""Breadth-first and depth-first traversal of an undirected graph."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Adjacency = list[list[int]]


def build_adjacency(node_count: int, edges: Iterable[tuple[int, int]]) -> Adjacency:
    """Adjacency lists for nodes ``0..node_count``, each edge added in both directions."""
    if node_count < 0:
        raise ValueError("node count must not be negative")
    adjacency: Adjacency = [[] for _ in range(node_count + 1)]
    for u, v in edges:
        for node in (u, v):
            if not 0 <= node <= node_count:
                raise ValueError(f"node {node} is outside 0..{node_count}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _check_start(adjacency: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(adjacency):
        raise ValueError(f"start node {start} is not in the graph")


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Nodes in the order a breadth-first traversal from ``start`` reaches them."""
    _check_start(adjacency, start)
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in adjacency[node]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return order


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Nodes in the order a recursive depth-first traversal from ``start`` reaches them."""
    _check_start(adjacency, start)
    visited = {start}
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(adjacency[neighbor]))
                break
        else:
            stack.pop()
    return order


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph and a start node from standard input and print a traversal."""
    parser = argparse.ArgumentParser(description="Traverse an undirected graph.")
    parser.add_argument("--method", choices=("bfs", "dfs"), default="bfs")
    args = parser.parse_args(argv)

    tokens = _tokens()
    try:
        if args.method == "dfs":
            print("Enter number of nodes and edges: ", end="")
        node_count, edge_count = int(next(tokens)), int(next(tokens))
        print("Enter edges (u v):")
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(edge_count)]
        adjacency = build_adjacency(node_count, edges)
        if args.method == "dfs":
            print("Enter starting node for DFS: ", end="")
        else:
            print("Enter starting node ", end="")
        start = int(next(tokens))
        if args.method == "dfs":
            order = dfs(adjacency, start)
            label = "DFS Traversal: "
        else:
            order = bfs(adjacency, start)
            label = "BFS Traversal: "
    except StopIteration:
        print("\nUnexpected end of input.")
        return 1
    except ValueError as exc:
        print(f"\n{exc}")
        return 1

    print(label + "".join(f"{node} " for node in order))
    return 0