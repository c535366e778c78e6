"""Graph colouring with a fixed number of colours, solved by backtracking."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence


def is_safe(
    graph: Sequence[Sequence[int]], colors: Sequence[int], vertex: int, color: int
) -> bool:
    """True when no neighbour of ``vertex`` already has ``color``."""
    return not any(edge and assigned == color for edge, assigned in zip(graph[vertex], colors))


def color_graph(graph: Sequence[Sequence[int]], color_count: int) -> list[int] | None:
    """Colours 1..``color_count`` for each vertex of an adjacency matrix, or None if impossible.

    Vertices are coloured in order, each with the lowest colour that leads to a solution.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("the adjacency matrix must be square")
    colors = [0] * size

    def assign(vertex: int) -> bool:
        if vertex == size:
            return True
        for color in range(1, color_count + 1):
            if is_safe(graph, colors, vertex, color):
                colors[vertex] = color
                if assign(vertex + 1):
                    return True
                colors[vertex] = 0
        return False

    return colors if assign(0) else None


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph and a number of colours from standard input and print a colouring."""
    parser = argparse.ArgumentParser(description="Colour the vertices of a graph.")
    parser.parse_args(argv)

    tokens = _tokens()
    try:
        print("Enter the number of vertices: ", end="")
        size = int(next(tokens))
        if size < 0:
            raise ValueError("the number of vertices must not be negative")
        print("Enter the adjacency matrix:")
        graph = [[int(next(tokens)) for _ in range(size)] for _ in range(size)]
        print("Enter the number of colors: ", end="")
        color_count = int(next(tokens))
    except StopIteration:
        print("\nUnexpected end of input.")
        return 1
    except ValueError as exc:
        print(f"\n{exc}")
        return 1

    colors = color_graph(graph, color_count)
    if colors is None:
        print(f"No solution exists with {color_count} colors.")
        return 0
    print("Solution Found:")
    for vertex, color in enumerate(colors):
        print(f"Vertex {vertex} ---> Color {color}")
    return 0