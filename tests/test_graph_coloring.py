import io

import pytest

from searchlab.graph_coloring import color_graph, is_safe, main

TRIANGLE = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
PATH4 = [[0, 1, 0, 0], [1, 0, 1, 0], [0, 1, 0, 1], [0, 0, 1, 0]]
SQUARE_WITH_DIAGONAL = [
    [0, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [1, 0, 1, 0],
]


def _proper(graph, colors, color_count):
    return all(1 <= c <= color_count for c in colors) and all(
        not graph[u][v] or colors[u] != colors[v]
        for u in range(len(graph))
        for v in range(len(graph))
    )


def test_triangle_needs_three_colors():
    assert color_graph(TRIANGLE, 2) is None
    assert color_graph(TRIANGLE, 3) == [1, 2, 3]


def test_path_alternates_two_colors():
    assert color_graph(PATH4, 2) == [1, 2, 1, 2]


@pytest.mark.parametrize("graph, count", [(TRIANGLE, 4), (PATH4, 3), (SQUARE_WITH_DIAGONAL, 3)])
def test_coloring_is_proper(graph, count):
    colors = color_graph(graph, count)
    assert len(colors) == len(graph)
    assert _proper(graph, colors, count)


def test_square_with_diagonal_not_two_colorable():
    assert color_graph(SQUARE_WITH_DIAGONAL, 2) is None


def test_empty_graph():
    assert color_graph([], 1) == []


def test_zero_colors_for_nonempty_graph():
    assert color_graph([[0]], 0) is None


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        color_graph([[0, 1], [1]], 2)


def test_is_safe():
    colors = [1, 0, 0]
    assert is_safe(TRIANGLE, colors, 1, 1) is False
    assert is_safe(TRIANGLE, colors, 1, 2) is True
    assert is_safe(PATH4, [0, 0, 1, 0], 0, 1) is True


def test_main_prints_coloring(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 1 1\n1 0 1\n1 1 0\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Solution Found:" in out
    assert "Vertex 0 ---> Color 1" in out
    assert "Vertex 2 ---> Color 3" in out


def test_main_reports_failure(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 1 1\n1 0 1\n1 1 0\n2\n"))
    assert main([]) == 0
    assert "No solution exists with 2 colors." in capsys.readouterr().out


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 1\n"))
    assert main([]) == 1
    assert "Unexpected end of input." in capsys.readouterr().out