import io

import pytest

from searchlab.traversal import bfs, build_adjacency, dfs, main

EDGES = [(1, 2), (1, 3), (2, 4), (3, 5), (4, 5), (6, 7)]


@pytest.fixture
def graph():
    return build_adjacency(7, EDGES)


def test_build_adjacency_is_symmetric(graph):
    for u, v in EDGES:
        assert v in graph[u]
        assert u in graph[v]
    assert len(graph) == 8


def test_build_adjacency_rejects_out_of_range_node():
    with pytest.raises(ValueError):
        build_adjacency(3, [(1, 4)])


def test_build_adjacency_rejects_negative_count():
    with pytest.raises(ValueError):
        build_adjacency(-1, [])


def test_bfs_small_tree_order():
    adjacency = build_adjacency(4, [(1, 2), (1, 3), (2, 4)])
    assert bfs(adjacency, 1) == [1, 2, 3, 4]


def test_dfs_small_tree_order():
    adjacency = build_adjacency(4, [(1, 2), (1, 3), (2, 4)])
    assert dfs(adjacency, 1) == [1, 2, 4, 3]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_traversal_covers_component_once(graph, traverse):
    order = traverse(graph, 1)
    assert order[0] == 1
    assert len(order) == len(set(order))
    assert set(order) == {1, 2, 3, 4, 5}


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_isolated_node(graph, traverse):
    assert traverse(graph, 0) == [0]


@pytest.mark.parametrize("traverse", [bfs, dfs])
def test_bad_start(graph, traverse):
    with pytest.raises(ValueError):
        traverse(graph, 8)


def test_bfs_visits_by_distance(graph):
    order = bfs(graph, 1)
    position = {node: index for index, node in enumerate(order)}
    assert position[4] > position[3]
    assert position[5] > position[2]


def test_dfs_follows_edges(graph):
    order = dfs(graph, 1)
    for index, node in enumerate(order[1:], start=1):
        assert any(node in graph[earlier] for earlier in order[:index])


def test_dfs_deep_chain_does_not_overflow():
    count = 5000
    adjacency = build_adjacency(count, [(n, n + 1) for n in range(count)])
    assert dfs(adjacency, 0) == list(range(count + 1))


@pytest.mark.parametrize("method,traverse", [("bfs", bfs), ("dfs", dfs)])
def test_main_prints_traversal(monkeypatch, capsys, method, traverse):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 4\n1 2\n1 3\n2 4\n3 5\n1\n"))
    assert main(["--method", method]) == 0
    out = capsys.readouterr().out
    expected = " ".join(str(n) for n in traverse(build_adjacency(5, [(1, 2), (1, 3), (2, 4), (3, 5)]), 1))
    assert f"{method.upper()} Traversal: {expected} " in out


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 4\n1 2\n"))
    assert main([]) == 1
    assert "Unexpected end of input." in capsys.readouterr().out