import pytest

from searchlab.routes import (
    ASTAR_GRID,
    BEST_FIRST_GRID,
    astar_path,
    best_first_path,
    main,
    manhattan,
)

UNREACHABLE_GRID = (
    (0, 0, 0),
    (1, 1, 1),
    (0, 0, 0),
)

BLOCKED_GOAL_GRID = ((0, 0), (0, 1))

RAGGED_GRID = ((0, 0), (0,))


def _assert_valid_path(grid, path, start, goal):
    assert path[0] == start
    assert path[-1] == goal
    for x, y in path:
        assert grid[x][y] == 0
    for a, b in zip(path, path[1:]):
        assert manhattan(a, b) == 1
    assert len(path) == len(set(path))


def test_manhattan():
    assert manhattan((0, 0), (4, 4)) == 8
    assert manhattan((3, 1), (1, 3)) == manhattan((1, 3), (3, 1))
    assert manhattan((2, 2), (2, 2)) == 0


def test_astar_on_builtin_grid_is_shortest():
    path = astar_path(ASTAR_GRID, (0, 0), (4, 4))
    _assert_valid_path(ASTAR_GRID, path, (0, 0), (4, 4))
    assert len(path) - 1 == manhattan((0, 0), (4, 4))


def test_best_first_on_builtin_grid():
    path = best_first_path(BEST_FIRST_GRID, (0, 0), (4, 3))
    _assert_valid_path(BEST_FIRST_GRID, path, (0, 0), (4, 3))


def test_astar_around_a_wall_is_no_longer_than_best_first():
    grid = (
        (0, 0, 0, 0, 0),
        (0, 1, 1, 1, 0),
        (0, 0, 0, 1, 0),
        (1, 1, 0, 1, 0),
        (0, 0, 0, 0, 0),
    )
    a = astar_path(grid, (2, 0), (4, 4))
    b = best_first_path(grid, (2, 0), (4, 4))
    _assert_valid_path(grid, a, (2, 0), (4, 4))
    _assert_valid_path(grid, b, (2, 0), (4, 4))
    assert len(a) <= len(b)


def test_astar_start_equals_goal():
    assert astar_path(ASTAR_GRID, (2, 2), (2, 2)) == [(2, 2)]


def test_best_first_start_equals_goal():
    assert best_first_path(ASTAR_GRID, (2, 2), (2, 2)) == [(2, 2)]


def test_astar_unreachable_goal_gives_empty_path():
    assert astar_path(UNREACHABLE_GRID, (0, 0), (2, 2)) == []


def test_best_first_unreachable_goal_gives_empty_path():
    assert best_first_path(UNREACHABLE_GRID, (0, 0), (2, 2)) == []


def test_astar_blocked_goal_gives_empty_path():
    assert astar_path(BLOCKED_GOAL_GRID, (0, 0), (1, 1)) == []


def test_best_first_blocked_goal_gives_empty_path():
    assert best_first_path(BLOCKED_GOAL_GRID, (0, 0), (1, 1)) == []


def test_astar_point_outside_grid_raises():
    with pytest.raises(ValueError):
        astar_path(ASTAR_GRID, (0, 0), (5, 5))


def test_best_first_point_outside_grid_raises():
    with pytest.raises(ValueError):
        best_first_path(ASTAR_GRID, (0, 0), (5, 5))


def test_astar_ragged_grid_raises():
    with pytest.raises(ValueError):
        astar_path(RAGGED_GRID, (0, 0), (1, 0))


def test_best_first_ragged_grid_raises():
    with pytest.raises(ValueError):
        best_first_path(RAGGED_GRID, (0, 0), (1, 0))


def test_main_astar_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Path found:"
    assert lines[1] == "(0, 0)"
    assert lines[-1] == "(4, 4)"


def test_main_best_first_output(capsys):
    assert main(["--method", "best-first"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Goal reached!"
    assert lines[-1] == "(4, 3)"