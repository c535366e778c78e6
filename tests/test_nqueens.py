import pytest

from searchlab.nqueens import format_board, is_safe, main, solve_nqueens


def _feed(monkeypatch, *answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


def test_four_queens_solutions():
    assert list(solve_nqueens(4)) == [(1, 3, 0, 2), (2, 0, 3, 1)]


def test_eight_queens_count():
    assert len(list(solve_nqueens(8))) == 92


def test_one_queen():
    assert list(solve_nqueens(1)) == [(0,)]


@pytest.mark.parametrize("n", [2, 3])
def test_no_solution(n):
    assert list(solve_nqueens(n)) == []


@pytest.mark.parametrize("n", [5, 6, 7])
def test_every_solution_is_safe_and_distinct(n):
    solutions = list(solve_nqueens(n))
    assert len(solutions) == len(set(solutions))
    for board in solutions:
        assert sorted(board) == list(range(n))
        assert all(is_safe(board, row, board[row]) for row in range(n))


@pytest.mark.parametrize("n", [0, -3])
def test_non_positive_n_rejected(n):
    with pytest.raises(ValueError):
        solve_nqueens(n)


def test_is_safe_detects_column_conflict():
    assert is_safe([1], 1, 1) is False


def test_is_safe_detects_diagonal_conflict():
    assert is_safe([0], 1, 1) is False
    assert is_safe([2], 1, 1) is False


def test_format_board_marks_each_queen():
    board = (1, 3, 0, 2)
    lines = format_board(board).split("\n")
    assert len(lines) == 4
    for line, col in zip(lines, board):
        assert line.count("Q") == 1
        assert line.index("Q") == 3 * col + 1
        assert len(line) == 12


def test_main_first_solution_only(monkeypatch, capsys):
    _feed(monkeypatch, "4", "n")
    assert main([]) == 0
    assert capsys.readouterr().out.count("Solution:") == 1


def test_main_all_solutions(monkeypatch, capsys):
    _feed(monkeypatch, "4", "y")
    assert main([]) == 0
    assert capsys.readouterr().out.count("Solution:") == 2


def test_main_reports_no_solution(monkeypatch, capsys):
    _feed(monkeypatch, "3", "y")
    assert main([]) == 0
    assert "No solution exists for N = 3" in capsys.readouterr().out


def test_main_rejects_non_positive(monkeypatch, capsys):
    _feed(monkeypatch, "0")
    assert main([]) == 1
    assert "Invalid input! N must be positive." in capsys.readouterr().out