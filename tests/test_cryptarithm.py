import pytest

from searchlab.cryptarithm import LETTERS, is_valid, main, send_more_money_solutions


@pytest.fixture(scope="module")
def solutions():
    return list(send_more_money_solutions())


def test_the_known_solution(solutions):
    assert solutions == [dict(S=9, E=5, N=6, D=7, M=1, O=0, R=8, Y=2)]


def test_solutions_satisfy_the_sum(solutions):
    for solution in solutions:
        assert is_valid(*(solution[letter] for letter in LETTERS))


def test_solutions_use_distinct_digits(solutions):
    for solution in solutions:
        assert list(solution) == list(LETTERS)
        assert len(set(solution.values())) == len(LETTERS)
        assert solution["S"] != 0 and solution["M"] != 0


def test_is_valid_rejects_wrong_digits():
    assert is_valid(1, 2, 3, 4, 5, 6, 7, 8) is False


def test_main_prints_one_solution(capsys, solutions):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Solution 1:" in out
    assert "Solution 2:" not in out
    expected = " ".join(f"{k}={v}" for k, v in solutions[0].items())
    assert expected in out