"""The SEND + MORE = MONEY cryptarithm solved by trying every digit assignment."""

from __future__ import annotations

import argparse
import itertools
from collections.abc import Iterator, Sequence

LETTERS = "SENDMORY"


def is_valid(s: int, e: int, n: int, d: int, m: int, o: int, r: int, y: int) -> bool:
    """True when the digits make SEND + MORE equal MONEY."""
    send = s * 1000 + e * 100 + n * 10 + d
    more = m * 1000 + o * 100 + r * 10 + e
    money = m * 10000 + o * 1000 + n * 100 + e * 10 + y
    return send + more == money


def send_more_money_solutions() -> Iterator[dict[str, int]]:
    """Yield every assignment of distinct digits to S, E, N, D, M, O, R, Y that works.

    Assignments are tried in lexicographic order of the digits; S and M are never zero.
    """
    for digits in itertools.permutations(range(10), len(LETTERS)):
        if digits[0] == 0 or digits[4] == 0:
            continue
        if is_valid(*digits):
            yield dict(zip(LETTERS, digits))


def main(argv: Sequence[str] | None = None) -> int:
    """Print every solution of SEND + MORE = MONEY."""
    parser = argparse.ArgumentParser(description="Solve SEND + MORE = MONEY.")
    parser.parse_args(argv)

    count = 0
    for count, solution in enumerate(send_more_money_solutions(), start=1):
        print(f"Solution {count}:")
        print(" ".join(f"{letter}={digit}" for letter, digit in solution.items()))
        print()
    if count == 0:
        print("No solution found.")
    return 0