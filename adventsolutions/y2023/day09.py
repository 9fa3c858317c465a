"""Sequence extrapolation by repeated differences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def parse_rows(text: str) -> list[list[int]]:
    """Parse space-separated integers, one sequence per non-empty line."""
    return [[int(part) for part in line.split(" ")] for line in text.splitlines() if line]


def _difference_rows(row: Sequence[int]) -> Iterable[list[int]]:
    """Yield the row and its difference rows until one starts and ends with 0."""
    current = list(row)
    while not current or current[0] != 0 or current[-1] != 0:
        if len(current) < 2:
            raise ValueError(f"sequence {list(row)} never reaches zeros")
        yield current
        current = [b - a for a, b in pairwise(current)]


def solution_1(rows: Iterable[Sequence[int]]) -> int:
    """Sum of the next value of every sequence."""
    return sum(
        sum(current[-1] for current in _difference_rows(row))
        for row in rows
    )


def solution_2(rows: Iterable[Sequence[int]]) -> int:
    """Sum of the previous value of every sequence."""
    total = 0
    for row in rows:
        value = 0
        for first in reversed([current[0] for current in _difference_rows(row)]):
            value = first - value
        total += value
    return total