"""Historian hysteria: compare two columns of location ids."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Sequence

_PAIR = re.compile(r"(\d+)   (\d+)")

Columns = tuple[list[int], list[int]]


def parse_input(text: str) -> Columns:
    """Collect the left and right numbers of every ``a   b`` pair."""
    left: list[int] = []
    right: list[int] = []
    for match in _PAIR.finditer(text):
        left.append(int(match.group(1)))
        right.append(int(match.group(2)))
    return left, right


def total_distance(columns: tuple[Sequence[int], Sequence[int]]) -> int:
    """Sum of the distances between the sorted columns, pair by pair."""
    left, right = columns
    if len(right) < len(left):
        raise ValueError("right column is shorter than the left column")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity(columns: tuple[Sequence[int], Sequence[int]]) -> int:
    """Sum of each left number times how often it appears on the right."""
    left, right = columns
    occurrences = Counter(right)
    return sum(number * occurrences[number] for number in left)