"""Red-nosed reports: which level lists are safe, with an optional dampener."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def parse_input(text: str) -> list[list[int]]:
    """One list of space-separated levels per line."""
    return [[int(part) for part in line.split(" ")] for line in text.splitlines()]


def _is_safe(levels: Sequence[int]) -> bool:
    ascending: bool | None = None
    for previous, current in pairwise(levels):
        if previous == current or abs(previous - current) > 3:
            return False
        direction = previous < current
        if ascending is None:
            ascending = direction
        elif ascending != direction:
            return False
    return True


def is_valid_list(levels: Sequence[int], allowed_unsafes: int) -> bool:
    """True when the levels are strictly monotone with steps of 1 to 3.

    Up to ``allowed_unsafes`` levels may be removed to make the list safe.
    """
    if not levels:
        raise ValueError("a report needs at least one level")
    if _is_safe(levels):
        return True
    if allowed_unsafes == 0:
        return False
    return any(
        is_valid_list([*levels[:index], *levels[index + 1:]], allowed_unsafes - 1)
        for index in range(len(levels))
    )


def count_valid_lists(lists: Iterable[Sequence[int]], allowed_unsafes: int) -> int:
    """Number of lists that are valid with the given dampener."""
    return sum(1 for levels in lists if is_valid_list(levels, allowed_unsafes))