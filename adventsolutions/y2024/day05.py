"""Print queue: check page orders against rules and repair the wrong ones."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence, Set
from functools import cmp_to_key, partial
from itertools import pairwise

PageOrdering = dict[int, set[int]]


def split_input(text: str) -> tuple[str, str]:
    """Split the rules section from the updates section."""
    parts = text.split("\n\n")
    if len(parts) < 2:
        raise ValueError("expected rules and updates separated by a blank line")
    return parts[0], parts[1]


def page_order_index(text: str) -> PageOrdering:
    """Map each page to the pages that must come after it, from ``a|b`` lines."""
    ordering: PageOrdering = {}
    for line in text.splitlines():
        parts = line.split("|")
        if len(parts) < 2:
            raise ValueError(f"not a rule line: {line!r}")
        ordering.setdefault(int(parts[0]), set()).add(int(parts[1]))
    return ordering


def page_numbers(text: str) -> list[list[int]]:
    """One list of comma-separated pages per line."""
    return [[int(page) for page in line.split(",")] for line in text.splitlines()]


def _middle(row: Sequence[int]) -> int:
    return row[(len(row) - 1) // 2]


def _rule_order(page_ordering: Mapping[int, Set[int]], a: int, b: int) -> int:
    """Put ``a`` first when a rule says ``a|b``, otherwise after ``b``."""
    successors = page_ordering.get(a)
    if successors is not None and b in successors:
        return -1
    return 1


def part1(page_ordering: Mapping[int, Set[int]], rows: Iterable[Sequence[int]]) -> list[int]:
    """Middle pages of the updates whose neighbours all follow the rules."""
    result = []
    for row in rows:
        if not row:
            raise ValueError("an update needs at least one page")
        if all(b in page_ordering.get(a, ()) for a, b in pairwise(row)):
            result.append(_middle(row))
    return result


def part2(page_ordering: Mapping[int, Set[int]], rows: Iterable[Sequence[int]]) -> list[int]:
    """Middle pages of the wrongly ordered updates after putting them in order."""
    key = cmp_to_key(partial(_rule_order, page_ordering))
    result = []
    for row in rows:
        ordered = sorted(row, key=key)
        if ordered != list(row):
            result.append(_middle(ordered))
    return result