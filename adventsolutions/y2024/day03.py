"""Mull it over: sum the products of well-formed ``mul(x,y)`` instructions."""

from __future__ import annotations

import re
from collections.abc import Iterable

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")


def get_muls(text: str) -> list[tuple[int, int]]:
    """All factor pairs of ``mul(x,y)`` with one to three digits each."""
    return [(int(match.group(1)), int(match.group(2))) for match in _MUL.finditer(text)]


def remove_donts(text: str) -> str:
    """Drop every stretch that follows a ``don't()`` up to the next ``do()``."""
    return "".join(part.split("don't()")[0] for part in text.split("do()"))


def calculate_mul(pairs: Iterable[tuple[int, int]]) -> int:
    """Sum of the products of all pairs."""
    return sum(x * y for x, y in pairs)