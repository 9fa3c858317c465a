"""Calibration values: first and last digit of each line, optionally spelled out."""

from __future__ import annotations

from collections.abc import Iterable

_SPELLED_DIGITS = (
    ("zero", "0"),
    ("one", "1"),
    ("two", "2"),
    ("three", "3"),
    ("four", "4"),
    ("five", "5"),
    ("six", "6"),
    ("seven", "7"),
    ("eight", "8"),
    ("nine", "9"),
)


def _find_all(text: str, needle: str) -> Iterable[int]:
    """Yield the start of every non-overlapping occurrence of ``needle``."""
    start = text.find(needle)
    while start != -1:
        yield start
        start = text.find(needle, start + len(needle))


def extract_number(text: str, convert_spelled_numbers: bool) -> int:
    """Return the two-digit number made of the first and last digit in ``text``.

    A line without digits is worth 0.
    """
    if convert_spelled_numbers:
        return replace_spelled_numbers(text)
    digits = [character for character in text if character.isdigit()]
    if not digits:
        return 0
    return int(digits[0] + digits[-1])


def replace_spelled_numbers(text: str) -> int:
    """Like :func:`extract_number`, but digits may also be spelled as words.

    An empty line is worth 0; a non-empty line without any digit is an error.
    """
    if not text:
        return 0
    found: list[tuple[int, str]] = []
    for word, digit in _SPELLED_DIGITS:
        found.extend((index, digit) for index in _find_all(text, word))
        found.extend((index, digit) for index in _find_all(text, digit))
    if not found:
        raise ValueError(f"no digit found in {text!r}")
    found.sort(key=lambda item: item[0])
    return int(found[0][1] + found[-1][1])


def extract_total(rows: Iterable[str], convert_spelled_numbers: bool) -> int:
    """Sum the calibration values of all rows."""
    return sum(extract_number(row, convert_spelled_numbers) for row in rows)