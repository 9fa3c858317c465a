"""Point of incidence: find mirror lines in patterns, optionally with one smudge."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def differ_by_one(first: str, second: str) -> bool:
    """True when both strings have equal length and differ in exactly one place."""
    if len(first) != len(second):
        return False
    return sum(a != b for a, b in zip(first, second)) == 1


@dataclass(frozen=True)
class Reflection:
    rows: tuple[str, ...]
    columns: tuple[str, ...]
    block: str

    def mirror_index(self, lines: Sequence[str], with_smudge: bool) -> int | None:
        """Index of the line just before the first mirror, or None."""
        count = len(lines)
        middle = count // 2
        for index in range(count):
            intersection = index + 1
            start, end = 0, count
            if intersection <= middle:
                end = intersection * 2
            else:
                start = intersection - (count - intersection)
            if start == intersection:
                start -= 1
            first_half = "".join(lines[start:intersection])
            second_half = "".join(reversed(lines[intersection:end]))
            if with_smudge:
                if differ_by_one(first_half, second_half):
                    return index
            elif first_half == second_half:
                return index
        return None

    def value(self, with_smudge: bool) -> int:
        """100 per row above a horizontal mirror plus the columns left of a vertical one."""
        value = 0
        row_index = self.mirror_index(self.rows, with_smudge)
        if row_index is not None:
            value += (row_index + 1) * 100
        column_index = self.mirror_index(self.columns, with_smudge)
        if column_index is not None:
            value += column_index + 1
        return value


def parse_reflection(block: str) -> Reflection:
    """Split a pattern into its rows and its columns."""
    rows = tuple(block.split("\n"))
    width = len(rows[-1])
    characters = [character for character in block if character != "\n"]
    if width == 0 and characters:
        raise ValueError("pattern ends with an empty row")
    columns = [[] for _ in range(width)]
    for position, character in enumerate(characters):
        columns[position % width].append(character)
    return Reflection(rows, tuple("".join(column) for column in columns), block)


def _total(text: str, with_smudge: bool) -> int:
    return sum(
        parse_reflection(block).value(with_smudge)
        for block in text.split("\n\n")
        if block
    )


def solution_1(text: str) -> int:
    """Summary of all patterns' mirror lines."""
    return _total(text, with_smudge=False)


def solution_2(text: str) -> int:
    """Summary of all patterns' mirror lines after fixing one smudge."""
    return _total(text, with_smudge=True)