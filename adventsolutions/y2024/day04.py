"""Ceres search: find XMAS in a letter grid and MAS crosses."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from itertools import pairwise

Coords = tuple[int, int]
Grid = dict[Coords, str]


class Direction(Enum):
    HORIZONTAL_FORWARD = (1, 0)
    HORIZONTAL_BACKWARD = (-1, 0)
    VERTICAL_DOWN = (0, 1)
    VERTICAL_UP = (0, -1)
    DIAGONAL_UP_LEFT = (-1, -1)
    DIAGONAL_DOWN_RIGHT = (1, 1)
    DIAGONAL_UP_RIGHT = (1, -1)
    DIAGONAL_DOWN_LEFT = (-1, 1)

    def step(self, position: Coords) -> Coords:
        """The position one step away in this direction."""
        dx, dy = self.value
        return position[0] + dx, position[1] + dy


def parse_input(text: str) -> Grid:
    """Map each ``(x, y)`` of the grid to its letter."""
    return {
        (x, y): character
        for y, line in enumerate(text.splitlines())
        for x, character in enumerate(line)
    }


def _is_xmas(grid: Mapping[Coords, str], start: Coords, direction: Direction) -> bool:
    position = start
    for letter in "MAS":
        position = direction.step(position)
        if grid.get(position) != letter:
            return False
    return True


def count_xmas_part1(grid: Mapping[Coords, str]) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    return sum(
        _is_xmas(grid, position, direction)
        for position, character in grid.items()
        if character == "X"
        for direction in Direction
    )


def _has_letter_on_same_side(grid: Mapping[Coords, str], centre: Coords, letter: str) -> bool:
    x, y = centre
    corners = [(x - 1, y - 1), (x + 1, y - 1), (x + 1, y + 1), (x - 1, y + 1)]
    return any(
        grid.get(first) == letter and grid.get(second) == letter
        for first, second in pairwise(corners + corners[:1])
    )


def count_xmas_part2(grid: Mapping[Coords, str]) -> int:
    """Number of A's with two M's on one side and two S's on the other."""
    return sum(
        1
        for position, character in grid.items()
        if character == "A"
        and _has_letter_on_same_side(grid, position, "M")
        and _has_letter_on_same_side(grid, position, "S")
    )