"""Cosmic expansion: distances between galaxies in an expanding universe."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import combinations


@dataclass
class Galaxy:
    id: int
    x: int
    y: int

    def distance(self, other: Galaxy) -> int:
        """Manhattan distance to ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass
class MilkyWay:
    galaxies: list[Galaxy] = field(default_factory=list)
    is_expanded: bool = False

    def _require_galaxies(self) -> None:
        if not self.galaxies:
            raise ValueError("the milky way has no galaxies")

    def empty_x(self) -> list[int]:
        """Columns below the largest x that hold no galaxy."""
        self._require_galaxies()
        used = {galaxy.x for galaxy in self.galaxies}
        return [x for x in range(max(used)) if x not in used]

    def empty_y(self) -> list[int]:
        """Rows below the largest y that hold no galaxy."""
        self._require_galaxies()
        used = {galaxy.y for galaxy in self.galaxies}
        return [y for y in range(max(used)) if y not in used]

    def expand(self, expansion_rate: int) -> None:
        """Replace every empty row and column by ``expansion_rate`` of them, once."""
        if self.is_expanded:
            return
        self.galaxies.sort(key=lambda galaxy: galaxy.y)
        for x in reversed(self.empty_x()):
            for galaxy in self.galaxies:
                if galaxy.x > x:
                    galaxy.x += expansion_rate - 1
        for y in reversed(self.empty_y()):
            for galaxy in self.galaxies:
                if galaxy.y > y:
                    galaxy.y += expansion_rate - 1
        self.is_expanded = True

    def total_distance(self) -> tuple[int, list[tuple[int, int]]]:
        """Sum of distances over all pairs, and the id pairs that were measured."""
        self._require_galaxies()
        pairs = list(combinations(self.galaxies, 2))
        total = sum(first.distance(second) for first, second in pairs)
        return total, [(first.id, second.id) for first, second in pairs]


def parse_milky_way(rows: Iterable[str]) -> MilkyWay:
    """Number each ``#`` from 1 in reading order."""
    galaxies = []
    for y, row in enumerate(rows):
        for x, character in enumerate(row):
            if character == "#":
                galaxies.append(Galaxy(len(galaxies) + 1, x, y))
    return MilkyWay(galaxies)