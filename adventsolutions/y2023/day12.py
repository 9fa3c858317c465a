"""Hot springs: count the arrangements of damaged springs that fit a checksum."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache


class Spring(Enum):
    UNKNOWN = "?"
    WORKING = "."
    BROKEN = "#"


@dataclass(frozen=True)
class SpringRow:
    springs: tuple[Spring, ...]
    checksum: tuple[int, ...]

    def unfold(self) -> SpringRow:
        """Five copies of the springs joined by unknowns, and five copies of the checksum."""
        springs: list[Spring] = []
        for copy in range(5):
            if copy:
                springs.append(Spring.UNKNOWN)
            springs.extend(self.springs)
        return SpringRow(tuple(springs), self.checksum * 5)

    def count_arrangements(self) -> int:
        """Number of ways the unknown springs can be set so the groups match."""
        # A trailing working spring lets every group be followed by a gap.
        springs = (*self.springs, Spring.WORKING)
        groups = self.checksum
        needed = [0] * (len(groups) + 1)
        for index in range(len(groups) - 1, -1, -1):
            needed[index] = needed[index + 1] + groups[index] + 1

        @lru_cache(maxsize=None)
        def count(position: int, group: int) -> int:
            if group == len(groups):
                return 0 if Spring.BROKEN in springs[position:] else 1
            if len(springs) - position < needed[group]:
                return 0
            arrangements = 0
            if springs[position] is not Spring.BROKEN:
                arrangements += count(position + 1, group)
            size = groups[group]
            if (
                Spring.WORKING not in springs[position:position + size]
                and springs[position + size] is not Spring.BROKEN
            ):
                arrangements += count(position + size + 1, group + 1)
            return arrangements

        return count(0, 0)


def parse_spring_row(row: str) -> SpringRow:
    """Parse a line such as ``???.### 1,1,3``."""
    parts = row.split(" ")
    if len(parts) < 2:
        raise ValueError(f"not a spring row: {row!r}")
    springs = tuple(Spring(character) for character in parts[0])
    checksum = tuple(int(number) for number in parts[1].split(","))
    return SpringRow(springs, checksum)


def solution(spring_rows: Iterable[SpringRow]) -> int:
    """Sum of the arrangement counts of all rows."""
    return sum(row.count_arrangements() for row in spring_rows)