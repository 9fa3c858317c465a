"""Seed almanac: follow seed ranges through a chain of category maps."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

SeedRange = tuple[int, int]
"""An inclusive ``(start, end)`` range of seed numbers."""


@dataclass(frozen=True)
class AlmanacRange:
    """Maps ``length`` numbers starting at ``source`` to ``destination``."""

    source: int
    destination: int
    length: int

    @property
    def minimum(self) -> int:
        return self.source

    @property
    def maximum(self) -> int:
        return self.source + self.length - 1

    def value_for(self, seed: int) -> int:
        """The number that ``seed`` is mapped to by this range."""
        return seed - self.source + self.destination


def _apply(mapping: AlmanacRange | None, seed: int) -> int:
    return mapping.value_for(seed) if mapping is not None else seed


@dataclass
class AlmanacMap:
    """One category map; ``mappings`` are ordered by descending source."""

    source: str
    destination: str
    mappings: list[AlmanacRange] = field(default_factory=list)

    def matched_range(self, seed: int) -> AlmanacRange | None:
        """The range that covers ``seed``, or None when it maps to itself."""
        if not self.mappings:
            raise ValueError(f"map {self.source!r} has no ranges")
        if self.mappings[-1].minimum > seed:
            return None
        return next(
            (m for m in self.mappings if m.minimum <= seed <= m.maximum),
            None,
        )

    def corresponding_number(self, seed: int) -> int:
        return _apply(self.matched_range(seed), seed)

    def ranges_inside(self, seed_range: SeedRange) -> list[SeedRange]:
        """Map the parts of ``seed_range`` that fall strictly inside ranges."""
        seed_start, seed_end = seed_range
        ranges: list[SeedRange] = []
        for mapping in self.mappings:
            if mapping.minimum >= seed_end or mapping.maximum <= seed_start:
                continue
            start = max(seed_start, mapping.minimum)
            end = min(seed_end, mapping.maximum)
            ranges.append((mapping.value_for(start), mapping.value_for(end)))
        return ranges or [seed_range]

    def corresponding_ranges(self, seed_ranges: Iterable[SeedRange]) -> list[SeedRange]:
        """Map every seed range to the ranges of the next category."""
        result: list[SeedRange] = []
        for start, end in seed_ranges:
            start_match = self.matched_range(start)
            end_match = self.matched_range(end)
            if start_match == end_match:
                result.append((_apply(start_match, start), _apply(end_match, end)))
            else:
                result.extend(self.ranges_inside((start, end)))
        return result


@dataclass
class Almanac:
    seeds: list[SeedRange]
    maps: list[AlmanacMap]

    def _map_from(self, category: str) -> AlmanacMap:
        for almanac_map in self.maps:
            if almanac_map.source == category:
                return almanac_map
        raise ValueError(f"no map starts at category {category!r}")

    def corresponding_ranges(
        self, seed_range: SeedRange, start: str, destination: str
    ) -> list[SeedRange]:
        """Follow ``seed_range`` from category ``start`` to ``destination``."""
        category = start
        ranges = [seed_range]
        while category != destination:
            almanac_map = self._map_from(category)
            ranges = almanac_map.corresponding_ranges(ranges)
            category = almanac_map.destination
        return ranges


def parse_seeds(text: str) -> list[SeedRange]:
    """Parse ``seeds: a n b m ...`` into inclusive ranges ``(a, a + n - 1)``."""
    prefix = "seeds: "
    if not text.startswith(prefix):
        raise ValueError(f"not a seeds line: {text!r}")
    numbers = [int(part) for part in text[len(prefix):].split(" ")]
    return [
        (start, start + length - 1)
        for start, length in zip(numbers[0::2], numbers[1::2])
    ]


def parse_range(text: str) -> AlmanacRange:
    """Parse a ``destination source length`` line."""
    parts = text.split(" ")
    if len(parts) < 3:
        raise ValueError(f"not a range line: {text!r}")
    destination, source, length = (int(part) for part in parts[:3])
    return AlmanacRange(source=source, destination=destination, length=length)


def parse_map(text: str) -> AlmanacMap:
    """Parse a block headed ``a-to-b map:`` followed by range lines."""
    source = ""
    destination = ""
    mappings = []
    for index, row in enumerate(text.split("\n")):
        if not row:
            continue
        if index == 0:
            if row.endswith(" map:"):
                names = row[: -len(" map:")].split("-")
                if len(names) < 3:
                    raise ValueError(f"not a map header: {row!r}")
                source, destination = names[0], names[2]
            continue
        mappings.append(parse_range(row))
    mappings.sort(key=lambda mapping: mapping.source, reverse=True)
    return AlmanacMap(source, destination, mappings)


def parse_almanac(text: str) -> Almanac:
    """Parse the seeds line and every map block."""
    blocks = text.split("\n\n")
    seeds = parse_seeds(blocks[0])
    maps = [parse_map(block) for block in blocks[1:] if block]
    return Almanac(seeds, maps)


def solution(almanac: Almanac, start: str, destination: str) -> int:
    """Lowest number reached in ``destination`` by any seed range."""
    return min(
        min(low for low, _ in almanac.corresponding_ranges(seed, start, destination))
        for seed in almanac.seeds
    )