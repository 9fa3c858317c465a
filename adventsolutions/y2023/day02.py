"""Cube games: which games fit a bag, and the power of the minimal bag."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum


class CubeColor(Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"


@dataclass
class Game:
    id: int
    cube_sets: list[dict[CubeColor, int]] = field(default_factory=list)


@dataclass(frozen=True)
class GameSummary:
    """The largest count of each colour seen in one game."""

    id: int
    max_red: int
    max_blue: int
    max_green: int

    def _maximum(self, color: CubeColor) -> int:
        return {
            CubeColor.RED: self.max_red,
            CubeColor.BLUE: self.max_blue,
            CubeColor.GREEN: self.max_green,
        }[color]

    def is_possible(self, bag: Mapping[CubeColor, int]) -> bool:
        """True when the bag holds at least as many cubes of each colour as seen."""
        return all(self._maximum(color) <= amount for color, amount in bag.items())

    def power(self) -> int:
        return self.max_red * self.max_blue * self.max_green


def parse_game(row: str) -> Game:
    """Parse a line such as ``Game 1: 3 blue, 4 red; 2 green``."""
    header, separator, body = row.partition(": ")
    if not header.startswith("Game "):
        raise ValueError(f"not a game line: {row!r}")
    if not separator:
        raise ValueError(f"game line without cube sets: {row!r}")
    game_id = int(header[len("Game "):])
    cube_sets = []
    for cube_set in body.split("; "):
        counts: dict[CubeColor, int] = {}
        for entry in cube_set.split(", "):
            for color in CubeColor:
                suffix = f" {color.value}"
                if entry.endswith(suffix):
                    counts[color] = int(entry.replace(suffix, ""))
                    break
        cube_sets.append(counts)
    return Game(game_id, cube_sets)


def summarize(game: Game) -> GameSummary:
    """Reduce a game to the largest count of each colour."""
    def largest(color: CubeColor) -> int:
        return max((cube_set.get(color, 0) for cube_set in game.cube_sets), default=0)

    return GameSummary(
        id=game.id,
        max_red=largest(CubeColor.RED),
        max_blue=largest(CubeColor.BLUE),
        max_green=largest(CubeColor.GREEN),
    )


def extract_games(rows: Iterable[str]) -> list[Game]:
    """Parse every non-empty row into a game."""
    return [parse_game(row) for row in rows if row]


def solution_1(games: Iterable[Game], bag: Mapping[CubeColor, int]) -> int:
    """Sum of the ids of the games that the bag could have produced."""
    return sum(
        summary.id
        for summary in map(summarize, games)
        if summary.is_possible(bag)
    )


def solution_2(games: Iterable[Game]) -> int:
    """Sum of the powers of the minimal bags of all games."""
    return sum(summarize(game).power() for game in games)