"""Guard gallivant: follow a patrolling guard and find obstacles that trap it."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

Coords = tuple[int, int]
Grid = dict[Coords, str]


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    def next_coords(self, coords: Coords) -> Coords:
        """The position one step ahead."""
        dx, dy = self.value
        return coords[0] + dx, coords[1] + dy

    def rotate(self) -> Direction:
        """The direction after a quarter turn to the right."""
        return _RIGHT_TURN[self]


_RIGHT_TURN = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}

_GUARD_DIRECTIONS = {
    "^": Direction.NORTH,
    ">": Direction.EAST,
    "v": Direction.SOUTH,
    "<": Direction.WEST,
}


@dataclass
class Guard:
    coords: Coords
    direction: Direction
    previous_positions: dict[Coords, set[Direction]] = field(default_factory=dict)

    def copy(self) -> Guard:
        return Guard(
            self.coords,
            self.direction,
            {coords: set(directions) for coords, directions in self.previous_positions.items()},
        )

    def walk(self, grid: Mapping[Coords, str], obstacle: Coords | None = None) -> bool:
        """Take one step, turning right at obstacles.

        Returns True when the guard enters a position in a direction it has
        already walked there, i.e. it is caught in a loop.
        """
        for _ in range(4):
            ahead = self.direction.next_coords(self.coords)
            if ahead in grid and (grid[ahead] == "#" or ahead == obstacle):
                self.direction = self.direction.rotate()
                continue
            break
        else:
            raise ValueError(f"guard at {self.coords} is boxed in")
        self.coords = ahead
        if ahead not in grid:
            return False
        seen = self.previous_positions.setdefault(ahead, set())
        if self.direction in seen:
            return True
        seen.add(self.direction)
        return False


def parse_input(text: str) -> Grid:
    """Map each ``(x, y)`` of the grid to its character."""
    return {
        (x, y): character
        for y, line in enumerate(text.splitlines())
        for x, character in enumerate(line)
    }


def find_guard(grid: Mapping[Coords, str]) -> Guard:
    """The guard marked by ``^``, ``>``, ``v`` or ``<``."""
    for coords, character in grid.items():
        direction = _GUARD_DIRECTIONS.get(character)
        if direction is not None:
            return Guard(coords, direction, {coords: {Direction.NORTH}})
    raise ValueError("no guard found in map")


def traverse_map(
    grid: Mapping[Coords, str], guard: Guard, obstacle: Coords | None = None
) -> tuple[Guard, bool]:
    """Walk a copy of ``guard`` until it leaves the map or loops."""
    walker = guard.copy()
    while True:
        if walker.walk(grid, obstacle):
            return walker, True
        if walker.coords not in grid:
            return walker, False


def loops_with_obstacle(guard: Guard, grid: Mapping[Coords, str], obstacle: Coords) -> bool:
    """True when an extra obstacle at ``obstacle`` traps the guard in a loop."""
    return traverse_map(grid, guard, obstacle)[1]