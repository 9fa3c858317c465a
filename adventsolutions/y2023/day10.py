"""Pipe maze: length and enclosed area of the loop through the start tile."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

Coordinate = tuple[int, int]


@dataclass(frozen=True)
class Pipe:
    character: str
    coordinate: Coordinate
    links: tuple[Coordinate, ...] = ()

    def find_next(self, coming_from: Pipe, maze: PipeMaze) -> Pipe | None:
        """The linked pipe, other than ``coming_from``, that links back to this one."""
        for link in self.links:
            candidate = maze.pipes.get(link)
            if candidate is None:
                continue
            if (
                candidate.coordinate != coming_from.coordinate
                and self.coordinate in candidate.links
            ):
                return candidate
        return None


@dataclass
class PipeMaze:
    pipes: dict[Coordinate, Pipe] = field(default_factory=dict)

    def start(self) -> Pipe:
        """The pipe marked ``S``."""
        for pipe in self.pipes.values():
            if pipe.character == "S":
                return pipe
        raise ValueError("maze has no start tile")


def _links(
    character: str, coordinate: Coordinate, char_map: Mapping[Coordinate, str]
) -> tuple[Coordinate, ...]:
    x, y = coordinate
    left = [(x - 1, y)] if x > 0 else []
    up = [(x, y - 1)] if y > 0 else []
    right = [(x + 1, y)] if (x + 1, y) in char_map else []
    down = [(x, y + 1)] if (x, y + 1) in char_map else []
    shapes = {
        "7": (left, down),
        "J": (up, left),
        "F": (right, down),
        "L": (up, right),
        "|": (up, down),
        "-": (left, right),
        "S": (left, right, up, down),
    }
    return tuple(link for part in shapes.get(character, ()) for link in part)


def parse_char_map(rows: Iterable[str]) -> dict[Coordinate, str]:
    """Map each ``(x, y)`` of the grid to its character."""
    return {
        (x, y): character
        for y, row in enumerate(rows)
        for x, character in enumerate(row)
    }


def build_maze(char_map: Mapping[Coordinate, str]) -> PipeMaze:
    """Turn a character map into pipes with their links."""
    return PipeMaze(
        {
            coordinate: Pipe(character, coordinate, _links(character, coordinate, char_map))
            for coordinate, character in char_map.items()
        }
    )


def _trace_loop(maze: PipeMaze, start: Pipe, first: Pipe) -> list[Pipe] | None:
    """Pipes from ``first`` back to ``start`` inclusive, or None on a dead end."""
    path = [first]
    previous, current = start, first
    while current != start:
        following = current.find_next(previous, maze)
        if following is None:
            return None
        path.append(following)
        previous, current = current, following
    return path


def _connected_firsts(maze: PipeMaze, start: Pipe) -> Iterable[Pipe]:
    for coordinate in start.links:
        first = maze.pipes.get(coordinate)
        if first is not None and start.coordinate in first.links:
            yield first


def solution_1(maze: PipeMaze) -> int:
    """Steps to the point of the loop farthest from the start."""
    start = maze.start()
    lengths = [
        len(path)
        for path in (_trace_loop(maze, start, first) for first in _connected_firsts(maze, start))
        if path is not None
    ]
    if not lengths:
        raise ValueError("no loop through the start tile")
    return min(lengths) // 2


def solution_2(maze: PipeMaze) -> int:
    """Number of tiles enclosed by the loop."""
    start = maze.start()
    loops: list[list[Pipe]] = []
    done_in_reverse: list[Pipe] = []
    for first in _connected_firsts(maze, start):
        if first in done_in_reverse:
            continue
        path = _trace_loop(maze, start, first)
        if path is None:
            continue
        done_in_reverse.append(path[-2] if len(path) > 1 else first)
        loops.append(path)
    if not loops:
        raise ValueError("no loop through the start tile")
    return min(calculate_area(path) for path in loops)


def calculate_area(pipes: Sequence[Pipe]) -> int:
    """Interior tile count of a closed loop (shoelace combined with Pick's theorem)."""
    coordinates = [pipe.coordinate for pipe in pipes]
    n = len(coordinates)
    if n == 0:
        raise ValueError("empty loop")
    doubled = sum(
        x1 * y2 - x2 * y1
        for (x1, y1), (x2, y2) in zip(coordinates, coordinates[1:] + coordinates[:1])
    )
    return abs(doubled) // 2 - n // 2 + 1