"""Haunted wasteland: walk a left/right network of three-letter nodes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from itertools import cycle


class Direction(Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Node:
    left: str
    right: str


@dataclass
class Network:
    instructions: list[Direction]
    nodes: dict[str, Node] = field(default_factory=dict)

    def next_node(self, key: str, direction: Direction) -> str:
        node = self.nodes[key]
        return node.left if direction is Direction.LEFT else node.right

    def starting_points(self, suffix: str) -> set[str]:
        """All node keys whose last character is ``suffix``."""
        return {key for key in self.nodes if key[-1] == suffix}

    def _steps(self) -> Iterable[Direction]:
        if not self.instructions:
            raise ValueError("network has no instructions")
        return cycle(self.instructions)


def _key(text: str) -> str:
    if len(text) != 3:
        raise ValueError(f"node key must have three characters: {text!r}")
    return text


def parse_instructions(text: str) -> list[Direction]:
    """Parse a line of ``L`` and ``R`` characters."""
    return [Direction(character) for character in text]


def parse_lookup(text: str) -> dict[str, Node]:
    """Parse lines such as ``BBB = (AAA, ZZZ)``."""
    nodes = {}
    for row in text.split("\n"):
        if not row:
            continue
        key, separator, targets = row.partition(" = ")
        if not separator or not (targets.startswith("(") and targets.endswith(")")):
            raise ValueError(f"not a node line: {row!r}")
        pair = targets[1:-1].split(", ")
        if len(pair) != 2:
            raise ValueError(f"not a node line: {row!r}")
        nodes[_key(key)] = Node(left=_key(pair[0]), right=_key(pair[1]))
    return nodes


def parse_network(text: str) -> Network:
    """Parse the instruction line, a blank line and the node lines."""
    blocks = text.split("\n\n")
    if len(blocks) < 2:
        raise ValueError("expected instructions and nodes separated by a blank line")
    return Network(parse_instructions(blocks[0]), parse_lookup(blocks[1]))


def solution_1(network: Network, start: str, end: str) -> int:
    """Steps needed to walk from ``start`` to ``end``."""
    current = start
    count = 0
    for direction in network._steps():
        if current == end:
            break
        current = network.next_node(current, direction)
        count += 1
    return count


def solution_2(network: Network, start: str, end: str) -> int:
    """Steps until every walker from a ``start`` node is on an ``end`` node."""
    lengths = []
    for key in network.starting_points(start):
        current = key
        count = 0
        for direction in network._steps():
            if current[-1] == end:
                break
            current = network.next_node(current, direction)
            count += 1
        lengths.append(count)
    return least_common_multiple(lengths)


def prime_factorization(number: int) -> dict[int, int]:
    """Map each prime factor of ``number`` to its exponent."""
    factors: Counter[int] = Counter()
    divisor = 2
    while number > 1:
        while number % divisor == 0:
            factors[divisor] += 1
            number //= divisor
        divisor += 1
    return dict(factors)


def least_common_multiple(numbers: Iterable[int]) -> int:
    """Least common multiple, built from the highest power of each prime."""
    highest: dict[int, int] = {}
    for number in numbers:
        for factor, count in prime_factorization(number).items():
            highest[factor] = max(highest.get(factor, 0), count)
    result = 1
    for factor, count in highest.items():
        result *= factor**count
    return result