"""Scratchcards: points per card and the cascade of won copies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass(frozen=True)
class Card:
    id: int
    winning: frozenset[int] = field(default_factory=frozenset)
    playing: frozenset[int] = field(default_factory=frozenset)

    def match_count(self) -> int:
        """Number of winning numbers that were played."""
        return len(self.winning & self.playing)

    def points(self) -> int:
        """One point for the first match, doubled for every further one."""
        matches = self.match_count()
        return 2 ** (matches - 1) if matches else 0


def _numbers(text: str | None) -> frozenset[int]:
    if text is None:
        return frozenset()
    return frozenset(int(part) for part in text.split(" ") if part)


def parse_card(row: str) -> Card:
    """Parse a line such as ``Card 3: 1 21 | 69 1``."""
    parts = row.split(": ")
    card_id = 0
    if parts[0].startswith("Card "):
        card_id = int(parts[0][len("Card "):].strip())
    if len(parts) < 2:
        return Card(card_id)
    numbers = parts[1].split(" | ")
    winning = _numbers(numbers[0])
    playing = _numbers(numbers[1] if len(numbers) > 1 else None)
    return Card(card_id, winning, playing)


def parse_cards(rows: Iterable[str]) -> list[Card]:
    """Parse every row into a card."""
    return [parse_card(row) for row in rows]


def solution_1(cards: Iterable[Card]) -> int:
    """Total points of all cards."""
    return sum(card.points() for card in cards)


def card_counts(cards: Sequence[Card]) -> dict[int, int]:
    """How many instances of each card id exist once all copies are won.

    A card with id ``n`` and ``m`` matches wins one copy of each card at
    positions ``n`` to ``n + m - 1`` of the list.
    """
    @lru_cache(maxsize=None)
    def generated(position: int) -> Counter[int]:
        card = cards[position]
        result: Counter[int] = Counter({card.id: 1})
        end = min(card.id + card.match_count(), len(cards))
        for copy_position in range(card.id, end):
            result += generated(copy_position)
        return result

    total: Counter[int] = Counter()
    for position in range(len(cards)):
        total += generated(position)
    return dict(total)


def solution_2(cards: Sequence[Card]) -> int:
    """Total number of cards held once all copies are won."""
    return sum(card_counts(cards).values())