"""Camel cards: rank poker-like hands, optionally with jokers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum


class HandValue(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


_FACES = {"T": 10, "J": 11, "Q": 12, "K": 13, "A": 14}
_JOKER = 1


@dataclass(frozen=True)
class Play:
    bid: int
    hand_value: HandValue
    hand: tuple[int, ...]

    @property
    def strength(self) -> tuple[HandValue, tuple[int, ...]]:
        """Sort key: hand type first, then the cards in order."""
        return (self.hand_value, self.hand)


def card_value(card: str) -> int:
    """Value of a card; unknown cards are worth 0."""
    if card in "23456789" and len(card) == 1:
        return int(card)
    return _FACES.get(card, 0)


def card_value_2(card: str) -> int:
    """Value of a card when ``J`` is a joker worth 1."""
    if card == "J":
        return _JOKER
    return card_value(card)


def hand_value_1(hand: Sequence[int]) -> HandValue:
    """Type of a hand without jokers."""
    counts = Counter(hand)
    distinct = len(counts)
    if distinct == 5:
        return HandValue.HIGH_CARD
    if distinct == 4:
        return HandValue.PAIR
    if distinct == 3:
        if 2 in counts.values():
            return HandValue.TWO_PAIR
        return HandValue.THREE_OF_A_KIND
    if distinct == 2:
        if any(count in (2, 3) for count in counts.values()):
            return HandValue.FULL_HOUSE
        return HandValue.FOUR_OF_A_KIND
    return HandValue.FIVE_OF_A_KIND


def hand_value_2(hand: Sequence[int]) -> HandValue:
    """Type of a hand in which cards of value 1 are jokers."""
    jokers = sum(1 for card in hand if card == _JOKER)
    counts = Counter(card for card in hand if card != _JOKER)
    distinct = len(counts)
    if distinct == 5:
        return HandValue.HIGH_CARD
    if distinct == 4:
        return HandValue.PAIR
    if distinct == 3:
        if jokers == 0 and 2 in counts.values():
            return HandValue.TWO_PAIR
        return HandValue.THREE_OF_A_KIND
    if distinct == 2:
        def fits_full_house(count: int) -> bool:
            if jokers > 2:
                return False
            return count in (3 - jokers, 2 - jokers)

        if all(fits_full_house(count) for count in counts.values()):
            return HandValue.FULL_HOUSE
        return HandValue.FOUR_OF_A_KIND
    return HandValue.FIVE_OF_A_KIND


def parse_play(row: str, jokers: bool) -> Play:
    """Parse a line such as ``32T3K 765``; with ``jokers`` J is a joker."""
    parts = row.split(" ")
    if len(parts) < 2:
        raise ValueError(f"not a play line: {row!r}")
    value_of = card_value_2 if jokers else card_value
    hand = tuple(value_of(card) for card in parts[0])
    hand_value = hand_value_2(hand) if jokers else hand_value_1(hand)
    return Play(bid=int(parts[1]), hand_value=hand_value, hand=hand)


def _total_winnings(plays: Iterable[Play]) -> int:
    ranked = sorted(plays, key=lambda play: play.strength)
    return sum(rank * play.bid for rank, play in enumerate(ranked, start=1))


def solution_1(plays: Iterable[Play]) -> int:
    """Total winnings of plays parsed without jokers."""
    return _total_winnings(plays)


def solution_2(plays: Iterable[Play]) -> int:
    """Total winnings of plays parsed with jokers."""
    return _total_winnings(plays)