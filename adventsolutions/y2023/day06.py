"""Boat races: how many button press times beat the record."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Race:
    duration: int
    record: int

    def __post_init__(self) -> None:
        if self.duration < 0 or self.record < 0:
            raise ValueError("duration and record must not be negative")

    def optimal_press_time(self) -> int:
        return self.duration // 2

    def distance(self, press_duration: int) -> int:
        """Distance travelled when the button is held for ``press_duration``."""
        if not 0 <= press_duration <= self.duration:
            raise ValueError(f"press duration {press_duration} outside the race")
        return press_duration * (self.duration - press_duration)

    def _extra_steps(self) -> int:
        """How many presses shorter than the optimum still beat the record."""
        optimal = self.optimal_press_time()
        low, high = 0, optimal
        while low < high:
            middle = (low + high + 1) // 2
            if self.distance(optimal - middle) > self.record:
                low = middle
            else:
                high = middle - 1
        return low

    def count_better_than_record(self) -> int:
        """Number of (press, drive) splits counted as beating the record."""
        optimal = self.optimal_press_time()
        drive = self.duration - optimal
        count = 1 if optimal == drive else 2
        return count + 2 * self._extra_steps()

    def better_than_record(self) -> list[tuple[int, int]]:
        """The (press, drive) splits counted by :meth:`count_better_than_record`."""
        optimal = self.optimal_press_time()
        drive = self.duration - optimal
        solutions = [(optimal, drive)]
        if optimal != drive:
            solutions.append((drive, optimal))
        for step in range(1, self._extra_steps() + 1):
            press, rest = optimal - step, drive + step
            solutions.extend([(press, rest), (rest, press)])
        return solutions


def solution_1(races: Iterable[Race]) -> int:
    """Product of the winning counts of all races."""
    return math.prod(race.count_better_than_record() for race in races)