"""Measure how long a call takes."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TypeVar

R = TypeVar("R")


def log_method_duration(function: Callable[[], R]) -> R:
    """Call ``function``, print how long it took and return its result."""
    start = time.perf_counter()
    result = function()
    elapsed = time.perf_counter() - start
    print(f"{elapsed:.6f}s")
    return result