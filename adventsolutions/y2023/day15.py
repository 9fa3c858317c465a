"""Lens library: a small string hash and a box-of-lenses simulation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Insert:
    """Put a lens with ``focal_length`` labelled ``label`` into its box."""

    label: str
    focal_length: int


@dataclass(frozen=True)
class Remove:
    """Take the lens labelled ``label`` out of its box."""

    label: str


def custom_hash(text: str) -> int:
    """Add each code point, multiply by 17, keep the remainder modulo 256."""
    value = 0
    for character in text:
        value = (value + ord(character)) * 17 % 256
    return value


def parse_operation(text: str) -> Insert | Remove:
    """Parse ``label=focal`` or ``label-``."""
    if "=" in text:
        parts = text.split("=")
        return Insert(parts[0], int(parts[1]))
    if "-" in text:
        return Remove(text.split("-")[0])
    raise ValueError(f"cannot parse {text!r}")


def focusing_power(boxes: Mapping[int, Iterable[tuple[str, int]]]) -> int:
    """Sum over lenses of (box + 1) * (slot + 1) * focal length."""
    return sum(
        (box + 1) * slot * focal
        for box, lenses in boxes.items()
        for slot, (_, focal) in enumerate(lenses, start=1)
    )


def solution_1(text: str) -> int:
    """Sum of the hashes of all comma-separated steps."""
    return sum(custom_hash(step) for step in text.split(","))


def solution_2(text: str) -> int:
    """Focusing power after running all steps."""
    boxes: dict[int, dict[str, int]] = {}
    for operation in map(parse_operation, text.split(",")):
        box = custom_hash(operation.label)
        if isinstance(operation, Insert):
            boxes.setdefault(box, {})[operation.label] = operation.focal_length
        elif box in boxes:
            boxes[box].pop(operation.label, None)
    return focusing_power({box: lenses.items() for box, lenses in boxes.items()})