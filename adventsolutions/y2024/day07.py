"""Bridge repair: can the numbers be combined with operators into the result."""

from __future__ import annotations

from enum import Enum
from itertools import product

Equation = tuple[int, list[int]]


def parse_input(text: str) -> list[Equation]:
    """Parse lines such as ``190: 10 19``."""
    equations = []
    for line in text.splitlines():
        result, separator, numbers = line.partition(": ")
        if not separator:
            raise ValueError(f"not an equation line: {line!r}")
        equations.append((int(result), [int(part) for part in numbers.split(" ")]))
    return equations


class Operation(Enum):
    ADD = "+"
    MULTIPLY = "*"
    CONCAT = "||"

    def is_top(self) -> bool:
        """True for the last operation of the cycle, which carries over."""
        return self is Operation.MULTIPLY

    def successor(self, allow_concat: bool) -> Operation:
        """The next operation in the cycle ADD, (CONCAT,) MULTIPLY."""
        if self is Operation.ADD:
            return Operation.CONCAT if allow_concat else Operation.MULTIPLY
        if self is Operation.CONCAT:
            return Operation.MULTIPLY
        return Operation.ADD

    def apply(self, a: int, b: int) -> int:
        if self is Operation.ADD:
            return a + b
        if self is Operation.MULTIPLY:
            return a * b
        return int(f"{a}{b}")


class Operations:
    """A counter over all operator combinations, first position changing fastest."""

    def __init__(self, size: int, allow_concat: bool) -> None:
        self.operations = [Operation.ADD] * size
        self.allow_concat = allow_concat

    def advance(self) -> bool:
        """Move to the next combination; False once all are MULTIPLY."""
        if all(operation is Operation.MULTIPLY for operation in self.operations):
            return False
        for index, operation in enumerate(self.operations):
            carry = operation.is_top()
            self.operations[index] = operation.successor(self.allow_concat)
            if not carry:
                break
        return True


def _check_numbers(numbers: list[int]) -> None:
    if not numbers:
        raise ValueError("an equation needs at least one number")


def can_operations_combine_result(equation: Equation, allow_concat: bool) -> bool:
    """True when some operator combination turns the numbers into the result."""
    result, numbers = equation
    _check_numbers(numbers)
    if any(number >= result for number in numbers):
        return False
    if sum(number for number in numbers if number == 1) > result:
        return False
    operations = Operations(len(numbers) - 1, allow_concat)
    while True:
        value = numbers[0]
        for operation, number in zip(operations.operations, numbers[1:]):
            value = operation.apply(value, number)
            if value > result:
                break
        if value == result:
            return True
        if not operations.advance():
            return False


def can_combine_two_operators(equation: Equation) -> bool:
    """Addition and multiplication only; any partial value equal to the result counts."""
    result, numbers = equation
    _check_numbers(numbers)
    if any(number >= result for number in numbers):
        return False
    for combination in product((Operation.ADD, Operation.MULTIPLY), repeat=len(numbers) - 1):
        value = numbers[0]
        for operation, number in zip(combination, numbers[1:]):
            value = operation.apply(value, number)
            if value == result:
                return True
    return False