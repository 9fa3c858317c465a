import pytest

from adventsolutions.y2024.day07 import (
    Operation,
    Operations,
    can_combine_two_operators,
    can_operations_combine_result,
    parse_input,
)

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""

A, M = Operation.ADD, Operation.MULTIPLY


def test_operations_iterator():
    operations = Operations(3, False)
    assert operations.operations == [A, A, A]
    expected = [
        [M, A, A],
        [A, M, A],
        [M, M, A],
        [A, A, M],
        [M, A, M],
        [A, M, M],
        [M, M, M],
    ]
    for state in expected:
        assert operations.advance() is True
        assert operations.operations == state
    assert operations.advance() is False


def test_operations_with_concat_cycle():
    operations = Operations(1, True)
    assert operations.advance()
    assert operations.operations == [Operation.CONCAT]
    assert operations.advance()
    assert operations.operations == [Operation.MULTIPLY]
    assert not operations.advance()


def test_operation_apply():
    assert Operation.ADD.apply(12, 345) == 357
    assert Operation.MULTIPLY.apply(12, 3) == 36
    assert Operation.CONCAT.apply(12, 345) == 12345


def test_example_1_can_operation_combine_result():
    assert can_operations_combine_result((5, [1, 2, 3]), False) is True


def test_example_1():
    parsed = parse_input(EXAMPLE)
    assert sum(result for result, numbers in parsed
               if can_operations_combine_result((result, numbers), False)) == 3749


def test_example_2():
    parsed = parse_input(EXAMPLE)
    assert sum(result for result, numbers in parsed
               if can_operations_combine_result((result, numbers), True)) == 11387


def test_two_operator_variant_on_example():
    parsed = parse_input(EXAMPLE)
    assert sum(result for result, numbers in parsed
               if can_combine_two_operators((result, numbers))) == 3749


def test_number_not_below_result_is_rejected():
    assert can_operations_combine_result((10, [10]), False) is False


def test_parse_input():
    assert parse_input("190: 10 19") == [(190, [10, 19])]


def test_empty_equation():
    with pytest.raises(ValueError):
        can_operations_combine_result((5, []), False)