import pytest

from adventsolutions.y2024.day02 import count_valid_lists, is_valid_list, parse_input

EXAMPLE = (
    "7 6 4 2 1\n"
    "1 2 7 8 9\n"
    "9 7 6 2 1\n"
    "1 3 2 4 5\n"
    "8 6 4 4 1\n"
    "1 3 6 7 9\n"
)


def test_parse_input():
    parsed = parse_input(EXAMPLE)
    assert len(parsed) == 6
    assert parsed[0] == [7, 6, 4, 2, 1]


def test_example_1():
    assert count_valid_lists(parse_input(EXAMPLE), 0) == 2


def test_example_2_is_valid_list():
    parsed = parse_input(EXAMPLE)
    assert [is_valid_list(levels, 1) for levels in parsed] == [
        True,
        False,
        False,
        True,
        True,
        True,
    ]


def test_example_2():
    assert count_valid_lists(parse_input(EXAMPLE), 1) == 4


def test_single_level_is_valid():
    assert is_valid_list([5], 0) is True


def test_empty_list_is_rejected():
    with pytest.raises(ValueError):
        is_valid_list([], 1)