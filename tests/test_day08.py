import pytest

from adventsolutions.y2023.day08 import (
    Direction,
    Network,
    least_common_multiple,
    parse_instructions,
    parse_lookup,
    parse_network,
    prime_factorization,
    solution_1,
    solution_2,
)

EXAMPLE_1 = "LLR\n\nAAA = (BBB, BBB)\nBBB = (AAA, ZZZ)\nZZZ = (ZZZ, ZZZ)"

EXAMPLE_2 = (
    "LR\n\n"
    "11A = (11B, XXX)\n"
    "11B = (XXX, 11Z)\n"
    "11Z = (11B, XXX)\n"
    "22A = (22B, XXX)\n"
    "22B = (22C, 22C)\n"
    "22C = (22Z, 22Z)\n"
    "22Z = (22B, 22B)\n"
    "XXX = (XXX, XXX)"
)


def test_parser():
    instructions = parse_instructions("LLR")
    assert instructions == [Direction.LEFT, Direction.LEFT, Direction.RIGHT]

    lookup = parse_lookup("BBB = (AAA, ZZZ)")
    assert "BBB" in lookup
    node = lookup["BBB"]
    assert node.left == "AAA"
    assert node.right == "ZZZ"


def test_example_1():
    assert solution_1(parse_network(EXAMPLE_1), "AAA", "ZZZ") == 6


def test_example_2():
    assert solution_2(parse_network(EXAMPLE_2), "A", "Z") == 6


def test_starting_points():
    network = parse_network(EXAMPLE_2)
    assert network.starting_points("A") == {"11A", "22A"}


def test_next_node():
    network = parse_network(EXAMPLE_1)
    assert network.next_node("BBB", Direction.RIGHT) == "ZZZ"
    assert network.next_node("BBB", Direction.LEFT) == "AAA"


def test_prime_factorization():
    assert prime_factorization(12) == {2: 2, 3: 1}
    assert prime_factorization(1) == {}


def test_least_common_multiple():
    assert least_common_multiple([2, 3]) == 6
    assert least_common_multiple([4, 6]) == 12
    assert least_common_multiple([]) == 1


def test_invalid_direction():
    with pytest.raises(ValueError):
        parse_instructions("LX")


def test_invalid_key_length():
    with pytest.raises(ValueError):
        parse_lookup("BB = (AAA, ZZZ)")


def test_empty_instructions():
    network = Network([], parse_lookup("AAA = (ZZZ, ZZZ)"))
    with pytest.raises(ValueError):
        solution_1(network, "AAA", "ZZZ")