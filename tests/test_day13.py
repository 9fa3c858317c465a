import pytest

from adventsolutions.y2023.day13 import (
    differ_by_one,
    parse_reflection,
    solution_1,
    solution_2,
)

FIRST = "#.##..##.\n..#.##.#.\n##......#\n##......#\n..#.##.#.\n..##..##.\n#.#.##.#."
SECOND = "#...##..#\n#....#..#\n..##..###\n#####.##.\n#####.##.\n..##..###\n#....#..#"
EXAMPLE = FIRST + "\n\n" + SECOND


def test_parser():
    result = parse_reflection(FIRST)
    assert result.rows[0] == "#.##..##."
    assert result.rows[6] == "#.#.##.#."
    assert result.columns[0] == "#.##..#"
    assert result.columns[8] == "..##..."


@pytest.mark.parametrize(
    "expected, block",
    [
        (5, FIRST),
        (400, SECOND),
        (1, "###.###.#.#\n...##......\n..#########\n###.#......\n##....#####\n......#..##\n###....#...\n...##....##\n##...#..###"),
        (100, "##..###....\n##..###....\n..#.#.###..\n.#..#.#..#.\n#####...#..\n.....#####.\n...#.#.####"),
        (1, "##.....##\n..######.\n.....#.#.\n.....#.#.\n..######.\n##..#..##\n....###.#\n...####..\n....#.##.\n###.#...#\n###..##.#"),
        (10, "......##...\n#.....##...\n###.#..#.##\n.#######.##\n#.#.#...###\n..##.####..\n.####..####"),
        (1600, "#.#......#.\n..##....##.\n..#..##..#.\n..#.####.#.\n#..#.##.#..\n.####..####\n.#.######.#\n##.#....#.#\n..########.\n#.#.####.#.\n...#.##.#..\n#..........\n###.####.##\n#.###...##.\n#####..####\n.#...##...#\n.#...##...#"),
    ],
)
def test_value(expected, block):
    assert parse_reflection(block).value(False) == expected


def test_mirror_index_of_rows():
    reflection = parse_reflection(SECOND)
    assert reflection.mirror_index(reflection.rows, False) == 3


def test_differ_by_one():
    assert differ_by_one("0001000100010001", "0001000000010001")
    assert not differ_by_one("0001", "0001")
    assert not differ_by_one("0011", "0000")
    assert not differ_by_one("001", "0011")


def test_example_1():
    assert solution_1(EXAMPLE) == 405


def test_example_2():
    assert solution_2(EXAMPLE) == 400


def test_trailing_empty_row_raises():
    with pytest.raises(ValueError):
        parse_reflection("#.\n.#\n")