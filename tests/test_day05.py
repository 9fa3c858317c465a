import pytest

from adventsolutions.y2023.day05 import (
    Almanac,
    AlmanacRange,
    parse_almanac,
    parse_map,
    parse_range,
    parse_seeds,
    solution,
)

MAPS = """seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""

SINGLE_SEEDS = "seeds: 79 1 14 1 55 1 13 1\n\n" + MAPS
SEED_RANGES = "seeds: 79 14 55 13\n\n" + MAPS


def test_seeds_from_string():
    assert parse_seeds("seeds: 79 14 55 13") == [(79, 92), (55, 67)]


def test_seeds_need_prefix():
    with pytest.raises(ValueError):
        parse_seeds("79 14 55 13")


def test_parse_range():
    assert parse_range("50 98 2") == AlmanacRange(source=98, destination=50, length=2)


def test_map_from_string():
    almanac_map = parse_map("soil-to-fertilizer map:\n0 15 37\n37 52 2\n39 0 15")
    assert almanac_map.source == "soil"
    assert almanac_map.destination == "fertilizer"
    assert almanac_map.mappings[0] == AlmanacRange(source=52, destination=37, length=2)
    assert almanac_map.mappings[1] == AlmanacRange(source=15, destination=0, length=37)
    assert almanac_map.mappings[2] == AlmanacRange(source=0, destination=39, length=15)


@pytest.mark.parametrize(
    "seed, expected",
    [(12, 51), (14, 53), (15, 0), (51, 36), (52, 37), (53, 38), (54, 54), (55, 55)],
)
def test_corresponding_ranges_single_value(seed, expected):
    almanac_map = parse_map("soil-to-fertilizer map:\n0 15 37\n37 52 2\n39 0 15")
    assert almanac_map.corresponding_ranges([(seed, seed)]) == [(expected, expected)]


@pytest.mark.parametrize(
    "seed, expected",
    [(13, 13), (14, 14), (79, 81), (55, 57), (97, 99), (98, 50), (99, 51)],
)
def test_seed_to_soil_corresponding_number(seed, expected):
    almanac_map = parse_map("seed-to-soil map:\n50 98 2\n52 50 48")
    assert almanac_map.corresponding_number(seed) == expected


def test_ranges_inside_splits_at_range_edge():
    almanac_map = parse_map("a-to-b map:\n49 53 8\n0 11 42\n42 0 7\n57 7 4")
    assert almanac_map.ranges_inside((57, 69)) == [(53, 56)]


def test_ranges_inside_without_overlap_keeps_range():
    almanac_map = parse_map("a-to-b map:\n60 56 37\n56 93 4")
    assert almanac_map.ranges_inside((46, 56)) == [(46, 56)]


def test_parse_almanac_reads_all_maps():
    almanac = parse_almanac(SEED_RANGES)
    assert [m.source for m in almanac.maps] == [
        "seed", "soil", "fertilizer", "water", "light", "temperature", "humidity",
    ]
    assert almanac.seeds == [(79, 92), (55, 67)]


def test_example_1():
    almanac = parse_almanac(SINGLE_SEEDS)
    assert solution(almanac, "seed", "location") == 35


def test_example_2():
    almanac = parse_almanac(SEED_RANGES)
    assert solution(almanac, "seed", "location") == 46


def test_missing_map_is_an_error():
    almanac = Almanac(seeds=[(1, 1)], maps=[parse_map("seed-to-soil map:\n50 98 2")])
    with pytest.raises(ValueError):
        almanac.corresponding_ranges((1, 1), "seed", "location")