import pytest

from adventsolutions.y2023.day06 import Race, solution_1


@pytest.mark.parametrize(
    "press, expected",
    [(0, 0), (1, 6), (2, 10), (3, 12), (4, 12), (5, 10), (6, 6), (7, 0)],
)
def test_calculation(press, expected):
    assert Race(duration=7, record=9).distance(press) == expected


def test_distance_outside_race_raises():
    with pytest.raises(ValueError):
        Race(duration=7, record=9).distance(8)


def test_negative_record_raises():
    with pytest.raises(ValueError):
        Race(duration=7, record=-1)


def test_example_1():
    races = [Race(7, 9), Race(15, 40), Race(30, 200)]
    assert len(races[0].better_than_record()) == 4
    assert len(races[1].better_than_record()) == 8
    assert len(races[2].better_than_record()) == 9
    assert solution_1(races) == 288


def test_better_than_record_order():
    assert Race(7, 9).better_than_record() == [(3, 4), (4, 3), (2, 5), (5, 2)]


def test_count_matches_listed_solutions():
    for race in [Race(7, 9), Race(15, 40), Race(30, 200), Race(61, 430)]:
        assert race.count_better_than_record() == len(race.better_than_record())


def test_solution_1():
    races = [Race(61, 430), Race(67, 1036), Race(75, 1307), Race(71, 1150)]
    assert solution_1(races) == 316800


def test_example_2():
    assert solution_1([Race(71530, 940200)]) == 71503