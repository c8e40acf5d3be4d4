import pytest

from aocsolve.day02 import (
    Safety,
    all_levels_safe,
    parse_input,
    part_1,
    part_2,
    with_problem_dampener,
)

EXAMPLE = (
    "7 6 4 2 1\n"
    "1 2 7 8 9\n"
    "9 7 6 2 1\n"
    "1 3 2 4 5\n"
    "8 6 4 4 1\n"
    "1 3 6 7 9\n"
)


def test_part_1_example():
    assert part_1(EXAMPLE) == 2


def test_part_2_example():
    assert part_2(EXAMPLE) == 4


def test_last_level_is_unsafe():
    assert part_2("1 2 3 8") == 1


def test_direction_change_at_start():
    assert part_2("4 2 3 4") == 1


def test_parse_input():
    assert parse_input("1 2\n3 4 5") == [[1, 2], [3, 4, 5]]


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_input("1 x 3")


@pytest.mark.parametrize(
    "levels, expected",
    [
        ([7, 6, 4, 2, 1], Safety.SAFE),
        ([1, 2, 7, 8, 9], Safety.UNSAFE),
        ([8, 6, 4, 4, 1], Safety.UNSAFE),
        ([1, 3, 2, 4, 5], Safety.UNSAFE),
    ],
)
def test_all_levels_safe(levels, expected):
    assert all_levels_safe(levels) is expected


@pytest.mark.parametrize(
    "levels, expected",
    [
        ([1, 3, 2, 4, 5], Safety.SAFE),
        ([8, 6, 4, 4, 1], Safety.SAFE),
        ([1, 2, 7, 8, 9], Safety.UNSAFE),
        ([9, 7, 6, 2, 1], Safety.UNSAFE),
    ],
)
def test_with_problem_dampener(levels, expected):
    assert with_problem_dampener(levels) is expected