import pytest

from aocsolve.day11 import (
    apply_rules,
    blink,
    count_digits,
    count_stones,
    parse_input,
    part_1,
    part_2,
)

EXAMPLE = "125 17"


def test_part_1_example():
    assert part_1(EXAMPLE) == 55312


def test_part_2_example():
    assert part_2(EXAMPLE) == 65601038650482


@pytest.mark.parametrize("value, expected", [(0, 1), (1, 1), (10, 2), (110, 3)])
def test_count_digits(value, expected):
    assert count_digits(value) == expected


@pytest.mark.parametrize(
    "value, expected", [(0, [1]), (1000, [10, 0]), (1, [2024]), (99, [9, 9])]
)
def test_apply_rules(value, expected):
    assert apply_rules(value) == expected


def test_single_blink():
    assert blink(1, [0, 1, 10, 99, 999]) == [1, 2024, 1, 0, 9, 9, 2021976]


def test_six_blinks_length():
    assert len(blink(6, [125, 17])) == 22


def test_count_matches_blink():
    assert count_stones(25, [125, 17]) == 55312


def test_parse_input():
    assert parse_input("125 17\n") == [125, 17]


def test_parse_invalid():
    with pytest.raises(ValueError):
        parse_input("12 x")