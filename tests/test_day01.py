import pytest

from aocsolve.day01 import parse_input, part_1, part_2

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_part_1_example():
    assert part_1(EXAMPLE) == 11


def test_part_2_example():
    assert part_2(EXAMPLE) == 31


def test_parse_input_columns():
    left, right = parse_input(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_wrong_separator_is_rejected():
    with pytest.raises(ValueError):
        parse_input("1 2")


def test_too_many_columns_is_rejected():
    with pytest.raises(ValueError, match="line 2"):
        parse_input("1   2\n1   2   3")


def test_non_numeric_is_rejected():
    with pytest.raises(ValueError):
        part_1("a   2")