from aocsolve.day03 import parse_multiplications, parse_operators, part_1, part_2

EXAMPLE_1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_1_example():
    assert part_1(EXAMPLE_1) == 161


def test_part_2_example():
    assert part_2(EXAMPLE_2) == 48


def test_parse_multiplications_example():
    assert parse_multiplications(EXAMPLE_1) == [(2, 4), (5, 5), (11, 8), (8, 5)]


def test_four_digit_operand_is_ignored():
    assert parse_multiplications("mul(1234,5)") == []


def test_parse_operators_example():
    assert parse_operators(EXAMPLE_2) == [(2, 4), "don't", (5, 5), (11, 8), "do", (8, 5)]


def test_disabled_until_reenabled():
    assert part_2("don't()mul(2,3)\ndo()mul(4,5)") == 20