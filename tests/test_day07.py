import pytest

from aocsolve.day07 import (
    Equation,
    Operator,
    apply_operator,
    compute_result,
    is_equation_valid,
    parse_input,
    part_1,
    part_2,
)

EXAMPLE = "\n".join(
    [
        "190: 10 19",
        "3267: 81 40 27",
        "83: 17 5",
        "156: 15 6",
        "7290: 6 8 6 15",
        "161011: 16 10 13",
        "192: 17 8 14",
        "21037: 9 7 18 13",
        "292: 11 6 16 20",
    ]
)

OPS = (Operator.ADD, Operator.MULTIPLY)


@pytest.mark.parametrize(
    "result, operands, expected",
    [
        (190, (10, 19), True),
        (3267, (81, 40, 27), True),
        (83, (17, 5), False),
        (156, (15, 6), False),
        (7290, (6, 8, 6, 15), False),
        (161011, (16, 10, 13), False),
        (192, (17, 8, 14), False),
        (21037, (9, 7, 18, 13), False),
        (292, (11, 6, 16, 20), True),
    ],
)
def test_individual_equations(result, operands, expected):
    assert is_equation_valid(Equation(result, operands), OPS) is expected


def test_part_1_example():
    assert part_1(EXAMPLE) == 3749


def test_part_2_example():
    assert part_2(EXAMPLE) == 11387


def test_concatenation():
    assert apply_operator(12, 345, Operator.CONCATENATE) == 12345


def test_compute_result_left_to_right():
    assert compute_result((2, 3, 4), (Operator.ADD, Operator.MULTIPLY)) == 20


def test_compute_result_mismatch_raises():
    with pytest.raises(ValueError):
        compute_result((1, 2), (Operator.ADD, Operator.ADD))


def test_parse_input():
    assert parse_input("190: 10 19") == [Equation(190, (10, 19))]


def test_parse_invalid_equation_raises():
    with pytest.raises(ValueError):
        parse_input("190 10 19")