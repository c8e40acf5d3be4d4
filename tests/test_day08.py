import pytest

from aocsolve.day08 import Dimensions, parse_map, part_1, part_2

EXAMPLE = "\n".join(
    [
        "............",
        "........0...",
        ".....0......",
        ".......0....",
        "....0.......",
        "......A.....",
        "............",
        "............",
        "........A...",
        ".........A..",
        "............",
        "............",
    ]
)

T_EXAMPLE = "\n".join(
    [
        "T.........",
        "...T......",
        ".T........",
        "..........",
        "..........",
        "..........",
        "..........",
        "..........",
        "..........",
        "..........",
    ]
)


def test_part_1_example():
    assert part_1(EXAMPLE) == 14


def test_part_2_example():
    assert part_2(EXAMPLE) == 34


def test_part_2_t_example():
    assert part_2(T_EXAMPLE) == 9


@pytest.mark.parametrize(
    "point, expected",
    [((0, 0), True), ((2, 1), True), ((3, 0), False), ((0, 2), False), ((-1, 0), False)],
)
def test_is_in_bounds(point, expected):
    assert Dimensions(width=3, height=2).is_in_bounds(point) is expected


def test_parse_map_groups_frequencies():
    antenna_map = parse_map(EXAMPLE)
    assert antenna_map.dim == Dimensions(width=12, height=12)
    assert antenna_map.frequencies["A"] == {(6, 5), (8, 8), (9, 9)}
    assert len(antenna_map.frequencies["0"]) == 4


def test_empty_input_raises():
    with pytest.raises(ValueError):
        parse_map("")