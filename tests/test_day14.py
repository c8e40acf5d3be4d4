import pytest

from aocsolve.day14 import (
    Dimensions,
    Robot,
    count_positions,
    find_christmas_tree,
    get_robot_positions,
    is_likely_a_christmas_tree,
    move_robot,
    parse_input,
    render_positions,
    solve_with_input,
)

EXAMPLE = "\n".join(
    [
        "p=0,4 v=3,-3",
        "p=6,3 v=-1,-3",
        "p=10,3 v=-1,2",
        "p=2,0 v=2,-1",
        "p=0,0 v=1,3",
        "p=3,0 v=-2,-2",
        "p=7,6 v=-1,-3",
        "p=3,0 v=-1,-2",
        "p=9,3 v=2,3",
        "p=7,3 v=-1,2",
        "p=2,4 v=2,-3",
        "p=9,5 v=-3,-3",
    ]
)

SMALL = Dimensions(width=11, height=7)


@pytest.mark.parametrize(
    "times, expected",
    [(1, (4, 1)), (2, (6, 5)), (3, (8, 2)), (4, (10, 6)), (5, (1, 3))],
)
def test_robots_move_with_wrapping(times, expected):
    robot = Robot(pos=(2, 4), velocity=(2, -3))
    assert move_robot(robot, SMALL, times) == expected


def test_solve_example():
    assert solve_with_input(EXAMPLE, SMALL, 100) == 12


def test_solve_for_single_moving_robot():
    text = "p=0,4 v=3,-3\np=0,0 v=0,0\np=0,6 v=0,0\np=10,0 v=0,0\np=10,6 v=0,0"
    assert solve_with_input(text, SMALL, 5) == 1


def test_parse_input():
    robots = parse_input("p=0,4 v=3,-3\np=6,3 v=-1,-3")
    assert robots == [Robot((0, 4), (3, -3)), Robot((6, 3), (-1, -3))]


def test_parse_invalid_line():
    with pytest.raises(ValueError):
        parse_input("nonsense")


def test_count_positions_ignores_middle():
    points = [(0, 0), (10, 0), (0, 6), (10, 6), (5, 3), (5, 0)]
    assert count_positions(points, SMALL) == 1


def test_get_robot_positions_merges_duplicates():
    robots = [Robot((1, 1), (0, 0)), Robot((1, 1), (0, 0))]
    assert get_robot_positions(robots, SMALL, 10) == {(1, 1)}


def test_is_likely_a_christmas_tree():
    assert is_likely_a_christmas_tree({(50, 50), (51, 60)})
    assert not is_likely_a_christmas_tree({(0, 0), (1, 1)})


def test_render_positions():
    assert render_positions({(0, 0)}, Dimensions(width=2, height=2)) == "#.\n.."


def test_find_christmas_tree_first_candidate():
    robots = [Robot((0, 0), (1, 1))]
    times, positions = next(find_christmas_tree(robots, Dimensions(width=101, height=103)))
    assert times == 31
    assert positions == {(31, 31)}