"""Day 14: security robots moving around a wrapping room."""

import itertools
import re
from dataclasses import dataclass

_ROBOT_RE = re.compile(r"p=(\d+),(\d+) v=(-?\d+),(-?\d+)")


@dataclass(frozen=True)
class Dimensions:
    """Width and height of the room."""

    width: int
    height: int


@dataclass(frozen=True)
class Robot:
    """Starting (x, y) position and (x, y) velocity of a robot."""

    pos: tuple
    velocity: tuple


ROOM = Dimensions(width=101, height=103)


def _parse_robot(line):
    match = _ROBOT_RE.search(line)
    if match is None:
        raise ValueError(f"Invalid line: {line!r}")
    px, py, vx, vy = (int(group) for group in match.groups())
    return Robot(pos=(px, py), velocity=(vx, vy))


def parse_input(text):
    """Return one robot per line."""
    return [_parse_robot(line) for line in text.splitlines()]


def move_robot(robot, dim, times):
    """Position of a robot after a number of seconds, wrapping at the edges."""
    (px, py), (vx, vy) = robot.pos, robot.velocity
    return ((px + vx * times) % dim.width, (py + vy * times) % dim.height)


def count_positions(points, dim):
    """Safety factor: product of robot counts in the four quadrants."""
    middle_x = dim.width // 2
    middle_y = dim.height // 2
    quadrants = [0, 0, 0, 0]
    for x, y in points:
        if x == middle_x or y == middle_y:
            continue
        quadrants[(x > middle_x) + 2 * (y > middle_y)] += 1
    top_left, top_right, bottom_left, bottom_right = quadrants
    return top_left * top_right * bottom_left * bottom_right


def solve_with_input(text, dim, times):
    """Safety factor after moving every robot for a number of seconds."""
    points = [move_robot(robot, dim, times) for robot in parse_input(text)]
    return count_positions(points, dim)


def get_robot_positions(robots, dim, times):
    """Set of occupied positions after a number of seconds."""
    return {move_robot(robot, dim, times) for robot in robots}


def is_likely_a_christmas_tree(positions):
    """True if most robots gather in the centre band of the room."""
    vertical = sum(1 for _, y in positions if 43 < y < 77)
    horizontal = sum(1 for x, _ in positions if 30 < x < 70)
    limit = len(positions) * 0.7
    return limit <= vertical or limit <= horizontal


def render_positions(positions, dim):
    """Draw the room with '#' for robots and '.' for empty cells."""
    return "\n".join(
        "".join("#" if (x, y) in positions else "." for x in range(dim.width))
        for y in range(dim.height)
    )


def find_christmas_tree(robots, dim):
    """Yield (seconds, positions) for each moment the robots may form a tree."""
    for times in itertools.count():
        positions = get_robot_positions(robots, dim, times)
        if is_likely_a_christmas_tree(positions):
            yield times, positions


def part_1(text):
    """Safety factor after 100 seconds in the full-size room."""
    return solve_with_input(text, ROOM, 100)