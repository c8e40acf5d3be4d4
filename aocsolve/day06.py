"""Day 6: following a patrolling guard around a lab."""

import dataclasses
import enum
from dataclasses import dataclass


class Direction(enum.Enum):
    """Facing of the guard, with its step as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def turn_right(self):
        """The direction after a right turn."""
        return _RIGHT_TURNS[self]


_RIGHT_TURNS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

_GUARD_CHARS = {
    "^": Direction.UP,
    "V": Direction.DOWN,
    "<": Direction.LEFT,
    ">": Direction.RIGHT,
}


@dataclass(frozen=True)
class Point:
    """A cell of the lab."""

    x: int
    y: int


@dataclass(frozen=True)
class Guard:
    """Position and facing of the guard."""

    pos: Point
    dir: Direction


@dataclass(frozen=True)
class Map:
    """Obstacle cells and the size of the lab."""

    obstacles: frozenset
    height: int
    width: int

    def contains(self, point):
        """True if the point lies inside the lab."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def with_obstacle(self, point):
        """A copy of the map with one more obstacle."""
        return dataclasses.replace(self, obstacles=self.obstacles | {point})


def parse_input(text):
    """Return the map and the guard's starting state."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("Input is empty")
    obstacles = set()
    guard = None
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char == "#":
                obstacles.add(Point(x, y))
            elif char in _GUARD_CHARS:
                guard = Guard(Point(x, y), _GUARD_CHARS[char])
    if guard is None:
        raise ValueError("Input has no guard")
    area = Map(
        obstacles=frozenset(obstacles),
        height=len(lines),
        width=max(len(line) for line in lines),
    )
    return area, guard


def get_next_position(guard, area):
    """The guard's next state, or None once it leaves the map."""
    direction = guard.dir
    for _ in range(4):
        dx, dy = direction.value
        nxt = Point(guard.pos.x + dx, guard.pos.y + dy)
        if not area.contains(nxt):
            return None
        if nxt not in area.obstacles:
            return Guard(nxt, direction)
        direction = direction.turn_right()
    raise ValueError("The guard is trapped between obstacles")


def determine_guard_path(guard, area):
    """Every position the guard stands on, in order, until it leaves."""
    positions = []
    current = guard
    while current is not None:
        positions.append(current.pos)
        current = get_next_position(current, area)
    return positions


def check_is_loop(guard, area):
    """True if the guard walks in a loop and never leaves."""
    seen = set()
    current = guard
    while True:
        current = get_next_position(current, area)
        if current is None:
            return False
        if current in seen:
            return True
        seen.add(current)


def part_1(text):
    """Number of distinct positions the guard visits."""
    area, guard = parse_input(text)
    return len(set(determine_guard_path(guard, area)))


def part_2(text):
    """Number of positions where one new obstacle traps the guard in a loop."""
    area, guard = parse_input(text)
    candidates = {
        pos
        for pos in determine_guard_path(guard, area)
        if pos != guard.pos and pos not in area.obstacles
    }
    return sum(1 for pos in candidates if check_is_loop(guard, area.with_obstacle(pos)))