"""Day 18: escaping a memory grid while bytes fall."""

import re
from dataclasses import dataclass

_NUMBER_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Dimensions:
    """Width and height of the memory space."""

    width: int
    height: int

    def contains(self, point):
        """True if the (x, y) point lies inside the memory space."""
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height


MEMORY = Dimensions(width=71, height=71)
BYTES_TO_APPLY = 1024


def _parse_number(token):
    if not _NUMBER_RE.fullmatch(token):
        raise ValueError(f"Invalid number: {token!r}")
    return int(token)


def parse_input(text):
    """Return the falling byte positions as (x, y) tuples, in order."""
    points = []
    for idx, line in enumerate(text.splitlines()):
        parts = line.split(",")
        if len(parts) != 2:
            raise ValueError(f"Invalid point on line {idx}")
        x, y = parts
        points.append((_parse_number(x), _parse_number(y)))
    return points


def _neighbours(point, dim):
    x, y = point
    for candidate in ((x, y - 1), (x, y + 1), (x + 1, y), (x - 1, y)):
        if dim.contains(candidate):
            yield candidate


def shortest_path(corrupted, dim):
    """A shortest path from the top-left to the bottom-right corner, or []."""
    start = (0, 0)
    goal = (dim.width - 1, dim.height - 1)
    parents = {}
    visited = set()
    frontier = [start]
    while frontier:
        visited.update(frontier)
        next_frontier = []
        for point in frontier:
            for neighbour in _neighbours(point, dim):
                if neighbour in visited or neighbour in corrupted:
                    continue
                if neighbour not in parents:
                    next_frontier.append(neighbour)
                parents[neighbour] = point
                if neighbour == goal:
                    return _collect_path(parents, goal)
        frontier = next_frontier
    return []


def _collect_path(parents, goal):
    path = [goal]
    while path[-1] in parents:
        path.append(parents[path[-1]])
    path.reverse()
    return path


def steps_to_exit(text, bytes_to_apply, dim):
    """Minimum number of steps to the exit after some bytes have fallen."""
    corrupted = set(parse_input(text)[:bytes_to_apply])
    path = shortest_path(corrupted, dim)
    if not path:
        raise ValueError("There is no path to the exit")
    return len(path) - 1


def first_blocking_byte(text, bytes_to_apply, dim):
    """The first byte after the initial ones that cuts off the exit."""
    all_bytes = parse_input(text)
    corrupted = set(all_bytes[:bytes_to_apply])
    path = shortest_path(corrupted, dim)
    for byte in all_bytes[bytes_to_apply:]:
        corrupted.add(byte)
        if byte in path:
            path = shortest_path(corrupted, dim)
            if not path:
                return byte
    raise ValueError("The path is never blocked")


def part_1(text):
    """Steps to the exit after the first kilobyte has fallen."""
    return steps_to_exit(text, BYTES_TO_APPLY, MEMORY)


def part_2(text):
    """Coordinates of the first byte that blocks the exit, as "x,y"."""
    x, y = first_blocking_byte(text, BYTES_TO_APPLY, MEMORY)
    return f"{x},{y}"