"""Day 8: antinodes of resonant antennas."""

import itertools
from collections import defaultdict
from dataclasses import dataclass


@dataclass(frozen=True)
class Dimensions:
    """Width and height of the map."""

    width: int
    height: int

    def is_in_bounds(self, point):
        """True if the (x, y) point lies on the map."""
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height


@dataclass
class AntennaMap:
    """Map size and antenna positions grouped by frequency."""

    dim: Dimensions
    frequencies: dict


def parse_map(text):
    """Parse the antenna map; '.' marks an empty cell."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("Input is empty")
    frequencies = defaultdict(set)
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char != ".":
                frequencies[char].add((x, y))
    dim = Dimensions(width=max(len(line) for line in lines), height=len(lines))
    return AntennaMap(dim=dim, frequencies=dict(frequencies))


def _pairs(points):
    return itertools.combinations(sorted(points), 2)


def _simple_antinodes(points):
    for (lx, ly), (rx, ry) in _pairs(points):
        dx, dy = rx - lx, ry - ly
        yield (rx + dx, ry + dy)
        yield (lx - dx, ly - dy)


def _line_points(origin, step, dim):
    x, y = origin
    dx, dy = step
    while dim.is_in_bounds((x, y)):
        yield (x, y)
        x, y = x + dx, y + dy


def _harmonic_antinodes(points, dim):
    for left, right in _pairs(points):
        step = (right[0] - left[0], right[1] - left[1])
        yield from _line_points(right, step, dim)
        yield from _line_points(left, (-step[0], -step[1]), dim)


def part_1(text):
    """Number of distinct in-bounds antinodes at twice the pair distance."""
    antenna_map = parse_map(text)
    return len(
        {
            point
            for points in antenna_map.frequencies.values()
            for point in _simple_antinodes(points)
            if antenna_map.dim.is_in_bounds(point)
        }
    )


def part_2(text):
    """Number of distinct antinodes anywhere on the lines through pairs."""
    antenna_map = parse_map(text)
    return len(
        {
            point
            for points in antenna_map.frequencies.values()
            for point in _harmonic_antinodes(points, antenna_map.dim)
        }
    )