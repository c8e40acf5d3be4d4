"""Day 12: fencing garden regions."""

from collections import defaultdict
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A garden plot."""

    x: int
    y: int


@dataclass(frozen=True)
class Dimension:
    """Height and width of the garden."""

    height: int
    width: int


@dataclass(frozen=True)
class Area:
    """A connected region of plots growing the same plant."""

    plots: frozenset

    def contains(self, pos):
        """True if the position belongs to this region."""
        return pos in self.plots

    def size(self):
        """Number of plots in the region."""
        return len(self.plots)


@dataclass(frozen=True)
class GardenMap:
    """The plant grid and its size."""

    dim: Dimension
    grid: tuple

    def plant_at(self, pos):
        """The plant growing at a position."""
        return self.grid[pos.y][pos.x]


def parse_map(text):
    """Parse the garden into a grid of plant characters."""
    grid = tuple(text.splitlines())
    if not grid:
        raise ValueError("Input is empty")
    return GardenMap(dim=Dimension(height=len(grid), width=len(grid[0])), grid=grid)


def get_next_positions(pos, dim):
    """Orthogonal neighbours of a position that lie inside the garden."""
    positions = set()
    if pos.x > 0:
        positions.add(Position(pos.x - 1, pos.y))
    if pos.y > 0:
        positions.add(Position(pos.x, pos.y - 1))
    if pos.x + 1 < dim.width:
        positions.add(Position(pos.x + 1, pos.y))
    if pos.y + 1 < dim.height:
        positions.add(Position(pos.x, pos.y + 1))
    return positions


def count_open_sides(pos, garden):
    """Number of sides of a plot not shared with the same plant."""
    plant = garden.plant_at(pos)
    same = sum(
        1 for neighbour in get_next_positions(pos, garden.dim) if garden.plant_at(neighbour) == plant
    )
    return 4 - same


def _discover_area(start, garden):
    plant = garden.plant_at(start)
    found = set()
    frontier = {start}
    while frontier:
        found |= frontier
        frontier = {
            neighbour
            for pos in frontier
            for neighbour in get_next_positions(pos, garden.dim)
            if neighbour not in found and garden.plant_at(neighbour) == plant
        }
    return Area(plots=frozenset(found))


def collect_areas(garden):
    """Regions of the garden grouped by plant, in order of discovery."""
    result = defaultdict(list)
    for y, row in enumerate(garden.grid):
        for x, plant in enumerate(row):
            pos = Position(x, y)
            if any(area.contains(pos) for area in result[plant]):
                continue
            result[plant].append(_discover_area(pos, garden))
    return dict(result)


def get_perimeter(area, garden):
    """Total fence length around a region."""
    return sum(count_open_sides(pos, garden) for pos in area.plots)


def _corner_points(pos):
    return {
        (pos.x, pos.y),
        (pos.x + 1, pos.y),
        (pos.x, pos.y + 1),
        (pos.x + 1, pos.y + 1),
    }


def _plots_around_corner(point):
    x, y = point
    candidates = [(x, y), (x - 1, y), (x, y - 1), (x - 1, y - 1)]
    return [Position(px, py) for px, py in candidates if px >= 0 and py >= 0]


def _corner_count(point, area):
    plots = [p for p in _plots_around_corner(point) if area.contains(p)]
    if len(plots) == 2:
        first, second = plots
        return 2 if first.x != second.x and first.y != second.y else 0
    return 1 if len(plots) in (1, 3) else 0


def count_corners_for_area(area):
    """Number of corners of a region, which equals its number of sides."""
    points = {point for pos in area.plots for point in _corner_points(pos)}
    return sum(_corner_count(point, area) for point in points)


def part_1(text):
    """Fence price using area times perimeter."""
    garden = parse_map(text)
    return sum(
        get_perimeter(area, garden) * area.size()
        for areas in collect_areas(garden).values()
        for area in areas
    )


def part_2(text):
    """Fence price using area times number of sides."""
    garden = parse_map(text)
    return sum(
        count_corners_for_area(area) * area.size()
        for areas in collect_areas(garden).values()
        for area in areas
    )