"""Day 10: hiking trails on a topographic map."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TopoMap:
    """Heights of the map as rows of digits."""

    grid: tuple

    @property
    def height(self):
        """Number of rows."""
        return len(self.grid)

    @property
    def width(self):
        """Number of columns."""
        return len(self.grid[0])

    @property
    def start_positions(self):
        """All (x, y) positions of height 0."""
        return {
            (x, y)
            for y, row in enumerate(self.grid)
            for x, value in enumerate(row)
            if value == 0
        }

    def value_at(self, pos):
        """Height at an (x, y) position."""
        x, y = pos
        return self.grid[y][x]

    def next_positions(self, pos):
        """Neighbouring positions exactly one step higher."""
        expected = self.value_at(pos) + 1
        if expected > 9:
            return set()
        x, y = pos
        candidates = []
        if x > 0:
            candidates.append((x - 1, y))
        if x < self.width - 1:
            candidates.append((x + 1, y))
        if y > 0:
            candidates.append((x, y - 1))
        if y < self.height - 1:
            candidates.append((x, y + 1))
        return {p for p in candidates if self.value_at(p) == expected}


def parse_input(text):
    """Parse the map of single-digit heights."""
    rows = []
    for line in text.splitlines():
        row = []
        for char in line:
            if not ("0" <= char <= "9"):
                raise ValueError(f"Invalid height: {char!r}")
            row.append(int(char))
        rows.append(tuple(row))
    if not rows:
        raise ValueError("Input is empty")
    return TopoMap(grid=tuple(rows))


def score_trail(start, topo):
    """Number of distinct height-9 positions reachable from a trailhead."""
    score = 0
    positions = {start}
    while positions:
        score += sum(1 for pos in positions if topo.value_at(pos) == 9)
        positions = {nxt for pos in positions for nxt in topo.next_positions(pos)}
    return score


def compute_rating(start, topo):
    """Number of distinct hiking trails from a trailhead to any height 9."""
    if topo.value_at(start) == 9:
        return 1
    return sum(compute_rating(pos, topo) for pos in topo.next_positions(start))


def part_1(text):
    """Sum of trailhead scores."""
    topo = parse_input(text)
    return sum(score_trail(pos, topo) for pos in topo.start_positions)


def part_2(text):
    """Sum of trailhead ratings."""
    topo = parse_input(text)
    return sum(compute_rating(pos, topo) for pos in topo.start_positions)