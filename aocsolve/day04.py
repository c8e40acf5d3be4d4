"""Day 4: word search for XMAS."""

_WORD_LENGTH = 4


def parse_input(text):
    """Return the puzzle as a list of rows of characters."""
    return [list(line) for line in text.splitlines()]


def generate_straight_positions(row, col):
    """Horizontal and vertical runs of four cells starting at a cell."""
    span = range(_WORD_LENGTH)
    return [
        [(row, col + i) for i in span],
        [(row + i, col) for i in span],
        [(row, col - i) for i in span],
        [(row - i, col) for i in span],
    ]


def generate_diagonals(row, col):
    """Diagonal runs of four cells starting at a cell."""
    return [
        [(row + i * row_dir, col + i * col_dir) for i in range(_WORD_LENGTH)]
        for row_dir in (1, -1)
        for col_dir in (1, -1)
    ]


def generate_positions(row, col, max_row, max_col):
    """All runs of four cells from a cell that lie inside the grid."""
    runs = generate_straight_positions(row, col) + generate_diagonals(row, col)
    return [
        run
        for run in runs
        if all(0 <= r < max_row and 0 <= c < max_col for r, c in run)
    ]


def _count_words(row, col, grid):
    runs = generate_positions(row, col, len(grid), len(grid[row]))
    words = ("".join(grid[r][c] for r, c in run) for run in runs)
    return sum(1 for word in words if word in ("XMAS", "SAMX"))


def _cross_positions(row, col, grid):
    if row < 1 or col < 1 or row + 1 >= len(grid) or col + 1 >= len(grid[row]):
        return []
    return [
        [(row - 1, col - 1), (row, col), (row + 1, col + 1)],
        [(row - 1, col + 1), (row, col), (row + 1, col - 1)],
    ]


def is_xmas_cross(row, col, grid):
    """True if two diagonal MAS words cross at this cell."""
    if grid[row][col] != "A":
        return False
    texts = ["".join(grid[r][c] for r, c in run) for run in _cross_positions(row, col, grid)]
    return len(texts) == 2 and all(text in ("MAS", "SAM") for text in texts)


def part_1(text):
    """Number of XMAS occurrences in any direction."""
    grid = parse_input(text)
    return sum(
        _count_words(row, col, grid)
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == "X"
    )


def part_2(text):
    """Number of X-shaped MAS crosses."""
    grid = parse_input(text)
    return sum(
        1
        for row, line in enumerate(grid)
        for col in range(len(line))
        if is_xmas_cross(row, col, grid)
    )