"""Day 1: comparing two lists of location ids."""

from collections import Counter


def _parse_number(token):
    if not token.isdigit():
        raise ValueError(f"Invalid number: {token!r}")
    return int(token)


def parse_input(text):
    """Return the left and right location id columns of the input."""
    left, right = [], []
    for number, line in enumerate(text.splitlines(), start=1):
        values = [_parse_number(token) for token in line.split("   ")]
        if len(values) != 2:
            raise ValueError(f"Invalid input at line {number}")
        first, second = values
        left.append(first)
        right.append(second)
    return left, right


def part_1(text):
    """Total distance between the sorted lists."""
    left, right = parse_input(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_2(text):
    """Similarity score: each left id times its count in the right list."""
    left, right = parse_input(text)
    frequencies = Counter(right)
    return sum(location * frequencies[location] for location in left)