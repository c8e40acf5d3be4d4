"""Day 19: arranging towels into designs."""

from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class PuzzleInput:
    """Available towel patterns and the wanted designs."""

    patterns: tuple
    designs: tuple


def parse_input(text):
    """Parse the pattern line and the block of designs."""
    blocks = text.replace("\r\n", "\n").split("\n\n")
    if len(blocks) != 2:
        raise ValueError("Expected 2 blocks")
    pattern_block, design_block = blocks
    return PuzzleInput(
        patterns=tuple(pattern_block.split(", ")),
        designs=tuple(design_block.splitlines()),
    )


def count_arrangements(design, patterns):
    """Number of ways to build the design from the patterns."""
    patterns = tuple(patterns)

    @lru_cache(maxsize=None)
    def count(start):
        if start == len(design):
            return 1
        return sum(
            count(start + len(pattern))
            for pattern in patterns
            if pattern and design.startswith(pattern, start)
        )

    return count(0)


def get_valid_designs(puzzle):
    """Designs that can be built from one or more patterns."""
    return [
        design
        for design in puzzle.designs
        if design and count_arrangements(design, puzzle.patterns) > 0
    ]


def part_1(text):
    """Number of possible designs."""
    return len(get_valid_designs(parse_input(text)))


def part_2(text):
    """Total number of arrangements over all possible designs."""
    puzzle = parse_input(text)
    return sum(count_arrangements(d, puzzle.patterns) for d in get_valid_designs(puzzle))