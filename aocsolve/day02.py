"""Day 2: safety of reactor level reports."""

import enum


class Safety(enum.Enum):
    """Whether a report is safe."""

    SAFE = "safe"
    UNSAFE = "unsafe"


def _parse_number(token):
    if not token.isdigit():
        raise ValueError(f"Invalid number: {token!r}")
    return int(token)


def _sign(value):
    return (value > 0) - (value < 0)


def _differences(levels):
    return [b - a for a, b in zip(levels, levels[1:])]


def parse_input(text):
    """Return one list of levels per line."""
    return [[_parse_number(token) for token in line.split(" ")] for line in text.splitlines()]


def all_levels_safe(levels):
    """A report is safe if it moves steadily in one direction by 1 to 3."""
    diffs = _differences(levels)
    if any(not 1 <= abs(d) <= 3 for d in diffs):
        return Safety.UNSAFE
    if any(_sign(a) != _sign(b) for a, b in zip(diffs, diffs[1:])):
        return Safety.UNSAFE
    return Safety.SAFE


def _unsafe_level_indices(levels):
    diffs = _differences(levels)
    indices = set()
    for idx, diff in enumerate(diffs):
        if not 1 <= abs(diff) <= 3:
            indices.update((idx, idx + 1))
    for idx, (a, b) in enumerate(zip(diffs, diffs[1:])):
        if _sign(a) != _sign(b):
            indices.update((idx, idx + 1, idx + 2))
    return indices


def with_problem_dampener(levels):
    """Safety of a report when a single bad level may be dropped."""
    candidates = _unsafe_level_indices(levels)
    if not candidates:
        return Safety.SAFE
    for idx in sorted(candidates):
        reduced = levels[:idx] + levels[idx + 1:]
        if all_levels_safe(reduced) is Safety.SAFE:
            return Safety.SAFE
    return Safety.UNSAFE


def _count_safe(text, strategy):
    return sum(1 for levels in parse_input(text) if strategy(levels) is Safety.SAFE)


def part_1(text):
    """Number of safe reports."""
    return _count_safe(text, all_levels_safe)


def part_2(text):
    """Number of safe reports with the problem dampener."""
    return _count_safe(text, with_problem_dampener)