"""Day 13: claw machines and the fewest tokens to win a prize."""

import re
from dataclasses import dataclass

_BUTTON_RE = re.compile(r"Button [AB]: X\+(\d+), Y\+(\d+)")
_PRICE_RE = re.compile(r"Prize: X=(\d+), Y=(\d+)")


@dataclass(frozen=True)
class Machine:
    """Button movements and the prize location, each as (x, y)."""

    button_a: tuple
    button_b: tuple
    price: tuple

    def with_offset(self, offset):
        """A copy with the prize moved by offset on both axes."""
        px, py = self.price
        return Machine(self.button_a, self.button_b, (px + offset, py + offset))


def _parse_pair(regex, line, what):
    match = regex.search(line)
    if match is None:
        raise ValueError(f"Invalid {what} input: {line!r}")
    return int(match.group(1)), int(match.group(2))


def _parse_machine(block):
    lines = block.splitlines()
    if len(lines) != 3:
        raise ValueError(f"Invalid machine block:\n{block}")
    a_line, b_line, price_line = lines
    return Machine(
        button_a=_parse_pair(_BUTTON_RE, a_line, "button"),
        button_b=_parse_pair(_BUTTON_RE, b_line, "button"),
        price=_parse_pair(_PRICE_RE, price_line, "prize"),
    )


def parse_input(text):
    """Parse blank-line separated machine blocks."""
    return [_parse_machine(block) for block in text.replace("\r\n", "\n").split("\n\n")]


def compute_required_tokens(machine):
    """Token cost to win the prize, or 0 if it cannot be won."""
    (ax, ay), (bx, by), (px, py) = machine.button_a, machine.button_b, machine.price
    tokens_b = (px * ay - py * ax) // (bx * ay - by * ax)
    tokens_a = (py - tokens_b * by) // ay
    if px == tokens_a * ax + tokens_b * bx and py == tokens_a * ay + tokens_b * by:
        cost = tokens_a * 3 + tokens_b
        if cost < 0:
            raise ValueError("Negative token cost")
        return cost
    return 0


def solve_for_input(text, offset):
    """Total token cost over all machines with the prize offset applied."""
    return sum(compute_required_tokens(m.with_offset(offset)) for m in parse_input(text))


def part_1(text):
    """Fewest tokens to win all winnable prizes."""
    return solve_for_input(text, 0)


def part_2(text):
    """Fewest tokens with the prizes moved far away."""
    return solve_for_input(text, 10_000_000_000_000)