"""Day 11: plutonian pebbles that change on every blink."""

from functools import lru_cache


def _parse_number(token):
    if not token.isdigit():
        raise ValueError(f"Invalid number: {token!r}")
    return int(token)


def parse_input(text):
    """Return the engraved numbers on the stones."""
    return [_parse_number(token) for token in text.strip().split(" ")]


def apply_rules(value):
    """The stones one stone turns into after a blink."""
    if value == 0:
        return [1]
    digits = str(value)
    if len(digits) % 2 == 0:
        middle = len(digits) // 2
        return [int(digits[:middle]), int(digits[middle:])]
    return [value * 2024]


def blink(times, stones):
    """The full list of stones after blinking a number of times."""
    result = list(stones)
    for _ in range(times):
        result = [new for value in result for new in apply_rules(value)]
    return result


def count_digits(value):
    """Number of decimal digits of a non-negative number."""
    return len(str(value))


@lru_cache(maxsize=None)
def _count(value, blinks):
    if blinks == 0:
        return 1
    if value == 0:
        return _count(1, blinks - 1)
    digits = count_digits(value)
    if digits % 2 == 0:
        high, low = divmod(value, 10 ** (digits // 2))
        return _count(high, blinks - 1) + _count(low, blinks - 1)
    return _count(value * 2024, blinks - 1)


def count_stones(times, stones):
    """Number of stones after blinking, without building the list."""
    return sum(_count(value, times) for value in stones)


def part_1(text):
    """Number of stones after 25 blinks."""
    return len(blink(25, parse_input(text)))


def part_2(text):
    """Number of stones after 75 blinks."""
    return count_stones(75, parse_input(text))