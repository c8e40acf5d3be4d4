"""Day 3: multiplications hidden in corrupted memory."""

import re

_DO = r"do\(\)"
_DO_NOT = r"don't\(\)"
_MULTIPLY = r"mul\((\d{1,3}),(\d{1,3})\)"

_MULTIPLY_RE = re.compile(_MULTIPLY)
_OPERATOR_RE = re.compile(f"{_DO}|{_DO_NOT}|{_MULTIPLY}")

DO = "do"
DO_NOT = "don't"


def parse_multiplications(text):
    """Return the operand pairs of every valid mul instruction."""
    return [
        (int(a), int(b))
        for line in text.splitlines()
        for a, b in _MULTIPLY_RE.findall(line)
    ]


def parse_operators(text):
    """Return the instructions in order: "do", "don't" or an operand pair."""
    operators = []
    for line in text.splitlines():
        for match in _OPERATOR_RE.finditer(line):
            literal = match.group(0)
            if literal.startswith("don't"):
                operators.append(DO_NOT)
            elif literal.startswith("do"):
                operators.append(DO)
            else:
                operators.append((int(match.group(1)), int(match.group(2))))
    return operators


def part_1(text):
    """Sum of all multiplications."""
    return sum(a * b for a, b in parse_multiplications(text))


def part_2(text):
    """Sum of multiplications while enabled by do() and don't()."""
    total = 0
    enabled = True
    for operator in parse_operators(text):
        if operator == DO:
            enabled = True
        elif operator == DO_NOT:
            enabled = False
        elif enabled:
            a, b = operator
            total += a * b
    return total