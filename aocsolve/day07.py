"""Day 7: calibrating equations with missing operators."""

import enum
import itertools
from dataclasses import dataclass


class Operator(enum.Enum):
    """An operator that may sit between two operands."""

    ADD = "+"
    MULTIPLY = "*"
    CONCATENATE = "||"


@dataclass(frozen=True)
class Equation:
    """A test value and the operands that should produce it."""

    result: int
    operands: tuple


def _parse_number(token):
    if not token.isdigit():
        raise ValueError(f"Invalid number: {token!r}")
    return int(token)


def _parse_equation(line):
    parts = line.split(": ")
    if len(parts) != 2:
        raise ValueError(f"Invalid equation: {line}")
    result, operands = parts
    return Equation(
        result=_parse_number(result),
        operands=tuple(_parse_number(op) for op in operands.split(" ")),
    )


def parse_input(text):
    """Return one equation per line."""
    return [_parse_equation(line) for line in text.splitlines()]


def apply_operator(a, b, operator):
    """Combine two numbers with an operator."""
    if operator is Operator.ADD:
        return a + b
    if operator is Operator.MULTIPLY:
        return a * b
    return int(f"{a}{b}")


def compute_result(operands, operators):
    """Evaluate operands left to right with the given operators."""
    if len(operands) != len(operators) + 1:
        raise ValueError("Invalid amount of operators for the number of operands")
    result = operands[0]
    for operand, operator in zip(operands[1:], operators):
        result = apply_operator(result, operand, operator)
    return result


def is_equation_valid(equation, operators):
    """True if some choice of operators yields the equation's result."""
    choices = itertools.product(operators, repeat=len(equation.operands) - 1)
    return any(compute_result(equation.operands, combo) == equation.result for combo in choices)


def _total_calibration(text, operators):
    return sum(eq.result for eq in parse_input(text) if is_equation_valid(eq, operators))


def part_1(text):
    """Sum of results reachable with addition and multiplication."""
    return _total_calibration(text, (Operator.ADD, Operator.MULTIPLY))


def part_2(text):
    """Sum of results reachable when concatenation is also allowed."""
    return _total_calibration(text, (Operator.ADD, Operator.MULTIPLY, Operator.CONCATENATE))