"""Small formulas: areas, averages and a four-operation calculator."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable

PI = 3.14159
MAX_VALUES = 100

_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def circle_area(radius: float) -> float:
    """Area of a circle, using PI rounded to five decimals."""
    return PI * radius * radius


def equilateral_area(side: float) -> float:
    """Area of an equilateral triangle with the given side."""
    return math.sqrt(3) / 4 * side * side


def average(values: Iterable[float]) -> float:
    """Mean of between 1 and 100 numbers."""
    numbers = list(values)
    if not 1 <= len(numbers) <= MAX_VALUES:
        raise ValueError(f"number of values should be in range of (1 to {MAX_VALUES})")
    return sum(numbers) / len(numbers)


def calculate(op: str, a: float, b: float) -> float:
    """Apply one of + - * / to a and b; division by zero raises ZeroDivisionError."""
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError("ERROR! Entered Operator is not Correct") from None
    return operation(a, b)


def format_calculation(op: str, a: float, b: float) -> str:
    """The calculation as one line with one decimal place per number."""
    result = calculate(op, a, b)
    separator = "=" if op == "/" else " ="
    return f"{a:.1f} {op} {b:.1f}{separator} {result:.1f}"