import math

import pytest

from cdrills.formulas import (
    average,
    calculate,
    circle_area,
    equilateral_area,
    format_calculation,
)


def test_circle_area_uses_source_pi():
    assert circle_area(1) == pytest.approx(3.14159)
    assert circle_area(0) == 0


def test_circle_area_scales_with_square():
    assert circle_area(3) == pytest.approx(9 * circle_area(1))


def test_equilateral_area():
    assert equilateral_area(2) == pytest.approx(math.sqrt(3))
    assert equilateral_area(4) == pytest.approx(4 * equilateral_area(2))


def test_average():
    assert average([2, 4]) == 3
    assert average([5] * 100) == 5


@pytest.mark.parametrize("values", [[], [1] * 101])
def test_average_count_limits(values):
    with pytest.raises(ValueError):
        average(values)


@pytest.mark.parametrize(
    "op, expected",
    [("+", 7.5 + 2.5), ("-", 7.5 - 2.5), ("*", 7.5 * 2.5), ("/", 7.5 / 2.5)],
)
def test_calculate(op, expected):
    assert calculate(op, 7.5, 2.5) == expected


def test_calculate_unknown_operator():
    with pytest.raises(ValueError, match="not Correct"):
        calculate("%", 1, 2)


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate("/", 1, 0)


def test_format_calculation():
    assert format_calculation("+", 1, 2) == "1.0 + 2.0 = 3.0"
    assert format_calculation("/", 6, 3) == "6.0 / 3.0= 2.0"