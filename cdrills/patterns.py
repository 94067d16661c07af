"""Text patterns and tables, returned as lists of lines."""

from __future__ import annotations

import string


def star_pyramid(rows: int) -> list[str]:
    """A centred pyramid of stars, each row two stars wider than the last."""
    return ["  " * (rows - i) + "* " * (2 * i - 1) for i in range(1, rows + 1)]


def alphabet_pyramid(layers: int) -> list[str]:
    """A centred pyramid of letters; empty unless 1 <= layers <= 26."""
    if not 0 < layers <= 26:
        return []
    lines = []
    for row in range(layers):
        rising = string.ascii_uppercase[: row + 1]
        letters = rising + rising[-2::-1]
        indent = " " * (2 * (layers - row - 1))
        lines.append(indent + "".join(f"{letter} " for letter in letters))
    return lines


def right_aligned_pyramid(rows: int) -> list[str]:
    """Rows of 1..rows stars, each row indented one space less than the last."""
    return [" " * (rows + 4 - i) + "* " * i for i in range(1, rows + 1)]


def right_angle(rows: int) -> list[str]:
    """A left-aligned right-angled triangle of stars."""
    return ["*" * i for i in range(1, rows + 1)]


def cube_table(count: int) -> list[str]:
    """Lines listing the cubes of 1..count."""
    return [f"Number is : {i} and cube of the {i} is :{i ** 3} " for i in range(1, count + 1)]


def multiplication_table(n: int) -> list[str]:
    """The ten lines of the multiplication table of n."""
    return [f"{n} X {j} = {n * j} " for j in range(1, 11)]