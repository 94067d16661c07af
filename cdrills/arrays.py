"""Array drills: rotation, matrix sums, sparsity, pair swaps and triplets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations


def rotate_left(items: Iterable, d: int) -> list:
    """A new list holding items rotated left by d positions."""
    if d < 0:
        raise ValueError("rotation count must not be negative")
    data = list(items)
    if not data:
        return data
    shift = d % len(data)
    return data[shift:] + data[:shift]


def add_matrices(a: Sequence[Sequence], b: Sequence[Sequence]) -> list[list]:
    """Element-wise sum of two matrices of the same shape."""
    if len(a) != len(b) or any(len(row_a) != len(row_b) for row_a, row_b in zip(a, b)):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def is_sparse(matrix: Iterable[Iterable]) -> bool:
    """True when at least half of the cells (rounded down) are zero."""
    rows = [list(row) for row in matrix]
    cells = sum(len(row) for row in rows)
    zeros = sum(row.count(0) for row in rows)
    return zeros >= cells // 2


def swap_adjacent(items: Iterable) -> list:
    """A new list with each consecutive pair of elements swapped."""
    data = list(items)
    if len(data) % 2:
        raise ValueError("total number of elements should be even")
    result = list(data)
    result[0::2], result[1::2] = data[1::2], data[0::2]
    return result


def find_triplets(items: Iterable, total) -> list[tuple]:
    """All triplets taken in order of position whose elements sum to total."""
    return [triplet for triplet in combinations(list(items), 3) if sum(triplet) == total]