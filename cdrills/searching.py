"""Searching and selection over sequences of comparable items."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def jump_search(items: Sequence, x) -> int:
    """Index of x in the sorted sequence, found by square-root jumps; -1 if absent."""
    n = len(items)
    if n == 0:
        return -1
    root = math.sqrt(n)
    step = int(root)
    prev = 0
    while items[min(step, n) - 1] < x:
        prev = step
        step = int(step + root)
        if prev >= n:
            return -1
    while items[prev] < x:
        prev += 1
        if prev == min(step, n):
            return -1
    return prev if items[prev] == x else -1


def binary_search(items: Sequence, x) -> int:
    """Index of x in the sorted sequence by halving; -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == x:
            return mid
        if items[mid] > x:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def linear_search(items: Iterable, x) -> int:
    """Index of the first occurrence of x; -1 if absent."""
    return next((index for index, item in enumerate(items) if item == x), -1)


def subarray_with_sum(items: Sequence[int], total: int) -> tuple[int, int] | None:
    """Inclusive (start, end) of a contiguous run of non-negative numbers summing to total.

    Returns None when no such run exists.
    """
    if not items:
        return None
    n = len(items)
    current = items[0]
    start = 0
    for end in range(1, n + 1):
        while current > total and start < end - 1:
            current -= items[start]
            start += 1
        if current == total:
            return start, end - 1
        if end < n:
            current += items[end]
    return None


def sorted_union(a: Iterable, b: Iterable) -> list:
    """Distinct elements of both inputs in ascending order."""
    return sorted(set(a) | set(b))


def intersection(a: Iterable, b: Iterable) -> list:
    """Elements of b, in b's order, that also occur in a."""
    present = set(a)
    return [item for item in b if item in present]


def min_max(items: Iterable) -> tuple:
    """The (minimum, maximum) pair of a non-empty collection."""
    values = list(items)
    if not values:
        raise ValueError("min_max() of an empty collection")
    return min(values), max(values)


def second_smallest(items: Iterable):
    """The element at position 1 of the sorted items; duplicates count."""
    values = sorted(items)
    if len(values) < 2:
        raise ValueError("need at least two elements")
    return values[1]