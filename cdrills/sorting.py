"""Elementary comparison sorts; each returns a new list."""

from __future__ import annotations

import bisect
from collections.abc import Iterable


def insertion_sort(items: Iterable) -> list:
    """Stable sort that inserts each item after any equal ones already placed."""
    result: list = []
    for item in items:
        bisect.insort_right(result, item)
    return result


def selection_sort(items: Iterable) -> list:
    """Sort by repeatedly swapping the smallest remaining item into place."""
    data = list(items)
    for position in range(len(data) - 1):
        smallest = min(range(position, len(data)), key=data.__getitem__)
        if smallest != position:
            data[position], data[smallest] = data[smallest], data[position]
    return data


def bubble_sort(items: Iterable) -> list:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    data = list(items)
    for boundary in range(len(data) - 1, 0, -1):
        for left in range(boundary):
            if data[left] > data[left + 1]:
                data[left], data[left + 1] = data[left + 1], data[left]
    return data


def sort_string(text: str) -> str:
    """The characters of text in ascending code-point order."""
    return "".join(selection_sort(text))