"""Elementary comparison sorts and binary heap construction."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list, moving the largest element to the end each pass."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list, inserting each element into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list, selecting the smallest remaining element each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _sift_down(
    items: list[Any], size: int, index: int, outranks: Callable[[Any, Any], bool]
) -> None:
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and outranks(items[child], items[best]):
                best = child
        if best == index:
            return
        items[index], items[best] = items[best], items[index]
        index = best


def _heapify(items: list[Any], outranks: Callable[[Any, Any], bool]) -> None:
    for index in range(len(items) // 2 - 1, -1, -1):
        _sift_down(items, len(items), index, outranks)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted list using a max-heap built in place."""
    items = list(values)
    _heapify(items, operator.gt)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0, operator.gt)
    return items


def build_min_heap(values: Iterable[Any]) -> list[Any]:
    """Return the values arranged as an array-backed min-heap."""
    items = list(values)
    _heapify(items, operator.lt)
    return items