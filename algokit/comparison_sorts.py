"""Comparison-based sorting algorithms.

Every function takes any iterable and returns a new sorted list.
The input is never modified.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by shifting larger items right and inserting each item into place."""
    items = list(values)
    for i in range(1, len(items)):
        value = items[i]
        j = i
        while j > 0 and items[j - 1] > value:
            items[j] = items[j - 1]
            j -= 1
        items[j] = value
    return items


def exchange_insertion_sort(values: Iterable[T]) -> list[T]:
    """Insertion sort that swaps the new item with every larger item before it."""
    items = list(values)
    for i in range(1, len(items)):
        for j in range(i):
            if items[j] > items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def cocktail_sort(values: Iterable[T]) -> list[T]:
    """Bidirectional bubble sort."""
    items = list(values)
    start, end = 0, len(items) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        start += 1
    return items


def _cycle_position(items: list[T], cycle_start: int, item: T) -> int:
    return cycle_start + sum(1 for other in items[cycle_start + 1:] if other < item)


def cycle_sort(values: Iterable[T]) -> list[T]:
    """Sort with the minimum number of writes by rotating each permutation cycle."""
    items = list(values)
    for cycle_start in range(len(items) - 1):
        item = items[cycle_start]
        pos = _cycle_position(items, cycle_start, item)
        if pos == cycle_start:
            continue
        while item == items[pos]:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != cycle_start:
            pos = _cycle_position(items, cycle_start, item)
            while item == items[pos]:
                pos += 1
            if item != items[pos]:
                items[pos], item = item, items[pos]
    return items


def _flip(items: list[T], last: int) -> None:
    items[: last + 1] = items[last::-1]


def pancake_sort(values: Iterable[T]) -> list[T]:
    """Sort using only prefix reversals."""
    items = list(values)
    for size in range(len(items), 1, -1):
        largest = max(range(size), key=items.__getitem__)
        if largest != size - 1:
            _flip(items, largest)
            _flip(items, size - 1)
    return items


def bubble_sort(
    values: Iterable[T], precedes: Callable[[Any, Any], bool] | None = None
) -> list[T]:
    """Bubble sort ordered by ``precedes(a, b)``: true when ``a`` belongs before ``b``.

    Without ``precedes`` the order is ascending.
    """
    comes_before = precedes if precedes is not None else operator.lt
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        for i in range(last):
            if comes_before(items[i + 1], items[i]):
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def merge(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Merge two sorted sequences; on ties items of ``first`` come first."""
    merged: list[T] = []
    a = b = 0
    while a < len(first) and b < len(second):
        if first[a] <= second[b]:
            merged.append(first[a])
            a += 1
        else:
            merged.append(second[b])
            b += 1
    merged.extend(first[a:])
    merged.extend(second[b:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    half = (len(items) + 1) // 2
    return merge(merge_sort(items[:half]), merge_sort(items[half:]))


def _partition(items: list[T], start: int, end: int) -> int:
    pivot = items[end]
    boundary = start
    for i in range(start, end):
        if items[i] <= pivot:
            items[i], items[boundary] = items[boundary], items[i]
            boundary += 1
    items[end], items[boundary] = items[boundary], items[end]
    return boundary


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            split = _partition(items, start, end)
            pending.append((start, split - 1))
            pending.append((split + 1, end))
    return items


def _sift_down(items: list[T], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for last in range(size - 1, -1, -1):
        items[0], items[last] = items[last], items[0]
        _sift_down(items, last, 0)
    return items