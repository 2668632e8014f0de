"""Pattern and key search over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def prefix_function(pattern: Sequence[Any]) -> list[int]:
    """Return, for each prefix of ``pattern``, the length of its longest proper border.

    A border is a prefix that is also a suffix.
    """
    borders = [0] * len(pattern)
    for i, item in enumerate(pattern[1:], start=1):
        j = borders[i - 1]
        while j > 0 and item != pattern[j]:
            j = borders[j - 1]
        if item == pattern[j]:
            j += 1
        borders[i] = j
    return borders


def kmp_search(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Return the start index of every occurrence of ``pattern`` in ``text``.

    Overlapping occurrences are all reported, in increasing order.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    borders = prefix_function(pattern)
    length = len(pattern)
    matches: list[int] = []
    j = 0
    for i, item in enumerate(text):
        while j > 0 and item != pattern[j]:
            j = borders[j - 1]
        if item == pattern[j]:
            j += 1
        if j == length:
            matches.append(i - length + 1)
            j = borders[j - 1]
    return matches


def linear_search(values: Iterable[Any], key: Any) -> int:
    """Return the index of the first item equal to ``key``, or -1 if there is none."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return -1