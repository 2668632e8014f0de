"""Non-comparison sorts for small non-negative integer keys and characters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

COUNT_SORT_MAX = 100_000
CHARACTER_RANGE = 255


def _non_negative(values: Iterable[int], algorithm: str) -> list[int]:
    items = list(values)
    for value in items:
        if value < 0:
            raise ValueError(f"{algorithm} needs non-negative integers, got {value}")
    return items


def bin_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by dropping each into a bin indexed by its value."""
    items = _non_negative(values, "bin sort")
    if not items:
        return []
    bins: list[list[int]] = [[] for _ in range(max(items) + 1)]
    for value in items:
        bins[value].append(value)
    return [value for bucket in bins for value in bucket]


def radix_passes(values: Iterable[int]) -> Iterator[list[int]]:
    """Yield the list after each least-significant-digit radix pass.

    There is one pass per decimal digit of the largest value.
    """
    items = _non_negative(values, "radix sort")
    largest = max(items, default=0)
    divisor = 1
    while largest > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // divisor) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        yield list(items)
        divisor *= 10
        largest //= 10


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by decimal digits, least significant first."""
    items = list(values)
    result = list(items)
    for result in radix_passes(items):
        pass
    return result


def count_sort(values: Iterable[int], key_range: int) -> list[int]:
    """Stable counting sort of integers in ``range(key_range)``."""
    items = list(values)
    for value in items:
        if not 0 <= value < key_range:
            raise ValueError(f"value {value} is outside range(0, {key_range})")
    counts = [0] * key_range
    for value in items:
        counts[value] += 1
    starts = []
    total = 0
    for count in counts:
        starts.append(total)
        total += count
    output = [0] * len(items)
    for value in items:
        output[starts[value]] = value
        starts[value] += 1
    return output


def bounded_count_sort(values: Iterable[int]) -> list[int]:
    """Counting sort of integers between 0 and ``COUNT_SORT_MAX`` inclusive."""
    items = list(values)
    for value in items:
        if not 0 <= value <= COUNT_SORT_MAX:
            raise ValueError(f"value {value} is outside 0..{COUNT_SORT_MAX}")
    counts = [0] * (COUNT_SORT_MAX + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def sort_characters(text: str) -> str:
    """Return the characters of ``text`` in code order; codes must not exceed 255."""
    counts = [0] * (CHARACTER_RANGE + 1)
    for char in text:
        code = ord(char)
        if code > CHARACTER_RANGE:
            raise ValueError(f"character {char!r} is outside the 0..{CHARACTER_RANGE} range")
        counts[code] += 1
    return "".join(chr(code) * count for code, count in enumerate(counts))