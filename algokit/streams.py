"""Statistics computed over a stream of values in one pass."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def running_medians(values: Iterable[int]) -> list[float]:
    """Return the median of every prefix of ``values``.

    Odd-length prefixes give the middle value itself; even-length ones give
    the mean of the two middle values as a float.
    """
    lower: list[int] = []  # max-heap through negated values
    upper: list[int] = []
    medians: list[float] = []
    for x in values:
        if not lower:
            heapq.heappush(lower, -x)
            medians.append(x)
        elif len(lower) > len(upper):
            if -lower[0] > x:
                heapq.heappush(upper, -heapq.heapreplace(lower, -x))
            else:
                heapq.heappush(upper, x)
            medians.append((-lower[0] + upper[0]) / 2.0)
        else:
            if x <= -lower[0]:
                heapq.heappush(lower, -x)
            else:
                heapq.heappush(lower, -heapq.heappushpop(upper, x))
            medians.append(-lower[0])
    return medians


def stock_span(prices: Iterable[int]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had a price not above it."""
    spans: list[int] = []
    higher: list[tuple[int, int]] = []
    for day, price in enumerate(prices):
        while higher and higher[-1][0] <= price:
            higher.pop()
        spans.append(day - higher[-1][1] if higher else day + 1)
        higher.append((price, day))
    return spans