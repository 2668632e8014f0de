"""Dynamic-programming puzzles."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache


def minimum_health(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the least starting health to cross the grid from top-left to bottom-right.

    Moves go right or down; each cell adds its value to health, which must
    stay at least 1 throughout.
    """
    rows = len(dungeon)
    if rows == 0 or len(dungeon[0]) == 0:
        raise ValueError("dungeon must have at least one cell")
    cols = len(dungeon[0])
    if any(len(row) != cols for row in dungeon):
        raise ValueError("dungeon rows must all have the same length")

    hp: list[list[float]] = [[math.inf] * (cols + 1) for _ in range(rows + 1)]
    hp[rows][cols - 1] = 1
    hp[rows - 1][cols] = 1
    for i in reversed(range(rows)):
        for j in reversed(range(cols)):
            need = min(hp[i + 1][j], hp[i][j + 1]) - dungeon[i][j]
            hp[i][j] = 1 if need <= 0 else need
    return int(hp[0][0])


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``k`` has shape ``dims[k - 1] x dims[k]``.
    """
    dims = tuple(dims)

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if j <= i + 1:
            return 0
        return min(
            cost(i, k) + cost(k, j) + dims[i] * dims[k] * dims[j]
            for k in range(i + 1, j)
        )

    return cost(0, len(dims) - 1)


def _largest_digit(n: int) -> int:
    return max(int(d) for d in str(n))


def digit_removal_steps(n: int) -> int:
    """Return the fewest steps to reach 0, each step subtracting one of the number's digits."""
    if n < 0:
        raise ValueError("n must be non-negative")
    steps = [0] * (n + 1)
    for i in range(1, n + 1):
        steps[i] = steps[i - _largest_digit(i)] + 1
    return steps[n]