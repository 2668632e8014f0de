"""Small arithmetic exercises."""

from __future__ import annotations


def parity(n: int) -> str:
    """Return ``"even"`` or ``"odd"``."""
    remainder = n % 2
    if remainder == 0:
        return "even"
    return "odd"


def boxes_needed(a: int, b: int, c: int, capacity: int) -> int:
    """Return how many bags of ``capacity`` hold boxes of sizes ``a``, ``b``, ``c``.

    The boxes are packed in the given order, so only ``a`` and ``b`` are tried together.
    """
    if a + b + c <= capacity:
        return 1
    if a + b <= capacity:
        return 2
    return 3


def classify_mixture(solute: int, solvent: int) -> str | None:
    """Name the mixture of the given amounts; ``None`` when there is neither."""
    if solute > 0 and solvent > 0:
        return "Solution"
    if solute == 0 and solvent > 0:
        return "Liquid"
    if solvent == 0 and solute > 0:
        return "Solid"
    return None


def digit_sum(n: int, base: int) -> int:
    """Return the sum of the digits of ``n`` written in ``base``; 0 when ``n`` is not positive."""
    if base < 2:
        raise ValueError("base must be at least 2")
    total = 0
    while n > 0:
        n, digit = divmod(n, base)
        total += digit
    return total