"""Small numeric helpers."""

from __future__ import annotations


def abs_value(n: int) -> int:
    """Return the magnitude of an integer."""
    return -n if n < 0 else n


def max_value(n1, n2):
    """Return the larger of two values; on a tie the second one."""
    return n1 if n1 > n2 else n2


def min_value(n1, n2):
    """Return the smaller of two values; on a tie the second one."""
    return n1 if n1 < n2 else n2


def newton_sqrt(n: float, precision: float) -> float:
    """Approximate the square root of ``n`` by Newton's method.

    Iteration starts from 1 and stops once two successive estimates differ
    by less than ``precision``.
    """
    if n < 0:
        raise ValueError("cannot take the square root of a negative number")
    if precision <= 0:
        raise ValueError("precision must be positive")
    x = 1.0
    while True:
        nxt = (x + n / x) / 2
        if abs(x - nxt) < precision:
            return x
        x = nxt