"""Exact integer helpers for scaled amounts.

Python's ``//`` rounds toward negative infinity. Scaled amounts follow
big-integer semantics instead and truncate toward zero, so every division
in this package goes through ``div_trunc``.
"""

from __future__ import annotations

from functools import lru_cache

from wei.errors import DivisionByZero

UINT256_MAX = 2**256 - 1


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Args:
        a: Dividend (can be positive or negative)
        b: Divisor (must be non-zero)

    Returns:
        a / b truncated toward zero

    Raises:
        DivisionByZero: If b is zero

    Examples:
        -7 // 3 == -3 in Python, div_trunc(-7, 3) == -2
    """
    if b == 0:
        raise DivisionByZero(f"Division by zero: {a} / 0")

    # Same sign: floor and truncation agree
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


@lru_cache(maxsize=128)
def pow10(exponent: int) -> int:
    """Return 10**exponent for a non-negative exponent."""
    return 10**exponent


def is_uint256(value: int) -> bool:
    """Check if value fits in uint256."""
    return 0 <= value <= UINT256_MAX


__all__ = ["UINT256_MAX", "div_trunc", "pow10", "is_uint256"]
