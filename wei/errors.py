"""Wei error classes.

Each error also derives from the builtin exception a caller would expect,
so ``except ZeroDivisionError`` or ``except ValueError`` keep working.
"""


class WeiError(Exception):
    """Base error for Wei operations."""

    pass


class InvalidInput(WeiError, TypeError):
    """Source is None or not a supported numeric type."""

    pass


class InvalidScale(WeiError, ValueError):
    """Scale must be a non-negative integer."""

    pass


class ParseError(WeiError, ValueError):
    """Source could not be parsed as a finite decimal number."""

    pass


class DivisionByZero(WeiError, ZeroDivisionError):
    """Division or inversion by a zero magnitude."""

    pass


class SortableRangeError(WeiError, OverflowError):
    """Magnitude is negative or exceeds uint256 and cannot be encoded as sortable hex."""

    pass


class ArithmeticOverflow(WeiError, OverflowError):
    """Result exponent is outside the range the decimal context can represent."""

    pass
