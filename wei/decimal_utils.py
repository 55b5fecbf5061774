"""Arbitrary-precision decimal facility used by Wei.

Wraps the standard ``decimal`` module behind a small object that is built
once from a WeiConfig and passed by reference. Every operation uses an
explicit ``decimal.Context``; the thread-local current context is never
read for rounding or modified.

Parsing and power-of-ten shifts are exact. Only ``power`` and
``to_significant`` round, to the configured number of significant digits.
"""

from __future__ import annotations

import decimal
import math
from decimal import ROUND_HALF_UP, Decimal

from wei.config import DEFAULT_CONFIG, WeiConfig
from wei.errors import ArithmeticOverflow, DivisionByZero, InvalidInput, ParseError

DecimalSource = int | float | str | Decimal


class DecimalMath:
    """Decimal parsing, scaling and rendering with explicit precision.

    Attributes:
        config: The configuration this instance was built from
    """

    __slots__ = ("config",)

    def __init__(self, config: WeiConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def __repr__(self) -> str:
        return f"DecimalMath(precision={self.config.decimal_precision})"

    def _context(self, prec: int | None = None) -> decimal.Context:
        return decimal.Context(
            prec=prec if prec is not None else self.config.decimal_precision,
            rounding=ROUND_HALF_UP,
        )

    # --- Parsing ---

    def parse(self, source: DecimalSource) -> Decimal:
        """Convert a numeric source to an exact, finite Decimal.

        Strings may contain comma group separators ("1,000.5"). Floats are
        read through their shortest repr, so 0.1 parses as Decimal("0.1").

        Raises:
            ParseError: If the source is not a finite decimal number
            InvalidInput: If the source type is not supported
        """
        if isinstance(source, Decimal):
            result = source
        elif isinstance(source, bool):
            raise InvalidInput("Cannot parse bool as a number")
        elif isinstance(source, int):
            return Decimal(source)
        elif isinstance(source, float):
            if not math.isfinite(source):
                raise ParseError(f"Cannot parse non-finite float: {source!r}")
            return Decimal(repr(source))
        elif isinstance(source, str):
            text = source.replace(",", "").strip()
            try:
                result = Decimal(text)
            except decimal.InvalidOperation as err:
                raise ParseError(f"Cannot parse '{source}' as a decimal number") from err
        else:
            raise InvalidInput(f"Cannot parse {type(source).__name__} as a number")

        if not result.is_finite():
            raise ParseError(f"Cannot parse non-finite value: {source!r}")
        return result

    # --- Exact operations ---

    @staticmethod
    def shift(value: Decimal, places: int) -> Decimal:
        """Multiply a finite Decimal by 10**places without rounding."""
        sign, digits, exponent = value.as_tuple()
        return Decimal((sign, digits, exponent + places))  # type: ignore[operator]

    @staticmethod
    def round_half_up(value: Decimal) -> int:
        """Round a finite Decimal to the nearest integer, ties away from zero."""
        return int(value.to_integral_value(rounding=ROUND_HALF_UP))

    @staticmethod
    def truncate(value: Decimal) -> int:
        """Drop the fractional part of a finite Decimal (toward zero)."""
        return int(value)

    # --- Rounding operations ---

    def to_fixed(self, value: Decimal, places: int) -> str:
        """Render value with exactly ``places`` fractional digits, rounding half-up.

        Negative zero renders without a sign.
        """
        if places < 0:
            raise ValueError(f"Decimal places must be non-negative, got {places}")
        quantum = Decimal((0, (1,), -places))
        # Enough digits that quantize never exceeds the context precision
        prec = max(self.config.decimal_precision, value.adjusted() + places + 2)
        quantized = value.quantize(quantum, context=self._context(prec))
        if quantized.is_zero():
            quantized = quantized.copy_abs()
        return format(quantized, "f")

    def to_significant(self, value: Decimal, digits: int | None = None) -> Decimal:
        """Round value to ``digits`` significant digits (default: config.number_digits)."""
        return self._context(digits or self.config.number_digits).plus(value)

    def power(self, base: Decimal, exponent: int) -> Decimal:
        """Raise base to an integer power at the configured precision.

        Raises:
            InvalidInput: If exponent is not an int
            DivisionByZero: If base is zero and exponent is negative
            ArithmeticOverflow: If the result exponent exceeds the context's Emax
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise InvalidInput(f"Exponent must be an int, got {type(exponent).__name__}")
        if exponent == 0:
            return Decimal(1)
        # Context.power returns Infinity here instead of signalling
        if exponent < 0 and base.is_zero():
            raise DivisionByZero(f"Division by zero: {base} ** {exponent}")
        try:
            return self._context().power(base, exponent)
        except decimal.Overflow as err:
            raise ArithmeticOverflow(f"Result out of range: {base} ** {exponent}") from err


# Built once from the import-time configuration
DEFAULT_DECIMAL_MATH = DecimalMath(DEFAULT_CONFIG)


__all__ = ["DecimalMath", "DecimalSource", "DEFAULT_DECIMAL_MATH"]
