"""Wei: exact scaled-decimal amounts.

A Wei value pairs an arbitrary-precision integer magnitude with a scale,
the number of implied decimal digits. The true value is
``magnitude / 10**scale``. Example: 1.5 at scale 18 is stored as
1_500_000_000_000_000_000.

All arithmetic and comparison operations treat any operand that is not a
Wei as a human-denominated number and scale it to the receiver's scale
first, even plain ints::

    Wei("1.5") + 1                      # 2.5, not 1.5 + 1 wei
    Wei("1.5") + Wei.from_raw(1)        # 1.500000000000000001

Integers that are already in the smallest unit must be wrapped in Raw (or
passed through ``Wei.from_raw`` / ``already_scaled=True``).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar

import structlog
from pydantic_core import core_schema

from wei.decimal_utils import DEFAULT_DECIMAL_MATH, DecimalMath
from wei.errors import InvalidInput, InvalidScale, SortableRangeError, WeiError
from wei.int_math import div_trunc, is_uint256, pow10

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class Raw:
    """An integer already expressed in the smallest unit of the target scale.

    Wei(Raw(10**18)) is one whole unit at scale 18, while Wei(10**18) is
    10**18 whole units.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidInput(f"Raw requires int, got {type(self.value).__name__}")


class Wei:
    """Immutable fixed-point decimal stored as a scaled integer.

    Args:
        source: Wei, Raw, int, str (commas allowed), float or Decimal
        scale: Number of implied decimal digits (default: 18)
        already_scaled: If True, the source is used as the magnitude without
            scaling (fraction truncated toward zero). Ignored for Wei and
            Raw sources.

    Raises:
        InvalidInput: If source is None or of an unsupported type
        InvalidScale: If scale is not a non-negative int
        ParseError: If source is not a finite decimal number
    """

    decimal_math: ClassVar[DecimalMath] = DEFAULT_DECIMAL_MATH

    __slots__ = ("_magnitude", "_scale")
    __hash__ = None  # type: ignore[assignment]  # Equality is scale-aligned and accepts plain numbers

    _magnitude: int
    _scale: int

    def __init__(
        self,
        source: WeiSource,
        scale: int | None = None,
        already_scaled: bool = False,
    ) -> None:
        scale = self._check_scale(scale)
        object.__setattr__(self, "_scale", scale)
        object.__setattr__(self, "_magnitude", self._normalize(source, scale, already_scaled))

    @classmethod
    def _check_scale(cls, scale: int | None) -> int:
        if scale is None:
            return cls.decimal_math.config.default_scale
        if isinstance(scale, bool) or not isinstance(scale, int):
            raise InvalidScale(f"Scale must be an int, got {type(scale).__name__}")
        if scale < 0:
            raise InvalidScale(f"Scale must be non-negative, got {scale}")
        return scale

    @classmethod
    def _normalize(cls, source: WeiSource, scale: int, already_scaled: bool) -> int:
        """Turn a construction source into a magnitude at ``scale``."""
        if source is None:
            raise InvalidInput("Cannot parse None as a number")
        if isinstance(source, Wei):
            return source.rescale(scale)._magnitude
        if isinstance(source, Raw):
            return source.value
        if isinstance(source, bool):
            raise InvalidInput("Cannot parse bool as a number")

        math = cls.decimal_math
        if already_scaled:
            if isinstance(source, int):
                return source
            return math.truncate(math.parse(source))
        if isinstance(source, int):
            return source * pow10(scale)
        return math.round_half_up(math.shift(math.parse(source), scale))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Wei is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Wei is immutable, cannot delete '{name}'")

    def __reduce__(self) -> tuple[type[Wei], tuple[int, int, bool]]:
        return (self.__class__, (self._magnitude, self._scale, True))

    @classmethod
    def from_raw(cls, value: int, scale: int | None = None) -> Wei:
        """Create from an integer already in the smallest unit of ``scale``."""
        return cls(Raw(value), scale)

    @classmethod
    def zero(cls, scale: int | None = None) -> Wei:
        """Create a zero value."""
        return cls(Raw(0), scale)

    @property
    def magnitude(self) -> int:
        """The scaled integer value."""
        return self._magnitude

    @property
    def scale(self) -> int:
        """Number of implied decimal digits."""
        return self._scale

    @property
    def unit(self) -> int:
        """10**scale, the magnitude of one whole unit."""
        return pow10(self._scale)

    # --- Scale conversion ---

    def rescale(self, scale: int) -> Wei:
        """Return this value expressed at another scale.

        Narrowing the scale truncates trailing digits toward zero.
        """
        scale = self._check_scale(scale)
        if scale == self._scale:
            return self

        numerator = self._magnitude * pow10(scale)
        magnitude = div_trunc(numerator, self.unit)
        if numerator != magnitude * self.unit:
            logger.debug(
                "wei_rescale_truncated",
                magnitude=self._magnitude,
                from_scale=self._scale,
                to_scale=scale,
                result=magnitude,
            )
        return type(self)(Raw(magnitude), scale)

    # --- Arithmetic ---

    def _coerce(self, other: WeiSource) -> Wei:
        if isinstance(other, Wei):
            return other.rescale(self._scale)
        return type(self)(other, self._scale)

    def _new(self, magnitude: int) -> Wei:
        return type(self)(Raw(magnitude), self._scale)

    def add(self, other: WeiSource) -> Wei:
        return self._new(self._magnitude + self._coerce(other)._magnitude)

    def sub(self, other: WeiSource) -> Wei:
        return self._new(self._magnitude - self._coerce(other)._magnitude)

    def mul(self, other: WeiSource) -> Wei:
        """Multiply, truncating the product back to this scale."""
        product = self._magnitude * self._coerce(other)._magnitude
        return self._new(div_trunc(product, self.unit))

    def div(self, other: WeiSource) -> Wei:
        """Divide, truncating the quotient toward zero.

        Raises:
            DivisionByZero: If other is zero at this scale
        """
        divisor = self._coerce(other)._magnitude
        return self._new(div_trunc(self._magnitude * self.unit, divisor))

    def neg(self) -> Wei:
        return self._new(-self._magnitude)

    def abs(self) -> Wei:
        return self._new(abs(self._magnitude))

    def pow(self, exponent: int) -> Wei:
        """Raise to an integer power.

        Computed on the decimal value at the configured precision, then
        rounded half-up to this scale.

        Raises:
            DivisionByZero: If this value is zero and exponent is negative
            ArithmeticOverflow: If the result is too large for the decimal context
        """
        result = self.decimal_math.power(self.to_decimal(), exponent)
        return type(self)(result, self._scale)

    def inv(self) -> Wei:
        """Return 1 / self, truncated toward zero.

        Raises:
            DivisionByZero: If this value is zero
        """
        unit = self.unit
        return self._new(div_trunc(unit * unit, self._magnitude))

    # --- Comparison ---

    def cmp(self, other: WeiSource) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        other_magnitude = self._coerce(other)._magnitude
        if self._magnitude > other_magnitude:
            return 1
        if self._magnitude < other_magnitude:
            return -1
        return 0

    def eq(self, other: WeiSource) -> bool:
        return self.cmp(other) == 0

    def gt(self, other: WeiSource) -> bool:
        return self.cmp(other) > 0

    def gte(self, other: WeiSource) -> bool:
        return self.cmp(other) >= 0

    def lt(self, other: WeiSource) -> bool:
        return self.cmp(other) < 0

    def lte(self, other: WeiSource) -> bool:
        return self.cmp(other) <= 0

    def feq(self, other: WeiSource, tolerance: WeiSource) -> bool:
        """Fuzzy equality: True if |self - other| is strictly below tolerance.

        Plain numbers are not in wei, so a tolerance of "2e-18" allows one
        wei of difference at scale 18.
        """
        diff = abs(self._magnitude - self._coerce(other)._magnitude)
        return diff < self._coerce(tolerance)._magnitude

    # --- Aggregates ---

    @staticmethod
    def min(first: WeiSource, *rest: WeiSource) -> Wei:
        return wei_min(first, *rest)

    @staticmethod
    def max(first: WeiSource, *rest: WeiSource) -> Wei:
        return wei_max(first, *rest)

    @staticmethod
    def avg(first: WeiSource, *rest: WeiSource) -> Wei:
        return wei_avg(first, *rest)

    # --- Python operators ---

    def __add__(self, other: object) -> Wei:
        if not _is_source(other):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    def __radd__(self, other: object) -> Wei:
        if not _is_source(other):
            return NotImplemented
        return self._coerce(other).add(self)  # type: ignore[arg-type]

    def __sub__(self, other: object) -> Wei:
        if not _is_source(other):
            return NotImplemented
        return self.sub(other)  # type: ignore[arg-type]

    def __rsub__(self, other: object) -> Wei:
        if not _is_source(other):
            return NotImplemented
        return self._coerce(other).sub(self)  # type: ignore[arg-type]

    def __mul__(self, other: object) -> Wei:
        if not _is_source(other):
            return NotImplemented
        return self.mul(other)  # type: ignore[arg-type]

    def __rmul__(self, other: object) -> Wei:
        if not _is_source(other):
            return NotImplemented
        return self._coerce(other).mul(self)  # type: ignore[arg-type]

    def __truediv__(self, other: object) -> Wei:
        if not _is_source(other):
            return NotImplemented
        return self.div(other)  # type: ignore[arg-type]

    def __rtruediv__(self, other: object) -> Wei:
        if not _is_source(other):
            return NotImplemented
        return self._coerce(other).div(self)  # type: ignore[arg-type]

    def __pow__(self, exponent: int, modulo: None = None) -> Wei:
        if modulo is not None or isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> Wei:
        return self.neg()

    def __pos__(self) -> Wei:
        return self

    def __abs__(self) -> Wei:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not _is_source(other):
            return NotImplemented
        return self.eq(other)  # type: ignore[arg-type]

    def __lt__(self, other: object) -> bool:
        if not _is_source(other):
            return NotImplemented
        return self.lt(other)  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if not _is_source(other):
            return NotImplemented
        return self.lte(other)  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if not _is_source(other):
            return NotImplemented
        return self.gt(other)  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if not _is_source(other):
            return NotImplemented
        return self.gte(other)  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self._magnitude != 0

    # --- Conversion ---

    def to_string(self, decimal_places: int | None = None, as_raw: bool = False) -> str:
        """Write the value as a string.

        Args:
            decimal_places: Fixed number of fractional digits, rounded
                half-up. If None, the exact value with trailing zeros removed.
            as_raw: If True, write the scaled integer magnitude instead

        Returns:
            The value as a string
        """
        if as_raw:
            return str(self._magnitude)
        if decimal_places is not None:
            return self.decimal_math.to_fixed(self.to_decimal(), decimal_places)

        text = self.decimal_math.to_fixed(self.to_decimal(), self._scale)
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    @property
    def str_value(self) -> str:
        """The unscaled value as a string."""
        return self.to_string()

    def to_int(self) -> int:
        """Return the scaled integer magnitude. Divide by ``unit`` to unscale."""
        return self._magnitude

    to_bigint = to_int

    def to_decimal(self, as_raw: bool = False) -> Decimal:
        """Convert to an exact Decimal, unscaled unless ``as_raw``."""
        value = Decimal(self._magnitude)
        if as_raw:
            return value
        return self.decimal_math.shift(value, -self._scale)

    @property
    def decimal(self) -> Decimal:
        """The unscaled value as a Decimal."""
        return self.to_decimal()

    def to_number(self, as_raw: bool = False) -> float:
        """Convert to float through a 16 significant digit decimal.

        The most significant digits are preserved; the result is an
        approximation, not an exact value.
        """
        return float(self.decimal_math.to_significant(self.to_decimal(as_raw)))

    @property
    def num(self) -> float:
        """The unscaled value as a float."""
        return self.to_number()

    def __float__(self) -> float:
        return self.to_number()

    def to_sortable_hex(self) -> str:
        """Write the magnitude as a 32-byte zero-padded hex string.

        Strings compare lexicographically in the same order as the values.

        Raises:
            SortableRangeError: If the magnitude is negative or exceeds uint256
        """
        if not is_uint256(self._magnitude):
            raise SortableRangeError(
                f"Sortable hex requires 0 <= magnitude <= 2^256-1, got {self._magnitude}"
            )
        return f"0x{self._magnitude:064x}"

    def to_json(self) -> str:
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Wei('{self.to_string()}', scale={self._scale})"

    # --- pydantic integration ---

    @classmethod
    def _validate(cls, value: Any) -> Wei:
        if isinstance(value, Wei):
            return value
        try:
            return cls(value)
        except WeiError as err:
            raise ValueError(str(err)) from err

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        """Validate from any construction source, serialize to a decimal string in JSON."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_json,
                when_used="json",
            ),
        )


WeiSource = Wei | Raw | int | float | str | Decimal

_SOURCE_TYPES = (Wei, Raw, int, float, str, Decimal)


def _is_source(value: object) -> bool:
    return isinstance(value, _SOURCE_TYPES) and not isinstance(value, bool)


def wei(source: WeiSource, scale: int | None = None, already_scaled: bool = False) -> Wei:
    """Convenience function for Wei(source, scale, already_scaled)."""
    return Wei(source, scale, already_scaled)


def _as_wei(value: WeiSource) -> Wei:
    return value if isinstance(value, Wei) else Wei(value)


def wei_min(first: WeiSource, *rest: WeiSource) -> Wei:
    """Return the smallest value, expressed at the first value's scale.

    Candidates are compared after rescaling to that scale. Ties keep the
    earliest candidate.
    """
    head = _as_wei(first)
    best = head
    for candidate in rest:
        value = head._coerce(candidate)
        if best.gt(value):
            best = value
    return best


def wei_max(first: WeiSource, *rest: WeiSource) -> Wei:
    """Return the largest value, expressed at the first value's scale.

    Candidates are compared after rescaling to that scale. Ties keep the
    earliest candidate.
    """
    head = _as_wei(first)
    best = head
    for candidate in rest:
        value = head._coerce(candidate)
        if best.lt(value):
            best = value
    return best


def wei_avg(first: WeiSource, *rest: WeiSource) -> Wei:
    """Return the arithmetic mean at the first value's scale (truncated)."""
    total = _as_wei(first)
    for value in rest:
        total = total.add(value)
    return total.div(1 + len(rest))


__all__ = [
    "Raw",
    "Wei",
    "WeiSource",
    "wei",
    "wei_min",
    "wei_max",
    "wei_avg",
]
