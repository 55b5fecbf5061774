"""Tests for Wei construction and source normalization."""

from decimal import Decimal

import pytest

from tests.helpers import ONE_ETHER, ONE_USDC, USDC_DECIMALS
from wei import InvalidInput, InvalidScale, ParseError, Raw, Wei, WeiError, wei


class TestDecimalSources:
    """Plain numeric sources are scaled to the requested scale."""

    def test_from_string(self):
        """Decimal strings are multiplied by 10^scale."""
        assert Wei("1.5").magnitude == 1_500_000_000_000_000_000

    def test_from_string_with_commas(self):
        """Comma group separators are ignored."""
        assert Wei("1,000.25").magnitude == 1_000_250_000_000_000_000_000

    def test_from_string_scientific(self):
        """Exponent notation is accepted."""
        assert Wei("1e-18").magnitude == 1
        assert Wei("1.5e3").magnitude == 1500 * ONE_ETHER

    def test_from_string_surrounding_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert Wei(" 2 ").magnitude == 2 * ONE_ETHER

    def test_from_negative_string(self):
        """Negative values keep their sign."""
        assert Wei("-2.5").magnitude == -2_500_000_000_000_000_000

    def test_from_int_is_whole_units(self):
        """A plain int is a number of whole units, not wei."""
        assert Wei(2).magnitude == 2 * ONE_ETHER

    def test_from_float_uses_shortest_repr(self):
        """0.1 is read as the decimal 0.1, not its binary expansion."""
        assert Wei(0.1).magnitude == 10**17

    def test_from_decimal(self):
        """Decimal sources are exact."""
        assert Wei(Decimal("0.000000000000000001")).magnitude == 1

    def test_custom_scale(self):
        """Scale controls the number of implied decimals."""
        w = Wei("1.5", USDC_DECIMALS)
        assert w.magnitude == 1_500_000
        assert w.scale == USDC_DECIMALS
        assert w.unit == ONE_USDC

    def test_default_scale(self):
        """Default scale is 18."""
        w = Wei(1)
        assert w.scale == 18
        assert w.unit == ONE_ETHER

    def test_rounds_half_up(self):
        """Digits beyond the scale round to nearest, ties away from zero."""
        assert Wei("0.0000000000000000005").magnitude == 1
        assert Wei("0.00000000000000000049").magnitude == 0
        assert Wei("-0.0000000000000000005").magnitude == -1

    def test_convenience_function(self):
        """wei() is equivalent to the constructor."""
        assert wei("1.5").magnitude == Wei("1.5").magnitude
        assert wei("1.5", 6).scale == 6
        assert wei(7, 6, True).magnitude == 7


class TestRawSources:
    """Raw and already_scaled sources are used as magnitudes."""

    def test_raw_is_verbatim(self):
        """Raw values become the magnitude."""
        assert Wei(Raw(5)).magnitude == 5

    def test_raw_takes_requested_scale(self):
        """Raw values are assumed to be at the requested scale."""
        w = Wei(Raw(5), USDC_DECIMALS)
        assert w.magnitude == 5
        assert w.scale == USDC_DECIMALS

    def test_from_raw(self):
        """from_raw wraps an integer already in wei."""
        assert Wei.from_raw(ONE_ETHER) == Wei(1)
        assert Wei.from_raw(ONE_USDC, USDC_DECIMALS).to_string() == "1"

    def test_raw_rejects_non_int(self):
        """Raw only accepts ints."""
        with pytest.raises(InvalidInput):
            Raw("5")  # type: ignore[arg-type]
        with pytest.raises(InvalidInput):
            Raw(True)

    def test_already_scaled_int(self):
        """Ints flagged as already scaled are used verbatim."""
        assert Wei(123, already_scaled=True).magnitude == 123

    def test_already_scaled_truncates_fraction(self):
        """Fractions of a wei are dropped toward zero."""
        assert Wei("123.9", already_scaled=True).magnitude == 123
        assert Wei(Decimal("7.5"), already_scaled=True).magnitude == 7

    def test_already_scaled_keeps_sign(self):
        """Negative already-scaled values stay negative."""
        assert Wei("-123.9", already_scaled=True).magnitude == -123
        assert Wei(-5, already_scaled=True).magnitude == -5

    def test_zero(self):
        """zero() creates a zero value."""
        assert Wei.zero().magnitude == 0
        assert Wei.zero(6).scale == 6


class TestWeiSource:
    """Another Wei is rescaled to the requested scale."""

    def test_rescales(self):
        """Wei sources are converted to the new scale."""
        assert Wei(Wei("1.5"), USDC_DECIMALS).magnitude == 1_500_000

    def test_ignores_already_scaled(self):
        """already_scaled has no effect on Wei sources."""
        assert Wei(Wei("1.5"), USDC_DECIMALS, already_scaled=True).magnitude == 1_500_000

    def test_same_scale_copy(self):
        """Same-scale copies keep the magnitude."""
        original = Wei("3.25")
        assert Wei(original).magnitude == original.magnitude


class TestInvalidSources:
    """Invalid sources raise descriptive errors."""

    def test_none_raises(self):
        """None cannot be converted."""
        with pytest.raises(InvalidInput) as exc_info:
            Wei(None)  # type: ignore[arg-type]
        assert "None" in str(exc_info.value)

    def test_invalid_input_is_type_error(self):
        """InvalidInput is catchable as TypeError and WeiError."""
        with pytest.raises(TypeError):
            Wei(None)  # type: ignore[arg-type]
        with pytest.raises(WeiError):
            Wei(None)  # type: ignore[arg-type]

    def test_bool_raises(self):
        """Bools are not numbers here."""
        with pytest.raises(InvalidInput):
            Wei(True)  # type: ignore[arg-type]

    def test_unsupported_type_raises(self):
        """Unsupported types are rejected."""
        with pytest.raises(InvalidInput):
            Wei([1])  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["abc", "1.2.3", "", "NaN", "Infinity", "-inf"])
    def test_malformed_string_raises(self, text):
        """Malformed and non-finite strings raise ParseError."""
        with pytest.raises(ParseError):
            Wei(text)

    def test_parse_error_is_value_error(self):
        """ParseError is catchable as ValueError."""
        with pytest.raises(ValueError):
            Wei("not a number")

    def test_non_finite_float_raises(self):
        """NaN and infinite floats raise ParseError."""
        with pytest.raises(ParseError):
            Wei(float("nan"))
        with pytest.raises(ParseError):
            Wei(float("inf"))

    def test_malformed_already_scaled_raises(self):
        """already_scaled strings are parsed too."""
        with pytest.raises(ParseError):
            Wei("12x", already_scaled=True)

    @pytest.mark.parametrize("scale", [-1, 1.5, True, "18"])
    def test_invalid_scale_raises(self, scale):
        """Scale must be a non-negative int."""
        with pytest.raises(InvalidScale):
            Wei(1, scale)


class TestImmutability:
    """Wei values cannot be modified after construction."""

    def test_cannot_set_magnitude(self):
        """Public attributes are read-only."""
        w = Wei(1)
        with pytest.raises(AttributeError):
            w.magnitude = 5  # type: ignore[misc]

    def test_cannot_set_private_fields(self):
        """Private slots are read-only too."""
        w = Wei(1)
        with pytest.raises(AttributeError):
            w._magnitude = 5  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del w._scale

    def test_operations_return_new_values(self):
        """Arithmetic leaves the operands untouched."""
        a = Wei(1)
        b = a + 1
        assert a.magnitude == ONE_ETHER
        assert b.magnitude == 2 * ONE_ETHER
        assert a is not b

    def test_unhashable(self):
        """Wei values are unhashable."""
        with pytest.raises(TypeError):
            hash(Wei(1))
