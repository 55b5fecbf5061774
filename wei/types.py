"""Pydantic field types for token amounts.

Wei can be used directly as a field type; these aliases add the two
common wire shapes:

- WeiAmount: human-denominated decimal ("1.5"), serialized the same way
- RawWeiAmount: integer already in wei ("1500000000000000000"), validated
  as a uint256 and serialized back as the raw integer string
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

from wei.core import Wei
from wei.int_math import UINT256_MAX


def validate_raw_amount(value: Any) -> Wei:
    """Validate a uint256 wei amount and wrap it as an 18-decimal Wei.

    Args:
        value: Wei instance, int, or decimal integer string

    Returns:
        Wei at the default scale with the value as its magnitude

    Raises:
        ValueError: If value is not a non-negative integer within uint256 range
    """
    if isinstance(value, Wei):
        return value

    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Raw amount must be string or int, got {type(value).__name__}")

    if isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Raw amount must be a decimal integer string: '{value}'") from err
    else:
        int_value = value

    if int_value < 0:
        raise ValueError(f"Raw amount cannot be negative: {value}")
    if int_value > UINT256_MAX:
        raise ValueError(f"Raw amount overflow: {value} > 2^256-1")

    return Wei.from_raw(int_value)


def serialize_raw_amount(value: Wei) -> str:
    """Write the magnitude as a decimal integer string."""
    return value.to_string(as_raw=True)


# Decimal amount in whole units, e.g. "1.5"
WeiAmount = Annotated[
    Wei,
    Field(description="Decimal token amount in whole units"),
]

# Amount in wei as a decimal integer string, e.g. "1500000000000000000"
RawWeiAmount = Annotated[
    Wei,
    BeforeValidator(validate_raw_amount),
    PlainSerializer(serialize_raw_amount, return_type=str, when_used="json"),
    Field(description="Token amount in wei as a decimal integer string"),
]


__all__ = ["WeiAmount", "RawWeiAmount", "validate_raw_amount", "serialize_raw_amount"]
