"""Configuration for Wei arithmetic."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

# Default number of implied decimal places (ether and most ERC-20 tokens)
WEI_PRECISION = 18

# 78 digits of precision, enough for uint256 values (up to ~10^77)
DECIMAL_PRECISION = 78

# A float mantissa has 52 bits, ceil(log10(2^52)) = 16
NUMBER_DIGITS = 16


@dataclass(frozen=True)
class WeiConfig:
    """Centralized configuration for Wei construction and conversion.

    Attributes:
        default_scale: Scale used when none is passed (default: 18)
        decimal_precision: Significant digits for inexact decimal operations
            such as ``pow`` (default: 78)
        number_digits: Significant digits kept when converting to float
            (default: 16)
    """

    default_scale: int = WEI_PRECISION
    decimal_precision: int = DECIMAL_PRECISION
    number_digits: int = NUMBER_DIGITS

    def __post_init__(self) -> None:
        if self.default_scale < 0:
            raise ValueError(f"default_scale must be non-negative, got {self.default_scale}")
        if self.decimal_precision <= 0:
            raise ValueError(f"decimal_precision must be positive, got {self.decimal_precision}")
        if self.number_digits <= 0:
            raise ValueError(f"number_digits must be positive, got {self.number_digits}")


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from err


def load_config(environ: Mapping[str, str] | None = None) -> WeiConfig:
    """Build a WeiConfig from environment variables.

    Reads WEI_DEFAULT_SCALE, WEI_DECIMAL_PRECISION and WEI_NUMBER_DIGITS,
    falling back to the defaults for unset variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The loaded configuration

    Raises:
        ValueError: If a variable is set but is not a valid value
    """
    env = os.environ if environ is None else environ
    return WeiConfig(
        default_scale=_read_int(env, "WEI_DEFAULT_SCALE", WEI_PRECISION),
        decimal_precision=_read_int(env, "WEI_DECIMAL_PRECISION", DECIMAL_PRECISION),
        number_digits=_read_int(env, "WEI_NUMBER_DIGITS", NUMBER_DIGITS),
    )


# Loaded once at import time
DEFAULT_CONFIG = load_config()


__all__ = [
    "WEI_PRECISION",
    "DECIMAL_PRECISION",
    "NUMBER_DIGITS",
    "WeiConfig",
    "load_config",
    "DEFAULT_CONFIG",
]
