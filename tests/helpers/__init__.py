"""Test helpers module for shared test utilities."""

from tests.helpers.constants import (
    ETHER_DECIMALS,
    ONE_ETHER,
    ONE_USDC,
    ONE_WEI,
    SAMPLE_AMOUNTS,
    USDC_DECIMALS,
    WBTC_DECIMALS,
)

__all__ = [
    "ETHER_DECIMALS",
    "USDC_DECIMALS",
    "WBTC_DECIMALS",
    "ONE_ETHER",
    "ONE_USDC",
    "ONE_WEI",
    "SAMPLE_AMOUNTS",
]
