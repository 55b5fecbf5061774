"""Pytest configuration and fixtures."""

import pytest

from tests.helpers import SAMPLE_AMOUNTS, USDC_DECIMALS
from wei import Wei


@pytest.fixture
def one() -> Wei:
    """One whole unit at scale 18."""
    return Wei(1)


@pytest.fixture
def one_usdc() -> Wei:
    """One whole unit at USDC scale."""
    return Wei(1, USDC_DECIMALS)


@pytest.fixture
def samples() -> list[Wei]:
    """SAMPLE_AMOUNTS as Wei values at scale 18."""
    return [Wei(s) for s in SAMPLE_AMOUNTS]
