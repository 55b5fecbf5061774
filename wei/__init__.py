"""Exact fixed-point decimal amounts for web3 token math.

Values are stored as integers scaled by a power of ten (18 decimals by
default), so sums, products and quotients never pass through floats.
"""

from wei.config import DEFAULT_CONFIG, WEI_PRECISION, WeiConfig, load_config
from wei.core import Raw, Wei, WeiSource, wei, wei_avg, wei_max, wei_min
from wei.decimal_utils import DecimalMath
from wei.errors import (
    ArithmeticOverflow,
    DivisionByZero,
    InvalidInput,
    InvalidScale,
    ParseError,
    SortableRangeError,
    WeiError,
)

__version__ = "0.1.0"
__all__ = [
    # Classes
    "Wei",
    "Raw",
    "WeiSource",
    "DecimalMath",
    # Functions
    "wei",
    "wei_min",
    "wei_max",
    "wei_avg",
    # Configuration
    "WEI_PRECISION",
    "WeiConfig",
    "DEFAULT_CONFIG",
    "load_config",
    # Errors
    "WeiError",
    "InvalidInput",
    "InvalidScale",
    "ParseError",
    "ArithmeticOverflow",
    "DivisionByZero",
    "SortableRangeError",
    "__version__",
]
