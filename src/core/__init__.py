"""
Arbitrary-precision integers built on 64-bit limbs.

- `Natural`: unsigned value, canonical little-endian limb list (zero is empty).
- `Integer`: `Sign` plus a `Natural` magnitude; zero is always positive.
- `NaturalRange`: half-open iteration over Naturals.
"""

from .config import ArithmeticConfig, load_config
from .errors import (
    BignumError,
    DecimalParseError,
    DivisionByZeroError,
    LimbLimitExceeded,
    NaturalUnderflowError,
    ResultBuilderError,
)
from .integer import Integer
from .natural import Natural
from .range import NaturalRange
from src.kernels.python.limb import Sign

__all__ = [
    "ArithmeticConfig",
    "load_config",
    "BignumError",
    "DecimalParseError",
    "DivisionByZeroError",
    "LimbLimitExceeded",
    "NaturalUnderflowError",
    "ResultBuilderError",
    "Integer",
    "Natural",
    "NaturalRange",
    "Sign",
]
