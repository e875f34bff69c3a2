"""
Limb kernels.

Pure functions over little-endian lists of 64-bit limbs. These modules are
designed to be:
- integer-only, with carries and borrows made explicit,
- easy to audit (one algorithm per module, explicit intermediate variables),
- free of value types: `src.core` wraps them in `Natural` and `Integer`.
"""

from .addition import add, add_mut
from .comparison import compare
from .division import divide, divide_by_limb, long_divide, shl_bits, shr_bits
from .errors import BignumError, DivisionByZeroError, ResultBuilderError
from .limb import LIMB_BITS, LIMB_MASK, LIMB_MAX, Sign
from .multiplication import DEFAULT_KARATSUBA_THRESHOLD, karatsuba, mul_by_limb, multiply, schoolbook
from .result_builder import ResultBuilder
from .subtraction import sub, sub_assign, sub_signed

__all__ = [
    "add",
    "add_mut",
    "compare",
    "divide",
    "divide_by_limb",
    "long_divide",
    "shl_bits",
    "shr_bits",
    "BignumError",
    "DivisionByZeroError",
    "ResultBuilderError",
    "LIMB_BITS",
    "LIMB_MASK",
    "LIMB_MAX",
    "Sign",
    "DEFAULT_KARATSUBA_THRESHOLD",
    "karatsuba",
    "mul_by_limb",
    "multiply",
    "schoolbook",
    "ResultBuilder",
    "sub",
    "sub_assign",
    "sub_signed",
]
