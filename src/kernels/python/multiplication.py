"""
Multi-limb multiplication.

- `mul_by_limb`: one row of long multiplication, shifted by a number of limbs.
- `schoolbook`: O(n*m) accumulation of rows.
- `karatsuba`: three half-size products recombined with shifted addition.
- `multiply`: picks between the two by operand size.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .addition import add
from .limb import Sign, add_with_carry, mul_wide, strip
from .subtraction import sub, sub_signed

_logger = logging.getLogger(__name__)

# Shorter-operand limb count from which `multiply` recurses with Karatsuba.
DEFAULT_KARATSUBA_THRESHOLD = 32


def shift_limbs(limbs: Sequence[int], count: int) -> list[int]:
    """``limbs * 2**(64*count)``. Zero stays ``[]``."""
    if not limbs:
        return []
    return [0] * count + list(limbs)


def mul_by_limb(limbs: Sequence[int], digit: int, significance: int = 0) -> list[int]:
    """``limbs * digit`` shifted left by ``significance`` limbs."""
    if digit == 0 or not limbs:
        return []
    result = [0] * significance
    high = 0
    for limb in limbs:
        low, next_high = mul_wide(limb, digit)
        low, carry = add_with_carry(low, high, False)
        result.append(low)
        # high half of a 64x64 product is at most 2**64 - 2, so +1 fits
        high = next_high + carry
    if high:
        result.append(high)
    return strip(result)


def schoolbook(a: Sequence[int], b: Sequence[int]) -> list[int]:
    accumulator: list[int] = []
    for significance, digit in enumerate(a):
        if digit == 0:
            continue
        accumulator = add(mul_by_limb(b, digit, significance), accumulator)
    return accumulator


def karatsuba(
    a: Sequence[int],
    b: Sequence[int],
    threshold: int = DEFAULT_KARATSUBA_THRESHOLD,
) -> list[int]:
    """
    Karatsuba product of two canonical limb lists.

    With ``x = x1*B**h + x0`` and ``y = y1*B**h + y0``:
    ``x*y = z2*B**2h + (z2 + z0 + (x1 - x0)*(y0 - y1))*B**h + z0``.
    The cross term is signed, so it goes through `sub_signed`.
    """
    n = min(len(a), len(b))
    if n < max(threshold, 2):
        return schoolbook(a, b)

    half = n // 2
    a0 = strip(list(a[:half]))
    a1 = list(a[half:])
    b0 = strip(list(b[:half]))
    b1 = list(b[half:])

    z0 = karatsuba(a0, b0, threshold)
    z2 = karatsuba(a1, b1, threshold)

    sign_a, diff_a = sub_signed(a1, a0)
    sign_b, diff_b = sub_signed(b0, b1)
    cross = karatsuba(diff_a, diff_b, threshold)

    middle = add(z2, z0)
    if sign_a * sign_b is Sign.POSITIVE:
        middle = add(middle, cross)
    else:
        middle = sub(middle, cross)

    result = add(z0, shift_limbs(middle, half))
    return add(result, shift_limbs(z2, 2 * half))


def multiply(
    a: Sequence[int],
    b: Sequence[int],
    *,
    karatsuba_threshold: int = DEFAULT_KARATSUBA_THRESHOLD,
) -> list[int]:
    if min(len(a), len(b)) >= max(karatsuba_threshold, 2):
        _logger.debug(
            "karatsuba multiply: %d x %d limbs (threshold=%d)",
            len(a), len(b), karatsuba_threshold,
        )
        return karatsuba(a, b, karatsuba_threshold)
    return schoolbook(a, b)
