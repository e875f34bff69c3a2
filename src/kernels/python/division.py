"""
Multi-limb division (normalized long division in base 2**64).

`divide(p, q)` returns ``(quotient, remainder)`` with ``p == quotient*q + remainder``
and ``0 <= remainder < q``:

1. Normalize: shift ``p`` and ``q`` left by the leading zero bits of ``q``'s top
   limb so that limb has its high bit set. Each per-limb quotient estimate is
   then at most two too large.
2. Build the quotient most-significant limb first into a `ResultBuilder`.
3. The top quotient limb is 0 or 1; every lower limb is estimated with
   `short_div` on the remainder's top two limbs and corrected downward while
   the trial remainder is negative.
4. Shift the remainder back right. The quotient needs no correction because
   the scaling cancels.

Single-limb divisors skip the general loop via `divide_by_limb`; `long_divide`
is the general path on its own so the two can be checked against each other.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .comparison import compare
from .errors import DivisionByZeroError
from .limb import LIMB_BITS, LIMB_MASK, Sign, leading_zeros, short_div, strip
from .multiplication import mul_by_limb, shift_limbs
from .result_builder import ResultBuilder
from .subtraction import sub_assign, sub_signed

_logger = logging.getLogger(__name__)

# Knuth's bound for a normalized divisor and a two-limb estimate.
MAX_CORRECTIONS = 2


def shl_bits(limbs: Sequence[int], k: int) -> list[int]:
    """``limbs * 2**k`` for ``0 <= k < 64``."""
    if k == 0:
        return list(limbs)
    result: list[int] = []
    carry = 0
    for limb in limbs:
        result.append(((limb << k) & LIMB_MASK) | carry)
        carry = limb >> (LIMB_BITS - k)
    if carry:
        result.append(carry)
    return result


def shr_bits(limbs: Sequence[int], k: int) -> list[int]:
    """``limbs // 2**k`` for ``0 <= k < 64``. Bits shifted out are dropped."""
    if k == 0:
        return list(limbs)
    builder = ResultBuilder(len(limbs))
    carry = 0
    for limb in reversed(limbs):
        builder.push((limb >> k) | carry)
        carry = (limb << (LIMB_BITS - k)) & LIMB_MASK
    return builder.into_limbs()


def divide_by_limb(p: Sequence[int], divisor: int) -> tuple[list[int], list[int]]:
    """Divide by a single non-zero limb, one short division per dividend limb."""
    if divisor == 0:
        raise DivisionByZeroError("division by zero")
    builder = ResultBuilder(len(p))
    remainder = 0
    for limb in reversed(p):
        current = (remainder << LIMB_BITS) | limb
        builder.push(current // divisor)
        remainder = current % divisor
    return builder.into_limbs(), ([remainder] if remainder else [])


def _long_divide_normalized(p: Sequence[int], q: Sequence[int]) -> tuple[list[int], list[int]]:
    remainder = list(p)
    n = len(q)
    if n > len(remainder):
        return [], remainder

    m = len(remainder) - n
    top = q[-1]
    digits = ResultBuilder(m + 1)

    first_candidate = shift_limbs(q, m)
    if compare(remainder, first_candidate) >= 0:
        digits.push(1)
        sub_assign(remainder, first_candidate)
    else:
        digits.push(0)

    for j in range(m - 1, -1, -1):
        if not remainder:
            # an exact division part-way through still owes a zero per position
            digits.push(0)
            continue

        high = remainder[n + j] if n + j < len(remainder) else 0
        low = remainder[n + j - 1] if n + j - 1 < len(remainder) else 0
        q_j = short_div(high, low, top)
        if q_j == 0:
            digits.push(0)
            continue

        sign, remainder = sub_signed(remainder, mul_by_limb(q, q_j, j))
        corrections = 0
        while sign is Sign.NEGATIVE:
            # remainder holds |negative trial|; adding q*B**j back gives q*B**j - |trial|
            q_j -= 1
            corrections += 1
            if corrections > MAX_CORRECTIONS:
                raise AssertionError(f"divisor not normalized: {corrections} corrections at limb {j}")
            sign, remainder = sub_signed(shift_limbs(q, j), remainder)
        if corrections:
            _logger.debug("quotient limb %d corrected %d time(s) to %d", j, corrections, q_j)
        digits.push(q_j)

    return digits.into_limbs(), strip(remainder)


def long_divide(p: Sequence[int], q: Sequence[int]) -> tuple[list[int], list[int]]:
    """General normalized long division, without the single-limb shortcut."""
    if not q:
        raise DivisionByZeroError("division by zero")
    shift = leading_zeros(q[-1])
    if shift:
        _logger.debug("normalizing divisor of %d limb(s) by %d bit(s)", len(q), shift)
    quotient, remainder = _long_divide_normalized(shl_bits(p, shift), shl_bits(q, shift))
    return quotient, shr_bits(remainder, shift)


def divide(p: Sequence[int], q: Sequence[int]) -> tuple[list[int], list[int]]:
    if not q:
        raise DivisionByZeroError("division by zero")
    if len(q) == 1:
        return divide_by_limb(p, q[0])
    return long_divide(p, q)
