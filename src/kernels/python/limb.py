"""
Single-limb primitives shared by every multi-limb kernel.

A limb is a Python int in ``[0, 2**64)``. Limb sequences are plain lists,
least-significant limb first. Python ints never overflow, so the wrap-around
and carry/borrow flags of a 64-bit machine word are reproduced explicitly here:
every result is masked with `LIMB_MASK` and the flag is returned as a bool.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Iterable


LIMB_BITS = 64
LIMB_BASE = 1 << LIMB_BITS
LIMB_MASK = LIMB_BASE - 1
LIMB_MAX = LIMB_MASK


@unique
class Sign(Enum):
    """Sign of a signed magnitude. Zero is always POSITIVE."""
    POSITIVE = "+"
    NEGATIVE = "-"

    def __mul__(self, other: "Sign") -> "Sign":
        if not isinstance(other, Sign):
            return NotImplemented
        return Sign.POSITIVE if self is other else Sign.NEGATIVE

    def negate(self) -> "Sign":
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE


def require_limb(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0 or value > LIMB_MAX:
        raise ValueError(f"{name} must be in [0, 2**64), got {value}")


def to_limb_list(limbs: Iterable[int]) -> list[int]:
    """Validate an iterable of limbs and return it as a canonical list."""
    out = list(limbs)
    for i, limb in enumerate(out):
        require_limb(f"limb[{i}]", limb)
    strip(out)
    return out


def strip(limbs: list[int]) -> list[int]:
    """Drop most-significant zero limbs in place. Zero becomes ``[]``."""
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def add_with_carry(a: int, b: int, carry: bool) -> tuple[int, bool]:
    """``a + b + carry`` as (low limb, carry-out)."""
    total = a + b
    overflow = total > LIMB_MASK
    total &= LIMB_MASK
    if overflow:
        # a + b wrapped, so its low limb is at most 2**64 - 2 and +1 cannot wrap again
        return total + carry, True
    total += carry
    if total > LIMB_MASK:
        return total & LIMB_MASK, True
    return total, False


def sub_with_borrow(a: int, b: int, borrow: bool) -> tuple[int, bool]:
    """``a - b - borrow`` as (low limb, borrow-out)."""
    diff = a - b
    borrowed = diff < 0
    diff &= LIMB_MASK
    if not borrow:
        return diff, borrowed
    if diff == 0:
        # 0 - 1 wraps; the first step cannot also have borrowed here
        return LIMB_MASK, True
    return diff - 1, borrowed


def mul_wide(a: int, b: int) -> tuple[int, int]:
    """Double-width product ``a * b`` as (low limb, high limb)."""
    product = a * b
    return product & LIMB_MASK, product >> LIMB_BITS


def short_div(high: int, low: int, divisor: int) -> int:
    """
    ``min((high * 2**64 + low) // divisor, 2**64 - 1)``.

    Two-limb by one-limb division, the quotient-estimate step of long division.
    """
    quotient = ((high << LIMB_BITS) | low) // divisor
    if quotient > LIMB_MAX:
        return LIMB_MAX
    return quotient


def leading_zeros(limb: int) -> int:
    return LIMB_BITS - limb.bit_length()
