"""
Multi-limb subtraction.

Three entry points:
- `sub_assign`: in-place ``a -= b`` (the division engine's working remainder),
- `sub`: allocating ``a - b`` with a canonical result,
- `sub_signed`: ``|first - second|`` plus the sign, the building block for
  signed Integer arithmetic and for the division correction loop.

`sub_assign` and `sub` require ``a >= b``; a final borrow means the contract
was broken and raises AssertionError.
"""

from __future__ import annotations

from typing import Sequence

from .comparison import compare
from .limb import Sign, strip, sub_with_borrow


def sub_assign(a: list[int], b: Sequence[int]) -> None:
    if any(b[len(a):]):
        raise AssertionError("sub_assign requires minuend >= subtrahend")

    borrow = False
    for i in range(min(len(a), len(b))):
        a[i], borrow = sub_with_borrow(a[i], b[i], borrow)

    # Borrow ripples upward through the minuend until it is absorbed.
    i = len(b)
    while borrow and i < len(a):
        a[i], borrow = sub_with_borrow(a[i], 0, borrow)
        i += 1
    if borrow:
        raise AssertionError("sub_assign requires minuend >= subtrahend")
    strip(a)


def sub(a: Sequence[int], b: Sequence[int]) -> list[int]:
    result = list(a)
    sub_assign(result, b)
    return result


def sub_signed(first: Sequence[int], second: Sequence[int]) -> tuple[Sign, list[int]]:
    order = compare(first, second)
    if order > 0:
        return Sign.POSITIVE, sub(first, second)
    if order == 0:
        return Sign.POSITIVE, []
    return Sign.NEGATIVE, sub(second, first)
