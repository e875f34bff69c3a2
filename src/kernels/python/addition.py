"""
Multi-limb addition.

`add` allocates a fresh result; `add_mut` accumulates into a caller-sized
destination and reports the final carry so the caller can append it.
"""

from __future__ import annotations

from typing import Sequence

from .limb import add_with_carry


def add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    if len(a) < len(b):
        a, b = b, a

    result: list[int] = []
    carry = False
    for i in range(len(b)):
        digit, carry = add_with_carry(a[i], b[i], carry)
        result.append(digit)

    # Carry ripples through the longer operand until it dies out.
    i = len(b)
    while carry and i < len(a):
        digit, carry = add_with_carry(a[i], 0, carry)
        result.append(digit)
        i += 1
    result.extend(a[i:])

    if carry:
        result.append(1)
    return result


def add_mut(dest: list[int], b: Sequence[int]) -> bool:
    """
    ``dest += b`` in place, returning the carry out of ``dest``'s top limb.

    ``dest`` must already hold at least ``len(b)`` limbs; callers pad it with
    zeros first. A True return means the caller must append a limb of 1.
    """
    if len(dest) < len(b):
        raise ValueError("add_mut destination is shorter than the addend")

    carry = False
    for i in range(len(b)):
        dest[i], carry = add_with_carry(dest[i], b[i], carry)

    i = len(b)
    while carry and i < len(dest):
        dest[i], carry = add_with_carry(dest[i], 0, carry)
        i += 1
    return carry
