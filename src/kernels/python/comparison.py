"""Total ordering over canonical limb sequences."""

from __future__ import annotations

from typing import Sequence


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Compare two canonical little-endian limb sequences.

    Returns -1, 0 or +1. Inputs must carry no most-significant zero limbs,
    otherwise the length shortcut gives the wrong answer.
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1
    return 0
