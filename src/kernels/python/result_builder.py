"""
Fixed-capacity limb buffer filled from its last slot toward its first.

Long division and right shifts produce limbs most-significant first, while
limb lists are stored least-significant first. Pushing into the buffer from
the top avoids a reverse or repeated front insertion. The builder also counts
the zeros pushed before the first non-zero value; those are exactly the
most-significant zero limbs, so canonicalization is a single slice with no
rescan.
"""

from __future__ import annotations

from .errors import ResultBuilderError


class ResultBuilder:
    __slots__ = ("_data", "_cursor", "_leading_zeros", "_seen_nonzero")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._data = [0] * capacity
        self._cursor = capacity
        self._leading_zeros = 0
        self._seen_nonzero = False

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def leading_zeros(self) -> int:
        return self._leading_zeros

    def __len__(self) -> int:
        return len(self._data) - self._cursor

    def is_full(self) -> bool:
        return self._cursor == 0

    def push(self, value: int) -> None:
        if self._cursor == 0:
            raise ResultBuilderError(f"push past capacity {len(self._data)}")
        self._cursor -= 1
        self._data[self._cursor] = value
        if not self._seen_nonzero:
            if value == 0:
                self._leading_zeros += 1
            else:
                self._seen_nonzero = True

    def into_limbs(self) -> list[int]:
        """Canonical limb list (least-significant first) of the filled buffer."""
        if self._cursor != 0:
            raise ResultBuilderError(
                f"read after {len(self)} of {len(self._data)} pushes"
            )
        return self._data[: len(self._data) - self._leading_zeros]
