"""Half-open ranges ``[start, end)`` over Naturals."""

from __future__ import annotations

from typing import Iterator

from .natural import Natural


class NaturalRange:
    """
    Increasing iteration over ``start, start + 1, ..., end - 1``.

    Only the cursor and the end are held; the cursor advances with `Natural.inc`,
    and every yielded value is an independent copy.
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Natural, end: Natural) -> None:
        self._start = start.copy()
        self._end = end.copy()

    @property
    def start(self) -> Natural:
        return self._start.copy()

    @property
    def end(self) -> Natural:
        return self._end.copy()

    def __iter__(self) -> Iterator[Natural]:
        cursor = self._start.copy()
        while cursor < self._end:
            yield cursor.copy()
            cursor.inc()

    def __len__(self) -> int:
        span = self._end.sub(self._start)
        return 0 if span is None else span.to_int()

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, Natural):
            return False
        return self._start <= value < self._end

    def __repr__(self) -> str:
        return f"NaturalRange({self._start}, {self._end})"
