"""Tests for src/kernels/python/result_builder.py."""

from __future__ import annotations

import pytest

from src.kernels.python.errors import ResultBuilderError
from src.kernels.python.result_builder import ResultBuilder


def test_pushes_fill_from_the_end() -> None:
    builder = ResultBuilder(3)
    builder.push(1)
    builder.push(2)
    builder.push(3)
    assert builder.into_limbs() == [3, 2, 1]


def test_leading_insignificant_zeros_are_trimmed() -> None:
    builder = ResultBuilder(3)
    builder.push(0)
    builder.push(3)
    builder.push(0)
    assert builder.leading_zeros == 1
    assert builder.into_limbs() == [0, 3]


def test_zeros_after_first_nonzero_are_not_counted() -> None:
    builder = ResultBuilder(4)
    for value in (0, 0, 5, 0):
        builder.push(value)
    assert builder.leading_zeros == 2
    assert builder.into_limbs() == [0, 5]


def test_all_zero_pushes_give_canonical_zero() -> None:
    builder = ResultBuilder(3)
    for _ in range(3):
        builder.push(0)
    assert builder.into_limbs() == []


def test_zero_capacity_is_immediately_full() -> None:
    builder = ResultBuilder(0)
    assert builder.is_full()
    assert builder.into_limbs() == []


def test_length_tracks_pushes() -> None:
    builder = ResultBuilder(2)
    assert len(builder) == 0
    builder.push(9)
    assert len(builder) == 1
    assert not builder.is_full()
    builder.push(9)
    assert builder.is_full()
    assert builder.capacity == 2


def test_reading_before_full_is_an_error() -> None:
    builder = ResultBuilder(2)
    builder.push(1)
    with pytest.raises(ResultBuilderError, match="1 of 2"):
        builder.into_limbs()


def test_push_past_capacity_is_an_error() -> None:
    builder = ResultBuilder(1)
    builder.push(1)
    with pytest.raises(ResultBuilderError):
        builder.push(2)


def test_negative_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        ResultBuilder(-1)
