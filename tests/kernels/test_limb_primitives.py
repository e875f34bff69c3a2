"""Tests for src/kernels/python/limb.py and comparison.py."""

from __future__ import annotations

import pytest

from src.kernels.python.comparison import compare
from src.kernels.python.limb import (
    LIMB_MAX,
    Sign,
    add_with_carry,
    leading_zeros,
    mul_wide,
    short_div,
    strip,
    sub_with_borrow,
    to_limb_list,
)

NINE = LIMB_MAX
EIGHT = LIMB_MAX - 1


# ---------------------------------------------------------------------------
# add_with_carry / sub_with_borrow
# ---------------------------------------------------------------------------

class TestAddWithCarry:
    def test_max_plus_one_without_carry(self):
        assert add_with_carry(NINE, 1, False) == (0, True)

    def test_max_plus_one_with_carry(self):
        assert add_with_carry(NINE, 1, True) == (1, True)

    def test_max_minus_one_plus_one_without_carry(self):
        assert add_with_carry(EIGHT, 1, False) == (NINE, False)

    def test_carry_alone_overflows(self):
        assert add_with_carry(EIGHT, 1, True) == (0, True)

    def test_max_plus_max_with_carry(self):
        assert add_with_carry(NINE, NINE, True) == (NINE, True)


class TestSubWithBorrow:
    def test_without_incoming_borrow(self):
        assert sub_with_borrow(1, NINE, False) == (2, True)
        assert sub_with_borrow(NINE, 1, False) == (EIGHT, False)
        assert sub_with_borrow(NINE, EIGHT, False) == (1, False)

    def test_with_incoming_borrow(self):
        assert sub_with_borrow(1, NINE, True) == (1, True)
        assert sub_with_borrow(NINE, 1, True) == (LIMB_MAX - 2, False)
        assert sub_with_borrow(NINE, EIGHT, True) == (0, False)

    def test_borrow_alone_wraps(self):
        assert sub_with_borrow(0, 0, True) == (NINE, True)
        assert sub_with_borrow(5, 5, True) == (NINE, True)


# ---------------------------------------------------------------------------
# mul_wide / short_div
# ---------------------------------------------------------------------------

def test_mul_wide_max_by_max() -> None:
    assert mul_wide(NINE, NINE) == (1, EIGHT)


def test_mul_wide_small() -> None:
    assert mul_wide(6, 7) == (42, 0)


class TestShortDiv:
    def test_saturates_when_quotient_needs_two_limbs(self):
        assert short_div(4, 4, 2) == NINE

    def test_big_divisor_small_answer(self):
        assert short_div(1, 2, 2) == (1 << 63) + 1

    def test_small_exact(self):
        assert short_div(0, 21, 7) == 3

    def test_small_floored(self):
        assert short_div(0, 23, 7) == 3


def test_leading_zeros() -> None:
    assert leading_zeros(1) == 63
    assert leading_zeros(1 << 63) == 0
    assert leading_zeros(NINE) == 0
    assert leading_zeros(0) == 64


# ---------------------------------------------------------------------------
# Canonical form
# ---------------------------------------------------------------------------

class TestCanonicalForm:
    def test_strip_drops_most_significant_zeros(self):
        assert strip([1, 0, 0]) == [1]
        assert strip([0, 0, 2]) == [0, 0, 2]
        assert strip([0, 3, 0]) == [0, 3]

    def test_zero_is_empty(self):
        assert strip([0]) == []
        assert strip([]) == []

    def test_to_limb_list_validates(self):
        assert to_limb_list((7, 0)) == [7]
        with pytest.raises(TypeError):
            to_limb_list([True])
        with pytest.raises(TypeError):
            to_limb_list([1.0])
        with pytest.raises(ValueError):
            to_limb_list([-1])
        with pytest.raises(ValueError):
            to_limb_list([1 << 64])


# ---------------------------------------------------------------------------
# Sign
# ---------------------------------------------------------------------------

def test_sign_multiplication_table() -> None:
    assert Sign.POSITIVE * Sign.POSITIVE is Sign.POSITIVE
    assert Sign.POSITIVE * Sign.NEGATIVE is Sign.NEGATIVE
    assert Sign.NEGATIVE * Sign.POSITIVE is Sign.NEGATIVE
    assert Sign.NEGATIVE * Sign.NEGATIVE is Sign.POSITIVE


def test_sign_negate() -> None:
    assert Sign.POSITIVE.negate() is Sign.NEGATIVE
    assert Sign.NEGATIVE.negate() is Sign.POSITIVE


# ---------------------------------------------------------------------------
# Comparator
# ---------------------------------------------------------------------------

class TestCompare:
    def test_more_limbs_is_greater(self):
        assert compare([1, 2], [5]) == 1

    def test_fewer_limbs_is_less(self):
        assert compare([567], [1, 1]) == -1

    def test_top_limb_decides(self):
        assert compare([3, 5], [1, 5]) == 1
        assert compare([9, 4], [1, 5]) == -1

    def test_equal(self):
        assert compare([3, 5], [3, 5]) == 0
        assert compare([], []) == 0

    def test_zero_is_least(self):
        assert compare([], [1]) == -1
        assert compare([1], []) == 1
