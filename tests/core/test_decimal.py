"""Tests for src/core/decimal.py."""

from __future__ import annotations

import pytest

from src.core import DecimalParseError, Integer, Natural
from src.core.decimal import CHUNK_BASE, format_limbs, parse_limbs, split_sign


class TestParse:
    def test_small(self):
        assert parse_limbs("156") == [156]

    def test_zero_forms(self):
        assert parse_limbs("0") == []
        assert parse_limbs("0000") == []

    def test_leading_zeros_ignored(self):
        assert parse_limbs("000042") == [42]

    def test_exact_chunk_boundary(self):
        assert parse_limbs("1" + "0" * 19) == [CHUNK_BASE]

    def test_two_to_the_64(self):
        assert parse_limbs("18446744073709551616") == [0, 1]

    def test_underscore_separators(self):
        assert parse_limbs("1_000_000") == [1_000_000]

    def test_surrounding_whitespace(self):
        assert parse_limbs("  77\n") == [77]

    @pytest.mark.parametrize("text", ["", "   ", "12a", "-5", "+5", "1 2", "_1", "1_", "1__0", "²", "٣"])
    def test_rejected(self, text):
        with pytest.raises(DecimalParseError):
            parse_limbs(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Natural.from_string("nope")

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            parse_limbs(156)  # type: ignore[arg-type]


class TestFormat:
    def test_zero(self):
        assert format_limbs([]) == "0"

    def test_single_limb(self):
        assert format_limbs([156]) == "156"
        assert format_limbs([(1 << 64) - 1]) == "18446744073709551615"

    def test_inner_chunks_zero_padded(self):
        assert format_limbs(parse_limbs("1" + "0" * 38)) == "1" + "0" * 38
        assert format_limbs(parse_limbs("5" + "0" * 18 + "7")) == "5" + "0" * 18 + "7"

    def test_matches_python(self):
        value = 3**200
        limbs = Natural.from_int(value).limbs
        assert format_limbs(list(limbs)) == str(value)


class TestSplitSign:
    def test_no_sign(self):
        assert split_sign("12") == (False, "12")

    def test_plus_and_minus(self):
        assert split_sign("+12") == (False, "12")
        assert split_sign(" -12") == (True, "12")

    def test_bare_sign_leaves_empty_body(self):
        assert split_sign("-") == (True, "")

    @pytest.mark.parametrize("text", ["- 5", "+ 7", "-\t1", " +\n2"])
    def test_whitespace_after_sign_rejected(self, text):
        with pytest.raises(DecimalParseError):
            split_sign(text)
        with pytest.raises(DecimalParseError):
            Integer.from_string(text)
