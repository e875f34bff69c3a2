"""
Base-ten text for limb lists.

Parsing accumulates ``n = n * 10**k + chunk`` and formatting repeatedly divides
by ``10**k`` collecting remainders, with ``k = 19`` (the largest power of ten
that fits one limb). Both agree digit for digit with the one-digit-at-a-time
loops; chunking only cuts the number of multi-limb passes.
"""

from __future__ import annotations

from typing import Sequence

from src.kernels.python.addition import add
from src.kernels.python.division import divide
from src.kernels.python.multiplication import mul_by_limb

from .errors import DecimalParseError


CHUNK_DIGITS = 19
CHUNK_BASE = 10**CHUNK_DIGITS


def _clean_digits(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError("decimal text must be a str")
    body = text.strip()
    if not body:
        raise DecimalParseError("empty decimal string")
    if body.startswith("_") or body.endswith("_") or "__" in body:
        raise DecimalParseError(f"misplaced '_' separator in {text!r}")
    body = body.replace("_", "")
    # str.isdigit accepts non-ASCII digits such as superscripts; only 0-9 are valid here
    for ch in body:
        if ch < "0" or ch > "9":
            raise DecimalParseError(f"invalid decimal digit {ch!r} in {text!r}")
    return body


def split_sign(text: str) -> tuple[bool, str]:
    """Return ``(negative, unsigned_text)`` for an optional leading ``+``/``-``."""
    if not isinstance(text, str):
        raise TypeError("decimal text must be a str")
    body = text.strip()
    if body[:1] in ("+", "-"):
        if body[1:2].isspace():
            raise DecimalParseError(f"whitespace after sign in {text!r}")
        return body[0] == "-", body[1:]
    return False, body


def parse_limbs(text: str) -> list[int]:
    digits = _clean_digits(text)
    limbs: list[int] = []
    head = len(digits) % CHUNK_DIGITS or CHUNK_DIGITS
    start = 0
    end = head
    while start < len(digits):
        chunk = digits[start:end]
        limbs = mul_by_limb(limbs, 10 ** len(chunk))
        value = int(chunk)
        if value:
            limbs = add(limbs, [value])
        start = end
        end += CHUNK_DIGITS
    return limbs


def format_limbs(limbs: Sequence[int]) -> str:
    if not limbs:
        return "0"
    chunks: list[str] = []
    current = list(limbs)
    while current:
        current, remainder = divide(current, [CHUNK_BASE])
        chunks.append(str(remainder[0]) if remainder else "0")
    # every chunk but the most significant is zero-padded
    head = chunks.pop()
    return head + "".join(chunk.rjust(CHUNK_DIGITS, "0") for chunk in reversed(chunks))
