"""
`Integer`: a sign plus a `Natural` magnitude.

Addition and subtraction reduce to magnitude addition or `sub_signed` plus sign
bookkeeping; multiplication composes signs. Division follows Python's `int`
floor semantics: ``a == q*b + r`` with ``r`` carrying the sign of ``b``.

Zero is always POSITIVE: the constructor rewrites a NEGATIVE zero, so no code
path can observe a negative zero.
"""

from __future__ import annotations

from typing import Optional

from src.kernels.python.limb import Sign

from .decimal import split_sign
from .natural import Natural


class Integer:
    __slots__ = ("_sign", "_magnitude")

    def __init__(self, magnitude: Natural, sign: Sign = Sign.POSITIVE) -> None:
        if not isinstance(magnitude, Natural):
            raise TypeError("magnitude must be a Natural")
        if not isinstance(sign, Sign):
            raise TypeError("sign must be a Sign")
        self._magnitude = magnitude.copy()
        self._sign = Sign.POSITIVE if magnitude.is_zero() else sign

    @classmethod
    def _wrap(cls, sign: Sign, magnitude: Natural) -> "Integer":
        # magnitude is a fresh kernel result owned by nobody else
        i = cls.__new__(cls)
        i._magnitude = magnitude
        i._sign = Sign.POSITIVE if magnitude.is_zero() else sign
        return i

    @classmethod
    def zero(cls) -> "Integer":
        return cls._wrap(Sign.POSITIVE, Natural.zero())

    @classmethod
    def from_natural(cls, n: Natural, sign: Sign = Sign.POSITIVE) -> "Integer":
        return cls(n, sign)

    @classmethod
    def from_int(cls, value: int) -> "Integer":
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("value must be an int")
        sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
        return cls._wrap(sign, Natural.from_int(abs(value)))

    @classmethod
    def from_string(cls, text: str) -> "Integer":
        negative, digits = split_sign(text)
        sign = Sign.NEGATIVE if negative else Sign.POSITIVE
        return cls._wrap(sign, Natural.from_string(digits))

    # -- Accessors -----------------------------------------------------------

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def magnitude(self) -> Natural:
        return self._magnitude.copy()

    def is_zero(self) -> bool:
        return self._magnitude.is_zero()

    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    def to_int(self) -> int:
        value = self._magnitude.to_int()
        return -value if self.is_negative() else value

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        text = str(self._magnitude)
        return "-" + text if self.is_negative() else text

    def __repr__(self) -> str:
        return f"Integer({self._sign.value}{self._magnitude!r})"

    def __hash__(self) -> int:
        # matches hash(int) because Integer(n) == n
        return hash(self.to_int())

    # -- Arithmetic ----------------------------------------------------------

    def add(self, other: "Integer") -> "Integer":
        if self._sign is other._sign:
            return Integer._wrap(self._sign, self._magnitude.add(other._magnitude))
        # opposite signs: the result takes the sign of the larger magnitude
        if self._sign is Sign.POSITIVE:
            sign, magnitude = self._magnitude.sub_signed(other._magnitude)
        else:
            sign, magnitude = other._magnitude.sub_signed(self._magnitude)
        return Integer._wrap(sign, magnitude)

    def sub(self, other: "Integer") -> "Integer":
        return self.add(-other)

    def mul(self, other: "Integer") -> "Integer":
        return Integer._wrap(self._sign * other._sign, self._magnitude.mul(other._magnitude))

    def divmod(self, other: "Integer") -> tuple["Integer", "Integer"]:
        """Floor division; raises DivisionByZeroError for a zero divisor."""
        quotient, remainder = self._magnitude.divmod(other._magnitude)
        if self._sign is other._sign:
            return Integer._wrap(Sign.POSITIVE, quotient), Integer._wrap(other._sign, remainder)
        if remainder.is_zero():
            return Integer._wrap(Sign.NEGATIVE, quotient), Integer.zero()
        quotient.inc()
        complement = other._magnitude.sub(remainder)
        if complement is None:
            raise AssertionError("remainder exceeds divisor")
        return Integer._wrap(Sign.NEGATIVE, quotient), Integer._wrap(other._sign, complement)

    def compare(self, other: "Integer") -> int:
        if self._sign is not other._sign:
            return -1 if self.is_negative() else 1
        order = self._magnitude.compare(other._magnitude)
        return -order if self.is_negative() else order

    # -- Operators -----------------------------------------------------------

    @staticmethod
    def _coerce(value: object) -> Optional["Integer"]:
        if isinstance(value, Integer):
            return value
        if isinstance(value, Natural):
            return Integer(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return Integer.from_int(value)
        return None

    def __neg__(self) -> "Integer":
        return Integer._wrap(self._sign.negate(), self._magnitude.copy())

    def __pos__(self) -> "Integer":
        return self

    def __abs__(self) -> "Integer":
        return Integer._wrap(Sign.POSITIVE, self._magnitude.copy())

    def __add__(self, other: object) -> "Integer":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Integer":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.sub(rhs)

    def __rsub__(self, other: object) -> "Integer":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.sub(self)

    def __mul__(self, other: object) -> "Integer":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.mul(rhs)

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> "Integer":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divmod(rhs)[0]

    def __mod__(self, other: object) -> "Integer":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divmod(rhs)[1]

    def __divmod__(self, other: object) -> tuple["Integer", "Integer"]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divmod(rhs)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._sign is rhs._sign and self._magnitude == rhs._magnitude

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0
