"""
`Natural`: an arbitrary-precision unsigned integer.

The value is a canonical little-endian list of 64-bit limbs; zero is the empty
list. Arithmetic returns new Naturals that own fresh limb lists. The only
mutating entry points are `add_mut` and `inc`, which change the receiver alone
and expect the caller to hold the only reference for the duration of the call.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from src.kernels.python.addition import add, add_mut
from src.kernels.python.comparison import compare
from src.kernels.python.division import divide
from src.kernels.python.limb import LIMB_BITS, LIMB_MASK, Sign, add_with_carry, require_limb, to_limb_list
from src.kernels.python.multiplication import multiply
from src.kernels.python.subtraction import sub_signed

from .config import load_config
from .decimal import format_limbs, parse_limbs
from .errors import LimbLimitExceeded, NaturalUnderflowError

_logger = logging.getLogger(__name__)


def _check_limb_cap(operation: str, *operands: "Natural") -> None:
    config = load_config()
    for operand in operands:
        if config.limb_cap_exceeded(len(operand._limbs)):
            _logger.warning(
                "%s rejected: %d limbs exceeds BIGNUM_MAX_LIMBS=%d",
                operation, len(operand._limbs), config.max_limbs,
            )
            raise LimbLimitExceeded(operation, len(operand._limbs), config.max_limbs)


class Natural:
    __slots__ = ("_limbs",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, limbs: Iterable[int] = ()) -> None:
        self._limbs = to_limb_list(limbs)

    @classmethod
    def _wrap(cls, limbs: list[int]) -> "Natural":
        # kernel results are canonical and freshly allocated: take ownership as-is
        n = cls.__new__(cls)
        n._limbs = limbs
        return n

    # -- Construction --------------------------------------------------------

    @classmethod
    def zero(cls) -> "Natural":
        return cls._wrap([])

    @classmethod
    def one(cls) -> "Natural":
        return cls._wrap([1])

    @classmethod
    def from_u64(cls, value: int) -> "Natural":
        require_limb("value", value)
        return cls._wrap([value] if value else [])

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "Natural":
        return cls(limbs)

    @classmethod
    def from_int(cls, value: int) -> "Natural":
        """Split any non-negative Python int into limbs."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("value must be an int")
        if value < 0:
            raise ValueError(f"Natural cannot hold a negative value, got {value}")
        limbs: list[int] = []
        while value:
            limbs.append(value & LIMB_MASK)
            value >>= LIMB_BITS
        return cls._wrap(limbs)

    @classmethod
    def from_string(cls, text: str) -> "Natural":
        return cls._wrap(parse_limbs(text))

    # -- Accessors -----------------------------------------------------------

    @property
    def limbs(self) -> tuple[int, ...]:
        return tuple(self._limbs)

    def copy(self) -> "Natural":
        return Natural._wrap(list(self._limbs))

    def is_zero(self) -> bool:
        return not self._limbs

    def to_int(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = (value << LIMB_BITS) | limb
        return value

    def __len__(self) -> int:
        return len(self._limbs)

    def __bool__(self) -> bool:
        return bool(self._limbs)

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return format_limbs(self._limbs)

    def __repr__(self) -> str:
        return f"Natural({list(self._limbs)!r})"

    # -- Arithmetic ----------------------------------------------------------

    def add(self, other: "Natural") -> "Natural":
        return Natural._wrap(add(self._limbs, other._limbs))

    def sub(self, other: "Natural") -> Optional["Natural"]:
        """``self - other``, or None when ``other > self``."""
        sign, magnitude = sub_signed(self._limbs, other._limbs)
        if sign is Sign.NEGATIVE:
            return None
        return Natural._wrap(magnitude)

    def sub_signed(self, other: "Natural") -> tuple[Sign, "Natural"]:
        """``(sign, |self - other|)``."""
        sign, magnitude = sub_signed(self._limbs, other._limbs)
        return sign, Natural._wrap(magnitude)

    def mul(self, other: "Natural") -> "Natural":
        _check_limb_cap("multiply", self, other)
        threshold = load_config().karatsuba_threshold
        return Natural._wrap(multiply(self._limbs, other._limbs, karatsuba_threshold=threshold))

    def divmod(self, other: "Natural") -> tuple["Natural", "Natural"]:
        """``(quotient, remainder)``; raises DivisionByZeroError for a zero divisor."""
        _check_limb_cap("divide", self, other)
        quotient, remainder = divide(self._limbs, other._limbs)
        return Natural._wrap(quotient), Natural._wrap(remainder)

    def compare(self, other: "Natural") -> int:
        return compare(self._limbs, other._limbs)

    # -- In-place ------------------------------------------------------------

    def add_mut(self, other: "Natural") -> None:
        """``self += other`` without allocating a new Natural."""
        addend: Sequence[int] = other._limbs
        if other is self:
            addend = list(addend)
        if len(self._limbs) < len(addend):
            self._limbs.extend([0] * (len(addend) - len(self._limbs)))
        if add_mut(self._limbs, addend):
            self._limbs.append(1)

    def inc(self) -> None:
        """``self += 1`` in place."""
        carry = True
        for i in range(len(self._limbs)):
            self._limbs[i], carry = add_with_carry(self._limbs[i], 0, carry)
            if not carry:
                return
        self._limbs.append(1)

    # -- Operators -----------------------------------------------------------

    @staticmethod
    def _coerce(value: object) -> Optional["Natural"]:
        if isinstance(value, Natural):
            return value
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return Natural.from_int(value)
        return None

    def __add__(self, other: object) -> "Natural":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Natural":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.sub(rhs)
        if result is None:
            raise NaturalUnderflowError(
                "subtrahend is larger than minuend; use Integer for signed results"
            )
        return result

    def __rsub__(self, other: object) -> "Natural":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__sub__(self)

    def __mul__(self, other: object) -> "Natural":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.mul(rhs)

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> "Natural":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divmod(rhs)[0]

    def __mod__(self, other: object) -> "Natural":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divmod(rhs)[1]

    def __divmod__(self, other: object) -> tuple["Natural", "Natural"]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.divmod(rhs)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._limbs == rhs._limbs

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
