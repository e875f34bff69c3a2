"""Exception types raised by the limb kernels.

Both are contract violations: the library never catches them.
"""

from __future__ import annotations


class BignumError(Exception):
    """Base class for every error raised by this package."""


class DivisionByZeroError(BignumError, ZeroDivisionError):
    """Raised when the divisor is the zero value."""


class ResultBuilderError(BignumError, RuntimeError):
    """Raised when a ResultBuilder is read before it is full or pushed past capacity."""
