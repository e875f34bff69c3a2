"""Exception types for the Natural/Integer value layer.

Kernel-level contract violations (`DivisionByZeroError`, `ResultBuilderError`)
are defined next to the kernels and re-exported here so callers have a single
import point.
"""

from __future__ import annotations

from src.kernels.python.errors import BignumError, DivisionByZeroError, ResultBuilderError


class NaturalUnderflowError(BignumError, ArithmeticError):
    """Raised by ``Natural - Natural`` when the result would be negative."""


class LimbLimitExceeded(BignumError, ValueError):
    """Raised when an operand exceeds the configured limb cap."""

    def __init__(self, operation: str, limbs: int, max_limbs: int) -> None:
        self.operation = operation
        self.limbs = limbs
        self.max_limbs = max_limbs
        super().__init__(f"{operation}: operand has {limbs} limbs, cap is {max_limbs}")


class DecimalParseError(BignumError, ValueError):
    """Raised when decimal text is empty or contains a non-digit."""


__all__ = [
    "BignumError",
    "DivisionByZeroError",
    "ResultBuilderError",
    "NaturalUnderflowError",
    "LimbLimitExceeded",
    "DecimalParseError",
]
