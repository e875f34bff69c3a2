"""
Environment-driven arithmetic settings.

- `BIGNUM_KARATSUBA_THRESHOLD`: shorter-operand limb count from which
  multiplication recurses with Karatsuba (default 32).
- `BIGNUM_MAX_LIMBS`: reject multiplication/division operands longer than this
  many limbs; 0 (default) disables the cap.

Unset, blank or unparsable values fall back to the default; parsed values are
clamped into range.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from src.kernels.python.multiplication import DEFAULT_KARATSUBA_THRESHOLD


MAX_LIMBS_UNBOUNDED = 0


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


@dataclass(frozen=True)
class ArithmeticConfig:
    karatsuba_threshold: int = DEFAULT_KARATSUBA_THRESHOLD
    max_limbs: int = MAX_LIMBS_UNBOUNDED

    @classmethod
    def from_env(cls) -> "ArithmeticConfig":
        return cls(
            karatsuba_threshold=_env_int(
                "BIGNUM_KARATSUBA_THRESHOLD", DEFAULT_KARATSUBA_THRESHOLD, lo=2, hi=1_000_000
            ),
            max_limbs=_env_int("BIGNUM_MAX_LIMBS", MAX_LIMBS_UNBOUNDED, lo=0, hi=2**31),
        )

    def limb_cap_exceeded(self, limbs: int) -> bool:
        return self.max_limbs != MAX_LIMBS_UNBOUNDED and limbs > self.max_limbs


@lru_cache(maxsize=1)
def load_config() -> ArithmeticConfig:
    return ArithmeticConfig.from_env()
