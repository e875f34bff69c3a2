"""
Kernel layer.

- `src/kernels/python/` holds the limb-list kernels: pure functions over
  little-endian lists of 64-bit limbs, with no knowledge of the value types
  in `src/core/`.
"""
