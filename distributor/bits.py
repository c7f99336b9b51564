"""Raw bit-pattern conversions between fixed-width integers and floats.

These are bit casts, not value casts: the integer's bits are read as the bits
of an IEEE 754 value (and back) through NumPy dtype views.
"""

import numpy as np

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def to_signed_int(n: int) -> int:
    """Wrap any integer to a two's-complement 32-bit value."""
    n = int(n) & MASK32
    return n - (1 << 32) if n & 0x80000000 else n


def to_signed_long(n: int) -> int:
    """Wrap any integer to a two's-complement 64-bit value."""
    n = int(n) & MASK64
    return n - (1 << 64) if n & 0x8000000000000000 else n


def long_bits_to_double(bits: int) -> float:
    """Reinterpret the low 64 bits of ``bits`` as a float64."""
    return float(np.asarray(int(bits) & MASK64, dtype=np.uint64).view(np.float64))


def int_bits_to_float(bits: int) -> np.float32:
    """Reinterpret the low 32 bits of ``bits`` as a float32."""
    return np.asarray(int(bits) & MASK32, dtype=np.uint32).view(np.float32)[()]
