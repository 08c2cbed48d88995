"""Signed 32-bit integer arithmetic helpers.

Seed derivation and the LCG are defined in terms of two's-complement
32-bit wrapping, truncating remainder and half-up rounding. Python ints
are unbounded, so every step that relies on overflow goes through here.
"""

from __future__ import annotations

import math

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


def to_uint32(value: float) -> int:
    """Truncate *value* and wrap it into [0, 2**32)."""
    return int(value) & _MASK32


def to_int32(value: float) -> int:
    """Truncate *value* and wrap it into the signed range [-2**31, 2**31)."""
    v = int(value) & _MASK32
    return v - 0x100000000 if v & _SIGN32 else v


def imul32(a: int, b: int) -> int:
    """Multiply with 32-bit wrap-around; the low 32 bits of the product, signed."""
    return to_int32((to_uint32(a) * to_uint32(b)) & _MASK32)


def trunc_rem(a: int, m: int) -> int:
    """Remainder that takes the sign of the dividend (C / JS ``%``)."""
    r = abs(a) % m
    return -r if a < 0 else r


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards +inf (``Math.round``)."""
    return math.floor(value + 0.5)
