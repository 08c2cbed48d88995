"""Seed derivation: cell coordinates and station identity to PRNG seeds.

Formula (cell):   h = (cx * P1) ^ (cy * P2);  h = h * P3;  seed = |h rem M| + 1
Formula (market): h = ((seed * 31 + x) * 31 + y) * 31 + suffix, then an
                  xor-shift / odd-multiplier avalanche, folded into [1, M]

All products wrap at 32 bits. These are the only formulas used anywhere
in the package.
"""

from __future__ import annotations

import math

from starfield.systems.int32 import imul32, to_int32, to_uint32, trunc_rem
from starfield.systems.prng import MODULUS

_POLY = 31
_MIX_1 = 0x2C1B3C6D
_MIX_2 = 0x297A2D39


def cell_seed(cell_x: int, cell_y: int, prime_1: int, prime_2: int, prime_3: int) -> int:
    """Seed for the cell at (*cell_x*, *cell_y*), in [1, MODULUS]."""
    h = imul32(to_int32(cell_x), prime_1) ^ imul32(to_int32(cell_y), prime_2)
    h = imul32(h, prime_3)
    return abs(trunc_rem(h, MODULUS)) + 1


def _xorshift(h: int, shift: int) -> int:
    return to_int32(h ^ (to_uint32(h) >> shift))


def combine_seed(world_seed: int, x: float, y: float, suffix: int = 0) -> int:
    """Seed for a station market at world position (*x*, *y*).

    Positions are floored, so any point inside the same unit square maps
    to the same seed.
    """
    h = to_int32(world_seed)
    for part in (math.floor(x), math.floor(y), suffix):
        h = to_int32(h * _POLY + to_int32(part))

    h = imul32(_xorshift(h, 15), _MIX_1)
    h = imul32(_xorshift(h, 12), _MIX_2)
    h = _xorshift(h, 15)
    return to_uint32(h) % MODULUS + 1
