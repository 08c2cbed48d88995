"""Seedable linear congruential generator.

A given seed produces the same sequence as the game client's generator,
bit for bit: the multiply wraps at 32 bits and the remainder truncates
towards zero, so the internal state may go negative between draws. Only
the returned floats are normalized.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from starfield.systems.int32 import imul32, trunc_rem

T = TypeVar("T")

MODULUS = 2147483647
_MULTIPLIER = 1103515245
_INCREMENT = 12345


class SeedablePRNG:
    """Deterministic LCG. One instance per generation call; never shared."""

    __slots__ = ("_seed",)

    def __init__(self, seed: float = 1) -> None:
        self._seed = 1
        self.set_seed(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def set_seed(self, seed: float) -> None:
        """Normalize *seed* into [1, MODULUS - 1]; zero and non-finite map to 1."""
        if isinstance(seed, float) and not math.isfinite(seed):
            self._seed = 1
            return
        self._seed = abs(trunc_rem(math.trunc(seed), MODULUS)) or 1

    def random(self) -> float:
        """Return a float in [0.0, 1.0)."""
        self._seed = trunc_rem(imul32(_MULTIPLIER, self._seed) + _INCREMENT, MODULUS)
        positive = self._seed + MODULUS if self._seed < 0 else self._seed
        return positive / MODULUS

    def random_int(self, low: float, high: float) -> int:
        """Return an integer in [ceil(low), floor(high))."""
        low = math.ceil(low)
        high = math.floor(high)
        return low + math.floor(self.random() * (high - low))

    def random_float(self, low: float, high: float) -> float:
        """Return a float in [low, high)."""
        return self.random() * (high - low) + low

    def pick(self, choices: Sequence[T]) -> T:
        """Uniformly pick one element; consumes exactly one draw."""
        return choices[self.random_int(0, len(choices))]

    def normal(self) -> float:
        """Standard normal deviate via Box-Muller.

        Zero uniforms are re-drawn so ``log`` never sees 0.
        """
        u = 0.0
        while u == 0.0:
            u = self.random()
        v = 0.0
        while v == 0.0:
            v = self.random()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
