"""Seeded random stream for reproducible galaxy generation.

A plain linear congruential generator. The constants and derived draws are
fixed so that a given seed produces the same galaxy in every build, which is
what the golden test fixtures rely on. Do not swap this for ``random.Random``.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

_MULTIPLIER = 1664525
_INCREMENT = 1013904223
_MODULUS = 2**32


class SeededRNG:
    """LCG stream: ``state = (state * A + C) mod 2^32``."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self.state = seed % _MODULUS

    def next(self) -> float:
        """Advance the stream and return a draw in ``[0, 1)``."""
        self.state = (self.state * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self.state / _MODULUS

    def range(self, lo: int, hi: int) -> int:
        """Integer in ``[lo, hi]`` inclusive."""
        return lo + math.floor(self.next() * (hi - lo + 1))

    def float(self, lo: float, hi: float) -> float:
        """Float in ``[lo, hi)``."""
        return lo + self.next() * (hi - lo)

    def choice(self, items: Sequence[T]) -> T:
        return items[math.floor(self.next() * len(items))]
