"""Deterministic pseudo-random sequence for point jitter.

The value stream is a pure function of an integer counter: every draw
increments the counter, then returns the fractional part of
``sin(seed) * 10000``. The same starting seed always reproduces the same
drawing. Not suitable for anything that needs real randomness.
"""

from __future__ import annotations

import math


class SeedSequence:
    """Counter-based value stream in [0, 1).

    Parameters
    ----------
    seed : int
        Starting counter value. 0 is valid and the default.

    Notes
    -----
    One instance belongs to exactly one generation run; create a new one
    per render instead of sharing it.
    """

    __slots__ = ("seed", "_initial")

    def __init__(self, seed: int = 0) -> None:
        self.seed = int(seed)
        self._initial = self.seed

    @property
    def draws(self) -> int:
        """Number of values drawn so far."""
        return self.seed - self._initial

    def next(self) -> float:
        """Advance the counter and return the next value in [0, 1)."""
        self.seed += 1
        x = math.sin(self.seed) * 10000
        return x - math.floor(x)

    def __repr__(self) -> str:
        return f"SeedSequence(seed={self.seed}, draws={self.draws})"
