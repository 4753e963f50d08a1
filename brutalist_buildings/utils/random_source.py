"""
Seeded random source for Brutalist Buildings Generator.

Every random decision in the pipeline goes through a SeededRandom built
from the configuration seed, never through the ambient `random` module,
so the same configuration always yields the same building.
"""

from typing import Sequence, TypeVar
import math

T = TypeVar('T')

# Linear congruential recurrence (Numerical Recipes constants)
LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32


class SeededRandom:
    """
    Deterministic linear congruential generator.

    state = (state * a + c) mod m, output = state / m in [0, 1).

    Two instances built from the same seed produce identical sequences.
    Seeds may be fractional; the arithmetic is done in floats so a seed
    such as 42.1 is accepted as-is.
    """

    __slots__ = ('_state',)

    def __init__(self, seed: float):
        if not math.isfinite(seed):
            raise ValueError(f"seed must be finite, got {seed!r}")
        self._state = reduce_seed(seed)

    def next(self) -> float:
        """Advance the state and return a float in [0, 1)."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        value = self._state / LCG_MODULUS
        # Float rounding can land exactly on the modulus
        return value if value < 1.0 else 0.0

    def range(self, low: float, high: float) -> float:
        """Return a float in [low, high) (one draw)."""
        return low + self.next() * (high - low)

    def randint(self, low: int, high: int) -> int:
        """Return an integer in [low, high], both inclusive (one draw)."""
        if high < low:
            raise ValueError(f"empty integer range [{low}, {high}]")
        return low + min(int(self.next() * (high - low + 1)), high - low)

    def chance(self, probability: float) -> bool:
        """Return True with the given probability (one draw)."""
        return self.next() < probability

    def choice(self, options: Sequence[T]) -> T:
        """Pick one element uniformly (one draw)."""
        if not options:
            raise ValueError("cannot choose from an empty sequence")
        return options[self.randint(0, len(options) - 1)]


def reduce_seed(seed: float) -> float:
    """
    Bring a seed into [0, 2^32).

    The recurrence only depends on the seed modulo 2^32, but a huge seed
    would overflow `state * a` to inf before the first reduction.
    """
    return float(seed) % LCG_MODULUS


def substream(seed: float, offset: float) -> SeededRandom:
    """
    Create the stream for one member of a seed family.

    Seeds that differ by a small offset share an almost identical first
    draw under this recurrence, so the first value is discarded.

    Args:
        seed: Base configuration seed
        offset: Fixed offset identifying the decision (see config.SEED_OFFSET_*)

    Returns:
        SeededRandom positioned after its burn-in draw
    """
    rng = SeededRandom(reduce_seed(seed) + offset)
    rng.next()
    return rng


def scatter(key: int) -> int:
    """
    Map a small integer key to a well-spread integer in [0, 2^32).

    One LCG step; a bijection on [0, 2^32), so distinct keys stay distinct.
    Used to turn consecutive keys (e.g. window slot numbers) into seed
    offsets whose streams are not in lockstep.
    """
    return (int(key) * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
