"""
Mathematical utilities for Brutalist Buildings Generator.
"""

from typing import Tuple


def clamp(value: float, min_val: float, max_val: float) -> float:
    """
    Clamp value to [min_val, max_val] range.

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def clamp_int(value: int, min_val: int, max_val: int) -> int:
    """Clamp an integer to [min_val, max_val]."""
    return int(max(min_val, min(max_val, value)))


def inset_range(half_extent: float, margin: float) -> Tuple[float, float]:
    """
    Interval of allowed offsets from a centre once a margin is removed.

    An axis narrower than twice the margin collapses to its centre.

    Args:
        half_extent: Half of the available length
        margin: Distance to keep from each edge

    Returns:
        (low, high) offset tuple
    """
    usable = half_extent - margin
    if usable <= 0:
        return 0.0, 0.0
    return -usable, usable
