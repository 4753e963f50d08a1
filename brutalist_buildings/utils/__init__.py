"""
Utility functions for Brutalist Buildings Generator.
"""

from .random_source import SeededRandom, reduce_seed, substream, scatter
from .math_utils import (
    clamp,
    clamp_int,
    inset_range,
)

__all__ = [
    'SeededRandom',
    'reduce_seed',
    'substream',
    'scatter',
    'clamp',
    'clamp_int',
    'inset_range',
]
