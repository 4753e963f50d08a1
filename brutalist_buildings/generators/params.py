"""
Building parameter derivation for Brutalist Buildings Generator.

Turns a BuildingConfig into BuildingParams: whether the building has
setbacks, overhangs and a core shaft, and their sizes.

Stream usage (each stream from substream(seed, offset), see config):
    setback flag    -> chance(0.7)
    overhang flag   -> chance(0.6)
    core flag       -> chance(0.8)
    setbacks        -> randint count, then per setback: randint floor, range amount
    overhangs       -> randint count, then per overhang: randint floor, range amount, choice side
    core shaft      -> width, depth, height, offset_x, offset_z
"""

from typing import List, Optional, Tuple
import logging
import math

from ..models.building import (
    BuildingConfig,
    BuildingParams,
    CoreShaft,
    Overhang,
    Setback,
)
from ..models.geometry import FACE_ORDER
from ..utils.math_utils import clamp_int
from ..utils.random_source import substream
from ..config import (
    FLOOR_HEIGHT,
    SETBACK_PROBABILITY,
    OVERHANG_PROBABILITY,
    CORE_SHAFT_PROBABILITY,
    MAX_SETBACKS,
    SETBACK_FLOOR_RANGE,
    SETBACK_AMOUNT_RANGE,
    MAX_OVERHANGS,
    OVERHANG_FLOOR_RANGE,
    OVERHANG_AMOUNT_RANGE,
    CORE_SHAFT_SIZE_RANGE,
    CORE_SHAFT_HEIGHT_RANGE,
    CORE_SHAFT_OFFSET_FRACTION,
    SEED_OFFSET_SETBACK_FLAG,
    SEED_OFFSET_OVERHANG_FLAG,
    SEED_OFFSET_CORE_FLAG,
    SEED_OFFSET_SETBACKS,
    SEED_OFFSET_OVERHANGS,
    SEED_OFFSET_CORE_SHAFT,
)

logger = logging.getLogger(__name__)


def derive_building_params(config: BuildingConfig) -> BuildingParams:
    """
    Derive setbacks, overhangs and core shaft for a configuration.

    Only floors, width, depth and seed are read, so the result can be
    cached on that tuple.

    Args:
        config: Building configuration (already clamped)

    Returns:
        BuildingParams with setbacks and overhangs sorted by floor
    """
    floors = config.floors
    seed = config.seed

    has_setbacks = substream(seed, SEED_OFFSET_SETBACK_FLAG).chance(SETBACK_PROBABILITY)
    has_overhangs = substream(seed, SEED_OFFSET_OVERHANG_FLAG).chance(OVERHANG_PROBABILITY)
    has_core_shaft = substream(seed, SEED_OFFSET_CORE_FLAG).chance(CORE_SHAFT_PROBABILITY)

    setbacks = _derive_setbacks(floors, seed) if has_setbacks else ()
    overhangs = _derive_overhangs(floors, seed) if has_overhangs else ()
    core_shaft = _derive_core_shaft(config) if has_core_shaft else None

    logger.debug(
        f"Params seed={seed}: {len(setbacks)} setbacks, {len(overhangs)} overhangs, "
        f"core_shaft={'yes' if core_shaft else 'no'}"
    )

    return BuildingParams(
        floors=floors,
        width=config.width,
        depth=config.depth,
        seed=seed,
        floor_height=FLOOR_HEIGHT,
        setbacks=setbacks,
        overhangs=overhangs,
        core_shaft=core_shaft,
    )


def _floor_window(floors: int, fractions: Tuple[float, float]) -> Tuple[int, int]:
    """Integer floor interval [floor(lo*f), floor(hi*f)] kept inside [0, floors)."""
    low = clamp_int(math.floor(floors * fractions[0]), 0, floors - 1)
    high = clamp_int(math.floor(floors * fractions[1]), low, floors - 1)
    return low, high


def _derive_setbacks(floors: int, seed: float) -> Tuple[Setback, ...]:
    """Setbacks, sorted ascending by floor. Empty for buildings under 2 floors."""
    max_count = min(MAX_SETBACKS, floors // 2)
    if max_count < 1:
        return ()

    rng = substream(seed, SEED_OFFSET_SETBACKS)
    count = rng.randint(1, max_count)
    low, high = _floor_window(floors, SETBACK_FLOOR_RANGE)

    setbacks: List[Setback] = []
    for _ in range(count):
        floor = rng.randint(low, high)
        amount = rng.range(*SETBACK_AMOUNT_RANGE)
        setbacks.append(Setback(floor=floor, amount=amount))

    # sorted() is stable: equal floors keep draw order
    return tuple(sorted(setbacks, key=lambda s: s.floor))


def _derive_overhangs(floors: int, seed: float) -> Tuple[Overhang, ...]:
    """Overhangs, sorted ascending by floor."""
    rng = substream(seed, SEED_OFFSET_OVERHANGS)
    count = rng.randint(1, MAX_OVERHANGS)
    low, high = _floor_window(floors, OVERHANG_FLOOR_RANGE)

    overhangs: List[Overhang] = []
    for _ in range(count):
        floor = rng.randint(low, high)
        amount = rng.range(*OVERHANG_AMOUNT_RANGE)
        side = rng.choice(FACE_ORDER)
        overhangs.append(Overhang(floor=floor, amount=amount, side=side))

    return tuple(sorted(overhangs, key=lambda o: o.floor))


def _derive_core_shaft(config: BuildingConfig) -> Optional[CoreShaft]:
    rng = substream(config.seed, SEED_OFFSET_CORE_SHAFT)
    width, depth = config.width, config.depth
    total_height = config.floors * FLOOR_HEIGHT
    size_lo, size_hi = CORE_SHAFT_SIZE_RANGE
    height_lo, height_hi = CORE_SHAFT_HEIGHT_RANGE
    offset = CORE_SHAFT_OFFSET_FRACTION

    return CoreShaft(
        width=rng.range(width * size_lo, width * size_hi),
        depth=rng.range(depth * size_lo, depth * size_hi),
        height=rng.range(total_height * height_lo, total_height * height_hi),
        offset_x=rng.range(-width * offset, width * offset),
        offset_z=rng.range(-depth * offset, depth * offset),
    )
