"""
Decorative element generator for Brutalist Buildings Generator.

Adds 2-5 concrete elements (bands, pillars, slabs, boxes) sized from the
base footprint and total height.
"""

from typing import Callable, Dict, List
import logging
import math

from ..models.building import BuildingParams
from ..models.geometry import Point3D
from ..models.layout import (
    Band,
    Box,
    DecorationKind,
    DecorativeElement,
    Pillar,
    Slab,
)
from ..utils.random_source import SeededRandom, substream
from ..config import DECORATION_COUNT_RANGE, SEED_OFFSET_DECORATIONS

logger = logging.getLogger(__name__)

# randint(0, 3) picks the variant in this order
DECORATION_ORDER = (
    DecorationKind.BAND,
    DecorationKind.PILLAR,
    DecorationKind.SLAB,
    DecorationKind.BOX,
)

FULL_TURN = 2 * math.pi


def generate_decorations(params: BuildingParams) -> List[DecorativeElement]:
    """
    Generate the decorative elements of a building.

    All draws come from one stream in element order: variant first, then
    the fields of that variant in the order they are listed in its builder.

    Args:
        params: Derived building parameters

    Returns:
        List of Band/Pillar/Slab/Box records
    """
    rng = substream(params.seed, SEED_OFFSET_DECORATIONS)
    count = rng.randint(*DECORATION_COUNT_RANGE)

    elements: List[DecorativeElement] = []
    for _ in range(count):
        kind = rng.choice(DECORATION_ORDER)
        elements.append(_BUILDERS[kind](rng, params))

    logger.debug(
        f"Decorations: {', '.join(e.kind.value for e in elements)}"
    )
    return elements


def _band(rng: SeededRandom, params: BuildingParams) -> Band:
    total = params.total_height
    y = rng.range(total * 0.2, total * 0.8)
    return Band(
        position=Point3D(0.0, y, 0.0),
        width=params.width + rng.range(1, 3),
        depth=params.depth + rng.range(1, 3),
        height=rng.range(0.5, 1.5),
    )


def _pillar(rng: SeededRandom, params: BuildingParams) -> Pillar:
    total = params.total_height
    x = rng.range(-params.width / 2, params.width / 2)
    z = rng.range(-params.depth / 2, params.depth / 2)
    return Pillar(
        position=Point3D(x, total / 2, z),
        width=rng.range(1, 2),
        depth=rng.range(1, 2),
        height=rng.range(total * 0.5, total * 1.2),
    )


def _slab(rng: SeededRandom, params: BuildingParams) -> Slab:
    total = params.total_height
    x = rng.range(-params.width / 2, params.width / 2)
    y = rng.range(total * 0.3, total * 0.9)
    z = rng.range(-params.depth / 2, params.depth / 2)
    return Slab(
        position=Point3D(x, y, z),
        width=rng.range(2, 5),
        depth=rng.range(2, 5),
        height=rng.range(0.5, 1),
        rotation_y=rng.range(0, FULL_TURN),
    )


def _box(rng: SeededRandom, params: BuildingParams) -> Box:
    total = params.total_height
    x = rng.range(-params.width / 2, params.width / 2)
    # Single-floor buildings: keep the range non-inverted
    y = rng.range(1, max(1.0, total * 0.5))
    z = rng.range(-params.depth / 2, params.depth / 2)
    return Box(
        position=Point3D(x, y, z),
        width=rng.range(2, 4),
        depth=rng.range(2, 4),
        height=rng.range(2, 4),
        rotation_y=rng.range(0, FULL_TURN),
    )


_BUILDERS: Dict[DecorationKind, Callable[[SeededRandom, BuildingParams], DecorativeElement]] = {
    DecorationKind.BAND: _band,
    DecorationKind.PILLAR: _pillar,
    DecorationKind.SLAB: _slab,
    DecorationKind.BOX: _box,
}
