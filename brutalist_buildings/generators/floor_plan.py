"""
Floor plan builder for Brutalist Buildings Generator.

Stacks one slab per floor, shrinking the footprint at every setback and
growing it on one side at every overhang. Both compound: a floor above
two setbacks loses both amounts.
"""

from typing import List
import logging

from ..models.building import BuildingParams
from ..models.geometry import Face, Point3D
from ..models.layout import FloorExtension, FloorGeometry, FloorPlan
from ..utils.random_source import substream
from ..config import (
    MIN_FLOOR_DIMENSION,
    EXTENSION_THRESHOLD,
    EXTENSION_WIDTH_RANGE,
    EXTENSION_DEPTH_RANGE,
    SEED_OFFSET_EXTENSIONS,
)

logger = logging.getLogger(__name__)


def build_floor_plan(params: BuildingParams) -> FloorPlan:
    """
    Build the floor slabs and side extensions of a building.

    Args:
        params: Derived building parameters

    Returns:
        FloorPlan with exactly params.floors slabs, ordered by floor
    """
    floors = tuple(build_floor(params, f) for f in range(params.floors))
    extensions = tuple(_build_extensions(params, floors))

    logger.debug(
        f"Floor plan: {len(floors)} floors, {len(extensions)} side extensions, "
        f"top floor {floors[-1].width:.2f}x{floors[-1].depth:.2f}"
    )
    return FloorPlan(floors=floors, extensions=extensions)


def build_floor(params: BuildingParams, floor: int) -> FloorGeometry:
    """
    Compute the slab of a single floor.

    Setbacks are applied first and the footprint is clamped to
    MIN_FLOOR_DIMENSION; overhangs are then added on their side and move
    the slab centre by half their amount towards that side.

    Args:
        params: Derived building parameters
        floor: Floor index in [0, params.floors)

    Returns:
        FloorGeometry for that floor
    """
    width = params.width
    depth = params.depth
    x = 0.0
    z = 0.0

    for setback in params.setbacks:
        if setback.floor <= floor:
            width -= setback.amount
            depth -= setback.amount

    width = max(MIN_FLOOR_DIMENSION, width)
    depth = max(MIN_FLOOR_DIMENSION, depth)

    for overhang in params.overhangs:
        if overhang.floor > floor:
            continue
        amount = overhang.amount
        nx, nz = overhang.side.normal
        if overhang.side.is_lateral:
            width += amount
        else:
            depth += amount
        x += nx * amount / 2
        z += nz * amount / 2

    y = floor * params.floor_height + params.floor_height / 2

    return FloorGeometry(
        floor=floor,
        width=width,
        depth=depth,
        height=params.floor_height,
        position=Point3D(x, y, z),
    )


def _build_extensions(params: BuildingParams, floors) -> List[FloorExtension]:
    """Random one-floor boxes flush with the right face, never on the ground floor."""
    rng = substream(params.seed, SEED_OFFSET_EXTENSIONS)
    extensions: List[FloorExtension] = []

    for slab in floors[1:]:
        if rng.next() <= EXTENSION_THRESHOLD:
            continue
        ext_width = rng.range(*EXTENSION_WIDTH_RANGE)
        ext_depth = rng.range(*EXTENSION_DEPTH_RANGE)
        # Right face of the slab, extension grows inwards from it
        x = slab.position.x + slab.width / 2 - ext_width / 2
        extensions.append(FloorExtension(
            floor=slab.floor,
            position=Point3D(x, slab.position.y, slab.position.z),
            width=ext_width,
            depth=slab.depth + ext_depth,
            height=slab.height,
        ))

    return extensions


def face_center(slab: FloorGeometry, face: Face) -> Point3D:
    """Centre of the given face of a slab."""
    nx, nz = face.normal
    return Point3D(
        slab.position.x + nx * slab.width / 2,
        slab.position.y,
        slab.position.z + nz * slab.depth / 2,
    )
