"""
Garden and park generator for Brutalist Buildings Generator.

Rooftop garden: trees, flower beds and two crossing paths on the roof of
the top floor, kept away from the roof edge.

Ground park: two crossing paths through the origin with trees and
benches, sized to the ground plane around the building or the city.
Trees keep clear of the paths and of every building footprint.
"""

from typing import List, Sequence
import logging

from ..models.building import BuildingParams
from ..models.geometry import Face, PlanPoint, PlanRect, Point3D
from ..models.layout import (
    Bench,
    FloorGeometry,
    FlowerBed,
    GardenLayout,
    GardenPath,
    Tree,
)
from ..utils.math_utils import clamp_int, inset_range
from ..utils.random_source import substream
from ..config import (
    ROOF_GARDEN_MARGIN,
    ROOF_TREE_COUNT_RANGE,
    ROOF_AREA_PER_TREE,
    ROOF_TREE_SCALE_RANGE,
    MAX_FLOWER_BEDS,
    FLOWER_BED_SIZE_RANGE,
    ROOF_PATH_WIDTH,
    PARK_PATH_WIDTH,
    PARK_PATH_CLEARANCE,
    PARK_AREA_PER_TREE,
    PARK_TREE_COUNT_RANGE,
    PARK_TREE_SCALE_RANGE,
    PARK_TREE_ATTEMPTS,
    PARK_BUILDING_CLEARANCE,
    BENCH_SPACING,
    BENCH_PATH_GAP,
    SEED_OFFSET_ROOF_GARDEN,
    SEED_OFFSET_GROUND_PARK,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ROOFTOP GARDEN
# =============================================================================

def generate_rooftop_garden(params: BuildingParams, top_floor: FloorGeometry) -> GardenLayout:
    """
    Lay out a garden on the roof of the top floor.

    Stream order: trees (x, z, scale each), flower bed count, flower beds
    (size x, size z, x, z each). Paths take no draws.

    Args:
        params: Derived building parameters (seed and total height)
        top_floor: Slab of the highest floor

    Returns:
        GardenLayout with 3-12 trees, 1-5 flower beds and two paths
    """
    rng = substream(params.seed, SEED_OFFSET_ROOF_GARDEN)
    cx = top_floor.position.x
    cz = top_floor.position.z
    roof_y = params.total_height

    x_lo, x_hi = inset_range(top_floor.width / 2, ROOF_GARDEN_MARGIN)
    z_lo, z_hi = inset_range(top_floor.depth / 2, ROOF_GARDEN_MARGIN)

    area = top_floor.width * top_floor.depth
    tree_count = clamp_int(round(area / ROOF_AREA_PER_TREE), *ROOF_TREE_COUNT_RANGE)

    layout = GardenLayout()

    for _ in range(tree_count):
        x = cx + rng.range(x_lo, x_hi)
        z = cz + rng.range(z_lo, z_hi)
        scale = rng.range(*ROOF_TREE_SCALE_RANGE)
        layout.trees.append(Tree(position=Point3D(x, roof_y, z), scale=scale))

    bed_count = rng.randint(1, MAX_FLOWER_BEDS)
    for _ in range(bed_count):
        size = (rng.range(*FLOWER_BED_SIZE_RANGE), rng.range(*FLOWER_BED_SIZE_RANGE))
        x = cx + rng.range(x_lo, x_hi)
        z = cz + rng.range(z_lo, z_hi)
        layout.flower_beds.append(FlowerBed(position=Point3D(x, roof_y, z), size=size))

    span_x = max(x_hi - x_lo, ROOF_PATH_WIDTH)
    span_z = max(z_hi - z_lo, ROOF_PATH_WIDTH)
    layout.paths.append(GardenPath(Point3D(cx, roof_y, cz), (span_x, ROOF_PATH_WIDTH)))
    layout.paths.append(GardenPath(Point3D(cx, roof_y, cz), (ROOF_PATH_WIDTH, span_z)))

    logger.debug(
        f"Rooftop garden: {len(layout.trees)} trees, "
        f"{len(layout.flower_beds)} flower beds"
    )
    return layout


# =============================================================================
# GROUND PARK
# =============================================================================

def generate_ground_park(
    seed: float,
    half_size: float,
    footprints: Sequence[PlanRect]
) -> GardenLayout:
    """
    Lay out a park on the ground plane around the building(s).

    Args:
        seed: Base configuration seed
        half_size: Half the side of the square ground plane
        footprints: Building footprints trees and benches must avoid

    Returns:
        GardenLayout with two paths, trees and benches (no flower beds)
    """
    rng = substream(seed, SEED_OFFSET_GROUND_PARK)
    blocked = [fp.expand(PARK_BUILDING_CLEARANCE) for fp in footprints]
    band = PARK_PATH_WIDTH / 2 + PARK_PATH_CLEARANCE

    layout = GardenLayout()
    origin = Point3D(0.0, 0.0, 0.0)
    layout.paths.append(GardenPath(origin, (2 * half_size, PARK_PATH_WIDTH)))
    layout.paths.append(GardenPath(origin, (PARK_PATH_WIDTH, 2 * half_size)))

    area = (2 * half_size) ** 2
    tree_count = clamp_int(int(area / PARK_AREA_PER_TREE), *PARK_TREE_COUNT_RANGE)
    skipped = 0

    for _ in range(tree_count):
        for _attempt in range(PARK_TREE_ATTEMPTS):
            x = rng.range(-half_size, half_size)
            z = rng.range(-half_size, half_size)
            if abs(x) < band or abs(z) < band:
                continue
            if _is_blocked(PlanPoint(x, z), blocked):
                continue
            scale = rng.range(*PARK_TREE_SCALE_RANGE)
            layout.trees.append(Tree(position=Point3D(x, 0.0, z), scale=scale))
            break
        else:
            skipped += 1

    layout.benches.extend(_place_benches(half_size, blocked))

    if skipped:
        logger.debug(f"Ground park: {skipped} trees found no free spot")
    logger.debug(
        f"Ground park: {len(layout.trees)} trees, {len(layout.benches)} benches, "
        f"half size {half_size:.1f}"
    )
    return layout


def _place_benches(half_size: float, blocked: Sequence[PlanRect]) -> List[Bench]:
    """Benches every BENCH_SPACING along both paths, alternating sides, facing the path."""
    benches: List[Bench] = []
    lateral = PARK_PATH_WIDTH / 2 + BENCH_PATH_GAP

    stations: List[float] = []
    d = BENCH_SPACING
    while d < half_size:
        stations.extend((d, -d))
        d += BENCH_SPACING

    for k, along in enumerate(stations):
        side = 1.0 if k % 2 == 0 else -1.0

        # Path along x: bench beside it in z, facing back towards z = 0
        facing = Face.BACK if side > 0 else Face.FRONT
        candidates = [(PlanPoint(along, side * lateral), facing.rotation_y)]

        # Path along z: bench beside it in x, facing back towards x = 0
        facing = Face.LEFT if side > 0 else Face.RIGHT
        candidates.append((PlanPoint(side * lateral, along), facing.rotation_y))

        for point, rotation in candidates:
            if _is_blocked(point, blocked):
                continue
            benches.append(Bench(position=Point3D(point.x, 0.0, point.z), rotation_y=rotation))

    return benches


def _is_blocked(point: PlanPoint, blocked: Sequence[PlanRect]) -> bool:
    return any(rect.contains(point) for rect in blocked)
