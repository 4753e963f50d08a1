"""
Site layout generator for Brutalist Buildings Generator (city mode).

Keeps the configured building at the origin and scatters 5-9 satellite
buildings around it in an annulus, never closer to each other than
max(width, depth) + 15. A satellite that finds no free spot within its
attempt budget is dropped; the city just ends up smaller.
"""

from typing import List, Optional
import logging
import math

from ..models.building import BuildingConfig
from ..models.geometry import PlanPoint, Point3D
from ..models.layout import CityEntry
from ..utils.random_source import SeededRandom, substream
from ..config import (
    CITY_SIZE,
    CITY_SEPARATION_MARGIN,
    CITY_MIN_SATELLITES,
    CITY_SATELLITE_SPREAD,
    CITY_PLACEMENT_ATTEMPTS,
    SATELLITE_MIN_FLOORS,
    SATELLITE_FLOOR_FACTOR,
    SATELLITE_SCALE_RANGE,
    SATELLITE_MIN_DIMENSION,
    SATELLITE_SEED_STRIDE,
    SEED_OFFSET_CITY,
    PARK_SIZE_FACTOR,
    PARK_SIZE_MARGIN,
)

logger = logging.getLogger(__name__)


def min_separation(config: BuildingConfig) -> float:
    """Minimum distance between any two buildings of the city."""
    return max(config.width, config.depth) + CITY_SEPARATION_MARGIN


def effective_city_size(config: BuildingConfig, city_size: float = CITY_SIZE) -> float:
    """Outer radius of the annulus, widened so it always exceeds the inner radius."""
    return max(city_size, 2 * min_separation(config))


def park_half_size(config: BuildingConfig, city_size: float = CITY_SIZE) -> float:
    """Half side of the ground plane the park is laid out on."""
    if config.city_mode:
        return effective_city_size(config, city_size)
    return max(config.width, config.depth) * PARK_SIZE_FACTOR + PARK_SIZE_MARGIN


def generate_city_layout(config: BuildingConfig, city_size: float = CITY_SIZE) -> List[CityEntry]:
    """
    Place the central building and its satellites.

    Stream order: satellite count, then per satellite its placement
    attempts (angle, radius each) followed, on success, by its varied
    configuration (floors, width scale, depth scale).

    Args:
        config: Configuration of the central building
        city_size: Outer radius of the satellite annulus

    Returns:
        Central entry first, then every satellite that could be placed
    """
    rng = substream(config.seed, SEED_OFFSET_CITY)
    separation = min_separation(config)
    outer = effective_city_size(config, city_size)

    entries: List[CityEntry] = [
        CityEntry(position=Point3D(0.0, 0.0, 0.0), config=config, is_center=True)
    ]

    requested = CITY_MIN_SATELLITES + int(rng.next() * CITY_SATELLITE_SPREAD)

    for index in range(requested):
        position = _find_position(rng, entries, separation, outer)
        if position is None:
            logger.debug(
                f"Satellite {index}: no free spot after "
                f"{CITY_PLACEMENT_ATTEMPTS} attempts, skipped"
            )
            continue
        entries.append(CityEntry(
            position=Point3D(position.x, 0.0, position.z),
            config=_satellite_config(rng, config, index),
        ))

    logger.info(
        f"City layout: {len(entries) - 1}/{requested} satellites placed "
        f"(separation {separation:.1f}, radius {outer:.1f})"
    )
    return entries


def _find_position(
    rng: SeededRandom,
    entries: List[CityEntry],
    separation: float,
    outer: float
) -> Optional[PlanPoint]:
    """First candidate in the annulus far enough from every placed entry."""
    for _ in range(CITY_PLACEMENT_ATTEMPTS):
        angle = rng.range(0, 2 * math.pi)
        radius = rng.range(separation, outer)
        candidate = PlanPoint(math.cos(angle) * radius, math.sin(angle) * radius)
        if all(candidate.distance_to(e.position.to_plan()) >= separation for e in entries):
            return candidate
    return None


def _satellite_config(rng: SeededRandom, center: BuildingConfig, index: int) -> BuildingConfig:
    """Varied configuration of one satellite, in the central building's seed family."""
    floors = int(rng.range(SATELLITE_MIN_FLOORS, SATELLITE_MIN_FLOORS + center.floors * SATELLITE_FLOOR_FACTOR))
    width = max(SATELLITE_MIN_DIMENSION, center.width * rng.range(*SATELLITE_SCALE_RANGE))
    depth = max(SATELLITE_MIN_DIMENSION, center.depth * rng.range(*SATELLITE_SCALE_RANGE))

    return BuildingConfig(
        floors=max(1, floors),
        width=width,
        depth=depth,
        window_density=center.window_density,
        texture_roughness=center.texture_roughness,
        concrete_color=center.concrete_color,
        building_name=f"{center.building_name} {index + 1}",
        cloud_density=center.cloud_density,
        rooftop_garden=center.rooftop_garden,
        ground_park=False,
        city_mode=False,
        seed=center.seed + SATELLITE_SEED_STRIDE * (index + 1),
    )
