"""
Building data model for Brutalist Buildings Generator.

Provides the BuildingConfig input record and the BuildingParams derived
from it (setbacks, overhangs and the core shaft).
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple
import math

from .geometry import Face
from ..config import (
    FLOOR_HEIGHT,
    MIN_BUILDING_DIMENSION,
    MAX_BUILDING_DIMENSION,
    MAX_FLOORS,
    SEED_OFFSET_RESEED,
)
from ..utils.math_utils import clamp, clamp_int
from ..utils.random_source import substream

RGB = Tuple[float, float, float]

DEFAULT_CONCRETE_COLOR: RGB = (0.8, 0.8, 0.8)


def concrete_color_from_hex(value: str) -> RGB:
    """
    Convert a '#rrggbb' (or 'rrggbb') colour string to an RGB tuple.

    Args:
        value: Hex colour as used by UI colour pickers

    Returns:
        (r, g, b) with channels in [0, 1]

    Raises:
        ValueError: If the string is not a 6-digit hex colour
    """
    text = value.strip().lstrip('#')
    if len(text) != 6:
        raise ValueError(f"expected a #rrggbb colour, got {value!r}")
    try:
        channels = [int(text[i:i + 2], 16) for i in (0, 2, 4)]
    except ValueError:
        raise ValueError(f"expected a #rrggbb colour, got {value!r}") from None
    return tuple(c / 255.0 for c in channels)


def next_seed(seed: float) -> float:
    """Derive the follow-up seed used when a configuration changes."""
    return float(int(substream(seed, SEED_OFFSET_RESEED).next() * 2 ** 31))


@dataclass(frozen=True)
class BuildingConfig:
    """
    User-facing configuration of one building.

    Immutable per generation pass. Values outside the ranges the UI allows
    are clamped rather than rejected.

    Attributes:
        floors: Number of floors (>= 1)
        width: Footprint extent along x
        depth: Footprint extent along z
        window_density: Probability that a window slot holds a window
        texture_roughness: Material hint for the renderer
        concrete_color: Material hint for the renderer, (r, g, b) in [0, 1]
        building_name: Display name
        cloud_density: Sky hint for the renderer
        rooftop_garden: Generate trees, flower beds and paths on the roof
        ground_park: Generate park furnishing on the ground plane
        city_mode: Surround the building with satellite buildings
        seed: Base of the seed family driving every random decision
    """
    floors: int = 5
    width: float = 10.0
    depth: float = 10.0
    window_density: float = 0.5
    texture_roughness: float = 0.8
    concrete_color: RGB = DEFAULT_CONCRETE_COLOR
    building_name: str = "BRUTALIST TOWER"
    cloud_density: float = 0.7
    rooftop_garden: bool = False
    ground_park: bool = False
    city_mode: bool = False
    seed: float = 12345.0

    def __post_init__(self):
        """Clamp out-of-range values and reject non-finite seeds."""
        if not math.isfinite(self.seed):
            raise ValueError(f"seed must be finite, got {self.seed!r}")

        # Frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, 'floors', clamp_int(int(self.floors), 1, MAX_FLOORS))
        object.__setattr__(self, 'width', clamp(float(self.width), MIN_BUILDING_DIMENSION, MAX_BUILDING_DIMENSION))
        object.__setattr__(self, 'depth', clamp(float(self.depth), MIN_BUILDING_DIMENSION, MAX_BUILDING_DIMENSION))
        object.__setattr__(self, 'window_density', clamp(float(self.window_density), 0.0, 1.0))
        object.__setattr__(self, 'texture_roughness', clamp(float(self.texture_roughness), 0.0, 1.0))
        object.__setattr__(self, 'cloud_density', clamp(float(self.cloud_density), 0.0, 1.0))
        object.__setattr__(
            self, 'concrete_color',
            tuple(clamp(float(c), 0.0, 1.0) for c in self.concrete_color)
        )
        object.__setattr__(self, 'seed', float(self.seed))

    @property
    def total_height(self) -> float:
        """Height of the stacked floors."""
        return self.floors * FLOOR_HEIGHT

    def with_changes(self, **changes) -> 'BuildingConfig':
        """
        Copy with the given fields changed.

        Unless the changes set `seed` explicitly, the copy gets a fresh seed
        derived from the current one, so every edit yields a new but
        reproducible variation.
        """
        if 'seed' not in changes and changes:
            changes['seed'] = next_seed(self.seed)
        return replace(self, **changes)

    def regenerate(self) -> 'BuildingConfig':
        """Same configuration, next seed of the family ("generate new")."""
        return replace(self, seed=next_seed(self.seed))


@dataclass(frozen=True)
class Setback:
    """Footprint reduction applied from `floor` upwards."""
    floor: int
    amount: float


@dataclass(frozen=True)
class Overhang:
    """Footprint extension on one side applied from `floor` upwards."""
    floor: int
    amount: float
    side: Face


@dataclass(frozen=True)
class CoreShaft:
    """Vertical core (stairs/elevators) rising above the roofline."""
    width: float
    depth: float
    height: float
    offset_x: float
    offset_z: float


@dataclass(frozen=True)
class BuildingParams:
    """
    Parameters derived from a BuildingConfig.

    Recomputed whenever floors, width, depth or seed change. Tuples keep
    the record hashable so it can key stage caches.
    """
    floors: int
    width: float
    depth: float
    seed: float
    floor_height: float = FLOOR_HEIGHT
    setbacks: Tuple[Setback, ...] = field(default_factory=tuple)
    overhangs: Tuple[Overhang, ...] = field(default_factory=tuple)
    core_shaft: Optional[CoreShaft] = None

    @property
    def total_height(self) -> float:
        """floors * floor_height."""
        return self.floors * self.floor_height
