"""
Configuration constants for Brutalist Buildings Generator.

Contains all tunable parameters for building generation, including
probabilities, dimension ranges, seed-family offsets and site sizes.
"""

from dataclasses import dataclass
import math


# =============================================================================
# FLOOR AND HEIGHT DEFAULTS
# =============================================================================

# Height of one floor slab (length units)
FLOOR_HEIGHT = 3.0

# Smallest width/depth a floor can shrink to after cumulative setbacks
MIN_FLOOR_DIMENSION = 1.0

# Smallest accepted building footprint dimension (input clamp)
MIN_BUILDING_DIMENSION = 1.0

# Upper input clamps. Faces stay under WINDOW_FACE_STRIDE window slots and
# window slot keys stay below 2^32, so every (floor, face, slot) keeps its
# own stream.
MAX_BUILDING_DIMENSION = 500.0
MAX_FLOORS = 1000

# =============================================================================
# PARAMETER DERIVATION
# =============================================================================

SETBACK_PROBABILITY = 0.7
OVERHANG_PROBABILITY = 0.6
CORE_SHAFT_PROBABILITY = 0.8

# Setbacks: count in [1, min(MAX_SETBACKS, floors // 2)]
MAX_SETBACKS = 3
SETBACK_FLOOR_RANGE = (0.3, 0.8)    # fractions of floor count
SETBACK_AMOUNT_RANGE = (1.0, 3.0)

# Overhangs: count in [1, MAX_OVERHANGS]
MAX_OVERHANGS = 2
OVERHANG_FLOOR_RANGE = (0.4, 0.9)   # fractions of floor count
OVERHANG_AMOUNT_RANGE = (1.0, 2.0)

# Core shaft, as fractions of the footprint / total height
CORE_SHAFT_SIZE_RANGE = (0.2, 0.4)
CORE_SHAFT_HEIGHT_RANGE = (1.1, 1.3)
CORE_SHAFT_OFFSET_FRACTION = 0.1

# =============================================================================
# FLOOR SIDE EXTENSIONS
# =============================================================================

# A floor above the ground floor gets a side extension when next() exceeds this
EXTENSION_THRESHOLD = 0.7
EXTENSION_WIDTH_RANGE = (2.0, 5.0)
EXTENSION_DEPTH_RANGE = (1.0, 3.0)

# =============================================================================
# FACADE OPENINGS
# =============================================================================

WINDOW_SPACING = 2.0
WINDOW_EDGE_INSET = 1.0
WINDOW_SIZE = (1.5, 1.5)

# Openings sit slightly proud of the face to avoid z-fighting
FACADE_OFFSET = 0.1

MAIN_DOOR_SIZE = (2.0, 3.0)
SECONDARY_DOOR_SIZE = (1.5, 2.5)
SECONDARY_DOOR_PROBABILITY = 0.5

# Door centre offset along the face, as a fraction of the face length
DOOR_OFFSET_FRACTION = 0.25

# Secondary door sits 1..3 face steps away from the main door
SECONDARY_DOOR_STEPS = (1, 3)

# =============================================================================
# DECORATIONS
# =============================================================================

DECORATION_COUNT_RANGE = (2, 5)

# =============================================================================
# ROOFTOP GARDEN
# =============================================================================

ROOF_GARDEN_MARGIN = 1.5
ROOF_TREE_COUNT_RANGE = (3, 12)
ROOF_AREA_PER_TREE = 10.0
ROOF_TREE_SCALE_RANGE = (0.5, 1.0)
MAX_FLOWER_BEDS = 5
FLOWER_BED_SIZE_RANGE = (1.0, 2.5)
ROOF_PATH_WIDTH = 1.0

# =============================================================================
# CITY LAYOUT
# =============================================================================

# Outer radius of the satellite annulus
CITY_SIZE = 80.0

# Clearance added to the largest footprint side for the minimum separation
CITY_SEPARATION_MARGIN = 15.0

CITY_MIN_SATELLITES = 5
CITY_SATELLITE_SPREAD = 5       # satellites = MIN + int(next() * SPREAD)
CITY_PLACEMENT_ATTEMPTS = 50

SATELLITE_MIN_FLOORS = 3
SATELLITE_FLOOR_FACTOR = 0.8
SATELLITE_SCALE_RANGE = (0.7, 1.3)
SATELLITE_MIN_DIMENSION = 5.0

# =============================================================================
# GROUND PARK
# =============================================================================

PARK_PATH_WIDTH = 3.0

# Trees stay out of this band on each side of a path
PARK_PATH_CLEARANCE = 3.0

PARK_AREA_PER_TREE = 150.0
PARK_TREE_COUNT_RANGE = (10, 60)
PARK_TREE_SCALE_RANGE = (0.8, 1.5)
PARK_TREE_ATTEMPTS = 20

# Extra clearance around building footprints
PARK_BUILDING_CLEARANCE = 2.0

BENCH_SPACING = 8.0
BENCH_PATH_GAP = 1.0

# Ground park half-size when there is no city around the building
PARK_SIZE_FACTOR = 2.0
PARK_SIZE_MARGIN = 20.0

# =============================================================================
# SEED FAMILY OFFSETS
# =============================================================================
# Every independent decision reads its own stream, seeded with
# base seed + offset, so toggling one feature never shifts another.

SEED_OFFSET_SETBACK_FLAG = 0.0
SEED_OFFSET_OVERHANG_FLAG = 0.1
SEED_OFFSET_CORE_FLAG = 0.2
SEED_OFFSET_SETBACKS = 0.3
SEED_OFFSET_OVERHANGS = 0.6
SEED_OFFSET_CORE_SHAFT = 0.9
SEED_OFFSET_ROOF_GARDEN = 1.0
SEED_OFFSET_EXTENSIONS = 2.0
SEED_OFFSET_MAIN_DOOR = 3.0
SEED_OFFSET_SECONDARY_FLAG = 3.1
SEED_OFFSET_SECONDARY_DOOR = 3.2
SEED_OFFSET_DECORATIONS = 4.0
SEED_OFFSET_GROUND_PARK = 5.0
SEED_OFFSET_CITY = 6.0
SEED_OFFSET_RESEED = 7.0

# Window slot streams: base + scatter(floor * FLOOR_STRIDE + face * FACE_STRIDE + slot)
SEED_OFFSET_WINDOWS = 10000.0
WINDOW_FLOOR_STRIDE = 10000
WINDOW_FACE_STRIDE = 1000

# Satellite building i gets seed + SATELLITE_SEED_STRIDE * (i + 1)
SATELLITE_SEED_STRIDE = 100.0


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class PipelineConfig:
    """
    Runtime configuration for the generation pipeline.

    Holds the knobs a caller may adjust per session, independent of the
    building being generated.
    """

    # Outer radius of the city annulus (city mode)
    city_size: float = CITY_SIZE

    # Keep the last result of every stage and reuse it on identical inputs
    memoize: bool = True

    # Debug/report
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if not math.isfinite(self.city_size) or self.city_size <= 0:
            raise ValueError("city_size must be a positive finite number")


# Default configuration instance
DEFAULT_CONFIG = PipelineConfig()
