"""
Generators for Brutalist Buildings Generator.

Contains the parameter deriver, floor plan builder, facade placer,
decoration and garden generators, the city layout generator, and the
pipeline that orchestrates them all.
"""

from .params import derive_building_params
from .floor_plan import build_floor_plan, build_floor
from .facade import place_windows, place_doors
from .decorations import generate_decorations
from .garden import generate_rooftop_garden, generate_ground_park
from .site_layout import generate_city_layout, min_separation
from .building_generator import (
    BuildingPipeline,
    GenerationResult,
    generate,
)

__all__ = [
    'derive_building_params',
    'build_floor_plan',
    'build_floor',
    'place_windows',
    'place_doors',
    'generate_decorations',
    'generate_rooftop_garden',
    'generate_ground_park',
    'generate_city_layout',
    'min_separation',
    'BuildingPipeline',
    'GenerationResult',
    'generate',
]
