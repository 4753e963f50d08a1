"""
Brutalist Buildings Generator

Deterministically derives the geometry of a parametric brutalist building
(floor slabs, windows, doors, core shaft, decorations, gardens) and of a
small city of them from a handful of configuration values and a seed.

Can be used as:
- Library: brutalist_buildings.generate(BuildingConfig(...))
- CLI tool: python -m brutalist_buildings.main
"""

__version__ = "0.3.0"
__author__ = "Brutalist Buildings Team"

from .models.building import BuildingConfig
from .config import PipelineConfig
from .generators.building_generator import (
    BuildingPipeline,
    GenerationResult,
    generate,
)

__all__ = [
    'BuildingConfig',
    'PipelineConfig',
    'BuildingPipeline',
    'GenerationResult',
    'generate',
]
