"""
Data models for Brutalist Buildings Generator.
"""

from .geometry import Face, FACE_ORDER, Point3D, PlanPoint, PlanRect
from .building import (
    BuildingConfig,
    BuildingParams,
    Setback,
    Overhang,
    CoreShaft,
    concrete_color_from_hex,
)
from .layout import (
    FloorGeometry,
    FloorExtension,
    FloorPlan,
    OpeningKind,
    FacadeOpening,
    DecorationKind,
    Band,
    Pillar,
    Slab,
    Box,
    DecorativeElement,
    Tree,
    FlowerBed,
    GardenPath,
    Bench,
    GardenLayout,
    CityEntry,
)

__all__ = [
    'Face', 'FACE_ORDER', 'Point3D', 'PlanPoint', 'PlanRect',
    'BuildingConfig', 'BuildingParams', 'Setback', 'Overhang', 'CoreShaft',
    'concrete_color_from_hex',
    'FloorGeometry', 'FloorExtension', 'FloorPlan',
    'OpeningKind', 'FacadeOpening',
    'DecorationKind', 'Band', 'Pillar', 'Slab', 'Box', 'DecorativeElement',
    'Tree', 'FlowerBed', 'GardenPath', 'Bench', 'GardenLayout',
    'CityEntry',
]
