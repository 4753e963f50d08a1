"""
Generated primitive records for Brutalist Buildings Generator.

Everything in this module is produced by the generators and handed to
the renderer read-only: floor slabs, side extensions, facade openings,
decorative elements, garden furnishing and city entries.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from .geometry import Face, PlanRect, Point3D
from .building import BuildingConfig


# =============================================================================
# FLOORS
# =============================================================================

@dataclass(frozen=True)
class FloorGeometry:
    """One floor slab; position is the centre of the box."""
    floor: int
    width: float
    depth: float
    height: float
    position: Point3D

    @property
    def footprint(self) -> PlanRect:
        """Ground-plane rectangle covered by this floor."""
        return PlanRect.from_center(self.position.x, self.position.z, self.width, self.depth)

    def face_length(self, face: Face) -> float:
        """Length of the given face (depth for left/right, width otherwise)."""
        return self.depth if face.is_lateral else self.width


@dataclass(frozen=True)
class FloorExtension:
    """Box attached to the right face of a floor."""
    floor: int
    position: Point3D
    width: float
    depth: float
    height: float


@dataclass(frozen=True)
class FloorPlan:
    """Ordered floor slabs (one per floor) plus their side extensions."""
    floors: Tuple[FloorGeometry, ...]
    extensions: Tuple[FloorExtension, ...] = ()

    @property
    def ground_floor(self) -> FloorGeometry:
        return self.floors[0]

    @property
    def top_floor(self) -> FloorGeometry:
        return self.floors[-1]


# =============================================================================
# FACADE OPENINGS
# =============================================================================

class OpeningKind(Enum):
    """Kind of facade opening."""
    WINDOW = "window"
    DOOR = "door"


@dataclass(frozen=True)
class FacadeOpening:
    """
    Window or door on one face of a floor.

    Attributes:
        kind: Window or door
        position: Centre of the opening, slightly outside the face
        rotation: (rx, ry, rz) Euler angles in radians
        size: (width, height)
        face: Face the opening sits on
        floor: Floor index, always within the building's floors
        is_main: Doors only; True for the main entrance
    """
    kind: OpeningKind
    position: Point3D
    rotation: Tuple[float, float, float]
    size: Tuple[float, float]
    face: Face
    floor: int
    is_main: Optional[bool] = None


# =============================================================================
# DECORATIVE ELEMENTS
# =============================================================================

class DecorationKind(Enum):
    """Discriminant of the decorative element variants."""
    BAND = "band"
    PILLAR = "pillar"
    SLAB = "slab"
    BOX = "box"


@dataclass(frozen=True)
class Band:
    """Horizontal concrete band wrapping the footprint."""
    position: Point3D
    width: float
    depth: float
    height: float
    kind: DecorationKind = field(default=DecorationKind.BAND, init=False)


@dataclass(frozen=True)
class Pillar:
    """Vertical concrete member."""
    position: Point3D
    width: float
    depth: float
    height: float
    kind: DecorationKind = field(default=DecorationKind.PILLAR, init=False)


@dataclass(frozen=True)
class Slab:
    """Thin cantilevered slab, yawed around the vertical axis."""
    position: Point3D
    width: float
    depth: float
    height: float
    rotation_y: float
    kind: DecorationKind = field(default=DecorationKind.SLAB, init=False)


@dataclass(frozen=True)
class Box:
    """Solid concrete box, yawed around the vertical axis."""
    position: Point3D
    width: float
    depth: float
    height: float
    rotation_y: float
    kind: DecorationKind = field(default=DecorationKind.BOX, init=False)


DecorativeElement = Union[Band, Pillar, Slab, Box]


# =============================================================================
# GARDENS AND PARKS
# =============================================================================

@dataclass(frozen=True)
class Tree:
    position: Point3D
    scale: float


@dataclass(frozen=True)
class FlowerBed:
    position: Point3D
    size: Tuple[float, float]


@dataclass(frozen=True)
class GardenPath:
    """Straight path strip; size is (x extent, z extent)."""
    position: Point3D
    size: Tuple[float, float]


@dataclass(frozen=True)
class Bench:
    position: Point3D
    rotation_y: float


@dataclass
class GardenLayout:
    """Landscaping of a roof or of the ground around the building(s)."""
    trees: List[Tree] = field(default_factory=list)
    flower_beds: List[FlowerBed] = field(default_factory=list)
    paths: List[GardenPath] = field(default_factory=list)
    benches: List[Bench] = field(default_factory=list)


# =============================================================================
# CITY
# =============================================================================

@dataclass(frozen=True)
class CityEntry:
    """One building of a city layout; position is on the ground (y = 0)."""
    position: Point3D
    config: BuildingConfig
    is_center: bool = False

    @property
    def footprint(self) -> PlanRect:
        """Base footprint of the building at its city position."""
        return PlanRect.from_center(
            self.position.x, self.position.z, self.config.width, self.config.depth
        )
