"""
Core geometry types for Brutalist Buildings Generator.

Provides Point3D, PlanPoint, PlanRect and the Face enum used throughout
the pipeline. World axes follow the scene convention of the renderer:
y is up, the ground plane is x/z, the front of a building faces +z.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple
import math


class Face(Enum):
    """Cardinal building face, in the order used for random side picks."""
    FRONT = "front"
    RIGHT = "right"
    BACK = "back"
    LEFT = "left"

    @property
    def index(self) -> int:
        """Position in FACE_ORDER (front=0, right=1, back=2, left=3)."""
        return FACE_ORDER.index(self)

    @property
    def normal(self) -> Tuple[float, float]:
        """Outward unit normal on the ground plane as (x, z)."""
        return _FACE_NORMALS[self]

    @property
    def rotation_y(self) -> float:
        """Yaw that turns a +z facing opening onto this face."""
        return _FACE_ROTATIONS[self]

    @property
    def is_lateral(self) -> bool:
        """True for LEFT/RIGHT, whose length runs along the building depth."""
        return self in (Face.LEFT, Face.RIGHT)


FACE_ORDER: Tuple[Face, ...] = (Face.FRONT, Face.RIGHT, Face.BACK, Face.LEFT)

_FACE_NORMALS = {
    Face.FRONT: (0.0, 1.0),
    Face.RIGHT: (1.0, 0.0),
    Face.BACK: (0.0, -1.0),
    Face.LEFT: (-1.0, 0.0),
}

_FACE_ROTATIONS = {
    Face.FRONT: 0.0,
    Face.RIGHT: math.pi / 2,
    Face.BACK: math.pi,
    Face.LEFT: -math.pi / 2,
}


@dataclass(frozen=True, slots=True)
class Point3D:
    """3D point in scene coordinates (y up)."""
    x: float
    y: float
    z: float

    def to_plan(self) -> 'PlanPoint':
        """Project onto the ground plane."""
        return PlanPoint(self.x, self.z)


@dataclass(frozen=True, slots=True)
class PlanPoint:
    """2D point on the ground plane (x, z)."""
    x: float
    z: float

    def distance_to(self, other: 'PlanPoint') -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dz = self.z - other.z
        return math.sqrt(dx * dx + dz * dz)


@dataclass(frozen=True, slots=True)
class PlanRect:
    """Axis-aligned rectangle on the ground plane."""
    min_x: float
    min_z: float
    max_x: float
    max_z: float

    def contains(self, p: PlanPoint) -> bool:
        """Check if point is inside rectangle (inclusive)."""
        return (
            self.min_x <= p.x <= self.max_x and
            self.min_z <= p.z <= self.max_z
        )

    def expand(self, margin: float) -> 'PlanRect':
        """Return a new rectangle expanded by margin on all sides."""
        return PlanRect(
            self.min_x - margin,
            self.min_z - margin,
            self.max_x + margin,
            self.max_z + margin
        )

    @staticmethod
    def from_center(x: float, z: float, width: float, depth: float) -> 'PlanRect':
        """Create a rectangle from its centre and full extents."""
        return PlanRect(x - width / 2, z - depth / 2, x + width / 2, z + depth / 2)
