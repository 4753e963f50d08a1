"""
Facade feature placer for Brutalist Buildings Generator.

Places windows on the four faces of every floor and the main/secondary
doors on the ground floor.

Window decisions are independent per slot: each (floor, face, slot) has
its own stream, so a slot appearing or disappearing elsewhere (e.g. after
a setback changes a face length) never reshuffles the other windows.
"""

from typing import List, Sequence, Tuple
import logging

from ..models.geometry import Face, FACE_ORDER, Point3D
from ..models.layout import FacadeOpening, FloorGeometry, OpeningKind
from ..utils.random_source import reduce_seed, scatter, substream
from .floor_plan import face_center
from ..config import (
    WINDOW_SPACING,
    WINDOW_EDGE_INSET,
    WINDOW_SIZE,
    FACADE_OFFSET,
    MAIN_DOOR_SIZE,
    SECONDARY_DOOR_SIZE,
    SECONDARY_DOOR_PROBABILITY,
    SECONDARY_DOOR_STEPS,
    DOOR_OFFSET_FRACTION,
    SEED_OFFSET_WINDOWS,
    WINDOW_FLOOR_STRIDE,
    WINDOW_FACE_STRIDE,
    SEED_OFFSET_MAIN_DOOR,
    SEED_OFFSET_SECONDARY_FLAG,
    SEED_OFFSET_SECONDARY_DOOR,
)

logger = logging.getLogger(__name__)

# Order in which faces are visited for every floor
WINDOW_FACE_ORDER: Tuple[Face, ...] = (Face.FRONT, Face.BACK, Face.LEFT, Face.RIGHT)


def window_slot_seed(seed: float, floor: int, face: Face, slot: int) -> float:
    """
    Offset seed of the stream deciding one window slot.

    Consecutive slot keys are scattered first; without that, neighbouring
    slots would draw values in a fixed arithmetic progression and the
    windows would come out in regular stripes.
    """
    key = floor * WINDOW_FLOOR_STRIDE + face.index * WINDOW_FACE_STRIDE + slot
    return reduce_seed(seed) + SEED_OFFSET_WINDOWS + scatter(key)


def slot_offsets(face_length: float) -> List[float]:
    """
    Offsets of the window slots along a face, measured from its centre.

    Slots start WINDOW_EDGE_INSET in from the left end and repeat every
    WINDOW_SPACING; a face of length L has int(L // 2) slots.
    """
    count = int(face_length // WINDOW_SPACING)
    start = -face_length / 2 + WINDOW_EDGE_INSET
    return [start + i * WINDOW_SPACING for i in range(count)]


def place_windows(
    floors: Sequence[FloorGeometry],
    window_density: float,
    seed: float
) -> List[FacadeOpening]:
    """
    Place windows on every face of every floor.

    Args:
        floors: Floor slabs from the floor plan
        window_density: Probability of a slot holding a window
        seed: Base configuration seed

    Returns:
        Windows ordered by floor, then face (front, back, left, right), then slot
    """
    windows: List[FacadeOpening] = []

    for slab in floors:
        for face in WINDOW_FACE_ORDER:
            for slot, offset in enumerate(slot_offsets(slab.face_length(face))):
                rng = substream(window_slot_seed(seed, slab.floor, face, slot), 0.0)
                if not rng.chance(window_density):
                    continue
                windows.append(FacadeOpening(
                    kind=OpeningKind.WINDOW,
                    position=_point_on_face(slab, face, offset, slab.position.y),
                    rotation=(0.0, face.rotation_y, 0.0),
                    size=WINDOW_SIZE,
                    face=face,
                    floor=slab.floor,
                ))

    logger.debug(f"Placed {len(windows)} windows on {len(floors)} floors")
    return windows


def place_doors(ground_floor: FloorGeometry, seed: float) -> List[FacadeOpening]:
    """
    Place the main door and, half of the time, a secondary door.

    The main door only reads its own stream; the secondary door decision
    and placement read two further streams, so enabling or disabling the
    secondary door never moves the main one.

    Args:
        ground_floor: Slab of floor 0
        seed: Base configuration seed

    Returns:
        List with the main door first, then the optional secondary door
    """
    main_rng = substream(seed, SEED_OFFSET_MAIN_DOOR)
    main_face = main_rng.choice(FACE_ORDER)
    main_fraction = main_rng.range(-DOOR_OFFSET_FRACTION, DOOR_OFFSET_FRACTION)

    doors = [_make_door(ground_floor, main_face, main_fraction, MAIN_DOOR_SIZE, True)]

    if substream(seed, SEED_OFFSET_SECONDARY_FLAG).chance(SECONDARY_DOOR_PROBABILITY):
        rng = substream(seed, SEED_OFFSET_SECONDARY_DOOR)
        steps = rng.randint(*SECONDARY_DOOR_STEPS)
        face = FACE_ORDER[(main_face.index + steps) % len(FACE_ORDER)]
        fraction = rng.range(-DOOR_OFFSET_FRACTION, DOOR_OFFSET_FRACTION)
        doors.append(_make_door(ground_floor, face, fraction, SECONDARY_DOOR_SIZE, False))

    logger.debug(
        f"Main door on {main_face.value}, "
        f"{'with' if len(doors) > 1 else 'no'} secondary door"
    )
    return doors


def _make_door(
    slab: FloorGeometry,
    face: Face,
    fraction: float,
    size: Tuple[float, float],
    is_main: bool
) -> FacadeOpening:
    """Door standing on the ground, centred `fraction` of the face length off-centre."""
    offset = fraction * slab.face_length(face)
    return FacadeOpening(
        kind=OpeningKind.DOOR,
        position=_point_on_face(slab, face, offset, size[1] / 2),
        rotation=(0.0, face.rotation_y, 0.0),
        size=size,
        face=face,
        floor=slab.floor,
        is_main=is_main,
    )


def _point_on_face(slab: FloorGeometry, face: Face, offset: float, y: float) -> Point3D:
    """Point just outside a face, `offset` along it from the face centre."""
    center = face_center(slab, face)
    nx, nz = face.normal
    # Front/back faces run along x, left/right faces along z
    tx, tz = (0.0, 1.0) if face.is_lateral else (1.0, 0.0)
    return Point3D(
        center.x + nx * FACADE_OFFSET + tx * offset,
        y,
        center.z + nz * FACADE_OFFSET + tz * offset,
    )
