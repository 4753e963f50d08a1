"""Tests for window and door placement."""

import pytest

from brutalist_buildings.config import MAX_BUILDING_DIMENSION, MAX_FLOORS
from brutalist_buildings.generators.facade import (
    WINDOW_FACE_ORDER,
    place_doors,
    place_windows,
    slot_offsets,
    window_slot_seed,
)
from brutalist_buildings.generators.floor_plan import build_floor, build_floor_plan
from brutalist_buildings.generators.params import derive_building_params
from brutalist_buildings.models import BuildingConfig, Face, OpeningKind, Setback


# =============================================================================
# Windows
# =============================================================================


class TestSlotOffsets:
    """Tests for the window grid along a face."""

    def test_ten_unit_face(self) -> None:
        assert slot_offsets(10.0) == [-4.0, -2.0, 0.0, 2.0, 4.0]

    def test_short_face_has_no_slots(self) -> None:
        assert slot_offsets(1.5) == []

    def test_count_is_half_the_length(self) -> None:
        for length in (2.0, 3.5, 7.0, 12.9):
            assert len(slot_offsets(length)) == int(length // 2)


class TestPlaceWindows:
    """Tests for per-slot window decisions."""

    def test_full_density_fills_every_slot(self, plain_params) -> None:
        """10x6 floors: 5 + 5 + 3 + 3 slots per floor."""
        plan = build_floor_plan(plain_params(floors=3, width=10.0, depth=6.0))
        windows = place_windows(plan.floors, 1.0, 5.0)
        assert len(windows) == 48

    def test_zero_density_places_nothing(self, plain_params) -> None:
        plan = build_floor_plan(plain_params(floors=3))
        assert place_windows(plan.floors, 0.0, 5.0) == []

    def test_windows_stay_on_existing_floors(self) -> None:
        for seed in range(20):
            params = derive_building_params(BuildingConfig(floors=6, seed=float(seed)))
            plan = build_floor_plan(params)
            for window in place_windows(plan.floors, 0.5, float(seed)):
                assert 0 <= window.floor < 6
                assert window.kind is OpeningKind.WINDOW
                assert window.size == (1.5, 1.5)
                assert window.is_main is None

    def test_order_is_floor_then_face(self, plain_params) -> None:
        plan = build_floor_plan(plain_params(floors=3))
        windows = place_windows(plan.floors, 1.0, 2.0)
        keys = [(w.floor, WINDOW_FACE_ORDER.index(w.face)) for w in windows]
        assert keys == sorted(keys)

    def test_windows_sit_on_their_face(self, plain_params) -> None:
        """Window centres are FACADE_OFFSET outside the face, rotated onto it."""
        plan = build_floor_plan(plain_params(floors=1, width=10.0, depth=6.0))
        for window in place_windows(plan.floors, 1.0, 3.0):
            assert window.rotation == (0.0, window.face.rotation_y, 0.0)
            assert window.position.y == 1.5
            if window.face is Face.FRONT:
                assert window.position.z == pytest.approx(3.1)
            elif window.face is Face.BACK:
                assert window.position.z == pytest.approx(-3.1)
            elif window.face is Face.RIGHT:
                assert window.position.x == pytest.approx(5.1)
            else:
                assert window.position.x == pytest.approx(-5.1)

    def test_density_thins_out_windows(self, plain_params) -> None:
        plan = build_floor_plan(plain_params(floors=10, width=20.0, depth=20.0))
        full = len(place_windows(plan.floors, 1.0, 7.0))
        half = len(place_windows(plan.floors, 0.5, 7.0))
        assert 0 < half < full

    def test_slot_decisions_are_independent(self, plain_params) -> None:
        """Shrinking an upper floor leaves the windows below untouched."""
        plain = plain_params(floors=3, width=12.0, depth=12.0)
        shrunk = plain_params(
            floors=3, width=12.0, depth=12.0,
            setbacks=(Setback(floor=2, amount=4.0),),
        )
        before = [w for w in place_windows(build_floor_plan(plain).floors, 0.5, 11.0) if w.floor < 2]
        after = [w for w in place_windows(build_floor_plan(shrunk).floors, 0.5, 11.0) if w.floor < 2]
        assert before == after

    def test_slot_seeds_are_distinct(self) -> None:
        seeds = {
            window_slot_seed(42.0, floor, face, slot)
            for floor in range(10)
            for face in WINDOW_FACE_ORDER
            for slot in range(10)
        }
        assert len(seeds) == 400

    def test_slot_seeds_distinct_on_widest_faces(self) -> None:
        """The largest allowed face still gives every slot its own seed."""
        slots = len(slot_offsets(MAX_BUILDING_DIMENSION + 4.0))
        floors = (0, MAX_FLOORS - 1)
        seeds = {
            window_slot_seed(42.0, floor, face, slot)
            for floor in floors
            for face in WINDOW_FACE_ORDER
            for slot in range(slots)
        }
        assert len(seeds) == len(floors) * len(WINDOW_FACE_ORDER) * slots


# =============================================================================
# Doors
# =============================================================================


class TestPlaceDoors:
    """Tests for the main and secondary doors."""

    def test_one_main_door_on_ground_floor(self) -> None:
        for seed in range(40):
            ground = build_floor_plan(
                derive_building_params(BuildingConfig(seed=float(seed)))
            ).ground_floor
            doors = place_doors(ground, float(seed))
            assert 1 <= len(doors) <= 2
            assert [d.is_main for d in doors].count(True) == 1
            assert doors[0].is_main
            assert all(d.floor == 0 for d in doors)
            assert all(d.kind is OpeningKind.DOOR for d in doors)

    def test_secondary_door_is_optional(self) -> None:
        ground = build_floor(
            derive_building_params(BuildingConfig(floors=1, seed=0.0)), 0
        )
        counts = {len(place_doors(ground, float(seed))) for seed in range(40)}
        assert counts == {1, 2}

    def test_secondary_door_on_another_face(self) -> None:
        for seed in range(40):
            ground = build_floor(derive_building_params(BuildingConfig(seed=0.0)), 0)
            doors = place_doors(ground, float(seed))
            if len(doors) == 2:
                assert doors[1].face is not doors[0].face
                assert doors[1].size == (1.5, 2.5)

    def test_doors_stand_on_the_ground(self) -> None:
        ground = build_floor(derive_building_params(BuildingConfig(seed=0.0)), 0)
        for seed in range(10):
            for door in place_doors(ground, float(seed)):
                assert door.position.y == door.size[1] / 2
                assert door.rotation == (0.0, door.face.rotation_y, 0.0)

    def test_door_offset_within_middle_half(self, plain_params) -> None:
        """Door centres stay within a quarter face length of the face centre."""
        ground = build_floor(plain_params(floors=1, width=12.0, depth=8.0), 0)
        for seed in range(30):
            for door in place_doors(ground, float(seed)):
                along = door.position.z if door.face.is_lateral else door.position.x
                half_span = ground.face_length(door.face) * 0.25
                assert -half_span <= along <= half_span