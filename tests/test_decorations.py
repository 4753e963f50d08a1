"""Tests for decorative element generation."""

import math

from brutalist_buildings.generators.decorations import generate_decorations
from brutalist_buildings.models import Band, Box, DecorationKind, Pillar, Slab

KIND_OF = {Band: DecorationKind.BAND, Pillar: DecorationKind.PILLAR,
           Slab: DecorationKind.SLAB, Box: DecorationKind.BOX}


class TestGenerateDecorations:
    """Tests for bands, pillars, slabs and boxes."""

    def test_count_between_two_and_five(self, plain_params) -> None:
        counts = {len(generate_decorations(plain_params(seed=float(s)))) for s in range(60)}
        assert counts <= {2, 3, 4, 5}
        assert len(counts) > 1

    def test_kind_matches_variant(self, plain_params) -> None:
        for seed in range(30):
            for element in generate_decorations(plain_params(seed=float(seed))):
                assert element.kind is KIND_OF[type(element)]

    def test_deterministic(self, plain_params) -> None:
        params = plain_params(seed=8.0)
        assert generate_decorations(params) == generate_decorations(params)

    def test_field_ranges(self, plain_params) -> None:
        """Elements are sized from the footprint and total height."""
        params = plain_params(floors=10, width=12.0, depth=8.0)
        total = params.total_height
        for seed in range(40):
            for element in generate_decorations(plain_params(floors=10, width=12.0, depth=8.0, seed=float(seed))):
                if isinstance(element, Band):
                    assert total * 0.2 <= element.position.y < total * 0.8
                    assert 13.0 <= element.width < 15.0
                    assert 0.5 <= element.height < 1.5
                elif isinstance(element, Pillar):
                    assert element.position.y == total / 2
                    assert -6.0 <= element.position.x < 6.0
                    assert total * 0.5 <= element.height < total * 1.2
                elif isinstance(element, Slab):
                    assert total * 0.3 <= element.position.y < total * 0.9
                    assert 0.0 <= element.rotation_y < 2 * math.pi
                else:
                    assert 1.0 <= element.position.y < total * 0.5
                    assert 2.0 <= element.height < 4.0
                    assert 0.0 <= element.rotation_y < 2 * math.pi

    def test_single_floor_boxes(self, plain_params) -> None:
        """Boxes on a one-floor building still get a valid height."""
        for seed in range(40):
            for element in generate_decorations(plain_params(floors=1, seed=float(seed))):
                if isinstance(element, Box):
                    assert 1.0 <= element.position.y <= 1.5
