"""Tests for the generation pipeline and its stage caches."""

from dataclasses import replace
import json
import logging

from brutalist_buildings import BuildingConfig, BuildingPipeline, PipelineConfig, generate
from brutalist_buildings.models import OpeningKind


# =============================================================================
# Single building
# =============================================================================


class TestGenerate:
    """Tests for the end-to-end generation of one building."""

    def test_scenario_five_floor_tower(self, config) -> None:
        """floors=5, 10x10, density 0.5, seed 42."""
        result = generate(config)

        assert len(result.floors) == 5
        assert [slab.position.y for slab in result.floors] == [1.5, 4.5, 7.5, 10.5, 13.5]
        assert result.params.total_height == 15.0
        assert all(0 <= w.floor < 5 for w in result.windows)
        assert 1 <= len(result.doors) <= 2
        assert sum(1 for d in result.doors if d.is_main) == 1
        assert all(d.kind is OpeningKind.DOOR and d.floor == 0 for d in result.doors)
        assert 2 <= len(result.decorations) <= 5
        assert result.garden is None
        assert result.park is None
        assert result.city is None

    def test_pure_function_of_config(self, config) -> None:
        assert generate(config) == generate(config)

    def test_seed_changes_output(self, config) -> None:
        assert generate(config) != generate(replace(config, seed=43.0))

    def test_rooftop_garden_does_not_move_windows(self, config) -> None:
        """Enabling the garden reads its own stream only."""
        plain = generate(config)
        garden = generate(replace(config, rooftop_garden=True))
        assert garden.windows == plain.windows
        assert garden.doors == plain.doors
        assert garden.decorations == plain.decorations
        assert garden.floors == plain.floors
        assert 3 <= len(garden.garden.trees) <= 12

    def test_ground_park_around_building(self, config) -> None:
        result = generate(replace(config, ground_park=True))
        footprint = result.floors[0].footprint.expand(2.0)
        assert result.park is not None
        assert result.park.trees
        assert not any(footprint.contains(t.position.to_plan()) for t in result.park.trees)

    def test_city_park_avoids_every_building(self, config) -> None:
        result = generate(replace(config, city_mode=True, ground_park=True))
        blocked = [entry.footprint.expand(2.0) for entry in result.city]
        for tree in result.park.trees:
            point = tree.position.to_plan()
            assert not any(rect.contains(point) for rect in blocked)

    def test_stats(self, config) -> None:
        result = generate(replace(config, rooftop_garden=True, city_mode=True))
        stats = result.stats
        assert stats['floors'] == 5
        assert stats['windows'] == len(result.windows)
        assert stats['doors'] == len(result.doors)
        assert stats['garden_trees'] == len(result.garden.trees)
        assert stats['city_buildings'] == len(result.city)
        assert 'park_trees' not in stats

    def test_to_dict_is_json_serialisable(self, config) -> None:
        result = generate(replace(config, rooftop_garden=True, ground_park=True, city_mode=True))
        data = json.loads(json.dumps(result.to_dict()))
        assert len(data['floors']) == 5
        assert data['doors'][0]['kind'] == 'door'
        assert data['doors'][0]['face'] in ('front', 'right', 'back', 'left')
        assert data['decorations'][0]['kind'] in ('band', 'pillar', 'slab', 'box')
        assert data['config']['seed'] == 42.0

    def test_result_lists_are_copies(self, config) -> None:
        """Mutating a result does not leak into the next one."""
        pipeline = BuildingPipeline()
        first = pipeline.generate(config)
        first.windows.clear()
        second = pipeline.generate(config)
        assert second.windows


# =============================================================================
# Stage caching
# =============================================================================


class TestBuildingPipeline:
    """Tests for per-stage memoization."""

    def test_window_density_only_recomputes_windows(self, config) -> None:
        pipeline = BuildingPipeline(PipelineConfig())
        pipeline.generate(config)
        pipeline.generate(replace(config, window_density=0.9))

        assert pipeline.recomputed['params'] == 1
        assert pipeline.reused['params'] == 1
        assert pipeline.recomputed['floor_plan'] == 1
        assert pipeline.recomputed['windows'] == 2
        assert pipeline.reused['doors'] == 1
        assert pipeline.reused['decorations'] == 1

    def test_seed_change_recomputes_everything(self, config) -> None:
        pipeline = BuildingPipeline(PipelineConfig())
        pipeline.generate(config)
        pipeline.generate(replace(config, seed=7.0))
        for stage in ('params', 'floor_plan', 'windows', 'doors', 'decorations'):
            assert pipeline.recomputed[stage] == 2
        assert pipeline.reused == {}

    def test_toggling_garden_reuses_building(self, config) -> None:
        pipeline = BuildingPipeline(PipelineConfig())
        plain = pipeline.generate(config)
        garden = pipeline.generate(replace(config, rooftop_garden=True))
        assert pipeline.reused['windows'] == 1
        assert pipeline.recomputed['garden'] == 1
        assert garden.windows == plain.windows

    def test_memoized_matches_fresh(self, config) -> None:
        """Cached stages give the same result as a from-scratch run."""
        pipeline = BuildingPipeline(PipelineConfig())
        pipeline.generate(config)
        changed = replace(config, window_density=0.2, rooftop_garden=True)
        assert pipeline.generate(changed) == generate(changed)

    def test_memoize_off(self, config) -> None:
        pipeline = BuildingPipeline(PipelineConfig(memoize=False))
        pipeline.generate(config)
        pipeline.generate(config)
        assert pipeline.recomputed['params'] == 2
        assert pipeline.reused == {}

    def test_reset(self, config) -> None:
        pipeline = BuildingPipeline(PipelineConfig())
        pipeline.generate(config)
        pipeline.reset()
        assert pipeline.recomputed == {}
        pipeline.generate(config)
        assert pipeline.recomputed['params'] == 1


# =============================================================================
# Whole site
# =============================================================================


class TestGenerateSite:
    """Tests for generating every building of a city."""

    def test_single_building_site(self, config) -> None:
        site = BuildingPipeline().generate_site(config)
        assert len(site) == 1
        entry, result = site[0]
        assert entry.is_center
        assert result == generate(config)

    def test_city_site(self, config) -> None:
        city_config = replace(config, city_mode=True)
        site = BuildingPipeline().generate_site(city_config)
        central = site[0][1]
        assert len(site) == len(central.city)
        assert site[0][0].is_center
        for entry, result in site[1:]:
            assert result.config == entry.config
            assert len(result.floors) == entry.config.floors
            assert result.city is None


# =============================================================================
# Logging
# =============================================================================


class TestStageLogging:
    """Tests for the per-stage debug log."""

    LOGGER = 'brutalist_buildings.generators.building_generator'

    def test_verbose_logs_stages(self, config, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger=self.LOGGER)
        pipeline = BuildingPipeline(PipelineConfig(verbose=True))
        pipeline.generate(config)
        pipeline.generate(config)
        assert 'Stage params: recomputed' in caplog.text
        assert 'Stage params: cached' in caplog.text

    def test_quiet_by_default(self, config, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger=self.LOGGER)
        BuildingPipeline(PipelineConfig()).generate(config)
        assert 'Stage params' not in caplog.text
