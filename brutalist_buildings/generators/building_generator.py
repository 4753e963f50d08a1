"""
Building generator orchestrator for Brutalist Buildings Generator.

Runs the stages in order (params -> floor plan -> facade, decorations,
gardens -> city) and collects their output in a GenerationResult.

BuildingPipeline keeps the last result of every stage keyed by that
stage's exact inputs, so calling generate() after a configuration change
only recomputes the stages that depend on what changed. generate() at
module level runs a fresh pipeline and is a pure function of the config.
With PipelineConfig.verbose set, every stage logs whether it was cached.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple
import logging

from ..models.building import BuildingConfig, BuildingParams
from ..models.geometry import Point3D
from ..models.layout import (
    CityEntry,
    DecorativeElement,
    FacadeOpening,
    FloorExtension,
    FloorGeometry,
    FloorPlan,
    GardenLayout,
)
from ..config import PipelineConfig, DEFAULT_CONFIG
from .params import derive_building_params
from .floor_plan import build_floor_plan
from .facade import place_doors, place_windows
from .decorations import generate_decorations
from .garden import generate_ground_park, generate_rooftop_garden
from .site_layout import generate_city_layout, park_half_size

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Everything the renderer needs to draw one building (and its site)."""
    config: BuildingConfig
    params: BuildingParams
    floors: List[FloorGeometry]
    extensions: List[FloorExtension]
    windows: List[FacadeOpening]
    doors: List[FacadeOpening]
    decorations: List[DecorativeElement]
    garden: Optional[GardenLayout] = None
    park: Optional[GardenLayout] = None
    city: Optional[List[CityEntry]] = None
    stats: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe nested dict (enums replaced by their values)."""
        return _jsonable(asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


@dataclass
class StageCache:
    """Last (key, value) of one stage."""
    key: Optional[Hashable] = None
    value: Any = None
    filled: bool = False


class BuildingPipeline:
    """
    Memoizing generation pipeline.

    Each stage is recomputed only when its input tuple differs from the
    one it was last computed with. Only the latest value is kept; results
    of superseded configurations are simply dropped.

    Attributes:
        config: Runtime configuration
        recomputed: Count of stage recomputations per stage name
        reused: Count of cache hits per stage name
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self._caches: Dict[str, StageCache] = {}
        self.recomputed: Dict[str, int] = {}
        self.reused: Dict[str, int] = {}

    def reset(self) -> None:
        """Drop every cached stage result and counter."""
        self._caches.clear()
        self.recomputed.clear()
        self.reused.clear()

    def _stage(self, name: str, key: Hashable, compute: Callable[[], Any]) -> Any:
        cache = self._caches.setdefault(name, StageCache())
        if self.config.memoize and cache.filled and cache.key == key:
            self.reused[name] = self.reused.get(name, 0) + 1
            if self.config.verbose:
                logger.debug(f"Stage {name}: cached")
            return cache.value

        value = compute()
        cache.key, cache.value, cache.filled = key, value, True
        self.recomputed[name] = self.recomputed.get(name, 0) + 1
        if self.config.verbose:
            logger.debug(f"Stage {name}: recomputed")
        return value

    def generate(self, config: BuildingConfig) -> GenerationResult:
        """
        Generate the full primitive set for a configuration.

        Args:
            config: Building configuration

        Returns:
            GenerationResult; lists are fresh copies, safe for the caller to keep
        """
        params: BuildingParams = self._stage(
            'params',
            (config.floors, config.width, config.depth, config.seed),
            lambda: derive_building_params(config),
        )

        plan: FloorPlan = self._stage(
            'floor_plan', params, lambda: build_floor_plan(params)
        )

        windows = self._stage(
            'windows',
            (config.window_density, plan.floors, config.seed),
            lambda: place_windows(plan.floors, config.window_density, config.seed),
        )

        doors = self._stage(
            'doors',
            (plan.ground_floor, config.seed),
            lambda: place_doors(plan.ground_floor, config.seed),
        )

        decorations = self._stage(
            'decorations', params, lambda: generate_decorations(params)
        )

        garden = None
        if config.rooftop_garden:
            garden = self._stage(
                'garden',
                (params, plan.top_floor),
                lambda: generate_rooftop_garden(params, plan.top_floor),
            )

        city = None
        if config.city_mode:
            city = self._stage(
                'city',
                (config, self.config.city_size),
                lambda: generate_city_layout(config, self.config.city_size),
            )

        park = None
        if config.ground_park:
            footprints = (
                tuple(entry.footprint for entry in city)
                if city is not None
                else (plan.ground_floor.footprint,)
            )
            half_size = park_half_size(config, self.config.city_size)
            park = self._stage(
                'park',
                (config.seed, half_size, footprints),
                lambda: generate_ground_park(config.seed, half_size, footprints),
            )

        result = GenerationResult(
            config=config,
            params=params,
            floors=list(plan.floors),
            extensions=list(plan.extensions),
            windows=list(windows),
            doors=list(doors),
            decorations=list(decorations),
            garden=_copy_layout(garden),
            park=_copy_layout(park),
            city=list(city) if city is not None else None,
        )
        result.stats = _collect_stats(result)

        logger.info(
            f"Generated '{config.building_name}' seed={config.seed}: "
            f"{result.stats['floors']} floors, {result.stats['windows']} windows, "
            f"{result.stats['doors']} doors, {result.stats['decorations']} decorations"
        )
        return result

    def generate_site(self, config: BuildingConfig) -> List[Tuple[CityEntry, GenerationResult]]:
        """
        Generate the central building and, in city mode, every satellite.

        Satellites are generated with a separate non-memoizing pipeline so
        they do not evict the central building's stage caches.

        Returns:
            (entry, result) pairs, central building first
        """
        central = self.generate(config)
        if central.city is None:
            center = CityEntry(position=Point3D(0.0, 0.0, 0.0), config=config, is_center=True)
            return [(center, central)]

        satellites = BuildingPipeline(PipelineConfig(
            city_size=self.config.city_size,
            memoize=False,
            verbose=self.config.verbose,
        ))
        site = [(central.city[0], central)]
        for entry in central.city[1:]:
            site.append((entry, satellites.generate(entry.config)))
        return site


def _copy_layout(layout: Optional[GardenLayout]) -> Optional[GardenLayout]:
    if layout is None:
        return None
    return GardenLayout(
        trees=list(layout.trees),
        flower_beds=list(layout.flower_beds),
        paths=list(layout.paths),
        benches=list(layout.benches),
    )


def _collect_stats(result: GenerationResult) -> Dict[str, int]:
    stats = {
        'floors': len(result.floors),
        'extensions': len(result.extensions),
        'windows': len(result.windows),
        'doors': len(result.doors),
        'decorations': len(result.decorations),
        'setbacks': len(result.params.setbacks),
        'overhangs': len(result.params.overhangs),
        'core_shaft': 1 if result.params.core_shaft else 0,
    }
    if result.garden is not None:
        stats['garden_trees'] = len(result.garden.trees)
        stats['flower_beds'] = len(result.garden.flower_beds)
    if result.park is not None:
        stats['park_trees'] = len(result.park.trees)
        stats['benches'] = len(result.park.benches)
    if result.city is not None:
        stats['city_buildings'] = len(result.city)
    return stats


def generate(config: BuildingConfig) -> GenerationResult:
    """
    Generate a building from scratch.

    Pure function of the configuration: two calls with equal configs
    return equal results.
    """
    return BuildingPipeline(PipelineConfig(memoize=False)).generate(config)
