"""Shared fixtures for the Brutalist Buildings Generator tests."""

import logging

import pytest

from brutalist_buildings.models.building import BuildingConfig, BuildingParams


@pytest.fixture
def config() -> BuildingConfig:
    """Default five-floor tower with a fixed seed."""
    return BuildingConfig(floors=5, width=10.0, depth=10.0, window_density=0.5, seed=42.0)


@pytest.fixture
def plain_params():
    """Factory for params without setbacks, overhangs or core shaft."""

    def make(floors: int = 5, width: float = 10.0, depth: float = 10.0, seed: float = 1.0,
             **kwargs) -> BuildingParams:
        return BuildingParams(floors=floors, width=width, depth=depth, seed=seed, **kwargs)

    return make


@pytest.fixture
def restore_root_logging():
    """Drop the console handler the CLI installs and restore the root level."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
