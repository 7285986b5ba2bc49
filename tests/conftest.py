"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def small_world_config():
    """Configuration for a small 10x10 test world."""
    from watorsim.core import WorldConfig
    return WorldConfig(
        num_fish=30,
        num_shark=8,
        fish_breed=3,
        shark_breed=5,
        starve=3,
        grid_size=10,
    )


@pytest.fixture
def lively_world_config():
    """Configuration where both species usually survive for a while."""
    from watorsim.core import WorldConfig
    return WorldConfig(
        num_fish=500,
        num_shark=80,
        fish_breed=2,
        shark_breed=6,
        starve=6,
        grid_size=40,
    )


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)


@pytest.fixture
def random_source():
    """Reproducible engine random source."""
    from watorsim.core import NumpyRandomSource
    return NumpyRandomSource(seed=42)
