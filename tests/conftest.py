"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def empty_grid():
    """An all-dead 10x10 grid."""
    from lifesim.core import Grid
    return Grid(10, 10)


@pytest.fixture
def glider_grid():
    """5x5 grid holding a glider in its top-left corner."""
    from lifesim.core import Grid
    from lifesim.patterns import GLIDER, place_pattern
    return Grid(5, 5, place_pattern(GLIDER, 5, 5))


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
