"""Configuration for tests.

Shared fixtures for the ksgte test suite. Point sets come from the data
generators in the package itself so that tests and examples agree.
"""

import numpy as np
import pytest

from ksgte.utils.data import create_coupled_gaussian_points


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")


@pytest.fixture
def independent_points():
    """1000 points, source independent of target.

    Rows: target future, target present, source present.
    """
    return create_coupled_gaussian_points(n_points=1000, rho=0.0, seed=0)


@pytest.fixture
def coupled_points():
    """Small coupled point set for fast deterministic checks."""
    return create_coupled_gaussian_points(n_points=300, rho=0.6, seed=1)


@pytest.fixture
def four_row_points():
    """300 points with an extra conditioning row appended."""
    rng = np.random.default_rng(2)
    pts = create_coupled_gaussian_points(n_points=300, rho=0.5, seed=2)
    return np.vstack([pts, rng.standard_normal(300)])
