"""
Pytest configuration and fixtures for PGA2D tests.
"""

import pytest
import torch

from pga2d.pga.algebra import Multivector


@pytest.fixture
def cpu_device():
    """Force CPU device for consistent testing."""
    return torch.device('cpu')


@pytest.fixture
def batch_size():
    """Default batch size for tests."""
    return 4


@pytest.fixture
def mv_a():
    """Multivector with coefficients 1..8."""
    return Multivector(torch.arange(1.0, 9.0))


@pytest.fixture
def mv_b():
    """Multivector with coefficients 9..16."""
    return Multivector(torch.arange(9.0, 17.0))


@pytest.fixture
def generator():
    """Seeded random generator so failures are reproducible."""
    return torch.Generator().manual_seed(2024)


@pytest.fixture
def random_mv(generator):
    """Factory for random float64 multivectors with a given batch shape."""
    def make(*batch_shape):
        return Multivector(torch.randn(*batch_shape, 8, generator=generator, dtype=torch.float64))
    return make


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
