"""
Pytest configuration and fixtures for pga-axioms tests.
"""

import pytest
import torch

from pga_axioms.folding import Paper
from pga_axioms.pga.algebra import Multivector


@pytest.fixture
def generator():
    """Seeded random generator so random multivectors are reproducible."""
    return torch.Generator().manual_seed(0)


@pytest.fixture
def random_multivector(generator):
    """Factory for random multivectors with coefficients in [-1, 1]."""
    def make(*batch_shape):
        components = torch.rand(*batch_shape, 8, generator=generator, dtype=torch.float64)
        return Multivector(components * 2 - 1)
    return make


@pytest.fixture
def paper():
    """The 375 x 375 sheet centred on a 500 x 500 canvas."""
    return Paper.centered(500, 500)


@pytest.fixture
def unit_square():
    """Unit square in ring order."""
    return ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
