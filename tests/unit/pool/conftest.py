"""Fixtures for the population tests."""

import random
import pytest
from neuroai.genotype import generate_random_lobe
from neuroai.pool import Generation


@pytest.fixture
def population():
    """Six homologous random networks (2 inputs, one hidden layer of 3, 1 output), scored 0..5."""
    lobes = [generate_random_lobe(['a', 'b'], ['y'], 1, 3, rng=random.Random(seed)) for seed in range(6)]
    return Generation(lobes, [0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
