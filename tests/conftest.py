"""Pytest configuration and shared fixtures."""

import pytest
import random
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def set_random_seeds():
    """Set random seeds for reproducibility."""
    np.random.seed(42)
    random.seed(42)
    yield
    np.random.seed(None)
    random.seed(None)


@pytest.fixture
def simple_lobe():
    """
    Two layers: one input node passing its input through,
    one output node computing 2.0 * x + 0.5 (all linear).
    """
    from neuroai.activations import ActivationFunction
    from neuroai.genotype import Node, Layer, Lobe

    input_layer  = Layer([Node({0: 1.0}, 0.0)], ActivationFunction.LINEAR)
    output_layer = Layer([Node({0: 2.0}, 0.5)], ActivationFunction.LINEAR)
    return Lobe([input_layer, output_layer], ['x'], ['y'])


@pytest.fixture
def random_lobe():
    """Randomly initialized network: 3 inputs, 2 hidden layers of 4 nodes, 2 outputs."""
    from neuroai.genotype import generate_random_lobe
    return generate_random_lobe(['a', 'b', 'c'], ['out1', 'out2'], 2, 4, rng=random.Random(7))
