"""
Shared fixtures for integration tests.
"""

import pytest
from neuroai.run.config import Config


@pytest.fixture
def xor_inputs():
    """XOR inputs."""
    return [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]


@pytest.fixture
def xor_outputs():
    """XOR expected outputs."""
    return [[0.0], [1.0], [1.0], [0.0]]


@pytest.fixture
def xor_config():
    """A small XOR configuration, built from the defaults."""
    config = Config(None)
    config.population_size = 30
    config.input_names = "a, b"
    config.output_names = "xor"
    config.num_hidden_layers = 1
    config.hidden_layer_size = 4
    config.hidden_activation = "tanh"
    config.output_activation = "sigmoid"
    config.num_breeding = 6
    config.offspring_per_pair = 2
    config.num_survivors = 3
    config.num_weight_mutations = 4
    config.num_bias_mutations = 2
    config.max_weight_delta = 0.5
    config.max_bias_delta = 0.5
    config.max_number_generations = 25
    return config

