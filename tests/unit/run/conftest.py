"""Fixtures for the configuration and trial tests."""

import pytest


@pytest.fixture
def config_file(tmp_path):
    """A complete configuration file."""
    path = tmp_path / "config.ini"
    path.write_text(
        "[POPULATION_INIT]\n"
        "population_size   = 12\n"
        "input_names       = x, y, z\n"
        "output_names      = out\n"
        "num_hidden_layers = 2\n"
        "hidden_layer_size = 5\n"
        "input_activation  = linear\n"
        "hidden_activation = tanh\n"
        "output_activation = softmax\n"
        "\n"
        "[BREEDING]\n"
        "num_breeding       = 4\n"
        "offspring_per_pair = 2\n"
        "num_survivors      = 3\n"
        "\n"
        "[MUTATION]\n"
        "num_weight_mutations  = 6\n"
        "num_bias_mutations    = 2\n"
        "max_weight_delta      = 0.3\n"
        "max_bias_delta        = 0.1\n"
        "layer_add_probability = 0.25\n"
        "\n"
        "[TERMINATION]\n"
        "fitness_termination_check = True\n"
        "fitness_criterion         = mean\n"
        "fitness_threshold         = 0.95\n"
        "max_number_generations    = 40\n"
    )
    return str(path)


@pytest.fixture
def minimal_config_file(tmp_path):
    """A configuration file holding only the required options."""
    path = tmp_path / "minimal.ini"
    path.write_text(
        "[POPULATION_INIT]\n"
        "population_size = 8\n"
        "input_names     = a\n"
        "output_names    = b\n"
        "\n"
        "[BREEDING]\n"
        "num_breeding       = 3\n"
        "offspring_per_pair = 1\n"
        "\n"
        "[MUTATION]\n"
        "num_weight_mutations = 1\n"
        "num_bias_mutations   = 1\n"
        "max_weight_delta     = 0.5\n"
        "max_bias_delta       = 0.5\n"
        "\n"
        "[TERMINATION]\n"
        "max_number_generations = 10\n"
    )
    return str(path)
