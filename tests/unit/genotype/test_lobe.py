"""
Unit tests for the Lobe class and random network generation.

Tests src/neuroai/genotype/lobe.py
"""

import random
import pytest
import numpy as np
from neuroai.activations import ActivationFunction
from neuroai.errors import ShapeMismatchError
from neuroai.genotype.layer import Layer
from neuroai.genotype.lobe import Lobe, generate_random_layer, generate_random_lobe
from neuroai.genotype.node import Node


class TestLobeEvaluate:
    """Test the forward pass through a network."""

    def test_linear_two_layer_network(self, simple_lobe):
        """Input 3.0, weight 2.0, bias 0.5: output 6.5."""
        assert simple_lobe.evaluate([3.0]) == [6.5]

    def test_returns_list_of_floats(self, simple_lobe):
        result = simple_lobe.evaluate(np.array([1.0]))
        assert isinstance(result, list)
        assert all(isinstance(x, float) for x in result)

    def test_multi_layer(self):
        layers = [
            Layer([Node({0: 1.0}), Node({1: 1.0})]),
            Layer([Node({0: 1.0, 1: 1.0}), Node({0: 1.0, 1: -1.0})], ActivationFunction.RECTIFIED_LINEAR),
            Layer([Node({0: 1.0, 1: 1.0}, 1.0)]),
        ]
        lobe = Lobe(layers, ['a', 'b'], ['out'])
        # hidden: relu([5, -1]) = [5, 0], output: 5 + 0 + 1
        assert lobe.evaluate([2.0, 3.0]) == [6.0]

    def test_output_length(self, random_lobe):
        assert len(random_lobe.evaluate([0.1, 0.2, 0.3])) == 2

    def test_too_few_inputs(self, simple_lobe):
        with pytest.raises(ShapeMismatchError):
            simple_lobe.evaluate([])

    def test_too_many_inputs(self, simple_lobe):
        with pytest.raises(ShapeMismatchError):
            simple_lobe.evaluate([1.0, 2.0])

    def test_two_dimensional_input(self, simple_lobe):
        with pytest.raises(ShapeMismatchError):
            simple_lobe.evaluate([[1.0]])

    def test_no_layers(self):
        with pytest.raises(ValueError):
            Lobe().evaluate([])

    def test_deterministic(self, random_lobe):
        assert random_lobe.evaluate([0.5, -0.5, 1.0]) == random_lobe.evaluate([0.5, -0.5, 1.0])

    def test_evaluate_leaves_network_unchanged(self, random_lobe):
        before = random_lobe.clone()
        random_lobe.evaluate([0.5, -0.5, 1.0])
        random_lobe.evaluate([3.0, 0.0, -2.0])
        assert random_lobe == before
        assert random_lobe.layer_sizes == before.layer_sizes

    def test_failed_evaluate_leaves_network_unchanged(self, random_lobe):
        before = random_lobe.clone()
        with pytest.raises(ShapeMismatchError):
            random_lobe.evaluate([0.5, -0.5])
        assert random_lobe == before
        assert random_lobe.evaluate([0.5, -0.5, 1.0]) == before.evaluate([0.5, -0.5, 1.0])


class TestLobeSnapshots:
    """Test the recording of evaluations."""

    def test_evaluate_appends_snapshot(self, simple_lobe):
        simple_lobe.evaluate([3.0])
        simple_lobe.evaluate([0.0])
        assert len(simple_lobe.snapshots) == 2
        assert simple_lobe.snapshots[0].inputs == [3.0]
        assert simple_lobe.snapshots[0].outputs == [6.5]
        assert simple_lobe.snapshots[1].outputs == [0.5]

    def test_failed_evaluation_not_recorded(self, simple_lobe):
        with pytest.raises(ShapeMismatchError):
            simple_lobe.evaluate([1.0, 2.0])
        assert simple_lobe.snapshots == []

    def test_set_desired_outputs_latest(self, simple_lobe):
        simple_lobe.evaluate([1.0])
        simple_lobe.evaluate([2.0])
        simple_lobe.set_desired_outputs([4.0])
        assert simple_lobe.snapshots[1].desired_outputs == [4.0]
        assert simple_lobe.snapshots[0].desired_outputs == []

    def test_set_desired_outputs_by_index(self, simple_lobe):
        simple_lobe.evaluate([1.0])
        simple_lobe.evaluate([2.0])
        simple_lobe.set_desired_outputs([3.0], index=0)
        assert simple_lobe.snapshots[0].desired_outputs == [3.0]

    def test_set_desired_outputs_without_snapshots(self, simple_lobe):
        with pytest.raises(IndexError):
            simple_lobe.set_desired_outputs([1.0])

    def test_set_desired_outputs_index_out_of_range(self, simple_lobe):
        simple_lobe.evaluate([1.0])
        with pytest.raises(IndexError):
            simple_lobe.set_desired_outputs([1.0], index=1)

    def test_clear_snapshots(self, simple_lobe):
        simple_lobe.evaluate([1.0])
        simple_lobe.clear_snapshots()
        assert simple_lobe.snapshots == []

    def test_snapshots_ignored_by_equality_and_clone(self, simple_lobe):
        copy = simple_lobe.clone()
        simple_lobe.evaluate([1.0])
        assert copy == simple_lobe
        assert simple_lobe.clone().snapshots == []


class TestLobeCopyAndSerialization:

    def test_properties(self, random_lobe):
        assert random_lobe.num_inputs == 3
        assert random_lobe.num_outputs == 2
        assert random_lobe.layer_sizes == [3, 4, 4, 2]

    def test_clone_is_deep(self, simple_lobe):
        copy = simple_lobe.clone()
        copy.layers[1].nodes[0].weights[0] = -2.0
        copy.input_names.append('z')
        assert simple_lobe.evaluate([3.0]) == [6.5]
        assert simple_lobe.input_names == ['x']

    def test_dict_round_trip(self, random_lobe):
        random_lobe.evaluate([1.0, 2.0, 3.0])
        lobe_dict = random_lobe.to_dict()
        assert "snapshots" not in lobe_dict
        assert lobe_dict["input_names"] == ['a', 'b', 'c']
        restored = Lobe.from_dict(lobe_dict)
        assert restored == random_lobe
        assert restored.snapshots == []

    def test_dict_layout(self, simple_lobe):
        assert simple_lobe.to_dict() == {
            "input_names": ['x'],
            "output_names": ['y'],
            "layers": [
                {"activation": "linear", "clamped": False,
                 "nodes": [{"bias": 0.0, "weights": [{"input": 0, "weight": 1.0}]}]},
                {"activation": "linear", "clamped": False,
                 "nodes": [{"bias": 0.5, "weights": [{"input": 0, "weight": 2.0}]}]},
            ]
        }


class TestRandomGeneration:
    """Test generate_random_layer() and generate_random_lobe()."""

    def test_random_layer_fully_connected(self):
        layer = generate_random_layer(3, ActivationFunction.TANH, 5, random.Random(1))
        assert len(layer) == 3
        assert layer.activation is ActivationFunction.TANH
        for node in layer.nodes:
            assert node.input_indices == [0, 1, 2, 3, 4]
            assert -1.0 <= node.bias <= 1.0
            assert all(-1.0 <= w <= 1.0 for w in node.weights.values())

    def test_random_lobe_structure(self):
        lobe = generate_random_lobe(['a', 'b'], ['y'], 2, 5,
                                    ActivationFunction.LINEAR,
                                    ActivationFunction.RECTIFIED_LINEAR,
                                    ActivationFunction.SIGMOID,
                                    rng=random.Random(3))
        assert lobe.layer_sizes == [2, 5, 5, 1]
        assert [layer.activation for layer in lobe.layers] == [
            ActivationFunction.LINEAR,
            ActivationFunction.RECTIFIED_LINEAR,
            ActivationFunction.RECTIFIED_LINEAR,
            ActivationFunction.SIGMOID,
        ]
        assert lobe.layers[1].nodes[0].input_indices == [0, 1]
        assert lobe.layers[3].nodes[0].input_indices == [0, 1, 2, 3, 4]

    def test_no_hidden_layers(self):
        lobe = generate_random_lobe(['a'], ['y', 'z'], 0, 0)
        assert lobe.layer_sizes == [1, 2]

    def test_seeded_rng_is_reproducible(self):
        a = generate_random_lobe(['a', 'b'], ['y'], 1, 3, rng=random.Random(11))
        b = generate_random_lobe(['a', 'b'], ['y'], 1, 3, rng=random.Random(11))
        assert a == b

    def test_negative_sizes(self):
        with pytest.raises(ValueError):
            generate_random_lobe(['a'], ['y'], -1, 3)
