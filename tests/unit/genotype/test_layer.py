"""
Unit tests for the Layer class.

Tests src/neuroai/genotype/layer.py
"""

import numpy as np
from neuroai.activations import ActivationFunction
from neuroai.genotype.layer import Layer
from neuroai.genotype.node import Node


class TestLayerFeedForward:
    """Test that the activation is applied to the whole output vector."""

    def test_one_output_per_node(self):
        layer = Layer([Node({0: 1.0}), Node({0: 2.0}), Node({}, 0.3)])
        np.testing.assert_allclose(layer.feed_forward(np.array([1.5])), [1.5, 3.0, 0.3])

    def test_activation_applied(self):
        layer = Layer([Node({0: 1.0}), Node({0: -1.0})], ActivationFunction.RECTIFIED_LINEAR)
        np.testing.assert_array_equal(layer.feed_forward(np.array([2.0])), [2.0, 0.0])

    def test_softmax_over_whole_layer(self):
        layer = Layer([Node({}, 0.0), Node({}, 0.0)], ActivationFunction.SOFTMAX)
        np.testing.assert_allclose(layer.feed_forward(np.array([])), [0.5, 0.5])

    def test_argmax_over_whole_layer(self):
        layer = Layer([Node({0: 1.0}), Node({0: 3.0}), Node({0: 2.0})], ActivationFunction.ARGMAX)
        np.testing.assert_array_equal(layer.feed_forward(np.array([1.0])), [1.0, 1.0, 1.0])

    def test_clamped(self):
        layer = Layer([Node({0: 10.0}), Node({0: -10.0})], ActivationFunction.LINEAR, clamped=True)
        np.testing.assert_array_equal(layer.feed_forward(np.array([1.0])), [1.0, -1.0])

    def test_empty_layer(self):
        assert Layer([]).feed_forward(np.array([1.0])).size == 0


class TestLayerCopyAndSerialization:

    def test_nodes_list_is_copied(self):
        nodes = [Node({0: 1.0})]
        layer = Layer(nodes)
        nodes.append(Node())
        assert len(layer) == 1

    def test_clone_is_deep(self):
        layer = Layer([Node({0: 1.0}, 0.1)], ActivationFunction.TANH)
        copy = layer.clone()
        copy.nodes[0].weights[0] = 5.0
        assert layer.nodes[0].weights[0] == 1.0
        assert copy.activation is ActivationFunction.TANH

    def test_dict_round_trip(self):
        layer = Layer([Node({0: 1.0, 1: -1.0}, 0.2), Node({1: 0.5})], ActivationFunction.SWISH, clamped=True)
        layer_dict = layer.to_dict()
        assert layer_dict["activation"] == "swish"
        assert layer_dict["clamped"] is True
        assert Layer.from_dict(layer_dict) == layer

    def test_activation_from_string(self):
        assert Layer([], "tanh").activation is ActivationFunction.TANH
