"""
NeuroAI Layer Module

This module implements the Layer class: an ordered group of nodes sharing one activation function.

Classes:
    Layer: Ordered sequence of nodes evaluated together
"""

import numpy as np

from neuroai.activations import ActivationFunction, activate
from neuroai.genotype.node import Node

class Layer:
    """
    A layer in a feedforward neural network.

    The layer receives the output vector of the previous layer (or the external
    input vector, if it is the first layer of the network). Every node computes
    its weighted sum from that vector, then the activation function is applied
    once to the whole vector of node outputs. Applying it per vector rather than
    per node is what makes transforms like softmax and argmax meaningful.

    Public Attributes:
        nodes:      The nodes of this layer, in output order
        activation: Activation function applied to the layer output vector
        clamped:    Whether the activated output is clamped to [-1, 1]

    Public Methods:
        feed_forward(inputs): Compute the output vector of this layer
        clone():              Create an independent copy of the layer
        to_dict():            Convert the layer to a dictionary representation

    Class Methods:
        from_dict(layer_dict): Create a layer from a dictionary description
    """

    def __init__(self,
                 nodes     : list[Node] | None = None,
                 activation: ActivationFunction = ActivationFunction.LINEAR,
                 clamped   : bool = False):
        """
        Parameters:
            nodes:      the nodes of the layer (the list is copied, the nodes are not)
            activation: activation function applied to the whole layer output
            clamped:    if True, clamp the activated output to [-1, 1]
        """
        self.nodes     : list[Node]         = list(nodes or [])
        self.activation: ActivationFunction = ActivationFunction(activation)
        self.clamped   : bool               = clamped

    def __len__(self):
        return len(self.nodes)

    def feed_forward(self, inputs: np.ndarray) -> np.ndarray:
        """
        Parameters:
            inputs: the layer input vector

        Returns:
            the activated output vector (one element per node)
        """
        outputs = np.array([node.feed_forward(inputs) for node in self.nodes], dtype=np.float64)
        return activate(outputs, self.activation, self.clamped)

    def clone(self) -> 'Layer':
        return Layer([node.clone() for node in self.nodes], self.activation, self.clamped)

    def to_dict(self) -> dict:
        return {
            "activation": self.activation.value,
            "clamped"   : self.clamped,
            "nodes"     : [node.to_dict() for node in self.nodes]
        }

    @classmethod
    def from_dict(cls, layer_dict: dict) -> 'Layer':
        nodes = [Node.from_dict(node_dict) for node_dict in layer_dict.get("nodes", [])]
        return cls(nodes,
                   ActivationFunction(layer_dict.get("activation", ActivationFunction.LINEAR.value)),
                   layer_dict.get("clamped", False))

    def __eq__(self, other):
        if not isinstance(other, Layer):
            return NotImplemented
        return (self.activation == other.activation and
                self.clamped    == other.clamped    and
                self.nodes      == other.nodes)

    def __repr__(self):
        return f"Layer(nodes={len(self.nodes)}, activation={self.activation.value}, clamped={self.clamped})"
