"""
NeuroAI Node Module

This module implements the Node class, the computational unit of a network layer.

Classes:
    Node: A weighted sum of selected outputs of the previous layer, plus a bias
"""

import numpy as np

from neuroai.errors import ShapeMismatchError

class Node:
    """
    A single node in a neural network layer.

    A node reads a subset of the output vector of the previous layer (or, for
    nodes in the first layer, of the external input vector). Which positions it
    reads is given by the keys of its weight map, so a node may be sparsely
    connected. The node computes:

        output = Σ weight_k * input[key_k] + bias

    The activation function is not part of the node: it is applied by the owning
    Layer to the whole output vector, once all its nodes have been evaluated.

    Public Attributes:
        weights: Dictionary mapping input index => weight (insertion order is the read order)
        bias:    Bias added to the weighted sum

    Public Methods:
        feed_forward(inputs): Compute the node output for a given layer input vector
        clone():              Create an independent copy of the node
        to_dict():            Convert the node to a dictionary representation

    Class Methods:
        from_dict(node_dict): Create a node from a dictionary description
    """

    def __init__(self, weights: dict[int, float] | None = None, bias: float = 0.0):
        """
        Parameters:
            weights: input index => weight (copied, never aliased)
            bias:    bias added to the weighted sum
        """
        self.weights: dict[int, float] = {int(k): float(w) for k, w in (weights or {}).items()}
        self.bias   : float            = float(bias)

    @property
    def input_indices(self) -> list[int]:
        """The positions of the layer input read by this node, in read order."""
        return list(self.weights.keys())

    def feed_forward(self, inputs: np.ndarray) -> float:
        """
        Compute the output of this node.

        Parameters:
            inputs: the full input vector of the layer this node belongs to

        Returns:
            the weighted sum of the addressed inputs plus the bias
        """
        if not self.weights:
            return self.bias

        indices = np.fromiter(self.weights.keys(),   dtype=np.int64,   count=len(self.weights))
        weights = np.fromiter(self.weights.values(), dtype=np.float64, count=len(self.weights))
        out_of_range = (indices < 0) | (indices >= len(inputs))
        if out_of_range.any():
            raise ShapeMismatchError(f"Node reads input index {int(indices[out_of_range][0])}, "
                                     f"but the layer input has length {len(inputs)}")
        return float(np.dot(weights, inputs[indices]) + self.bias)

    def clone(self) -> 'Node':
        return Node(self.weights, self.bias)

    def to_dict(self) -> dict:
        """
        Returns:
            {
                "bias": 0.5,
                "weights": [
                    {"input": 0, "weight": 2.0},
                    {"input": 3, "weight": -0.7}
                ]
            }
        """
        return {
            "bias"   : self.bias,
            "weights": [{"input": k, "weight": w} for k, w in self.weights.items()]
        }

    @classmethod
    def from_dict(cls, node_dict: dict) -> 'Node':
        weights = {entry["input"]: entry["weight"] for entry in node_dict.get("weights", [])}
        return cls(weights, node_dict.get("bias", 0.0))

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.bias == other.bias and self.weights == other.weights

    def __repr__(self):
        return f"Node(weights={self.weights}, bias={self.bias})"
