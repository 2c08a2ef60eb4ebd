"""
NeuroAI Lobe Module

This module implements the Lobe class, a complete feedforward neural network stored
as explicit, introspectable data, together with the functions generating random lobes.

Classes:
    Snapshot: Record of one evaluation (input, output and optional desired output)
    Lobe:     A feedforward network made of an ordered sequence of layers

Functions:
    generate_random_layer(): Create a layer fully connected to the previous one, with random parameters
    generate_random_lobe():  Create a network with random parameters
"""

import logging
import random
import numpy as np

from neuroai.activations    import ActivationFunction
from neuroai.errors         import ShapeMismatchError
from neuroai.genotype.layer import Layer
from neuroai.genotype.node  import Node

logger = logging.getLogger(__name__)

class Snapshot:
    """
    The input and output of one evaluation of a Lobe.

    Snapshots are transient: they are never persisted and never take part
    in comparisons between networks. The desired output is a hook for
    recording training targets; nothing in this package consumes it.
    """

    def __init__(self, inputs: list[float], outputs: list[float], desired_outputs: list[float] | None = None):
        self.inputs         : list[float] = list(inputs)
        self.outputs        : list[float] = list(outputs)
        self.desired_outputs: list[float] = list(desired_outputs or [])

    def __repr__(self):
        return f"Snapshot(inputs={self.inputs}, outputs={self.outputs}, desired_outputs={self.desired_outputs})"

class Lobe:
    """
    A complete feedforward neural network.

    The network is an ordered sequence of layers: the first one receives the
    external input vector, the last one produces the network output, and any
    layers in between are hidden. The first layer holds one node per input,
    so its node count defines how long the input vector must be; the last
    layer's node count defines the length of the output vector.

    Inputs and outputs can be given human readable names. Operators that
    restructure the inputs of a network keep 'input_names' aligned with the
    nodes of the first layer.

    Every call to evaluate() appends a Snapshot to 'snapshots'. Snapshots are
    not part of the network state: to_dict() leaves them out, clone() does not
    copy them, and two networks compare equal regardless of their snapshots.

    Public Attributes:
        layers:       The layers of the network, first = input layer, last = output layer
        input_names:  Names of the inputs
        output_names: Names of the outputs
        snapshots:    Evaluations recorded since the last clear_snapshots()

    Public Properties:
        num_inputs:  Expected length of the input vector
        num_outputs: Length of the output vector
        layer_sizes: Number of nodes of each layer

    Public Methods:
        evaluate(inputs):                      Run the network on an input vector
        set_desired_outputs(outputs, index):   Attach desired outputs to a snapshot
        clear_snapshots():                     Forget all recorded evaluations
        clone():                               Create an independent copy of the network
        to_dict():                             Convert the network to a dictionary representation

    Class Methods:
        from_dict(lobe_dict): Create a network from a dictionary description
    """

    def __init__(self,
                 layers      : list[Layer] | None = None,
                 input_names : list[str]   | None = None,
                 output_names: list[str]   | None = None):
        """
        Parameters:
            layers:       the layers of the network (the list is copied, the layers are not)
            input_names:  names of the inputs
            output_names: names of the outputs
        """
        self.layers      : list[Layer]    = list(layers or [])
        self.input_names : list[str]      = list(input_names or [])
        self.output_names: list[str]      = list(output_names or [])
        self.snapshots   : list[Snapshot] = []

    @property
    def num_inputs(self) -> int:
        return len(self.layers[0]) if self.layers else 0

    @property
    def num_outputs(self) -> int:
        return len(self.layers[-1]) if self.layers else 0

    @property
    def layer_sizes(self) -> list[int]:
        return [len(layer) for layer in self.layers]

    def evaluate(self, inputs) -> list[float]:
        """
        Perform a forward pass through the network.

        Each layer turns its input vector into an output vector, which becomes
        the input vector of the next layer. The output of the last layer is the
        output of the network. The pass is recorded as a Snapshot.

        Parameters:
            inputs: the network inputs (as many as nodes in the first layer)

        Returns:
            the network outputs (as many as nodes in the last layer)

        Raises:
            ShapeMismatchError: if the number of inputs does not match the first layer,
                                or a node reads past the end of its layer input
            ValueError:         if the network has no layers
        """
        if not self.layers:
            raise ValueError("Cannot evaluate a network with no layers")

        values = np.asarray(inputs, dtype=np.float64)
        if values.ndim != 1 or len(values) != self.num_inputs:
            raise ShapeMismatchError(f"Expected {self.num_inputs} inputs, got {values.shape[0] if values.ndim else 0}")

        layer_values = values
        for layer in self.layers:
            layer_values = layer.feed_forward(layer_values)

        outputs = layer_values.tolist()
        self.snapshots.append(Snapshot(values.tolist(), outputs))
        return outputs

    def set_desired_outputs(self, outputs: list[float], index: int = -1) -> None:
        """
        Record the desired outputs for a past evaluation.

        Parameters:
            outputs: the outputs the network should have produced
            index:   which snapshot to annotate; a negative value selects the most recent one

        Raises:
            IndexError: if there is no snapshot at the requested position
        """
        if not self.snapshots:
            raise IndexError("The network has not been evaluated since its snapshots were last cleared")
        if index < 0:
            index = len(self.snapshots) - 1
        if index >= len(self.snapshots):
            raise IndexError(f"No snapshot at index {index} ({len(self.snapshots)} recorded)")
        self.snapshots[index].desired_outputs = list(outputs)

    def clear_snapshots(self) -> None:
        self.snapshots = []

    def clone(self) -> 'Lobe':
        """
        Create an independent copy of this network (snapshots excluded).
        """
        return Lobe([layer.clone() for layer in self.layers], self.input_names, self.output_names)

    def to_dict(self) -> dict:
        """
        Convert the network to a dictionary representation.

        This is the inverse operation of from_dict(). Snapshots are not included.

        Returns:
            Dictionary with the following structure:
            {
                "input_names":  ["x", "y"],
                "output_names": ["out"],
                "layers": [
                    {
                        "activation": "linear",
                        "clamped": false,
                        "nodes": [
                            {"bias": 0.0, "weights": [{"input": 0, "weight": 1.0}]},
                            {"bias": 0.0, "weights": [{"input": 1, "weight": 1.0}]}
                        ]
                    },
                    ...
                ]
            }
        """
        return {
            "input_names" : list(self.input_names),
            "output_names": list(self.output_names),
            "layers"      : [layer.to_dict() for layer in self.layers]
        }

    @classmethod
    def from_dict(cls, lobe_dict: dict) -> 'Lobe':
        layers = [Layer.from_dict(layer_dict) for layer_dict in lobe_dict.get("layers", [])]
        return cls(layers, lobe_dict.get("input_names", []), lobe_dict.get("output_names", []))

    def __eq__(self, other):
        if not isinstance(other, Lobe):
            return NotImplemented
        return (self.layers       == other.layers      and
                self.input_names  == other.input_names and
                self.output_names == other.output_names)

    def __str__(self):
        layers_str = "\n".join(f"  {i}: {layer}" for i, layer in enumerate(self.layers))
        return f"Lobe(inputs={self.input_names}, outputs={self.output_names})\n{layers_str}"

    def __repr__(self):
        return f"Lobe(layer_sizes={self.layer_sizes})"

def generate_random_layer(num_nodes           : int,
                          activation          : ActivationFunction,
                          num_previous_outputs: int,
                          rng                 : random.Random | None = None) -> Layer:
    """
    Create a layer whose nodes are connected to every output of the previous layer.
    Weights and biases are drawn uniformly from [-1, 1].

    Parameters:
        num_nodes:            number of nodes in the new layer
        activation:           activation function of the new layer
        num_previous_outputs: length of the vector the layer reads from
        rng:                  random source (defaults to the 'random' module)

    Returns:
        the new layer
    """
    rng   = rng or random
    nodes = []
    for _ in range(num_nodes):
        bias    = rng.uniform(-1.0, 1.0)
        weights = {i: rng.uniform(-1.0, 1.0) for i in range(num_previous_outputs)}
        nodes.append(Node(weights, bias))
    return Layer(nodes, activation)

def generate_random_lobe(input_names      : list[str],
                         output_names     : list[str],
                         num_hidden_layers: int,
                         hidden_layer_size: int,
                         input_activation : ActivationFunction = ActivationFunction.LINEAR,
                         hidden_activation: ActivationFunction = ActivationFunction.RECTIFIED_LINEAR,
                         output_activation: ActivationFunction = ActivationFunction.SIGMOID,
                         rng              : random.Random | None = None) -> Lobe:
    """
    Create a fully connected network with random weights and biases.

    The network has 'num_hidden_layers + 2' layers: an input layer with one node
    per input name, the hidden layers, and an output layer with one node per
    output name. Every node reads every output of the layer before it.

    Rectified linear functions suit the hidden layers; sigmoid and tanh are
    better kept to the output layer, where vanishing gradients do not matter.

    Parameters:
        input_names:       names of the network inputs
        output_names:      names of the network outputs
        num_hidden_layers: number of layers between the input and output layers
        hidden_layer_size: number of nodes in each hidden layer
        input_activation:  activation function of the input layer
        hidden_activation: activation function of the hidden layers
        output_activation: activation function of the output layer
        rng:               random source (defaults to the 'random' module)

    Returns:
        the new network
    """
    if num_hidden_layers < 0 or hidden_layer_size < 0:
        raise ValueError("The number and size of hidden layers cannot be negative")

    layers          = []
    num_prev_output = len(input_names)
    last_layer      = num_hidden_layers + 1
    for L in range(num_hidden_layers + 2):
        if L == 0:
            num_nodes, activation = len(input_names), input_activation
        elif L == last_layer:
            num_nodes, activation = len(output_names), output_activation
        else:
            num_nodes, activation = hidden_layer_size, hidden_activation

        layers.append(generate_random_layer(num_nodes, activation, num_prev_output, rng))
        num_prev_output = num_nodes

    lobe = Lobe(layers, input_names, output_names)
    logger.debug("Generated random lobe with layer sizes %s", lobe.layer_sizes)
    return lobe
