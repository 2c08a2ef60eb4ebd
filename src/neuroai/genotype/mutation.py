"""
NeuroAI Mutation Module

This module implements the operators mutating a single network. Every operator
leaves its argument untouched and returns a new, independent network.

Functions:
    mutate_parameters():     Jitter randomly chosen weights and biases
    insert_identity_layer(): Grow the network by one layer without changing its output
"""

import logging
import random

from neuroai.activations    import ActivationFunction
from neuroai.genotype.layer import Layer
from neuroai.genotype.lobe  import Lobe
from neuroai.genotype.node  import Node

logger = logging.getLogger(__name__)

def mutate_parameters(lobe                : Lobe,
                      num_weight_mutations: int,
                      num_bias_mutations  : int,
                      max_weight_delta    : float,
                      max_bias_delta      : float,
                      rng                 : random.Random | None = None) -> Lobe:
    """
    Create a copy of a network with some of its weights and biases perturbed.

    A weight mutation picks a random layer, a random node of that layer and a
    random weight of that node (by position), then adds to it a value drawn
    uniformly from [-max_weight_delta, max_weight_delta]. A bias mutation picks
    a random layer and node and perturbs its bias in the same way, using
    'max_bias_delta'. Sites are drawn with replacement, so the same weight or
    bias may be perturbed more than once. A draw landing on an empty layer, or
    (for weights) on a node without connections, leaves the network unchanged.

    Networks with fewer than 2 layers are returned as they are.

    Parameters:
        lobe:                 the network to mutate
        num_weight_mutations: number of weight perturbations
        num_bias_mutations:   number of bias perturbations
        max_weight_delta:     largest absolute change applied to a weight
        max_bias_delta:       largest absolute change applied to a bias
        rng:                  random source (defaults to the 'random' module)

    Returns:
        the mutated copy (or 'lobe' itself, if it has fewer than 2 layers)
    """
    if len(lobe.layers) < 2:
        logger.debug("Parameter mutation skipped: network has %d layer(s)", len(lobe.layers))
        return lobe
    if num_weight_mutations < 0 or num_bias_mutations < 0:
        raise ValueError("The number of mutations cannot be negative")

    rng      = rng or random
    new_lobe = lobe.clone()

    for _ in range(num_weight_mutations):
        node = _random_node(new_lobe, rng)
        if node is None or not node.weights:
            continue
        key = node.input_indices[rng.randrange(len(node.weights))]
        node.weights[key] += rng.uniform(-max_weight_delta, max_weight_delta)

    for _ in range(num_bias_mutations):
        node = _random_node(new_lobe, rng)
        if node is None:
            continue
        node.bias += rng.uniform(-max_bias_delta, max_bias_delta)

    return new_lobe

def _random_node(lobe: Lobe, rng) -> Node | None:
    """
    Pick a random layer, then a random node within it.
    Returns None if the chosen layer is empty.
    """
    layer = lobe.layers[rng.randrange(len(lobe.layers))]
    if not layer.nodes:
        return None
    return layer.nodes[rng.randrange(len(layer.nodes))]

def insert_identity_layer(lobe: Lobe, activation: ActivationFunction = ActivationFunction.LINEAR) -> Lobe:
    """
    Create a copy of a network with a new hidden layer inserted right before the output layer.

    The new layer has as many nodes as the layer it follows, and node i reads
    position i of that layer's output with weight 1.0 (every other position
    with weight 0.0), with a bias of 0.0. With a LINEAR activation the new
    layer passes its input through unchanged, so the network output stays
    exactly the same; later mutations can then specialize the new layer.

    Networks with fewer than 2 layers have no layer to insert after: an
    unchanged copy is returned.

    Parameters:
        lobe:       the network to grow
        activation: activation function of the inserted layer

    Returns:
        the grown copy of the network
    """
    new_lobe = lobe.clone()
    if len(new_lobe.layers) < 2:
        logger.debug("Layer insertion skipped: network has %d layer(s)", len(new_lobe.layers))
        return new_lobe

    size  = len(new_lobe.layers[-2])
    nodes = [Node({i: 1.0 if i == n else 0.0 for i in range(size)}, 0.0) for n in range(size)]
    new_lobe.layers.insert(len(new_lobe.layers) - 1, Layer(nodes, activation))

    logger.debug("Inserted identity layer of size %d, layer sizes now %s", size, new_lobe.layer_sizes)
    return new_lobe
