"""
NeuroAI Crossover Module

This module implements the homology test and the breeding operator combining two networks.

Functions:
    are_homologous(): Check whether two networks share the same topology
    breed():          Create a new network by mixing the parameters of two homologous networks
"""

import logging
import random

from neuroai.genotype.lobe import Lobe

logger = logging.getLogger(__name__)

def are_homologous(a: Lobe, b: Lobe) -> bool:
    """
    Check whether two networks have the same structure.

    Two networks are homologous if they have the same number of layers, each
    pair of corresponding layers has the same number of nodes, and each pair of
    corresponding nodes reads the same set of input positions. Weight and bias
    values, activation functions and names are ignored.

    Parameters:
        a: the first network
        b: the second network

    Returns:
        True if the networks can be bred with each other
    """
    if len(a.layers) != len(b.layers):
        return False

    for layer_a, layer_b in zip(a.layers, b.layers):
        if len(layer_a.nodes) != len(layer_b.nodes):
            return False
        for node_a, node_b in zip(layer_a.nodes, layer_b.nodes):
            if node_a.weights.keys() != node_b.weights.keys():
                return False

    return True

def breed(a: Lobe, b: Lobe, rng: random.Random | None = None) -> Lobe:
    """
    Create offspring from two homologous networks.

    The offspring copies the structure (and names, activations) of 'a'. For every
    node, the bias is taken from either parent with equal probability; for every
    weight, the value is taken from either parent with equal probability,
    independently of all other choices.

    If the networks are not homologous, the offspring is a copy of 'a'. Callers
    that must not silently lose the genes of 'b' should call are_homologous() first.

    Parameters:
        a:   the first parent (its structure is inherited)
        b:   the second parent
        rng: random source (defaults to the 'random' module)

    Returns:
        the offspring network
    """
    offspring = a.clone()
    if not are_homologous(a, b):
        logger.debug("Parents are not homologous (layer sizes %s and %s), offspring copies the first parent",
                     a.layer_sizes, b.layer_sizes)
        return offspring

    rng = rng or random
    for layer_child, layer_b in zip(offspring.layers, b.layers):
        for node_child, node_b in zip(layer_child.nodes, layer_b.nodes):
            if rng.random() < 0.5:
                node_child.bias = node_b.bias
            for key in node_child.weights:
                if rng.random() < 0.5:
                    node_child.weights[key] = node_b.weights[key]

    return offspring
