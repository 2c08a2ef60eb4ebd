"""
NeuroAI Genotype Package

This package contains the data model of a network and the operators that act on single networks.

Modules:
    node:      A weighted sum of inputs plus a bias
    layer:     An ordered group of nodes sharing an activation function
    lobe:      A complete feedforward network, and its random generation
    mutation:  Parameter and structural mutation operators
    crossover: Homology test and breeding operator

Exported Classes:
    Node, Layer, Lobe, Snapshot
"""

from neuroai.genotype.node      import Node
from neuroai.genotype.layer     import Layer
from neuroai.genotype.lobe      import Lobe, Snapshot, generate_random_layer, generate_random_lobe
from neuroai.genotype.mutation  import mutate_parameters, insert_identity_layer
from neuroai.genotype.crossover import are_homologous, breed

__all__ = [
    'Node',
    'Layer',
    'Lobe',
    'Snapshot',
    'generate_random_layer',
    'generate_random_lobe',
    'mutate_parameters',
    'insert_identity_layer',
    'are_homologous',
    'breed',
]
