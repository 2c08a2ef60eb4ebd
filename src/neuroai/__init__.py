"""
NeuroAI - a small neuroevolution engine.

This package represents feedforward neural networks as explicit, introspectable
data and evolves populations of them through parameter mutation, structural
mutation, crossover and fitness-based selection. Networks are not trained by
gradient descent.

Main components:
- activations: Activation functions applied to whole layer output vectors
- genotype:    Network model (nodes, layers, lobes) and single-network operators
- pool:        Generations, lineages and the ranking used to select networks
- run:         Configuration, logging and the evolutionary trial framework

Example:
    >>> from neuroai import Config, Trial
    >>> config = Config("config.ini")
    >>> class MyTrial(Trial):
    ...     def _evaluate_fitness(self, lobe):
    ...         # Implement fitness evaluation
    ...         pass
    >>> trial = MyTrial(config)
    >>> trial.run()
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from neuroai.activations         import ActivationFunction, activate
from neuroai.errors              import ShapeMismatchError, EmptyCollectionError
from neuroai.genotype            import (Node, Layer, Lobe, Snapshot,
                                         generate_random_layer, generate_random_lobe,
                                         mutate_parameters, insert_identity_layer,
                                         are_homologous, breed)
from neuroai.pool                import PriorityRanking, Generation, Lineage
from neuroai.run.config          import Config
from neuroai.run.trial           import Trial

__all__ = [
    "ActivationFunction",
    "activate",
    "ShapeMismatchError",
    "EmptyCollectionError",
    "Node",
    "Layer",
    "Lobe",
    "Snapshot",
    "generate_random_layer",
    "generate_random_lobe",
    "mutate_parameters",
    "insert_identity_layer",
    "are_homologous",
    "breed",
    "PriorityRanking",
    "Generation",
    "Lineage",
    "Config",
    "Trial",
]
