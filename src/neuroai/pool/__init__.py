"""
NeuroAI Pool Package

This package contains the classes managing populations of networks across generations.

Modules:
    ranking:    Min-priority selection structure used to rank networks by score
    generation: A scored population of networks and the operators producing new generations
    lineage:    The history of generations of an evolutionary run

Exported Classes:
    PriorityRanking: Returns items by increasing priority value
    Generation:      Scored population of networks
    Lineage:         Append-only sequence of generations
"""

from neuroai.pool.ranking    import PriorityRanking
from neuroai.pool.generation import Generation
from neuroai.pool.lineage    import Lineage

__all__ = [
    'PriorityRanking',
    'Generation',
    'Lineage',
]
