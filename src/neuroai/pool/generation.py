"""
NeuroAI Generation Module

This module implements the Generation class: a population of networks paired with their
fitness scores, and the population-wide operators producing new generations from it.

Classes:
    Generation: Scored population of networks
"""

import logging
import random
from bisect import bisect_left
from joblib import Parallel, delayed

import numpy as np

from neuroai.activations         import ActivationFunction
from neuroai.errors              import EmptyCollectionError
from neuroai.genotype.crossover  import breed as breed_lobes
from neuroai.genotype.lobe       import Lobe, Snapshot
from neuroai.genotype.mutation   import insert_identity_layer, mutate_parameters
from neuroai.genotype.node       import Node
from neuroai.pool.ranking        import PriorityRanking

logger = logging.getLogger(__name__)

class Generation:
    """
    A population of networks at one point of an evolutionary run, with their fitness scores.

    The networks and the scores are kept in two parallel lists of the same
    length: 'scores[i]' is the fitness of 'lobes[i]'. Networks produced by the
    operators of this class start with a score of 0.0; an external fitness
    evaluator later supplies real scores through set_scores().

    None of the operators modifies the generation it is called on, nor the
    networks it holds: each returns a new Generation of new networks.

    Public Attributes:
        lobes:  The networks of the population
        scores: The fitness score of each network

    Public Methods:
        set_scores(scores):                Replace the leading scores with supplied values
        append_lobes(lobes):               Add networks with a score of 0.0
        highest_scoring_lobe():            Return the network with the highest score
        top(num):                          Return the 'num' highest scoring networks
        breed(num_breeding, offspring):    Create a generation of offspring of the best networks
        survive(survive_to, num):          Carry the best networks over into another generation
        mutate(...):                       Mutate the parameters of every network
        add_inputs(input_names):           Add inputs to every network
        remove_inputs(indices):            Remove inputs from every network
        add_hidden_layer(activation):      Insert an identity hidden layer into every network
        evaluate(inputs, num_jobs):        Run every network on the same inputs
        copy():                            Create an independent copy of the generation
        to_dict():                         Convert the generation to a dictionary representation

    Class Methods:
        from_dict(generation_dict): Create a generation from a dictionary description
    """

    def __init__(self, lobes: list[Lobe] | None = None, scores: list[float] | None = None):
        """
        Parameters:
            lobes:  the networks of the population
            scores: the score of each network; all 0.0 if not specified

        Raises:
            ValueError: if 'lobes' and 'scores' do not have the same length
        """
        self.lobes : list[Lobe]  = list(lobes or [])
        self.scores: list[float] = [0.0] * len(self.lobes) if scores is None else [float(s) for s in scores]
        if len(self.lobes) != len(self.scores):
            raise ValueError(f"Got {len(self.lobes)} networks but {len(self.scores)} scores")

    def __len__(self):
        return len(self.lobes)

    def copy(self) -> 'Generation':
        return Generation([lobe.clone() for lobe in self.lobes], self.scores)

    def set_scores(self, scores: list[float]) -> 'Generation':
        """
        Create a copy of this generation with new scores.

        The i-th score is replaced for i < min(len(self.scores), len(scores)).
        Supplied scores beyond the size of the population are ignored.

        Parameters:
            scores: the new scores, in the order of the networks

        Returns:
            the re-scored generation
        """
        new_generation = self.copy()
        for i, score in zip(range(len(new_generation.scores)), scores):
            new_generation.scores[i] = float(score)
        return new_generation

    def append_lobes(self, lobes: list[Lobe]) -> 'Generation':
        """
        Create a copy of this generation with some networks appended, each with a score of 0.0.
        """
        new_generation = self.copy()
        for lobe in lobes:
            new_generation.lobes.append(lobe.clone())
            new_generation.scores.append(0.0)
        return new_generation

    def highest_scoring_lobe(self) -> Lobe | None:
        """
        Returns:
            the network with the highest score (the first one, in case of ties),
            or None if the generation is empty
        """
        if not self.lobes:
            return None
        return self.lobes[int(np.argmax(self.scores))]

    def _rank(self) -> PriorityRanking[int]:
        """
        Rank the networks, so that the ranking pops the index of the highest scoring network first.
        """
        ranking = PriorityRanking()
        if self.scores:
            max_score = max(self.scores)
            for i, score in enumerate(self.scores):
                ranking.push(i, max_score - score)
        return ranking

    def top(self, num: int) -> list[Lobe]:
        """
        Select the highest scoring networks.

        Parameters:
            num: how many networks to select

        Returns:
            the 'num' highest scoring networks, best first (the networks themselves, not copies)

        Raises:
            EmptyCollectionError: if the generation holds fewer than 'num' networks
        """
        if num < 0:
            raise ValueError("Cannot select a negative number of networks")
        if num > len(self.lobes):
            raise EmptyCollectionError(f"Cannot select {num} networks from a generation of {len(self.lobes)}")

        ranking = self._rank()
        return [self.lobes[ranking.pop()] for _ in range(num)]

    def breed(self, num_breeding: int, offspring_per_pair: int, rng: random.Random | None = None) -> 'Generation':
        """
        Create a new generation by breeding the best networks of this one.

        The 'num_breeding' highest scoring networks (fewer, if the generation is
        smaller) form the breeding pool. Every unordered pair (i, j), i < j, of
        the pool produces 'offspring_per_pair' children, each bred independently.
        Pairs are visited in the order (0,1), (0,2), ..., (1,2), ... where 0 is
        the best network.

        Non-homologous pairs produce copies of their better scoring member.

        Parameters:
            num_breeding:       size of the breeding pool
            offspring_per_pair: number of children produced by each pair
            rng:                random source (defaults to the 'random' module)

        Returns:
            a generation of C(num_breeding, 2) * offspring_per_pair children, all scored 0.0
        """
        if num_breeding < 0 or offspring_per_pair < 0:
            raise ValueError("Breeding pool size and offspring per pair cannot be negative")

        num_breeding = min(num_breeding, len(self.lobes))
        parents      = self.top(num_breeding)

        offspring = []
        for i in range(num_breeding - 1):
            for j in range(i + 1, num_breeding):
                for _ in range(offspring_per_pair):
                    offspring.append(breed_lobes(parents[i], parents[j], rng))

        logger.debug("Bred %d offspring from a pool of %d networks", len(offspring), num_breeding)
        return Generation(offspring)

    def survive(self, survive_to: 'Generation', num_to_survive: int) -> 'Generation':
        """
        Carry the best networks of this generation over into another generation.

        This implements elitism: the 'num_to_survive' highest scoring networks of
        this generation are appended, unmodified but with their score reset to
        0.0, to a copy of 'survive_to'.

        Parameters:
            survive_to:     the generation receiving the survivors
            num_to_survive: how many networks survive

        Returns:
            a copy of 'survive_to' extended with the survivors

        Raises:
            EmptyCollectionError: if this generation holds fewer than 'num_to_survive' networks
        """
        survivors = self.top(num_to_survive)
        logger.debug("%d networks survive into a generation of %d", len(survivors), len(survive_to))
        return survive_to.append_lobes(survivors)

    def mutate(self,
               num_weight_mutations: int,
               num_bias_mutations  : int,
               max_weight_delta    : float,
               max_bias_delta      : float,
               rng                 : random.Random | None = None) -> 'Generation':
        """
        Create a copy of this generation in which every network had its parameters mutated.
        Scores are preserved. See mutate_parameters() for the meaning of the parameters.
        """
        lobes = [mutate_parameters(lobe, num_weight_mutations, num_bias_mutations,
                                   max_weight_delta, max_bias_delta, rng).clone()
                 for lobe in self.lobes]
        return Generation(lobes, self.scores)

    def add_hidden_layer(self, activation: ActivationFunction = ActivationFunction.LINEAR) -> 'Generation':
        """
        Create a copy of this generation in which every network has grown an identity
        hidden layer right before its output layer (see insert_identity_layer()).
        Scores are preserved.
        """
        lobes = [insert_identity_layer(lobe, activation) for lobe in self.lobes]
        return Generation(lobes, self.scores)

    def add_inputs(self, input_names: list[str]) -> 'Generation':
        """
        Create a copy of this generation in which every network accepts additional inputs.

        For every network:
        - the new names are appended to its input names
        - every node of the first layer gets one weight of 0.0 per new input, keyed by
          the positions following the previous inputs (or following the node's highest
          key, if that is larger)
        - if the network has at least 2 layers, the first layer gets one node per new
          input, with zero weights and bias; the next layer does not read these nodes

        The zero weights ensure that the new inputs do not change the behavior of the
        networks until they are mutated. Scores are preserved.

        Parameters:
            input_names: names of the new inputs

        Returns:
            the restructured generation
        """
        lobes = [_add_inputs(lobe, list(input_names)) for lobe in self.lobes]
        return Generation(lobes, self.scores)

    def remove_inputs(self, indices: list[int]) -> 'Generation':
        """
        Create a copy of this generation in which every network lost some of its inputs.

        All indices refer to the input positions before any removal takes place;
        duplicates are ignored. For every network:
        - the input names at those positions are removed
        - every node of the first layer loses its weights keyed by those positions,
          and its remaining keys are renumbered to match the shortened input vector
        - if the network has at least 2 layers, the first layer loses the nodes at
          those positions, and the second layer loses (and renumbers) the matching weights

        Scores are preserved.

        Parameters:
            indices: the input positions to remove

        Returns:
            the restructured generation

        Raises:
            IndexError: if an index is not the position of an input of some network
        """
        removed = sorted(set(indices))
        lobes   = [_remove_inputs(lobe, removed) for lobe in self.lobes]
        return Generation(lobes, self.scores)

    def evaluate(self, inputs, num_jobs: int = 1) -> list[list[float]]:
        """
        Run every network of the generation on the same input vector.

        Parameters:
            inputs:   the input vector
            num_jobs: number of parallel processes
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes

        Returns:
            the outputs of each network, in the order of the networks
        """
        if num_jobs == 1:
            return [lobe.evaluate(inputs) for lobe in self.lobes]

        outputs = Parallel(num_jobs)(delayed(_evaluate_copy)(lobe, inputs) for lobe in self.lobes)

        # Workers ran on copies: record the evaluations on the networks held here
        values = np.asarray(inputs, dtype=np.float64).tolist()
        for lobe, output in zip(self.lobes, outputs):
            lobe.snapshots.append(Snapshot(values, output))
        return outputs

    def to_dict(self) -> dict:
        return {
            "lobes" : [lobe.to_dict() for lobe in self.lobes],
            "scores": list(self.scores)
        }

    @classmethod
    def from_dict(cls, generation_dict: dict) -> 'Generation':
        lobes = [Lobe.from_dict(lobe_dict) for lobe_dict in generation_dict.get("lobes", [])]
        return cls(lobes, generation_dict.get("scores"))

    def __eq__(self, other):
        if not isinstance(other, Generation):
            return NotImplemented
        return self.lobes == other.lobes and self.scores == other.scores

    def __str__(self):
        return '\n'.join(f"score={score:.4f} {repr(lobe)}" for lobe, score in zip(self.lobes, self.scores))

def _evaluate_copy(lobe: Lobe, inputs) -> list[float]:
    return lobe.clone().evaluate(inputs)

def _add_inputs(lobe: Lobe, input_names: list[str]) -> Lobe:
    new_lobe = lobe.clone()
    new_lobe.input_names.extend(input_names)
    if not new_lobe.layers or not input_names:
        return new_lobe

    first_layer     = new_lobe.layers[0]
    num_prev_inputs = len(first_layer.nodes)
    for node in first_layer.nodes:
        start = max(num_prev_inputs, max(node.weights, default=-1) + 1)
        for n in range(len(input_names)):
            node.weights[start + n] = 0.0

    if len(new_lobe.layers) >= 2:
        num_inputs = num_prev_inputs + len(input_names)
        for _ in input_names:
            first_layer.nodes.append(Node({i: 0.0 for i in range(num_inputs)}, 0.0))

    return new_lobe

def _remove_inputs(lobe: Lobe, removed: list[int]) -> Lobe:
    new_lobe = lobe.clone()
    num_prev_inputs = max(len(new_lobe.input_names), new_lobe.num_inputs)
    for index in removed:
        if index < 0 or index >= num_prev_inputs:
            raise IndexError(f"Input index {index} out of range for a network with {num_prev_inputs} inputs")
    if not removed:
        return new_lobe

    removed_set = set(removed)
    new_lobe.input_names = [name for i, name in enumerate(new_lobe.input_names) if i not in removed_set]
    if not new_lobe.layers:
        return new_lobe

    first_layer = new_lobe.layers[0]
    for node in first_layer.nodes:
        _drop_and_renumber(node, removed, removed_set)

    if len(new_lobe.layers) >= 2:
        first_layer.nodes = [node for i, node in enumerate(first_layer.nodes) if i not in removed_set]
        for node in new_lobe.layers[1].nodes:
            _drop_and_renumber(node, removed, removed_set)

    return new_lobe

def _drop_and_renumber(node: Node, removed: list[int], removed_set: set[int]) -> None:
    """
    Drop the weights keyed by removed positions and shift the remaining keys down
    by the number of removed positions below them. The read order is preserved.
    """
    node.weights = {key - bisect_left(removed, key): weight
                    for key, weight in node.weights.items() if key not in removed_set}
