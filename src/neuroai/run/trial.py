"""
NeuroAI Trial Module

This module defines the abstract base class for evolutionary trials with built-in
support for CPU-based parallelization of fitness evaluation using joblib.

A trial represents one independent evolutionary run: a population of networks
is evolved through generations until a solution is found or the maximum number
of generations is reached. Every scored generation is recorded in a Lineage.
"""

import logging
import random
from abc        import ABC, abstractmethod
from joblib     import Parallel, delayed
from statistics import mean

from neuroai.genotype   import Lobe, generate_random_lobe
from neuroai.pool       import Generation, Lineage
from neuroai.run.config import Config

logger = logging.getLogger(__name__)

class Trial(ABC):
    """
    Abstract base class for implementing an evolutionary trial.

    Each generation goes through these steps:
    - the fitness of every network is evaluated and recorded as its score
    - the scored generation is appended to the lineage
    - the 'num_breeding' best networks breed, every pair producing 'offspring_per_pair' children
    - the parameters of the children are mutated
    - the 'num_survivors' best networks are carried over unchanged (elitism)
    - with probability 'layer_add_probability', every network grows an identity hidden layer

    Subclasses must implement:
    - _reset(): Reset trial-specific state and call super()._reset()
    - _evaluate_fitness(lobe): Evaluate fitness for a single network
    - _report_progress(): Display progress after each generation
    - _final_report(): Display final results

    Subclasses can override:
    - _terminate(): Custom termination logic (default: max generations + fitness threshold)

    Public Attributes:
        lineage: History of all scored generations of the run
        failed:  Whether the run ended without reaching the fitness threshold

    Public Properties:
        generation: The current generation

    Public Methods:
        run(): Execute a complete trial

    Parallelization of fitness evaluation:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            suppress_output: If True, suppress progress and final reports
        """
        self._config            : Config     = config
        self._generation_counter: int        = 0
        self._generation        : Generation = Generation()
        self._suppress_output   : bool       = suppress_output
        self.lineage            : Lineage    = Lineage()
        self.failed             : bool       = True

    @property
    def generation(self) -> Generation:
        return self._generation

    def run(self, num_jobs: int = 1):
        """
        Run the trial.

        Resets the trial state and runs the evolutionary
        algorithm until the terminate condition is met.

        Parameters:
            num_jobs: Number of parallel processes for fitness evaluation
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes
        """
        # Reset the trial state before starting a new run
        self._reset()

        # Create and score the initial population
        self._generation = self._initial_generation()
        self._evaluate_fitness_all(num_jobs)

        if not self._suppress_output:
            self._report_progress()

        # Evolution loop
        while not self._terminate():
            self._generation_counter += 1

            # The best networks of the population breed and create offspring
            self._generation = self._spawn_next_generation()

            # Evaluate the fitness of each network in the new generation
            self._evaluate_fitness_all(num_jobs)

            if not self._suppress_output:
                self._report_progress()

        if not self._suppress_output:
            self._final_report()

    @abstractmethod
    def _reset(self):
        """
        Reset the trial state before starting a new run.

        Subclasses should call super()._reset() and then
        initialize their problem-specific data.
        """
        self._generation_counter = 0
        self._generation         = Generation()
        self.lineage             = Lineage()
        self.failed              = True

    def _initial_generation(self) -> Generation:
        """
        Create the initial population of randomly initialized networks, as described by the configuration.
        """
        lobes = [generate_random_lobe(self._config.input_names,
                                      self._config.output_names,
                                      self._config.num_hidden_layers,
                                      self._config.hidden_layer_size,
                                      self._config.input_activation,
                                      self._config.hidden_activation,
                                      self._config.output_activation)
                 for _ in range(self._config.population_size)]
        logger.debug("Created initial generation of %d networks", len(lobes))
        return Generation(lobes)

    def _spawn_next_generation(self) -> Generation:
        """
        Create the next generation from the current (scored) one.

        Returns:
            the new, unscored generation

        Raises:
            RuntimeError: if the configuration leads to an empty generation
        """
        config  = self._config
        current = self._generation

        offspring = current.breed(config.num_breeding, config.offspring_per_pair)
        offspring = offspring.mutate(config.num_weight_mutations,
                                     config.num_bias_mutations,
                                     config.max_weight_delta,
                                     config.max_bias_delta)

        # Elitism: the survivors are not mutated
        num_survivors  = min(config.num_survivors, len(current))
        new_generation = current.survive(offspring, num_survivors)

        # Structural mutation is applied to every network, to keep the population homologous
        if random.random() < config.layer_add_probability:
            new_generation = new_generation.add_hidden_layer()
            logger.debug("Generation %d: every network grew a hidden layer", self._generation_counter)

        if len(new_generation) == 0:
            raise RuntimeError("The new generation is empty: use 'num_breeding' >= 2 or 'num_survivors' >= 1")

        return new_generation

    @abstractmethod
    def _evaluate_fitness(self, lobe: Lobe) -> float:
        """
        Evaluate and return the fitness of a network.

        This method should test the network on the problem domain and compute
        a fitness score. Higher fitness values indicate better performance and
        a higher chance of breeding.

        Parameters:
            lobe: The network to evaluate

        Returns:
            float: Fitness score for the network
        """
        pass

    def _evaluate_fitness_all(self, num_jobs: int):
        """
        Evaluate fitness for all networks in the current generation.

        Uses serial or parallel evaluation based on num_jobs:
        - num_jobs=1: Sequential evaluation in single process
        - num_jobs>1 or -1: Parallel evaluation using joblib

        The scores are stored in the current generation (in the order of its
        networks, whatever the order in which evaluations complete), which is
        then appended to the lineage.

        Parameters:
            num_jobs: Number of parallel processes for fitness evaluation
        """
        lobes     = self._generation.lobes
        serialize = num_jobs == 1

        if serialize:
            fitness_all = [self._evaluate_fitness(lobe) for lobe in lobes]
        else:
            fitness_all = Parallel(num_jobs)(delayed(self._evaluate_fitness)(lobe) for lobe in lobes)

        self._generation = self._generation.set_scores(fitness_all)
        self.lineage     = self.lineage.append(self._generation)

    @abstractmethod
    def _report_progress(self):
        """
        Report trial progress after each generation.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        pass

    @abstractmethod
    def _final_report(self):
        """
        Produce final report at the end of the trial.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        pass

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number
        of generations and (optionally) also stops it if a given measure of
        population fitness has reached a given threshold.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._generation_counter >= self._config.max_number_generations

        # Check whether the fitness has reached a target threshold
        if self._config.fitness_termination_check:
            scores = self._generation.scores
            overall_fitness = None

            if self._config.fitness_criterion == "max":
                overall_fitness = max(scores)
            elif self._config.fitness_criterion == "mean":
                overall_fitness = mean(scores)
            else:
                raise RuntimeError("bad 'fitness_criterion' in configuration file")

            # Compare a measure of population fitness (max, mean, ...) against a threshold
            success = overall_fitness >= self._config.fitness_threshold
            terminate = terminate or success

            if terminate:
                self.failed = not success

        return terminate
