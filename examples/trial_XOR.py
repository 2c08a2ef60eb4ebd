"""
XOR Problem Implementation for NeuroAI

This module implements the classic XOR (exclusive OR) problem as a benchmark
for evolving networks by crossover and mutation.

The XOR Problem:
    XOR is a two-input, one-output boolean function where the output is True
    only when the inputs differ:
        Input (0, 0) → Output 0
        Input (0, 1) → Output 1
        Input (1, 0) → Output 1
        Input (1, 1) → Output 0

    The problem is not linearly separable, so the networks need a hidden layer.

Fitness Function:
    Fitness = 4.0 - Σ(output - target)²

    Maximum fitness of 4.0 is achieved when all four XOR cases produce exact outputs.

Usage:
    config = Config("examples/configs/config_xor.ini")
    trial  = Trial_XOR(config)
    trial.run(num_jobs=1)
"""

import logging
import sys
from pathlib import Path

from neuroai.genotype   import Lobe
from neuroai.run        import Trial, setup_logger
from neuroai.run.config import Config

logger = logging.getLogger("neuroai.examples.xor")

class Trial_XOR(Trial):
    """
    Trial evolving networks that compute the XOR of their two inputs.

    Implemented Methods:
        _evaluate_fitness(lobe): Test the network on all 4 XOR cases
        _report_progress():      Log generation statistics
        _final_report():         Log the truth table of the best network
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        super().__init__(config, suppress_output)
        self.xor_inputs  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
        self.xor_outputs = [[0.0],      [1.0],      [1.0],      [0.0]]

    def _reset(self):
        """Reset trial state."""
        return super()._reset()

    def _evaluate_fitness(self, lobe: Lobe) -> float:
        """
        Parameters:
            lobe: The network to evaluate

        Returns:
            Fitness score (maximum 4.0 for perfect XOR solution)
        """
        fitness = 4.0
        for inputs, expected_output in zip(self.xor_inputs, self.xor_outputs):
            output   = lobe.evaluate(inputs)
            error    = output[0] - expected_output[0]
            fitness -= error ** 2
        lobe.clear_snapshots()
        return fitness

    def _report_progress(self):
        scores = self.generation.scores
        logger.info("Generation %3d: size=%d, max fitness=%.4f, mean fitness=%.4f",
                    self._generation_counter, len(scores), max(scores), sum(scores) / len(scores))

    def _final_report(self):
        best = self.generation.highest_scoring_lobe()
        logger.info("Trial %s after %d generations; best network: %r",
                    "failed" if self.failed else "succeeded", self._generation_counter, best)
        for inputs, target in zip(self.xor_inputs, self.xor_outputs):
            logger.info("  %s -> %.4f (target %.1f)", inputs, best.evaluate(inputs)[0], target[0])

if __name__ == '__main__':
    setup_logger("neuroai")
    config_file = sys.argv[1] if len(sys.argv) > 1 else str(Path(__file__).parent / "configs" / "config_xor.ini")
    trial = Trial_XOR(Config(config_file))
    trial.run(num_jobs=1)
