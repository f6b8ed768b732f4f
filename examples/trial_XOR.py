"""
XOR Problem Implementation for NEAT

This module implements the classic XOR (exclusive OR) problem as a benchmark
for the NEAT algorithm. XOR cannot be solved without a hidden node, which makes
it a minimal test case for topology-evolving algorithms.

The task presents the four input combinations one step at a time; each step
receives the network's answer to the previous combination. The score is the
number of correctly answered cases (the output rounded to 0 or 1), so the
maximum fitness is 4.0.

Usage:
    python examples/trial_XOR.py
"""

from evoneat import NeatSettings, Task, Trial

class Xor(Task):
    """
    Feed the four XOR cases to the network, one per step, and count correct answers.
    """

    CASES = [([0.0, 0.0], 0), ([0.0, 1.0], 1), ([1.0, 0.0], 1), ([1.0, 1.0], 0)]

    def __init__(self, seed: int):
        super().__init__(seed)
        self._count = 0
        self._score = 0

    def step(self, outputs):
        # The answer to the case presented on the previous step
        if self._count > 0:
            _, expected = self.CASES[self._count - 1]
            if round(outputs[0]) == expected:
                self._score += 1

        inputs = self.CASES[self._count][0] if self._count < len(self.CASES) else [0.0, 0.0]
        self._count += 1
        return inputs

    def score(self):
        if self._count > len(self.CASES):
            return float(self._score)
        return None

if __name__ == "__main__":
    settings = NeatSettings()
    settings.add_node_rate     = 0.9
    settings.species_threshold = 0.6
    settings.weight_mutate     = 2.0

    trial = Trial(settings, Xor, population_size=1000, inputs=2, outputs=1,
                  max_generations=1000, fitness_threshold=4.0)
    trial.run(num_jobs=1)
