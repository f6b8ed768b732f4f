"""
NEAT (NeuroEvolution of Augmenting Topologies) - A Python implementation.

This package evolves a population of variable-topology neural networks by
mutation, crossover and fitness-based selection against a user-supplied Task,
without gradient descent.

Main components:
- genotype:    Genetic encoding (genomes, genes, innovation tracking)
- phenotype:   Executable networks, the Task interface, organisms
- pool:        Population and speciation management
- run:         Configuration, checkpointing and the Trial driver
- activations: Activation functions for neural networks

Example:
    >>> from evoneat import NeatSettings, Population, Task
    >>> class MyTask(Task):
    ...     def step(self, outputs):
    ...         # Consume the network outputs, return the next inputs
    ...         pass
    ...     def score(self):
    ...         # None until the episode is over, then the fitness
    ...         pass
    >>> population = Population(100, 2, 1, NeatSettings(), MyTask)
    >>> network, fitness = population.step()
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from evoneat.run.config import NeatSettings
from evoneat.run.trial import Trial
from evoneat.genotype.genome import Genome
from evoneat.genotype.innovation_tracker import InnovationTracker
from evoneat.phenotype.network import Network
from evoneat.phenotype.organism import Organism
from evoneat.phenotype.task import Task
from evoneat.pool.population import Population

__all__ = [
    "NeatSettings",
    "Trial",
    "Genome",
    "InnovationTracker",
    "Network",
    "Organism",
    "Task",
    "Population",
]
