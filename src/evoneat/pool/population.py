"""
NEAT Population Module

This module implements the Population class, the top-level orchestrator for the NEAT
evolutionary algorithm. The population owns the organisms and the innovation tracker
they share, and advances one generation at a time.

Classes:
    Population: Top-level evolutionary coordinator managing organisms and generations
"""

import logging
import math
import random
from joblib import Parallel, delayed
from typing import TYPE_CHECKING

from evoneat.genotype    import Genome, InnovationTracker
from evoneat.phenotype   import Network, Organism, evaluate_genome
from evoneat.pool.species import Species

if TYPE_CHECKING:
    from evoneat.phenotype import Task
    from evoneat.run.config import NeatSettings

logger = logging.getLogger(__name__)

class Population:
    """
    A population of evolving organisms in the NEAT algorithm.

    Each generation goes through three strictly sequential phases:
      1. execute():  evaluate every organism lacking a fitness on a fresh Task
      2. kill():     speciate, then cull each species
      3. generate(): refill the population through crossover and mutated clones
    'step()' runs one generation and returns the best network seen so far.

    The innovation tracker is owned by the population and only touched while
    generating offspring, never during (possibly parallel) evaluation.

    Public Attributes:
        organisms:  List of all Organism objects in the current generation
        species:    Species found by the most recent speciation
        best:       Fittest organism seen so far
        generation: Number of completed generations

    Public Methods:
        execute():       Evaluate the organisms that need it
        speciate():      Partition the organisms into species, tracking the best one
        kill():          Cull the population, species by species
        generate():      Refill the population up to its size
        step():          Advance one generation
        species_count(): Number of species found by the most recent speciation

    Parallelization of fitness evaluation:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self,
                 size     : int,
                 inputs   : int,
                 outputs  : int,
                 settings : 'NeatSettings',
                 task_type: type['Task'],
                 num_jobs : int = 1):
        """
        Seed the population with minimal genomes, each given a random connection
        and then mutated, so the initial population is not topologically uniform.

        Parameters:
            size:      Number of organisms in each generation
            inputs:    Number of network inputs
            outputs:   Number of network outputs
            settings:  Stores configuration parameters
            task_type: Task subclass each organism is evaluated on
            num_jobs:  Number of parallel processes for fitness evaluation
        """
        self.size     : int            = size
        self.inputs   : int            = inputs
        self.outputs  : int            = outputs
        self._settings: 'NeatSettings' = settings
        self._task_type                = task_type
        self.num_jobs : int            = num_jobs

        # Innovation numbers start above the reserved input and output node IDs
        self._tracker = InnovationTracker(inputs + outputs)

        self.organisms: list[Organism] = []
        for _ in range(size):
            genome = Genome(inputs, outputs, settings.activation)
            genome.add_connection(self._tracker, settings)
            genome.mutate(self._tracker, settings)
            self.organisms.append(Organism(genome))

        # Placeholder, superseded by the first evaluated organism
        self.best: Organism = Organism(Genome(inputs, outputs, settings.activation), -math.inf)

        self.species   : list[Species] = []
        self.generation: int           = 0

    @property
    def tracker(self) -> InnovationTracker:
        return self._tracker

    def _evaluate(self, genomes: list[Genome]) -> list[float]:
        """
        Score each genome on its own, freshly constructed, task.
        """
        seeds = [random.getrandbits(64) for _ in genomes]

        if self.num_jobs == 1:
            return [evaluate_genome(genome, self._task_type, seed) for genome, seed in zip(genomes, seeds)]

        return Parallel(self.num_jobs)(delayed(evaluate_genome)(genome, self._task_type, seed)
                                        for genome, seed in zip(genomes, seeds))

    def execute(self) -> None:
        """
        Evaluate every organism without a fitness (every organism, if
        'reset_fitness' is set). All results are collected before returning.
        """
        pending = [organism for organism in self.organisms
                   if self._settings.reset_fitness or organism.fitness is None]
        if not pending:
            return

        fitness_all = self._evaluate([organism.genome for organism in pending])
        for organism, fitness in zip(pending, fitness_all):
            organism.fitness = fitness

    def speciate(self) -> list[Species]:
        """
        Partition the organisms into species in a single greedy pass.

        Each organism, in population order, joins the first species whose
        representative it matches, or founds a new species. Along the way the
        best organism seen so far is updated. If 'reset_fitness' is set, the best
        organism is first re-evaluated so its fitness is comparable with the
        current generation's.

        Returns:
            the species found
        """
        if self._settings.reset_fitness and math.isfinite(self.best.fitness):
            self.best.fitness = self._evaluate([self.best.genome])[0]

        self.species = []
        for organism in self.organisms:
            if organism.fitness > self.best.fitness:
                self.best = organism.clone()

            for spec in self.species:
                if spec.accepts(organism, self._settings):
                    spec.add(organism)
                    break
            else:
                self.species.append(Species(organism))

        return self.species

    def kill(self) -> None:
        """
        Speciate, then keep only the survivors of each species.
        """
        self.speciate()

        survivors = []
        for spec in self.species:
            survivors.extend(spec.cull())

        # Every lone species lost its coin flip: restart from the best organism
        if not survivors:
            logger.debug("No organism survived culling, restarting from the best organism")
            survivors = [self.best.clone()]

        self.organisms = survivors

    def generate(self) -> None:
        """
        Refill the population up to its size.

        The survivors are shuffled and adjacent pairs crossed (the fitter of the pair
        dominant) while the population is below three quarters of its size. The
        remaining slots are filled with mutated clones of the survivors, taken in turn.
        """
        survivors = self.organisms
        random.shuffle(survivors)

        crossover_cap = self.size * 3 // 4
        offspring     = []
        for i in range(0, len(survivors) - 1, 2):
            if len(survivors) + len(offspring) >= crossover_cap:
                break
            offspring.append(survivors[i].mate(survivors[i + 1]))

        i = 0
        while len(survivors) + len(offspring) < self.size:
            child = survivors[i % len(survivors)].clone()
            child.fitness = None
            child.genome.mutate(self._tracker, self._settings)
            offspring.append(child)
            i += 1

        self.organisms = survivors + offspring

    def step(self) -> tuple[Network, float]:
        """
        Advance the population by one generation.

        Returns:
            a network compiled from the best organism seen so far, and its fitness
        """
        self.execute()
        self.kill()
        self.generate()
        self.generation += 1

        logger.debug("generation %d: %d species, best fitness %.4f",
                     self.generation, self.species_count(), self.best.fitness)

        return self.best.network(), self.best.fitness

    def species_count(self) -> int:
        return len(self.species)

    def __str__(self):
        return '\n'.join(str(organism) for organism in self.organisms)
