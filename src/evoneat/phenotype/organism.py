"""
NEAT Organism Module

This module implements the Organism class, representing a member of
the NEAT (NeuroEvolution of Augmenting Topologies) population.

Classes:
    Organism: A genome paired with its fitness
"""

import copy
from itertools import count
from typing    import Optional, TYPE_CHECKING

from evoneat.genotype import Genome
from evoneat.phenotype.network import Network

if TYPE_CHECKING:
    from evoneat.run.config import NeatSettings

class Organism:
    """
    An organism in the NEAT population.

    An organism is a thin wrapper around a genome, to which it adds a unique ID and
    a fitness. The fitness is None until the organism has been evaluated.

    Public Attributes:
        ID:      Globally unique identifier for this organism
        genome:  The genome of this organism
        fitness: Fitness score (None until evaluated)

    Public Methods:
        network():                      Compile the genome into an executable network
        clone():                        Create a genetic copy of this organism (fitness kept)
        same_species(other, settings):  Whether another organism belongs to the same species
        mate(other):                    Create offspring via crossover, fitter parent dominant
    """

    _id_generator = count(0)

    def __init__(self, genome: Genome, fitness: Optional[float] = None):
        """
        Parameters:
            genome:  The Genome of this organism
            fitness: Known fitness, if any
        """
        self.ID     : int             = next(Organism._id_generator)
        self.genome : Genome          = genome
        self.fitness: Optional[float] = fitness

    def network(self) -> Network:
        return Network.compile(self.genome)

    def clone(self) -> 'Organism':
        """
        Create a new Organism from a copy of this organism's genome.
        """
        return Organism(copy.deepcopy(self.genome), self.fitness)

    def same_species(self, other: 'Organism', settings: 'NeatSettings') -> bool:
        return Genome.same_species(self.genome, other.genome, settings)

    def mate(self, other: 'Organism') -> 'Organism':
        """
        Create a new Organism by crossing this organism's genome with another's.
        The fitter organism is the dominant parent; on a tie, this organism is.

        Parameters:
            other: the Organism with whom this Organism is mating

        Returns:
            the (unevaluated) offspring
        """
        if other.fitness is not None and (self.fitness is None or other.fitness > self.fitness):
            better, worse = other, self
        else:
            better, worse = self, other
        return Organism(Genome.cross(better.genome, worse.genome))

    def __str__(self):
        fitness = 'None' if self.fitness is None else f"{self.fitness:.4f}"
        return f"ID={self.ID}, fitness={fitness}\n{self.genome}"

    def __repr__(self):
        return f"Organism(genome={repr(self.genome)}, fitness={self.fitness})"
