"""
NEAT Species Module

This module implements the Species class for the NEAT algorithm.
A species represents a cluster of genetically similar organisms
that compete only among themselves for survival.

Classes:
    Species: A group of organisms represented by its first member
"""

import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evoneat.phenotype import Organism
    from evoneat.run.config import NeatSettings

class Species:
    """
    A species grouping genetically similar organisms.

    Species are transient: the population is partitioned anew every generation.
    The first organism assigned to a species is its representative; any other
    organism joins the species when it is of the same species as the representative.

    Public Attributes:
        representative: Organism used for comparisons during speciation
        members:        The organisms that are part of this species

    Public Methods:
        accepts(organism, settings): Whether an organism belongs to this species
        add(organism):               Add an organism to this species
        cull():                      Return the members surviving to the next generation
    """

    def __init__(self, representative: 'Organism'):
        """
        Parameters:
            representative: the first member of the species
        """
        self.representative: 'Organism'       = representative
        self.members       : list['Organism'] = [representative]

    def accepts(self, organism: 'Organism', settings: 'NeatSettings') -> bool:
        return self.representative.same_species(organism, settings)

    def add(self, organism: 'Organism') -> None:
        self.members.append(organism)

    def cull(self) -> list['Organism']:
        """
        Select the members surviving to the next generation.

        A lone member survives with probability 1/2, so a single stagnant lineage
        cannot hold on to its slot indefinitely. Larger species keep the fitter
        half of their members (at least one).

        As a precondition, every member must have been evaluated.

        Returns:
            the surviving members
        """
        if len(self.members) == 1:
            return list(self.members) if random.random() < 0.5 else []

        sorted_members = sorted(self.members, key=lambda organism: organism.fitness, reverse=True)
        return sorted_members[:len(sorted_members) // 2]

    def __len__(self):
        return len(self.members)

    def __str__(self):
        return f"Species(representative={self.representative.ID}, size={len(self.members)})"
