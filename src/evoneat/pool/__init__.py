"""
NEAT Pool Package

This package contains classes for managing populations and species in the NEAT
(NeuroEvolution of Augmenting Topologies) algorithm.

The pool package coordinates the evolutionary process at the population level,
organizing organisms into species based on genetic similarity and managing
selection and reproduction across generations.

Modules:
    species:    A group of genetically similar organisms
    population: Top-level population management and evolution

Exported Classes:
    Species:    A cluster of genetically similar organisms
    Population: Top-level evolutionary coordinator
"""

from evoneat.pool.species    import Species
from evoneat.pool.population import Population

__all__ = [
    'Species',
    'Population',
]
