"""
NEAT Phenotype Package

This package implements the phenotype representation for the NEAT (NeuroEvolution
of Augmenting Topologies) algorithm. It provides classes for expressing genomes as
executable neural networks, the interface of the tasks those networks are scored
on, and the organisms making up a population.

Modules:
    task:     Abstract interface of the task a network is evaluated on
    network:  Executable network compiled from a genome
    organism: Genome paired with its fitness

Exported Classes:
    Task:     Abstract episode driven by a network, producing a fitness score
    Network:  Executable network compiled from a genome
    Organism: A genome and its fitness

Exported Functions:
    evaluate_genome: Compile a genome and score it on a fresh task
"""

from evoneat.phenotype.task     import Task
from evoneat.phenotype.network  import Network, evaluate_genome
from evoneat.phenotype.organism import Organism

__all__ = ['Network',
           'Organism',
           'Task',
           'evaluate_genome']
