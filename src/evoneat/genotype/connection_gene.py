"""
NEAT Connection Gene Module

This module implements the ConnectionGene class for the
NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

import numpy as np
import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evoneat.run.config import NeatSettings

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the neural network graph,
    connecting a source node to a destination node with an associated weight.
    Within a genome a connection is keyed by its endpoints; the innovation number,
    issued by the InnovationTracker, identifies the same connection across genomes.

    Connections are disabled rather than deleted, which preserves their history
    for crossover. A disabled connection contributes nothing to the network.

    Public Attributes:
        node_in:    ID of the source node
        node_out:   ID of the destination node
        weight:     Weight of the connection
        enabled:    Whether this connection is active in the network
        innovation: Global innovation number uniquely identifying this connection

    Public Properties:
        key: The (node_in, node_out) pair

    Public Methods:
        mutate(settings): Stochastically perturb the connection weight
    """

    def __init__(self,
                 node_in   : int,
                 node_out  : int,
                 weight    : float,
                 innovation: int,
                 enabled   : bool = True):
        """
        Initialize a connection gene.

        Parameters:
            node_in:    ID of the source node
            node_out:   ID of the destination node
            weight:     Weight of the connection
            innovation: Number uniquely and globally identifying this connection
            enabled:    Whether this connection is active in the network
        """
        self.node_in   : int   = node_in
        self.node_out  : int   = node_out
        self.weight    : float = weight
        self.enabled   : bool  = enabled
        self.innovation: int   = innovation

    @property
    def key(self) -> tuple[int, int]:
        return (self.node_in, self.node_out)

    def mutate(self, settings: 'NeatSettings') -> None:
        """
        Stochastically mutate the (gene describing the) connection.

        With probability 'weight_mutate_rate' the weight is shifted by a value drawn
        uniformly from [-weight_mutate, weight_mutate]. The result is clipped to
        [-weight_max, weight_max].
        """
        if random.random() < settings.weight_mutate_rate:
            new_weight  = self.weight + random.uniform(-settings.weight_mutate, settings.weight_mutate)
            self.weight = float(np.clip(new_weight, -settings.weight_max, settings.weight_max))

    def __repr__(self):
        return (f"ConnectionGene(node_in={self.node_in:03d}, node_out={self.node_out:03d},"
                f"weight={self.weight:+.6f}, enabled={self.enabled}, innovation={self.innovation:03d})")

    def __str__(self):
        s  = f"[{self.innovation:03d},{'E' if self.enabled else 'D'},"
        s += f"{self.node_in:02d}=>{self.node_out:02d},{self.weight:+.02f}]"
        return s
