"""
NEAT Node Gene Module.

This module implements the NodeGene class and NodeType enumeration
for the NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene: Gene encoding a single network node
"""

import random
from enum   import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evoneat.run.config import NeatSettings

# Sigmoid steepness given to new nodes unless configured otherwise
DEFAULT_ACTIVATION = 4.9

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

class NodeGene:
    """
    A gene describing a node in a Neural Network.

    Every node computes its output as a steepened sigmoid of its weighted input:
        1 / (1 + exp(-activation * weighted_input))
    The 'activation' coefficient (the sigmoid steepness) is the only evolvable
    parameter of a node.

    Node IDs are shared in meaning across genomes: ID 'i' always denotes the same
    topological role. By convention:
        - Input nodes:  [0, num_inputs)
        - Output nodes: [num_inputs, num_inputs + num_outputs)
        - Hidden nodes: innovation numbers of the connections they were split from

    Public Attributes:
        id:         Unique identifier for this node
        type:       Type of node (INPUT, HIDDEN, or OUTPUT)
        activation: Sigmoid steepness

    Public Methods:
        mutate(settings): Stochastically perturb the activation steepness
    """

    def __init__(self, node_id: int, node_type: NodeType, activation: float):
        """
        Parameters:
            node_id:    Unique identifier for this node
            node_type:  Type of node (INPUT, HIDDEN, or OUTPUT)
            activation: Sigmoid steepness
        """
        self.id        : int      = node_id
        self.type      : NodeType = node_type
        self.activation: float    = activation

    def mutate(self, settings: 'NeatSettings') -> None:
        """
        With probability 'activation_mutate_rate', shift the steepness by
        a value drawn uniformly from [-activation_mutate, activation_mutate].
        """
        if random.random() < settings.activation_mutate_rate:
            self.activation += random.uniform(-settings.activation_mutate, settings.activation_mutate)

    def __repr__(self):
        return f"NodeGene(node_id={self.id:03d}, node_type=NodeType.{self.type.name:6s}, activation={self.activation})"

    def __str__(self):
        return f"[{self.type.value}{self.id},a={self.activation:.2f}]"
