"""
NEAT Genome Module

This module implements the Genome class for the NEAT
(NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    Genome: Complete genome representing a neural network structure
"""

import copy
import random
from typing import TYPE_CHECKING

from evoneat.genotype.connection_gene    import ConnectionGene
from evoneat.genotype.innovation_tracker import InnovationTracker
from evoneat.genotype.node_gene          import DEFAULT_ACTIVATION, NodeType, NodeGene

if TYPE_CHECKING:
    from evoneat.run.config import NeatSettings

class Genome:
    """
    A NEAT genome representing a neural network as a collection of node and connection genes.

    In the NEAT (NeuroEvolution of Augmenting Topologies) algorithm, a genome encodes
    the structure and parameters of a neural network at the genotype level. It consists of:
    - Node genes: describe network nodes (input, hidden, output) with their sigmoid steepness
    - Connection genes: describe weighted connections between nodes, keyed by their endpoints

    A minimal genome contains only input and output nodes with no connections. Via mutation
    operations, genomes grow by adding nodes and connections.

    Both gene tables are insertion ordered. The input nodes always occupy the first
    'inputs' positions of the node table, followed by the 'outputs' output nodes; the
    compiled network relies on this order, so no operation may reorder these nodes.

    Node numbering convention:
        - Input nodes:  [0, inputs)
        - Output nodes: [inputs, inputs + outputs)
        - Hidden nodes: innovation number of the connection that was split to create them

    Attributes:
        inputs:             Number of input nodes
        outputs:            Number of output nodes
        default_activation: Sigmoid steepness given to newly created nodes
        node_genes:         Dictionary mapping node IDs to NodeGene objects
        conn_genes:         Dictionary mapping (node_in, node_out) to ConnectionGene objects

    Public Properties:
        input_nodes:  List of all input node genes
        output_nodes: List of all output node genes
        hidden_nodes: List of all hidden node genes

    Public Methods:
        add_connection(tracker, settings): Try to add (or re-enable) a random connection
        add_node(tracker):                 Split a random connection with a new node
        mutate_connections(settings):      Perturb the weights of enabled connections
        mutate_nodes(settings):            Perturb the steepness of nodes
        mutate(tracker, settings):         Apply all mutation operators stochastically
        distance(other, settings):         Calculate genetic distance to another genome

    Static Methods:
        cross(better, worse):            Create offspring, 'better' dominating disjoint genes
        same_species(a, b, settings):    Whether two genomes are close enough to share a species
    """

    def __init__(self, inputs: int, outputs: int, default_activation: float = DEFAULT_ACTIVATION):
        """
        Initialize a minimal Genome: only input and output nodes, no connections.

        Parameters:
            inputs:             Number of input nodes
            outputs:            Number of output nodes
            default_activation: Sigmoid steepness given to new nodes
        """
        self.inputs            : int   = inputs
        self.outputs           : int   = outputs
        self.default_activation: float = default_activation

        self.node_genes: dict[int, NodeGene]                   = {}  # node ID => node gene
        self.conn_genes: dict[tuple[int, int], ConnectionGene] = {}  # (node_in, node_out) => connection gene

        for node_id in range(inputs):
            self.node_genes[node_id] = NodeGene(node_id, NodeType.INPUT, default_activation)

        for node_id in range(inputs, inputs + outputs):
            self.node_genes[node_id] = NodeGene(node_id, NodeType.OUTPUT, default_activation)

    @property
    def input_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes.values() if node.type == NodeType.INPUT]

    @property
    def output_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes.values() if node.type == NodeType.OUTPUT]

    @property
    def hidden_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes.values() if node.type == NodeType.HIDDEN]

    def _is_output(self, index: int) -> bool:
        """Whether a position in the node table holds an output node."""
        return self.inputs <= index < self.inputs + self.outputs

    def add_connection(self, tracker: InnovationTracker, settings: 'NeatSettings') -> bool:
        """
        Try to add a new connection between two existing nodes.

        The source is picked uniformly from the whole node table, the destination
        uniformly from the output and hidden nodes. The attempt is rejected when:
         + source and destination are the same node
         + both ends are output nodes
         + the connection already exists and is enabled
         + 'settings.feedforward' is set and the connection would close a cycle
           (this includes the case where the reverse connection already exists)
        If the connection already exists but is disabled, it is re-enabled.

        Parameters:
            tracker:  Issues innovation numbers for new connections
            settings: Stores configuration parameters

        Returns:
            whether the genome was changed
        """
        nodes = list(self.node_genes.values())
        if len(nodes) <= self.inputs:
            return False

        source = random.randrange(len(nodes))
        target = random.randrange(self.inputs, len(nodes))

        if source == target:
            return False
        if self._is_output(source) and self._is_output(target):
            return False

        key = (nodes[source].id, nodes[target].id)

        existing = self.conn_genes.get(key)
        if existing is not None:
            if existing.enabled:
                return False
            existing.enabled = True
            return True

        if settings.feedforward and self._would_create_cycle(*key):
            return False

        weight     = random.uniform(-settings.weight, settings.weight)
        innovation = tracker.add(*key)
        self.conn_genes[key] = ConnectionGene(key[0], key[1], weight, innovation)
        return True

    def add_node(self, tracker: InnovationTracker) -> None:
        """
        Split an existing connection by adding a new node.

        The connection to split is selected at random and disabled. It is replaced by
        two connections: 'node_in -> new node' with weight 1.0, and 'new node -> node_out'
        carrying the weight of the split connection. The new node's ID is the innovation
        number of the split connection, so the same split in different genomes produces
        the same node and (via the tracker) the same two connections.

        Raises:
            RuntimeError: if the connection to split was never registered with the tracker
        """
        # A newly initialized genome has no connection genes.
        if not self.conn_genes:
            return

        split_conn_gene = random.choice(list(self.conn_genes.values()))

        new_node_id = tracker.get(split_conn_gene.node_in, split_conn_gene.node_out)
        if new_node_id is None:
            raise RuntimeError(f"connection {split_conn_gene.key} has no innovation number")

        split_conn_gene.enabled = False

        innov1 = tracker.add(split_conn_gene.node_in, new_node_id)
        innov2 = tracker.add(new_node_id, split_conn_gene.node_out)

        conn1 = ConnectionGene(split_conn_gene.node_in, new_node_id, 1.0, innov1)
        conn2 = ConnectionGene(new_node_id, split_conn_gene.node_out, split_conn_gene.weight, innov2)
        self.conn_genes[conn1.key] = conn1
        self.conn_genes[conn2.key] = conn2

        # A connection split a second time reuses the node already in the genome
        if new_node_id not in self.node_genes:
            self.node_genes[new_node_id] = NodeGene(new_node_id, NodeType.HIDDEN, self.default_activation)

    def mutate_connections(self, settings: 'NeatSettings') -> None:
        """
        Stochastically perturb the weight of every enabled connection.
        """
        for conn in self.conn_genes.values():
            if conn.enabled:
                conn.mutate(settings)

    def mutate_nodes(self, settings: 'NeatSettings') -> None:
        """
        Stochastically perturb the steepness of every node.
        """
        for node in self.node_genes.values():
            node.mutate(settings)

    def mutate(self, tracker: InnovationTracker, settings: 'NeatSettings') -> None:
        """
        Apply to the current genome all possible mutation operations.

        The structural mutations (add a connection, add a node) each occur with
        their own probability; parameter mutations are always attempted, each
        gene deciding independently whether it changes.
        """
        if random.random() < settings.add_connection_rate:
            self.add_connection(tracker, settings)

        if random.random() < settings.add_node_rate:
            self.add_node(tracker)

        self.mutate_connections(settings)
        self.mutate_nodes(settings)

    @staticmethod
    def cross(better: 'Genome', worse: 'Genome') -> 'Genome':
        """
        Perform crossover between two genomes to create offspring.

        Only the connections of 'better' are considered, so genes present only in
        'worse' are never inherited:
        - connections present in both parents: copied from either parent with equal probability
        - connections present only in 'better': copied from 'better'
        The endpoint nodes of every inherited connection are copied from the same parent
        as the connection, the first copy of a node winning. Input and output nodes keep
        their leading positions in the node table.

        Parameters:
            better: the dominant parent
            worse:  the other parent

        Returns:
            New offspring genome

        Raises:
            ValueError: if the parents do not have the same number of inputs and outputs
        """
        if better.inputs != worse.inputs or better.outputs != worse.outputs:
            raise ValueError(f"cannot cross a {better.inputs}x{better.outputs} genome "
                             f"with a {worse.inputs}x{worse.outputs} genome")

        offspring = Genome(better.inputs, better.outputs, better.default_activation)

        inherited_nodes: dict[int, NodeGene] = {}
        for key in better.conn_genes:
            parent = better
            if key in worse.conn_genes and random.random() < 0.5:
                parent = worse

            offspring.conn_genes[key] = copy.copy(parent.conn_genes[key])
            for node_id in key:
                if node_id not in inherited_nodes:
                    inherited_nodes[node_id] = copy.copy(parent.node_genes[node_id])

        for node_id in list(offspring.node_genes):
            if node_id in inherited_nodes:
                offspring.node_genes[node_id] = inherited_nodes.pop(node_id)
            else:
                offspring.node_genes[node_id] = copy.copy(better.node_genes[node_id])
        offspring.node_genes.update(inherited_nodes)

        return offspring

    def distance(self, other: 'Genome', settings: 'NeatSettings') -> float:
        """
        Calculate genetic distance between this genome and another.

           distance = connections_diff * D / N + weight_diff * W

        Where:
        - D = number of connections present in only one of the two genomes
        - N = number of connections in the larger genome
        - W = sum of absolute weight differences of connections present in both

        The connection term is 0 when neither genome has connections.

        Parameters:
            other:    the genome relative to which we are calculating the distance
            settings: Stores configuration parameters

        Returns:
            the genetic distance between this genome and 'other'
        """
        keys1 = set(self.conn_genes)
        keys2 = set(other.conn_genes)

        matching     = keys1 & keys2
        non_matching = keys1 ^ keys2

        weight_diff = sum(abs(self.conn_genes[k].weight - other.conn_genes[k].weight) for k in matching)

        N = max(len(keys1), len(keys2))
        connection_term = settings.connections_diff * len(non_matching) / N if N > 0 else 0.0

        return connection_term + settings.weight_diff * weight_diff

    @staticmethod
    def same_species(a: 'Genome', b: 'Genome', settings: 'NeatSettings') -> bool:
        """
        Whether two genomes are genetically close enough to belong to the same species.
        """
        return a.distance(b, settings) < settings.species_threshold

    def _would_create_cycle(self, from_node: int, to_node: int) -> bool:
        """
        Check if adding a connection from_node -> to_node would create a cycle.
        Uses DFS to check if there's already a path from 'to_node' back to 'from_node'.
        Considers ALL connections (both enabled and disabled), since a disabled
        connection may be re-enabled later.

        Parameters:
            from_node: proposed start of the new connection
            to_node:   proposed end   of the new connection

        Returns:
            whether adding the new connection would create a cycle in the network
        """
        if from_node == to_node:
            return True

        adjacency: dict[int, list[int]] = {}
        for node_in, node_out in self.conn_genes:
            adjacency.setdefault(node_in, []).append(node_out)

        # If we can reach 'from_node' starting at 'to_node', then adding a
        # connection 'from_node' -> 'to_node' would create a network cycle
        visited = set()
        stack   = [to_node]
        while stack:
            current = stack.pop()
            if current == from_node:
                return True
            if current in visited:
                continue
            visited.add(current)
            stack.extend(adjacency.get(current, []))

        return False

    def __str__(self):
        node_genes_str  = ''.join(str(node) for node in self.input_nodes)
        node_genes_str += ''.join(str(node) for node in self.hidden_nodes)
        node_genes_str += ''.join(str(node) for node in self.output_nodes)
        conn_genes_str  = ''.join(str(conn) for conn in self.conn_genes.values())
        return f"Nodes: {node_genes_str}\nConns: {conn_genes_str}"

    def __repr__(self):
        return f"Genome(inputs={self.inputs}, outputs={self.outputs}, nodes={len(self.node_genes)}, conns={len(self.conn_genes)})"
