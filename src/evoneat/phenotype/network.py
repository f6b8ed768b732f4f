"""
NEAT Network Module

This module implements the phenotype representation for the NEAT algorithm:
a genome compiled into an executable network of steepened sigmoid nodes.

Classes:
    Network: An executable network built from a genome

Functions:
    evaluate_genome: Compile a genome and score it on a fresh task
"""

import math
import numpy as np
from typing import Sequence, TYPE_CHECKING

from evoneat.activations import sigmoid_activation

if TYPE_CHECKING:
    from evoneat.genotype import Genome
    from evoneat.phenotype.task import Task

class Network:
    """
    Executable neural network compiled from a Genome.

    The nodes are stored in an index-addressed arena, in the insertion order of the
    genome's node table: positions [0, inputs) hold the input nodes and positions
    [inputs, inputs + outputs) the output nodes. Each node keeps its current value,
    its sigmoid steepness and its list of incoming edges (source position, weight),
    built from the genome's enabled connections only.

    Propagation evaluates each output node depth-first with an explicit stack. Within
    a call to 'prop', every node is evaluated at most once; a node reached again
    contributes its stored value. In particular, an edge closing a cycle reads the
    value its source held after the previous propagation, so evaluation always
    terminates, whatever the topology. Node values persist between calls to 'prop'
    until 'reset' is called.

    Compiling never modifies the genome.

    Public Attributes:
        inputs:  Number of input nodes
        outputs: Number of output nodes

    Public Properties:
        number_nodes:       Total number of nodes in the network
        number_connections: Number of (enabled) connections in the network

    Public Methods:
        set_inputs(values): Assign values to the input nodes
        get_outputs():      Current values of the output nodes
        reset():            Zero every node value
        prop(values):       Propagate inputs through the network
        run(task):          Drive a task to completion, returning its score

    Class Methods:
        compile(genome): Build the network described by a genome
    """

    def __init__(self, genome: 'Genome'):
        """
        Parameters:
            genome: the Genome encoding the network
        """
        self.inputs : int = genome.inputs
        self.outputs: int = genome.outputs

        self._node_ids   : list[int]   = list(genome.node_genes)
        self._activations: list[float] = [gene.activation for gene in genome.node_genes.values()]
        self._values     : np.ndarray  = np.zeros(len(self._node_ids))

        position = {node_id: i for i, node_id in enumerate(self._node_ids)}

        # For each node, the incoming enabled connections: [(source position, weight)]
        self._incoming: list[list[tuple[int, float]]] = [[] for _ in self._node_ids]
        for conn in genome.conn_genes.values():
            if conn.enabled:
                self._incoming[position[conn.node_out]].append((position[conn.node_in], conn.weight))

    @classmethod
    def compile(cls, genome: 'Genome') -> 'Network':
        return cls(genome)

    @property
    def number_nodes(self) -> int:
        """Total number of nodes in the network."""
        return len(self._node_ids)

    @property
    def number_connections(self) -> int:
        """Number of (enabled) connections in the network."""
        return sum(len(edges) for edges in self._incoming)

    def set_inputs(self, values: Sequence[float]) -> None:
        """
        Assign values to the input nodes, in order.

        Raises:
            ValueError: if the number of values differs from the number of input nodes
        """
        if len(values) != self.inputs:
            raise ValueError(f"Expected {self.inputs} inputs, got {len(values)}")
        self._values[:self.inputs] = values

    def get_outputs(self) -> list[float]:
        """
        Returns:
            the values of the output nodes, in order
        """
        return self._values[self.inputs:self.inputs + self.outputs].tolist()

    def reset(self) -> None:
        """
        Zero the value of every node.
        """
        self._values.fill(0.0)

    def prop(self, values: Sequence[float]) -> list[float]:
        """
        Propagate inputs through the network.

        Parameters:
            values: the network inputs (as many as input nodes)

        Returns:
            the resulting values of the output nodes
        """
        self.set_inputs(values)

        solved = set(range(self.inputs))
        for index in range(self.inputs, self.inputs + self.outputs):
            self._values[index] = self._eval(index, solved)

        return self.get_outputs()

    def _eval(self, index: int, solved: set[int]) -> float:
        """
        Compute the output of a node.

        Every source not yet in 'solved' is marked solved, evaluated, and its value
        stored; sources already solved contribute their stored value. The node's
        output is the sigmoid of the weighted sum of its sources.

        Parameters:
            index:  position of the node to evaluate
            solved: positions of the nodes whose stored value is current

        Returns:
            the node output (not stored)
        """
        # Each frame: [node position, next incoming edge, weighted sum so far]
        stack = [[index, 0, 0.0]]
        while True:
            frame = stack[-1]
            node, edge, total = frame
            incoming = self._incoming[node]

            if edge < len(incoming):
                source, weight = incoming[edge]
                if source in solved:
                    frame[1] += 1
                    frame[2] += self._values[source] * weight
                else:
                    solved.add(source)
                    stack.append([source, 0, 0.0])
                continue

            value = sigmoid_activation(total, self._activations[node])
            stack.pop()
            if not stack:
                return value

            self._values[node] = value
            parent = stack[-1]
            _, weight = self._incoming[parent[0]][parent[1]]
            parent[1] += 1
            parent[2] += value * weight

    def run(self, task: 'Task') -> float:
        """
        Drive a task to completion.

        Starting from the current outputs, repeatedly feed the outputs to the task
        and propagate the inputs it returns, until the task reports a score.

        Parameters:
            task: a freshly constructed Task

        Returns:
            the task score

        Raises:
            ValueError: if the task reports a non-finite score
        """
        score = task.score()
        while score is None:
            self.prop(task.step(self.get_outputs()))
            score = task.score()

        if not math.isfinite(score):
            raise ValueError(f"Task returned a non-finite score: {score}")
        return float(score)

    def __repr__(self):
        nodes = []
        for node_id, activation, value, incoming in zip(self._node_ids, self._activations,
                                                        self._values, self._incoming):
            edges = ', '.join(f"{self._node_ids[source]}*{weight:+.3f}" for source, weight in incoming)
            nodes.append(f"  {node_id:03d}: value={value:.4f}, activation={activation:.2f}, in=[{edges}]")
        return f"Network(inputs={self.inputs}, outputs={self.outputs},\n" + '\n'.join(nodes) + ")"

def evaluate_genome(genome: 'Genome', task_type: type['Task'], seed: int) -> float:
    """
    Compile a genome and score the resulting network on a freshly constructed task.

    Parameters:
        genome:    the genome to evaluate
        task_type: the Task subclass to instantiate
        seed:      seed passed to the task

    Returns:
        the fitness of the genome
    """
    return Network.compile(genome).run(task_type(seed))
