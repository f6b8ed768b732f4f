"""
NEAT Innovation Tracker Module

This module implements the InnovationTracker class for the
NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    InnovationTracker: Registry of innovation numbers for structural changes
"""

class InnovationTracker:
    """
    Tracks structural changes across all genomes of a population.
    Ensures the same structural change gets the same innovation number.

    A connection is identified by its endpoints (node_in, node_out). The first
    time a connection is registered it receives a fresh innovation number; every
    later request for the same endpoints returns that same number. Connection
    innovation numbers double as the IDs of hidden nodes: splitting a connection
    creates a node whose ID is the innovation number of the split connection, so
    the same split performed in two different genomes yields the same node.

    Innovation numbers start above the reserved input and output node IDs.

    Public Methods:
        add(node_in, node_out): Register a connection, returning its innovation number
        get(node_in, node_out): Look up a connection's innovation number (or None)
    """

    def __init__(self, start: int):
        """
        Parameters:
            start: the first innovation number to issue (usually num_inputs + num_outputs)
        """
        self._count: int = start - 1

        # For each connection ever registered, map its endpoints to its innovation number
        self._connections: dict[tuple[int, int], int] = {}   # (node_in, node_out) -> innovation number

    def add(self, node_in: int, node_out: int) -> int:
        """
        Get the innovation number for a connection, identified by its endpoints.
        Returns the existing innovation number if this connection was registered
        before, otherwise assigns a new one.

        Parameters:
            node_in:  node ID for the 'from' end of the connection
            node_out: node ID for the 'to'   end of the connection

        Returns:
            connection ID (a.k.a. innovation number)
        """
        key = (node_in, node_out)
        if key not in self._connections:
            self._count += 1
            self._connections[key] = self._count

        return self._connections[key]

    def get(self, node_in: int, node_out: int) -> int | None:
        """
        Look up the innovation number of a previously registered connection.

        Returns:
            the innovation number, or None if the connection was never registered
        """
        return self._connections.get((node_in, node_out))

    def __len__(self):
        return len(self._connections)

    def __repr__(self):
        return f"InnovationTracker(count={self._count}, connections={len(self._connections)})"
