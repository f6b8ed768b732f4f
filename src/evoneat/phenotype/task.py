"""
NEAT Task Module

This module defines the abstract interface between the evolutionary core and
the simulation an evolved network is scored against.

Classes:
    Task: Abstract episode driven by a network, producing a fitness score
"""

from abc    import ABC, abstractmethod
from typing import Sequence

class Task(ABC):
    """
    Abstract base class for the task an evolved network is evaluated on.

    A fresh Task instance is constructed for every evaluation, with a seed so any
    task-internal randomness can be made reproducible. The network then drives the
    task one step at a time: each call to 'step' receives the network's current
    outputs and returns the next inputs for the network. Once the episode is over,
    'score' returns the fitness.

    Subclasses must keep the constructor signature '(seed)' and implement:
    - step(outputs): Advance the episode, returning the next network inputs
    - score():       None while the episode runs, the final fitness once it is over

    'score' must eventually return a value; nothing bounds the number of steps.
    """

    def __init__(self, seed: int):
        """
        Parameters:
            seed: seed for task-internal randomness
        """
        self.seed = seed

    @abstractmethod
    def step(self, outputs: Sequence[float]) -> Sequence[float]:
        """
        Advance the episode by one step.

        Parameters:
            outputs: the network's current outputs (as many as output nodes)

        Returns:
            the next network inputs (as many as input nodes)
        """
        pass

    @abstractmethod
    def score(self) -> float | None:
        """
        Returns:
            None while the episode is ongoing, the fitness once it has ended
        """
        pass
