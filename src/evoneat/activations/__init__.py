"""
Activations Package

This package provides activation functions for NEAT neural networks.

Exported:
    sigmoid_activation: Steepened sigmoid, 1 / (1 + exp(-steepness * z))
"""

from evoneat.activations.basic_activations import sigmoid_activation

__all__ = [
    'sigmoid_activation'
]
