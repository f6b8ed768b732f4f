"""
Unit tests for the steepened sigmoid activation.
"""

import math
import pytest

from evoneat.activations import sigmoid_activation


class TestSigmoidActivation:
    """Test sigmoid_activation(z, steepness)."""

    def test_zero(self):
        assert sigmoid_activation(0.0, 4.9) == 0.5

    @pytest.mark.parametrize("z, steepness", [(0.3, 4.9), (-0.3, 4.9), (2.0, 1.0), (-1.5, 0.5)])
    def test_matches_formula(self, z, steepness):
        expected = 1.0 / (1.0 + math.exp(-steepness * z))
        assert sigmoid_activation(z, steepness) == pytest.approx(expected)

    def test_symmetry(self):
        assert sigmoid_activation(0.7, 4.9) + sigmoid_activation(-0.7, 4.9) == pytest.approx(1.0)

    @pytest.mark.parametrize("z", [1e4, -1e4, 1e300, -1e300])
    def test_extreme_inputs_do_not_overflow(self, z):
        value = sigmoid_activation(z, 4.9)
        assert 0.0 <= value <= 1.0

    def test_negative_steepness_flips(self):
        assert sigmoid_activation(1.0, -4.9) < 0.5
