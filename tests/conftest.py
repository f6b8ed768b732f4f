"""Pytest configuration and shared fixtures."""

import pytest
import random
import sys
from pathlib import Path

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))


@pytest.fixture
def settings():
    """Default settings."""
    from evoneat.run.config import NeatSettings
    return NeatSettings()


@pytest.fixture
def tracker():
    """Innovation tracker for a 2-input, 1-output genome."""
    from evoneat.genotype import InnovationTracker
    return InnovationTracker(3)


@pytest.fixture
def seeded_random():
    """Seed the random number generator for reproducibility."""
    random.seed(42)
    yield
    random.seed(None)
