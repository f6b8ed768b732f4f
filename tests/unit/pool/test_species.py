"""
Unit tests for Species class.

Tests cover membership and culling.
"""

import random
import pytest
from unittest.mock import patch

from evoneat.genotype  import Genome
from evoneat.phenotype import Organism
from evoneat.pool      import Species


# ============================================================================
# Fixtures
# ============================================================================

def make_species(fitnesses):
    members = [Organism(Genome(2, 1), fitness) for fitness in fitnesses]
    species = Species(members[0])
    for organism in members[1:]:
        species.add(organism)
    return species


# ============================================================================
# Test: membership
# ============================================================================

class TestSpeciesMembership:
    """Test Species construction, accepts() and add()."""

    def test_representative_is_first_member(self):
        organism = Organism(Genome(2, 1))
        species  = Species(organism)
        assert species.representative is organism
        assert species.members == [organism]
        assert len(species) == 1

    def test_accepts_same_genome(self, settings):
        species = Species(Organism(Genome(2, 1)))
        assert species.accepts(Organism(Genome(2, 1)), settings)

    def test_add(self):
        species = make_species([1.0, 2.0, 3.0])
        assert len(species) == 3


# ============================================================================
# Test: culling
# ============================================================================

class TestSpeciesCull:
    """Test Species.cull()."""

    @pytest.mark.parametrize("size", [2, 3, 4, 5, 10, 11])
    def test_keeps_fitter_half(self, size):
        fitnesses = [float(f) for f in range(size)]
        random.shuffle(fitnesses)
        survivors = make_species(fitnesses).cull()

        assert len(survivors) == size // 2
        assert len(survivors) >= 1
        assert [o.fitness for o in survivors] == sorted(fitnesses, reverse=True)[:size // 2]

    def test_lone_member_survives_on_heads(self):
        species = make_species([1.0])
        with patch.object(random, 'random', return_value=0.1):
            assert species.cull() == species.members

    def test_lone_member_dies_on_tails(self):
        species = make_species([1.0])
        with patch.object(random, 'random', return_value=0.9):
            assert species.cull() == []

    def test_lone_member_coin_flip(self, seeded_random):
        outcomes = {len(make_species([1.0]).cull()) for _ in range(100)}
        assert outcomes == {0, 1}
