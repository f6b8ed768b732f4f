"""
Unit tests for Population class.

Tests cover seeding, evaluation (serial and parallel), speciation, culling,
repopulation and the generational step.
"""

import math
import pytest
from joblib import parallel_backend
from unittest.mock import patch

from evoneat.genotype  import InnovationTracker
from evoneat.phenotype import Organism, Task
from evoneat.pool      import Population


# ============================================================================
# Fixtures
# ============================================================================

class OutputTask(Task):
    """Presents inputs (1, 0) once and scores the resulting output."""

    instances = 0

    def __init__(self, seed):
        super().__init__(seed)
        OutputTask.instances += 1
        self._steps  = 0
        self._result = None

    def step(self, outputs):
        if self._steps == 1:
            self._result = outputs[0]
        self._steps += 1
        return [1.0, 0.0]

    def score(self):
        return self._result


@pytest.fixture(autouse=True)
def reset_task_counter():
    OutputTask.instances = 0
    yield


@pytest.fixture
def population(settings, seeded_random):
    return Population(20, 2, 1, settings, OutputTask)


# ============================================================================
# Test: initialization
# ============================================================================

class TestPopulationInit:
    """Test Population construction."""

    def test_size(self, population):
        assert len(population.organisms) == 20
        assert population.generation == 0
        assert population.species_count() == 0

    def test_organisms_unevaluated(self, population):
        assert all(organism.fitness is None for organism in population.organisms)

    def test_sentinel_best(self, population):
        assert population.best.fitness == -math.inf

    def test_tracker_starts_above_io_nodes(self, settings):
        with patch('evoneat.pool.population.InnovationTracker', wraps=InnovationTracker) as tracker_type:
            Population(5, 3, 2, settings, OutputTask)
        tracker_type.assert_called_once_with(5)

    def test_seeded_with_connections(self, population):
        """Every genome starts from one connection attempt, most succeed."""
        assert sum(1 for o in population.organisms if o.genome.conn_genes) > 0


# ============================================================================
# Test: evaluation
# ============================================================================

class TestPopulationExecute:
    """Test Population.execute()."""

    def test_evaluates_all(self, population):
        population.execute()
        assert all(organism.fitness is not None for organism in population.organisms)
        assert all(0.0 <= organism.fitness <= 1.0 for organism in population.organisms)
        assert OutputTask.instances == 20

    def test_skips_evaluated(self, population):
        population.execute()
        population.execute()
        assert OutputTask.instances == 20

    def test_reset_fitness_reevaluates(self, population, settings):
        settings.reset_fitness = True
        population.execute()
        population.execute()
        assert OutputTask.instances == 40

    def test_fitness_matches_network(self, population):
        population.execute()
        for organism in population.organisms:
            assert organism.fitness == organism.network().prop([1.0, 0.0])[0]

    def test_parallel_matches_serial(self, population):
        population.num_jobs = 2
        with parallel_backend('threading'):
            population.execute()

        for organism in population.organisms:
            assert organism.fitness == organism.network().prop([1.0, 0.0])[0]

    def test_parallel_uses_joblib(self, population):
        population.num_jobs = 2
        with patch('evoneat.pool.population.Parallel') as parallel:
            parallel.return_value.return_value = [0.5] * 20
            population.execute()

        parallel.assert_called_once_with(2)
        assert all(organism.fitness == 0.5 for organism in population.organisms)


# ============================================================================
# Test: speciation and culling
# ============================================================================

class TestPopulationSelection:
    """Test Population.speciate() and Population.kill()."""

    def test_speciate_partitions_population(self, population):
        population.execute()
        species = population.speciate()

        members = [organism for spec in species for organism in spec.members]
        assert sorted(o.ID for o in members) == sorted(o.ID for o in population.organisms)
        assert population.species_count() == len(species)

    def test_speciate_tracks_best(self, population):
        population.execute()
        population.speciate()
        assert population.best.fitness == max(o.fitness for o in population.organisms)

    def test_best_is_a_copy(self, population):
        population.execute()
        population.speciate()
        assert all(population.best is not organism for organism in population.organisms)

    def test_kill_shrinks_population(self, population):
        population.execute()
        population.kill()
        assert 1 <= len(population.organisms) <= 20
        assert all(organism.fitness is not None for organism in population.organisms)

    def test_kill_falls_back_to_best(self, population):
        population.execute()
        with patch('evoneat.pool.species.Species.cull', return_value=[]):
            population.kill()

        assert len(population.organisms) == 1
        assert population.organisms[0].fitness == population.best.fitness

    def test_reset_fitness_reevaluates_best(self, population, settings):
        population.execute()
        population.speciate()
        evaluated = OutputTask.instances

        settings.reset_fitness = True
        population.speciate()
        assert OutputTask.instances == evaluated + 1


# ============================================================================
# Test: repopulation and stepping
# ============================================================================

class TestPopulationStep:
    """Test Population.generate() and Population.step()."""

    def test_generate_refills(self, population):
        population.execute()
        population.kill()
        survivors = list(population.organisms)
        population.generate()

        assert len(population.organisms) == 20
        assert all(s in population.organisms for s in survivors)

    def test_generate_new_organisms_unevaluated(self, population):
        population.execute()
        population.kill()
        survivors = {id(o) for o in population.organisms}
        population.generate()

        offspring = [o for o in population.organisms if id(o) not in survivors]
        assert offspring
        assert all(o.fitness is None for o in offspring)

    def test_generate_crossover_cap(self, settings, seeded_random):
        """Crossover stops at three quarters of the size, clones fill the rest."""
        population = Population(8, 2, 1, settings, OutputTask)
        population.organisms = [Organism(population.organisms[i].genome, float(i)) for i in range(4)]

        with patch.object(Organism, 'mate', autospec=True, side_effect=Organism.mate) as mate:
            population.generate()

        # 4 survivors + 2 crossover children reach the cap of 6
        assert mate.call_count == 2
        assert len(population.organisms) == 8

    def test_size_constant_over_generations(self, population):
        for _ in range(15):
            population.step()
            assert len(population.organisms) == 20

    def test_step_returns_best(self, population):
        for generation in range(1, 6):
            network, fitness = population.step()
            assert population.generation == generation
            assert fitness == population.best.fitness
            assert network.prop([1.0, 0.0])[0] == pytest.approx(fitness)
            assert population.species_count() >= 1

    def test_best_fitness_never_decreases(self, population):
        best = -math.inf
        for _ in range(10):
            _, fitness = population.step()
            assert fitness >= best
            best = fitness
