"""
Unit tests for Trial class.

Tests cover termination, reporting, checkpointing and parallel evaluation.
"""

import pytest
from joblib import parallel_backend

from evoneat.phenotype import Network, Task
from evoneat.run       import Trial, load_population


# ============================================================================
# Fixtures
# ============================================================================

class HighOutputTask(Task):
    """Rewards a high output for inputs (1, 0)."""

    def __init__(self, seed):
        super().__init__(seed)
        self._steps  = 0
        self._result = None

    def step(self, outputs):
        if self._steps == 1:
            self._result = outputs[0]
        self._steps += 1
        return [1.0, 0.0]

    def score(self):
        return self._result


def make_trial(settings, **kwargs):
    options = dict(population_size=20, inputs=2, outputs=1, max_generations=5, suppress_output=True)
    options.update(kwargs)
    return Trial(settings, HighOutputTask, **options)


# ============================================================================
# Test: termination
# ============================================================================

class TestTrialTermination:
    """Test when a trial stops."""

    def test_runs_max_generations(self, settings, seeded_random):
        trial = make_trial(settings, max_generations=4)
        network, fitness = trial.run()

        assert isinstance(network, Network)
        assert trial._population.generation == 4
        assert trial.failed is True
        assert 0.0 <= fitness <= 1.0

    def test_stops_at_threshold(self, settings, seeded_random):
        # Any output at all meets this threshold
        trial = make_trial(settings, max_generations=50, fitness_threshold=0.0)
        _, fitness = trial.run()

        assert trial._population.generation == 1
        assert trial.failed is False
        assert fitness >= 0.0

    def test_unreachable_threshold_fails(self, settings, seeded_random):
        trial = make_trial(settings, max_generations=3, fitness_threshold=2.0)
        trial.run()
        assert trial._population.generation == 3
        assert trial.failed is True

    def test_zero_generations(self, settings, seeded_random):
        trial = make_trial(settings, max_generations=0)
        network, fitness = trial.run()
        assert isinstance(network, Network)
        assert fitness == float('-inf')


# ============================================================================
# Test: reporting
# ============================================================================

class TestTrialReporting:
    """Test progress output."""

    def test_suppressed(self, settings, seeded_random, capsys):
        make_trial(settings, max_generations=2).run()
        assert capsys.readouterr().out == ""

    def test_reports_each_generation(self, settings, seeded_random, capsys):
        make_trial(settings, max_generations=3, suppress_output=False).run()
        out = capsys.readouterr().out
        assert out.count("Generation") == 3
        assert "Trial finished after 3 generations" in out

    def test_reports_failure(self, settings, seeded_random, capsys):
        make_trial(settings, max_generations=2, fitness_threshold=2.0, suppress_output=False).run()
        assert "Trial failed after 2 generations" in capsys.readouterr().out


# ============================================================================
# Test: checkpointing and parallelism
# ============================================================================

class TestTrialCheckpoint:
    """Test resuming from and saving to a checkpoint."""

    def test_saves_every_generation(self, settings, seeded_random, tmp_path):
        path = tmp_path / "trial.pkl"
        make_trial(settings, max_generations=3, checkpoint_path=path).run()

        assert load_population(path).generation == 3

    def test_resumes_from_checkpoint(self, settings, seeded_random, tmp_path):
        path = tmp_path / "trial.pkl"
        make_trial(settings, max_generations=3, checkpoint_path=path).run()

        trial = make_trial(settings, max_generations=5, checkpoint_path=path)
        trial.run()
        assert trial._population.generation == 5
        assert load_population(path).generation == 5

    def test_parallel_run(self, settings, seeded_random):
        with parallel_backend('threading'):
            trial = make_trial(settings, max_generations=2)
            _, fitness = trial.run(num_jobs=2)

        assert trial._population.num_jobs == 2
        assert trial._population.generation == 2
        assert 0.0 <= fitness <= 1.0
