"""
NEAT Trial Module

This module defines the Trial class, which drives one independent run of the
NEAT algorithm: a population is evolved, generation after generation, until a
target fitness is reached or the maximum number of generations has elapsed.
"""

from pathlib import Path
from typing  import TYPE_CHECKING

from evoneat.pool           import Population
from evoneat.run.checkpoint import load_or_create_population, save_population
from evoneat.run.config     import NeatSettings
if TYPE_CHECKING:
    from evoneat.phenotype import Network, Task

class Trial:
    """
    One independent run of the NEAT algorithm.

    A trial evolves a population on a Task until the best fitness reaches
    'fitness_threshold' (if given) or 'max_generations' generations have run.
    With a 'checkpoint_path', the trial resumes from an existing checkpoint and
    saves the population after every generation.

    Subclasses can override:
    - _report_progress(): Display progress after each generation
    - _final_report():    Display final results
    - _terminate():       Custom termination logic

    Public Attributes:
        failed: Whether the trial ended without reaching the fitness threshold

    Public Methods:
        run(): Execute a complete NEAT trial

    Parallelization of fitness evaluation:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self,
                 settings         : NeatSettings,
                 task_type        : type['Task'],
                 population_size  : int,
                 inputs           : int,
                 outputs          : int,
                 max_generations  : int,
                 fitness_threshold: float | None       = None,
                 checkpoint_path  : str | Path | None = None,
                 suppress_output  : bool               = False):
        """
        Parameters:
            settings:          Configuration parameters
            task_type:         Task subclass the networks are evaluated on
            population_size:   Number of organisms in each generation
            inputs:            Number of network inputs
            outputs:           Number of network outputs
            max_generations:   Number of generations after which to stop
            fitness_threshold: Best fitness which, when met or exceeded, ends the run
            checkpoint_path:   File to resume from and save the population to
            suppress_output:   If True, suppress progress and final reports
        """
        self._settings          = settings
        self._task_type         = task_type
        self._population_size   = population_size
        self._inputs            = inputs
        self._outputs           = outputs
        self._max_generations   = max_generations
        self._fitness_threshold = fitness_threshold
        self._checkpoint_path   = checkpoint_path
        self._suppress_output   = suppress_output

        self._population: Population | None = None
        self._network   : 'Network | None'   = None
        self._fitness   : float | None       = None
        self.failed     : bool               = True

    def _new_population(self, num_jobs: int) -> Population:
        return Population(self._population_size, self._inputs, self._outputs,
                          self._settings, self._task_type, num_jobs)

    def run(self, num_jobs: int = 1) -> tuple['Network', float]:
        """
        Run the trial.

        Parameters:
            num_jobs: Number of parallel processes for fitness evaluation

        Returns:
            the best network found and its fitness
        """
        self.failed = True
        if self._checkpoint_path is None:
            self._population = self._new_population(num_jobs)
        else:
            self._population = load_or_create_population(self._checkpoint_path,
                                                         lambda: self._new_population(num_jobs))
            self._population.num_jobs = num_jobs

        while not self._terminate():
            self._network, self._fitness = self._population.step()

            if self._checkpoint_path is not None:
                save_population(self._population, self._checkpoint_path)

            if not self._suppress_output:
                self._report_progress()

        if self._network is None:
            best = self._population.best
            self._network, self._fitness = best.network(), best.fitness

        if not self._suppress_output:
            self._final_report()

        return self._network, self._fitness

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        The trial stops after 'max_generations' generations, or as soon as the best
        fitness reaches 'fitness_threshold' (if one was given).

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        terminate = self._population.generation >= self._max_generations

        if self._fitness_threshold is not None and self._fitness is not None:
            success   = self._fitness >= self._fitness_threshold
            terminate = terminate or success
            if success:
                self.failed = False

        return terminate

    def _report_progress(self):
        population = self._population
        print(f"Generation {population.generation:4d}: best fitness {self._fitness:.4f}, "
              f"{population.species_count()} species, {len(population.organisms)} organisms")

    def _final_report(self):
        status = "failed" if self.failed and self._fitness_threshold is not None else "finished"
        print(f"\nTrial {status} after {self._population.generation} generations, "
              f"best fitness {self._fitness:.4f}")
        print(self._network)
