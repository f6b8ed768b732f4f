"""
NEAT Checkpoint Module

Save and restore a population (organisms, fitness, innovation tracker, settings)
or a single compiled network. The format is pickle: opaque, and only guaranteed
to round-trip within one version of the package.

Functions:
    save_population:           Write a population to disk
    load_population:           Read a population from disk (None if absent)
    load_or_create_population: Resume from a checkpoint, or build a fresh population
    save_network:              Write a network to disk
    load_network:              Read a network from disk (None if absent)
"""

import logging
import pickle
from pathlib import Path
from typing  import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from evoneat.phenotype import Network
    from evoneat.pool      import Population

logger = logging.getLogger(__name__)

def _save(obj, path: str | Path) -> None:
    with open(path, 'wb') as _out:
        pickle.dump(obj, _out, pickle.HIGHEST_PROTOCOL)

def _load(path: str | Path):
    try:
        with open(path, 'rb') as _in:
            return pickle.load(_in)
    except FileNotFoundError:
        return None

def save_population(population: 'Population', path: str | Path) -> None:
    """
    Save a population to disk.

    Raises:
        OSError: if the file cannot be written
    """
    _save(population, path)
    logger.info("Saved population (generation %d) to %s", population.generation, path)

def load_population(path: str | Path) -> 'Population | None':
    """
    Load a population from disk.

    Returns:
        the population, or None if there is no checkpoint at 'path'

    Raises:
        OSError:               if the file exists but cannot be read
        pickle.UnpicklingError: if the file is not a valid checkpoint
    """
    population = _load(path)
    if population is not None:
        logger.info("Loaded population (generation %d) from %s", population.generation, path)
    return population

def load_or_create_population(path: str | Path, factory: Callable[[], 'Population']) -> 'Population':
    """
    Resume from the checkpoint at 'path' if there is one, otherwise
    build a fresh population by calling 'factory'.
    """
    population = load_population(path)
    if population is None:
        logger.info("No checkpoint at %s, starting a new population", path)
        population = factory()
    return population

def save_network(network: 'Network', path: str | Path) -> None:
    """
    Save a compiled network to disk.

    Raises:
        OSError: if the file cannot be written
    """
    _save(network, path)
    logger.info("Saved network to %s", path)

def load_network(path: str | Path) -> 'Network | None':
    """
    Load a compiled network from disk.

    Returns:
        the network, or None if there is no file at 'path'
    """
    return _load(path)
