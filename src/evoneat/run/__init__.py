"""
NEAT Run Package

This package contains the configuration, checkpointing and the driver
used to run the NEAT algorithm.

Modules:
    config:     NeatSettings, the tunable parameters of the algorithm
    checkpoint: Saving and restoring populations and networks
    trial:      One independent run of the NEAT algorithm

Exported Classes:
    NeatSettings: Configuration parameters
    Trial:        Evolves a population until a termination condition is met
"""

from evoneat.run.config     import NeatSettings
from evoneat.run.checkpoint import (load_network, load_or_create_population, load_population,
                                    save_network, save_population)
from evoneat.run.trial      import Trial

__all__ = ['NeatSettings',
           'Trial',
           'load_network',
           'load_or_create_population',
           'load_population',
           'save_network',
           'save_population']
