"""
NEAT Run Package

This package holds what surrounds the genetic core: configuration, the source
of randomness and the task interface used to score organisms.

Modules:
    config:        Configuration management for NEAT parameters
    environment:   Abstract task interface producing a fitness score
    random_source: Source of uniform draws and helpers built on it

Exported Classes:
    Config:         Configuration parameters read from an INI file
    MutationParams: Probabilities and magnitudes for organism mutation
    Environment:    Abstract base class for fitness evaluation
    RandomSource:   Protocol for a source of uniform draws in [0, 1)
    NumpyRandom:    Default RandomSource backed by numpy
"""

from neatstep.run.config        import Config, MutationParams
from neatstep.run.environment   import Environment
from neatstep.run.random_source import RandomSource, NumpyRandom

__all__ = ['Config', 'MutationParams', 'Environment', 'RandomSource', 'NumpyRandom']
