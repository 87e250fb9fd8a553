"""
Randomness Module

Every stochastic decision in neatstep (probability gates, weight draws and the
choice of structural mutation targets) is taken from a source of uniform draws
in [0, 1). The source is passed explicitly to the operations that need it, so
tests can replay a fixed sequence of draws.

Classes:
    RandomSource: Protocol for a source of uniform draws
    NumpyRandom:  Default source backed by a numpy Generator

Functions:
    uniform_range(rng, low, high): uniform draw in [low, high)
    choice_index(rng, n):          uniform integer in [0, n)
"""

from typing import Protocol

import numpy as np

class RandomSource(Protocol):
    """
    Anything that produces uniform draws in [0, 1) on demand.
    """

    def uniform(self) -> float:
        ...

class NumpyRandom:
    """
    Source of uniform draws backed by 'numpy.random.Generator'.
    """

    def __init__(self, seed: int | None = None):
        """
        Parameters:
            seed: seed for the underlying generator (None for OS entropy)
        """
        self.seed       = seed
        self._generator = np.random.default_rng(seed)

    def uniform(self) -> float:
        return float(self._generator.random())

    def __repr__(self):
        return f"NumpyRandom(seed={self.seed})"

def uniform_range(rng: RandomSource, low: float, high: float) -> float:
    """
    Draw a value uniformly from [low, high).
    """
    return low + (high - low) * rng.uniform()

def choice_index(rng: RandomSource, n: int) -> int:
    """
    Draw an integer uniformly from [0, n).

    Raises:
        ValueError: if 'n' is not positive
    """
    if n <= 0:
        raise ValueError(f"Cannot choose among {n} candidates")

    # min() guards against sources that round up to 1.0
    return min(int(rng.uniform() * n), n - 1)
