"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))


class ScriptedRandom:
    """
    RandomSource replaying a fixed sequence of draws, cycling when exhausted.
    """

    def __init__(self, draws):
        self._draws = list(draws)
        self.calls  = 0

    def uniform(self) -> float:
        value = self._draws[self.calls % len(self._draws)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_rng():
    """Factory for RandomSources replaying the given draws."""
    return ScriptedRandom


@pytest.fixture
def one_connection_genome():
    """2 inputs, 1 output, no hidden nodes, one connection 0=>2 (weight 0.5)."""
    from neatstep.genotype import Genome
    return Genome.from_dict({
        "nodes": [
            {"id": 0, "type": "input"},
            {"id": 1, "type": "input"},
            {"id": 2, "type": "output"}
        ],
        "connections": [
            {"innovation": 0, "from": 0, "to": 2, "weight": 0.5, "enabled": True}
        ]
    })
