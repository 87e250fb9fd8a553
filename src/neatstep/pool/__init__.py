"""
NEAT Pool Package

This package contains the Population, the fixed-capacity pool of organisms
evaluated and mutated by an external evolutionary driver.

Modules:
    population: Population and PopulationSummary classes

Exported Classes:
    Population:        Fixed-capacity collection of organisms
    PopulationSummary: Best/worst organism and mean fitness of a generation
"""

from neatstep.pool.population import Population, PopulationSummary

__all__ = ['Population', 'PopulationSummary']
