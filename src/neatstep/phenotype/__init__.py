"""
NEAT Phenotype Package

This package contains the Organism, the unit of the population: a genome
together with the activation state of the network it encodes.

Modules:
    organism: Organism class

Exported Classes:
    Organism: A genome coupled with its activation state
"""

from neatstep.phenotype.organism import Organism

__all__ = ['Organism']
