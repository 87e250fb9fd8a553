"""
neatstep - evolving the topology and weights of small neural networks.

An implementation of the genetic core of NEAT (NeuroEvolution of Augmenting
Topologies, http://nn.cs.utexas.edu/downloads/papers/stanley.ec02.pdf):
genomes that grow by adding connections and nodes, historical markings
("innovation numbers") shared by identical structural changes made within one
generation, and networks activated one propagation step at a time so that
recurrent topologies are handled naturally.

Main components:
- genotype: Genomes, genes, activation state, innovation ledger
- phenotype: Organisms (a genome plus its activation state)
- pool: The population and its summary statistics
- run: Configuration, randomness and the fitness interface
- activations: Activation functions for neural networks

Example:
    >>> from neatstep import Config, Population
    >>> config = Config("config.ini")
    >>> population = Population(config, config.make_rng())
    >>> population.evaluate(MyEnvironment())
    >>> population.mutate(config.mutation_params)
"""

__version__ = "0.1.0"

from neatstep.run.config import Config, MutationParams
from neatstep.run.environment import Environment
from neatstep.run.random_source import RandomSource, NumpyRandom
from neatstep.genotype.genome import Genome
from neatstep.genotype.activation_state import Activations
from neatstep.genotype.node_gene import NodeGene, NodeType
from neatstep.genotype.connection_gene import ConnectionGene
from neatstep.genotype.innovation import (ConnectionInnovation, NodeInnovation, InnovationLedger,
                                          NothingAdded, GenesAdded)
from neatstep.genotype.errors import (NeatError, SizeMismatchError, InvalidIndexError,
                                      InvalidStateError, EmptyCandidateError)
from neatstep.phenotype.organism import Organism
from neatstep.pool.population import Population, PopulationSummary

__all__ = [
    "Config",
    "MutationParams",
    "Environment",
    "RandomSource",
    "NumpyRandom",
    "Genome",
    "Activations",
    "NodeGene",
    "NodeType",
    "ConnectionGene",
    "ConnectionInnovation",
    "NodeInnovation",
    "InnovationLedger",
    "NothingAdded",
    "GenesAdded",
    "NeatError",
    "SizeMismatchError",
    "InvalidIndexError",
    "InvalidStateError",
    "EmptyCandidateError",
    "Organism",
    "Population",
    "PopulationSummary",
]
