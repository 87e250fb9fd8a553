"""
NEAT Genotype Package

This package implements the genotype representation for the NEAT (NeuroEvolution of
Augmenting Topologies) algorithm: the genome, its genes, the state used to step the
network it encodes, and the bookkeeping of innovation numbers.

Modules:
    node_gene:        NodeType enumeration and NodeGene class
    connection_gene:  ConnectionGene class
    activation_state: Activations class
    genome:           Genome class
    innovation:       Innovation records, InnovationLedger and mutation results
    errors:           Exceptions raised by genome operations

Exported Classes:
    NodeType:             Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene:             Gene encoding a single network node
    ConnectionGene:       Gene encoding a weighted connection between nodes
    Activations:          Per-node propagation state between activation steps
    Genome:               Complete genome representing a neural network
    ConnectionInnovation: Innovation record for a new connection
    NodeInnovation:       Innovation record for a connection split by a new node
    InnovationLedger:     Innovations of the current generation plus the innovation counter
    NothingAdded:         Structural mutation result: no gene added
    GenesAdded:           Structural mutation result: genes added
"""

from neatstep.genotype.activation_state import Activations
from neatstep.genotype.connection_gene  import ConnectionGene
from neatstep.genotype.errors           import (NeatError, SizeMismatchError, InvalidIndexError,
                                                InvalidStateError, EmptyCandidateError)
from neatstep.genotype.genome           import Genome
from neatstep.genotype.innovation       import (ConnectionInnovation, NodeInnovation, Innovation,
                                                InnovationLedger, NothingAdded, GenesAdded,
                                                MutationResult)
from neatstep.genotype.node_gene        import NodeType, NodeGene

__all__ = ['Activations',
           'ConnectionGene',
           'Genome',
           'NodeGene',
           'NodeType',
           'ConnectionInnovation',
           'NodeInnovation',
           'Innovation',
           'InnovationLedger',
           'NothingAdded',
           'GenesAdded',
           'MutationResult',
           'NeatError',
           'SizeMismatchError',
           'InvalidIndexError',
           'InvalidStateError',
           'EmptyCandidateError']
