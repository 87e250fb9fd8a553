"""
NEAT Node Gene Module.

This module implements the NodeGene class and NodeType enumeration
for the NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene: Gene encoding a single network node
"""

from enum import Enum

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

class NodeGene:
    """
    A gene describing a node in a Neural Network.

    A node is identified by its index in the genome's list of nodes; the index
    never changes once assigned. Its role is fixed when the node is created.
    The transient propagation values (input sum and output) are not part of the
    gene, they live in the 'Activations' companion of the genome.

    Public Attributes:
        id:   Index of this node within its genome
        type: Type of node (INPUT, HIDDEN, or OUTPUT)
    """

    __slots__ = ("id", "type")

    def __init__(self, node_id: int, node_type: NodeType):
        """
        Parameters:
            node_id:   Index of this node within its genome
            node_type: Type of node (INPUT, HIDDEN, or OUTPUT)
        """
        self.id  : int      = node_id
        self.type: NodeType = node_type

    def __eq__(self, other):
        if not isinstance(other, NodeGene):
            return NotImplemented
        return self.id == other.id and self.type == other.type

    def __hash__(self):
        return hash((self.id, self.type))

    def __repr__(self):
        return f"NodeGene(node_id={self.id:03d}, node_type=NodeType.{self.type.name})"

    def __str__(self):
        return f"[{self.type.value}{self.id}]"
