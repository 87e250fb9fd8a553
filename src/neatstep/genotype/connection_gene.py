"""
NEAT Connection Gene Module

This module implements the ConnectionGene class for the
NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

from neatstep.run.random_source import RandomSource, uniform_range

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the neural network graph,
    connecting a source node to a destination node with an associated weight.
    The innovation number is the historical marker of the structural change that
    created the gene; it is what aligns equivalent genes across genomes.

    Connections can be enabled or disabled, allowing NEAT to preserve structural
    information while temporarily deactivating pathways. A genome holds at most
    one gene per (node_in, node_out) pair, so re-connecting a disabled pair
    re-enables this gene rather than creating another one.

    Public Attributes:
        node_in:    Index of the source node
        node_out:   Index of the destination node
        weight:     Weight of the connection
        enabled:    Whether this connection is active in the network
        innovation: Innovation number identifying this connection historically

    Public Methods:
        mutate(...): Stochastically perturb and/or reassign the weight
    """

    def __init__(self,
                 node_in   : int,
                 node_out  : int,
                 weight    : float,
                 innovation: int,
                 enabled   : bool = True):
        """
        Parameters:
            node_in:    Index of the source node
            node_out:   Index of the destination node
            weight:     Weight of the connection
            innovation: Number historically identifying this connection
            enabled:    Whether this connection is active in the network
        """
        self.node_in   : int   = node_in
        self.node_out  : int   = node_out
        self.weight    : float = weight
        self.enabled   : bool  = enabled
        self.innovation: int   = innovation

    @property
    def key(self) -> tuple[int, int]:
        """The (node_in, node_out) pair this gene connects."""
        return (self.node_in, self.node_out)

    def mutate(self,
               p_uniform   : float,
               uniform_max : float,
               p_reassign  : float,
               reassign_max: float,
               rng         : RandomSource) -> None:
        """
        Stochastically mutate the weight of the connection.

        The two kinds of mutation are decided independently, perturbation first:
         + with probability 'p_uniform' add a value from [-uniform_max, uniform_max]
         + with probability 'p_reassign' replace the weight by a value from [0, reassign_max]
        When both happen the reassignment wins.
        """
        if rng.uniform() < p_uniform:
            self.weight += uniform_range(rng, -uniform_max, uniform_max)

        if rng.uniform() < p_reassign:
            self.weight = uniform_range(rng, 0.0, reassign_max)

    def copy(self) -> 'ConnectionGene':
        return ConnectionGene(self.node_in, self.node_out, self.weight, self.innovation, self.enabled)

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return (self.node_in, self.node_out, self.weight, self.enabled, self.innovation) == \
               (other.node_in, other.node_out, other.weight, other.enabled, other.innovation)

    def __repr__(self):
        return (f"ConnectionGene(node_in={self.node_in:03d}, node_out={self.node_out:03d}, "
                f"weight={self.weight:+.6f}, enabled={self.enabled}, innovation={self.innovation:03d})")

    def __str__(self):
        s  = f"[{self.innovation:03d},{'E' if self.enabled else 'D'},"
        s += f"{self.node_in:02d}=>{self.node_out:02d},{self.weight:+.02f}]"
        return s
