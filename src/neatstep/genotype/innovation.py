"""
NEAT Innovation Module

This module implements the bookkeeping that gives identical structural changes
the same innovation numbers within one generation.

Classes:
    ConnectionInnovation: A new connection between two nodes
    NodeInnovation:       A new node splitting the connection between two nodes
    InnovationLedger:     Innovations seen this generation plus the innovation counter
    NothingAdded:         Result of a structural mutation that added no gene
    GenesAdded:           Result of a structural mutation that added genes
"""

import logging
from dataclasses import dataclass
from typing      import Union

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ConnectionInnovation:
    """
    A new connection from 'in_node' to 'out_node'. Creates one gene.
    """
    in_node : int
    out_node: int

    num_genes = 1

@dataclass(frozen=True)
class NodeInnovation:
    """
    A new node splitting the connection from 'in_node' to 'out_node'. Creates two genes.
    """
    in_node : int
    out_node: int

    num_genes = 2

Innovation = Union[ConnectionInnovation, NodeInnovation]

@dataclass(frozen=True)
class NothingAdded:
    """
    The structural mutation added no gene (the connection already existed,
    or a disabled one was re-enabled).
    """

@dataclass(frozen=True)
class GenesAdded:
    """
    The structural mutation added new genes.

    Attributes:
        innovation:         the structural change that was made
        innovation_numbers: innovation numbers of the new genes, in creation order
    """
    innovation        : Innovation
    innovation_numbers: tuple[int, ...]

    @property
    def num_genes(self) -> int:
        return len(self.innovation_numbers)

MutationResult = Union[NothingAdded, GenesAdded]

class InnovationLedger:
    """
    Tracks the structural changes made during the current generation.

    The ledger maps each innovation to the first innovation number assigned to
    it (a node split owns that number and the next one) and holds the counter
    of the next unused innovation number. Looking an innovation up before
    assigning numbers guarantees that two genomes making the same structural
    change in the same generation receive the same numbers, regardless of the
    order in which they mutate.

    The ledger is an explicit value: it is passed to every mutation call and
    must not be shared by concurrent, unsynchronized mutations.

    Public Attributes:
        next_innovation: the next unused innovation number (never decreases)

    Public Methods:
        lookup(innovation):              first innovation number already assigned, or None
        register(innovation, num_genes): assign new numbers and record the innovation
        reset():                         forget this generation's innovations
    """

    def __init__(self, next_innovation: int = 0):
        """
        Parameters:
            next_innovation: the first innovation number to hand out
        """
        self.next_innovation: int                  = next_innovation
        self._innovations   : dict[Innovation, int] = {}  # innovation => first innovation number

    def lookup(self, innovation: Innovation) -> int | None:
        """
        Get the first innovation number assigned to an innovation this generation.

        Parameters:
            innovation: the structural change to look up

        Returns:
            the first innovation number, or None if the change is new this generation
        """
        return self._innovations.get(innovation)

    def register(self, innovation: Innovation, num_genes: int) -> int:
        """
        Assign innovation numbers to a new structural change.

        Parameters:
            innovation: the structural change being made
            num_genes:  how many genes the change created

        Returns:
            the first of the 'num_genes' consecutive innovation numbers assigned

        Raises:
            ValueError: if the innovation was already registered this generation
        """
        if innovation in self._innovations:
            raise ValueError(f"{innovation} was already registered this generation")

        first = self.next_innovation
        self._innovations[innovation] = first
        self.next_innovation += num_genes
        logger.debug("Registered %s as innovation %d (%d genes)", innovation, first, num_genes)
        return first

    def reset(self) -> None:
        """
        Forget the innovations of the current generation.
        The counter is kept, so numbers are never handed out twice.
        """
        self._innovations = {}

    def __contains__(self, innovation: Innovation) -> bool:
        return innovation in self._innovations

    def __len__(self) -> int:
        return len(self._innovations)

    def __repr__(self):
        return f"InnovationLedger(next_innovation={self.next_innovation}, innovations={len(self)})"
