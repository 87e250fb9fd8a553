"""
NEAT Organism Module

This module implements the Organism class, an individual of the population that
attempts to perform a task through the network its genome encodes.

Classes:
    Organism: A genome coupled with the activation state of its network
"""

import logging
from itertools import count
from typing    import Callable, Optional, Sequence

from neatstep.genotype            import Activations, Genome
from neatstep.genotype.errors     import EmptyCandidateError
from neatstep.genotype.innovation import (ConnectionInnovation, GenesAdded, Innovation,
                                          InnovationLedger, MutationResult, NodeInnovation)
from neatstep.run.config          import MutationParams
from neatstep.run.random_source   import RandomSource, uniform_range

logger = logging.getLogger(__name__)

class Organism:
    """
    An individual organism in the NEAT population.

    An organism owns exactly one genome and one activation state sized to it; the
    two are created together and never shared. Activating the organism steps its
    network forward, mutating it changes its genome (growing the activation state
    along with it) and records structural changes in the generation's innovation
    ledger.

    The fitness of an Organism is assessed by an 'Environment'.

    Public Attributes:
        ID:          Globally unique identifier for this organism
        fitness:     Fitness score (None until evaluated, reset by mutation)
        genome:      The genome encoding the organism's network
        activations: The propagation state of the network

    Public Methods:
        activate(inputs):         Take one propagation step, keeping history
        fresh_activate(inputs):   Forget history, then take one propagation step
        reset_activations():      Forget history
        add_connection(...):      Add a given connection, deduplicating its innovation
        add_node(...):            Split a given connection, deduplicating its innovation
        new_rand_connection(...): Add a random connection, deduplicating its innovation
        new_rand_node(...):       Split a random connection, deduplicating its innovation
        mutate(...):              Apply all mutations stochastically
        clone():                  Create a genetic copy of this organism
    """

    _id_generator = count(0)

    def __init__(self, genome: Genome):
        """
        Parameters:
            genome: The Genome encoding the network of this organism
        """
        self.ID         : int             = next(Organism._id_generator)
        self.fitness    : Optional[float] = None
        self.genome     : Genome          = genome
        self.activations: Activations     = genome.new_activations()

    def activate(self, inputs: Sequence[float]) -> list[float]:
        """
        Pass the inputs into the network and take one propagation step,
        starting from the state left by the previous call.
        """
        return self.genome.activate(self.activations, inputs)

    def fresh_activate(self, inputs: Sequence[float]) -> list[float]:
        """
        Discard the activation history, then take one propagation step.
        """
        self.reset_activations()
        return self.activate(inputs)

    def reset_activations(self) -> None:
        self.activations = self.genome.new_activations()

    def add_connection(self,
                       node_in : int,
                       node_out: int,
                       weight  : float,
                       ledger  : InnovationLedger) -> MutationResult:
        """
        Connect 'node_in' to 'node_out', taking the innovation number from the ledger.

        If the same connection was already created this generation (in any organism
        sharing the ledger) its innovation number is reused, otherwise a new one is
        assigned and recorded. If the pair is joined by a disabled connection, that
        connection is re-enabled and the ledger is left untouched.

        Returns:
            the result of 'Genome.add_connection()'
        """
        return self._apply_innovation(ConnectionInnovation(node_in, node_out),
                                      ledger,
                                      lambda innov: self.genome.add_connection(node_in, node_out, weight, innov))

    def add_node(self, node_in: int, node_out: int, ledger: InnovationLedger) -> MutationResult:
        """
        Split the connection 'node_in' => 'node_out', taking the two innovation
        numbers from the ledger in the same way as 'add_connection()'.

        Returns:
            the result of 'Genome.add_node()'
        """
        return self._apply_innovation(NodeInnovation(node_in, node_out),
                                      ledger,
                                      lambda innov: self.genome.add_node(node_in, node_out, innov))

    def new_rand_connection(self,
                            ledger    : InnovationLedger,
                            rng       : RandomSource,
                            weight_max: float) -> MutationResult:
        """
        Connect a random pair of unconnected nodes.

        The weight of a new connection is drawn from [0, weight_max]. If the pair
        is joined by a disabled connection, that connection is re-enabled instead
        and the ledger is left untouched.

        Parameters:
            ledger:     innovations of the current generation
            rng:        source of randomness
            weight_max: maximum weight of the new connection

        Returns:
            the result of 'Genome.add_connection()'

        Raises:
            EmptyCandidateError: if every eligible pair is already connected
        """
        node_in, node_out = self.genome.get_rand_unconnected(rng)
        weight = uniform_range(rng, 0.0, weight_max)
        return self.add_connection(node_in, node_out, weight, ledger)

    def new_rand_node(self, ledger: InnovationLedger, rng: RandomSource) -> MutationResult:
        """
        Split a random enabled connection with a new hidden node.

        Parameters:
            ledger: innovations of the current generation
            rng:    source of randomness

        Returns:
            the result of 'Genome.add_node()'

        Raises:
            EmptyCandidateError: if the genome has no enabled connection
        """
        node_in, node_out = self.genome.get_rand_connection(rng)
        return self.add_node(node_in, node_out, ledger)

    def _apply_innovation(self,
                          innovation: Innovation,
                          ledger    : InnovationLedger,
                          apply     : Callable[[int], MutationResult]) -> MutationResult:
        """
        Apply a structural change, reusing the innovation numbers it received
        earlier this generation, or taking new ones from the ledger.
        """
        known  = ledger.lookup(innovation)
        innov  = known if known is not None else ledger.next_innovation
        result = apply(innov)

        if isinstance(result, GenesAdded):
            if known is None:
                ledger.register(innovation, result.num_genes)
            else:
                logger.debug("Organism %d reuses innovation %d for %s", self.ID, known, innovation)
            self.activations.grow(self.genome.num_nodes)

        return result

    def mutate(self,
               ledger: InnovationLedger,
               params: MutationParams,
               rng   : RandomSource) -> list[MutationResult]:
        """
        Apply to the genome all possible mutation operations.

        In this order, and each with its own probability:
          + add a connection between a random unconnected pair of nodes
          + split a random enabled connection with a new node
          + perturb and/or reassign the connection weights
        A structural mutation without a valid target is skipped.

        Parameters:
            ledger: innovations of the current generation, shared by every
                    organism mutated in it
            params: mutation probabilities and magnitudes
            rng:    source of randomness

        Returns:
            the results of the structural mutations that were attempted
        """
        results = []

        if rng.uniform() < params.add_connection_prob:
            try:
                results.append(self.new_rand_connection(ledger, rng, params.new_weight_max))
            except EmptyCandidateError:
                logger.debug("Organism %d has no unconnected pair of nodes", self.ID)

        if rng.uniform() < params.add_node_prob:
            try:
                results.append(self.new_rand_node(ledger, rng))
            except EmptyCandidateError:
                logger.debug("Organism %d has no connection to split", self.ID)

        if rng.uniform() < params.mutate_weights_prob:
            self.genome.mutate_weights(params.weight_perturb_prob,
                                       params.weight_perturb_max,
                                       params.weight_reassign_prob,
                                       params.weight_reassign_max,
                                       rng)

        # The fitness belonged to the genome before mutation
        self.fitness = None
        return results

    def clone(self) -> 'Organism':
        """
        Create a new Organism from a copy of this organism's genome.
        """
        return Organism(self.genome.copy())

    def __str__(self):
        fitness = "n/a" if self.fitness is None else f"{self.fitness:.4f}"
        return f"ID={self.ID}, fitness={fitness}\n{self.genome}"

    def __repr__(self):
        return f"Organism(genome={repr(self.genome)})"
