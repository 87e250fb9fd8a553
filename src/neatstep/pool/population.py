"""
NEAT Population Module

This module implements the Population class, the fixed-size pool of organisms
an external driver evaluates and mutates generation after generation.

Classes:
    PopulationSummary: Best/worst organism and mean fitness of a generation
    Population:        Fixed-capacity collection of organisms
"""

import logging
from dataclasses import dataclass
from statistics  import mean
from typing      import Iterator, Optional, Sequence, TYPE_CHECKING

from joblib import Parallel, delayed

from neatstep.genotype            import Genome
from neatstep.genotype.errors     import SizeMismatchError
from neatstep.genotype.innovation import GenesAdded, InnovationLedger, MutationResult
from neatstep.phenotype           import Organism
from neatstep.run.config          import Config, MutationParams
from neatstep.run.random_source   import RandomSource, choice_index, uniform_range

if TYPE_CHECKING:
    from neatstep.run.environment import Environment

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PopulationSummary:
    """
    Aggregate statistics of one generation.

    Attributes:
        best:  index of the organism with the highest fitness
        worst: index of the organism with the lowest fitness
        mean:  mean fitness across the population
    """
    best : int
    worst: int
    mean : float

class Population:
    """
    A fixed-capacity pool of organisms.

    The population creates its organisms from the configuration, wires their
    initial connections, and keeps the innovation ledger every organism of the
    current generation is mutated against. Fitness is supplied from outside,
    either directly ('record_fitness()') or by an Environment ('evaluate()');
    the summary statistics are computed from it on demand and cached until the
    population changes.

    Public Attributes:
        organisms: List of all Organism objects in the current generation
        ledger:    Innovations of the current generation plus the innovation counter
        size:      Number of organisms (fixed)

    Public Properties:
        summary: PopulationSummary of the recorded fitness

    Public Methods:
        record_fitness(fitnesses):  Associate a fitness with each organism
        evaluate(environment):      Compute and record the fitness of each organism
        fittest():                  Return the organism with the highest fitness
        replace(index, organism):   Swap one organism for another
        mutate(params):             Mutate every organism against the shared ledger
        new_generation():           Forget the innovations of the current generation
    """

    def __init__(self, config: Config, rng: RandomSource, ledger: Optional[InnovationLedger] = None):
        """
        Create 'config.population_size' organisms and connect them according
        to the initial connection policy.

        Parameters:
            config: Stores configuration parameters
            rng:    Source of randomness for initial weights and mutations
            ledger: Innovation ledger to continue from (a new one if None)
        """
        self._config = config
        self._rng    = rng
        self.ledger  = ledger if ledger is not None else InnovationLedger()
        self.size    = config.population_size

        # Step 1: create organisms whose networks consist only of
        # unconnected input and output nodes.
        self.organisms: list[Organism] = []
        for _ in range(self.size):
            genome = Genome(config.num_inputs, config.num_outputs, config.activation)
            self.organisms.append(Organism(genome))

        # Step 2: add connections, the manner depends on the initialization policy.
        # Organisms share the ledger, so identical initial genes share innovation numbers.
        if config.initial_cxn_policy == "none":
            pass  # already unconnected
        elif config.initial_cxn_policy == "one-input":
            self._connect_one_input()
        elif config.initial_cxn_policy == "partial":
            self._connect_partial()
        elif config.initial_cxn_policy == "full":
            self._connect_full()
        else:
            raise RuntimeError("bad initial connection policy")

        self._fitnesses: Optional[list[float]]       = None
        self._summary  : Optional[PopulationSummary] = None

        logger.info("Created population of %d organisms (%d inputs, %d outputs, '%s' connections)",
                    self.size, config.num_inputs, config.num_outputs, config.initial_cxn_policy)

    def _connect(self, organism: Organism, pairs: list[tuple[int, int]]) -> None:
        for node_in, node_out in pairs:
            weight = uniform_range(self._rng, 0.0, self._config.new_weight_max)
            organism.add_connection(node_in, node_out, weight, self.ledger)

    def _connect_one_input(self):
        """
        For each network, connect one random input node to all outputs nodes.
        """
        for organism in self.organisms:
            genome = organism.genome
            if not genome.input_nodes:
                continue
            input_node = genome.input_nodes[choice_index(self._rng, genome.num_inputs)]
            self._connect(organism, [(input_node.id, out.id) for out in genome.output_nodes])

    def _connect_partial(self):
        """
        For each network, connect a fraction of all input-output pairs, chosen at random.
        """
        fraction = self._config.initial_cxn_fraction
        if fraction is None or not 0.0 <= fraction <= 1.0:
            raise ValueError(f"initial_cxn_fraction must lie in [0, 1] for 'partial' connections, got {fraction}")

        for organism in self.organisms:
            genome    = organism.genome
            all_pairs = [(inp.id, out.id) for inp in genome.input_nodes for out in genome.output_nodes]
            num_conns = int(len(all_pairs) * fraction)

            # Sample without replacement
            make_pairs = []
            for _ in range(num_conns):
                make_pairs.append(all_pairs.pop(choice_index(self._rng, len(all_pairs))))
            self._connect(organism, make_pairs)

    def _connect_full(self):
        """
        For each network, connect all inputs nodes to all output nodes.
        """
        for organism in self.organisms:
            genome = organism.genome
            self._connect(organism, [(inp.id, out.id) for inp in genome.input_nodes for out in genome.output_nodes])

    def record_fitness(self, fitnesses: Sequence[float]) -> None:
        """
        Associate a fitness with each organism, in population order.

        Raises:
            SizeMismatchError: if there is not exactly one fitness per organism
        """
        if len(fitnesses) != self.size:
            raise SizeMismatchError(f"Expected {self.size} fitness values, got {len(fitnesses)}")

        self._fitnesses = [float(f) for f in fitnesses]
        for organism, fitness in zip(self.organisms, self._fitnesses):
            organism.fitness = fitness
        self._summary = None

    def evaluate(self, environment: 'Environment', num_jobs: int = 1) -> list[float]:
        """
        Evaluate the fitness of every organism in an environment and record it.

        Uses serial or parallel evaluation based on num_jobs:
        - num_jobs=1: Sequential evaluation in single process
        - num_jobs>1 or -1: Parallel evaluation using joblib

        In parallel mode each organism is evaluated on a copy, so the activation
        state left by the environment is not carried back.

        Parameters:
            environment: the task assessing each organism
            num_jobs:    number of parallel processes for fitness evaluation

        Returns:
            the fitness of each organism, in population order
        """
        if num_jobs == 1:
            fitnesses = [environment.fitness(organism) for organism in self.organisms]
        else:
            fitnesses = Parallel(num_jobs)(delayed(environment.fitness)(o) for o in self.organisms)

        self.record_fitness(fitnesses)
        logger.info("Evaluated %d organisms: best=%.4f mean=%.4f",
                    self.size, self._fitnesses[self.summary.best], self.summary.mean)
        return list(self._fitnesses)

    @property
    def summary(self) -> PopulationSummary:
        """
        Best and worst organism index and mean fitness, computed on first
        access after the fitness was recorded.

        Raises:
            ValueError: if no fitness has been recorded since the population last changed
        """
        if self._fitnesses is None:
            raise ValueError("The fitness of the population has not been recorded")

        if self._summary is None:
            indices = range(self.size)
            self._summary = PopulationSummary(best  = max(indices, key=lambda i: self._fitnesses[i]),
                                              worst = min(indices, key=lambda i: self._fitnesses[i]),
                                              mean  = mean(self._fitnesses))
        return self._summary

    def fittest(self) -> Organism:
        """
        Return the organism with the highest recorded fitness.
        """
        return self.organisms[self.summary.best]

    def replace(self, index: int, organism: Organism) -> None:
        """
        Put 'organism' in place of the organism at 'index'. The recorded
        fitness no longer describes the population afterwards.
        """
        self.organisms[index] = organism
        self._invalidate()

    def mutate(self, params: MutationParams) -> list[list[MutationResult]]:
        """
        Mutate every organism, one after the other, against the shared ledger.

        Returns:
            the structural mutation results of each organism, in population order
        """
        results = [organism.mutate(self.ledger, params, self._rng) for organism in self.organisms]
        self._invalidate()

        num_added = sum(1 for organism_results in results for r in organism_results if isinstance(r, GenesAdded))
        logger.debug("Mutated %d organisms, %d structural changes, next innovation %d",
                     self.size, num_added, self.ledger.next_innovation)
        return results

    def new_generation(self) -> None:
        """
        Start a new generation of innovations: structural changes made from now on
        are no longer matched against those made so far. The counter keeps growing.
        """
        self.ledger.reset()

    def _invalidate(self) -> None:
        self._fitnesses = None
        self._summary   = None

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[Organism]:
        return iter(self.organisms)

    def __getitem__(self, index: int) -> Organism:
        return self.organisms[index]

    def __str__(self):
        return '\n'.join(str(organism) for organism in self.organisms)
