import configparser
import logging
import os
from dataclasses import dataclass

from neatstep.activations       import activations
from neatstep.run.random_source import NumpyRandom

logger = logging.getLogger(__name__)

INITIAL_CXN_POLICIES = ("none", "one-input", "partial", "full")

@dataclass(frozen=True)
class MutationParams:
    """
    Probabilities and magnitudes used by 'Organism.mutate()'.

    Attributes:
        add_connection_prob:  probability of attempting a new random connection
        add_node_prob:        probability of attempting to split a random connection
        mutate_weights_prob:  probability of mutating the weights at all
        weight_perturb_prob:  per-gene probability of a uniform perturbation
        weight_perturb_max:   perturbations are drawn from [-weight_perturb_max, weight_perturb_max]
        weight_reassign_prob: per-gene probability of reassigning the weight
        weight_reassign_max:  reassigned weights are drawn from [0, weight_reassign_max]
        new_weight_max:       weights of new connections are drawn from [0, new_weight_max]
    """
    add_connection_prob : float = 0.05
    add_node_prob       : float = 0.03
    mutate_weights_prob : float = 0.8
    weight_perturb_prob : float = 0.9
    weight_perturb_max  : float = 0.5
    weight_reassign_prob: float = 0.1
    weight_reassign_max : float = 1.0
    new_weight_max      : float = 1.0

    def __post_init__(self):
        for name in ("add_connection_prob", "add_node_prob", "mutate_weights_prob",
                     "weight_perturb_prob", "weight_reassign_prob"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"'{name}' must lie in [0, 1], got {value}")

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.population_size      = 50
            self.num_inputs           = 2
            self.num_outputs          = 1
            self.initial_cxn_policy   = "full"
            self.initial_cxn_fraction = None

            self.activation = "tanh"

            self.new_weight_max = 1.0

            self.add_connection_prob  = 0.05
            self.add_node_prob        = 0.03
            self.mutate_weights_prob  = 0.8
            self.weight_perturb_prob  = 0.9
            self.weight_perturb_max   = 0.5
            self.weight_reassign_prob = 0.1
            self.weight_reassign_max  = 1.0

            self.seed = None
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)
        logger.info("Reading configuration from %s", config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [POPULATION_INIT]

        # The number of organisms in the population (its fixed capacity).
        self.population_size = get_value('POPULATION_INIT', 'population_size', int)

        # The number of input nodes, through which the network receives inputs.
        self.num_inputs = get_value('POPULATION_INIT', 'num_inputs', int)

        # The number of output nodes, to which the network delivers outputs.
        self.num_outputs = get_value('POPULATION_INIT', 'num_outputs', int)

        # Specifies the initial connectivity of newly-created networks.
        # Allowed values:
        #   "none"      - no connections are initially present
        #   "one-input" - one random input node is connected to all outputs nodes
        #   "partial"   - a fraction of all input-output connections are instantiated randomly
        #   "full"      - connect all input nodes to all output nodes
        self.initial_cxn_policy = get_value('POPULATION_INIT', 'initial_cxn_policy', str, default="full")
        if self.initial_cxn_policy not in INITIAL_CXN_POLICIES:
            raise ValueError(f"Invalid initial_cxn_policy '{self.initial_cxn_policy}'")

        # The fraction of connections to instantiate (only applicable
        # if the initial connection policy is "partial").
        # Use "None" if not applicable.
        self.initial_cxn_fraction = get_value('POPULATION_INIT', 'initial_cxn_fraction', float, default=None)

        # [NODE]

        # The nonlinearity every hidden and output node fires with.
        self.activation = get_value('NODE', 'activation', str, default="tanh")
        if self.activation not in activations:
            raise ValueError(f"Invalid activation function '{self.activation}'")

        # [CONNECTION]

        # New random connections get a weight drawn from [0, new_weight_max].
        self.new_weight_max = get_value('CONNECTION', 'new_weight_max', float)

        # [MUTATION]

        # The probabilities that a call to mutate attempts to add a connection,
        # attempts to split a connection with a new node, and mutates the weights.
        self.add_connection_prob = get_value('MUTATION', 'add_connection_prob', float)
        self.add_node_prob       = get_value('MUTATION', 'add_node_prob'      , float)
        self.mutate_weights_prob = get_value('MUTATION', 'mutate_weights_prob', float)

        # When weights are mutated, each enabled connection is independently perturbed
        # by a value from [-weight_perturb_max, weight_perturb_max] with probability
        # 'weight_perturb_prob', and reassigned a value from [0, weight_reassign_max]
        # with probability 'weight_reassign_prob'.
        self.weight_perturb_prob  = get_value('MUTATION', 'weight_perturb_prob' , float)
        self.weight_perturb_max   = get_value('MUTATION', 'weight_perturb_max'  , float)
        self.weight_reassign_prob = get_value('MUTATION', 'weight_reassign_prob', float)
        self.weight_reassign_max  = get_value('MUTATION', 'weight_reassign_max' , float)

        # [RANDOM] (optional section)

        # Seed for the default source of randomness ("None" for OS entropy).
        self.seed = get_value('RANDOM', 'seed', int, default=None)

    @property
    def mutation_params(self) -> MutationParams:
        """
        The mutation parameters described by this configuration.

        Raises:
            ValueError: if any probability lies outside [0, 1]
        """
        return MutationParams(add_connection_prob  = self.add_connection_prob,
                              add_node_prob        = self.add_node_prob,
                              mutate_weights_prob  = self.mutate_weights_prob,
                              weight_perturb_prob  = self.weight_perturb_prob,
                              weight_perturb_max   = self.weight_perturb_max,
                              weight_reassign_prob = self.weight_reassign_prob,
                              weight_reassign_max  = self.weight_reassign_max,
                              new_weight_max       = self.new_weight_max)

    def make_rng(self) -> NumpyRandom:
        """
        Create the default source of randomness, seeded from 'seed'.
        """
        return NumpyRandom(self.seed)
