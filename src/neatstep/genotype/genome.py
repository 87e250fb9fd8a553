"""
NEAT Genome Module

This module implements the Genome class for the NEAT
(NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    Genome: Complete genome representing a neural network structure
"""

import copy
from typing import Callable, Sequence

import numpy as np

from neatstep.activations                 import activations
from neatstep.genotype.activation_state   import Activations
from neatstep.genotype.connection_gene    import ConnectionGene
from neatstep.genotype.errors             import (EmptyCandidateError, InvalidIndexError,
                                                  InvalidStateError, SizeMismatchError)
from neatstep.genotype.innovation         import (ConnectionInnovation, GenesAdded, MutationResult,
                                                  NodeInnovation, NothingAdded)
from neatstep.genotype.node_gene          import NodeGene, NodeType
from neatstep.run.random_source           import RandomSource, choice_index

class Genome:
    """
    A NEAT genome representing a neural network as a collection of node and connection genes.

    Nodes live in a list and are referred to by their index in it; connection genes
    refer to their endpoints by node index and are keyed by their (node_in, node_out)
    pair, so a genome holds at most one gene per ordered pair of nodes. The graph may
    contain cycles (self-loops included).

    The network is activated by "stepping" through it: each call to 'activate()'
    moves every signal forward by one connection. A network whose longest path from
    an input to an output spans D connections needs D + 1 calls before an input is
    reflected at the outputs. The propagation state between calls is held by an
    'Activations' object created with 'new_activations()'.

    Node numbering convention:
        - Input nodes:  [0, num_inputs)
        - Output nodes: [num_inputs, num_inputs + num_outputs)
        - Hidden nodes: [num_inputs + num_outputs, ...), appended as they are created

    Attributes:
        node_genes: List of NodeGene objects, indexed by node ID
        conn_genes: Dictionary mapping (node_in, node_out) to ConnectionGene objects
        activation: Name of the nonlinearity applied by hidden and output nodes

    Public Properties:
        input_nodes:         List of all input node genes
        output_nodes:        List of all output node genes
        hidden_nodes:        List of all hidden node genes
        enabled_connections: List of all enabled connection genes

    Public Methods:
        new_activations():        Create a zeroed activation state for this genome
        activate(state, inputs):  Take one propagation step
        add_connection(...):      Add (or re-enable) a connection
        add_node(...):            Split an enabled connection with a new hidden node
        get_rand_connection(rng): Pick a random connected pair of nodes
        get_rand_unconnected(rng):Pick a random unconnected pair of nodes
        mutate_weights(...):      Perturb and/or reassign connection weights
        copy():                   Deep copy of the genome
        to_dict():                Convert genome to dictionary representation

    Class Methods:
        from_dict(genome_dict): Create a genome from a dictionary description
    """

    def __init__(self, num_inputs: int, num_outputs: int, activation: str = "tanh"):
        """
        Initialize a minimal Genome: input and output nodes only, no connections.

        Parameters:
            num_inputs:  Number of input nodes (fixed for the genome's lifetime)
            num_outputs: Number of output nodes (fixed for the genome's lifetime)
            activation:  Name of the nonlinearity applied by hidden and output nodes
        """
        if num_inputs < 0 or num_outputs < 0:
            raise ValueError("The number of input and output nodes cannot be negative")
        if activation not in activations:
            raise ValueError(f"Unknown activation function '{activation}'")

        self._num_inputs : int = num_inputs
        self._num_outputs: int = num_outputs
        self.activation  : str = activation

        self.node_genes: list[NodeGene]                       = []
        self.conn_genes: dict[tuple[int, int], ConnectionGene] = {}  # (node_in, node_out) => connection gene

        for node_id in range(num_inputs):
            self.node_genes.append(NodeGene(node_id, NodeType.INPUT))
        for node_id in range(num_inputs, num_inputs + num_outputs):
            self.node_genes.append(NodeGene(node_id, NodeType.OUTPUT))

    @classmethod
    def from_dict(cls, genome_dict: dict) -> 'Genome':
        """
        Create a Genome from a dictionary description.

        Dictionary format:
            {
                "activation": "tanh",   # Optional, defaults to "tanh"
                "nodes": [
                    {"id": 0, "type": "input"},
                    {"id": 1, "type": "input"},
                    {"id": 2, "type": "output"},
                    {"id": 3, "type": "hidden"}
                ],
                "connections": [
                    {"innovation": 0, "from": 0, "to": 3, "weight": 1.0, "enabled": true},
                    {"innovation": 1, "from": 3, "to": 2, "weight": 0.5}
                ]
            }

        Parameters:
            genome_dict: Dictionary describing the genome structure

        Returns:
            A new Genome object with the specified structure

        Raises:
            ValueError: If the structure is invalid (wrong node numbering, duplicate or dangling connections)
            KeyError:   If required fields are missing from the dictionary
        """
        nodes_data   = genome_dict["nodes"]
        input_ids    = sorted(n["id"] for n in nodes_data if n["type"] == "input")
        output_ids   = sorted(n["id"] for n in nodes_data if n["type"] == "output")
        hidden_ids   = sorted(n["id"] for n in nodes_data if n["type"] == "hidden")
        num_inputs   = len(input_ids)
        num_outputs  = len(output_ids)
        if len(input_ids) + len(output_ids) + len(hidden_ids) != len(nodes_data):
            raise ValueError("Node types must be one of 'input', 'output', 'hidden'")

        # Node IDs are list positions, so every range must be contiguous
        expected = list(range(num_inputs))
        if input_ids != expected:
            raise ValueError(f"Input nodes must be numbered {expected}, got {input_ids}")
        expected = list(range(num_inputs, num_inputs + num_outputs))
        if output_ids != expected:
            raise ValueError(f"Output nodes must be numbered {expected}, got {output_ids}")
        expected = list(range(num_inputs + num_outputs, len(nodes_data)))
        if hidden_ids != expected:
            raise ValueError(f"Hidden nodes must be numbered {expected}, got {hidden_ids}")

        genome = cls(num_inputs, num_outputs, genome_dict.get("activation", "tanh"))
        for node_id in hidden_ids:
            genome.node_genes.append(NodeGene(node_id, NodeType.HIDDEN))

        for conn_data in genome_dict.get("connections", []):
            node_in  = conn_data["from"]
            node_out = conn_data["to"]
            if not (0 <= node_in < genome.num_nodes and 0 <= node_out < genome.num_nodes):
                raise ValueError(f"Connection {node_in}=>{node_out} references a non-existent node")
            if (node_in, node_out) in genome.conn_genes:
                raise ValueError(f"Duplicate connection {node_in}=>{node_out}")

            genome.conn_genes[(node_in, node_out)] = ConnectionGene(node_in,
                                                                    node_out,
                                                                    float(conn_data["weight"]),
                                                                    conn_data["innovation"],
                                                                    conn_data.get("enabled", True))
        return genome

    def to_dict(self) -> dict:
        """
        Convert the genome to a dictionary representation.

        This is the inverse operation of from_dict(). Connections are
        listed in order of their innovation number.
        """
        nodes = [{"id": node.id, "type": node.type.name.lower()} for node in self.node_genes]

        connections = []
        for conn in sorted(self.conn_genes.values(), key=lambda c: c.innovation):
            connections.append({
                "innovation": conn.innovation,
                "from"      : conn.node_in,
                "to"        : conn.node_out,
                "weight"    : conn.weight,
                "enabled"   : conn.enabled
            })

        return {
            "activation" : self.activation,
            "nodes"      : nodes,
            "connections": connections
        }

    @property
    def num_inputs(self) -> int:
        return self._num_inputs

    @property
    def num_outputs(self) -> int:
        return self._num_outputs

    @property
    def num_nodes(self) -> int:
        return len(self.node_genes)

    @property
    def input_nodes(self) -> list[NodeGene]:
        return self.node_genes[:self._num_inputs]

    @property
    def output_nodes(self) -> list[NodeGene]:
        return self.node_genes[self._num_inputs:self._num_inputs + self._num_outputs]

    @property
    def hidden_nodes(self) -> list[NodeGene]:
        return self.node_genes[self._num_inputs + self._num_outputs:]

    @property
    def enabled_connections(self) -> list[ConnectionGene]:
        return [conn for conn in self.conn_genes.values() if conn.enabled]

    @property
    def activation_function(self) -> Callable:
        return activations[self.activation]

    def new_activations(self) -> Activations:
        """
        Create an activation state for this genome with every input sum
        and every output set to zero.
        """
        return Activations(self.num_nodes)

    def activate(self, state: Activations, inputs: Sequence[float]) -> list[float]:
        """
        Pass 'inputs' into the network and take one propagation step forwards.

        A step consists of:
          1. every enabled connection adds 'output(node_in) * weight' to the input
             sum of its 'node_out', reading the outputs left by the previous step
          2. every hidden and output node computes 'output = f(input_sum)' and
             clears its input sum
          3. the inputs are latched into the outputs of the input nodes, from where
             they will enter the network at the next step

        Because of this, the outputs of a call reflect inputs given in earlier
        calls; it may take numerous calls before the outputs relevant to an
        input filter through (and, with cycles, they may never settle).

        Parameters:
            state:  the activation state left by the previous call (or a fresh one)
            inputs: the network inputs (as many as input nodes)

        Returns:
            the outputs of the output nodes, in node index order

        Raises:
            SizeMismatchError: if 'inputs' or 'state' does not match the genome's size
        """
        if len(inputs) != self._num_inputs:
            raise SizeMismatchError(f"Expected {self._num_inputs} inputs, got {len(inputs)}")
        if len(state) != self.num_nodes:
            raise SizeMismatchError(f"Activation state has {len(state)} nodes, genome has {self.num_nodes}")

        # Step 1: accumulate the signal carried by each enabled connection
        for conn in self.conn_genes.values():
            if conn.enabled:
                state.input_sums[conn.node_out] += state.outputs[conn.node_in] * conn.weight

        # Step 2: hidden and output nodes fire (they are all the nodes past the inputs)
        computed = slice(self._num_inputs, self.num_nodes)
        state.outputs[computed] = self.activation_function(state.input_sums[computed])
        state.input_sums[:]     = 0.0

        # Step 3: input nodes output their input, unmodified
        state.outputs[:self._num_inputs] = np.asarray(inputs, dtype=float)

        return state.outputs[self._num_inputs:self._num_inputs + self._num_outputs].tolist()

    def add_connection(self, in_node: int, out_node: int, weight: float, innovation: int) -> MutationResult:
        """
        Add a connection from 'in_node' to 'out_node'.

        If the two nodes are already connected nothing changes. If they are connected
        by a disabled gene, that gene is re-enabled: its weight and innovation number
        are kept, 'weight' and 'innovation' are ignored.

        Parameters:
            in_node:    index of the source node
            out_node:   index of the destination node
            weight:     weight of the new connection
            innovation: innovation number of the new gene

        Returns:
            GenesAdded with the one new innovation number, or NothingAdded

        Raises:
            InvalidIndexError: if either node does not exist
        """
        self._check_node(in_node)
        self._check_node(out_node)

        existing = self.conn_genes.get((in_node, out_node))
        if existing is not None:
            existing.enabled = True
            return NothingAdded()

        self.conn_genes[(in_node, out_node)] = ConnectionGene(in_node, out_node, weight, innovation)
        return GenesAdded(ConnectionInnovation(in_node, out_node), (innovation,))

    def add_node(self, in_node: int, out_node: int, innovation: int) -> GenesAdded:
        """
        Split the enabled connection 'in_node' => 'out_node' by adding a new hidden node.

        The split connection is disabled and two genes are created:
          + 'in_node'  => new node, with weight 1.0 and innovation number 'innovation'
          + new node => 'out_node', with the split connection's weight and innovation number 'innovation + 1'
        so that the network initially behaves as before (up to the nonlinearity and
        the extra step of delay).

        Parameters:
            in_node:    index of the source node of the connection to split
            out_node:   index of the destination node of the connection to split
            innovation: innovation number of the first new gene

        Returns:
            GenesAdded with the two new innovation numbers

        Raises:
            InvalidIndexError: if either node does not exist
            InvalidStateError: if no enabled connection joins the two nodes
        """
        self._check_node(in_node)
        self._check_node(out_node)

        split_conn = self.conn_genes.get((in_node, out_node))
        if split_conn is None or not split_conn.enabled:
            raise InvalidStateError(f"No enabled connection {in_node}=>{out_node} to split")

        new_node_id = self.num_nodes
        self.node_genes.append(NodeGene(new_node_id, NodeType.HIDDEN))
        split_conn.enabled = False

        self.conn_genes[(in_node, new_node_id)] = ConnectionGene(in_node, new_node_id, 1.0, innovation)
        self.conn_genes[(new_node_id, out_node)] = ConnectionGene(new_node_id, out_node, split_conn.weight, innovation + 1)

        return GenesAdded(NodeInnovation(in_node, out_node), (innovation, innovation + 1))

    def get_rand_connection(self, rng: RandomSource) -> tuple[int, int]:
        """
        Pick, uniformly at random, a pair of nodes joined by an enabled connection.

        Returns:
            the (node_in, node_out) pair

        Raises:
            EmptyCandidateError: if the genome has no enabled connection
        """
        candidates = [conn.key for conn in self.conn_genes.values() if conn.enabled]
        if not candidates:
            raise EmptyCandidateError("The genome has no enabled connection")
        return candidates[choice_index(rng, len(candidates))]

    def get_rand_unconnected(self, rng: RandomSource) -> tuple[int, int]:
        """
        Pick, uniformly at random, a pair of nodes not joined by an enabled connection.

        The destination is never an input node (input nodes ignore their input
        sum). The source may be any node, including the destination itself.

        Returns:
            the (node_in, node_out) pair

        Raises:
            EmptyCandidateError: if every eligible pair is already connected
        """
        candidates = []
        for node_in in range(self.num_nodes):
            for node_out in range(self._num_inputs, self.num_nodes):
                conn = self.conn_genes.get((node_in, node_out))
                if conn is None or not conn.enabled:
                    candidates.append((node_in, node_out))

        if not candidates:
            raise EmptyCandidateError("Every eligible pair of nodes is already connected")
        return candidates[choice_index(rng, len(candidates))]

    def mutate_weights(self,
                       p_uniform   : float,
                       uniform_max : float,
                       p_reassign  : float,
                       reassign_max: float,
                       rng         : RandomSource) -> None:
        """
        Mutate the weight of each enabled connection, independently of the others.

        Parameters:
            p_uniform:    probability of a weight being perturbed by a value from [-uniform_max, uniform_max]
            uniform_max:  maximum magnitude of a perturbation
            p_reassign:   probability of a weight being reassigned a value from [0, reassign_max]
            reassign_max: maximum reassigned weight
            rng:          source of randomness

        Raises:
            ValueError: if a probability lies outside [0, 1]
        """
        for name, p in (("p_uniform", p_uniform), ("p_reassign", p_reassign)):
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"'{name}' must lie in [0, 1], got {p}")

        for conn in self.enabled_connections:
            conn.mutate(p_uniform, uniform_max, p_reassign, reassign_max, rng)

    def copy(self) -> 'Genome':
        """
        Create a deep copy of this genome; no gene is shared with the original.
        """
        return copy.deepcopy(self)

    def _check_node(self, node_id: int) -> None:
        if not 0 <= node_id < self.num_nodes:
            raise InvalidIndexError(f"Node {node_id} does not exist (the genome has {self.num_nodes} nodes)")

    def __str__(self):
        node_genes_str = ''.join(str(node) for node in self.node_genes)
        conn_genes_str = ''.join(str(conn) for conn in sorted(self.conn_genes.values(), key=lambda c: c.innovation))
        return f"Nodes: {node_genes_str}\nConns: {conn_genes_str}"

    def __repr__(self):
        return (f"Genome(num_inputs={self._num_inputs}, num_outputs={self._num_outputs}, "
                f"hidden={len(self.hidden_nodes)}, connections={len(self.conn_genes)})")
