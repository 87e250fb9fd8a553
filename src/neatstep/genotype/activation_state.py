"""
NEAT Activation State Module

Classes:
    Activations: Per-node propagation state carried between activation steps
"""

import numpy as np

class Activations:
    """
    The propagation state of a genome's network between two activation steps.

    For every node it holds the input sum accumulated during the current step
    and the output computed at the end of the previous one. The state is sized
    to one specific genome; reuse it across calls to 'Genome.activate()' to step
    a network through time, or replace it by 'Genome.new_activations()' to
    forget the history.

    Public Attributes:
        input_sums: accumulated weighted input of each node (indexed by node id)
        outputs:    last output of each node (indexed by node id)
    """

    def __init__(self, num_nodes: int):
        """
        Parameters:
            num_nodes: number of nodes in the genome this state belongs to
        """
        self.input_sums: np.ndarray = np.zeros(num_nodes)
        self.outputs   : np.ndarray = np.zeros(num_nodes)

    def grow(self, num_nodes: int) -> None:
        """
        Extend the state to 'num_nodes' nodes. New nodes start at zero,
        existing nodes keep their history.

        Raises:
            ValueError: if the state is already larger than 'num_nodes'
        """
        extra = num_nodes - len(self)
        if extra < 0:
            raise ValueError(f"Cannot shrink activation state from {len(self)} to {num_nodes} nodes")
        if extra:
            self.input_sums = np.concatenate([self.input_sums, np.zeros(extra)])
            self.outputs    = np.concatenate([self.outputs,    np.zeros(extra)])

    def copy(self) -> 'Activations':
        clone = Activations(0)
        clone.input_sums = self.input_sums.copy()
        clone.outputs    = self.outputs.copy()
        return clone

    def __len__(self) -> int:
        return len(self.outputs)

    def __repr__(self):
        return f"Activations(input_sums={self.input_sums.tolist()}, outputs={self.outputs.tolist()})"
