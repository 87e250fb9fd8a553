"""
NEAT Environment Module

Classes:
    Environment: Abstract task against which the fitness of an Organism is assessed
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from neatstep.phenotype import Organism

class Environment(ABC):
    """
    The task an Organism is learning to perform.

    The only assumption made about the fitness score is that higher is better.
    Implementations drive the organism through 'Organism.activate()' (or
    'fresh_activate()') as many steps as their task requires.

    Public Methods (must be implemented by subclasses):
        fitness(organism): Evaluate and return the fitness of an organism
    """

    @abstractmethod
    def fitness(self, organism: 'Organism') -> float:
        """
        Evaluate the fitness of an organism.

        Parameters:
            organism: the Organism to evaluate

        Returns:
            the fitness score, higher is better
        """
        pass
