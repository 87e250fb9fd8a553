"""
XOR with step-wise activation

This script drives a neatstep Population on the XOR problem:
    Input (0, 0) → Output 0
    Input (0, 1) → Output 1
    Input (1, 0) → Output 1
    Input (1, 1) → Output 0

Networks are activated one propagation step at a time, so each XOR case is
presented for a fixed number of steps from a fresh activation state and the
output of the last step is scored. The third input is a constant bias of 1.0.

Fitness Function:
    Fitness = 4.0 - Σ(output - target)²

The generational driver below is deliberately naive (the fittest organisms are
cloned over the least fit ones, then everyone is mutated); selection,
speciation and crossover are not part of neatstep.

Usage:
    python trial_XOR.py [config_xor.ini]
"""

import logging
import sys
from pathlib import Path

from neatstep import Config, Environment, Organism, Population

class XOREnvironment(Environment):
    """
    Scores an organism on the four XOR cases.
    """

    CASES = [((0.0, 0.0), 0.0), ((0.0, 1.0), 1.0), ((1.0, 0.0), 1.0), ((1.0, 1.0), 0.0)]

    def __init__(self, num_steps: int = 6):
        """
        Parameters:
            num_steps: propagation steps each case is presented for
        """
        self.num_steps = num_steps

    def output(self, organism: Organism, inputs: tuple[float, float]) -> float:
        organism.reset_activations()
        for _ in range(self.num_steps):
            output = organism.activate([inputs[0], inputs[1], 1.0])
        return output[0]

    def fitness(self, organism: Organism) -> float:
        fitness = 4.0
        for inputs, target in self.CASES:
            fitness -= (self.output(organism, inputs) - target) ** 2
        return fitness

def main(config_file: str, num_generations: int = 200):
    config      = Config(config_file)
    rng         = config.make_rng()
    params      = config.mutation_params
    population  = Population(config, rng)
    environment = XOREnvironment()

    for generation in range(num_generations):
        population.new_generation()
        population.evaluate(environment)
        summary = population.summary
        best    = population.fittest()
        print(f"generation {generation:3d}: best={best.fitness:.4f} mean={summary.mean:.4f} "
              f"hidden={len(best.genome.hidden_nodes)} next innovation={population.ledger.next_innovation}")
        if best.fitness > 3.9:
            break

        # Replace the least fit quarter by clones of the fittest organism
        ranking = sorted(range(len(population)), key=lambda i: population[i].fitness)
        for index in ranking[:len(population) // 4]:
            population.replace(index, best.clone())
        population.mutate(params)

    population.evaluate(environment)
    best = population.fittest()
    print(f"\nFittest organism:\n{best}")
    for inputs, target in XOREnvironment.CASES:
        print(f"  {inputs} -> {environment.output(best, inputs):+.4f} (target {target})")

if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    config_file = sys.argv[1] if len(sys.argv) > 1 else str(Path(__file__).parent / "config_xor.ini")
    main(config_file)
