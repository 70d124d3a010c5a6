"""
NEAT Activation Mutation Module

Classes:
    ActivationMutation: Change the activation function of a random neuron
"""

import random
from typing import MutableSequence, Sequence

from evotopo.genotype.genome import Genome
from evotopo.operators.base  import NEATMutation

class ActivationMutation(NEATMutation):
    """
    Give a random output or hidden neuron a different activation function.

    The new function is drawn from the configuration's 'activation_options',
    excluding the neuron's current one. Nothing changes when no other option exists.
    """

    def perform_operation(self,
                          rng            : random.Random,
                          parents        : Sequence[Genome],
                          parent_index   : int,
                          offspring      : MutableSequence[Genome | None],
                          offspring_index: int) -> None:
        target = self.obtain_genome(parents, parent_index, offspring, offspring_index)

        # Outputs are eligible here whatever the number of activation cycles
        start = target.input_count + 1
        end   = len(target.neurons) - 1
        if start > end:
            return
        neuron = target.neurons[rng.randint(start, end)]

        options = [name for name in self.population.config.activation_options if name != neuron.activation_name]
        if options:
            neuron.activation_name = rng.choice(options)
