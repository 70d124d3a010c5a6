"""
NEAT Evolution Context Module

This module defines the object the mutation operators belong to: it bundles the
configuration, the population and the weighted list of operators, and runs
independent reproduction events, serially or in parallel using joblib.

Classes:
    EvolutionContext: Owner of the mutation operators
"""

import logging
import random
from joblib import Parallel, delayed
from typing import TYPE_CHECKING, Sequence

from evotopo.genotype.genome  import Genome
from evotopo.operators        import (OperationList,
                                      AddLinkMutation,
                                      AddNeuronMutation,
                                      RemoveLinkMutation,
                                      ToggleLinkMutation,
                                      ActivationMutation,
                                      WeightMutation,
                                      SelectProportion,
                                      PerturbLinkWeight,
                                      ResetLinkWeight)
from evotopo.run.config       import Config

if TYPE_CHECKING:
    from evotopo.pool.population import Population

logger = logging.getLogger(__name__)

class EvolutionContext:
    """
    The evolutionary-algorithm context a NEAT mutation operator is initialized with.

    Operators are attached to the context once, when it is built, and never
    re-initialized afterwards; only then can the context hand them to parallel
    workers. Each reproduction event gets its own random source, seeded from the
    event number. A serial run is reproducible. With several workers, new
    innovation and neuron IDs follow the order in which workers reach the
    ledger, so a threaded run repeats a serial one only when the ledger already
    holds every innovation its events produce.

    Public Attributes:
        config:     Stores configuration parameters
        population: The population (ledger, genome factory, activation cycles)
        operators:  Weighted list of the mutation operators

    Public Methods:
        mutate_offspring(rng, parents, parent_index): One child of one parent
        mutate_many(parents, num_offspring, seed, num_jobs): Many independent children

    Class Methods:
        from_config(config): Context with a new population and the default operators

    Parallelization (num_jobs):
         1:  Serial execution (no parallelization)
        >1:  Use specified number of worker threads
        -1:  Use as many worker threads as CPU cores
    Threads are used rather than processes so that every worker updates the
    same innovation ledger.
    """

    def __init__(self, config: Config, population: 'Population', operators: OperationList | None = None):
        """
        Parameters:
            config:     Stores configuration parameters
            population: The population whose genomes are mutated
            operators:  Weighted operators (built from 'config' if None)
        """
        self.config     = config
        self.population = population
        self.operators  = operators if operators is not None else self.default_operators(config)
        self.operators.finalize_structure()
        self.operators.init(self)

    @classmethod
    def from_config(cls, config: Config) -> 'EvolutionContext':
        # Import here to avoid circular import
        from evotopo.pool.population import Population
        return cls(config, Population(config))

    @staticmethod
    def default_operators(config: Config) -> OperationList:
        """
        Build the list of mutations from the probabilities in the configuration.

        Parameters:
            config: Stores configuration parameters

        Returns:
            the (not yet finalized) operation list
        """
        operators = OperationList()
        operators.add(config.weight_perturb_probability,
                      WeightMutation(SelectProportion(config.weight_select_proportion),
                                     PerturbLinkWeight(config.weight_perturb_sigma)))
        operators.add(config.weight_reset_probability,
                      WeightMutation(SelectProportion(config.weight_select_proportion),
                                     ResetLinkWeight()))
        operators.add(config.add_link_probability,    AddLinkMutation())
        operators.add(config.add_neuron_probability,  AddNeuronMutation())
        operators.add(config.remove_link_probability, RemoveLinkMutation())
        operators.add(config.toggle_link_probability, ToggleLinkMutation())
        operators.add(config.activation_probability,  ActivationMutation())
        return operators

    def mutate_offspring(self, rng: random.Random, parents: Sequence[Genome], parent_index: int) -> Genome:
        """
        Produce one child of parents[parent_index] with a randomly picked operator.

        Parameters:
            rng:          random source
            parents:      the parents
            parent_index: which parent to mutate

        Returns:
            the child
        """
        operator  = self.operators.pick_operator(rng)
        offspring = [None] * operator.offspring_produced
        operator.perform_operation(rng, parents, parent_index, offspring, 0)
        logger.debug("%r produced a child of parent %d", operator, parent_index)
        return offspring[0]

    def _reproduction_event(self, parents: Sequence[Genome], seed: int) -> Genome:
        rng = random.Random(seed)
        return self.mutate_offspring(rng, parents, rng.randint(0, len(parents) - 1))

    def mutate_many(self,
                    parents      : Sequence[Genome],
                    num_offspring: int,
                    seed         : int = 0,
                    num_jobs     : int = 1) -> list[Genome]:
        """
        Run 'num_offspring' independent reproduction events.

        Event 'i' uses its own random source, seeded with 'seed + i', to choose
        a parent and an operator and to perform the mutation.

        Parameters:
            parents:       the parents
            num_offspring: number of children to produce
            seed:          base seed of the events' random sources
            num_jobs:      number of worker threads (see class docstring)

        Returns:
            the children, in event order
        """
        if not parents:
            raise ValueError("at least one parent is needed")

        if num_jobs == 1:
            return [self._reproduction_event(parents, seed + i) for i in range(num_offspring)]

        return Parallel(num_jobs, prefer="threads")(
            delayed(self._reproduction_event)(parents, seed + i)
            for i in range(num_offspring)
        )
