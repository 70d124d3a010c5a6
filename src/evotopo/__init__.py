"""
evotopo - the topology-mutation engine of NEAT (NeuroEvolution of Augmenting Topologies).

This package mutates NEAT genomes, structurally and parametrically, while keeping
them comparable, through innovation IDs, with genomes evolved in other lineages.

Main components:
- genotype:    Genetic encoding (neuron and link genes, genomes, innovation ledger)
- operators:   Mutation utilities and the concrete mutation operators
- pool:        The population the genomes and the ledger belong to
- run:         Configuration and the context operators are initialized with
- activations: Names of the activation functions neuron genes can carry

Example:
    >>> import random
    >>> from evotopo import Config, EvolutionContext
    >>> context = EvolutionContext.from_config(Config("config.ini"))
    >>> parents = context.population.populate(10, random.Random(1))
    >>> children = context.mutate_many(parents, num_offspring=10, seed=1, num_jobs=4)
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from evotopo.run.config        import Config
from evotopo.run.context       import EvolutionContext
from evotopo.genotype          import (Genome,
                                       GenomeFactory,
                                       InnovationLedger,
                                       LinkGene,
                                       NeuronGene,
                                       NeuronType)
from evotopo.pool.population   import Population
from evotopo.operators         import EvolutionaryOperator, NEATMutation, OperationList

__all__ = [
    "Config",
    "EvolutionContext",
    "Genome",
    "GenomeFactory",
    "InnovationLedger",
    "LinkGene",
    "NeuronGene",
    "NeuronType",
    "Population",
    "EvolutionaryOperator",
    "NEATMutation",
    "OperationList",
]
