"""
NEAT Population Module

This module implements the Population class, which holds what the mutation
operators need to share: the configuration, the innovation ledger and the
genome factory.

Classes:
    Population: Owner of the genomes and of their shared innovation history
"""

import random

from evotopo.genotype   import Genome, GenomeFactory, InnovationLedger
from evotopo.run.config import Config

class Population:
    """
    A population of genomes in the NEAT algorithm.

    Every genome keeps a reference to its population, through which the mutation
    operators reach the innovation ledger (so that the same structural change
    gets the same ID in every genome) and the genome factory (to clone a parent
    before editing it).

    Public Attributes:
        config:         Stores configuration parameters
        innovations:    The ledger shared by all genomes of this population
        genome_factory: Creates and clones genomes
        genomes:        The current genomes

    Public Properties:
        input_count, output_count, activation_cycles,
        weight_range, activation_initial: Shortcuts to configuration values

    Public Methods:
        create_genome(rng):        Create a minimal genome belonging to this population
        populate(size, rng):       Fill the population with minimal genomes
    """

    def __init__(self, config: Config, genome_factory: GenomeFactory | None = None):
        """
        Parameters:
            config:         Stores configuration parameters
            genome_factory: Creates and clones genomes (a GenomeFactory if None)
        """
        self.config        : Config        = config
        self.genome_factory: GenomeFactory = genome_factory if genome_factory is not None else GenomeFactory()
        self.genomes       : list[Genome]  = []

        # IDs [0, input_count + output_count] belong to the bias, input and output neurons
        self.innovations = InnovationLedger(first_neuron_id=config.input_count + config.output_count + 1)

    @property
    def input_count(self) -> int:
        return self.config.input_count

    @property
    def output_count(self) -> int:
        return self.config.output_count

    @property
    def activation_cycles(self) -> int:
        return self.config.activation_cycles

    @property
    def weight_range(self) -> float:
        return self.config.weight_range

    @property
    def activation_initial(self) -> str:
        return self.config.activation_initial

    def create_genome(self, rng: random.Random) -> Genome:
        return self.genome_factory.create(self, rng)

    def populate(self, size: int, rng: random.Random) -> list[Genome]:
        """
        Replace the current genomes with 'size' minimal genomes.

        Parameters:
            size: number of genomes
            rng:  random source

        Returns:
            the new genomes
        """
        self.genomes = [self.create_genome(rng) for _ in range(size)]
        return self.genomes

    def __len__(self):
        return len(self.genomes)

    def __str__(self):
        return '\n'.join(str(genome) for genome in self.genomes)
