"""
NEAT Genome Factory Module

This module implements the GenomeFactory class, through which a population
creates new genomes and clones existing ones.

Classes:
    GenomeFactory: Creates minimal genomes and clones genomes into offspring
"""

import random
from typing import TYPE_CHECKING

from evotopo.genotype.genome      import Genome
from evotopo.genotype.link_gene   import LinkGene
from evotopo.genotype.neuron_gene import NeuronType, NeuronGene

if TYPE_CHECKING:
    from evotopo.pool.population import Population

class GenomeFactory:
    """
    Produces genomes for a population.

    Public Methods:
        clone(genome):            Structurally independent copy of a genome
        create(population, rng):  Minimal genome (bias, inputs, outputs, initial links)
    """

    def clone(self, genome: Genome) -> Genome:
        """
        Parameters:
            genome: the genome to copy

        Returns:
            a deep copy sharing the population reference of 'genome'
        """
        return genome.clone()

    def create(self, population: 'Population', rng: random.Random) -> Genome:
        """
        Create a minimal genome.

        A minimal genome has one bias neuron, the input and output neurons (whose
        number never changes and is retrieved from the population) and no hidden
        neurons. Bias and input neurons are linked to the output neurons with
        probability 'initial_connection_density', always keeping at least one link.

        Neuron numbering convention:
            - Bias neuron:    0
            - Input neurons:  [1, input_count + 1)
            - Output neurons: [input_count + 1, input_count + output_count + 1)

        Parameters:
            population: the population the genome belongs to
            rng:        random source

        Returns:
            the new genome
        """
        input_count  = population.input_count
        output_count = population.output_count

        neurons = [NeuronGene(0, NeuronType.BIAS)]
        for i in range(input_count):
            neurons.append(NeuronGene(1 + i, NeuronType.INPUT))
        for i in range(output_count):
            neurons.append(NeuronGene(1 + input_count + i, NeuronType.OUTPUT, population.activation_initial))

        genome = Genome(population, input_count, output_count, neurons)

        # Link the bias and every input to the outputs.
        density = population.config.initial_connection_density
        for i in range(input_count + 1):
            for j in range(output_count):
                if not genome.links or rng.random() < density:
                    from_id    = neurons[i].id
                    to_id      = neurons[1 + input_count + j].id
                    innovation = population.innovations.find_or_create(from_id, to_id)
                    weight     = rng.uniform(-population.weight_range, population.weight_range)
                    genome.links.append(LinkGene(from_id, to_id, True, innovation, weight))

        genome.sort_genes()
        return genome
