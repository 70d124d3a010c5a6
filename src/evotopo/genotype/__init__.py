"""
NEAT Genotype Package

This package implements the genotype representation used by the NEAT
(NeuroEvolution of Augmenting Topologies) mutation engine.

The NEAT genotype consists of two types of genes:
- Neuron genes: Encode individual neurons (bias, input, output, hidden)
- Link genes:   Encode weighted links between neurons with innovation IDs

Modules:
    neuron_gene:    NeuronType enumeration and NeuronGene class
    link_gene:      LinkGene class
    genome:         Genome class
    genome_factory: GenomeFactory class
    innovation:     InnovationRecord and InnovationLedger classes

Exported Classes:
    NeuronType:       Enumeration for neuron types (INPUT, BIAS, OUTPUT, HIDDEN)
    NeuronGene:       Gene encoding a single network neuron
    LinkGene:         Gene encoding a weighted link between neurons
    Genome:           Neuron and link chromosomes of a candidate network
    GenomeFactory:    Creates and clones genomes
    InnovationRecord: One structural innovation
    InnovationLedger: Population-wide tracker for innovation IDs and neuron IDs
"""

from evotopo.genotype.genome         import Genome
from evotopo.genotype.genome_factory import GenomeFactory
from evotopo.genotype.innovation     import InnovationLedger, InnovationRecord
from evotopo.genotype.link_gene      import LinkGene
from evotopo.genotype.neuron_gene    import NeuronType, NeuronGene

__all__ = ['Genome',
           'GenomeFactory',
           'InnovationLedger',
           'InnovationRecord',
           'LinkGene',
           'NeuronGene',
           'NeuronType']
