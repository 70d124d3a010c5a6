"""
NEAT Mutation Utilities Module

The operations every structural or parametric NEAT mutation is built from.
They are plain functions over a Genome; the population they need (ledger,
activation cycles, genome factory) is reached through the genome's back-reference
or passed in explicitly.

Functions:
    select_random_neuron:   Pick a neuron from the eligible part of the neuron chromosome
    create_link:            Add a link, or bring back the existing one
    is_duplicate_link:      Whether an enabled link already joins two neurons
    is_neuron_needed:       Whether a neuron must be kept
    remove_neuron:          Delete a neuron gene
    neuron_position:        Position of a neuron in the neuron chromosome
    obtain_mutation_target: Clone a parent into an offspring slot
    random_weight:          Draw a weight from the population's weight range
    clamp_weight:           Clip a weight to the population's weight range
"""

import logging
import random
from typing import TYPE_CHECKING, Sequence, MutableSequence

import numpy as np

from evotopo.genotype.genome      import Genome
from evotopo.genotype.link_gene   import LinkGene
from evotopo.genotype.neuron_gene import NeuronGene

if TYPE_CHECKING:
    from evotopo.pool.population import Population

logger = logging.getLogger(__name__)

def select_random_neuron(genome: Genome, include_all: bool, rng: random.Random) -> NeuronGene | None:
    """
    Choose a random neuron.

    When 'include_all' is False the bias and input neurons are excluded, and if the
    population does not allow recurrence (one activation cycle) the output neurons
    are excluded too, since an output can never be a link source in a strictly
    feed-forward network. The chromosome layout makes the eligible neurons a
    contiguous range of positions.

    Parameters:
        genome:      the genome to choose from
        include_all: whether every neuron is eligible
        rng:         random source

    Returns:
        the chosen neuron, or None if no neuron is eligible
    """
    if include_all:
        start = 0
    else:
        start = genome.input_count + 1
        if genome.population.activation_cycles == 1:
            start += genome.output_count

    end = len(genome.neurons) - 1

    # no neurons to pick
    if start > end:
        return None

    return genome.neurons[rng.randint(start, end)]

def create_link(genome: Genome, from_id: int, to_id: int, weight: float) -> None:
    """
    Create a link between two neurons.

    If the genome already has a link gene for this ordered pair (normally a
    disabled one) it is enabled again with the new weight; no second gene is
    added. Otherwise the population's ledger supplies the innovation ID and a new
    enabled link gene is appended.

    Parameters:
        genome:  the genome to change
        from_id: ID of the source neuron
        to_id:   ID of the target neuron
        weight:  weight of the link
    """
    existing = genome.find_link(from_id, to_id)
    if existing is not None:
        existing.enabled = True
        existing.weight  = weight
        return

    innovation_id = genome.population.innovations.find_or_create(from_id, to_id)
    genome.links.append(LinkGene(from_id, to_id, True, innovation_id, weight))
    logger.debug("added link %d=>%d (innovation %d)", from_id, to_id, innovation_id)

def is_duplicate_link(genome: Genome, from_id: int, to_id: int) -> bool:
    """
    Whether an enabled link from 'from_id' to 'to_id' exists.
    Disabled links do not count: linking the pair again brings them back.
    """
    return any(link.enabled and link.connects(from_id, to_id) for link in genome.links)

def is_neuron_needed(genome: Genome, neuron_id: int) -> bool:
    """
    Determine if a neuron is still needed.

    Bias, input and output neurons are always needed. Any other neuron is
    needed as long as some link, enabled or not, starts or ends at it.

    Parameters:
        genome:    the genome to check
        neuron_id: the neuron ID to check for

    Returns:
        True if the neuron must be kept
    """
    neuron = genome.find_neuron(neuron_id)
    if neuron is not None and neuron.is_structural:
        return True

    return any(link.touches(neuron_id) for link in genome.links)

def remove_neuron(genome: Genome, neuron_id: int) -> None:
    """
    Remove the first neuron gene with the given ID; do nothing if there is none.

    Links are left alone: callers check is_neuron_needed() first.
    """
    position = genome.neuron_position(neuron_id)
    if position >= 0:
        del genome.neurons[position]
        logger.debug("removed neuron %d", neuron_id)

def neuron_position(genome: Genome, neuron_id: int) -> int:
    return genome.neuron_position(neuron_id)

def obtain_mutation_target(population     : 'Population',
                           parents        : Sequence[Genome],
                           parent_index   : int,
                           offspring      : MutableSequence[Genome | None],
                           offspring_index: int) -> Genome:
    """
    Obtain the genome that we will mutate.

    NEAT mutates genomes in place, so the parent is cloned into the offspring slot
    and the genome returned is the very object stored there.

    Parameters:
        population:      supplies the genome factory
        parents:         the parents
        parent_index:    which parent to clone
        offspring:       the offspring array
        offspring_index: which slot receives the clone

    Returns:
        the genome to mutate
    """
    target = population.genome_factory.clone(parents[parent_index])
    offspring[offspring_index] = target
    assert offspring[offspring_index] is target, "offspring slot must hold the genome being mutated"
    return target

def random_weight(population: 'Population', rng: random.Random) -> float:
    return rng.uniform(-population.weight_range, population.weight_range)

def clamp_weight(population: 'Population', weight: float) -> float:
    return float(np.clip(weight, -population.weight_range, population.weight_range))
