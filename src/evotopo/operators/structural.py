"""
NEAT Structural Mutations Module

Mutations that change the network graph described by a genome.

Classes:
    AddLinkMutation:    Link two neurons that are not linked yet
    AddNeuronMutation:  Split an enabled link with a new hidden neuron
    RemoveLinkMutation: Delete a link and the hidden neurons it leaves orphaned
    ToggleLinkMutation: Enable a disabled link or disable an enabled one
"""

import logging
import math
import random
from typing import Any, MutableSequence, Sequence

from evotopo.genotype.genome      import Genome
from evotopo.genotype.neuron_gene import NeuronType, NeuronGene
from evotopo.operators.base       import NEATMutation
from evotopo.operators            import mutation_utils as mu

logger = logging.getLogger(__name__)

class AddLinkMutation(NEATMutation):
    """
    Add a link between two existing neurons.

    The two ends are chosen at random, however the new link cannot:
     + duplicate an enabled link
     + end at a bias or input neuron
     + start at an output neuron, when the network is strictly feed-forward
     + end at an output neuron, when the network is strictly feed-forward (the
       end is drawn from the same range as a link source, which leaves the
       outputs out; links into outputs come from the initial genome and splits)
     + close a cycle, when the network is strictly feed-forward
    If the pair already has a disabled link, that link is enabled again.

    The mutation gives up, leaving the child an unchanged clone of the parent,
    after 'max_tries' unsuccessful attempts.
    """

    def __init__(self, max_tries: int | None = None, owner: Any = None):
        """
        Parameters:
            max_tries: attempts before giving up (config 'max_tries' if None)
            owner:     the evolutionary-algorithm context
        """
        super().__init__(owner)
        self._max_tries = max_tries

    def perform_operation(self,
                          rng            : random.Random,
                          parents        : Sequence[Genome],
                          parent_index   : int,
                          offspring      : MutableSequence[Genome | None],
                          offspring_index: int) -> None:
        max_tries = self._max_tries if self._max_tries is not None else self.population.config.max_tries
        target    = self.obtain_genome(parents, parent_index, offspring, offspring_index)
        recurrent = target.population.activation_cycles != 1

        for _ in range(max_tries):
            neuron1 = mu.select_random_neuron(target, True,  rng)
            neuron2 = mu.select_random_neuron(target, False, rng)
            if neuron1 is None or neuron2 is None:
                return

            if self._is_acceptable(target, neuron1, neuron2, recurrent):
                weight = mu.random_weight(target.population, rng)
                mu.create_link(target, neuron1.id, neuron2.id, weight)
                target.sort_genes()
                return

        logger.debug("no link added after %d attempts", max_tries)

    @staticmethod
    def _is_acceptable(target: Genome, neuron1: NeuronGene, neuron2: NeuronGene, recurrent: bool) -> bool:
        # Carry out quick checks first
        if neuron2.type in (NeuronType.BIAS, NeuronType.INPUT):
            return False
        if mu.is_duplicate_link(target, neuron1.id, neuron2.id):
            return False
        if recurrent:
            return True
        if neuron1.type == NeuronType.OUTPUT:
            return False

        # Carry out expensive check last
        return not target.would_create_cycle(neuron1.id, neuron2.id)

class AddNeuronMutation(NEATMutation):
    """
    Split an existing link by adding a new hidden neuron.

    The link to split is picked at random among the enabled links that do not
    start at the bias neuron. In small genomes the most recent links are left out
    of the draw, so older links are preferred. The split link is disabled and
    replaced by two links through the new neuron:
     + from -> new neuron, with weight 1.0
     + new neuron -> to,   with the weight of the split link
    so the network computes about the same function right after the split.

    The ledger gives the new neuron the same ID in every genome that splits the
    same link. If the genome already has that neuron (the link was split before,
    then enabled again) the neuron is reused and its two links enabled again.
    """

    def __init__(self, max_tries: int | None = None, owner: Any = None):
        """
        Parameters:
            max_tries: attempts to find a link to split (config 'max_tries' if None)
            owner:     the evolutionary-algorithm context
        """
        super().__init__(owner)
        self._max_tries = max_tries

    def perform_operation(self,
                          rng            : random.Random,
                          parents        : Sequence[Genome],
                          parent_index   : int,
                          offspring      : MutableSequence[Genome | None],
                          offspring_index: int) -> None:
        max_tries = self._max_tries if self._max_tries is not None else self.population.config.max_tries
        target    = self.obtain_genome(parents, parent_index, offspring, offspring_index)

        # A newly created genome may have no links at all
        if not target.links:
            return

        split_link = None
        upper_limit = self._upper_limit(target)
        for _ in range(max_tries):
            link = target.links[rng.randint(0, upper_limit)]
            source = target.find_neuron(link.from_neuron_id)
            if link.enabled and source is not None and source.type != NeuronType.BIAS:
                split_link = link
                break

        if split_link is None:
            return

        from_id = split_link.from_neuron_id
        to_id   = split_link.to_neuron_id

        record = target.population.innovations.find_or_create_split(from_id, to_id)
        if target.find_neuron(record.neuron_id) is None:
            target.neurons.append(NeuronGene(record.neuron_id,
                                             NeuronType.HIDDEN,
                                             target.population.activation_initial,
                                             innovation_id=record.innovation_id))
        elif target.population.activation_cycles == 1 and \
                (target.would_create_cycle(from_id, record.neuron_id) or
                 target.would_create_cycle(record.neuron_id, to_id)):
            # Links added since the earlier split would close a loop through the neuron
            return

        # The link being split must be disabled
        split_link.enabled = False

        mu.create_link(target, from_id, record.neuron_id, 1.0)
        mu.create_link(target, record.neuron_id, to_id, split_link.weight)
        target.sort_genes()
        logger.debug("split link %d=>%d with neuron %d", from_id, to_id, record.neuron_id)

    @staticmethod
    def _upper_limit(target: Genome) -> int:
        # Genomes with few links draw only among the older ones
        num_links = len(target.links)
        size_bias = target.input_count + target.output_count + 10
        if num_links < size_bias:
            return max(0, num_links - 1 - int(math.sqrt(num_links)))
        return num_links - 1

class RemoveLinkMutation(NEATMutation):
    """
    Delete a random link.

    Genomes with fewer than 'min_links' links are left unchanged. A hidden neuron
    which no longer has any link is removed as well.
    """

    def __init__(self, min_links: int | None = None, owner: Any = None):
        """
        Parameters:
            min_links: smallest genome that may lose a link (config 'min_links' if None)
            owner:     the evolutionary-algorithm context
        """
        super().__init__(owner)
        self._min_links = min_links

    def perform_operation(self,
                          rng            : random.Random,
                          parents        : Sequence[Genome],
                          parent_index   : int,
                          offspring      : MutableSequence[Genome | None],
                          offspring_index: int) -> None:
        min_links = self._min_links if self._min_links is not None else self.population.config.min_links
        target    = self.obtain_genome(parents, parent_index, offspring, offspring_index)

        if len(target.links) < min_links:
            return

        removed = target.links.pop(rng.randint(0, len(target.links) - 1))

        # If this orphaned any neurons, remove them too
        for neuron_id in removed.endpoints:
            if not mu.is_neuron_needed(target, neuron_id):
                mu.remove_neuron(target, neuron_id)

class ToggleLinkMutation(NEATMutation):
    """
    Flip the 'enabled' flag of a random link.
    Cycle checks count disabled links too, so enabling a link never closes a cycle.
    """

    def perform_operation(self,
                          rng            : random.Random,
                          parents        : Sequence[Genome],
                          parent_index   : int,
                          offspring      : MutableSequence[Genome | None],
                          offspring_index: int) -> None:
        target = self.obtain_genome(parents, parent_index, offspring, offspring_index)
        if not target.links:
            return

        link = target.links[rng.randint(0, len(target.links) - 1)]
        link.enabled = not link.enabled
