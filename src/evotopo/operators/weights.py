"""
NEAT Weight Mutations Module

A weight mutation is made of two parts: a selector choosing which links of the
genome are touched, and a mutator changing the weight of each chosen link.

Classes:
    SelectFixed:       Select a fixed number of random links
    SelectProportion:  Select each link with a given probability
    PerturbLinkWeight: Add gaussian noise to a weight
    ResetLinkWeight:   Replace a weight with a new random one
    WeightMutation:    Mutation combining a selector and a mutator
"""

import random
from typing import Any, MutableSequence, Protocol, Sequence

from evotopo.genotype.genome    import Genome
from evotopo.genotype.link_gene import LinkGene
from evotopo.operators.base     import NEATMutation
from evotopo.operators          import mutation_utils as mu

class LinkSelector(Protocol):
    def select_links(self, rng: random.Random, genome: Genome) -> list[LinkGene]: ...

class LinkWeightMutator(Protocol):
    def mutate_weight(self, rng: random.Random, link: LinkGene, genome: Genome) -> None: ...

class SelectFixed:
    """
    Select 'count' distinct random links (all of them, if the genome has fewer).
    """

    def __init__(self, count: int):
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        self.count = count

    def select_links(self, rng: random.Random, genome: Genome) -> list[LinkGene]:
        count = min(self.count, len(genome.links))
        return rng.sample(genome.links, count)

    def __repr__(self):
        return f"SelectFixed({self.count})"

class SelectProportion:
    """
    Select each link independently with probability 'proportion'.
    At least one link is selected when the genome has any.
    """

    def __init__(self, proportion: float):
        if not 0.0 < proportion <= 1.0:
            raise ValueError(f"proportion must be in (0, 1], got {proportion}")
        self.proportion = proportion

    def select_links(self, rng: random.Random, genome: Genome) -> list[LinkGene]:
        selected = [link for link in genome.links if rng.random() < self.proportion]
        if not selected and genome.links:
            selected.append(genome.links[rng.randint(0, len(genome.links) - 1)])
        return selected

    def __repr__(self):
        return f"SelectProportion({self.proportion})"

class PerturbLinkWeight:
    """
    Modify the weight additively by a value drawn from N(0, sigma).
    The result is clipped to the population's weight range.
    """

    def __init__(self, sigma: float):
        if sigma <= 0:
            raise ValueError(f"sigma must be positive, got {sigma}")
        self.sigma = sigma

    def mutate_weight(self, rng: random.Random, link: LinkGene, genome: Genome) -> None:
        link.weight = mu.clamp_weight(genome.population, link.weight + rng.gauss(0.0, self.sigma))

    def __repr__(self):
        return f"PerturbLinkWeight({self.sigma})"

class ResetLinkWeight:
    """
    Replace the weight by a new value, uniform in the population's weight range.
    """

    def mutate_weight(self, rng: random.Random, link: LinkGene, genome: Genome) -> None:
        link.weight = mu.random_weight(genome.population, rng)

    def __repr__(self):
        return "ResetLinkWeight()"

class WeightMutation(NEATMutation):
    """
    Mutate the weights of some links of the genome.

    Which links are touched is decided by the selector, how their weight
    changes is decided by the mutator. Disabled links can be touched too.
    """

    def __init__(self, selector: LinkSelector, mutator: LinkWeightMutator, owner: Any = None):
        """
        Parameters:
            selector: chooses the links to mutate
            mutator:  changes the weight of one link
            owner:    the evolutionary-algorithm context
        """
        super().__init__(owner)
        self.selector = selector
        self.mutator  = mutator

    def perform_operation(self,
                          rng            : random.Random,
                          parents        : Sequence[Genome],
                          parent_index   : int,
                          offspring      : MutableSequence[Genome | None],
                          offspring_index: int) -> None:
        target = self.obtain_genome(parents, parent_index, offspring, offspring_index)
        for link in self.selector.select_links(rng, target):
            self.mutator.mutate_weight(rng, link, target)

    def __repr__(self):
        return f"WeightMutation({self.selector!r}, {self.mutator!r})"
