"""
NEAT Operator Base Module

Defines the contract between the outer evolutionary loop and the operators that
produce offspring, and the common base of the NEAT mutations.

Classes:
    EvolutionaryOperator: Interface the evolutionary loop calls operators through
    NEATMutation:         Abstract base for single-parent, single-child NEAT mutations
"""

import random
from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, MutableSequence, Protocol, Sequence, runtime_checkable

from evotopo.genotype.genome import Genome
from evotopo.operators       import mutation_utils

if TYPE_CHECKING:
    from evotopo.pool.population import Population

@runtime_checkable
class EvolutionaryOperator(Protocol):
    """
    An operator turns 'parents_needed' parents into 'offspring_produced' offspring.

    The owner (the evolutionary-algorithm context, exposing 'population' and
    'config') is handed over once through init(), before the operator is shared.
    Each perform_operation() call is self-contained: the random source and the
    parent/offspring arrays are arguments, never operator state.
    """

    @property
    def parents_needed(self) -> int: ...

    @property
    def offspring_produced(self) -> int: ...

    def init(self, owner: Any) -> None: ...

    def perform_operation(self,
                          rng            : random.Random,
                          parents        : Sequence[Genome],
                          parent_index   : int,
                          offspring      : MutableSequence[Genome | None],
                          offspring_index: int) -> None: ...

class NEATMutation(ABC):
    """
    Common base of the NEAT mutations.

    NEAT mutations are asexual: one parent, one child. The child is a clone of the
    parent, placed in the offspring slot, which the concrete mutation then edits
    in place with the functions of 'mutation_utils' and the random source it was
    given.

    The owner is set exactly once. Initializing again with a different owner is
    an error, because a shared operator must not change under running workers.

    Subclasses must implement:
    - perform_operation(rng, parents, parent_index, offspring, offspring_index)

    Public Properties:
        owner:              The evolutionary-algorithm context
        population:         The owner's population
        parents_needed:     Always 1
        offspring_produced: Always 1

    Public Methods:
        init(owner):       Attach the operator to its owner
        obtain_genome(...): Clone the parent into the offspring slot and return it
    """

    def __init__(self, owner: Any = None):
        """
        Parameters:
            owner: the evolutionary-algorithm context; may be given later through init()
        """
        self._owner = None
        if owner is not None:
            self.init(owner)

    def init(self, owner: Any) -> None:
        """
        Attach the operator to its owner.

        Parameters:
            owner: object exposing 'population'

        Raises:
            RuntimeError: If the operator already belongs to a different owner
        """
        if self._owner is not None and self._owner is not owner:
            raise RuntimeError(f"{type(self).__name__} is already initialized with another owner")
        self._owner = owner

    @property
    def owner(self) -> Any:
        if self._owner is None:
            raise RuntimeError(f"{type(self).__name__} used before init()")
        return self._owner

    @property
    def population(self) -> 'Population':
        return self.owner.population

    @property
    def parents_needed(self) -> int:
        return 1

    @property
    def offspring_produced(self) -> int:
        return 1

    def obtain_genome(self,
                      parents        : Sequence[Genome],
                      parent_index   : int,
                      offspring      : MutableSequence[Genome | None],
                      offspring_index: int) -> Genome:
        return mutation_utils.obtain_mutation_target(self.population, parents, parent_index,
                                                     offspring, offspring_index)

    @abstractmethod
    def perform_operation(self,
                          rng            : random.Random,
                          parents        : Sequence[Genome],
                          parent_index   : int,
                          offspring      : MutableSequence[Genome | None],
                          offspring_index: int) -> None:
        """
        Produce one mutated child of parents[parent_index] into offspring[offspring_index].

        Parameters:
            rng:             random source (the only one the mutation may use)
            parents:         the parents
            parent_index:    which parent to mutate
            offspring:       the offspring array
            offspring_index: which slot receives the child
        """

    def __repr__(self):
        return f"{type(self).__name__}()"
