"""
NEAT Operation List Module

Classes:
    OperationList: Weighted collection of evolutionary operators
"""

import random
from typing import Any

from evotopo.operators.base import EvolutionaryOperator

class OperationList:
    """
    The operators an evolutionary algorithm can apply, each with a relative weight.

    Weights are normalized by finalize_structure(); pick_operator() then chooses an
    operator with probability proportional to its weight.

    Public Methods:
        add(probability, operator): Register an operator
        finalize_structure():       Normalize the weights so they sum up to 1
        pick_operator(rng):         Choose an operator at random
        pick_max_parents():         Largest 'parents_needed' among the operators
        init(owner):                Attach every operator to the owner
    """

    def __init__(self):
        self._entries: list[tuple[float, EvolutionaryOperator]] = []

    def add(self, probability: float, operator: EvolutionaryOperator) -> None:
        """
        Parameters:
            probability: relative weight of the operator (operators with weight 0 are skipped)
            operator:    the operator

        Raises:
            ValueError: If the weight is negative
        """
        if probability < 0:
            raise ValueError(f"operator probability must not be negative, got {probability}")
        if probability > 0:
            self._entries.append((probability, operator))

    def finalize_structure(self) -> None:
        total = sum(probability for probability, _ in self._entries)
        if total <= 0:
            raise ValueError("no operator has a positive probability")
        self._entries = [(probability / total, operator) for probability, operator in self._entries]

    def pick_operator(self, rng: random.Random) -> EvolutionaryOperator:
        """
        Choose an operator with probability proportional to its weight.

        Raises:
            ValueError: If the list is empty
        """
        if not self._entries:
            raise ValueError("no operators to pick from")

        total = sum(probability for probability, _ in self._entries)
        r = rng.random() * total
        cumulative = 0.0
        for probability, operator in self._entries:
            cumulative += probability
            if r < cumulative:
                return operator

        # Rounding can leave 'r' just above the last cumulative sum
        return self._entries[-1][1]

    def pick_max_parents(self) -> int:
        return max((operator.parents_needed for _, operator in self._entries), default=0)

    def init(self, owner: Any) -> None:
        for _, operator in self._entries:
            operator.init(owner)

    @property
    def operators(self) -> list[EvolutionaryOperator]:
        return [operator for _, operator in self._entries]

    @property
    def probabilities(self) -> list[float]:
        return [probability for probability, _ in self._entries]

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)
