"""
NEAT Operators Package

Mutation operators for NEAT genomes and the utilities they are built from.

Modules:
    mutation_utils: Shared operations (neuron selection, link creation, pruning, cloning)
    base:           EvolutionaryOperator interface and NEATMutation base class
    structural:     Mutations changing the network graph
    weights:        Link selectors, weight mutators and WeightMutation
    activation:     ActivationMutation
    operation_list: OperationList
"""

from evotopo.operators.base           import EvolutionaryOperator, NEATMutation
from evotopo.operators.structural     import (AddLinkMutation,
                                              AddNeuronMutation,
                                              RemoveLinkMutation,
                                              ToggleLinkMutation)
from evotopo.operators.weights        import (SelectFixed,
                                              SelectProportion,
                                              PerturbLinkWeight,
                                              ResetLinkWeight,
                                              WeightMutation)
from evotopo.operators.activation     import ActivationMutation
from evotopo.operators.operation_list import OperationList

__all__ = ['EvolutionaryOperator',
           'NEATMutation',
           'AddLinkMutation',
           'AddNeuronMutation',
           'RemoveLinkMutation',
           'ToggleLinkMutation',
           'SelectFixed',
           'SelectProportion',
           'PerturbLinkWeight',
           'ResetLinkWeight',
           'WeightMutation',
           'ActivationMutation',
           'OperationList']
