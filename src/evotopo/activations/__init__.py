"""
Activations Package

Names of the activation functions a neuron gene can carry. The mutation engine
treats them as opaque labels.

Exported:
    activations:      Tuple of activation function names
    activation_codes: Dictionary mapping activation function names to 3-letter codes
"""

from evotopo.activations.basic_activations import activations, activation_codes

__all__ = [
    'activations',
    'activation_codes'
]
