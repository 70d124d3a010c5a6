"""
NEAT Neuron Gene Module.

This module implements the NeuronGene class and NeuronType enumeration
for the NEAT (NeuroEvolution of Augmenting Topologies) mutation engine.

Classes:
    NeuronType: Enumeration for neuron types (INPUT, BIAS, OUTPUT, HIDDEN)
    NeuronGene: Gene encoding a single network neuron
"""

from enum import Enum

from evotopo.activations import activations, activation_codes

class NeuronType(Enum):
    """
    Neurons come in four types: input, bias, output, hidden.
    """
    INPUT  = "I"
    BIAS   = "B"
    OUTPUT = "O"
    HIDDEN = "H"

class NeuronGene:
    """
    A gene describing a neuron in a Neural Network.

    Neuron genes are identified by an ID which is unique within the population
    and stays the same across mutations, so that the same hidden neuron created
    in two lineages can be recognized as such.

    The activation function and the response parameter are carried along but
    never interpreted by the mutation engine.

    Public Attributes:
        id:              Unique identifier for this neuron
        type:            Type of neuron (INPUT, BIAS, OUTPUT or HIDDEN)
        activation_name: Name of the activation function (None for INPUT and BIAS neurons)
        response:        Multiplier applied to the neuron's weighted input
        innovation_id:   Innovation of the link split that created this neuron (HIDDEN only)

    Public Properties:
        is_structural: Whether this neuron can never be removed (INPUT, BIAS or OUTPUT)
    """

    def __init__(self,
                 neuron_id      : int,
                 neuron_type    : NeuronType,
                 activation_name: str | None = None,
                 response       : float      = 1.0,
                 innovation_id  : int | None = None):
        """
        Initialize a neuron gene.

        Parameters:
            neuron_id:       Unique identifier for this neuron
            neuron_type:     Type of neuron (INPUT, BIAS, OUTPUT or HIDDEN)
            activation_name: Name of the activation function; ignored for INPUT and BIAS neurons
            response:        Multiplier applied to the neuron's weighted input
            innovation_id:   Innovation of the link split that created this neuron

        Raises:
            ValueError: If the activation function is unknown
        """
        self.id  : int        = neuron_id
        self.type: NeuronType = neuron_type

        if neuron_type in (NeuronType.INPUT, NeuronType.BIAS):
            activation_name = None
        elif activation_name is not None and activation_name not in activations:
            raise ValueError(f"Unknown activation function '{activation_name}'")

        self.activation_name: str | None = activation_name
        self.response       : float      = response
        self.innovation_id  : int | None = innovation_id

    @property
    def is_structural(self) -> bool:
        return self.type in (NeuronType.INPUT, NeuronType.BIAS, NeuronType.OUTPUT)

    def __repr__(self):
        return (f"NeuronGene(neuron_id={self.id:03d}, neuron_type=NeuronType.{self.type.name:6s},"
                f"activation={self.activation_name!r}, response={self.response})")

    def __str__(self):
        if self.activation_name is None:
            return f"[{self.type.value}{self.id}]"
        act_code = activation_codes.get(self.activation_name, "???")
        return f"[{self.type.value}{self.id},{act_code}]"
