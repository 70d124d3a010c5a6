"""
NEAT Link Gene Module

This module implements the LinkGene class for the
NEAT (NeuroEvolution of Augmenting Topologies) mutation engine.

Classes:
    LinkGene: Gene encoding a weighted link between neurons
"""

class LinkGene:
    """
    A gene describing a weighted, directed link between two neurons.

    A link gene is identified within a genome by its ordered pair of endpoints;
    its innovation ID is the historical marker which the population's ledger
    assigned to that pair the first time it appeared in any genome.

    Links can be enabled or disabled, allowing NEAT to preserve structural
    information while temporarily deactivating pathways. A disabled link is
    brought back, rather than duplicated, when the same pair is linked again.

    Public Attributes:
        from_neuron_id: ID of the source neuron
        to_neuron_id:   ID of the target neuron
        weight:         Weight of the link
        enabled:        Whether this link is active in the network
        innovation_id:  Global innovation ID of the (from, to) pair
    """

    def __init__(self,
                 from_neuron_id: int,
                 to_neuron_id  : int,
                 enabled       : bool,
                 innovation_id : int,
                 weight        : float):
        """
        Initialize a link gene.

        Parameters:
            from_neuron_id: ID of the source neuron
            to_neuron_id:   ID of the target neuron
            enabled:        Whether this link is active in the network
            innovation_id:  Global innovation ID of the (from, to) pair
            weight:         Weight of the link
        """
        self.from_neuron_id: int   = from_neuron_id
        self.to_neuron_id  : int   = to_neuron_id
        self.enabled       : bool  = enabled
        self.innovation_id : int   = innovation_id
        self.weight        : float = weight

    @property
    def endpoints(self) -> tuple[int, int]:
        return self.from_neuron_id, self.to_neuron_id

    def connects(self, from_neuron_id: int, to_neuron_id: int) -> bool:
        return self.from_neuron_id == from_neuron_id and self.to_neuron_id == to_neuron_id

    def touches(self, neuron_id: int) -> bool:
        return self.from_neuron_id == neuron_id or self.to_neuron_id == neuron_id

    def __repr__(self):
        return (f"LinkGene(from_neuron_id={self.from_neuron_id:03d}, to_neuron_id={self.to_neuron_id:03d},"
                f"weight={self.weight:+.6f}, enabled={self.enabled}, innovation_id={self.innovation_id:03d})")

    def __str__(self):
        s  = f"[{self.innovation_id:03d},{'E' if self.enabled else 'D'},"
        s += f"{self.from_neuron_id:02d}=>{self.to_neuron_id:02d},{self.weight:+.02f}]"
        return s
