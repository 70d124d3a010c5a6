"""
NEAT Genome Module

This module implements the Genome class for the NEAT
(NeuroEvolution of Augmenting Topologies) mutation engine.

Classes:
    Genome: Neuron and link chromosomes describing one candidate network
"""

import copy
from typing import TYPE_CHECKING

from evotopo.genotype.link_gene   import LinkGene
from evotopo.genotype.neuron_gene import NeuronType, NeuronGene

if TYPE_CHECKING:
    from evotopo.pool.population import Population

class Genome:
    """
    A NEAT genome representing a neural network as two ordered chromosomes.

    The genome consists of:
    - the neuron chromosome: a list of NeuronGene objects
    - the link chromosome:   a list of LinkGene objects, each carrying the innovation
                             ID under which the population recorded its endpoints

    Mutation operators edit genomes in place, so a genome is always cloned before
    being changed. A clone has its own genes but shares the population reference.

    Chromosome layout convention:
        - position 0:                       the bias neuron
        - positions [1, 1 + input_count):   input neurons
        - next output_count positions:      output neurons
        - remaining positions:              hidden neurons
    The mutation utilities rely on this layout when they pick a neuron by position.

    Public Attributes:
        neurons:      The neuron chromosome
        links:        The link chromosome
        input_count:  Number of input neurons
        output_count: Number of output neurons
        population:   The population this genome belongs to

    Public Properties:
        neuron_ids:     IDs of all neurons, in chromosome order
        hidden_neurons: List of all hidden neuron genes
        enabled_links:  List of all enabled link genes

    Public Methods:
        find_neuron(neuron_id):        Neuron gene with the given ID, or None
        neuron_position(neuron_id):    Position in the neuron chromosome, or -1
        find_link(from_id, to_id):     Link gene with the given endpoints, or None
        would_create_cycle(from, to):  Whether a new link would close a cycle
        sort_genes():                  Restore the canonical gene order
        clone():                       Structurally independent copy
        validate():                    Check the structural invariants
    """

    def __init__(self,
                 population  : 'Population | None',
                 input_count : int,
                 output_count: int,
                 neurons     : list[NeuronGene] | None = None,
                 links       : list[LinkGene]   | None = None):
        """
        Initialize a genome from its chromosomes.

        Parameters:
            population:   The population this genome belongs to
            input_count:  Number of input neurons
            output_count: Number of output neurons
            neurons:      The neuron chromosome (empty if None)
            links:        The link chromosome (empty if None)
        """
        self.population  : 'Population | None' = population
        self.input_count : int                 = input_count
        self.output_count: int                 = output_count
        self.neurons     : list[NeuronGene]    = neurons if neurons is not None else []
        self.links       : list[LinkGene]      = links   if links   is not None else []

    @property
    def neuron_ids(self) -> list[int]:
        return [neuron.id for neuron in self.neurons]

    @property
    def hidden_neurons(self) -> list[NeuronGene]:
        return [neuron for neuron in self.neurons if neuron.type == NeuronType.HIDDEN]

    @property
    def enabled_links(self) -> list[LinkGene]:
        return [link for link in self.links if link.enabled]

    def find_neuron(self, neuron_id: int) -> NeuronGene | None:
        for neuron in self.neurons:
            if neuron.id == neuron_id:
                return neuron
        return None

    def neuron_position(self, neuron_id: int) -> int:
        for i, neuron in enumerate(self.neurons):
            if neuron.id == neuron_id:
                return i
        return -1

    def find_link(self, from_id: int, to_id: int) -> LinkGene | None:
        for link in self.links:
            if link.connects(from_id, to_id):
                return link
        return None

    def would_create_cycle(self, from_id: int, to_id: int) -> bool:
        """
        Check if adding a link from_id -> to_id would create a cycle.
        Uses DFS to check if there's already a path from 'to_id' back to 'from_id'.
        Considers ALL links (both enabled and disabled), since a disabled link
        can be enabled again later.

        Parameters:
            from_id: proposed start of the new link
            to_id:   proposed end   of the new link

        Returns:
            whether adding the new link would create a cycle in the network
        """
        if from_id == to_id:
            return True

        # If we can reach 'from_id' starting at 'to_id', then adding a
        # link 'from_id' -> 'to_id' would create a network cycle
        visited = set()
        stack = [to_id]

        while stack:
            current = stack.pop()
            if current == from_id:
                return True
            if current in visited:
                continue
            visited.add(current)

            for link in self.links:
                if link.from_neuron_id == current:
                    stack.append(link.to_neuron_id)

        return False

    def sort_genes(self) -> None:
        """
        Put neurons in ID order and links in innovation order.

        Bias, input and output neurons have the lowest IDs and hidden neurons
        get increasing IDs, so sorting by ID keeps the chromosome layout intact.
        """
        self.neurons.sort(key=lambda n: n.id)
        self.links.sort(key=lambda l: l.innovation_id)

    def clone(self) -> 'Genome':
        """
        Create a structurally independent copy of this genome.

        Genes are copied, so editing the clone never affects this genome.
        The population reference is shared, not copied.

        Returns:
            the copy
        """
        return Genome(self.population,
                      self.input_count,
                      self.output_count,
                      [copy.copy(neuron) for neuron in self.neurons],
                      [copy.copy(link)   for link   in self.links])

    def validate(self) -> None:
        """
        Check the structural invariants of the genome.

        Raises:
            ValueError: If a neuron ID is repeated, the chromosome layout is broken,
                        a link endpoint names a missing neuron, or two links share
                        the same ordered pair of endpoints
        """
        ids = self.neuron_ids
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate neuron IDs found in neuron chromosome")

        expected = [NeuronType.BIAS] + \
                   [NeuronType.INPUT]  * self.input_count + \
                   [NeuronType.OUTPUT] * self.output_count
        actual = [neuron.type for neuron in self.neurons[:len(expected)]]
        if actual != expected:
            raise ValueError("Neuron chromosome must start with the bias, input and output neurons, in this order")
        if any(neuron.type != NeuronType.HIDDEN for neuron in self.neurons[len(expected):]):
            raise ValueError("Only hidden neurons may follow the output neurons")

        known = set(ids)
        pairs = set()
        for link in self.links:
            if link.from_neuron_id not in known:
                raise ValueError(f"Link references non-existent source neuron: {link.from_neuron_id}")
            if link.to_neuron_id not in known:
                raise ValueError(f"Link references non-existent target neuron: {link.to_neuron_id}")
            if link.endpoints in pairs:
                raise ValueError(f"Duplicate link {link.from_neuron_id}=>{link.to_neuron_id}")
            pairs.add(link.endpoints)

    def __str__(self):
        neurons_str = ''.join(str(neuron) for neuron in self.neurons)
        links_str   = ''.join(str(link)   for link   in self.links)
        return f"Neurons: {neurons_str}\nLinks: {links_str}"
