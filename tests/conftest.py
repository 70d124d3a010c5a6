"""Pytest configuration and shared fixtures."""

import pytest
import random
import sys
from pathlib import Path
from unittest.mock import Mock

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from evotopo.genotype import Genome, LinkGene, NeuronGene, NeuronType
from evotopo.pool.population import Population
from evotopo.run.config import Config


def make_config(input_count=1, output_count=1, activation_cycles=1):
    """Config with everything the mutation engine reads."""
    config = Mock(spec=Config)
    config.input_count = input_count
    config.output_count = output_count
    config.activation_cycles = activation_cycles
    config.weight_range = 5.0
    config.initial_connection_density = 1.0
    config.activation_initial = 'sigmoid'
    config.max_tries = 5
    config.min_links = 5
    config.activation_options = ['sigmoid', 'tanh', 'relu']
    config.add_link_probability = 0.3
    config.add_neuron_probability = 0.2
    config.remove_link_probability = 0.1
    config.toggle_link_probability = 0.1
    config.activation_probability = 0.1
    config.weight_perturb_probability = 0.4
    config.weight_reset_probability = 0.1
    config.weight_perturb_sigma = 0.5
    config.weight_select_proportion = 0.5
    return config


def make_genome(population, hidden_ids=(), links=()):
    """
    Genome with the standard layout [bias, inputs, outputs, hidden].

    'links' are (from, to, weight, enabled) tuples; their innovation IDs come
    from the population's ledger, in the order given.
    """
    input_count = population.input_count
    output_count = population.output_count

    neurons = [NeuronGene(0, NeuronType.BIAS)]
    neurons += [NeuronGene(1 + i, NeuronType.INPUT) for i in range(input_count)]
    neurons += [NeuronGene(1 + input_count + i, NeuronType.OUTPUT, 'sigmoid') for i in range(output_count)]
    neurons += [NeuronGene(h, NeuronType.HIDDEN, 'sigmoid') for h in hidden_ids]

    genome = Genome(population, input_count, output_count, neurons)
    for from_id, to_id, weight, enabled in links:
        innovation = population.innovations.find_or_create(from_id, to_id)
        genome.links.append(LinkGene(from_id, to_id, enabled, innovation, weight))
    return genome


@pytest.fixture
def ff_config():
    """Feed-forward config: 1 input, 1 output, one activation cycle."""
    return make_config()


@pytest.fixture
def recurrent_config():
    """Recurrent config: 1 input, 1 output, several activation cycles."""
    return make_config(activation_cycles=3)


@pytest.fixture
def population(ff_config):
    return Population(ff_config)


@pytest.fixture
def recurrent_population(recurrent_config):
    return Population(recurrent_config)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def build_genome():
    return make_genome


@pytest.fixture
def build_config():
    return make_config
