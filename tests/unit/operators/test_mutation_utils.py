"""
Unit tests for the mutation utilities.

Tests cover random neuron selection, link creation and reactivation, duplicate
detection, neuron retention and removal, and the clone-into-slot contract.
"""

import pytest
import random
from unittest.mock import Mock

from evotopo.genotype import Genome, NeuronType
from evotopo.operators import mutation_utils as mu
from evotopo.pool.population import Population


# ============================================================================
# Test: select_random_neuron
# ============================================================================

class TestSelectRandomNeuron:

    def test_no_eligible_neuron_returns_none(self, population, build_genome, rng):
        """[Bias, Input, Output], feed-forward: every neuron is excluded."""
        genome = build_genome(population)
        assert mu.select_random_neuron(genome, False, rng) is None

    def test_feed_forward_excludes_bias_input_output(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[3])
        rng = random.Random(0)
        picks = {mu.select_random_neuron(genome, False, rng).id for _ in range(50)}
        assert picks == {3}

    def test_recurrent_keeps_outputs(self, recurrent_population, build_genome):
        genome = build_genome(recurrent_population, hidden_ids=[3])
        rng = random.Random(0)
        picks = {mu.select_random_neuron(genome, False, rng).id for _ in range(100)}
        assert picks == {2, 3}

    def test_recurrent_without_hidden_returns_output(self, recurrent_population, build_genome, rng):
        genome = build_genome(recurrent_population)
        assert mu.select_random_neuron(genome, False, rng).type == NeuronType.OUTPUT

    def test_include_all(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[3])
        rng = random.Random(0)
        picks = {mu.select_random_neuron(genome, True, rng).id for _ in range(200)}
        assert picks == {0, 1, 2, 3}

    def test_uses_given_random_source(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[3, 4, 5])
        rng = Mock()
        rng.randint.return_value = 4
        neuron = mu.select_random_neuron(genome, False, rng)

        rng.randint.assert_called_once_with(3, 5)
        assert neuron.id == 4

    def test_multiple_inputs_and_outputs(self, build_config, build_genome):
        population = Population(build_config(input_count=3, output_count=2))
        genome = build_genome(population, hidden_ids=[6, 7])
        rng = Mock()
        rng.randint.return_value = 6
        mu.select_random_neuron(genome, False, rng)
        rng.randint.assert_called_once_with(6, 7)


# ============================================================================
# Test: create_link
# ============================================================================

class TestCreateLink:

    def test_innovation_ids_from_empty_ledger(self, population, build_genome):
        genome = build_genome(population)
        mu.create_link(genome, 1, 2, 0.5)
        mu.create_link(genome, 0, 2, -0.3)

        assert [(l.endpoints, l.innovation_id, l.weight) for l in genome.links] == \
               [((1, 2), 1, 0.5), ((0, 2), 2, -0.3)]
        assert all(l.enabled for l in genome.links)

    def test_second_call_reactivates_instead_of_duplicating(self, population, build_genome):
        genome = build_genome(population)
        mu.create_link(genome, 1, 2, 0.5)
        genome.links[0].enabled = False

        mu.create_link(genome, 1, 2, 1.5)

        assert len(genome.links) == 1
        assert genome.links[0].enabled is True
        assert genome.links[0].weight == 1.5
        assert genome.links[0].innovation_id == 1

    def test_same_pair_in_other_genome_gets_same_id(self, population, build_genome):
        g1 = build_genome(population, hidden_ids=[3])
        g2 = build_genome(population, hidden_ids=[3])

        mu.create_link(g1, 1, 3, 0.1)
        mu.create_link(g1, 3, 2, 0.1)
        mu.create_link(g2, 3, 2, 0.9)
        mu.create_link(g2, 1, 3, 0.9)

        assert g1.find_link(1, 3).innovation_id == g2.find_link(1, 3).innovation_id == 1
        assert g1.find_link(3, 2).innovation_id == g2.find_link(3, 2).innovation_id == 2

    def test_ledger_failure_propagates(self, population, build_genome):
        genome = build_genome(population)
        population.innovations = Mock()
        population.innovations.find_or_create.side_effect = RuntimeError("ledger broken")

        with pytest.raises(RuntimeError, match="ledger broken"):
            mu.create_link(genome, 1, 2, 0.5)
        assert genome.links == []


# ============================================================================
# Test: is_duplicate_link
# ============================================================================

class TestIsDuplicateLink:

    def test_enabled_link_is_duplicate(self, population, build_genome):
        genome = build_genome(population, links=[(1, 2, 0.5, True)])
        assert mu.is_duplicate_link(genome, 1, 2)
        assert not mu.is_duplicate_link(genome, 2, 1)

    def test_disabled_link_is_not_duplicate(self, population, build_genome):
        genome = build_genome(population, links=[(1, 2, 0.5, True)])
        genome.links[0].enabled = False

        assert not mu.is_duplicate_link(genome, 1, 2)
        assert genome.find_link(1, 2) is not None


# ============================================================================
# Test: is_neuron_needed / remove_neuron
# ============================================================================

class TestNeuronRetention:

    def test_bias_input_output_always_needed(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[3], links=[(1, 3, 0.5, True)])
        for neuron in genome.neurons:
            if neuron.type != NeuronType.HIDDEN:
                assert mu.is_neuron_needed(genome, neuron.id)

    def test_hidden_with_links_is_needed(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[3, 4], links=[(1, 3, 0.5, True), (4, 2, 0.5, False)])
        assert mu.is_neuron_needed(genome, 3)
        assert mu.is_neuron_needed(genome, 4)

    def test_isolated_hidden_is_not_needed(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[3], links=[(1, 2, 0.5, True)])
        assert not mu.is_neuron_needed(genome, 3)

    def test_remove_neuron(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[3, 4])
        mu.remove_neuron(genome, 3)
        assert genome.neuron_ids == [0, 1, 2, 4]

    def test_remove_absent_neuron_is_noop(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[3])
        mu.remove_neuron(genome, 42)
        assert genome.neuron_ids == [0, 1, 2, 3]

    def test_remove_neuron_leaves_links(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[3], links=[(1, 3, 0.5, True)])
        mu.remove_neuron(genome, 3)
        assert len(genome.links) == 1

    def test_neuron_position(self, population, build_genome):
        genome = build_genome(population, hidden_ids=[7])
        assert mu.neuron_position(genome, 7) == 3
        assert mu.neuron_position(genome, 8) == -1


# ============================================================================
# Test: obtain_mutation_target
# ============================================================================

class TestObtainMutationTarget:

    def test_slot_holds_the_returned_clone(self, population, build_genome):
        parent = build_genome(population, links=[(1, 2, 0.5, True)])
        offspring = [None, None]

        target = mu.obtain_mutation_target(population, [parent], 0, offspring, 1)

        assert offspring[1] is target
        assert offspring[0] is None
        assert target is not parent

    def test_uses_selected_parent(self, population, build_genome):
        p0 = build_genome(population)
        p1 = build_genome(population, hidden_ids=[3])
        offspring = [None]

        target = mu.obtain_mutation_target(population, [p0, p1], 1, offspring, 0)
        assert target.neuron_ids == [0, 1, 2, 3]

    def test_editing_target_leaves_parent_alone(self, population, build_genome):
        parent = build_genome(population, links=[(1, 2, 0.5, True)])
        offspring = [None]
        target = mu.obtain_mutation_target(population, [parent], 0, offspring, 0)
        target.links[0].weight = -1.0
        assert parent.links[0].weight == 0.5

    def test_clones_through_population_factory(self, population, build_genome):
        parent = build_genome(population)
        clone = Genome(population, 1, 1)
        population.genome_factory = Mock()
        population.genome_factory.clone.return_value = clone
        offspring = [None]

        target = mu.obtain_mutation_target(population, [parent], 0, offspring, 0)

        population.genome_factory.clone.assert_called_once_with(parent)
        assert target is clone is offspring[0]

    def test_slot_not_holding_clone_fails_loudly(self, population, build_genome):
        class DroppingSlots(list):
            def __setitem__(self, index, value):
                super().__setitem__(index, None)

        parent = build_genome(population)
        with pytest.raises(AssertionError):
            mu.obtain_mutation_target(population, [parent], 0, DroppingSlots([None]), 0)


# ============================================================================
# Test: weights
# ============================================================================

class TestWeights:

    def test_random_weight_in_range(self, population):
        rng = random.Random(1)
        assert all(-5.0 <= mu.random_weight(population, rng) <= 5.0 for _ in range(100))

    @pytest.mark.parametrize("weight, expected", [(7.0, 5.0), (-9.0, -5.0), (1.25, 1.25)])
    def test_clamp_weight(self, population, weight, expected):
        assert mu.clamp_weight(population, weight) == expected
