"""
Unit tests for InnovationLedger class.

Tests cover innovation ID assignment, split records, neuron ID allocation,
reset, and concurrent use.
"""

import pytest
import threading

from evotopo.genotype.innovation import InnovationLedger, InnovationRecord


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def ledger():
    """Ledger for genomes with 2 inputs and 1 output (neurons 0..3 taken)."""
    return InnovationLedger(first_neuron_id=4)


# ============================================================================
# Test: find_or_create
# ============================================================================

class TestFindOrCreate:
    """Test innovation ID assignment for links."""

    def test_first_id_is_one(self, ledger):
        assert ledger.find_or_create(1, 2) == 1

    def test_sequential_assignment(self, ledger):
        """Distinct pairs get increasing IDs in order of first appearance."""
        assert ledger.find_or_create(1, 3) == 1
        assert ledger.find_or_create(0, 3) == 2
        assert ledger.find_or_create(2, 3) == 3

    def test_same_pair_returns_same_id(self, ledger):
        first = ledger.find_or_create(1, 3)
        ledger.find_or_create(2, 3)
        assert ledger.find_or_create(1, 3) == first
        assert ledger.find_or_create(1, 3) == first

    def test_reverse_pair_is_a_different_innovation(self, ledger):
        forward = ledger.find_or_create(1, 3)
        reverse = ledger.find_or_create(3, 1)
        assert forward != reverse

    def test_many_innovations(self, ledger):
        ids = [ledger.find_or_create(i, i + 1) for i in range(100)]
        assert ids == list(range(1, 101))

    def test_contains_and_len(self, ledger):
        ledger.find_or_create(1, 3)
        assert (1, 3) in ledger
        assert (3, 1) not in ledger
        assert len(ledger) == 1


# ============================================================================
# Test: find_or_create_split
# ============================================================================

class TestFindOrCreateSplit:
    """Test records of neurons created by splitting a link."""

    def test_new_split_allocates_neuron_and_innovation(self, ledger):
        ledger.find_or_create(1, 3)
        record = ledger.find_or_create_split(1, 3)

        assert isinstance(record, InnovationRecord)
        assert record.is_split
        assert record.neuron_id == 4
        assert record.innovation_id == 2
        assert (record.from_neuron_id, record.to_neuron_id) == (1, 3)

    def test_same_split_returns_same_record(self, ledger):
        first = ledger.find_or_create_split(1, 3)
        second = ledger.find_or_create_split(1, 3)
        assert first is second

    def test_different_splits_get_different_neurons(self, ledger):
        a = ledger.find_or_create_split(1, 3)
        b = ledger.find_or_create_split(2, 3)
        assert a.neuron_id != b.neuron_id
        assert b.neuron_id == a.neuron_id + 1

    def test_split_records_do_not_shadow_link_records(self, ledger):
        """Splitting (1, 3) does not make (1, 3) a known link."""
        ledger.find_or_create_split(1, 3)
        assert (1, 3) not in ledger
        assert ledger.find_or_create(1, 3) == 2

    def test_split_and_assign_share_neuron_counter(self, ledger):
        assert ledger.assign_neuron_id() == 4
        assert ledger.find_or_create_split(1, 3).neuron_id == 5
        assert ledger.assign_neuron_id() == 6


# ============================================================================
# Test: records and reset
# ============================================================================

class TestRecordsAndReset:

    def test_records_in_id_order(self, ledger):
        ledger.find_or_create(1, 3)
        ledger.find_or_create_split(1, 3)
        ledger.find_or_create(1, 4)

        records = ledger.records
        assert [r.innovation_id for r in records] == [1, 2, 3]
        assert [r.is_split for r in records] == [False, True, False]

    def test_reset_clears_everything(self, ledger):
        ledger.find_or_create(1, 3)
        ledger.find_or_create_split(1, 3)

        ledger.reset()

        assert len(ledger) == 0
        assert ledger.find_or_create(2, 3) == 1
        assert ledger.assign_neuron_id() == 4

    def test_reset_with_new_first_neuron_id(self, ledger):
        ledger.reset(first_neuron_id=10)
        assert ledger.assign_neuron_id() == 10


# ============================================================================
# Test: concurrency
# ============================================================================

class TestConcurrency:
    """Workers racing on the same pairs must still agree on their IDs."""

    def test_concurrent_find_or_create_gives_one_id_per_pair(self, ledger):
        pairs = [(i % 7, 100 + i % 5) for i in range(35)]
        results = {}
        barrier = threading.Barrier(8)

        def worker(worker_id):
            barrier.wait()
            results[worker_id] = [ledger.find_or_create(a, b) for a, b in pairs]

        threads = [threading.Thread(target=worker, args=(w,)) for w in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        # Every worker saw the same ID for each pair
        first = results[0]
        assert all(r == first for r in results.values())

        # Distinct pairs got distinct IDs, with no gaps
        distinct = set(pairs)
        ids = {ledger.find_or_create(a, b) for a, b in distinct}
        assert ids == set(range(1, len(distinct) + 1))

    def test_concurrent_splits_share_the_record(self, ledger):
        records = []
        lock = threading.Lock()
        barrier = threading.Barrier(6)

        def worker():
            barrier.wait()
            record = ledger.find_or_create_split(1, 3)
            with lock:
                records.append(record)

        threads = [threading.Thread(target=worker) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len({r.neuron_id for r in records}) == 1
        assert ledger.assign_neuron_id() == 5
