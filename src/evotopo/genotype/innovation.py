"""
NEAT Innovation Ledger Module

This module implements the InnovationLedger class for the
NEAT (NeuroEvolution of Augmenting Topologies) mutation engine.

Classes:
    InnovationRecord: One structural innovation observed in the population
    InnovationLedger: Population-wide registry of innovation IDs and neuron IDs
"""

import logging
import threading
from itertools import count

logger = logging.getLogger(__name__)

class InnovationRecord:
    """
    A structural innovation, identified by the ordered pair of neuron IDs it involves.

    For a link innovation the pair are the endpoints of the link. For a split
    innovation the pair are the endpoints of the link that was split, and
    'neuron_id' is the ID of the hidden neuron inserted in between.

    Public Attributes:
        from_neuron_id: ID of the source neuron
        to_neuron_id:   ID of the target neuron
        innovation_id:  Sequential ID assigned when the innovation was first observed
        neuron_id:      ID of the hidden neuron created by a split (None for links)
    """

    def __init__(self,
                 from_neuron_id: int,
                 to_neuron_id  : int,
                 innovation_id : int,
                 neuron_id     : int | None = None):
        self.from_neuron_id: int        = from_neuron_id
        self.to_neuron_id  : int        = to_neuron_id
        self.innovation_id : int        = innovation_id
        self.neuron_id     : int | None = neuron_id

    @property
    def is_split(self) -> bool:
        return self.neuron_id is not None

    def __repr__(self):
        return (f"InnovationRecord(from_neuron_id={self.from_neuron_id}, to_neuron_id={self.to_neuron_id}, "
                f"innovation_id={self.innovation_id}, neuron_id={self.neuron_id})")

class InnovationLedger:
    """
    Tracks structural changes across all genomes of a population.

    Ensures the same structural change gets the same innovation ID (for links)
    and the same neuron ID (for neurons created by splitting a link), no matter
    in which genome or at which time it happens again.

    Records are only ever appended. Every lookup-or-insert runs inside a single
    critical section, so the ledger can be shared by concurrent workers.

    Public Methods:
        find_or_create(from_id, to_id):       Innovation ID of a link
        find_or_create_split(from_id, to_id): Record of the neuron splitting a link
        assign_neuron_id():                   Reserve a fresh neuron ID
        reset(first_neuron_id):               Forget every record
    """

    def __init__(self, first_neuron_id: int = 0):
        """
        Parameters:
            first_neuron_id: the first ID handed out for new neurons; IDs below it
                             are taken by the neurons every genome starts with
        """
        self._lock = threading.Lock()
        self.reset(first_neuron_id)

    def reset(self, first_neuron_id: int | None = None) -> None:
        """
        Forget every record and restart the counters.

        Parameters:
            first_neuron_id: new starting point for neuron IDs (keeps the current one if None)
        """
        with self._lock:
            if first_neuron_id is not None:
                self._first_neuron_id = first_neuron_id
            self._next_innovation_id = count(1)
            self._next_neuron_id     = count(self._first_neuron_id)

            self._links : dict[tuple[int, int], InnovationRecord] = {}   # (from, to) -> link record
            self._splits: dict[tuple[int, int], InnovationRecord] = {}   # (from, to) -> split record

    def find_or_create(self, from_id: int, to_id: int) -> int:
        """
        Get the innovation ID for a link, identified by its endpoints.
        Returns the existing ID if this link was created before in any
        genome, otherwise assigns the next ID.

        Parameters:
            from_id: neuron ID for the 'from' end of the link
            to_id:   neuron ID for the 'to'   end of the link

        Returns:
            innovation ID of the link
        """
        with self._lock:
            return self._find_or_create_link(from_id, to_id).innovation_id

    def find_or_create_split(self, from_id: int, to_id: int) -> InnovationRecord:
        """
        Get the record describing the neuron created by splitting link (from_id, to_id).
        If this link has been split before, in any genome, the same record is
        returned; otherwise a new neuron ID and innovation ID are allocated.

        Parameters:
            from_id: neuron ID for the 'from' end of the link being split
            to_id:   neuron ID for the 'to'   end of the link being split

        Returns:
            the split record; its 'neuron_id' is the ID of the new hidden neuron
        """
        key = (from_id, to_id)
        with self._lock:
            record = self._splits.get(key)
            if record is None:
                record = InnovationRecord(from_id, to_id,
                                          next(self._next_innovation_id),
                                          next(self._next_neuron_id))
                self._splits[key] = record
                logger.debug("new split innovation %d: %d=>%d gets neuron %d",
                             record.innovation_id, from_id, to_id, record.neuron_id)
            return record

    def assign_neuron_id(self) -> int:
        with self._lock:
            return next(self._next_neuron_id)

    def _find_or_create_link(self, from_id: int, to_id: int) -> InnovationRecord:
        # Caller must hold the lock
        key = (from_id, to_id)
        record = self._links.get(key)
        if record is None:
            record = InnovationRecord(from_id, to_id, next(self._next_innovation_id))
            self._links[key] = record
            logger.debug("new link innovation %d: %d=>%d", record.innovation_id, from_id, to_id)
        return record

    @property
    def records(self) -> list[InnovationRecord]:
        """All records, link and split ones, in the order their IDs were assigned."""
        with self._lock:
            all_records = list(self._links.values()) + list(self._splits.values())
        return sorted(all_records, key=lambda r: r.innovation_id)

    def __contains__(self, pair) -> bool:
        with self._lock:
            return tuple(pair) in self._links

    def __len__(self) -> int:
        with self._lock:
            return len(self._links) + len(self._splits)
