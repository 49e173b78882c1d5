"""
Innovation Registry Module

This module implements the InnovationRegistry class, the ledger of
structural mutations shared by every genome of a run.

Classes:
    Innovation:         A single ledger entry
    InnovationRegistry: Global, append-only ledger of innovation numbers
"""

import logging
import threading
from typing import NamedTuple

logger = logging.getLogger(__name__)

class Innovation(NamedTuple):
    """
    A ledger entry: the connection 'source' => 'destination' was first
    created when the ledger held 'order' entries, so 'order' is both its
    position in the ledger and its innovation number.
    """
    order      : int
    source     : int
    destination: int

class InnovationRegistry:
    """
    Tracks structural changes globally across all genomes.
    Ensures that the same connection, identified by its endpoints, gets the
    same innovation number whenever and in whichever genome it is created.

    One registry serves a whole run: use 'InnovationRegistry.shared()' to get
    the process-wide instance, which is created the first time it is needed
    and never reset. A run resumed from a saved ledger installs it with
    'InnovationRegistry.restore_shared(records)' before any genome is mutated.
    Separate instances ('from_list') are meant for tests and for tools
    inspecting a ledger.

    'register' is safe to call from several threads: the lookup and the
    (possible) append happen under one lock, so two threads discovering the
    same connection simultaneously receive the same number.

    Public Properties:
        records: copy of the ledger, in creation order

    Public Methods:
        register(source, destination): Get (or assign) the innovation number for a connection
        lookup(source, destination):   Get the innovation number for a connection, if assigned
        to_list():                     Convert the ledger to a list of dictionaries

    Class Methods:
        shared():                The process-wide registry
        from_list(records):      Rebuild a registry from the output of 'to_list()'
        restore_shared(records): Load a saved ledger into the empty process-wide registry
    """

    _shared      = None
    _shared_lock = threading.Lock()

    def __init__(self):
        self._records: list[Innovation]            = []
        self._index  : dict[tuple[int, int], int]  = {}   # (source, destination) => innovation number
        self._lock   = threading.Lock()

    @classmethod
    def shared(cls) -> 'InnovationRegistry':
        """
        Get the process-wide registry, creating it on first use.
        """
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            return cls._shared

    @property
    def records(self) -> list[Innovation]:
        with self._lock:
            return list(self._records)

    def register(self, source: int, destination: int) -> int:
        """
        Get innovation number for a connection, identified by its endpoints.
        Returns existing innovation number if this connection was created
        before, otherwise assigns a new innovation number.

        Parameters:
            source:      node ID for the 'from' end of the connection
            destination: node ID for the 'to'   end of the connection

        Returns:
            connection ID (a.k.a. innovation number)
        """
        key = (source, destination)
        with self._lock:
            innovation = self._index.get(key)

            # This is a new connection
            if innovation is None:
                innovation = len(self._records)
                self._records.append(Innovation(innovation, source, destination))
                self._index[key] = innovation
                logger.debug("registered innovation %d for %d -> %d", innovation, source, destination)

            return innovation

    def lookup(self, source: int, destination: int) -> int | None:
        """
        Get the innovation number of a connection without registering it.

        Returns:
            the innovation number, or None if the connection was never registered
        """
        with self._lock:
            return self._index.get((source, destination))

    def to_list(self) -> list[dict]:
        """
        Convert the ledger to a list of dictionaries, in creation order:
            [{"order": 0, "source": 0, "destination": 126}, ...]
        """
        return [record._asdict() for record in self.records]

    @classmethod
    def from_list(cls, records: list[dict]) -> 'InnovationRegistry':
        """
        Rebuild a registry from a saved ledger.

        Parameters:
            records: the output of 'to_list()'

        Returns:
            a new registry holding exactly the given records

        Raises:
            ValueError: if the orders are not 0, 1, 2... in sequence, or a connection is repeated
            KeyError:   if a record misses one of its fields
        """
        registry = cls()
        for position, data in enumerate(records):
            record = Innovation(int(data["order"]), int(data["source"]), int(data["destination"]))
            if record.order != position:
                raise ValueError(f"Innovation record at position {position} has order {record.order}")

            key = (record.source, record.destination)
            if key in registry._index:
                raise ValueError(f"Connection {record.source} -> {record.destination} registered twice")

            registry._records.append(record)
            registry._index[key] = record.order
        return registry

    @classmethod
    def restore_shared(cls, records: list[dict]) -> 'InnovationRegistry':
        """
        Load a saved ledger into the process-wide registry, so that engines
        created with the default registry continue its numbering.

        The records are copied into the existing instance (when there is one),
        so references already handed out by 'shared()' see the restored ledger.

        Parameters:
            records: the output of 'to_list()'

        Returns:
            the process-wide registry

        Raises:
            ValueError: if the process-wide registry already holds records, or 'records' is malformed
            KeyError:   if a record misses one of its fields
        """
        restored = cls.from_list(records)
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls()
            shared = cls._shared
            with shared._lock:
                if shared._records:
                    raise ValueError(f"Process-wide registry already holds {len(shared._records)} records")
                shared._records = restored._records
                shared._index   = restored._index
            logger.debug("restored %d innovations into the process-wide registry", len(restored._records))
            return shared

    def __len__(self):
        with self._lock:
            return len(self._records)

    def __repr__(self):
        return f"InnovationRegistry(records={len(self)})"
