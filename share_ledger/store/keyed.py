"""Keyed store abstraction and the in-memory implementation."""

import copy
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator


class KeyedStore(ABC):
    """Durable key-value store holding JSON-compatible values.

    Mutating ledger operations run inside :meth:`transaction`; a raised
    exception discards every write made in the block.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or None."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def has(self, key: str) -> bool:
        """Return True when ``key`` holds a value."""

    @abstractmethod
    def extend_lease(self, window: int) -> None:
        """Keep every record alive for at least ``window`` more seconds."""

    @abstractmethod
    @contextmanager
    def transaction(self) -> Iterator[None]:
        """All-or-nothing block of reads and writes."""


class InMemoryKeyedStore(KeyedStore):
    """Dict-backed store for tests, scenarios and single-process use.

    Values are deep-copied on the way in and out so callers never share
    mutable state with the store.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._in_transaction = False
        self.lease_renewals = 0
        self.lease_window: int | None = None

    def get(self, key: str) -> Any | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def has(self, key: str) -> bool:
        return key in self._data

    def keys(self, prefix: str = "") -> list[str]:
        return sorted(k for k in self._data if k.startswith(prefix))

    def extend_lease(self, window: int) -> None:
        self.lease_renewals += 1
        self.lease_window = window

    @contextmanager
    def transaction(self) -> Iterator[None]:
        if self._in_transaction:
            # Nested blocks join the outermost transaction
            yield
            return

        # Stored values are replaced, never mutated in place, so a shallow
        # copy of the key space is a complete snapshot.
        snapshot = dict(self._data)
        lease = (self.lease_renewals, self.lease_window)
        self._in_transaction = True
        try:
            yield
        except BaseException:
            self._data = snapshot
            self.lease_renewals, self.lease_window = lease
            raise
        finally:
            self._in_transaction = False

    def __len__(self) -> int:
        return len(self._data)
