"""Persistence for ledger state."""

from share_ledger.store.keyed import InMemoryKeyedStore, KeyedStore
from share_ledger.store.repositories import (
    IndexRepository,
    LedgerStateRepository,
    OwnershipRepository,
    PropertyRepository,
    Repositories,
    StatsRepository,
    SupplyRepository,
)

__all__ = [
    "IndexRepository",
    "InMemoryKeyedStore",
    "KeyedStore",
    "LedgerStateRepository",
    "OwnershipRepository",
    "PropertyRepository",
    "Repositories",
    "StatsRepository",
    "SupplyRepository",
]
