"""Typed repositories over the shared keyed namespace.

Key families::

    admin                       administrator identity
    property_counter            last assigned property id
    stats                       LedgerStats record
    property:<id>               Property record
    ownership:<id>:<owner>      OwnershipShare record
    user_properties:<owner>     ordered property ids an owner has held
    issued:<id>                 shares sold by purchase for a property
"""

from typing import Any

from share_ledger.exceptions import StorageError
from share_ledger.models import LedgerStats, OwnershipShare, Property
from share_ledger.sinks.serialization import to_dict_fast
from share_ledger.store.keyed import KeyedStore

ADMIN_KEY = "admin"
COUNTER_KEY = "property_counter"
STATS_KEY = "stats"


def property_key(property_id: int) -> str:
    return f"property:{property_id}"


def ownership_key(property_id: int, owner: str) -> str:
    return f"ownership:{property_id}:{owner}"


def index_key(owner: str) -> str:
    return f"user_properties:{owner}"


def issued_key(property_id: int) -> str:
    return f"issued:{property_id}"


def _load(record_type: type, key: str, data: Any) -> Any:
    try:
        return record_type(**data)
    except TypeError as exc:
        raise StorageError(f"Malformed {record_type.__name__} record at {key!r}: {exc}") from exc


class LedgerStateRepository:
    """Administrator identity and property id counter."""

    def __init__(self, store: KeyedStore) -> None:
        self.store = store

    def is_initialized(self) -> bool:
        return self.store.has(ADMIN_KEY)

    def get_admin(self) -> str | None:
        return self.store.get(ADMIN_KEY)

    def set_admin(self, admin: str) -> None:
        self.store.set(ADMIN_KEY, admin)

    def get_counter(self) -> int:
        return self.store.get(COUNTER_KEY) or 0

    def set_counter(self, value: int) -> None:
        self.store.set(COUNTER_KEY, value)


class PropertyRepository:
    """Property records keyed by id."""

    def __init__(self, store: KeyedStore) -> None:
        self.store = store

    def get(self, property_id: int) -> Property | None:
        key = property_key(property_id)
        data = self.store.get(key)
        return _load(Property, key, data) if data is not None else None

    def save(self, prop: Property) -> None:
        self.store.set(property_key(prop.property_id), to_dict_fast(prop))

    def exists(self, property_id: int) -> bool:
        return self.store.has(property_key(property_id))


class OwnershipRepository:
    """OwnershipShare records keyed by (property id, owner)."""

    def __init__(self, store: KeyedStore) -> None:
        self.store = store

    def get(self, property_id: int, owner: str) -> OwnershipShare | None:
        key = ownership_key(property_id, owner)
        data = self.store.get(key)
        return _load(OwnershipShare, key, data) if data is not None else None

    def save(self, share: OwnershipShare) -> None:
        self.store.set(ownership_key(share.property_id, share.owner), to_dict_fast(share))


class IndexRepository:
    """Per-owner ordered list of property ids."""

    def __init__(self, store: KeyedStore) -> None:
        self.store = store

    def get(self, owner: str) -> list[int]:
        return list(self.store.get(index_key(owner)) or [])

    def append(self, owner: str, property_id: int) -> None:
        ids = self.get(owner)
        ids.append(property_id)
        self.store.set(index_key(owner), ids)

    def remove(self, owner: str, property_id: int) -> None:
        ids = [pid for pid in self.get(owner) if pid != property_id]
        self.store.set(index_key(owner), ids)


class SupplyRepository:
    """Shares issued by purchase, per property."""

    def __init__(self, store: KeyedStore) -> None:
        self.store = store

    def get_issued(self, property_id: int) -> int:
        return self.store.get(issued_key(property_id)) or 0

    def add_issued(self, property_id: int, shares: int) -> None:
        self.store.set(issued_key(property_id), self.get_issued(property_id) + shares)


class StatsRepository:
    """The single LedgerStats record."""

    def __init__(self, store: KeyedStore) -> None:
        self.store = store

    def get(self) -> LedgerStats:
        data = self.store.get(STATS_KEY)
        return _load(LedgerStats, STATS_KEY, data) if data is not None else LedgerStats()

    def save(self, stats: LedgerStats) -> None:
        self.store.set(STATS_KEY, to_dict_fast(stats))


class Repositories:
    """All typed repositories sharing one store."""

    def __init__(self, store: KeyedStore) -> None:
        self.store = store
        self.state = LedgerStateRepository(store)
        self.properties = PropertyRepository(store)
        self.ownership = OwnershipRepository(store)
        self.index = IndexRepository(store)
        self.supply = SupplyRepository(store)
        self.stats = StatsRepository(store)
