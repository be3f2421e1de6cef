"""Tests for the in-memory keyed store and typed repositories."""

import pytest

from share_ledger.exceptions import StorageError
from share_ledger.models import LedgerStats, OwnershipShare, Property
from share_ledger.store import InMemoryKeyedStore, Repositories
from share_ledger.store.repositories import index_key, ownership_key, property_key


@pytest.fixture
def repos(store: InMemoryKeyedStore) -> Repositories:
    return Repositories(store)


def make_property(property_id: int = 1) -> Property:
    return Property(
        property_id=property_id,
        title="Harbour Loft",
        location="1 Quay Street",
        description="Converted warehouse loft",
        image_url="",
        total_shares=500,
        price_per_share=200,
        registered_at=1_000,
    )


class TestInMemoryKeyedStore:
    """Tests for InMemoryKeyedStore."""

    def test_get_missing(self, store: InMemoryKeyedStore) -> None:
        assert store.get("missing") is None
        assert store.has("missing") is False

    def test_set_get(self, store: InMemoryKeyedStore) -> None:
        store.set("k", {"a": 1})

        assert store.has("k") is True
        assert store.get("k") == {"a": 1}
        assert len(store) == 1

    def test_values_are_copied(self, store: InMemoryKeyedStore) -> None:
        value = {"ids": [1]}
        store.set("k", value)
        value["ids"].append(2)
        store.get("k")["ids"].append(3)

        assert store.get("k") == {"ids": [1]}

    def test_keys_by_prefix(self, store: InMemoryKeyedStore) -> None:
        store.set("property:2", {})
        store.set("property:1", {})
        store.set("stats", {})

        assert store.keys("property:") == ["property:1", "property:2"]

    def test_transaction_commits(self, store: InMemoryKeyedStore) -> None:
        with store.transaction():
            store.set("k", 1)

        assert store.get("k") == 1

    def test_transaction_rolls_back(self, store: InMemoryKeyedStore) -> None:
        store.set("k", 1)

        with pytest.raises(ValueError):
            with store.transaction():
                store.set("k", 2)
                store.set("other", 3)
                store.extend_lease(10)
                raise ValueError("boom")

        assert store.get("k") == 1
        assert store.has("other") is False
        assert store.lease_renewals == 0

    def test_nested_transaction_joins_outer(self, store: InMemoryKeyedStore) -> None:
        with pytest.raises(ValueError):
            with store.transaction():
                with store.transaction():
                    store.set("inner", 1)
                raise ValueError("outer fails")

        assert store.has("inner") is False

    def test_extend_lease(self, store: InMemoryKeyedStore) -> None:
        store.extend_lease(10000)
        store.extend_lease(10000)

        assert store.lease_renewals == 2
        assert store.lease_window == 10000


class TestRepositories:
    """Tests for typed repositories."""

    def test_state(self, repos: Repositories) -> None:
        assert repos.state.is_initialized() is False
        assert repos.state.get_admin() is None
        assert repos.state.get_counter() == 0

        repos.state.set_admin("GADMIN")
        repos.state.set_counter(3)

        assert repos.state.is_initialized() is True
        assert repos.state.get_admin() == "GADMIN"
        assert repos.state.get_counter() == 3

    def test_property_roundtrip(self, repos: Repositories, store: InMemoryKeyedStore) -> None:
        prop = make_property(7)
        repos.properties.save(prop)

        assert repos.properties.exists(7) is True
        assert repos.properties.get(7) == prop
        assert store.get(property_key(7))["title"] == "Harbour Loft"
        assert repos.properties.get(8) is None

    def test_ownership(self, repos: Repositories, store: InMemoryKeyedStore) -> None:
        share = OwnershipShare(property_id=1, owner="GA", shares=10, last_changed_at=5)
        repos.ownership.save(share)

        assert repos.ownership.get(1, "GA") == share
        assert repos.ownership.get(1, "GB") is None
        assert store.has(ownership_key(1, "GA"))

    def test_index_append_and_remove(self, repos: Repositories, store: InMemoryKeyedStore) -> None:
        assert repos.index.get("GA") == []

        repos.index.append("GA", 3)
        repos.index.append("GA", 1)
        assert repos.index.get("GA") == [3, 1]
        assert store.get(index_key("GA")) == [3, 1]

        repos.index.remove("GA", 3)
        assert repos.index.get("GA") == [1]

    def test_supply(self, repos: Repositories) -> None:
        assert repos.supply.get_issued(1) == 0

        repos.supply.add_issued(1, 30)
        repos.supply.add_issued(1, 5)

        assert repos.supply.get_issued(1) == 35
        assert repos.supply.get_issued(2) == 0

    def test_stats_default_and_save(self, repos: Repositories) -> None:
        assert repos.stats.get() == LedgerStats()

        repos.stats.save(LedgerStats(total_properties=2, transactions=5))

        assert repos.stats.get().total_properties == 2
        assert repos.stats.get().transactions == 5

    def test_malformed_record(self, repos: Repositories, store: InMemoryKeyedStore) -> None:
        store.set(property_key(1), {"property_id": 1, "unexpected": True})

        with pytest.raises(StorageError, match="Malformed Property"):
            repos.properties.get(1)
