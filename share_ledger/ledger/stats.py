"""Aggregate counters updated alongside catalog and ledger mutations."""

from share_ledger.models import LedgerStats
from share_ledger.store.repositories import StatsRepository


class StatsAggregator:
    """Incremental maintenance of the LedgerStats record.

    Counters are only ever bumped inside the transaction of the mutation
    they describe; nothing here rescans the ledger.
    """

    def __init__(self, repository: StatsRepository) -> None:
        self.repository = repository

    def get(self) -> LedgerStats:
        """Current counters; the zero record before initialization."""
        return self.repository.get()

    def reset(self) -> LedgerStats:
        stats = LedgerStats()
        self.repository.save(stats)
        return stats

    def property_registered(self) -> None:
        stats = self.repository.get()
        stats.total_properties += 1
        self.repository.save(stats)

    def property_verified(self) -> None:
        stats = self.repository.get()
        stats.verified_properties += 1
        self.repository.save(stats)

    def shares_moved(self, new_owner: bool) -> None:
        """Count one purchase or transfer, plus an owner event for a first holding."""
        stats = self.repository.get()
        if new_owner:
            stats.owner_events += 1
        stats.transactions += 1
        self.repository.save(stats)
