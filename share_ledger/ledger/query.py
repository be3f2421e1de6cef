"""Read-only accessors over the catalog and the ownership ledger."""

from share_ledger.ledger.catalog import PropertyCatalog
from share_ledger.ledger.context import LedgerContext
from share_ledger.ledger.ownership import OwnershipLedger
from share_ledger.ledger.stats import StatsAggregator
from share_ledger.models import LedgerStats, OwnershipShare, Property


class QueryFacade:
    """Lookups, paginated listing and per-owner aggregates."""

    def __init__(
        self,
        context: LedgerContext,
        catalog: PropertyCatalog,
        ownership: OwnershipLedger,
        stats: StatsAggregator,
    ) -> None:
        self.repos = context.repos
        self.catalog = catalog
        self.ownership = ownership
        self.stats = stats

    def get_property(self, property_id: int) -> Property:
        return self.catalog.get(property_id)

    def get_ownership(self, property_id: int, owner: str) -> OwnershipShare:
        return self.ownership.get_balance(property_id, owner)

    def user_properties(self, owner: str) -> list[int]:
        """Property ids in the owner's index, in first-acquired order."""
        return self.repos.index.get(owner)

    def total_shares_owned(self, owner: str) -> int:
        """Sum of the owner's balances across every indexed property."""
        return sum(
            self.ownership.get_balance(property_id, owner).shares
            for property_id in self.user_properties(owner)
        )

    def portfolio(self, owner: str) -> list[OwnershipShare]:
        return [
            self.ownership.get_balance(property_id, owner)
            for property_id in self.user_properties(owner)
        ]

    def list_properties(self, start_index: int, limit: int) -> list[Property]:
        return self.catalog.list(start_index, limit)

    def available_shares(self, property_id: int) -> int:
        """Shares of a property not yet sold by purchase."""
        prop = self.catalog.get(property_id)
        return max(prop.total_shares - self.repos.supply.get_issued(property_id), 0)

    def get_stats(self) -> LedgerStats:
        return self.stats.get()
