"""Share purchases, transfers and per-owner balances."""

import logging

from share_ledger.exceptions import (
    ExceedsSupplyError,
    InsufficientSharesError,
    NoBalanceError,
    NotVerifiedError,
    SelfTransferError,
)
from share_ledger.ledger.catalog import PropertyCatalog
from share_ledger.ledger.context import LedgerContext, validate_balance, validate_share_amount
from share_ledger.ledger.stats import StatsAggregator
from share_ledger.models import OwnershipShare

logger = logging.getLogger(__name__)


class OwnershipLedger:
    """Per-(property, owner) share balances and each owner's property index.

    Every method validates all of its inputs before the first write, so a
    rejected call leaves the store untouched even outside a transaction.
    """

    def __init__(
        self,
        context: LedgerContext,
        catalog: PropertyCatalog,
        stats: StatsAggregator,
    ) -> None:
        self.context = context
        self.repos = context.repos
        self.catalog = catalog
        self.stats = stats

    def purchase(self, property_id: int, shares: int, buyer: str) -> OwnershipShare:
        """Add ``shares`` of a verified property to the buyer's balance.

        Returns
        -------
        OwnershipShare
            The buyer's updated holding.
        """
        self.context.authorizer.require_authorization(buyer)
        validate_share_amount(shares)

        prop = self.catalog.get(property_id)
        if not prop.verified:
            raise NotVerifiedError(property_id)

        issued = self.repos.supply.get_issued(property_id)
        if self.context.config.enforce_share_supply and issued + shares > prop.total_shares:
            raise ExceedsSupplyError(property_id, max(prop.total_shares - issued, 0), shares)
        validate_balance(self.get_balance(property_id, buyer).shares + shares)

        holding, is_new_owner = self._credit(property_id, buyer, shares)
        self.repos.supply.add_issued(property_id, shares)
        self.stats.shares_moved(new_owner=is_new_owner)
        return holding

    def transfer(
        self,
        property_id: int,
        sender: str,
        recipient: str,
        shares: int,
    ) -> tuple[OwnershipShare, OwnershipShare]:
        """Move ``shares`` from sender to recipient.

        The sender keeps a zero-balance record when fully transferred out.

        Returns
        -------
        tuple[OwnershipShare, OwnershipShare]
            Updated sender and recipient holdings.
        """
        self.context.authorizer.require_authorization(sender)
        validate_share_amount(shares)
        if sender == recipient:
            raise SelfTransferError(f"{sender} cannot transfer shares to itself")

        source = self.repos.ownership.get(property_id, sender)
        if source is None:
            raise NoBalanceError(property_id, sender)
        if source.shares < shares:
            raise InsufficientSharesError(property_id, sender, source.shares, shares)
        validate_balance(self.get_balance(property_id, recipient).shares + shares)

        now = self.context.clock.now()
        source.shares -= shares
        source.last_changed_at = now
        self.repos.ownership.save(source)
        if source.is_empty and self.context.config.prune_zero_balances:
            self.repos.index.remove(sender, property_id)

        holding, is_new_owner = self._credit(property_id, recipient, shares)
        self.stats.shares_moved(new_owner=is_new_owner)
        return source, holding

    def get_balance(self, property_id: int, owner: str) -> OwnershipShare:
        """Holding of ``owner``; an empty record when none exists."""
        holding = self.repos.ownership.get(property_id, owner)
        if holding is None:
            return OwnershipShare(property_id=property_id, owner=owner, shares=0, last_changed_at=0)
        return holding

    def _credit(self, property_id: int, owner: str, shares: int) -> tuple[OwnershipShare, bool]:
        existing = self.repos.ownership.get(property_id, owner)
        is_new_owner = existing is None

        holding = OwnershipShare(
            property_id=property_id,
            owner=owner,
            shares=shares + (0 if existing is None else existing.shares),
            last_changed_at=self.context.clock.now(),
        )
        self.repos.ownership.save(holding)

        if is_new_owner:
            self.repos.index.append(owner, property_id)
        elif self.context.config.prune_zero_balances and property_id not in self.repos.index.get(owner):
            # Holding was pruned when it emptied; re-list it without a new owner event
            self.repos.index.append(owner, property_id)

        return holding, is_new_owner
