"""Ownership ledger core: catalog, balances, statistics and queries."""

from share_ledger.ledger.catalog import PropertyCatalog
from share_ledger.ledger.context import LedgerContext
from share_ledger.ledger.events import EventPublisher
from share_ledger.ledger.ownership import OwnershipLedger
from share_ledger.ledger.query import QueryFacade
from share_ledger.ledger.service import RealEstateLedger
from share_ledger.ledger.stats import StatsAggregator

__all__ = [
    "EventPublisher",
    "LedgerContext",
    "OwnershipLedger",
    "PropertyCatalog",
    "QueryFacade",
    "RealEstateLedger",
    "StatsAggregator",
]
