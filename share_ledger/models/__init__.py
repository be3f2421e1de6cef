"""Domain models for the ownership ledger."""

from share_ledger.models.base import Event
from share_ledger.models.enums import LedgerEventType, PropertyStatus
from share_ledger.models.ownership import LedgerStats, OwnershipShare
from share_ledger.models.property import Property, PropertyDetails

__all__ = [
    "Event",
    "LedgerEventType",
    "LedgerStats",
    "OwnershipShare",
    "Property",
    "PropertyDetails",
    "PropertyStatus",
]
