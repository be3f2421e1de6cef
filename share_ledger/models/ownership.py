"""Ownership and statistics models."""

from dataclasses import dataclass


@dataclass
class OwnershipShare:
    """Balance of shares one identity holds in one property.

    Records are never deleted; a fully transferred-out holding keeps a
    zero balance.
    """

    property_id: int
    owner: str
    shares: int = 0
    last_changed_at: int = 0  # Ledger clock seconds, 0 when never held

    @property
    def is_empty(self) -> bool:
        return self.shares == 0


@dataclass
class LedgerStats:
    """Aggregate counters maintained alongside every mutation."""

    total_properties: int = 0
    verified_properties: int = 0
    owner_events: int = 0  # First-time (property, owner) pairings, not distinct identities
    transactions: int = 0
