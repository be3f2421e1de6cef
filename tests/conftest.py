"""Pytest configuration and fixtures."""

import pytest

from share_ledger.auth import IdentityAuthorizer
from share_ledger.clock import ManualClock
from share_ledger.config import LedgerConfig
from share_ledger.ledger import RealEstateLedger
from share_ledger.store.keyed import InMemoryKeyedStore

ADMIN = "GADMIN0000000000000000000000000000000000000000000000000A"
BUYER_A = "GBUYERA000000000000000000000000000000000000000000000000A"
BUYER_B = "GBUYERB000000000000000000000000000000000000000000000000B"
BUYER_C = "GBUYERC000000000000000000000000000000000000000000000000C"


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> ManualClock:
    """Ledger clock starting at a fixed timestamp."""
    return ManualClock(start=1_000)


@pytest.fixture
def authorizer() -> IdentityAuthorizer:
    """Authorizer where the admin and all buyers have proven control."""
    return IdentityAuthorizer([ADMIN, BUYER_A, BUYER_B, BUYER_C])


@pytest.fixture
def store() -> InMemoryKeyedStore:
    """Fresh in-memory store for each test."""
    return InMemoryKeyedStore()


@pytest.fixture
def ledger_config() -> LedgerConfig:
    return LedgerConfig()


@pytest.fixture
def ledger(
    store: InMemoryKeyedStore,
    authorizer: IdentityAuthorizer,
    clock: ManualClock,
    ledger_config: LedgerConfig,
) -> RealEstateLedger:
    """Initialized ledger with ADMIN as administrator."""
    ledger = RealEstateLedger(store=store, authorizer=authorizer, clock=clock, config=ledger_config)
    ledger.initialize(ADMIN)
    return ledger


def register(ledger: RealEstateLedger, title: str = "X", total_shares: int = 100) -> int:
    """Register a property with sensible defaults."""
    return ledger.register_property(
        title=title,
        location="1 Main Street, Springfield",
        description="Two-bedroom apartment",
        total_shares=total_shares,
        price_per_share=1,
        image_url="https://images.example.com/x.jpg",
    )


@pytest.fixture
def verified_property(ledger: RealEstateLedger) -> int:
    """Id of a verified property with 100 shares."""
    property_id = register(ledger)
    ledger.verify_property(property_id)
    return property_id
