"""Tests for domain models."""

from datetime import datetime, timezone

from share_ledger.models import (
    Event,
    LedgerEventType,
    LedgerStats,
    OwnershipShare,
    Property,
    PropertyStatus,
)


def make_property(**overrides: object) -> Property:
    fields = {
        "property_id": 1,
        "title": "Loft on Main Street",
        "location": "12 Main Street, Springfield, IL",
        "description": "Converted warehouse loft.",
        "image_url": "",
        "total_shares": 1000,
        "price_per_share": 250,
        "registered_at": 1_700_000_000,
    }
    fields.update(overrides)
    return Property(**fields)  # type: ignore[arg-type]


class TestProperty:
    """Tests for Property model."""

    def test_defaults_unverified(self) -> None:
        prop = make_property()

        assert prop.verified is False
        assert prop.status == PropertyStatus.REGISTERED

    def test_verified_status(self) -> None:
        assert make_property(verified=True).status == PropertyStatus.VERIFIED

    def test_valuation(self) -> None:
        assert make_property(total_shares=400, price_per_share=25).valuation == 10_000


class TestOwnershipShare:
    """Tests for OwnershipShare model."""

    def test_defaults(self) -> None:
        holding = OwnershipShare(property_id=1, owner="GA")

        assert holding.shares == 0
        assert holding.last_changed_at == 0
        assert holding.is_empty

    def test_not_empty(self) -> None:
        assert not OwnershipShare(property_id=1, owner="GA", shares=3).is_empty


class TestLedgerStats:
    """Tests for LedgerStats model."""

    def test_zeroed(self) -> None:
        assert LedgerStats() == LedgerStats(0, 0, 0, 0)


class TestEvent:
    """Tests for Event envelope."""

    def test_event_creation(self) -> None:
        event = Event(
            event_id="abc",
            event_type=LedgerEventType.PROPERTY_VERIFIED.value,
            event_time=datetime(2024, 1, 1, tzinfo=timezone.utc),
            source="share-ledger",
            subject="1",
            data={"property_id": 1},
        )

        assert event.event_type == "property.verified"
        assert event.metadata == {}
