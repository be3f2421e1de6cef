"""Tests for shared serialization utilities."""

import json
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal

from share_ledger.models import Event, LedgerEventType, OwnershipShare, PropertyStatus
from share_ledger.sinks.serialization import encode_json, serialize_value, to_dict, to_dict_fast


@dataclass
class _SampleData:
    name: str
    amount: Decimal
    created_at: datetime


class TestToDict:
    """Tests for to_dict function."""

    def test_dataclass(self) -> None:
        obj = _SampleData(name="test", amount=Decimal("100.50"), created_at=datetime(2024, 1, 1))
        result = to_dict(obj)
        assert result["name"] == "test"
        assert result["amount"] == "100.50"
        assert result["created_at"] == "2024-01-01T00:00:00"

    def test_dict_is_serialized(self) -> None:
        assert to_dict({"status": PropertyStatus.VERIFIED}) == {"status": "VERIFIED"}

    def test_other_type(self) -> None:
        assert to_dict(42) == {"value": "42"}

    def test_flat_record(self) -> None:
        share = OwnershipShare(property_id=1, owner="GA", shares=10, last_changed_at=5)
        assert to_dict_fast(share) == {
            "property_id": 1,
            "owner": "GA",
            "shares": 10,
            "last_changed_at": 5,
        }

    def test_event_envelope(self) -> None:
        event = Event(
            event_id="e1",
            event_type=LedgerEventType.SHARES_PURCHASED.value,
            event_time=datetime(2024, 1, 1, tzinfo=timezone.utc),
            source="share-ledger",
            subject="1",
            data={"holding": OwnershipShare(property_id=1, owner="GA", shares=3)},
        )
        result = to_dict(event)
        assert result["event_time"] == "2024-01-01T00:00:00+00:00"
        assert result["data"]["holding"]["shares"] == 3
        assert result["metadata"] == {}


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_enum(self) -> None:
        assert serialize_value(LedgerEventType.SHARES_PURCHASED) == "shares.purchased"

    def test_date(self) -> None:
        assert serialize_value(date(2024, 6, 15)) == "2024-06-15"

    def test_nested(self) -> None:
        data = {"ids": (1, 2), "info": {"at": datetime(2024, 1, 1)}}
        result = serialize_value(data)
        assert result["ids"] == [1, 2]
        assert result["info"]["at"] == "2024-01-01T00:00:00"

    def test_set_sorted(self) -> None:
        assert serialize_value({3, 1, 2}) == [1, 2, 3]

    def test_int_keys_stringified(self) -> None:
        assert serialize_value({1: "a"}) == {"1": "a"}

    def test_scalars_passthrough(self) -> None:
        assert serialize_value(5) == 5
        assert serialize_value(True) is True
        assert serialize_value(None) is None


class TestEncodeJson:
    """Tests for encode_json function."""

    def test_compact(self) -> None:
        assert encode_json({"id": 1, "owner": "GA"}) == '{"id": 1, "owner": "GA"}'

    def test_pretty(self) -> None:
        assert encode_json({"id": 1}, pretty=True) == '{\n  "id": 1\n}'

    def test_non_ascii_kept(self) -> None:
        text = encode_json({"location": "São Paulo"})
        assert "São Paulo" in text
        assert json.loads(text)["location"] == "São Paulo"
