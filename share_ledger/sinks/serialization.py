"""JSON-ready conversion of ledger records and event envelopes.

Store records and sink payloads share this module so a record journaled
by a sink reads exactly like the value kept in the keyed store.
"""

import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_dict_fast(obj: Any) -> dict:
    """Convert a dataclass field by field.

    Nested dataclasses, enums and timestamps are converted through
    :func:`serialize_value`, so no ``asdict`` deep copy is needed.

    Parameters
    ----------
    obj : Any
        A dataclass instance.

    Returns
    -------
    dict
        Serialized dictionary.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def to_dict(obj: Any) -> dict:
    """Convert an event, record or mapping to a JSON-ready dict."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return to_dict_fast(obj)
    if isinstance(obj, Mapping):
        return serialize_value(obj)
    return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict_fast(value)
    if isinstance(value, Mapping):
        return {str(k): serialize_value(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return [serialize_value(v) for v in sorted(value)]
    if isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def encode_json(obj: Any, pretty: bool = False) -> str:
    """Encode one record as a JSON document for console, journal or Kafka output."""
    return json.dumps(to_dict(obj), indent=2 if pretty else None, ensure_ascii=False, default=str)
