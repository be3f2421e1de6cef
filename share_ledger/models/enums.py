"""Enumeration types for ledger entities."""

from enum import Enum


class PropertyStatus(str, Enum):
    REGISTERED = "REGISTERED"
    VERIFIED = "VERIFIED"


class LedgerEventType(str, Enum):
    LEDGER_INITIALIZED = "ledger.initialized"
    PROPERTY_REGISTERED = "property.registered"
    PROPERTY_VERIFIED = "property.verified"
    SHARES_PURCHASED = "shares.purchased"
    SHARES_TRANSFERRED = "shares.transferred"
