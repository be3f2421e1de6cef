"""Fractional ownership ledger for registered real-world properties."""

__version__ = "0.1.0"
