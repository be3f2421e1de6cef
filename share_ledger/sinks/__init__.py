"""Output sinks for ledger events."""

from share_ledger.sinks.console import ConsoleSink
from share_ledger.sinks.json_file import JsonFileSink
from share_ledger.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]
