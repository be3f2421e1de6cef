"""Console sink for watching ledger events during development."""

from collections import Counter
from typing import Any

from share_ledger.models import Event
from share_ledger.sinks.serialization import encode_json


class ConsoleSink:
    """Print ledger events to stdout and tally them by topic and event type."""

    def __init__(self, pretty: bool = True, max_records: int | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.pretty = pretty
        self.max_records = max_records
        self.topic_counts: Counter[str] = Counter()
        self.event_counts: Counter[str] = Counter()

    def write_batch(self, topic: str, records: list[Any]) -> None:
        shown = records[: self.max_records] if self.max_records else records

        for record in shown:
            if self.pretty:
                print(f"[{topic}]")
                print(encode_json(record, pretty=True))
            else:
                print(f"[{topic}] {encode_json(record)}")

        hidden = len(records) - len(shown)
        if hidden:
            print(f"... and {hidden} more records")

        self.topic_counts[topic] += len(records)
        for record in records:
            if isinstance(record, Event):
                self.event_counts[record.event_type] += 1

    def close(self) -> None:
        """Print per-topic and per-event-type totals."""
        print(f"\n{'=' * 60}")
        print("Ledger Event Summary")
        print("=" * 60)
        for topic, count in self.topic_counts.items():
            print(f"  {topic}: {count} records")
        for event_type, count in sorted(self.event_counts.items()):
            print(f"    {event_type}: {count}")
