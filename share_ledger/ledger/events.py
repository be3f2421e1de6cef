"""Publishing of ledger events to output sinks."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, Protocol

from share_ledger.config import EventsConfig
from share_ledger.models import Event, LedgerEventType

logger = logging.getLogger(__name__)

PROPERTY_EVENTS = {
    LedgerEventType.LEDGER_INITIALIZED,
    LedgerEventType.PROPERTY_REGISTERED,
    LedgerEventType.PROPERTY_VERIFIED,
}


class Sink(Protocol):
    def write_batch(self, topic: str, records: list[Any]) -> None:
        ...

    def close(self) -> None:
        ...


class EventPublisher:
    """Wraps mutations in Event envelopes and fans them out to sinks."""

    def __init__(self, sinks: Iterable[Sink] = (), config: EventsConfig | None = None) -> None:
        self.sinks = list(sinks)
        self.config = config or EventsConfig()
        self.published = 0

    def add_sink(self, sink: Sink) -> None:
        self.sinks.append(sink)

    def topic_for(self, event_type: LedgerEventType) -> str:
        if event_type in PROPERTY_EVENTS:
            return self.config.properties_topic
        return self.config.shares_topic

    def build(
        self,
        event_type: LedgerEventType,
        subject: str,
        data: dict,
        timestamp: int,
    ) -> Event:
        return Event(
            event_id=uuid.uuid4().hex,
            event_type=event_type.value,
            event_time=datetime.fromtimestamp(timestamp, tz=timezone.utc),
            source=self.config.source,
            subject=subject,
            data=data,
        )

    def publish(
        self,
        event_type: LedgerEventType,
        subject: str,
        data: dict,
        timestamp: int,
    ) -> Event:
        """Build an event and write it to every sink."""
        event = self.build(event_type, subject, data, timestamp)
        topic = self.topic_for(event_type)
        for sink in self.sinks:
            sink.write_batch(topic, [event])
        self.published += 1
        logger.debug("Published %s for %s to %d sinks", event.event_type, subject, len(self.sinks))
        return event

    def close(self) -> None:
        """Close every sink, then re-raise the first close failure."""
        errors: list[Exception] = []
        for sink in self.sinks:
            try:
                sink.close()
            except Exception as exc:
                logger.exception("Closing sink %r failed", sink)
                errors.append(exc)
        if errors:
            raise errors[0]
