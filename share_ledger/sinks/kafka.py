"""Kafka sink publishing ledger events to Kafka topics."""

import logging
from dataclasses import dataclass, field
from typing import Any

from confluent_kafka import Producer

from share_ledger.config import KafkaConfig
from share_ledger.exceptions import SinkError
from share_ledger.models import Event
from share_ledger.sinks.serialization import encode_json

logger = logging.getLogger(__name__)


@dataclass
class ProducerStats:
    """Delivery statistics, overall and per topic."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    by_topic: dict[str, int] = field(default_factory=dict)

    @property
    def success_rate(self) -> float:
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0


class KafkaSink:
    """Publish ledger events as JSON messages.

    Events are keyed by their subject (the property id), so every event
    for one property lands on the same partition in ledger order. The
    event type and source travel as message headers for consumers that
    route without decoding the value.
    """

    def __init__(self, config: KafkaConfig | str, producer: Producer | None = None) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        producer : Producer | None
            Pre-built producer, mainly for tests.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.producer = producer if producer is not None else Producer(config.to_dict())
        self.stats = ProducerStats()

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        if err:
            self.stats.failed += 1
            logger.error("Delivery of ledger event failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    @staticmethod
    def _key_and_headers(record: Any) -> tuple[bytes | None, list[tuple[str, bytes]]]:
        if isinstance(record, Event):
            headers = [
                ("event_type", record.event_type.encode("utf-8")),
                ("source", record.source.encode("utf-8")),
            ]
            return record.subject.encode("utf-8"), headers
        if isinstance(record, dict) and record.get("subject") is not None:
            return str(record["subject"]).encode("utf-8"), []
        return None, []

    def send(self, topic: str, record: Any) -> None:
        """Queue one record for delivery."""
        key, headers = self._key_and_headers(record)
        self.producer.produce(
            topic=topic,
            key=key,
            value=encode_json(record).encode("utf-8"),
            headers=headers or None,
            callback=self._delivery_callback,
        )
        self.stats.sent += 1
        self.stats.by_topic[topic] = self.stats.by_topic.get(topic, 0) + 1
        self.producer.poll(0)

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Send a batch and wait until the broker acknowledged it."""
        logger.debug("Writing batch to %s: %d records", topic, len(records))
        for record in records:
            self.send(topic, record)
        self.flush()

    def flush(self, timeout: float = 30.0) -> None:
        remaining = self.producer.flush(timeout)
        if remaining:
            raise SinkError(f"{remaining} messages still undelivered after {timeout}s")

    def close(self) -> None:
        """Flush and log delivery statistics."""
        self.flush()
        logger.info(
            "Kafka sink closed: sent=%d, delivered=%d, failed=%d, topics=%s",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
            self.stats.by_topic,
        )
