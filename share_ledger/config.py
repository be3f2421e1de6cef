"""Configuration management for share-ledger."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from share_ledger.exceptions import ConfigurationError

DEFAULT_LEASE_WINDOW = 10000


@dataclass
class LedgerConfig:
    """Behaviour switches for the ownership ledger core."""

    lease_window: int = DEFAULT_LEASE_WINDOW
    enforce_share_supply: bool = True  # False reproduces the uncapped reference ledger
    prune_zero_balances: bool = False  # True drops emptied holdings from owner indexes

    def __post_init__(self) -> None:
        if self.lease_window <= 0:
            raise ConfigurationError(f"lease_window must be positive, got {self.lease_window}")


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "shareledger"
    user: str = "postgres"
    password: str = "postgres"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class OutputConfig:
    """Event journal output configuration."""

    journal_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class EventsConfig:
    """Ledger event envelope configuration."""

    topic_prefix: str = "dev.ledger"
    source: str = "share-ledger"

    @property
    def properties_topic(self) -> str:
        return f"{self.topic_prefix}.properties"

    @property
    def shares_topic(self) -> str:
        return f"{self.topic_prefix}.shares"


@dataclass
class ShareLedgerConfig:
    """Main configuration for share-ledger."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    events: EventsConfig = field(default_factory=EventsConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"
    log_file: Path | None = None

    @classmethod
    def from_env(cls) -> "ShareLedgerConfig":
        """Create config from environment variables."""
        ledger = LedgerConfig(
            lease_window=_env_int("LEDGER_LEASE_WINDOW", DEFAULT_LEASE_WINDOW),
            enforce_share_supply=_env_bool("LEDGER_ENFORCE_SUPPLY", True),
            prune_zero_balances=_env_bool("LEDGER_PRUNE_ZERO_BALANCES", False),
        )

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        postgres = PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=_env_int("POSTGRES_PORT", 5432),
            database=os.getenv("POSTGRES_DB", "shareledger"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
        )

        output = OutputConfig(
            journal_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=_env_bool("PRETTY_JSON", False),
        )

        events = EventsConfig(
            topic_prefix=os.getenv("EVENT_TOPIC_PREFIX", "dev.ledger"),
        )

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            ledger=ledger,
            kafka=kafka,
            postgres=postgres,
            output=output,
            events=events,
            seed=_env_int("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
            log_file=Path(os.environ["LOG_FILE"]) if os.getenv("LOG_FILE") else None,
        )


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")
