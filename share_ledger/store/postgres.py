"""PostgreSQL-backed keyed store using psycopg."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

import psycopg
from psycopg.types.json import Jsonb

from share_ledger.config import PostgresConfig
from share_ledger.exceptions import StorageError
from share_ledger.store.keyed import KeyedStore

logger = logging.getLogger(__name__)

TABLE_NAME = "ledger_state"
LEASE_TABLE_NAME = "ledger_lease"

CREATE_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
    key TEXT PRIMARY KEY,
    value JSONB NOT NULL
)
"""

# One row holds the expiry shared by every record in the state table
CREATE_LEASE_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS {LEASE_TABLE_NAME} (
    id BOOLEAN PRIMARY KEY DEFAULT TRUE CHECK (id),
    expires_at BIGINT NOT NULL
)
"""

UPSERT_SQL = f"""
INSERT INTO {TABLE_NAME} (key, value) VALUES (%s, %s)
ON CONFLICT (key) DO UPDATE SET value = EXCLUDED.value
"""

SELECT_SQL = f"SELECT value FROM {TABLE_NAME} WHERE key = %s"  # noqa: S608

EXISTS_SQL = f"SELECT 1 FROM {TABLE_NAME} WHERE key = %s"  # noqa: S608

EXTEND_LEASE_SQL = f"""
INSERT INTO {LEASE_TABLE_NAME} (id, expires_at)
VALUES (TRUE, EXTRACT(EPOCH FROM now())::bigint + %s)
ON CONFLICT (id) DO UPDATE
SET expires_at = GREATEST({LEASE_TABLE_NAME}.expires_at, EXCLUDED.expires_at)
"""

SELECT_LEASE_SQL = f"SELECT expires_at FROM {LEASE_TABLE_NAME}"  # noqa: S608


class PostgresKeyedStore(KeyedStore):
    """Keyed store persisting ledger records in a JSONB table.

    The lease lives in a one-row side table, so renewing it costs the same
    however many records the ledger holds.

    Parameters
    ----------
    connection : psycopg.Connection
        Open connection in autocommit mode, so that :meth:`transaction`
        blocks map onto real BEGIN/COMMIT pairs. The store owns it and
        closes it on :meth:`close`.
    """

    def __init__(self, connection: psycopg.Connection) -> None:
        self.conn = connection

    @classmethod
    def connect(cls, config: PostgresConfig | str) -> "PostgresKeyedStore":
        """Open a connection from config or a connection string."""
        conninfo = config.connection_string if isinstance(config, PostgresConfig) else config
        try:
            connection = psycopg.connect(conninfo, autocommit=True)
        except psycopg.Error as exc:
            raise StorageError(f"Cannot connect to PostgreSQL: {exc}") from exc
        return cls(connection)

    def create_tables(self) -> None:
        """Create the state and lease tables if they do not exist."""
        with self.conn.cursor() as cur:
            cur.execute(CREATE_TABLE_SQL)
            cur.execute(CREATE_LEASE_TABLE_SQL)
        logger.info("Ensured tables %s and %s exist", TABLE_NAME, LEASE_TABLE_NAME)

    def get(self, key: str) -> Any | None:
        with self.conn.cursor() as cur:
            cur.execute(SELECT_SQL, (key,))
            row = cur.fetchone()
        return row[0] if row else None

    def set(self, key: str, value: Any) -> None:
        with self.conn.cursor() as cur:
            cur.execute(UPSERT_SQL, (key, Jsonb(value)))

    def has(self, key: str) -> bool:
        with self.conn.cursor() as cur:
            cur.execute(EXISTS_SQL, (key,))
            return cur.fetchone() is not None

    def extend_lease(self, window: int) -> None:
        """Push the shared expiry out to at least now + window; touches one row."""
        with self.conn.cursor() as cur:
            cur.execute(EXTEND_LEASE_SQL, (window,))

    def lease_expires_at(self) -> int | None:
        """Epoch second the stored records expire at, or None before the first lease."""
        with self.conn.cursor() as cur:
            cur.execute(SELECT_LEASE_SQL)
            row = cur.fetchone()
        return row[0] if row else None

    @contextmanager
    def transaction(self) -> Iterator[None]:
        # psycopg nests inner blocks as savepoints of the outer transaction
        with self.conn.transaction():
            yield

    def close(self) -> None:
        """Close the connection."""
        self.conn.close()
