"""JSON Lines sink keeping an append-only journal of ledger events."""

import json
import logging
from pathlib import Path
from typing import Any

from share_ledger.exceptions import SinkError
from share_ledger.sinks.serialization import encode_json

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Append ledger events to one ``.jsonl`` file per topic."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write journal files.
        pretty : bool
            Indent each record. The file is then a sequence of JSON
            documents rather than strict JSON Lines.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def path_for(self, topic: str) -> Path:
        # Use topic name as filename (replace dots with underscores)
        return self.output_dir / (topic.replace(".", "_") + ".jsonl")

    def write_batch(self, topic: str, records: list[Any]) -> None:
        """Append a batch of records to the topic's journal."""
        file_path = self.path_for(topic)
        try:
            with open(file_path, "a", encoding="utf-8") as f:
                for record in records:
                    f.write(encode_json(record, pretty=self.pretty) + "\n")
        except OSError as exc:
            raise SinkError(f"Cannot write journal {file_path}: {exc}") from exc

        self._counts[topic] = self._counts.get(topic, 0) + len(records)

    def read(self, topic: str) -> list[dict]:
        """Read back every record journaled for a topic (non-pretty mode)."""
        file_path = self.path_for(topic)
        if not file_path.exists():
            return []
        with open(file_path, encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]

    def close(self) -> None:
        """Log summary."""
        logger.info("Journal files written to: %s", self.output_dir)
        for topic, count in self._counts.items():
            logger.info("  %s: %d records", topic, count)
