"""JSON file sink for exporting records and query results."""

import json
import logging
from pathlib import Path
from typing import Any

from realty_crm.query import Page
from realty_crm.sinks.serialization import page_to_dict, to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output data to JSON files, one file per entity type or query."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json``."""
        data = [to_dict(record) for record in records]
        self._counts[entity_type] = len(records)
        return self._dump(entity_type, data)

    def write_page(self, name: str, page: Page) -> Path:
        """Write one query page, with its paging metadata, to ``<name>.json``."""
        self._counts[name] = len(page.items)
        return self._dump(name, page_to_dict(page))

    def write_object(self, name: str, obj: Any) -> Path:
        """Write a single dataclass (e.g. statistics) to ``<name>.json``."""
        self._counts[name] = 1
        return self._dump(name, to_dict(obj))

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def close(self) -> None:
        """Log a summary of what was written."""
        logger.info("JSON files written to: %s", self.output_dir)
        for entity_type, count in self._counts.items():
            logger.info("  %s: %d records", entity_type, count)

    def _dump(self, name: str, data: Any) -> Path:
        file_path = self.output_dir / f"{name}.json"
        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False, default=str)
            else:
                json.dump(data, f, ensure_ascii=False, default=str)
        return file_path
