"""
JSON file data source.

The file holds an array of {"name": str, "count": int} objects. It is re-read
on every call, so a redraw after a resize picks up edits to the file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from barchart.domain.entities import DataPoint

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[DataPoint])


class JsonFileDataSource:
    """DataSourcePort backed by a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get_data(self) -> list[DataPoint]:
        """
        Load and validate records.
        Raises FileNotFoundError if the file is missing.
        Raises ValueError if the content is not a valid record array.
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Data file not found at: {self.path}")

        content = self.path.read_text(encoding="utf-8")
        try:
            points = _RECORDS.validate_json(content)
        except ValidationError as e:
            raise ValueError(f"Invalid chart data in {self.path}:\n{e}") from e

        logger.info("Loaded %d records from %s", len(points), self.path)
        return points
