"""
Static data source - fixed records for demos and tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from barchart.domain.entities import DataPoint, coerce_data_points

logger = logging.getLogger(__name__)

MOCK_DATA: tuple[tuple[str, int], ...] = (
    ("Bin_0", 20),
    ("Bin_1", 15),
    ("Bin_2", 56),
    ("Bin_3", 40),
)


class StaticDataSource:
    """DataSourcePort returning the same records on every call."""

    def __init__(self, records: Iterable[object] = MOCK_DATA) -> None:
        self._points = tuple(coerce_data_points(records))

    def get_data(self) -> list[DataPoint]:
        logger.debug("Serving %d static records", len(self._points))
        return list(self._points)
