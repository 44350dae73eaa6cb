import logging
import os
from pathlib import Path

from barchart.adapters.data.file_source import JsonFileDataSource
from barchart.adapters.data.static_source import StaticDataSource
from barchart.components.chart.ports import DataSourcePort
from barchart.rules.loader import load_rules
from barchart.rules.models import ChartRules

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Configuration from environment (with sensible defaults for local dev)
RULES_PATH = os.environ.get("BARCHART_RULES_PATH", "rules.yaml")
CACHE_PATH = os.environ.get("BARCHART_CACHE_PATH", ".chart_cache")
DATA_PATH = os.environ.get("BARCHART_DATA_PATH")


def load_app_rules(path: Path) -> ChartRules:
    """
    Load rules for an entry point.

    A missing file falls back to built-in defaults; a present but invalid
    file still fails fast.
    """
    if not path.exists():
        logger.warning(f"Rules file {path} not found; using default chart rules.")
        return ChartRules()

    rules = load_rules(path)
    logger.info(f"Rules loaded from {path}")
    return rules


def build_data_source(data_path: str | Path | None) -> DataSourcePort:
    """JSON file source when a path is configured, otherwise the mock records."""
    if data_path:
        return JsonFileDataSource(Path(data_path))
    return StaticDataSource()
