import logging
from pathlib import Path

import flet as ft

from barchart.adapters.fs.filestore import FileSystemStore
from barchart.adapters.render.mpl_renderer import MatplotlibRenderer
from barchart.app_shell.config import (
    CACHE_PATH,
    DATA_PATH,
    LOG_FORMAT,
    RULES_PATH,
    build_data_source,
    load_app_rules,
)
from barchart.rules.adapter import ChartRulesAdapter
from barchart.ui.chart_view import ResponsiveChart

logger = logging.getLogger(__name__)

PAGE_PADDING = 20


def build_main(rules_path: Path, data_path: str | Path | None, cache_path: str):
    rules = ChartRulesAdapter(load_app_rules(rules_path))
    source = build_data_source(data_path)
    renderer = MatplotlibRenderer(FileSystemStore(cache_path))

    def main(page: ft.Page) -> None:
        page.title = "Bar Chart"
        page.padding = PAGE_PADDING
        page.theme_mode = ft.ThemeMode.LIGHT

        chart = ResponsiveChart(page, source, rules, renderer, padding=PAGE_PADDING)
        page.add(chart.host)
        page.on_resized = chart.handle_resize

        try:
            result = chart.draw()
        except (OSError, ValueError) as e:
            logger.error(f"Could not load chart data: {e}")
            page.add(ft.Text(f"Error: {e}", color="red", size=20))
            return

        if result.skipped:
            for err in result.errors:
                logger.warning(f"Initial render skipped: {err.code}: {err.message}")

    return main


def run_app(
    rules_path: Path = Path(RULES_PATH),
    data_path: str | Path | None = DATA_PATH,
    cache_path: str = CACHE_PATH,
) -> None:
    ft.app(target=build_main(rules_path, data_path, cache_path))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    run_app()
