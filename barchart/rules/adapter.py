"""
Rules adapter - exposes ChartRules through the chart component's RulesPort.
"""

from __future__ import annotations

from barchart.rules.models import ChartRules


class ChartRulesAdapter:
    """RulesPort implementation over loaded ChartRules."""

    def __init__(self, rules: ChartRules | None = None) -> None:
        self._rules = rules or ChartRules()

    def get_selector(self) -> str:
        return self._rules.layout.selector

    def get_height_ratio(self) -> float:
        return self._rules.layout.height_ratio

    def get_margins(self) -> tuple[int, int, int, int]:
        m = self._rules.margins
        return (m.top, m.right, m.bottom, m.left)

    def get_band_padding(self) -> float:
        return self._rules.scale.band_padding

    def get_y_tick_count(self) -> int:
        return self._rules.scale.y_tick_count

    def get_axis_labels(self) -> tuple[str, str]:
        return (self._rules.labels.x_axis, self._rules.labels.y_axis)
