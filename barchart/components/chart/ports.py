"""
Chart component port definitions.

The chart never touches a window, document or file directly; it asks these
collaborators for sizes and data and hands them a finished scene.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from barchart.domain.entities import DataPoint

    from .models import ChartScene


class ContainerProbePort(Protocol):
    """Reports the size of the chart's hosting element."""

    def get_container_width(self, selector: str) -> int:
        """Pixel width of the element, 0 when it is not mounted."""
        ...

    def get_viewport_height(self) -> int:
        """Current viewport height in pixels."""
        ...


class DataSourcePort(Protocol):
    """Supplies the ordered records to draw."""

    def get_data(self) -> Sequence[DataPoint | Any]:
        """Return DataPoints (or name/count mappings) in render order."""
        ...


class RenderTargetPort(Protocol):
    """Hosts at most one chart element per container."""

    def find_chart(self, selector: str) -> object | None:
        """Return the chart element mounted under selector, if any."""
        ...

    def remove_chart(self, selector: str, mounted: object | None = None) -> bool:
        """
        Detach mounted if it is still attached under selector, otherwise
        whatever chart the container holds. Returns False when nothing was
        mounted.
        """
        ...

    def mount_chart(self, selector: str, scene: ChartScene) -> object:
        """
        Build and attach a chart element for scene.
        Raises LookupError when the container does not exist.
        """
        ...


class RulesPort(Protocol):
    """Port for chart rules configuration."""

    def get_selector(self) -> str:
        """Selector of the hosting element."""
        ...

    def get_height_ratio(self) -> float:
        """Fraction of viewport height given to the chart."""
        ...

    def get_margins(self) -> tuple[int, int, int, int]:
        """Margins as (top, right, bottom, left)."""
        ...

    def get_band_padding(self) -> float:
        """Inner/outer band padding as a fraction of the band step."""
        ...

    def get_y_tick_count(self) -> int:
        """Approximate number of ticks on the value axis."""
        ...

    def get_axis_labels(self) -> tuple[str, str]:
        """Labels for the (category, value) axes."""
        ...
