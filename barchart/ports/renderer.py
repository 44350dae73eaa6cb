from typing import TYPE_CHECKING, Literal, Protocol

if TYPE_CHECKING:
    from barchart.components.chart.models import ChartScene

ImageFormat = Literal["png", "svg"]


class RendererPort(Protocol):
    def render_scene(self, scene: "ChartScene", fmt: ImageFormat, dpi: int) -> bytes:
        """Render a chart scene to image bytes (PNG/SVG)."""
        ...

    def evict(self, scene: "ChartScene", fmt: ImageFormat, dpi: int) -> None:
        """Drop the cached image for a scene, if any."""
        ...
