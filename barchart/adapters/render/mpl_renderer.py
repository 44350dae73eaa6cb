import hashlib
import json
import logging
from io import BytesIO

import matplotlib.figure
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.lines import Line2D
from matplotlib.patches import Rectangle

from barchart.components.chart.models import ChartScene
from barchart.ports.filestore import FileStorePort
from barchart.ports.renderer import ImageFormat

logger = logging.getLogger(__name__)

BAR_COLOR = "steelblue"
AXIS_COLOR = "black"
TICK_SIZE = 6
FONT_SIZE = 10


class MatplotlibRenderer:
    def __init__(self, cache_store: FileStorePort):
        self.cache_store = cache_store

    @staticmethod
    def cache_key(scene: ChartScene, fmt: ImageFormat, dpi: int) -> str:
        scene_str = json.dumps(scene.to_dict(), sort_keys=True)
        hash_input = f"{scene_str}|{fmt}|{dpi}"
        digest = hashlib.md5(hash_input.encode("utf-8")).hexdigest()
        return f"charts/{digest}.{fmt}"

    def evict(self, scene: ChartScene, fmt: ImageFormat = "png", dpi: int = 100) -> None:
        """Remove the cached image for a scene; missing entries are ignored."""
        cache_key = self.cache_key(scene, fmt, dpi)
        self.cache_store.delete(cache_key)
        logger.debug("Evicted cached chart %s", cache_key)

    def render_scene(self, scene: ChartScene, fmt: ImageFormat = "png", dpi: int = 100) -> bytes:
        """
        Replays a chart scene onto a matplotlib figure at pixel precision.

        The figure is exactly scene.width x scene.height pixels, with a single
        axes spanning it whose y axis points down, so scene coordinates are
        used as-is after shifting by the margins.
        """
        if fmt not in ("png", "svg"):
            raise ValueError(f"Unsupported image format: {fmt}")

        # 1. Compute Hash for Cache
        cache_key = self.cache_key(scene, fmt, dpi)

        # 2. Check Cache
        try:
            return self.cache_store.get(cache_key)
        except FileNotFoundError:
            pass

        # 3. Render
        width = max(1, scene.width)
        height = max(1, scene.height)
        fig = matplotlib.figure.Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        FigureCanvasAgg(fig)  # Attach canvas backend
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_axis_off()

        m = scene.geometry.margins
        plot_w = scene.geometry.plot_width
        plot_h = scene.geometry.plot_height

        def line(xs: tuple[float, float], ys: tuple[float, float]) -> None:
            ax.add_line(Line2D(xs, ys, color=AXIS_COLOR, linewidth=1))

        for bar in scene.bars:
            ax.add_patch(
                Rectangle(
                    (m.left + bar.x, m.top + bar.y), bar.width, bar.height, color=BAR_COLOR
                )
            )

        # x axis
        base_y = m.top + plot_h
        line((m.left, m.left + plot_w), (base_y, base_y))
        for tick in scene.x_ticks:
            x = m.left + tick.position
            line((x, x), (base_y, base_y + TICK_SIZE))
            ax.text(
                x, base_y + TICK_SIZE + 3, tick.label,
                ha="center", va="top", fontsize=FONT_SIZE,
            )

        # y axis
        line((m.left, m.left), (m.top, base_y))
        for tick in scene.y_ticks:
            y = m.top + tick.position
            line((m.left - TICK_SIZE, m.left), (y, y))
            ax.text(
                m.left - TICK_SIZE - 3, y, tick.label,
                ha="right", va="center", fontsize=FONT_SIZE,
            )

        for label in scene.labels:
            ax.text(
                m.left + label.x, m.top + label.y, label.text,
                rotation=-label.rotation if label.rotation else 0,
                ha="center", va="center", fontsize=FONT_SIZE,
            )

        # 4. Save to Bytes
        buf = BytesIO()
        fig.savefig(buf, format=fmt)
        data = buf.getvalue()
        buf.close()

        # 5. Write to Cache
        self.cache_store.save(cache_key, data)
        logger.debug("Rendered %s chart %sx%s (%s)", fmt, width, height, cache_key)

        return data
