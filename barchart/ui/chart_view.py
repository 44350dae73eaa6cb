"""
Flet chart view - hosts the chart in a page and redraws on resize.

The chart container is an ft.Container holding the rendered image. Its
width is the page width minus horizontal padding, and the viewport height is
the page height, so resizing the window changes both.
"""

from __future__ import annotations

import base64
import logging
import threading

import flet as ft

from barchart.components.chart import (
    ChartScene,
    DataSourcePort,
    RenderInput,
    RenderOutput,
    RenderState,
    ResizeInput,
    ResizeOutput,
    RulesPort,
    run_render,
    run_resize,
)
from barchart.ports.renderer import RendererPort

logger = logging.getLogger(__name__)

IMAGE_FORMAT = "png"
IMAGE_DPI = 100


class FletPageProbe:
    """ContainerProbePort over a flet Page."""

    def __init__(self, page: ft.Page, hosts: dict[str, ft.Container], padding: int = 0) -> None:
        self._page = page
        self._hosts = hosts
        self._padding = padding

    def get_container_width(self, selector: str) -> int:
        if selector not in self._hosts or self._page.width is None:
            return 0
        return max(0, int(self._page.width) - 2 * self._padding)

    def get_viewport_height(self) -> int:
        if self._page.height is None:
            return 0
        return max(0, int(self._page.height))


class FletImageTarget:
    """
    RenderTargetPort that shows rendered scenes as images in host containers.

    The scene behind each mounted image is kept so its cached PNG can be
    evicted when the image is replaced.
    """

    def __init__(self, page: ft.Page, hosts: dict[str, ft.Container], renderer: RendererPort) -> None:
        self._page = page
        self._hosts = hosts
        self._renderer = renderer
        self._scenes: dict[str, ChartScene] = {}

    def find_chart(self, selector: str) -> ft.Image | None:
        host = self._hosts.get(selector)
        if host is None or not isinstance(host.content, ft.Image):
            return None
        return host.content

    def remove_chart(self, selector: str, mounted: object | None = None) -> bool:
        chart = self.find_chart(selector)
        if chart is None:
            return False
        if mounted is not None and mounted is not chart:
            logger.debug("Mounted image for %s is stale; removing current image", selector)
        self._hosts[selector].content = None
        scene = self._scenes.pop(selector, None)
        if scene is not None:
            self._renderer.evict(scene, fmt=IMAGE_FORMAT, dpi=IMAGE_DPI)
        self._page.update()
        return True

    def mount_chart(self, selector: str, scene: ChartScene) -> ft.Image:
        host = self._hosts.get(selector)
        if host is None:
            raise LookupError(f"No container registered for {selector}")

        png = self._renderer.render_scene(scene, fmt=IMAGE_FORMAT, dpi=IMAGE_DPI)
        image = ft.Image(
            src_base64=base64.b64encode(png).decode("ascii"),
            width=scene.width,
            height=scene.height,
        )
        host.content = image
        self._scenes[selector] = scene
        self._page.update()
        return image


class ResponsiveChart:
    """
    Owns the render state for one chart and serialises redraws.

    Flet dispatches event handlers on a worker pool, so render and resize
    run under a lock to keep them strictly sequential.
    """

    def __init__(
        self,
        page: ft.Page,
        source: DataSourcePort,
        rules: RulesPort,
        renderer: RendererPort,
        padding: int = 20,
    ) -> None:
        self._source = source
        self._rules = rules
        self._lock = threading.Lock()
        self.state = RenderState()

        selector = rules.get_selector()
        self.host = ft.Container(padding=0)
        hosts = {selector: self.host}
        self._probe = FletPageProbe(page, hosts, padding=padding)
        self._target = FletImageTarget(page, hosts, renderer)

    def draw(self) -> RenderOutput:
        with self._lock:
            result = run_render(
                RenderInput(data=self._source.get_data(), state=self.state),
                probe=self._probe,
                target=self._target,
                rules=self._rules,
            )
            self.state = result.state
            return result

    def handle_resize(self, e: ft.ControlEvent | None = None) -> ResizeOutput:
        with self._lock:
            result = run_resize(
                ResizeInput(state=self.state),
                probe=self._probe,
                target=self._target,
                source=self._source,
                rules=self._rules,
            )
            self.state = result.state
            return result
