"""
Chart component - responsive bar chart rendering.
"""

from ._impl import (
    DEFAULT_CONFIG,
    ChartConfig,
    ChartRenderer,
    build_scene,
    create_chart_renderer,
    validate_data,
)
from ._scales import BandScale, LinearScale, format_tick, linear_ticks, tick_step
from .component import (
    run,
    run_measure,
    run_render,
    run_resize,
)
from .models import (
    AxisLabel,
    Bar,
    ChartScene,
    ChartValidationError,
    MeasureInput,
    MeasureOutput,
    RenderInput,
    RenderOutput,
    RenderState,
    ResizeInput,
    ResizeOutput,
    Tick,
)
from .ports import ContainerProbePort, DataSourcePort, RenderTargetPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_measure",
    "run_render",
    "run_resize",
    # Input models
    "MeasureInput",
    "RenderInput",
    "ResizeInput",
    # Output models
    "MeasureOutput",
    "RenderOutput",
    "ResizeOutput",
    "RenderState",
    "ChartValidationError",
    # Scene models
    "AxisLabel",
    "Bar",
    "ChartScene",
    "Tick",
    # Ports
    "ContainerProbePort",
    "DataSourcePort",
    "RenderTargetPort",
    "RulesPort",
    # _impl re-exports
    "DEFAULT_CONFIG",
    "ChartConfig",
    "ChartRenderer",
    "build_scene",
    "create_chart_renderer",
    "validate_data",
    # Scales
    "BandScale",
    "LinearScale",
    "format_tick",
    "linear_ticks",
    "tick_step",
]
