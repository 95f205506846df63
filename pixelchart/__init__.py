"""PixelChart: line chart layout and rendering."""

from __future__ import annotations

__version__ = "0.1.0"

from .chart.chart import Chart, render_chart
from .chart.series import ContinuousSeries, TimeSeries
from .chart.style import Padding, Style
from .core.errors import (
    CanvasSizeError,
    ChartConfigError,
    ChartError,
    DefinitionError,
    FontError,
)

__all__ = [
    "__version__",
    "CanvasSizeError",
    "Chart",
    "ChartConfigError",
    "ChartError",
    "ContinuousSeries",
    "DefinitionError",
    "FontError",
    "Padding",
    "Style",
    "TimeSeries",
    "render_chart",
]
