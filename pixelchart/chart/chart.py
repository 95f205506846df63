"""Chart definition and the single-pass render orchestration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import BinaryIO

from ..core.errors import CanvasSizeError, ChartConfigError
from ..core.logging_config import get_logger
from ..render.base import RendererProvider
from ..render.fonts import Font, get_default_font
from .defaults import DEFAULTS, ChartDefaults
from .draw import (
    draw_axes,
    draw_background,
    draw_canvas,
    draw_series,
    draw_title,
)
from .layout import calculate_canvas_box, init_ranges
from .ranges import Range
from .series import Series
from .style import Style

logger = get_logger(__name__)


@dataclass(frozen=True)
class Chart:
    """Everything needed to draw one line chart.

    Attributes:
        series: Ordered series to plot; at least one is required to render
        width: Chart width in pixels
        height: Chart height in pixels
        title: Title text, drawn when ``title_style.show`` is set
        x_range: Explicit X bounds; None or an all-zero Range means derive from data
        y_range: Explicit Y bounds; None or an all-zero Range means derive from data
        font: Font for all text; the default font is used when None
        defaults: Fallback values for anything the styles leave unset
    """

    series: Sequence[Series] = ()
    width: int = DEFAULTS.chart_width
    height: int = DEFAULTS.chart_height
    title: str = ""
    title_style: Style = field(default_factory=Style)
    background: Style = field(default_factory=Style)
    canvas: Style = field(default_factory=Style)
    axes: Style = field(default_factory=Style)
    final_value_label: Style = field(default_factory=Style)
    x_range: Range | None = None
    y_range: Range | None = None
    font: Font | None = None
    defaults: ChartDefaults = DEFAULTS

    def get_font(self) -> Font:
        if self.font is not None:
            return self.font
        return get_default_font()

    def has_text(self) -> bool:
        return self.title_style.show or self.axes.show or self.final_value_label.show

    def render(self, provider: RendererProvider, sink: BinaryIO) -> None:
        render_chart(self, provider, sink)


def render_chart(chart: Chart, provider: RendererProvider, sink: BinaryIO) -> None:
    """Lay out and draw ``chart`` with a fresh renderer, then save to ``sink``.

    Args:
        chart: Chart to draw
        provider: Factory called once with (width, height) for a new renderer
        sink: Binary stream the renderer writes its output to

    Raises:
        ChartConfigError: If the chart has no series
        CanvasSizeError: If padding leaves no room for the plot area
        FontError: If text is needed and the font cannot be loaded
        OSError: If writing to ``sink`` fails
    """
    if not chart.series:
        raise ChartConfigError("Please provide at least one series")

    font = chart.get_font() if chart.has_text() else None

    r = provider(chart.width, chart.height)
    if font is not None:
        r.set_font(font)

    canvas_box = calculate_canvas_box(chart, r)
    if canvas_box.is_degenerate():
        logger.error(
            "Canvas box is degenerate",
            extra={"width": canvas_box.width, "height": canvas_box.height},
        )
        raise CanvasSizeError(canvas_box.width, canvas_box.height)

    xrange, yrange = init_ranges(chart, canvas_box)

    draw_background(chart, r)
    draw_canvas(chart, r, canvas_box)
    draw_axes(chart, r, canvas_box, xrange, yrange)
    for index, s in enumerate(chart.series):
        draw_series(chart, r, canvas_box, index, s, xrange, yrange)
    draw_title(chart, r)

    r.save(sink)
    logger.debug(
        "Chart rendered",
        extra={"series": len(chart.series), "width": chart.width, "height": chart.height},
    )
