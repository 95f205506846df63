"""Plot-area sizing and axis range resolution."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..core.logging_config import get_logger
from ..core.models import Box
from ..render.base import Renderer
from .ranges import Range, ValueFormatter
from .series import Series

if TYPE_CHECKING:
    from .chart import Chart

logger = get_logger(__name__)


def axis_stroke_width(chart: Chart) -> int:
    """Width the axis lines occupy, or 0 when axes are hidden."""
    if not chart.axes.show:
        return 0
    return int(chart.axes.get_stroke_width(chart.defaults.axis_line_width))


def longest_final_label(series: Sequence[Series]) -> str:
    """Longest formatted last value across non-empty series."""
    longest = ""
    for s in series:
        if len(s) == 0:
            continue
        _, last_y = s.get_value(len(s) - 1)
        label = s.get_y_formatter()(last_y)
        if len(label) > len(longest):
            longest = label
    return longest


def final_label_width(chart: Chart, r: Renderer) -> int:
    """Horizontal space the final value labels need right of the plot area."""
    if not chart.final_value_label.show:
        return 0
    defaults = chart.defaults
    style = chart.final_value_label

    r.set_font_size(style.get_font_size(defaults.final_label_font_size))
    text_width = r.measure_text(longest_final_label(chart.series))

    pl = style.padding.get_left(defaults.final_label_padding.left)
    pr = style.padding.get_right(defaults.final_label_padding.right)
    lsw = int(style.get_stroke_width(defaults.axis_line_width))

    return (
        defaults.final_label_delta_width
        + pl
        + pr
        + text_width
        + axis_stroke_width(chart)
        + 2 * lsw
    )


def bottom_label_height(chart: Chart) -> int:
    """Vertical space the X axis labels need below the plot area."""
    if not chart.axes.show:
        return 0
    font_size = chart.axes.get_font_size(chart.defaults.axis_font_size)
    return axis_stroke_width(chart) + int(math.ceil(font_size)) + chart.defaults.x_axis_margin


def calculate_canvas_box(chart: Chart, r: Renderer) -> Box:
    """Compute the plot rectangle inside the chart.

    Padding on each side comes from the background style; the right and
    bottom defaults grow to fit final value labels and axis labels.

    Returns:
        The plot-area Box. It may be degenerate; ``render_chart`` rejects that.
    """
    bg_padding = chart.background.padding
    default_padding = chart.defaults.background_padding

    dpr = max(default_padding.get_right(), final_label_width(chart, r))
    dpb = max(default_padding.get_bottom(), bottom_label_height(chart))

    box = Box(
        top=bg_padding.get_top(default_padding.top),
        left=bg_padding.get_left(default_padding.left),
        right=chart.width - bg_padding.get_right(dpr),
        bottom=chart.height - bg_padding.get_bottom(dpb),
    )
    logger.debug(
        "Canvas box resolved",
        extra={
            "top": box.top,
            "left": box.left,
            "right": box.right,
            "bottom": box.bottom,
        },
    )
    return box


def init_ranges(chart: Chart, canvas_box: Box) -> tuple[Range, Range]:
    """Resolve the X and Y ranges for a render.

    Unset ranges are derived from the running min/max over every point of
    every series. Each range's formatter comes from the last series in the
    chart, whichever series defined it.

    Returns:
        Tuple of (x_range, y_range) bound to the box width and height
    """
    seeded = False
    min_x = max_x = min_y = max_y = 0.0
    x_formatter: ValueFormatter | None = None
    y_formatter: ValueFormatter | None = None

    for s in chart.series:
        for index in range(len(s)):
            vx, vy = s.get_value(index)
            if seeded:
                min_x = min(min_x, vx)
                max_x = max(max_x, vx)
                min_y = min(min_y, vy)
                max_y = max(max_y, vy)
            else:
                min_x = max_x = vx
                min_y = max_y = vy
                seeded = True
        x_formatter = s.get_x_formatter()
        y_formatter = s.get_y_formatter()

    if _is_unset(chart.x_range):
        x_min, x_max = min_x, max_x
    else:
        x_min, x_max = chart.x_range.min, chart.x_range.max

    if _is_unset(chart.y_range):
        y_min, y_max = min_y, max_y
    else:
        y_min, y_max = chart.y_range.min, chart.y_range.max

    xrange = Range(min=x_min, max=x_max, domain=canvas_box.width, formatter=x_formatter)
    yrange = Range(min=y_min, max=y_max, domain=canvas_box.height, formatter=y_formatter)
    logger.debug(
        "Ranges resolved",
        extra={"x_min": x_min, "x_max": x_max, "y_min": y_min, "y_max": y_max},
    )
    return xrange, yrange


def _is_unset(value_range: Range | None) -> bool:
    return value_range is None or value_range.is_zero()
