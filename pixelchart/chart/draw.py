"""Drawing passes: background, canvas, axes, series, final value labels, title."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..core.models import Box
from ..render.base import Renderer
from .layout import axis_stroke_width
from .ranges import Range, paired_ticks, tick_count
from .series import Series
from .style import Style

if TYPE_CHECKING:
    from .chart import Chart


def _fill_stroke_rect(r: Renderer, left: int, top: int, right: int, bottom: int) -> None:
    r.move_to(left, top)
    r.line_to(right, top)
    r.line_to(right, bottom)
    r.line_to(left, bottom)
    r.line_to(left, top)
    r.close()
    r.fill_stroke()


def draw_background(chart: Chart, r: Renderer) -> None:
    defaults = chart.defaults
    r.set_fill_color(chart.background.get_fill_color(defaults.background_color))
    r.set_stroke_color(chart.background.get_stroke_color(defaults.background_stroke_color))
    r.set_line_width(chart.background.get_stroke_width(defaults.stroke_width))
    _fill_stroke_rect(r, 0, 0, chart.width, chart.height)


def draw_canvas(chart: Chart, r: Renderer, canvas_box: Box) -> None:
    defaults = chart.defaults
    r.set_fill_color(chart.canvas.get_fill_color(defaults.canvas_color))
    r.set_stroke_color(chart.canvas.get_stroke_color(defaults.canvas_stroke_color))
    r.set_line_width(chart.canvas.get_stroke_width(defaults.stroke_width))
    _fill_stroke_rect(r, canvas_box.left, canvas_box.top, canvas_box.right, canvas_box.bottom)


def draw_axes(chart: Chart, r: Renderer, canvas_box: Box, xrange: Range, yrange: Range) -> None:
    """Draw the bottom and right plot edges, then both sets of tick labels."""
    if not chart.axes.show:
        return
    defaults = chart.defaults
    r.set_stroke_color(chart.axes.get_stroke_color(defaults.axis_color))
    r.set_line_width(chart.axes.get_stroke_width(defaults.stroke_width))
    r.move_to(canvas_box.left, canvas_box.bottom)
    r.line_to(canvas_box.right, canvas_box.bottom)
    r.line_to(canvas_box.right, canvas_box.top)
    r.stroke()

    draw_x_axis_labels(chart, r, canvas_box, xrange)
    draw_y_axis_labels(chart, r, canvas_box, yrange)


def _set_axis_font(chart: Chart, r: Renderer) -> float:
    font_size = chart.axes.get_font_size(chart.defaults.axis_font_size)
    r.set_font_color(chart.axes.get_font_color(chart.defaults.axis_color))
    r.set_font_size(font_size)
    return font_size


def draw_x_axis_labels(chart: Chart, r: Renderer, canvas_box: Box, xrange: Range) -> None:
    defaults = chart.defaults
    font_size = _set_axis_font(chart, r)

    min_spacing = defaults.estimated_x_label_width + defaults.min_tick_horizontal_spacing
    count = tick_count(xrange.domain, min_spacing, defaults.max_tick_count)

    ty = canvas_box.bottom + defaults.x_axis_margin + int(font_size)
    for value, offset in paired_ticks(count, xrange):
        r.text(xrange.format(value), canvas_box.left + int(offset), ty)


def draw_y_axis_labels(chart: Chart, r: Renderer, canvas_box: Box, yrange: Range) -> None:
    defaults = chart.defaults
    font_size = _set_axis_font(chart, r)

    min_spacing = font_size + defaults.min_tick_vertical_spacing
    count = tick_count(yrange.domain, min_spacing, defaults.max_tick_count)

    tx = canvas_box.right + defaults.final_label_delta_width + axis_stroke_width(chart)
    for value, offset in paired_ticks(count, yrange):
        r.text(yrange.format(value), tx, canvas_box.bottom - int(offset))


def series_stroke_color(chart: Chart, index: int, s: Series) -> str:
    return s.get_style().get_stroke_color(chart.defaults.series_color(index))


def draw_series(
    chart: Chart,
    r: Renderer,
    canvas_box: Box,
    index: int,
    s: Series,
    xrange: Range,
    yrange: Range,
) -> None:
    """Stroke one series as a single path.

    X pixels are measured back from the right edge of the plot area
    (``width - translate(x)``); Y pixels grow downward from the top edge.
    """
    if len(s) == 0:
        return

    r.set_stroke_color(series_stroke_color(chart, index, s))
    r.set_line_width(s.get_style().get_stroke_width(chart.defaults.stroke_width))

    cx = canvas_box.left
    cy = canvas_box.top
    cw = canvas_box.width

    v0x, v0y = s.get_value(0)
    r.move_to(cw - xrange.translate(v0x) + cx, yrange.translate(v0y) + cy)
    for i in range(1, len(s)):
        vx, vy = s.get_value(i)
        r.line_to(cw - xrange.translate(vx) + cx, yrange.translate(vy) + cy)
    r.stroke()

    draw_final_value_label(chart, r, canvas_box, index, s, yrange)


def draw_final_value_label(
    chart: Chart, r: Renderer, canvas_box: Box, index: int, s: Series, yrange: Range
) -> None:
    """Draw the pointed tab holding the series' last value.

    The tab's apex sits on the plot's right edge at the last point's height;
    its body extends right far enough to hold the formatted value.
    """
    style: Style = chart.final_value_label
    if not style.show or len(s) == 0:
        return
    defaults = chart.defaults

    _, last_value = s.get_value(len(s) - 1)
    label = s.get_y_formatter()(last_value)

    ly = yrange.translate(last_value) + canvas_box.top

    font_size = style.get_font_size(defaults.final_label_font_size)
    r.set_font_size(font_size)
    text_width = r.measure_text(label)
    half_text_height = int(math.floor(font_size)) >> 1

    cx = canvas_box.right + axis_stroke_width(chart)

    pt = style.padding.get_top(defaults.final_label_padding.top)
    pl = style.padding.get_left(defaults.final_label_padding.left)
    pr = style.padding.get_right(defaults.final_label_padding.right)
    pb = style.padding.get_bottom(defaults.final_label_padding.bottom)

    delta = defaults.final_label_delta_width
    body_left = cx + pl + delta
    body_right = cx + pl + pr + text_width
    body_top = ly - (pt + half_text_height)
    body_bottom = ly + (pb + half_text_height)

    r.set_fill_color(style.get_fill_color(defaults.final_label_background_color))
    r.set_stroke_color(style.get_stroke_color(series_stroke_color(chart, index, s)))
    r.set_line_width(style.get_stroke_width(defaults.axis_line_width))
    r.move_to(cx, ly)
    r.line_to(body_left, body_top)
    r.line_to(body_right, body_top)
    r.line_to(body_right, body_bottom)
    r.line_to(cx + delta, body_bottom)
    r.line_to(cx, ly)
    r.close()
    r.fill_stroke()

    r.set_font_color(style.get_font_color(defaults.text_color))
    r.text(label, body_left, ly + half_text_height)


def draw_title(chart: Chart, r: Renderer) -> None:
    """Draw the title centered horizontally above the plot."""
    if not chart.title or not chart.title_style.show:
        return
    defaults = chart.defaults
    style = chart.title_style
    r.set_font_color(style.get_font_color(defaults.text_color))
    font_size = style.get_font_size(defaults.title_font_size)
    r.set_font_size(font_size)
    text_width = r.measure_text(chart.title)
    title_x = (chart.width >> 1) - (text_width >> 1)
    title_y = style.padding.get_top(defaults.title_top) + int(font_size)
    r.text(chart.title, title_x, title_y)
