"""Tests for the render orchestration against a recording renderer."""

from __future__ import annotations

import io
from unittest.mock import MagicMock, patch

import pytest

from pixelchart.chart.chart import Chart, render_chart
from pixelchart.chart.defaults import SERIES_COLORS
from pixelchart.chart.series import ContinuousSeries
from pixelchart.chart.style import Style
from pixelchart.core.errors import CanvasSizeError, ChartConfigError, FontError

from .conftest import CHAR_WIDTH, TEST_FONT, RecordingProvider, RecordingRenderer


def _series(points: list[tuple[float, float]], **kwargs) -> ContinuousSeries:
    return ContinuousSeries(
        x_values=[p[0] for p in points], y_values=[p[1] for p in points], **kwargs
    )


def _after_canvas(r: RecordingRenderer) -> list[tuple[str, tuple]]:
    """Calls issued after the background and canvas rectangles."""
    fills = [i for i, (name, _) in enumerate(r.calls) if name == "fill_stroke"]
    return r.calls[fills[1] + 1 :]


def test_empty_series_fails_before_any_renderer_call() -> None:
    provider = MagicMock()

    with pytest.raises(ChartConfigError, match="at least one series"):
        render_chart(Chart(series=[]), provider, io.BytesIO())

    provider.assert_not_called()


def test_render_saves_exactly_once(provider: RecordingProvider) -> None:
    sink = io.BytesIO()
    render_chart(Chart(series=[_series([(0, 1), (1, 2)])]), provider, sink)

    assert len(provider.renderers) == 1
    r = provider.last
    assert (r.width, r.height) == (1024, 400)
    assert r.saved == 1
    assert r.calls[-1] == ("save", (sink,))


def test_chart_render_method_delegates(provider: RecordingProvider) -> None:
    Chart(series=[_series([(0, 1)])]).render(provider, io.BytesIO())
    assert provider.last.saved == 1


def test_single_point_series_draws_one_move_and_no_segments(provider: RecordingProvider) -> None:
    render_chart(Chart(series=[_series([(3, 4)])], width=200, height=100), provider, io.BytesIO())

    series_calls = [name for name, _ in _after_canvas(provider.last)]
    assert series_calls.count("move_to") == 1
    assert series_calls.count("line_to") == 0
    assert "stroke" in series_calls


def test_series_x_is_mirrored_within_plot(provider: RecordingProvider) -> None:
    render_chart(
        Chart(series=[_series([(0, 0), (10, 10)])], width=200, height=100),
        provider,
        io.BytesIO(),
    )
    calls = _after_canvas(provider.last)

    # box: left 5, top 5, width 190, height 90
    assert ("move_to", (195.0, 5.0)) in calls
    assert ("line_to", (5.0, 95.0)) in calls


def test_series_default_and_explicit_colors(provider: RecordingProvider) -> None:
    series = [
        _series([(0, 1), (1, 2)]),
        _series([(0, 2), (1, 3)], style=Style(stroke_color="#abcdef", stroke_width=3.0)),
        _series([(0, 3), (1, 4)]),
    ]
    render_chart(Chart(series=series, width=200, height=100), provider, io.BytesIO())
    calls = _after_canvas(provider.last)

    colors = [args[0] for name, args in calls if name == "set_stroke_color"]
    assert colors == [SERIES_COLORS[0], "#abcdef", SERIES_COLORS[2]]
    assert ("set_line_width", (3.0,)) in calls


def test_empty_series_in_list_draws_nothing(provider: RecordingProvider) -> None:
    render_chart(
        Chart(series=[ContinuousSeries(), _series([(0, 1), (1, 2)])], width=200, height=100),
        provider,
        io.BytesIO(),
    )
    names = [name for name, _ in _after_canvas(provider.last)]
    assert names.count("move_to") == 1


def test_y_axis_labels_use_last_series_formatter(provider: RecordingProvider) -> None:
    series = [
        _series([(0, 0), (1, 10)]),
        _series([(0, 5), (1, 20)], y_formatter=lambda v: f"Y{v:.0f}"),
    ]
    chart = Chart(series=series, width=400, height=300, axes=Style(show=True), font=TEST_FONT)
    render_chart(chart, provider, io.BytesIO())

    texts = provider.last.args_of("text")
    # box right 395; labels start at right + delta 10 + axis stroke 1
    y_labels = [t for t, x, _ in texts if x == 406]
    x_labels = [t for t, x, _ in texts if x != 406]

    assert len(y_labels) == 10  # floor(274 / 30) + 1
    assert all(label.startswith("Y") for label in y_labels)
    assert y_labels[0] == "Y0"
    assert y_labels[-1] == "Y20"
    assert len(x_labels) == 5  # floor(390 / 80) + 1
    assert x_labels[0] == "0.00"


def test_axes_draw_l_shaped_border(provider: RecordingProvider) -> None:
    chart = Chart(
        series=[_series([(0, 0), (1, 1)])],
        width=400,
        height=300,
        axes=Style(show=True),
        font=TEST_FONT,
    )
    render_chart(chart, provider, io.BytesIO())
    calls = _after_canvas(provider.last)

    start = calls.index(("move_to", (5, 279)))
    assert calls[start + 1] == ("line_to", (395, 279))
    assert calls[start + 2] == ("line_to", (395, 5))
    assert calls[start + 3] == ("stroke", ())


def test_final_value_label_polygon(provider: RecordingProvider) -> None:
    chart = Chart(
        series=[_series([(0, 1), (1, 3)])],
        width=200,
        height=100,
        final_value_label=Style(show=True),
        font=TEST_FONT,
    )
    render_chart(chart, provider, io.BytesIO())
    calls = provider.last.calls

    # right padding = 10 + 0 + 5 + "3.00" + 0 + 2 -> box right 159
    width = 4 * CHAR_WIDTH
    assert width == 24
    start = calls.index(("move_to", (159, 95.0)))
    outline = calls[start : start + 8]
    assert outline == [
        ("move_to", (159, 95.0)),
        ("line_to", (169, 85.0)),
        ("line_to", (188, 85.0)),
        ("line_to", (188, 105.0)),
        ("line_to", (169, 105.0)),
        ("line_to", (159, 95.0)),
        ("close", ()),
        ("fill_stroke", ()),
    ]
    assert ("text", ("3.00", 169, 100.0)) in calls

    stroke_colors = [args[0] for name, args in calls[:start] if name == "set_stroke_color"]
    assert stroke_colors[-1] == SERIES_COLORS[0]


def test_title_centered(provider: RecordingProvider) -> None:
    chart = Chart(
        series=[_series([(0, 1)])],
        width=400,
        height=300,
        title="Hello",
        title_style=Style(show=True),
        font=TEST_FONT,
    )
    render_chart(chart, provider, io.BytesIO())

    # 400 / 2 - 30 / 2; top 10 + font size 18
    assert ("text", ("Hello", 185, 28)) in provider.last.calls


def test_title_hidden_without_show(provider: RecordingProvider) -> None:
    chart = Chart(series=[_series([(0, 1)])], title="Hidden")
    render_chart(chart, provider, io.BytesIO())

    assert provider.last.args_of("text") == []
    assert "set_font" not in provider.last.names()


def test_font_set_when_text_needed(provider: RecordingProvider) -> None:
    chart = Chart(series=[_series([(0, 1)])], axes=Style(show=True), font=TEST_FONT)
    render_chart(chart, provider, io.BytesIO())
    assert provider.last.calls[0] == ("set_font", (TEST_FONT,))


def test_font_failure_aborts_before_drawing() -> None:
    provider = MagicMock()
    chart = Chart(series=[_series([(0, 1)])], axes=Style(show=True))

    with patch(
        "pixelchart.chart.chart.get_default_font", side_effect=FontError("no font")
    ):
        with pytest.raises(FontError, match="no font"):
            render_chart(chart, provider, io.BytesIO())

    provider.assert_not_called()


def test_degenerate_canvas_raises_before_drawing(provider: RecordingProvider) -> None:
    chart = Chart(series=[_series([(0, 1)])], width=10, height=10, axes=Style(show=True), font=TEST_FONT)

    with pytest.raises(CanvasSizeError) as excinfo:
        render_chart(chart, provider, io.BytesIO())

    assert excinfo.value.height < 0
    names = provider.last.names()
    assert "move_to" not in names
    assert "save" not in names


def test_save_failure_propagates_unchanged() -> None:
    class FailingRenderer(RecordingRenderer):
        def save(self, sink) -> None:
            raise OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        render_chart(Chart(series=[_series([(0, 1)])]), FailingRenderer, io.BytesIO())


def test_out_of_range_points_are_drawn_unclamped(provider: RecordingProvider) -> None:
    from pixelchart.chart.ranges import Range

    chart = Chart(
        series=[_series([(0, 0), (1, 20)])],
        width=200,
        height=100,
        y_range=Range(min=0, max=10),
    )
    render_chart(chart, provider, io.BytesIO())

    lines = [args for name, args in _after_canvas(provider.last) if name == "line_to"]
    # y 20 on a 0..10 range of 90px -> 180 + top 5
    assert lines == [(5.0, 185.0)]
