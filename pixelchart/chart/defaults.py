"""Default sizes, paddings and colors used when a style leaves a value unset."""

from __future__ import annotations

from dataclasses import dataclass, field

from .style import Padding

# Ordered palette for series without an explicit stroke color.
SERIES_COLORS: tuple[str, ...] = (
    "#0074d9",  # blue
    "#00d974",  # green
    "#d90074",  # magenta
    "#ff851b",  # orange
    "#7f3fbf",  # purple
)


@dataclass(frozen=True)
class ChartDefaults:
    """Immutable table of fallback values consulted during a render."""

    chart_width: int = 1024
    chart_height: int = 400

    stroke_width: float = 1.0
    axis_line_width: float = 1.0
    font_size: float = 10.0
    axis_font_size: float = 10.0
    title_font_size: float = 18.0
    final_label_font_size: float = 10.0

    title_top: int = 10
    x_axis_margin: int = 10
    final_label_delta_width: int = 10
    estimated_x_label_width: int = 60
    min_tick_horizontal_spacing: int = 20
    min_tick_vertical_spacing: int = 20
    max_tick_count: int = 30

    background_padding: Padding = field(
        default_factory=lambda: Padding(top=5, left=5, right=5, bottom=5)
    )
    final_label_padding: Padding = field(
        default_factory=lambda: Padding(top=5, left=0, right=5, bottom=5)
    )

    background_color: str = "#ffffff"
    background_stroke_color: str = "#ffffff"
    canvas_color: str = "#ffffff"
    canvas_stroke_color: str = "#ffffff"
    axis_color: str = "#333333"
    text_color: str = "#333333"
    final_label_background_color: str = "#ffffff"

    series_colors: tuple[str, ...] = SERIES_COLORS

    def series_color(self, index: int) -> str:
        """Palette color for the series at ``index``, wrapping around."""
        return self.series_colors[index % len(self.series_colors)]


DEFAULTS = ChartDefaults()
