"""PNG output through matplotlib's Agg canvas."""

from __future__ import annotations

from typing import BinaryIO

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.font_manager import FontProperties
from matplotlib.patches import PathPatch
from matplotlib.path import Path as MplPath

from ..core.logging_config import get_logger
from .fonts import Font, open_face, text_width

logger = get_logger(__name__)

DEFAULT_DPI = 72.0


class AggRenderer:
    """Renderer that draws onto a matplotlib figure sized in pixels.

    The figure holds one borderless axes whose data coordinates equal pixel
    coordinates, origin top-left. Line widths and font sizes are given in
    pixels and converted to points for matplotlib.
    """

    def __init__(self, width: int, height: int, dpi: float = DEFAULT_DPI):
        self.width = width
        self.height = height
        self.dpi = dpi
        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        FigureCanvasAgg(self.figure)
        self.ax = self.figure.add_axes((0, 0, 1, 1))
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()

        self.fill_color = "#ffffff"
        self.stroke_color = "#000000"
        self.line_width = 1.0
        self.font: Font | None = None
        self.font_size = 10.0
        self.font_color = "#000000"
        self._face = None
        self._vertices: list[tuple[float, float]] = []
        self._codes: list[int] = []
        self._subpath_start: tuple[float, float] | None = None

    @classmethod
    def provider(cls, dpi: float = DEFAULT_DPI):
        """Renderer provider bound to ``dpi``."""

        def _provide(width: int, height: int) -> AggRenderer:
            return cls(width, height, dpi=dpi)

        return _provide

    def _points(self, pixels: float) -> float:
        return pixels * 72.0 / self.dpi

    def set_fill_color(self, color: str) -> None:
        self.fill_color = color

    def set_stroke_color(self, color: str) -> None:
        self.stroke_color = color

    def set_line_width(self, width: float) -> None:
        self.line_width = width

    def set_font(self, font: Font) -> None:
        self.font = font
        self._face = open_face(font)

    def set_font_size(self, size: float) -> None:
        self.font_size = size

    def set_font_color(self, color: str) -> None:
        self.font_color = color

    def move_to(self, x: float, y: float) -> None:
        self._vertices.append((x, y))
        self._codes.append(MplPath.MOVETO)
        self._subpath_start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        if self._subpath_start is None:
            self.move_to(x, y)
            return
        self._vertices.append((x, y))
        self._codes.append(MplPath.LINETO)

    def close(self) -> None:
        if self._subpath_start is None:
            return
        self._vertices.append(self._subpath_start)
        self._codes.append(MplPath.CLOSEPOLY)

    def _take_path(self) -> MplPath | None:
        if not self._vertices:
            return None
        path = MplPath(self._vertices, self._codes)
        self._vertices = []
        self._codes = []
        self._subpath_start = None
        return path

    def stroke(self) -> None:
        path = self._take_path()
        if path is None:
            return
        self.ax.add_patch(
            PathPatch(
                path,
                fill=False,
                edgecolor=self.stroke_color,
                linewidth=self._points(self.line_width),
            )
        )

    def fill_stroke(self) -> None:
        path = self._take_path()
        if path is None:
            return
        self.ax.add_patch(
            PathPatch(
                path,
                facecolor=self.fill_color,
                edgecolor=self.stroke_color,
                linewidth=self._points(self.line_width),
            )
        )

    def measure_text(self, text: str) -> int:
        if self._face is None:
            return 0
        return text_width(self._face, self.font_size, text)

    def text(self, text: str, x: float, y: float) -> None:
        props = FontProperties(
            fname=self.font.path if self.font else None,
            size=self._points(self.font_size),
        )
        self.ax.text(
            x,
            y,
            text,
            fontproperties=props,
            color=self.font_color,
            ha="left",
            va="baseline",
        )

    def save(self, sink: BinaryIO) -> None:
        self.figure.savefig(sink, format="png", dpi=self.dpi)
        logger.debug("PNG written", extra={"width": self.width, "height": self.height})
