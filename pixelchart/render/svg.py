"""SVG output rendered through a Jinja2 template."""

from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO

from jinja2 import Environment, FileSystemLoader

from ..core.logging_config import get_logger
from .fonts import Font, open_face, text_width

logger = get_logger(__name__)

TEMPLATE_NAME = "chart.svg.j2"


def _num(value: float) -> str:
    """Compact coordinate formatting: at most two decimals, no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _environment(templates_dir: Path | None = None) -> Environment:
    if templates_dir is None:
        templates_dir = Path(__file__).parent / "templates"
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["num"] = _num
    return env


class SvgRenderer:
    """Renderer that collects drawing commands as SVG elements."""

    def __init__(self, width: int, height: int, templates_dir: Path | None = None):
        self.width = width
        self.height = height
        self.env = _environment(templates_dir)

        self.fill_color = "#ffffff"
        self.stroke_color = "#000000"
        self.line_width = 1.0
        self.font: Font | None = None
        self.font_size = 10.0
        self.font_color = "#000000"
        self.elements: list[dict[str, Any]] = []
        self._face = None
        self._segments: list[str] = []

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
        self._segments.append(f"M {_num(x)} {_num(y)}")

    def line_to(self, x: float, y: float) -> None:
        command = "L" if self._segments else "M"
        self._segments.append(f"{command} {_num(x)} {_num(y)}")

    def close(self) -> None:
        if self._segments:
            self._segments.append("Z")

    def _take_path(self) -> str | None:
        if not self._segments:
            return None
        data = " ".join(self._segments)
        self._segments = []
        return data

    def stroke(self) -> None:
        data = self._take_path()
        if data is None:
            return
        self.elements.append(
            {
                "kind": "path",
                "d": data,
                "fill": "none",
                "stroke": self.stroke_color,
                "stroke_width": self.line_width,
            }
        )

    def fill_stroke(self) -> None:
        data = self._take_path()
        if data is None:
            return
        self.elements.append(
            {
                "kind": "path",
                "d": data,
                "fill": self.fill_color,
                "stroke": self.stroke_color,
                "stroke_width": self.line_width,
            }
        )

    def measure_text(self, text: str) -> int:
        if self._face is None:
            return 0
        return text_width(self._face, self.font_size, text)

    def text(self, text: str, x: float, y: float) -> None:
        self.elements.append(
            {
                "kind": "text",
                "text": text,
                "x": x,
                "y": y,
                "font_family": self.font.family if self.font else "sans-serif",
                "font_size": self.font_size,
                "fill": self.font_color,
            }
        )

    def render_document(self) -> str:
        template = self.env.get_template(TEMPLATE_NAME)
        return template.render(width=self.width, height=self.height, elements=self.elements)

    def save(self, sink: BinaryIO) -> None:
        sink.write(self.render_document().encode("utf-8"))
        logger.debug(
            "SVG written",
            extra={"width": self.width, "height": self.height, "elements": len(self.elements)},
        )
