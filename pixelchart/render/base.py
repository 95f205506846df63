"""Drawing interface the chart pipeline issues commands against."""

from __future__ import annotations

from typing import BinaryIO, Callable, Protocol

from .fonts import Font


class Renderer(Protocol):
    """A single-use drawing surface.

    Coordinates are pixels with the origin at the top-left corner. Path
    commands accumulate until ``stroke`` or ``fill_stroke`` paints and clears
    the path. ``save`` is called exactly once, after all drawing.
    """

    def set_fill_color(self, color: str) -> None: ...

    def set_stroke_color(self, color: str) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_font(self, font: Font) -> None: ...

    def set_font_size(self, size: float) -> None: ...

    def set_font_color(self, color: str) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close(self) -> None: ...

    def stroke(self) -> None: ...

    def fill_stroke(self) -> None: ...

    def measure_text(self, text: str) -> int: ...

    def text(self, text: str, x: float, y: float) -> None: ...

    def save(self, sink: BinaryIO) -> None: ...


RendererProvider = Callable[[int, int], Renderer]
