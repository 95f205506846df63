"""Shared fixtures: a renderer fake that records every drawing call."""

from __future__ import annotations

from typing import Any, BinaryIO

import pytest

from pixelchart.render.fonts import Font

CHAR_WIDTH = 6

TEST_FONT = Font(path="/nonexistent/test.ttf", family="Test Sans")


class RecordingRenderer:
    """Renderer fake that measures text at a fixed width per character."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.saved = 0

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def set_fill_color(self, color: str) -> None:
        self._record("set_fill_color", color)

    def set_stroke_color(self, color: str) -> None:
        self._record("set_stroke_color", color)

    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)

    def set_font(self, font: Font) -> None:
        self._record("set_font", font)

    def set_font_size(self, size: float) -> None:
        self._record("set_font_size", size)

    def set_font_color(self, color: str) -> None:
        self._record("set_font_color", color)

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def close(self) -> None:
        self._record("close")

    def stroke(self) -> None:
        self._record("stroke")

    def fill_stroke(self) -> None:
        self._record("fill_stroke")

    def measure_text(self, text: str) -> int:
        self._record("measure_text", text)
        return CHAR_WIDTH * len(text)

    def text(self, text: str, x: float, y: float) -> None:
        self._record("text", text, x, y)

    def save(self, sink: BinaryIO) -> None:
        self._record("save", sink)
        self.saved += 1

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def args_of(self, name: str) -> list[tuple[Any, ...]]:
        return [args for n, args in self.calls if n == name]


class RecordingProvider:
    """Renderer provider that keeps every renderer it hands out."""

    def __init__(self) -> None:
        self.renderers: list[RecordingRenderer] = []

    def __call__(self, width: int, height: int) -> RecordingRenderer:
        r = RecordingRenderer(width, height)
        self.renderers.append(r)
        return r

    @property
    def last(self) -> RecordingRenderer:
        return self.renderers[-1]


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def recorder() -> RecordingRenderer:
    return RecordingRenderer(400, 300)
