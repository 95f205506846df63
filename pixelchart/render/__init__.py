"""Renderer implementations and font support.

Usage:
    from pixelchart.render import renderer_for_format

    provider = renderer_for_format("svg")
    chart.render(provider, sink)
"""

from __future__ import annotations

from .agg import AggRenderer
from .base import Renderer, RendererProvider
from .fonts import Font, get_default_font, load_font
from .svg import SvgRenderer


def renderer_for_format(output_format: str, dpi: float | None = None) -> RendererProvider:
    """Pick a renderer provider for ``png`` or ``svg`` output.

    Raises:
        ValueError: If the format is not supported
    """
    fmt = output_format.lower()
    if fmt == "png":
        return AggRenderer.provider(dpi) if dpi else AggRenderer
    if fmt == "svg":
        return SvgRenderer
    raise ValueError(f"Unsupported output format: {output_format}. Use png or svg.")


__all__ = [
    "AggRenderer",
    "Font",
    "Renderer",
    "RendererProvider",
    "SvgRenderer",
    "get_default_font",
    "load_font",
    "renderer_for_format",
]
