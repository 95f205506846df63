"""Font lookup and text measurement backed by matplotlib's FreeType bindings.

A :class:`Font` is an immutable handle to a font file and can be shared
between concurrent renders. The FreeType face used for measuring is opened
per renderer with :func:`open_face` because faces carry mutable state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path

from matplotlib import font_manager
from matplotlib.ft2font import FT2Font

from ..core.config import get_settings
from ..core.errors import FontError
from ..core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans"

# Sizes are pixels; measuring at 72 dpi makes one point equal one pixel.
MEASURE_DPI = 72


@dataclass(frozen=True)
class Font:
    path: str
    family: str


def load_font(path: str | Path) -> Font:
    """Load a TrueType/OpenType font file.

    Raises:
        FontError: If the file is missing or FreeType cannot read it
    """
    font_path = Path(path)
    if not font_path.is_file():
        logger.error("Font file not found", extra={"font_path": str(font_path)})
        raise FontError(f"Font file not found: {font_path}")
    try:
        face = FT2Font(str(font_path))
    except (OSError, RuntimeError, ValueError) as e:
        logger.error("Failed to load font", extra={"font_path": str(font_path), "error": str(e)})
        raise FontError(f"Failed to load font {font_path}: {e}") from e
    return Font(path=str(font_path), family=face.family_name)


def get_default_font() -> Font:
    """Return the configured font, or matplotlib's bundled sans-serif font.

    ``PIXELCHART_FONT_PATH`` takes precedence when set.

    Raises:
        FontError: If no usable font can be found
    """
    settings = get_settings()
    if settings.font_path:
        return load_font(settings.font_path)
    try:
        path = font_manager.findfont(
            font_manager.FontProperties(family=DEFAULT_FONT_FAMILY),
            fallback_to_default=False,
        )
    except ValueError as e:
        logger.error("Default font lookup failed", extra={"family": DEFAULT_FONT_FAMILY})
        raise FontError(f"Default font '{DEFAULT_FONT_FAMILY}' not found: {e}") from e
    return load_font(path)


def open_face(font: Font) -> FT2Font:
    return FT2Font(font.path)


def text_width(face: FT2Font, size: float, text: str) -> int:
    """Width of ``text`` in whole pixels at ``size`` pixels."""
    if not text:
        return 0
    face.set_size(size, MEASURE_DPI)
    face.set_text(text, 0.0)
    width, _ = face.get_width_height()
    return int(math.ceil(width / 64.0))
