"""Visual attributes with explicit -> caller default -> hardcoded fallback."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar

T = TypeVar("T")

FALLBACK_COLOR = "#000000"
FALLBACK_STROKE_WIDTH = 1.0
FALLBACK_FONT_SIZE = 10.0
FALLBACK_PADDING = 0


def resolve(explicit: T | None, default: T | None, fallback: T) -> T:
    """Pick the first value that is set.

    Args:
        explicit: Value configured on the style itself
        default: Value supplied by the caller for this use site
        fallback: Hardcoded value used when neither is set

    Returns:
        The resolved attribute value
    """
    if explicit is not None:
        return explicit
    if default is not None:
        return default
    return fallback


@dataclass(frozen=True)
class Padding:
    top: int | None = None
    left: int | None = None
    right: int | None = None
    bottom: int | None = None

    def get_top(self, default: int | None = None) -> int:
        return resolve(self.top, default, FALLBACK_PADDING)

    def get_left(self, default: int | None = None) -> int:
        return resolve(self.left, default, FALLBACK_PADDING)

    def get_right(self, default: int | None = None) -> int:
        return resolve(self.right, default, FALLBACK_PADDING)

    def get_bottom(self, default: int | None = None) -> int:
        return resolve(self.bottom, default, FALLBACK_PADDING)


@dataclass(frozen=True)
class Style:
    """Drawing attributes for one chart element.

    Every attribute is optional; ``None`` means "use the caller's default".
    ``show`` toggles elements that are off unless requested (title, axes,
    final value labels).
    """

    show: bool = False
    stroke_color: str | None = None
    stroke_width: float | None = None
    fill_color: str | None = None
    font_size: float | None = None
    font_color: str | None = None
    padding: Padding = field(default_factory=Padding)

    def get_stroke_color(self, default: str | None = None) -> str:
        return resolve(self.stroke_color, default, FALLBACK_COLOR)

    def get_stroke_width(self, default: float | None = None) -> float:
        return resolve(self.stroke_width, default, FALLBACK_STROKE_WIDTH)

    def get_fill_color(self, default: str | None = None) -> str:
        return resolve(self.fill_color, default, FALLBACK_COLOR)

    def get_font_size(self, default: float | None = None) -> float:
        return resolve(self.font_size, default, FALLBACK_FONT_SIZE)

    def get_font_color(self, default: str | None = None) -> str:
        return resolve(self.font_color, default, FALLBACK_COLOR)
