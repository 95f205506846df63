from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """Pixel rectangle; width and height are derived from the edges."""

    top: int
    left: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0
