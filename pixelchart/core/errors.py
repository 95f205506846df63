"""Exception types raised by the chart pipeline."""

from __future__ import annotations


class ChartError(Exception):
    """Base class for chart rendering failures."""

    pass


class ChartConfigError(ChartError, ValueError):
    """Raised when a chart cannot be rendered as configured."""

    pass


class CanvasSizeError(ChartConfigError):
    """Raised when padding and decorations leave no room for the plot area."""

    def __init__(self, width: int, height: int, message: str | None = None):
        self.width = width
        self.height = height
        super().__init__(
            message
            or f"Canvas box has no drawable area ({width}x{height}); "
            "increase the chart size or reduce padding"
        )


class DefinitionError(ChartConfigError):
    """Raised when a chart definition file is malformed."""

    pass


class FontError(ChartError, RuntimeError):
    """Raised when a font cannot be located or loaded."""

    pass
