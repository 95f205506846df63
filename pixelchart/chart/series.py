"""Series data shapes consumed by the chart.

A series is anything that satisfies the :class:`Series` protocol. Two shapes
ship with the package: :class:`ContinuousSeries` for numeric x values and
:class:`TimeSeries` for datetime x values.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from .ranges import ValueFormatter, float_value_formatter
from .style import Style

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


def time_value_formatter(value: float, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Format POSIX seconds as a UTC date."""
    return datetime.fromtimestamp(value, tz=timezone.utc).strftime(date_format)


def time_formatter(date_format: str) -> ValueFormatter:
    """Build a time formatter bound to ``date_format``."""

    def _format(value: float) -> str:
        return time_value_formatter(value, date_format)

    return _format


def _timestamp(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


@runtime_checkable
class Series(Protocol):
    """Capabilities the layout and drawing passes need from a series."""

    def __len__(self) -> int: ...

    def get_value(self, index: int) -> tuple[float, float]: ...

    def get_x_formatter(self) -> ValueFormatter: ...

    def get_y_formatter(self) -> ValueFormatter: ...

    def get_style(self) -> Style: ...


def _check_lengths(name: str, x_values: Sequence, y_values: Sequence) -> None:
    if len(x_values) != len(y_values):
        raise ValueError(
            f"Series '{name}' has {len(x_values)} x values but {len(y_values)} y values"
        )


@dataclass(frozen=True)
class ContinuousSeries:
    """Numeric x/y pairs."""

    name: str = ""
    x_values: Sequence[float] = ()
    y_values: Sequence[float] = ()
    style: Style = field(default_factory=Style)
    x_formatter: ValueFormatter | None = None
    y_formatter: ValueFormatter | None = None

    def __post_init__(self) -> None:
        _check_lengths(self.name, self.x_values, self.y_values)

    def __len__(self) -> int:
        return len(self.x_values)

    def get_value(self, index: int) -> tuple[float, float]:
        return float(self.x_values[index]), float(self.y_values[index])

    def get_x_formatter(self) -> ValueFormatter:
        return self.x_formatter or float_value_formatter

    def get_y_formatter(self) -> ValueFormatter:
        return self.y_formatter or float_value_formatter

    def get_style(self) -> Style:
        return self.style


@dataclass(frozen=True)
class TimeSeries:
    """Datetime x values paired with numeric y values.

    X values are exposed as POSIX seconds; naive datetimes are taken as UTC.
    """

    name: str = ""
    x_values: Sequence[datetime] = ()
    y_values: Sequence[float] = ()
    style: Style = field(default_factory=Style)
    date_format: str = DEFAULT_DATE_FORMAT
    y_formatter: ValueFormatter | None = None

    def __post_init__(self) -> None:
        _check_lengths(self.name, self.x_values, self.y_values)

    def __len__(self) -> int:
        return len(self.x_values)

    def get_value(self, index: int) -> tuple[float, float]:
        return _timestamp(self.x_values[index]), float(self.y_values[index])

    def get_x_formatter(self) -> ValueFormatter:
        return time_formatter(self.date_format)

    def get_y_formatter(self) -> ValueFormatter:
        return self.y_formatter or float_value_formatter

    def get_style(self) -> Style:
        return self.style
