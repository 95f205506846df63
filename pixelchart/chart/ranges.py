"""Tick generation and value-to-pixel transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from ..core.errors import ChartConfigError

ValueFormatter = Callable[[float], str]


def float_value_formatter(value: float) -> str:
    """Format a value with two decimal places."""
    return f"{value:.2f}"


@dataclass(frozen=True)
class Range:
    """A value span bound to a pixel domain.

    Attributes:
        min: Smallest value in the span
        max: Largest value in the span
        domain: Pixel length the span is mapped onto
        formatter: Converts values to label text; defaults to two decimals
    """

    min: float = 0.0
    max: float = 0.0
    domain: int = 0
    formatter: ValueFormatter | None = None

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ChartConfigError(
                f"Range min {self.min} is greater than max {self.max}"
            )

    def is_zero(self) -> bool:
        """True when the range was never configured and must come from data."""
        return self.min == 0 and self.max == 0 and self.domain == 0

    @property
    def delta(self) -> float:
        return self.max - self.min

    def format(self, value: float) -> str:
        if self.formatter is not None:
            return self.formatter(value)
        return float_value_formatter(value)

    def translate(self, value: float) -> float:
        """Map a value linearly onto ``[0, domain]``.

        Values outside ``[min, max]`` map outside the domain; nothing is clamped.
        A zero-width span maps every value to 0.
        """
        delta = self.delta
        if delta == 0:
            return 0.0
        return (value - self.min) / delta * self.domain


def slices(count: int, total: float) -> list[float]:
    """Split ``[0, total]`` into ``count`` equal steps.

    Args:
        count: Number of steps (0 yields a single tick at 0)
        total: Length of the span being divided

    Returns:
        ``count + 1`` evenly spaced values starting at 0 and ending at ``total``
    """
    if count <= 0:
        return [0.0]
    return np.linspace(0.0, float(total), count + 1).tolist()


def tick_count(domain: float, min_spacing: float, max_count: int) -> int:
    """Number of ticks that fit in ``domain`` pixels at ``min_spacing`` apart."""
    if min_spacing <= 0:
        return max_count
    count = int(math.floor(domain / min_spacing))
    if count < 0:
        return 0
    return min(count, max_count)


def paired_ticks(count: int, value_range: Range) -> list[tuple[float, float]]:
    """Pair value ticks with pixel ticks, stopping at the shorter sequence.

    Returns:
        List of ``(value, pixel_offset)`` tuples where value already includes
        the range minimum
    """
    range_ticks = slices(count, value_range.delta)
    domain_ticks = slices(count, value_range.domain)
    return [
        (rv + value_range.min, dv)
        for rv, dv in zip(range_ticks, domain_ticks)
    ]
