"""Curve data drawn by the equalizer, phase and soft-clip charts."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

from .plot import Plot

__all__ = [
    "AREA_FLOOR",
    "magnitude_sum",
    "magnitude_area",
    "phase_sum",
    "sine_table",
    "soft_clip_curves",
]

# Lower edge in dB of the filled area under the summed magnitude.
AREA_FLOOR = -30.0


def _accumulate(
    plots: Iterable[Plot], point_count: int, curve: Callable[[Plot], Sequence[float]]
) -> list[float]:
    if point_count < 0:
        raise ValueError("point_count must not be negative")
    total = [0.0] * point_count
    for plot in plots:
        values = curve(plot)
        if len(values) > point_count:
            raise ValueError(
                f"plot has {len(values)} points, more than the chart's {point_count}"
            )
        for i, y in enumerate(values):
            total[i] += y
    return total


def magnitude_sum(plots: Iterable[Plot], point_count: int) -> list[float]:
    """Sum of the combined magnitude curves of all plots, in dB, one value per point."""
    return _accumulate(plots, point_count, Plot.mag_sum)


def magnitude_area(plots: Iterable[Plot], point_count: int) -> list[tuple[float, float]]:
    """Closed polygon enclosing the summed magnitude down to ``AREA_FLOOR``.

    The points run along the curve (x is the point index), step one past its
    end, drop to the floor, run back to x = -1, rise to the first value and
    close at the first point.
    """
    if point_count <= 0:
        raise ValueError("point_count must be positive")
    ys = magnitude_sum(plots, point_count)
    polygon = [(float(i), y) for i, y in enumerate(ys)]
    last_x, last_y = polygon[-1]
    first = polygon[0]
    polygon.append((last_x + 1.0, last_y))
    polygon.append((last_x + 1.0, AREA_FLOOR))
    polygon.append((-1.0, AREA_FLOOR))
    polygon.append((-1.0, first[1]))
    polygon.append(first)
    return polygon


def phase_sum(plots: Iterable[Plot], point_count: int) -> list[float]:
    """Sum of the combined phase curves of all plots, in radians, one value per point."""
    return _accumulate(plots, point_count, Plot.phase_sum)


def sine_table(size: int = 360) -> list[float]:
    """One inverted sine period sampled at whole degrees: sin(-i degrees)."""
    if size < 0:
        raise ValueError("size must not be negative")
    return [math.sin(i * math.pi / -180.0) for i in range(size)]


def soft_clip_curves(
    input_range: float, clipping: float, size: int = 360
) -> tuple[list[float], list[float]]:
    """Input sine scaled by ``input_range`` and its cubic soft-clipped counterpart."""
    inputs = [s * input_range for s in sine_table(size)]
    factor = input_range * clipping / 3.0
    clipped = [x - factor * x**3 for x in inputs]
    return inputs, clipped