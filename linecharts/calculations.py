"""Numeric helpers for the chart views.

Covers the shared vertical scale across series and the mapping from a
horizontal pointer position to a data-point index in each series.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .config import HALF_INSET, LEGEND_LINE_COUNT, PLOT_INSET
from .data_model import MultiLineChartData

FALLBACK_VALUE = 0.0


def global_bounds(dataset: Iterable[MultiLineChartData]) -> Tuple[float, float]:
    """Return ``(min, max)`` over every point of every series.

    An empty dataset, or one whose series are all empty, yields ``(0.0, 0.0)``.
    """
    arrays = [series.only_points() for series in dataset]
    arrays = [values for values in arrays if len(values)]
    if not arrays:
        return 0.0, 0.0

    combined = np.concatenate(arrays)
    return float(np.min(combined)), float(np.max(combined))


def legend_values(minimum: float, maximum: float, count: int = LEGEND_LINE_COUNT) -> List[float]:
    """Evenly spaced guide-line values from ``minimum`` to ``maximum`` inclusive."""
    if count < 1:
        raise ValueError("Legend line count must be positive.")
    if count == 1:
        return [float(minimum)]
    return [float(v) for v in np.linspace(minimum, maximum, count)]


def normalize(points: Sequence[float], minimum: float, maximum: float, height: float) -> np.ndarray:
    """Map values to vertical pixel offsets inside a plot of ``height``.

    A flat range (``maximum == minimum``) places every point at 0.
    """
    values = np.asarray(points, dtype=float)
    if maximum == minimum:
        return np.zeros_like(values)
    step_height = height / (maximum - minimum)
    return (values - minimum) * step_height


def step_width(plot_width: float, point_count: int, inset: float = PLOT_INSET) -> float:
    """Horizontal distance between adjacent points of one series.

    A single-point series has an infinite step: the whole plot belongs to
    its only point.
    """
    if point_count < 1:
        raise ValueError("Step width needs at least one point.")
    if point_count == 1:
        return math.inf
    return (plot_width - inset) / (point_count - 1)


def index_for_offset(pointer_x: float, step: float, half_inset: float = HALF_INSET) -> int:
    """Index under ``pointer_x``: ``floor((pointer_x - half_inset) / step)``.

    The result may be out of range; callers decide what that means. An
    infinite step maps every pointer to index 0. A zero step has no index
    and returns -1.
    """
    if step == 0:
        return -1
    return int(math.floor((pointer_x - half_inset) / step))


def selected_value(points: Sequence[float], pointer_x: float, plot_width: float) -> float:
    """Value at the pointer, or ``FALLBACK_VALUE`` when the index is out of range."""
    count = len(points)
    if count == 0:
        return FALLBACK_VALUE

    index = index_for_offset(pointer_x, step_width(plot_width, count))
    if 0 <= index < count:
        return float(points[index])
    return FALLBACK_VALUE


def selected_values(
    dataset: Iterable[MultiLineChartData],
    pointer_x: float,
    plot_width: float,
) -> List[float]:
    """One selected value per series; each series uses its own step width."""
    return [selected_value(series.only_points(), pointer_x, plot_width) for series in dataset]


def closest_point(points: Sequence[float], x: float, plot_width: float) -> int:
    """Index of the point the indicator knob snaps to, clamped to the series.

    Returns -1 for an empty series.
    """
    count = len(points)
    if count == 0:
        return -1
    if count == 1 or plot_width <= 0:
        return 0
    step = plot_width / (count - 1)
    index = int(math.floor(x / step + 0.5))
    return max(0, min(index, count - 1))
