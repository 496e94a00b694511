"""Series, dataset and interaction state for the chart views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from .styles import GradientColor, GradientColors

SeriesTriple = Tuple[Sequence[float], str, GradientColor]


class MultiLineChartData:
    """One named series of values plus the gradient its line is drawn with."""

    def __init__(
        self,
        points: Iterable[float],
        label: str = "",
        gradient: GradientColor = GradientColors.ORANGE,
    ):
        self.points = np.asarray(list(points), dtype=float)
        self.label = label
        self.gradient = gradient

    def only_points(self) -> np.ndarray:
        """Return the raw values in insertion order."""
        return self.points

    def get_gradient(self) -> GradientColor:
        return self.gradient

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return f"MultiLineChartData(label={self.label!r}, points={len(self.points)})"


class ChartDataset:
    """Ordered collection of series; order is render and legend order."""

    def __init__(self, series: Iterable[MultiLineChartData] = ()):
        self.series: List[MultiLineChartData] = list(series)

    @classmethod
    def from_triples(cls, data: Iterable[SeriesTriple]) -> "ChartDataset":
        return cls(MultiLineChartData(points, label, gradient) for points, label, gradient in data)

    def __iter__(self) -> Iterator[MultiLineChartData]:
        return iter(self.series)

    def __len__(self) -> int:
        return len(self.series)

    def __getitem__(self, index: int) -> MultiLineChartData:
        return self.series[index]


IDLE = "idle"
DRAGGING = "dragging"


@dataclass
class InteractionState:
    """Mutable drag state owned by a chart view.

    Nothing here is persisted. ``current_values`` keeps its last contents
    when a drag ends.
    """

    drag_location: Tuple[float, float] = (0.0, 0.0)
    indicator_location: Tuple[float, float] = (0.0, 0.0)
    opacity: float = 0.0
    current_values: List[float] = field(default_factory=lambda: [0.0])
    hide_horizontal_lines: bool = False
    show_legend: bool = False

    @property
    def phase(self) -> str:
        return DRAGGING if self.opacity > 0 else IDLE
