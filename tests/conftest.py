"""Shared fixtures; charts render headless on the Agg backend."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pytest
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from linecharts.styles import GradientColors


@pytest.fixture
def figure() -> Figure:
    """A 400x400 pixel figure attached to an Agg canvas."""
    fig = Figure(figsize=(4, 4), dpi=100)
    FigureCanvasAgg(fig)
    return fig


@pytest.fixture
def two_series():
    return [
        ([1, 2, 3], "First", GradientColors.ORANGE),
        ([4, 5, 6], "Second", GradientColors.BLUE),
    ]
