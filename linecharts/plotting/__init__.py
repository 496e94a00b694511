"""Plotting components for the chart views.

This package contains the matplotlib-facing pieces:
- multi_line_view: Multi-line and single-line chart views
- magnifier: Magnifier overlay with the values under the pointer
- drag_gesture: Drag tracking on a canvas
"""

from .drag_gesture import DragGestureHandler
from .magnifier import MagnifierAppearance, MagnifierRenderer, format_values
from .multi_line_view import LineView, MultiLineView

__all__ = [
    "DragGestureHandler",
    "MagnifierAppearance",
    "MagnifierRenderer",
    "format_values",
    "LineView",
    "MultiLineView",
]
