"""Shared constants for chart layout, interaction and the preview app."""

from __future__ import annotations

# Plot area geometry (pixels)
PLOT_INSET = 30
HALF_INSET = PLOT_INSET / 2
CHART_HEIGHT = 240
INDICATOR_Y = 32

# Magnifier geometry
MAGNIFIER_WIDTH = 60
MAGNIFIER_HEIGHT_DARK = 260
MAGNIFIER_HEIGHT_LIGHT = 280
MAGNIFIER_CORNER_RADIUS = 16
MAGNIFIER_FONT_SIZE = 18
MAGNIFIER_OFFSET_Y = 36

# Value formatting
DEFAULT_VALUE_SPECIFIER = "%.1f"

# Horizontal guide lines drawn behind the series
LEGEND_LINE_COUNT = 5

# Only every Nth pointer-move event is logged
LOG_THROTTLE_INTERVAL = 50

# Preview data
SAMPLE_POINTS = [8, 23, 54, 32, 12, 37, 7, 23, 43]
SAMPLE_TITLE = "Line chart"
SAMPLE_LEGEND = "Basic"
