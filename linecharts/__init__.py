"""Line and multi-line chart components with a drag magnifier."""

from .calculations import global_bounds, selected_value, selected_values, step_width
from .data_loader import DataLoadError, SeriesDataLoader
from .data_model import ChartDataset, InteractionState, MultiLineChartData
from .plotting import LineView, MagnifierRenderer, MultiLineView
from .styles import ChartStyle, ColorScheme, Colors, GradientColor, GradientColors, Styles

__all__ = [
    "global_bounds",
    "selected_value",
    "selected_values",
    "step_width",
    "DataLoadError",
    "SeriesDataLoader",
    "ChartDataset",
    "InteractionState",
    "MultiLineChartData",
    "LineView",
    "MagnifierRenderer",
    "MultiLineView",
    "ChartStyle",
    "ColorScheme",
    "Colors",
    "GradientColor",
    "GradientColors",
    "Styles",
]
