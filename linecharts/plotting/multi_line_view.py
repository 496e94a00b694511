"""Multi-line chart view with a drag magnifier.

Holds the dataset, the chart style and the mutable drag state. Rendering
draws the title, legend text, guide lines, one gradient line per series,
indicator knobs and the magnifier from a snapshot of that state and an
explicit colour scheme.
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

import numpy as np
from matplotlib.collections import LineCollection

from ..calculations import closest_point, global_bounds, legend_values, normalize, selected_values
from ..config import (
    CHART_HEIGHT,
    DEFAULT_VALUE_SPECIFIER,
    INDICATOR_Y,
    LOG_THROTTLE_INTERVAL,
    PLOT_INSET,
)
from ..data_model import ChartDataset, InteractionState, SeriesTriple
from ..styles import ChartStyle, ColorScheme, Colors, GradientColor, Styles, resolve_style
from .drag_gesture import DragGestureHandler
from .magnifier import MagnifierRenderer, validate_value_specifier

if TYPE_CHECKING:
    import matplotlib.axes
    import matplotlib.figure
    from matplotlib.backend_bases import FigureCanvasBase


class MultiLineView:
    """Chart of several series sharing one vertical scale."""

    def __init__(
        self,
        data: Sequence[SeriesTriple],
        title: Optional[str] = None,
        legend: Optional[str] = None,
        style: ChartStyle = Styles.LINE_CHART_STYLE_ONE,
        value_specifier: Optional[str] = DEFAULT_VALUE_SPECIFIER,
    ):
        """Initialize the chart.

        Args:
            data: Ordered ``(values, label, gradient)`` triples, one per series
            title: Optional title drawn above the plot
            legend: Optional caption drawn under the title
            style: Light-mode style; its ``dark_mode_style`` is used for dark mode
            value_specifier: printf-style format for magnifier values
        """
        self.data = ChartDataset.from_triples(data)
        self.title = title
        self.legend = legend
        self.style = style
        self.dark_mode_style = style.dark_mode_style or Styles.LINE_VIEW_DARK_MODE
        self.value_specifier = validate_value_specifier(value_specifier or DEFAULT_VALUE_SPECIFIER)

        self.state = InteractionState(current_values=[0.0 for _ in self.data])

        # Render targets, set by render()
        self.figure: Optional[matplotlib.figure.Figure] = None
        self.plot_ax: Optional[matplotlib.axes.Axes] = None
        self.scheme = ColorScheme.LIGHT
        self.magnifier: Optional[MagnifierRenderer] = None
        self.series_lines: List[LineCollection] = []
        self.indicator_points: List[Any] = []

        self.gesture: Optional[DragGestureHandler] = None
        self._move_count = 0

    @property
    def global_min(self) -> float:
        return global_bounds(self.data)[0]

    @property
    def global_max(self) -> float:
        return global_bounds(self.data)[1]

    @property
    def plot_width(self) -> float:
        """Width in pixels of the last rendered plot area (0 before rendering)."""
        if self.plot_ax is None:
            return 0.0
        return float(self.plot_ax.bbox.width)

    @property
    def plot_height(self) -> float:
        if self.plot_ax is None:
            return float(CHART_HEIGHT)
        return float(self.plot_ax.bbox.height)

    # ------------------------------------------------------------------
    # Interaction

    def on_drag_changed(self, x: float, y: float, plot_width: Optional[float] = None) -> List[float]:
        """Handle a drag start or move at ``(x, y)`` inside the plot area.

        Returns the newly selected value of each series.
        """
        width = self.plot_width if plot_width is None else plot_width

        self.state.drag_location = (x, y)
        self.state.indicator_location = (max(x - PLOT_INSET, 0), INDICATOR_Y)
        self.state.opacity = 1
        self.state.hide_horizontal_lines = True
        self.state.current_values = selected_values(self.data, x, width)

        self._move_count += 1
        if self._move_count % LOG_THROTTLE_INTERVAL == 1:
            print(f"[Drag] x={x:.1f} width={width:.1f} values={self.state.current_values}")

        return self.state.current_values

    def on_drag_ended(self) -> None:
        """Hide the magnifier and bring the guide lines back.

        The selected values keep their last contents.
        """
        self.state.opacity = 0
        self.state.hide_horizontal_lines = False
        print(f"[Drag] Ended with values={self.state.current_values}")

    def on_appear(self) -> None:
        self.state.show_legend = len(self.data) > 0

    # ------------------------------------------------------------------
    # Rendering

    def render(
        self,
        fig: matplotlib.figure.Figure,
        scheme: ColorScheme = ColorScheme.LIGHT,
    ) -> matplotlib.axes.Axes:
        """Draw the whole chart on ``fig`` for the given colour scheme.

        Args:
            fig: Figure to draw on (cleared first)
            scheme: Light or dark appearance

        Returns:
            The plot axes, whose data coordinates are pixels of the plot area
        """
        style = resolve_style(self.style, scheme)
        self.figure = fig
        self.scheme = scheme

        fig.clear()
        fig.set_facecolor(style.background_color)

        fig_h = max(fig.bbox.height, 1.0)
        plot_fraction = min(CHART_HEIGHT / fig_h, 0.75)
        ax = fig.add_axes((0.0, 0.0, 1.0, plot_fraction))
        ax.set_axis_off()
        ax.set_facecolor(style.background_color)
        self.plot_ax = ax

        width = self.plot_width
        height = self.plot_height
        ax.set_xlim(0, width)
        ax.set_ylim(0, height)

        self._draw_header(fig, style, plot_fraction)

        if not self.state.show_legend and len(self.data):
            self.on_appear()

        minimum, maximum = global_bounds(self.data)

        if self.state.show_legend and not self.state.hide_horizontal_lines:
            self._draw_guide_lines(ax, style, scheme, minimum, maximum, height)

        self.series_lines = []
        for series in self.data:
            line = self._draw_series(ax, series.only_points(), series.get_gradient(), minimum, maximum, width, height)
            if line is not None:
                self.series_lines.append(line)

        self.indicator_points = []
        if self.state.hide_horizontal_lines:
            self._draw_indicators(ax, minimum, maximum, width, height)

        self.magnifier = MagnifierRenderer(ax, self.value_specifier)
        self.magnifier.render(
            self.state.current_values,
            self.state.drag_location[0],
            scheme,
            self.state.opacity,
        )

        return ax

    def _draw_header(self, fig: matplotlib.figure.Figure, style: ChartStyle, plot_fraction: float) -> None:
        top = 0.97
        if self.title is not None:
            fig.text(0.02, top, self.title, color=style.text_color,
                     fontsize=20, fontweight="bold", ha="left", va="top")
            top -= 0.1
        if self.legend is not None:
            fig.text(0.02, max(top, plot_fraction), self.legend, color=style.legend_text_color,
                     fontsize=12, ha="left", va="top")

    def _draw_guide_lines(
        self,
        ax: matplotlib.axes.Axes,
        style: ChartStyle,
        scheme: ColorScheme,
        minimum: float,
        maximum: float,
        height: float,
    ) -> None:
        line_color = Colors.LEGEND_DARK_COLOR if scheme is ColorScheme.DARK else Colors.LEGEND_COLOR
        values = legend_values(minimum, maximum)
        for value, y in zip(values, normalize(values, minimum, maximum, height)):
            ax.axhline(y, xmin=PLOT_INSET / max(self.plot_width, 1.0), color=line_color,
                       linestyle=(0, (5, 10)), linewidth=1.5, zorder=1)
            ax.text(0, y, f"{value:.2f}", color=style.legend_text_color,
                    fontsize=8, ha="left", va="center", zorder=2)

    def _series_x(self, count: int, width: float) -> np.ndarray:
        frame_width = width - PLOT_INSET
        if count == 1:
            return np.array([float(PLOT_INSET)])
        return PLOT_INSET + np.arange(count) * (frame_width / (count - 1))

    def _draw_series(
        self,
        ax: matplotlib.axes.Axes,
        points: np.ndarray,
        gradient: GradientColor,
        minimum: float,
        maximum: float,
        width: float,
        height: float,
    ) -> Optional[LineCollection]:
        if len(points) == 0:
            return None

        xs = self._series_x(len(points), width)
        ys = normalize(points, minimum, maximum, height)
        if len(points) == 1:
            ax.scatter(xs, ys, color=gradient.start, s=20, zorder=3)
            return None

        segments = np.stack([np.column_stack([xs[:-1], ys[:-1]]), np.column_stack([xs[1:], ys[1:]])], axis=1)
        line = LineCollection(segments, cmap=gradient.colormap(), linewidths=3, capstyle="round", zorder=3)
        line.set_array(np.linspace(0.0, 1.0, len(segments)))
        ax.add_collection(line)
        return line

    def _draw_indicators(
        self,
        ax: matplotlib.axes.Axes,
        minimum: float,
        maximum: float,
        width: float,
        height: float,
    ) -> None:
        indicator_x = self.state.indicator_location[0]
        frame_width = width - PLOT_INSET
        for series in self.data:
            points = series.only_points()
            index = closest_point(points, indicator_x, frame_width)
            if index < 0:
                continue
            x = self._series_x(len(points), width)[index]
            y = normalize(points, minimum, maximum, height)[index]
            knob = ax.scatter([x], [y], color=Colors.INDICATOR_KNOB, s=90, zorder=101,
                              edgecolors=Colors.WHITE, linewidths=3)
            self.indicator_points.append(knob)

    # ------------------------------------------------------------------
    # Canvas wiring

    def connect(self, canvas: FigureCanvasBase, scheme: Optional[ColorScheme] = None) -> DragGestureHandler:
        """Drive the drag state from ``canvas`` mouse events and redraw on each change."""
        if scheme is not None:
            self.scheme = scheme
        if self.plot_ax is None or self.figure is not canvas.figure:
            self.render(canvas.figure, self.scheme)

        self.disconnect()
        self.gesture = DragGestureHandler(
            canvas,
            axes_provider=lambda: self.plot_ax,
            on_changed=self._handle_drag_changed,
            on_ended=self._handle_drag_ended,
        )
        print(f"[Chart] Connected to canvas with {len(self.data)} series")
        return self.gesture

    def disconnect(self) -> None:
        if self.gesture is not None:
            self.gesture.disconnect()
            self.gesture = None

    def redraw(self, scheme: Optional[ColorScheme] = None) -> None:
        """Re-render onto the current figure and schedule a canvas draw."""
        if self.figure is None:
            return
        self.render(self.figure, scheme or self.scheme)
        if self.figure.canvas is not None:
            self.figure.canvas.draw_idle()

    def _handle_drag_changed(self, x: float, y: float) -> None:
        try:
            self.on_drag_changed(x, y)
            self.redraw()
        except Exception as e:
            print(f"[Chart] Error handling drag: {e}")
            traceback.print_exc()
            if self.magnifier is not None:
                self.magnifier.clear()

    def _handle_drag_ended(self) -> None:
        try:
            self.on_drag_ended()
            self.redraw()
        except Exception as e:
            print(f"[Chart] Error ending drag: {e}")
            traceback.print_exc()


class LineView(MultiLineView):
    """Single-series chart shaded with the style's own gradient."""

    def __init__(
        self,
        data: Sequence[float],
        title: Optional[str] = None,
        legend: Optional[str] = None,
        style: ChartStyle = Styles.LINE_CHART_STYLE_ONE,
        value_specifier: Optional[str] = DEFAULT_VALUE_SPECIFIER,
    ):
        super().__init__(
            [(data, title or "", style.gradient())],
            title=title,
            legend=legend,
            style=style,
            value_specifier=value_specifier,
        )
