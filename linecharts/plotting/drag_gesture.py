"""Drag gesture tracking on a matplotlib canvas.

Turns press/move/release mouse events into drag callbacks carrying the
pointer position relative to the plot area's top-left corner.
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Tuple

if TYPE_CHECKING:
    import matplotlib.axes
    from matplotlib.backend_bases import FigureCanvasBase


class DragGestureHandler:
    """Reports drag changes and drag ends for one plot area."""

    def __init__(
        self,
        canvas: FigureCanvasBase,
        axes_provider: Callable[[], Optional[matplotlib.axes.Axes]],
        on_changed: Callable[[float, float], None],
        on_ended: Callable[[], None],
    ):
        """Initialize the drag gesture handler.

        Args:
            canvas: Canvas delivering mouse events
            axes_provider: Returns the current plot axes (it changes on every render)
            on_changed: Called with plot-area ``(x, y)`` on press and on each move
            on_ended: Called when the button is released
        """
        self.canvas = canvas
        self.axes_provider = axes_provider
        self.on_changed = on_changed
        self.on_ended = on_ended

        self.dragging = False
        self._cids: List[int] = [
            self.canvas.mpl_connect('button_press_event', self.on_press),
            self.canvas.mpl_connect('motion_notify_event', self.on_move),
            self.canvas.mpl_connect('button_release_event', self.on_release),
        ]

    def to_plot_coordinates(self, event: Any) -> Optional[Tuple[float, float]]:
        """Convert display pixels to plot-area pixels, y growing downwards.

        Returns None when there is no plot area yet.
        """
        ax = self.axes_provider()
        if ax is None or event.x is None or event.y is None:
            return None
        bbox = ax.bbox
        return float(event.x - bbox.x0), float(bbox.y1 - event.y)

    def on_press(self, event: Any) -> None:
        ax = self.axes_provider()
        if ax is None or event.inaxes is not ax:
            return

        location = self.to_plot_coordinates(event)
        if location is None:
            return

        self.dragging = True
        print(f"[Drag] Started at x={location[0]:.1f}")
        self._notify_changed(location)

    def on_move(self, event: Any) -> None:
        if not self.dragging:
            return

        location = self.to_plot_coordinates(event)
        if location is None:
            return
        self._notify_changed(location)

    def on_release(self, event: Any) -> None:
        if not self.dragging:
            return

        self.dragging = False
        try:
            self.on_ended()
        except Exception as e:
            print(f"[Drag] Error in drag-end callback: {e}")
            traceback.print_exc()

    def _notify_changed(self, location: Tuple[float, float]) -> None:
        try:
            self.on_changed(*location)
        except Exception as e:
            print(f"[Drag] Error in drag callback: {e}")
            traceback.print_exc()

    def disconnect(self) -> None:
        """Stop listening to the canvas."""
        for cid in self._cids:
            self.canvas.mpl_disconnect(cid)
        self._cids.clear()
        self.dragging = False
