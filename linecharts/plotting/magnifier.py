"""Magnifier overlay showing the values under the drag position.

Draws a rounded box with one formatted value per series that follows the
pointer horizontally. The box has two looks, picked by the colour scheme
passed in at render time: a white-bordered outline for dark mode and a
white shadowed card for light mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple

from matplotlib import patheffects
from matplotlib.patches import FancyBboxPatch
from matplotlib.transforms import IdentityTransform

from ..config import (
    DEFAULT_VALUE_SPECIFIER,
    LOG_THROTTLE_INTERVAL,
    MAGNIFIER_CORNER_RADIUS,
    MAGNIFIER_FONT_SIZE,
    MAGNIFIER_HEIGHT_DARK,
    MAGNIFIER_HEIGHT_LIGHT,
    MAGNIFIER_OFFSET_Y,
    MAGNIFIER_WIDTH,
)
from ..styles import ColorScheme, Colors

if TYPE_CHECKING:
    import matplotlib.axes


def validate_value_specifier(value_specifier: str) -> str:
    """Check that ``value_specifier`` formats a float printf-style."""
    try:
        value_specifier % 0.0
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid value specifier {value_specifier!r}: {e}") from e
    return value_specifier


def format_values(values: Sequence[float], value_specifier: str = DEFAULT_VALUE_SPECIFIER) -> str:
    """Format each value with ``value_specifier``, one per line in series order."""
    validate_value_specifier(value_specifier)
    return "\n".join(value_specifier % value for value in values)


@dataclass(frozen=True)
class MagnifierAppearance:
    """Visual treatment of the magnifier box for one colour scheme."""

    text_color: str
    height: float
    face_color: str = "none"
    edge_color: str = "none"
    line_width: float = 0.0
    shadow_color: Optional[str] = None
    shadow_offset: Tuple[float, float] = (0.0, 0.0)
    width: float = MAGNIFIER_WIDTH
    corner_radius: float = MAGNIFIER_CORNER_RADIUS
    font_size: float = MAGNIFIER_FONT_SIZE

    @classmethod
    def for_scheme(cls, scheme: ColorScheme) -> "MagnifierAppearance":
        if scheme is ColorScheme.DARK:
            return cls(
                text_color=Colors.WHITE,
                height=MAGNIFIER_HEIGHT_DARK,
                edge_color=Colors.WHITE,
                line_width=2.0,
            )
        return cls(
            text_color=Colors.BLACK,
            height=MAGNIFIER_HEIGHT_LIGHT,
            face_color=Colors.WHITE,
            shadow_color=Colors.LEGEND_TEXT,
            shadow_offset=(0.0, 6.0),
        )

    @property
    def has_shadow(self) -> bool:
        return self.shadow_color is not None


class MagnifierRenderer:
    """Owns the overlay artists on one axes and redraws them on demand."""

    def __init__(self, ax: matplotlib.axes.Axes, value_specifier: str = DEFAULT_VALUE_SPECIFIER):
        """Initialize the magnifier renderer.

        Args:
            ax: Plot axes the overlay is positioned against
            value_specifier: printf-style format applied to each value
        """
        self.ax = ax
        self.value_specifier = validate_value_specifier(value_specifier)

        self.box: Optional[FancyBboxPatch] = None
        self.text: Optional[Any] = None

        self._render_count = 0

    def render(
        self,
        values: Sequence[float],
        center_x: float,
        scheme: ColorScheme,
        opacity: float = 1.0,
    ) -> None:
        """Draw the overlay centred on ``center_x`` (pixels from the plot's left edge).

        Args:
            values: Current value of every series, in series order
            center_x: Horizontal pointer position inside the plot area
            scheme: Colour scheme selecting the box treatment
            opacity: 0 hides the overlay, 1 shows it fully
        """
        self.clear()
        if opacity <= 0:
            return

        self._render_count += 1
        appearance = MagnifierAppearance.for_scheme(scheme)
        bbox = self.ax.bbox

        # Display coordinates have y pointing up; the box sits below the centre line.
        left = bbox.x0 + center_x - appearance.width / 2
        center_y = bbox.y0 + bbox.height / 2 - MAGNIFIER_OFFSET_Y
        bottom = center_y - appearance.height / 2
        top = bottom + appearance.height

        self.box = FancyBboxPatch(
            (left, bottom),
            appearance.width,
            appearance.height,
            boxstyle=f"round,pad=0,rounding_size={appearance.corner_radius}",
            facecolor=appearance.face_color,
            edgecolor=appearance.edge_color,
            linewidth=appearance.line_width,
            alpha=opacity,
            transform=IdentityTransform(),
            zorder=102,
            clip_on=False,
        )
        if appearance.has_shadow:
            dx, dy = appearance.shadow_offset
            self.box.set_path_effects([
                patheffects.withSimplePatchShadow(
                    offset=(dx, -dy),
                    shadow_rgbFace=appearance.shadow_color,
                    alpha=0.6,
                ),
            ])
        self.ax.figure.add_artist(self.box)

        self.text = self.ax.figure.text(
            left + appearance.width / 2,
            top - appearance.corner_radius,
            format_values(values, self.value_specifier),
            transform=IdentityTransform(),
            color=appearance.text_color,
            fontsize=appearance.font_size,
            fontweight="bold",
            ha="center",
            va="top",
            alpha=opacity,
            zorder=103,
        )

        if self._render_count % LOG_THROTTLE_INTERVAL == 1:
            print(f"[Magnifier] Showing {len(values)} values at x={center_x:.1f} ({scheme.value} mode)")

    def clear(self) -> None:
        """Remove the overlay artists if present."""
        if self.box is not None:
            self.box.remove()
            self.box = None

        if self.text is not None:
            self.text.remove()
            self.text = None

    def lines(self) -> List[str]:
        """Text currently shown, one entry per series."""
        if self.text is None:
            return []
        return self.text.get_text().split("\n")
