"""Colours, gradients and chart styles for light and dark appearance."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from matplotlib.colors import LinearSegmentedColormap


class ColorScheme(Enum):
    """Appearance the chart is rendered for."""

    LIGHT = "light"
    DARK = "dark"


class Colors:
    """Named colours used across the chart components."""

    COLOR_1 = "#E2FAE7"
    COLOR_1_ACCENT = "#72BF82"
    COLOR_2 = "#EEF1FF"
    COLOR_2_ACCENT = "#4266E8"
    COLOR_3 = "#FCECEA"
    COLOR_3_ACCENT = "#E1614C"
    ORANGE_END = "#FF782C"
    ORANGE_START = "#EC2301"
    LEGEND_TEXT = "#A7A6A8"
    LEGEND_COLOR = "#E8E7EA"
    LEGEND_DARK_COLOR = "#545454"
    INDICATOR_KNOB = "#FF57A6"
    GRADIENT_UPPER_BLUE = "#C2E8FF"
    GRADIENT_UPPER_BLUE_1 = "#A7E3FF"
    GRADIENT_PURPLE = "#7B75FF"
    GRADIENT_NEON_BLUE = "#6FEAFF"
    GRADIENT_LOWER_BLUE = "#F1F9FF"
    DARK_PURPLE = "#1B205E"
    BORDER_BLUE = "#4EBCFF"

    WHITE = "#FFFFFF"
    BLACK = "#000000"
    GRAY = "#8E8E93"


@dataclass(frozen=True)
class GradientColor:
    """Ordered colour pair a series line is shaded with."""

    start: str
    end: str

    def colors(self) -> List[str]:
        return [self.start, self.end]

    def colormap(self, name: str = "series_gradient") -> LinearSegmentedColormap:
        """Return a two-stop colormap running from ``start`` to ``end``."""
        return LinearSegmentedColormap.from_list(name, self.colors())


class GradientColors:
    """Preset gradients."""

    ORANGE = GradientColor(Colors.ORANGE_START, Colors.ORANGE_END)
    BLUE = GradientColor(Colors.GRADIENT_PURPLE, Colors.GRADIENT_NEON_BLUE)
    GREEN = GradientColor("#0BCDF7", "#A2FEAE")
    BLU = GradientColor("#0591FF", "#29D9FE")
    BLU_PURPL = GradientColor("#4ABBFB", "#8C00FF")
    PURPLE = GradientColor("#741DF4", "#C501B0")
    PRPL_PINK = GradientColor("#BC05AF", "#FF1378")
    PRPL_NEON = GradientColor("#FE019A", "#FE0BF4")
    ORNG_PINK = GradientColor("#FF8E2D", "#FF4E7A")

    @classmethod
    def all(cls) -> List[GradientColor]:
        return [
            cls.ORANGE,
            cls.BLUE,
            cls.GREEN,
            cls.BLU,
            cls.BLU_PURPL,
            cls.PURPLE,
            cls.PRPL_PINK,
            cls.PRPL_NEON,
            cls.ORNG_PINK,
        ]


@dataclass
class ChartStyle:
    """Colour set for one appearance of a chart."""

    background_color: str
    accent_color: str
    second_gradient_color: str
    text_color: str
    legend_text_color: str
    dark_mode_style: Optional["ChartStyle"] = None

    def gradient(self) -> GradientColor:
        return GradientColor(self.accent_color, self.second_gradient_color)


class Styles:
    """Preset chart styles."""

    LINE_CHART_STYLE_ONE = ChartStyle(
        background_color=Colors.WHITE,
        accent_color=Colors.ORANGE_START,
        second_gradient_color=Colors.ORANGE_END,
        text_color=Colors.BLACK,
        legend_text_color=Colors.GRAY,
    )

    LINE_VIEW_DARK_MODE = ChartStyle(
        background_color=Colors.BLACK,
        accent_color=Colors.ORANGE_START,
        second_gradient_color=Colors.ORANGE_END,
        text_color=Colors.WHITE,
        legend_text_color=Colors.WHITE,
    )


def resolve_style(style: ChartStyle, scheme: ColorScheme) -> ChartStyle:
    """Pick the style a render pass uses for the given colour scheme."""
    if scheme is ColorScheme.LIGHT:
        return style
    return style.dark_mode_style or Styles.LINE_VIEW_DARK_MODE
