"""Unit tests for colour schemes and style selection."""

from __future__ import annotations

from dataclasses import fields

import pytest

from linecharts.styles import ChartStyle, ColorScheme, GradientColor, GradientColors, Styles, resolve_style

pytestmark = pytest.mark.unit


def test_resolve_style_light_returns_style() -> None:
    assert resolve_style(Styles.LINE_CHART_STYLE_ONE, ColorScheme.LIGHT) is Styles.LINE_CHART_STYLE_ONE


def test_resolve_style_dark_falls_back_to_dark_preset() -> None:
    assert resolve_style(Styles.LINE_CHART_STYLE_ONE, ColorScheme.DARK) is Styles.LINE_VIEW_DARK_MODE


def test_resolve_style_dark_prefers_own_dark_style() -> None:
    dark = ChartStyle("#000000", "#111111", "#222222", "#FFFFFF", "#EEEEEE")
    light = ChartStyle("#FFFFFF", "#111111", "#222222", "#000000", "#888888", dark_mode_style=dark)

    assert resolve_style(light, ColorScheme.DARK) is dark


def test_gradient_colormap_spans_pair() -> None:
    cmap = GradientColor("#FF0000", "#0000FF").colormap()

    assert cmap(0.0)[:3] == pytest.approx((1.0, 0.0, 0.0))
    assert cmap(1.0)[:3] == pytest.approx((0.0, 0.0, 1.0))


def test_gradient_presets_are_distinct() -> None:
    presets = GradientColors.all()

    assert len(presets) == 9
    assert len(set(presets)) == 9


def test_chart_style_fields_are_all_drawn() -> None:
    """Every style colour feeds the renderer: background, gradient, title and legend text."""

    assert [f.name for f in fields(ChartStyle)] == [
        "background_color",
        "accent_color",
        "second_gradient_color",
        "text_color",
        "legend_text_color",
        "dark_mode_style",
    ]
