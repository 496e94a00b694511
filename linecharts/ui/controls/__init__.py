"""Reusable control panels for the chart preview.

This package contains modular UI control panels that can be composed
to build the application interface.
"""

from .appearance_panel import AppearancePanel

__all__ = [
    "AppearancePanel",
]
