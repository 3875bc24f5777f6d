"""
UI components for JSONP-CLI.

Themes, width-aware layout, boxes and gradients. Screens and the prompt are
imported from their own modules.
"""

from .components import render_box, render_divider, render_header
from .design_system import BORDERS, ICONS, THEMES, Theme, ThemeStore
from .gradient import apply_gradient, interpolate, render_gradient_text
from .layout import measure_width, pad_to_width, strip_styles

__all__ = [
    "BORDERS",
    "ICONS",
    "THEMES",
    "Theme",
    "ThemeStore",
    "apply_gradient",
    "interpolate",
    "measure_width",
    "pad_to_width",
    "render_box",
    "render_divider",
    "render_gradient_text",
    "render_header",
    "strip_styles",
]
