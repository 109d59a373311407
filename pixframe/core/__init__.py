"""Core utilities - geometry, frame math, colors, and errors."""

from .colors import BLACK, TRANSPARENT, WHITE, Color, to_color
from .errors import UnknownFontError, WidgetConfigError
from .geometry import Rect, max_frame_count, mod_int, union_bounds

__all__ = [
    # Geometry
    "Rect",
    "mod_int",
    "max_frame_count",
    "union_bounds",
    # Colors
    "Color",
    "to_color",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    # Errors
    "WidgetConfigError",
    "UnknownFontError",
]
