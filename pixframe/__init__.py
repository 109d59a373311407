"""pixframe - renders widget trees into RGBA frames for small pixel displays."""

from .core import Color, Rect, UnknownFontError, WidgetConfigError, max_frame_count, mod_int
from .fonts import Font, get_font, get_font_list
from .widget import (
    Box,
    Circle,
    Marquee,
    Padding,
    PieChart,
    PixelBuffer,
    RenderConfig,
    Root,
    Sequence,
    Stack,
    Text,
    Widget,
    frame_count,
    paint_bounds,
    paint_widget,
)

__version__ = "0.1.0"

__all__ = [
    "Color",
    "Rect",
    "mod_int",
    "max_frame_count",
    "WidgetConfigError",
    "UnknownFontError",
    "Font",
    "get_font",
    "get_font_list",
    "Widget",
    "frame_count",
    "paint_bounds",
    "paint_widget",
    "PixelBuffer",
    "Box",
    "Text",
    "Circle",
    "PieChart",
    "Stack",
    "Sequence",
    "Padding",
    "Marquee",
    "RenderConfig",
    "Root",
]
