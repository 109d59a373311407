"""Box widget - a solid rectangle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.colors import ColorLike, to_color
from ..core.errors import WidgetConfigError
from ..core.geometry import Rect
from .base import Widget
from .pipeline import PixelBuffer


@dataclass(frozen=True)
class Box(Widget):
    """
    Solid rectangle of a single color.

    A width or height of None expands to fill the available space.
    A color of None paints a transparent box.
    """
    width: Optional[int] = None
    height: Optional[int] = None
    color: Optional[ColorLike] = None

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise WidgetConfigError(f"Box {name} must not be negative, got {value}")
        object.__setattr__(self, "color", to_color(self.color))

    def paint_bounds(self, bounds: Rect, frame_index: int) -> Rect:
        width = bounds.width if self.width is None else self.width
        height = bounds.height if self.height is None else self.height
        return bounds.intersect_size(width, height)

    def paint(self, bounds: Rect, frame_index: int) -> PixelBuffer:
        rect = self.paint_bounds(bounds, frame_index)
        buffer = PixelBuffer(rect.width, rect.height)
        buffer.fill(self.color)
        return buffer
