"""Circle widget - a disc that clips an optional child to its outline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.colors import ColorLike, to_color
from ..core.errors import WidgetConfigError
from ..core.geometry import Rect
from .base import Widget
from .pipeline import PixelBuffer


def disc_mask(diameter: int) -> np.ndarray:
    """Boolean mask of pixels whose centre lies within the inscribed circle."""
    radius = diameter / 2.0
    coords = np.arange(diameter, dtype=np.float64) + 0.5 - radius
    dist_sq = coords[np.newaxis, :] ** 2 + coords[:, np.newaxis] ** 2
    return dist_sq <= radius * radius


@dataclass(frozen=True)
class Circle(Widget):
    """
    Fixed-size disc.

    The disc is filled with ``color`` (if any), the child is drawn centered on
    top, and everything outside the circle is cleared.
    """
    diameter: int
    color: Optional[ColorLike] = None
    child: Optional[Widget] = None

    def __post_init__(self):
        if self.diameter <= 0:
            raise WidgetConfigError(f"Circle diameter must be positive, got {self.diameter}")
        object.__setattr__(self, "color", to_color(self.color))

    def child_widgets(self) -> tuple[Widget, ...]:
        return (self.child,) if self.child is not None else ()

    def frame_count(self) -> int:
        if self.child is None:
            return 1
        return self.child.frame_count()

    def paint_bounds(self, bounds: Rect, frame_index: int) -> Rect:
        return bounds.intersect_size(self.diameter, self.diameter)

    def paint(self, bounds: Rect, frame_index: int) -> PixelBuffer:
        d = self.diameter
        buffer = PixelBuffer(d, d)
        buffer.fill(self.color)

        if self.child is not None:
            space = Rect(0, 0, d, d)
            child_buffer = self.child.paint(space, frame_index)
            x = (d - child_buffer.width) // 2
            y = (d - child_buffer.height) // 2
            buffer.composite(child_buffer, x, y)

        buffer.clear_outside(disc_mask(d))
        rect = self.paint_bounds(bounds, frame_index)
        return buffer.crop(rect.width, rect.height)
