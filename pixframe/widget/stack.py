"""Stack widget - children drawn on top of each other."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.geometry import Rect, max_frame_count, mod_int, union_bounds
from .base import Widget
from .pipeline import PixelBuffer


@dataclass(frozen=True)
class Stack(Widget):
    """
    Z-ordered overlay: later children are painted over earlier ones.

    All children share the stack's available space and are anchored at its
    top-left corner. Each child loops on its own cycle; the stack repeats
    once every child has completed a whole number of cycles.
    """
    children: Sequence[Widget] = ()

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def child_widgets(self) -> tuple[Widget, ...]:
        return self.children

    def frame_count(self) -> int:
        return max_frame_count(self.children)

    def paint_bounds(self, bounds: Rect, frame_index: int) -> Rect:
        return union_bounds(
            (child.paint_bounds(bounds, local_frame(child, frame_index)) for child in self.children),
            bounds,
        )

    def paint(self, bounds: Rect, frame_index: int) -> PixelBuffer:
        rect = self.paint_bounds(bounds, frame_index)
        buffer = PixelBuffer(rect.width, rect.height)
        for child in self.children:
            layer = child.paint(bounds, local_frame(child, frame_index))
            buffer.composite(layer, 0, 0)
        return buffer


def local_frame(child: Widget, frame_index: int) -> int:
    """Map a parent's frame index onto the child's own cycle."""
    return mod_int(frame_index, child.frame_count())
