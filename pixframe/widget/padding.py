"""Padding widget - insets a child and optionally fills the margin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.colors import ColorLike, to_color
from ..core.errors import WidgetConfigError
from ..core.geometry import Rect
from .base import Widget
from .pipeline import PixelBuffer

PadLike = Union[int, tuple[int, int, int, int]]


@dataclass(frozen=True)
class Padding(Widget):
    """
    Surround a child with empty space.

    ``pad`` is either one value for every side or (left, top, right, bottom).
    """
    child: Widget
    pad: PadLike = 0
    color: Optional[ColorLike] = None

    def __post_init__(self):
        pad = self.pad
        if isinstance(pad, int):
            pad = (pad, pad, pad, pad)
        pad = tuple(pad)
        if len(pad) != 4:
            raise WidgetConfigError(f"Padding needs 1 or 4 values, got {self.pad!r}")
        if any(p < 0 for p in pad):
            raise WidgetConfigError(f"Padding must not be negative, got {self.pad!r}")
        object.__setattr__(self, "pad", pad)
        object.__setattr__(self, "color", to_color(self.color))

    def child_widgets(self) -> tuple[Widget, ...]:
        return (self.child,)

    def frame_count(self) -> int:
        return self.child.frame_count()

    def _inner(self, bounds: Rect) -> Rect:
        return bounds.shrink(*self.pad)

    def paint_bounds(self, bounds: Rect, frame_index: int) -> Rect:
        left, top, right, bottom = self.pad
        inner = self.child.paint_bounds(self._inner(bounds), frame_index)
        return bounds.intersect_size(left + inner.width + right, top + inner.height + bottom)

    def paint(self, bounds: Rect, frame_index: int) -> PixelBuffer:
        rect = self.paint_bounds(bounds, frame_index)
        buffer = PixelBuffer(rect.width, rect.height)
        buffer.fill(self.color)
        left, top, _, _ = self.pad
        buffer.composite(self.child.paint(self._inner(bounds), frame_index), left, top)
        return buffer
