"""Marquee widget - scrolls a wide child horizontally through a window."""

from __future__ import annotations

from dataclasses import dataclass
from math import lcm

from ..core.errors import WidgetConfigError
from ..core.geometry import Rect, mod_int
from .base import Widget
from .pipeline import PixelBuffer
from .stack import local_frame

# Children are measured against this much room so their natural width shows.
UNBOUNDED = 1 << 16


@dataclass(frozen=True)
class Marquee(Widget):
    """
    A ``width``-pixel window onto a child.

    A child narrower than the window is drawn still. A wider child enters
    from the right edge and scrolls left one pixel per frame until it has
    fully left the window. The child keeps animating while it scrolls, so the
    loop lasts until both the scroll and the child's own cycle line up.

    The child must have a fixed width; one that stretches to fill the
    available space has no natural width to scroll.
    """
    child: Widget
    width: int

    def __post_init__(self):
        if self.width <= 0:
            raise WidgetConfigError(f"Marquee width must be positive, got {self.width}")
        wide = self.child.paint_bounds(Rect(0, 0, UNBOUNDED, UNBOUNDED), 0)
        narrower = self.child.paint_bounds(Rect(0, 0, UNBOUNDED - 1, UNBOUNDED), 0)
        if wide.width != narrower.width:
            raise WidgetConfigError(
                f"Marquee child must have a fixed width narrower than {UNBOUNDED} pixels"
            )

    def child_widgets(self) -> tuple[Widget, ...]:
        return (self.child,)

    def _child_size(self, height: int) -> Rect:
        return self.child.paint_bounds(Rect(0, 0, UNBOUNDED, height), 0)

    def scrolls(self, height: int = UNBOUNDED) -> bool:
        return self._child_size(height).width > self.width

    def scroll_length(self) -> int:
        """Frames for the child to cross the window once."""
        return self.width + self._child_size(UNBOUNDED).width

    def frame_count(self) -> int:
        if not self.scrolls():
            return self.child.frame_count()
        return lcm(self.scroll_length(), self.child.frame_count())

    def offset(self, frame_index: int) -> int:
        """Child x position for a frame (0 when the child fits)."""
        if not self.scrolls():
            return 0
        return self.width - mod_int(frame_index, self.scroll_length())

    def paint_bounds(self, bounds: Rect, frame_index: int) -> Rect:
        child = self._child_size(bounds.height)
        return bounds.intersect_size(self.width, child.height)

    def paint(self, bounds: Rect, frame_index: int) -> PixelBuffer:
        rect = self.paint_bounds(bounds, frame_index)
        buffer = PixelBuffer(rect.width, rect.height)
        space = Rect(0, 0, UNBOUNDED, bounds.height)
        content = self.child.paint(space, local_frame(self.child, frame_index))
        buffer.composite(content, self.offset(frame_index), 0)
        return buffer
