"""Sequence widget - shows one child per frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence as SequenceType

from ..core.geometry import Rect, mod_int, union_bounds
from .base import Widget
from .pipeline import PixelBuffer


@dataclass(frozen=True)
class Sequence(Widget):
    """
    Time-division animation: frame k shows child k mod N.

    Each child holds one slot in the cycle and is always drawn at its own
    frame 0; a child's internal animation is not expanded. The footprint is
    the union of every child's bounds, so it stays fixed while the content
    changes. An empty sequence is a single blank frame.
    """
    children: SequenceType[Widget] = ()

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def child_widgets(self) -> tuple[Widget, ...]:
        return self.children

    def frame_count(self) -> int:
        return max(1, len(self.children))

    def active_child(self, frame_index: int) -> Widget | None:
        if not self.children:
            return None
        return self.children[mod_int(frame_index, len(self.children))]

    def paint_bounds(self, bounds: Rect, frame_index: int) -> Rect:
        return union_bounds(
            (child.paint_bounds(bounds, 0) for child in self.children),
            bounds,
        )

    def paint(self, bounds: Rect, frame_index: int) -> PixelBuffer:
        rect = self.paint_bounds(bounds, frame_index)
        buffer = PixelBuffer(rect.width, rect.height)
        child = self.active_child(frame_index)
        if child is not None:
            buffer.composite(child.paint(bounds, 0), 0, 0)
        return buffer
