"""Integer rectangles and frame-index helpers shared by every widget."""

from __future__ import annotations

from dataclasses import dataclass
from math import lcm
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..widget.base import Widget


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle: origin plus width/height.

    Negative sizes are clamped to zero, so a degenerate request always
    collapses into an empty rectangle instead of failing.
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self):
        if self.width < 0:
            object.__setattr__(self, "width", 0)
        if self.height < 0:
            object.__setattr__(self, "height", 0)

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def intersect_size(self, width: int, height: int) -> "Rect":
        """Footprint of a ``width x height`` widget placed at the origin of this space."""
        return Rect(0, 0, min(width, self.width), min(height, self.height))

    def shrink(self, left: int, top: int, right: int, bottom: int) -> "Rect":
        """Inset the rectangle on each side."""
        return Rect(
            self.x + left,
            self.y + top,
            self.width - left - right,
            self.height - top - bottom,
        )


def mod_int(a: int, n: int) -> int:
    """Mathematical modulo: always in ``[0, n)`` for positive ``n``."""
    if n <= 0:
        raise ValueError(f"modulus must be positive, got {n}")
    return ((a % n) + n) % n


def max_frame_count(widgets: Iterable["Widget"]) -> int:
    """Number of frames after which every widget has completed whole cycles.

    An empty collection is a single static frame.
    """
    count = 1
    for widget in widgets:
        count = lcm(count, widget.frame_count())
    return count


def union_bounds(rects: Iterable[Rect], available: Rect) -> Rect:
    """Componentwise max of ``rects`` clamped to the available size."""
    width = height = 0
    for rect in rects:
        width = max(width, rect.width)
        height = max(height, rect.height)
    return available.intersect_size(width, height)
