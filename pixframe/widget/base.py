"""
Base widget contract and tree helpers.

Every widget answers three questions:
- frame_count(): how many frames its subtree cycles through
- paint_bounds(): the footprint it would occupy in a given space
- paint(): the pixels for one frame, sized to that footprint
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from ..core.geometry import Rect
from .pipeline import PixelBuffer


class Widget(ABC):
    """
    Base class for every node in a render tree.

    Widgets are immutable once built and hold their children exclusively.
    Subclasses must implement:
    - paint_bounds(): Footprint for the given space and frame
    - paint(): Draw into a new buffer sized to paint_bounds()
    """

    @abstractmethod
    def paint_bounds(self, bounds: Rect, frame_index: int) -> Rect:
        ...

    @abstractmethod
    def paint(self, bounds: Rect, frame_index: int) -> PixelBuffer:
        ...

    def frame_count(self) -> int:
        """Static by default. Override for animated widgets."""
        return 1

    def child_widgets(self) -> tuple["Widget", ...]:
        """Direct children. Leaves have none."""
        return ()


def frame_count(widget: Widget) -> int:
    return widget.frame_count()


def paint_bounds(widget: Widget, bounds: Rect, frame_index: int = 0) -> Rect:
    return widget.paint_bounds(bounds, frame_index)


def paint_widget(widget: Widget, bounds: Rect, frame_index: int = 0) -> PixelBuffer:
    """Paint one frame of a widget into a fresh buffer."""
    return widget.paint(bounds, frame_index)


def iter_tree(root: Widget) -> Iterator[tuple[Widget, int]]:
    """Yield (widget, depth) pairs depth-first, without recursion."""
    stack = [(root, 1)]
    while stack:
        widget, depth = stack.pop()
        yield widget, depth
        for child in reversed(widget.child_widgets()):
            stack.append((child, depth + 1))


def tree_depth(root: Widget) -> int:
    """Number of widgets on the longest root-to-leaf path."""
    return max(depth for _, depth in iter_tree(root))
