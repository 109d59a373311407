"""Widgets, the paint pipeline, and frame rendering."""

from .base import Widget, frame_count, iter_tree, paint_bounds, paint_widget, tree_depth
from .pipeline import PixelBuffer, blend_over
from .box import Box
from .text import Text
from .circle import Circle
from .pie_chart import PieChart
from .stack import Stack
from .sequence import Sequence
from .padding import Padding
from .marquee import Marquee
from .config import RenderConfig
from .root import Root

__all__ = [
    # Contract
    "Widget",
    "frame_count",
    "paint_bounds",
    "paint_widget",
    "iter_tree",
    "tree_depth",
    # Pipeline
    "PixelBuffer",
    "blend_over",
    # Leaves
    "Box",
    "Text",
    # Shapes
    "Circle",
    "PieChart",
    # Composites
    "Stack",
    "Sequence",
    # Decorators
    "Padding",
    "Marquee",
    # Rendering
    "RenderConfig",
    "Root",
]
