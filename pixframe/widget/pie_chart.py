"""PieChart widget - a disc sliced in proportion to a list of weights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..core.colors import Color, ColorLike, to_color
from ..core.errors import WidgetConfigError
from ..core.geometry import Rect
from .base import Widget
from .circle import disc_mask
from .pipeline import PixelBuffer

# Slice boundaries are compared as fractions of a turn rounded to this many
# decimals, so weights that differ only by a common factor pick identical pixels.
BOUNDARY_PRECISION = 9


@dataclass(frozen=True)
class PieChart(Widget):
    """
    Slices start at 12 o'clock and run clockwise in list order.

    Slice ``i`` uses ``colors[i % len(colors)]``; the number of slices is the
    number of weights.
    """
    colors: Sequence[ColorLike]
    weights: Sequence[float]
    diameter: int

    def __post_init__(self):
        if self.diameter <= 0:
            raise WidgetConfigError(f"PieChart diameter must be positive, got {self.diameter}")
        if not self.colors:
            raise WidgetConfigError("PieChart needs at least one color")
        if not self.weights:
            raise WidgetConfigError("PieChart needs at least one weight")
        if any(w < 0 for w in self.weights):
            raise WidgetConfigError(f"PieChart weights must not be negative: {list(self.weights)}")
        if sum(self.weights) <= 0:
            raise WidgetConfigError("PieChart weights must not all be zero")
        object.__setattr__(self, "colors", tuple(to_color(c) for c in self.colors))
        object.__setattr__(self, "weights", tuple(float(w) for w in self.weights))

    def slice_color(self, index: int) -> Color:
        return self.colors[index % len(self.colors)]

    def slice_spans(self) -> list[float]:
        """Angular span of each slice in degrees."""
        total = sum(self.weights)
        return [360.0 * w / total for w in self.weights]

    def _boundaries(self) -> np.ndarray:
        """Cumulative end of each slice as a fraction of a full turn."""
        weights = np.asarray(self.weights, dtype=np.float64)
        ends = np.round(np.cumsum(weights) / weights.sum(), BOUNDARY_PRECISION)
        ends[-1] = 1.0
        return ends

    def slice_map(self) -> np.ndarray:
        """
        Slice index for every pixel of the diameter x diameter square.

        Pixels outside the disc are -1.
        """
        d = self.diameter
        centre = d / 2.0
        coords = np.arange(d, dtype=np.float64) + 0.5 - centre
        dx = coords[np.newaxis, :]
        dy = coords[:, np.newaxis]

        # 0 at 12 o'clock, increasing clockwise (y grows downward)
        turns = np.arctan2(dx, -dy) / (2.0 * np.pi)
        turns = np.mod(turns, 1.0)
        turns = np.round(turns, BOUNDARY_PRECISION)

        index = np.searchsorted(self._boundaries(), turns, side="right")
        index = np.minimum(index, len(self.weights) - 1)
        return np.where(disc_mask(d), index, -1)

    def paint_bounds(self, bounds: Rect, frame_index: int) -> Rect:
        return bounds.intersect_size(self.diameter, self.diameter)

    def paint(self, bounds: Rect, frame_index: int) -> PixelBuffer:
        d = self.diameter
        buffer = PixelBuffer(d, d)
        slices = self.slice_map()
        for i in range(len(self.weights)):
            buffer.put_mask(0, 0, slices == i, self.slice_color(i))

        rect = self.paint_bounds(bounds, frame_index)
        return buffer.crop(rect.width, rect.height)
