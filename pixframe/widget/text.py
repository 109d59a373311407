"""Text widget - a single line in a fixed-width bitmap font."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.colors import WHITE, ColorLike, to_color
from ..core.errors import WidgetConfigError
from ..core.geometry import Rect
from ..fonts.registry import Font, get_font
from .base import Widget
from .pipeline import PixelBuffer

DEFAULT_FONT = "tb-8"


@dataclass(frozen=True)
class Text(Widget):
    """
    Draws ``content`` left to right, one font cell per character.

    The font is looked up when the widget is built, so an unknown name fails
    immediately with UnknownFontError.
    """
    content: str = ""
    font: str = DEFAULT_FONT
    color: ColorLike = WHITE
    spacing: int = 0

    def __post_init__(self):
        if self.spacing < 0:
            raise WidgetConfigError(f"Text spacing must not be negative, got {self.spacing}")
        if self.color is None:
            raise WidgetConfigError("Text color is required")
        object.__setattr__(self, "color", to_color(self.color))
        get_font(self.font)

    @property
    def face(self) -> Font:
        return get_font(self.font)

    def size(self) -> tuple[int, int]:
        """Unclamped (width, height) of the rendered line."""
        face = self.face
        if not self.content:
            return 0, 0
        return face.text_width(len(self.content), self.spacing), face.height

    def paint_bounds(self, bounds: Rect, frame_index: int) -> Rect:
        return bounds.intersect_size(*self.size())

    def paint(self, bounds: Rect, frame_index: int) -> PixelBuffer:
        face = self.face
        width, height = self.size()
        buffer = PixelBuffer(width, height)
        dx, dy = face.offset
        advance = face.width + self.spacing
        for i, char in enumerate(self.content):
            buffer.put_mask(i * advance + dx, dy, face.glyph(char), self.color)

        rect = self.paint_bounds(bounds, frame_index)
        return buffer.crop(rect.width, rect.height)
