"""RGBA color values for widget fills.

Colors can be given as ``Color`` instances, ``(r, g, b[, a])`` tuples, or hex
strings in any of the usual short and long forms:

  #rgb  #rgba  #rrggbb  #rrggbbaa
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import WidgetConfigError


@dataclass(frozen=True)
class Color:
    """A non-premultiplied 8-bit RGBA color."""
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise WidgetConfigError(f"color channel out of range: {channel}")

    @property
    def hex(self) -> str:
        """Get hex color string (alpha omitted when opaque)."""
        base = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            base += f"{self.a:02x}"
        return base

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    @property
    def opaque(self) -> bool:
        return self.a == 255

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        digits = value[1:] if value.startswith("#") else value
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise WidgetConfigError(f"invalid color: {value!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise WidgetConfigError(f"invalid color: {value!r}") from None
        return cls(*channels)


TRANSPARENT = Color(0, 0, 0, 0)
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

ColorLike = Union[Color, str, tuple]


def to_color(value: ColorLike | None) -> Color | None:
    """Coerce a user-supplied color value. ``None`` passes through."""
    if value is None or isinstance(value, Color):
        return value
    if isinstance(value, str):
        return Color.from_hex(value)
    if isinstance(value, tuple) and len(value) in (3, 4):
        return Color(*value)
    raise WidgetConfigError(f"invalid color: {value!r}")
