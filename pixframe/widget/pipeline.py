"""
RGBA pixel buffers with vectorized compositing.

Each buffer owns an (height, width, 4) uint8 array of non-premultiplied RGBA.
Compositing clips the source against the destination and blends with the
source-over operator, so fully opaque pixels replace what is beneath and fully
transparent pixels leave it untouched.
"""

from __future__ import annotations

import numpy as np

from ..core.colors import Color


class PixelBuffer:
    """A rectangular grid of RGBA pixels, origin-addressed."""

    def __init__(self, width: int, height: int, pixels: np.ndarray | None = None):
        self.width = max(0, width)
        self.height = max(0, height)
        if pixels is None:
            pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        elif pixels.shape != (self.height, self.width, 4):
            raise ValueError(f"pixel array shape {pixels.shape} does not match {self.width}x{self.height}")
        self.pixels = pixels

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def __getitem__(self, pos: tuple[int, int]) -> tuple[int, int, int, int]:
        """RGBA at (x, y). Out of bounds reads as transparent."""
        x, y = pos
        if 0 <= x < self.width and 0 <= y < self.height:
            return tuple(int(c) for c in self.pixels[y, x])
        return (0, 0, 0, 0)

    def fill(self, color: Color | None, x: int = 0, y: int = 0, w: int | None = None, h: int | None = None):
        """Fill a rectangle (whole buffer by default) with a color, replacing contents."""
        if color is None:
            return
        if w is None:
            w = self.width - x
        if h is None:
            h = self.height - y
        x1, y1 = max(0, x), max(0, y)
        x2, y2 = min(self.width, x + w), min(self.height, y + h)
        if x1 < x2 and y1 < y2:
            self.pixels[y1:y2, x1:x2] = color.rgba

    def put_mask(self, x: int, y: int, mask: np.ndarray, color: Color):
        """Set every pixel where ``mask`` is true, clipped to the buffer."""
        src_h, src_w = mask.shape
        src_x1 = max(0, -x)
        src_y1 = max(0, -y)
        src_x2 = min(src_w, self.width - x)
        src_y2 = min(src_h, self.height - y)
        if src_x1 >= src_x2 or src_y1 >= src_y2:
            return

        dst_x1 = max(0, x)
        dst_y1 = max(0, y)
        dst_x2 = dst_x1 + (src_x2 - src_x1)
        dst_y2 = dst_y1 + (src_y2 - src_y1)
        region = self.pixels[dst_y1:dst_y2, dst_x1:dst_x2]
        region[mask[src_y1:src_y2, src_x1:src_x2]] = color.rgba

    def composite(self, src: "PixelBuffer", x: int = 0, y: int = 0):
        """
        Blend another buffer onto this one at position (source-over).

        Args:
            src: Buffer to draw on top
            x, y: Top-left position of ``src`` in this buffer (may be negative)
        """
        # Calculate clipped regions
        src_x1 = max(0, -x)
        src_y1 = max(0, -y)
        src_x2 = min(src.width, self.width - x)
        src_y2 = min(src.height, self.height - y)
        if src_x1 >= src_x2 or src_y1 >= src_y2:
            return  # Completely off-buffer

        dst_x1 = max(0, x)
        dst_y1 = max(0, y)
        dst_x2 = dst_x1 + (src_x2 - src_x1)
        dst_y2 = dst_y1 + (src_y2 - src_y1)

        top = src.pixels[src_y1:src_y2, src_x1:src_x2]
        bottom = self.pixels[dst_y1:dst_y2, dst_x1:dst_x2]
        self.pixels[dst_y1:dst_y2, dst_x1:dst_x2] = blend_over(top, bottom)

    def clear_outside(self, keep: np.ndarray):
        """Make every pixel where ``keep`` is false fully transparent."""
        self.pixels[~keep] = 0

    def crop(self, width: int, height: int) -> "PixelBuffer":
        """Top-left ``width x height`` region (never larger than the buffer)."""
        width = max(0, min(width, self.width))
        height = max(0, min(height, self.height))
        if (width, height) == self.size:
            return self
        return PixelBuffer(width, height, self.pixels[:height, :width].copy())

    def to_rows(self) -> list[list[tuple[int, int, int, int]]]:
        """Structured pixel data: rows of RGBA tuples, top to bottom."""
        return [[tuple(int(c) for c in px) for px in row] for row in self.pixels]


def blend_over(top: np.ndarray, bottom: np.ndarray) -> np.ndarray:
    """Source-over blend of two equally shaped non-premultiplied RGBA arrays."""
    src_a = top[..., 3:4].astype(np.float32) / 255.0
    dst_a = bottom[..., 3:4].astype(np.float32) / 255.0
    out_a = src_a + dst_a * (1.0 - src_a)

    src_rgb = top[..., :3].astype(np.float32)
    dst_rgb = bottom[..., :3].astype(np.float32)
    weighted = src_rgb * src_a + dst_rgb * dst_a * (1.0 - src_a)
    out_rgb = np.divide(weighted, out_a, out=np.zeros_like(weighted), where=out_a > 0)

    out = np.empty_like(top)
    out[..., :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    out[..., 3:4] = np.clip(np.rint(out_a * 255.0), 0, 255).astype(np.uint8)
    # fully transparent source pixels keep the destination bit for bit
    return np.where(top[..., 3:4] == 0, bottom, out)
