"""Tests for pixel buffers and compositing."""

import numpy as np
import pytest

from pixframe.core.colors import Color
from pixframe.widget.pipeline import PixelBuffer, blend_over


def solid(width, height, rgba):
    buffer = PixelBuffer(width, height)
    buffer.fill(Color(*rgba))
    return buffer


class TestPixelBuffer:
    """Tests for PixelBuffer basics."""

    def test_create_buffer(self):
        buffer = PixelBuffer(20, 10)
        assert buffer.width == 20
        assert buffer.height == 10
        assert buffer.pixels.shape == (10, 20, 4)
        assert buffer.pixels.dtype == np.uint8

    def test_new_buffer_is_transparent(self):
        buffer = PixelBuffer(4, 4)
        assert not buffer.pixels.any()

    def test_negative_size_is_empty(self):
        buffer = PixelBuffer(-3, 5)
        assert buffer.size == (0, 5)

    def test_shape_mismatch_rejected(self):
        with pytest.raises(ValueError):
            PixelBuffer(2, 2, np.zeros((3, 3, 4), dtype=np.uint8))

    def test_get_out_of_bounds_is_transparent(self):
        buffer = solid(2, 2, (255, 0, 0, 255))
        assert buffer[5, 5] == (0, 0, 0, 0)
        assert buffer[-1, 0] == (0, 0, 0, 0)

    def test_fill_whole(self):
        buffer = solid(3, 2, (1, 2, 3, 4))
        assert buffer[2, 1] == (1, 2, 3, 4)

    def test_fill_rect_clipped(self):
        buffer = PixelBuffer(5, 5)
        buffer.fill(Color(9, 9, 9), 3, 3, 10, 10)
        assert buffer[4, 4] == (9, 9, 9, 255)
        assert buffer[2, 2] == (0, 0, 0, 0)

    def test_fill_none_is_noop(self):
        buffer = PixelBuffer(2, 2)
        buffer.fill(None)
        assert not buffer.pixels.any()

    def test_put_mask_clipped(self):
        buffer = PixelBuffer(3, 3)
        mask = np.ones((2, 2), dtype=bool)
        buffer.put_mask(2, -1, mask, Color(0, 255, 0))
        assert buffer[2, 0] == (0, 255, 0, 255)
        assert buffer[1, 0] == (0, 0, 0, 0)
        assert buffer[2, 1] == (0, 0, 0, 0)

    def test_crop(self):
        buffer = solid(10, 10, (1, 1, 1, 255))
        cropped = buffer.crop(4, 3)
        assert cropped.size == (4, 3)
        assert cropped[3, 2] == (1, 1, 1, 255)

    def test_crop_never_grows(self):
        buffer = PixelBuffer(4, 4)
        assert buffer.crop(10, 10).size == (4, 4)

    def test_clear_outside(self):
        buffer = solid(2, 1, (5, 5, 5, 255))
        buffer.clear_outside(np.array([[True, False]]))
        assert buffer[0, 0] == (5, 5, 5, 255)
        assert buffer[1, 0] == (0, 0, 0, 0)

    def test_to_rows(self):
        rows = solid(2, 1, (1, 2, 3, 255)).to_rows()
        assert rows == [[(1, 2, 3, 255), (1, 2, 3, 255)]]


class TestComposite:
    """Tests for source-over compositing."""

    def test_opaque_replaces(self):
        dst = solid(4, 4, (255, 0, 0, 255))
        dst.composite(solid(2, 2, (0, 0, 255, 255)), 1, 1)
        assert dst[1, 1] == (0, 0, 255, 255)
        assert dst[0, 0] == (255, 0, 0, 255)
        assert dst[3, 3] == (255, 0, 0, 255)

    def test_transparent_leaves_untouched(self):
        dst = solid(2, 2, (10, 20, 30, 255))
        dst.composite(PixelBuffer(2, 2))
        assert dst[0, 0] == (10, 20, 30, 255)

    def test_onto_transparent_copies(self):
        dst = PixelBuffer(2, 2)
        dst.composite(solid(2, 2, (10, 20, 30, 200)))
        assert dst[1, 1] == (10, 20, 30, 200)

    def test_half_alpha_blends(self):
        dst = solid(1, 1, (0, 0, 255, 255))
        dst.composite(solid(1, 1, (255, 0, 0, 128)))
        r, g, b, a = dst[0, 0]
        assert r == pytest.approx(128, abs=1)
        assert g == 0
        assert b == pytest.approx(127, abs=1)
        assert a == 255

    def test_alpha_accumulates(self):
        dst = solid(1, 1, (0, 0, 0, 128))
        dst.composite(solid(1, 1, (0, 0, 0, 128)))
        assert dst[0, 0][3] == pytest.approx(192, abs=1)

    def test_negative_offset_clips(self):
        dst = PixelBuffer(3, 3)
        dst.composite(solid(2, 2, (1, 1, 1, 255)), -1, -1)
        assert dst[0, 0] == (1, 1, 1, 255)
        assert dst[1, 0] == (0, 0, 0, 0)

    def test_fully_off_buffer(self):
        dst = PixelBuffer(3, 3)
        dst.composite(solid(2, 2, (1, 1, 1, 255)), 5, 0)
        assert not dst.pixels.any()

    def test_larger_source_clipped(self):
        dst = PixelBuffer(2, 2)
        dst.composite(solid(10, 10, (7, 7, 7, 255)))
        assert (dst.pixels == 7).sum() == 12

    def test_blend_over_shape(self):
        top = np.zeros((3, 4, 4), dtype=np.uint8)
        assert blend_over(top, top).shape == (3, 4, 4)
