"""Tests for the Sequence widget."""

import pytest

from pixframe.core.geometry import Rect
from pixframe.widget.base import paint_widget
from pixframe.widget.box import Box
from pixframe.widget.sequence import Sequence

TRANSPARENT_PX = (0, 0, 0, 0)


@pytest.fixture
def rgb_sequence(red, green, blue):
    return Sequence([Box(10, 10, red), Box(20, 5, green), Box(5, 20, blue)])


class TestSequence:
    """Tests for Sequence frame selection and sizing."""

    def test_frame_count_is_child_count(self, rgb_sequence):
        assert rgb_sequence.frame_count() == 3

    def test_bounds_are_union(self, rgb_sequence, large_rect):
        for frame in range(3):
            assert rgb_sequence.paint_bounds(large_rect, frame) == Rect(0, 0, 20, 20)

    def test_bounds_clamped(self, rgb_sequence):
        assert rgb_sequence.paint_bounds(Rect(0, 0, 8, 8), 0) == Rect(0, 0, 8, 8)

    def test_paint_size_stable(self, rgb_sequence, large_rect):
        for frame in range(6):
            assert paint_widget(rgb_sequence, large_rect, frame).size == (20, 20)

    @pytest.mark.parametrize("frame,expected", [(0, 0), (1, 1), (2, 2), (3, 0), (4, 1), (-1, 2)])
    def test_active_child(self, rgb_sequence, frame, expected):
        assert rgb_sequence.active_child(frame) is rgb_sequence.children[expected]

    def test_only_active_child_painted(self, rgb_sequence, large_rect, red, green, blue):
        img = rgb_sequence.paint(large_rect, 4)
        assert img[0, 0] == green.rgba
        assert img[19, 4] == green.rgba
        assert img[0, 10] == TRANSPARENT_PX
        assert img[15, 15] == TRANSPARENT_PX

        img = rgb_sequence.paint(large_rect, 2)
        assert img[0, 19] == blue.rgba
        assert img[10, 0] == TRANSPARENT_PX

    def test_empty(self, large_rect):
        seq = Sequence([])
        assert seq.frame_count() == 1
        assert seq.active_child(0) is None
        assert seq.paint_bounds(large_rect, 0) == Rect(0, 0, 0, 0)
        assert seq.paint(large_rect, 0).size == (0, 0)

    def test_nested_animation_not_expanded(self):
        inner = Sequence([Box(1, 1), Box(1, 1), Box(1, 1)])
        outer = Sequence([inner, Box(1, 1)])
        assert outer.frame_count() == 2

    def test_single_animated_child_is_static(self, red, green, large_rect):
        inner = Sequence([Box(2, 2, red), Box(2, 2, green)])
        outer = Sequence([inner])
        assert outer.frame_count() == 1
        assert outer.paint(large_rect, 0)[0, 0] == red.rgba
        assert outer.paint(large_rect, 1)[0, 0] == red.rgba

    def test_nested_child_drawn_at_first_frame(self, red, green, blue, large_rect):
        inner = Sequence([Box(2, 2, red), Box(2, 2, green), Box(2, 2, blue)])
        outer = Sequence([inner, Box(2, 2, blue)])
        for frame in (0, 2, 4, 6):
            assert outer.paint(large_rect, frame)[0, 0] == red.rgba

    @pytest.mark.parametrize("frame", range(6))
    def test_repeats_after_frame_count(self, red, green, blue, large_rect, frame):
        inner = Sequence([Box(2, 2, red), Box(2, 2, green), Box(2, 2, blue)])
        outer = Sequence([inner, Box(3, 3, green)])
        count = outer.frame_count()
        first = outer.paint(large_rect, frame)
        again = outer.paint(large_rect, frame + count)
        assert (first.pixels == again.pixels).all()
