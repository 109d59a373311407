"""
Root widget and frame rendering.

A Root wraps the top of a widget tree with animation timing and turns it into
the list of display-sized frames handed to an encoder.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional

from ..core.errors import WidgetConfigError
from ..core.geometry import Rect
from .base import Widget, tree_depth
from .config import RenderConfig
from .pipeline import PixelBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Root:
    """
    Top of a render tree.

    Args:
        child: Widget drawn at the display origin
        delay: Milliseconds each frame is shown for (None = config delay_ms)
        max_age: Seconds the rendered output stays fresh (None = forever)
    """
    child: Widget
    delay: Optional[int] = None
    max_age: Optional[int] = None
    config: RenderConfig = field(default_factory=RenderConfig, compare=False)

    def __post_init__(self):
        if self.delay is not None and self.delay < 0:
            raise WidgetConfigError(f"Root delay must not be negative, got {self.delay}")

    @property
    def frame_delay(self) -> int:
        return self.config.delay_ms if self.delay is None else self.delay

    def frame_count(self) -> int:
        count = self.child.frame_count()
        if self.config.max_frames > 0:
            count = min(count, self.config.max_frames)
        return count

    def validate(self) -> None:
        """Reject trees deeper than the configured limit before painting."""
        depth = tree_depth(self.child)
        if depth > self.config.max_depth:
            raise WidgetConfigError(
                f"widget tree depth {depth} exceeds limit of {self.config.max_depth}"
            )

    def viewport(self) -> Rect:
        return Rect(0, 0, self.config.width, self.config.height)

    def paint_frame(self, frame_index: int) -> PixelBuffer:
        """One display-sized frame with the child anchored at the origin."""
        viewport = self.viewport()
        frame = PixelBuffer(viewport.width, viewport.height)
        frame.composite(self.child.paint(viewport, frame_index), 0, 0)
        return frame

    def render_frames(self) -> list[PixelBuffer]:
        """
        Paint every frame of the animation, in order.

        Frames are independent, so with more than one worker they are
        painted concurrently. Any failure aborts the whole render.
        """
        self.validate()
        count = self.frame_count()
        workers = min(self.config.workers, count)
        logger.debug("Rendering %d frames at %dx%d with %d workers",
                     count, self.config.width, self.config.height, workers)

        if workers <= 1:
            return [self.paint_frame(i) for i in range(count)]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self.paint_frame, range(count)))
