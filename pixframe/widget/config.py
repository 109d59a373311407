"""Display size, frame limits and worker count for rendering, stored as JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from ..core.errors import WidgetConfigError

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """Viewport and limits for rendering a widget tree into frames."""
    # Display size in pixels
    width: int = 64
    height: int = 32

    # Animation
    delay_ms: int = 50
    max_frames: int = 0  # 0 = unlimited

    # Safety
    max_depth: int = 64
    workers: int = 1

    def __post_init__(self):
        for name in ("width", "height", "delay_ms", "max_frames"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise WidgetConfigError(f"{name} must be a non-negative integer, got {value!r}")
        for name in ("max_depth", "workers"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise WidgetConfigError(f"{name} must be a positive integer, got {value!r}")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "RenderConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})

    def save(self, path: Path):
        temp = path.with_suffix(".tmp")
        temp.write_text(json.dumps(self.to_dict(), indent=2))
        temp.rename(path)

    @classmethod
    def load(cls, path: Path) -> "RenderConfig":
        try:
            if path.exists():
                return cls.from_dict(json.loads(path.read_text()))
        except (json.JSONDecodeError, IOError, AttributeError) as e:
            logger.warning("Ignoring unreadable render config %s: %s", path, e)
        return cls()
