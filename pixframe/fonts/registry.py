"""
Font catalog - discovers and loads the bundled YAML bitmap fonts.

Two kinds of files live under the fonts directory:
- glyphs/<set>.yaml: a fixed-size bitmap for each character
- faces/<name>.yaml: a named font placing one glyph set in a character cell

The process-wide catalog is loaded on first access and frozen afterwards.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import numpy as np
import yaml

from ..core.errors import UnknownFontError

logger = logging.getLogger(__name__)

LIT = "#"


@dataclass(frozen=True, eq=False)
class GlyphSet:
    """Fixed-size glyph bitmaps keyed by character."""
    name: str
    width: int
    height: int
    glyphs: Mapping[str, np.ndarray]
    fallback: Optional[str] = None


@dataclass(frozen=True, eq=False)
class Font:
    """
    A named fixed-width bitmap font.

    Every character occupies a ``width x height`` cell; its glyph bitmap is
    drawn at ``offset`` inside that cell.
    """
    name: str
    width: int
    height: int
    offset: tuple[int, int]
    glyph_set: GlyphSet

    def glyph(self, char: str) -> np.ndarray:
        """Boolean (rows, cols) mask for ``char``, or the fallback glyph."""
        glyphs = self.glyph_set.glyphs
        if char in glyphs:
            return glyphs[char]
        fallback = self.glyph_set.fallback
        if fallback is not None and fallback in glyphs:
            return glyphs[fallback]
        return _blank(self.glyph_set.height, self.glyph_set.width)

    def text_width(self, length: int, spacing: int = 0) -> int:
        """Pixel width of ``length`` characters separated by ``spacing``."""
        if length <= 0:
            return 0
        return length * self.width + (length - 1) * spacing


def _blank(height: int, width: int) -> np.ndarray:
    mask = np.zeros((height, width), dtype=bool)
    mask.setflags(write=False)
    return mask


def parse_glyph(rows: list[str], width: int, height: int) -> np.ndarray:
    """Convert '#'/'.' rows into a read-only boolean mask."""
    if len(rows) != height or any(len(row) != width for row in rows):
        raise ValueError(f"glyph must be {width}x{height}, got {rows!r}")
    mask = np.array([[c == LIT for c in row] for row in rows], dtype=bool)
    mask.setflags(write=False)
    return mask


class FontCatalog:
    """
    Registry of named bitmap fonts.

    Usage:
        catalog = FontCatalog()
        catalog.load_all()

        font = catalog.get('tb-8')
        names = catalog.list_names()
    """

    def __init__(self, paths: Optional[list[str]] = None):
        """
        Initialize catalog with font directory paths.

        Args:
            paths: Directories holding glyphs/ and faces/ subdirectories.
                   Defaults to the package's own fonts directory.
        """
        if paths is None:
            paths = [str(Path(__file__).parent)]

        self.paths = [Path(p) for p in paths]
        self._glyph_sets: dict[str, GlyphSet] = {}
        self._fonts: Mapping[str, Font] = {}
        self._lock = threading.Lock()
        self._loaded = False

    def load_all(self) -> None:
        """Load every glyph set, then every face. A second call is a no-op."""
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            fonts: dict[str, Font] = {}
            for kind in ("glyphs", "faces"):
                for base_path in self.paths:
                    directory = base_path / kind
                    if not directory.exists():
                        continue
                    for yaml_file in sorted(directory.glob("*.yaml")):
                        self._load_file(yaml_file, fonts)
            self._fonts = MappingProxyType(fonts)
            self._loaded = True
            logger.debug("Font catalog loaded %d fonts from %d glyph sets", len(fonts), len(self._glyph_sets))

    def _load_file(self, file_path: Path, fonts: dict[str, Font]) -> None:
        """Load a single YAML file and register its contents."""
        kind, name = self._parse_path(file_path)
        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a mapping")
            if kind == "glyphs":
                self._glyph_sets[name] = self._build_glyph_set(name, data)
            else:
                fonts[name] = self._build_font(name, data)
        except (yaml.YAMLError, IOError, ValueError, KeyError, TypeError) as e:
            # Skip bad files; the remaining fonts stay usable
            logger.warning("Failed to load font file %s: %s", file_path, e)

    def _parse_path(self, file_path: Path) -> tuple[str, str]:
        """
        Parse file path to extract kind and name.

        e.g. fonts/faces/tb-8.yaml -> ('faces', 'tb-8')
        """
        return file_path.parent.name, file_path.stem

    @staticmethod
    def _build_glyph_set(name: str, data: dict[str, Any]) -> GlyphSet:
        width = int(data["width"])
        height = int(data["height"])
        glyphs = {
            str(char): parse_glyph(rows, width, height)
            for char, rows in (data.get("glyphs") or {}).items()
        }
        return GlyphSet(
            name=name,
            width=width,
            height=height,
            glyphs=MappingProxyType(glyphs),
            fallback=data.get("fallback"),
        )

    def _build_font(self, name: str, data: dict[str, Any]) -> Font:
        set_name = str(data["glyphs"])
        if set_name not in self._glyph_sets:
            raise ValueError(f"unknown glyph set {set_name!r}")
        glyph_set = self._glyph_sets[set_name]
        width = int(data["width"])
        height = int(data["height"])
        dx, dy = (int(v) for v in data.get("offset", (0, 0)))
        if dx < 0 or dy < 0 or dx + glyph_set.width > width or dy + glyph_set.height > height:
            raise ValueError(f"glyph set {set_name!r} does not fit a {width}x{height} cell at ({dx}, {dy})")
        return Font(name=name, width=width, height=height, offset=(dx, dy), glyph_set=glyph_set)

    def get(self, name: str) -> Font:
        """
        Retrieve a font by exact, case-sensitive name.

        Raises:
            UnknownFontError: if no font has that name
        """
        self.load_all()
        font = self._fonts.get(name)
        if font is None:
            raise UnknownFontError(name)
        return font

    def list_names(self) -> frozenset[str]:
        """All known font names."""
        self.load_all()
        return frozenset(self._fonts)

    def __contains__(self, name: str) -> bool:
        self.load_all()
        return name in self._fonts


# Global instance
_catalog: Optional[FontCatalog] = None
_catalog_lock = threading.Lock()


def get_catalog() -> FontCatalog:
    """Get the process-wide catalog, loading it on first use."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                catalog = FontCatalog()
                catalog.load_all()
                _catalog = catalog
    return _catalog


def get_font(name: str) -> Font:
    return get_catalog().get(name)


def get_font_list() -> frozenset[str]:
    return get_catalog().list_names()
