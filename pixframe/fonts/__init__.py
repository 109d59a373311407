"""
Bundled bitmap fonts.

Glyph bitmaps and named faces are YAML data files shipped with the package;
the catalog loads them once and is read-only afterwards.
"""

from .registry import Font, FontCatalog, GlyphSet, get_catalog, get_font, get_font_list

__all__ = ["Font", "FontCatalog", "GlyphSet", "get_catalog", "get_font", "get_font_list"]
