#!/usr/bin/env python3
"""
Tile ASCII Art - Glyph Rendering
================================
Rasterises single characters into fixed-size boolean bitmaps with Pillow.
A pixel is "on" where the background shows through, so lighter glyphs
have more "on" pixels.
"""

import logging
from PIL import Image, ImageDraw, ImageFont
import numpy as np
from typing import Callable, Dict, Optional

from tile_ascii.constants import GLYPH_SIZE

logger = logging.getLogger(__name__)

# Any callable mapping a character to a 2D boolean bitmap can stand in
GlyphProvider = Callable[[str], np.ndarray]


class GlyphRenderer:
    """Render characters to square on/off bitmaps, caching each result."""

    def __init__(self, size: int = GLYPH_SIZE, font_path: Optional[str] = None):
        """
        Args:
            size: Side length of the bitmap in pixels
            font_path: Optional TrueType font; Pillow's built-in font otherwise
        """
        if size <= 0:
            raise ValueError(f"Glyph size must be positive, got {size}")
        self.size = size
        self.font_path = font_path
        self._font = None
        self._cache: Dict[str, np.ndarray] = {}

    def _get_font(self):
        if self._font is None:
            if self.font_path:
                try:
                    self._font = ImageFont.truetype(self.font_path, self.size - 2)
                except OSError:
                    logger.warning("Could not load font %s, using Pillow default", self.font_path)
            if self._font is None:
                self._font = ImageFont.load_default()
        return self._font

    def _rasterize(self, char: str) -> np.ndarray:
        img = Image.new('L', (self.size, self.size), color=255)
        draw = ImageDraw.Draw(img)
        font = self._get_font()

        left, top, right, bottom = draw.textbbox((0, 0), char, font=font)
        x = (self.size - (right - left)) // 2 - left
        y = (self.size - (bottom - top)) // 2 - top
        draw.text((x, y), char, fill=0, font=font)

        bitmap = np.array(img) >= 128
        bitmap.flags.writeable = False
        return bitmap

    def __call__(self, char: str) -> np.ndarray:
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        bitmap = self._cache.get(char)
        if bitmap is None:
            bitmap = self._rasterize(char)
            self._cache[char] = bitmap
        return bitmap


def bitmap_density(bitmap: np.ndarray) -> float:
    """Fraction of "on" (background) pixels in a glyph bitmap."""
    arr = np.asarray(bitmap, dtype=bool)
    if arr.size == 0:
        raise ValueError("Glyph bitmap is empty")
    return float(np.count_nonzero(arr)) / arr.size
