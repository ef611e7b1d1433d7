"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from tile_ascii.char_matcher import GlyphBrightnessIndex
from tile_ascii.pixel_buffer import PixelBuffer

BITMAP_PIXELS = 10

# Characters and how many of their 10 glyph pixels show background.
# Heavier glyphs leave less background, as with the Pillow renderer.
DEFAULT_LIGHT = {
    ' ': 10,
    '.': 9,
    '0': 3,
    '1': 5,
    'a': 4,
    'b': 6,
    'm': 2,
    '#': 1,
    '@': 0,
}


class FakeGlyphs:
    """Glyph provider with fixed background counts that records every call."""

    def __init__(self, light=None):
        self.light = dict(DEFAULT_LIGHT if light is None else light)
        self.calls = []

    def __call__(self, char: str) -> np.ndarray:
        self.calls.append(char)
        on = self.light.get(char, 5)
        bitmap = np.zeros(BITMAP_PIXELS, dtype=bool)
        bitmap[:on] = True
        return bitmap.reshape(2, 5)


def solid(width: int, height: int, color=(255, 255, 255)) -> PixelBuffer:
    return PixelBuffer.filled(width, height, color)


def gradient(width: int, height: int) -> PixelBuffer:
    """Buffer whose every pixel is distinct so positions can be traced."""
    arr = np.zeros((height, width, 3), dtype=np.uint8)
    for row in range(height):
        for col in range(width):
            arr[row, col] = (row % 256, col % 256, (row * width + col) % 256)
    return PixelBuffer(arr)


@pytest.fixture
def fake_glyphs() -> FakeGlyphs:
    return FakeGlyphs()


@pytest.fixture
def make_index(fake_glyphs):
    def _make(chars):
        return GlyphBrightnessIndex(chars, glyph_provider=fake_glyphs)
    return _make
