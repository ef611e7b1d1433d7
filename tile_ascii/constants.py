#!/usr/bin/env python3
"""
Tile ASCII Art - Constants
==========================
Shared constants and enums for the tiling, brightness and matching engine.
"""

from enum import Enum


class OutputKind(Enum):
    """Where a rendered character grid is sent."""
    CONSOLE = 'console'
    HTML = 'html'


# Perceptual luminance weights (Rec. 709)
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722
RGB_MAX = 255.0

WHITE = (255, 255, 255)

# Printable ASCII range used by "add all" / "remove all"
MIN_ASCII = 32
MAX_ASCII = 126

# Side length of the square glyph bitmaps
GLYPH_SIZE = 16

# Normalized brightness used when every character has the same raw brightness
DEGENERATE_NORMALIZED = 0.5

# Session defaults
DEFAULT_CHARSET = '0123456789'
DEFAULT_RESOLUTION = 128
DEFAULT_IMAGE = 'cat.jpeg'
DEFAULT_HTML_PATH = 'out.html'
DEFAULT_FONT = 'Courier New'
