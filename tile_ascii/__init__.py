"""
Tile ASCII Art
==============
Converts images into grids of characters by splitting them into square tiles
and matching each tile's brightness to the closest character of a working
character set.
"""

from tile_ascii.brightness import BrightnessScorer
from tile_ascii.char_matcher import GlyphBrightnessIndex
from tile_ascii.config import AsciiArtConfig, load_config
from tile_ascii.exceptions import (
    AsciiArtError,
    ConfigError,
    EmptyIndex,
    InvalidDimensions,
    InvalidResolution,
    OutOfBounds,
)
from tile_ascii.glyphs import GlyphRenderer
from tile_ascii.image_source import load_image, save_image
from tile_ascii.output import ConsoleOutput, HtmlOutput, make_output
from tile_ascii.pipeline import AsciiArtGenerator, AsciiArtResult, render
from tile_ascii.pixel_buffer import PixelBuffer
from tile_ascii.shell import Shell
from tile_ascii.tiler import Tiler

__version__ = "1.0.0"

__all__ = [
    # Core
    'PixelBuffer',
    'Tiler',
    'BrightnessScorer',
    'GlyphBrightnessIndex',
    'render',
    'AsciiArtGenerator',
    'AsciiArtResult',

    # Collaborators
    'GlyphRenderer',
    'load_image',
    'save_image',
    'ConsoleOutput',
    'HtmlOutput',
    'make_output',
    'Shell',

    # Configuration
    'AsciiArtConfig',
    'load_config',

    # Errors
    'AsciiArtError',
    'ConfigError',
    'EmptyIndex',
    'InvalidDimensions',
    'InvalidResolution',
    'OutOfBounds',
]
