#!/usr/bin/env python3
"""
Tile ASCII Art - Render Pipeline
================================
Pads an image, splits it into square tiles, scores every tile and picks the
closest-brightness character for each one.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tile_ascii.brightness import BrightnessScorer
from tile_ascii.char_matcher import GlyphBrightnessIndex
from tile_ascii.config import AsciiArtConfig
from tile_ascii.pixel_buffer import PixelBuffer
from tile_ascii.tiler import Tiler

logger = logging.getLogger(__name__)

CharGrid = List[List[str]]


def render(buffer: PixelBuffer, resolution: int, index: GlyphBrightnessIndex) -> CharGrid:
    """
    Convert an image into a grid of characters.

    Args:
        buffer: Source image
        resolution: Tile columns per row of the padded image
        index: Characters to draw with

    Returns:
        rows x resolution grid of single-character strings

    Raises:
        InvalidResolution: If the padded image cannot be split at `resolution`
        EmptyIndex: If `index` holds no characters
    """
    padded = Tiler.pad(buffer)
    tiles = Tiler.split(padded, resolution)
    return [
        [index.nearest(BrightnessScorer.score(tile)) for tile in row]
        for row in tiles
    ]


@dataclass
class AsciiArtResult:
    """Result of ASCII art generation."""
    grid: CharGrid                                      # Rows of characters
    lines: List[str] = field(default_factory=list)      # Rows joined into strings
    text: str = ''                                      # Lines joined by newlines
    rows: int = 0
    columns: int = 0
    resolution: int = 0
    original_size: Tuple[int, int] = (0, 0)             # (width, height)
    padded_size: Tuple[int, int] = (0, 0)               # (width, height)


class AsciiArtGenerator:
    """Renders images with a session's configuration and character set."""

    def __init__(self, index: GlyphBrightnessIndex, config: Optional[AsciiArtConfig] = None):
        self.index = index
        self.config = config or AsciiArtConfig()

    def generate(self, buffer: PixelBuffer, resolution: Optional[int] = None) -> AsciiArtResult:
        """
        Generate ASCII art from a pixel buffer.

        Args:
            buffer: Image to convert
            resolution: Overrides the configured resolution

        Returns:
            AsciiArtResult
        """
        resolution = resolution if resolution is not None else self.config.resolution
        start = time.perf_counter()
        grid = render(buffer, resolution, self.index)
        elapsed = time.perf_counter() - start

        lines = [''.join(row) for row in grid]
        columns = len(grid[0]) if grid else 0
        padded = (Tiler.next_power_of_two(buffer.width), Tiler.next_power_of_two(buffer.height))
        logger.debug("Rendered %dx%d image as %d rows x %d columns in %.3fs",
                     buffer.width, buffer.height, len(grid), columns, elapsed)

        return AsciiArtResult(
            grid=grid,
            lines=lines,
            text='\n'.join(lines),
            rows=len(grid),
            columns=columns,
            resolution=resolution,
            original_size=buffer.size,
            padded_size=padded,
        )
