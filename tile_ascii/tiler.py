#!/usr/bin/env python3
"""
Tile ASCII Art - Tiler
======================
Pads images to power-of-two dimensions and splits them into square tiles.
"""

import logging
import numpy as np
from typing import List

from tile_ascii.constants import WHITE
from tile_ascii.exceptions import InvalidDimensions, InvalidResolution
from tile_ascii.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class Tiler:
    """Power-of-two padding and square tiling of pixel buffers."""

    @staticmethod
    def next_power_of_two(n: int) -> int:
        """Smallest power of two that is >= n."""
        if n <= 0:
            raise InvalidDimensions(f"Dimension must be positive, got {n}")
        return 1 << (n - 1).bit_length()

    @staticmethod
    def pad(buffer: PixelBuffer) -> PixelBuffer:
        """
        Center an image on a white canvas with power-of-two sides.

        Args:
            buffer: Source image

        Returns:
            New buffer; source pixel (row, col) lands at
            (row + y_offset, col + x_offset) with floor-divided offsets
        """
        width, height = buffer.width, buffer.height
        new_width = Tiler.next_power_of_two(width)
        new_height = Tiler.next_power_of_two(height)
        x_offset = (new_width - width) // 2
        y_offset = (new_height - height) // 2

        canvas = np.empty((new_height, new_width, 3), dtype=np.uint8)
        canvas[:, :] = WHITE
        canvas[y_offset:y_offset + height, x_offset:x_offset + width] = buffer.to_array()

        if (new_width, new_height) != (width, height):
            logger.debug("Padded %dx%d to %dx%d", width, height, new_width, new_height)
        return PixelBuffer(canvas)

    @staticmethod
    def split(buffer: PixelBuffer, columns: int) -> List[List[PixelBuffer]]:
        """
        Split an image into a row-major grid of square tiles.

        Args:
            buffer: Image to split (normally already padded)
            columns: Number of tiles per row

        Returns:
            rows x columns grid of independent tile copies

        Raises:
            InvalidResolution: If the image cannot be cut into
                `columns` equal square tiles per row
        """
        width, height = buffer.width, buffer.height
        if columns <= 0 or columns > width:
            raise InvalidResolution(f"Resolution {columns} outside 1..{width}")
        if width % columns != 0:
            raise InvalidResolution(f"Resolution {columns} does not divide width {width}")

        side = width // columns
        if height % side != 0:
            raise InvalidResolution(f"Tile side {side} does not divide height {height}")
        rows = height // side

        arr = buffer.to_array()
        grid = []
        for row in range(rows):
            tiles = []
            for col in range(columns):
                block = arr[row * side:(row + 1) * side, col * side:(col + 1) * side]
                tiles.append(PixelBuffer(block))
            grid.append(tiles)
        return grid
