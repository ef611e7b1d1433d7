#!/usr/bin/env python3
"""
Tile ASCII Art - Pixel Buffer
=============================
Immutable 2D grid of RGB samples. Padding and splitting never modify a
buffer in place; they always build a new one.
"""

import numpy as np
from typing import Iterable, Sequence, Tuple

from tile_ascii.exceptions import InvalidDimensions, OutOfBounds

RGB = Tuple[int, int, int]


class PixelBuffer:
    """Read-only RGB image indexed as (row, col)."""

    __slots__ = ('_pixels',)

    def __init__(self, pixels):
        """
        Build a buffer from an array-like of shape (height, width, 3).

        Args:
            pixels: Nested sequences or numpy array of 0-255 channel values

        Raises:
            InvalidDimensions: If the data is empty or not an RGB grid
        """
        arr = np.array(pixels, dtype=np.uint8, copy=True)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise InvalidDimensions(f"Expected (height, width, 3) pixels, got shape {arr.shape}")
        if arr.shape[0] <= 0 or arr.shape[1] <= 0:
            raise InvalidDimensions(f"Image size must be positive, got {arr.shape[1]}x{arr.shape[0]}")
        arr.flags.writeable = False
        self._pixels = arr

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[RGB]]) -> 'PixelBuffer':
        """Build a buffer from rows of (r, g, b) tuples."""
        return cls([list(row) for row in rows])

    @classmethod
    def filled(cls, width: int, height: int, color: RGB) -> 'PixelBuffer':
        """Build a buffer of a single solid color."""
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"Image size must be positive, got {width}x{height}")
        arr = np.empty((height, width, 3), dtype=np.uint8)
        arr[:, :] = color
        return cls(arr)

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height), matching PIL's Image.size ordering."""
        return self.width, self.height

    def pixel_at(self, row: int, col: int) -> RGB:
        """
        Get the color at (row, col).

        Raises:
            OutOfBounds: If either index lies outside the buffer
        """
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfBounds(
                f"Pixel ({row}, {col}) outside {self.height} rows x {self.width} columns"
            )
        r, g, b = self._pixels[row, col]
        return int(r), int(g), int(b)

    def to_array(self) -> np.ndarray:
        """Return the underlying read-only (height, width, 3) array."""
        return self._pixels

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return np.array_equal(self._pixels, other._pixels)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"
