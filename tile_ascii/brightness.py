#!/usr/bin/env python3
"""
Tile ASCII Art - Brightness
===========================
Perceptual brightness of a pixel buffer.
"""

import numpy as np

from tile_ascii.constants import BLUE_WEIGHT, GREEN_WEIGHT, RED_WEIGHT, RGB_MAX
from tile_ascii.pixel_buffer import PixelBuffer

_WEIGHTS = np.array([RED_WEIGHT, GREEN_WEIGHT, BLUE_WEIGHT], dtype=np.float64)


class BrightnessScorer:
    """Luminance scoring for tiles."""

    @staticmethod
    def score(buffer: PixelBuffer) -> float:
        """
        Average weighted luminance of all pixels, scaled to [0, 1].

        Args:
            buffer: Image or tile to score

        Returns:
            0.0 for solid black, 1.0 for solid white. Rounded to 12
            decimals so solid white is exactly 1.0.
        """
        arr = buffer.to_array().astype(np.float64)
        luminance = arr @ _WEIGHTS
        value = float(np.mean(luminance)) / RGB_MAX
        return min(1.0, max(0.0, round(value, 12)))
