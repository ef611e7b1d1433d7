#!/usr/bin/env python3
"""
Tile ASCII Art - Image Source
=============================
Decodes image files into PixelBuffers and writes them back out, via Pillow.
Decode and I/O errors from Pillow are not caught here.
"""

import logging
from PIL import Image
import numpy as np
from typing import Optional

from tile_ascii.constants import WHITE
from tile_ascii.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def to_rgb(image: Image.Image) -> Image.Image:
    """Flatten an image to RGB, compositing any transparency onto white."""
    if image.mode == 'P' and 'transparency' in image.info:
        image = image.convert('RGBA')
    if image.mode in ('RGBA', 'LA'):
        rgba = image.convert('RGBA')
        background = Image.new('RGB', rgba.size, WHITE)
        background.paste(rgba, mask=rgba.split()[3])
        return background
    if image.mode != 'RGB':
        return image.convert('RGB')
    return image


def from_pil(image: Image.Image) -> PixelBuffer:
    """Build a PixelBuffer from a PIL image."""
    return PixelBuffer(np.asarray(to_rgb(image), dtype=np.uint8))


def to_pil(buffer: PixelBuffer) -> Image.Image:
    """Build an RGB PIL image from a PixelBuffer."""
    return Image.fromarray(np.ascontiguousarray(buffer.to_array()))


def load_image(path: str) -> PixelBuffer:
    """
    Read an image file.

    Raises:
        OSError: If the file cannot be read
        PIL.UnidentifiedImageError: If Pillow cannot decode it
    """
    with Image.open(path) as image:
        image.load()
        logger.debug("Loaded %s: %dx%d, mode %s", path, image.width, image.height, image.mode)
        return from_pil(image)


def save_image(buffer: PixelBuffer, path: str, format: Optional[str] = None) -> None:
    """Write a PixelBuffer to disk; the format follows the extension unless given."""
    to_pil(buffer).save(path, format=format)
    logger.debug("Saved %dx%d image to %s", buffer.width, buffer.height, path)
