#!/usr/bin/env python3
"""
Tile ASCII Art - Exceptions
===========================
Error types raised by the engine. Every error derives from AsciiArtError and
from the builtin exception it most resembles, so callers can catch either.
"""


class AsciiArtError(Exception):
    """Base class for all tile_ascii errors."""


class InvalidDimensions(AsciiArtError, ValueError):
    """An image size is zero or negative."""


class InvalidResolution(AsciiArtError, ValueError):
    """A resolution does not divide the image into square tiles."""


class EmptyIndex(AsciiArtError, LookupError):
    """A brightness query was made against an empty character index."""


class OutOfBounds(AsciiArtError, IndexError):
    """A pixel lookup fell outside the buffer."""


class ConfigError(AsciiArtError, ValueError):
    """A configuration value is invalid."""
