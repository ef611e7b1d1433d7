#!/usr/bin/env python3
"""
Tile ASCII Art - Configuration
==============================
Session configuration: which image, which characters, what resolution and
where the output goes. Defaults can be overridden from a JSON file.

Usage:
    from tile_ascii.config import load_config
    config = load_config()                  # $TILE_ASCII_CONFIG or defaults
    config = load_config('settings.json')
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from tile_ascii.constants import (
    DEFAULT_CHARSET,
    DEFAULT_FONT,
    DEFAULT_HTML_PATH,
    DEFAULT_IMAGE,
    DEFAULT_RESOLUTION,
    GLYPH_SIZE,
    OutputKind,
)
from tile_ascii.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'TILE_ASCII_CONFIG'

_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')


@dataclass
class AsciiArtConfig:
    """Configuration for one ASCII art session."""

    # Tiling
    resolution: int = DEFAULT_RESOLUTION     # Tile columns per image row

    # Characters
    charset: str = DEFAULT_CHARSET           # Initial working character set
    glyph_size: int = GLYPH_SIZE             # Side of rendered glyph bitmaps
    glyph_font: Optional[str] = None         # TrueType path, Pillow default if None

    # Input / output
    image_path: str = DEFAULT_IMAGE
    output: str = OutputKind.CONSOLE.value   # console | html
    html_path: str = DEFAULT_HTML_PATH
    html_font: str = DEFAULT_FONT

    # Logging
    log_level: str = 'INFO'
    log_file: Optional[str] = None

    def validate(self) -> 'AsciiArtConfig':
        """
        Check values and normalise case-insensitive fields.

        Raises:
            ConfigError: On the first invalid value
        """
        if not isinstance(self.resolution, int) or self.resolution <= 0:
            raise ConfigError(f"resolution must be a positive integer, got {self.resolution!r}")
        if not self.charset:
            raise ConfigError("charset must not be empty")
        if not isinstance(self.glyph_size, int) or self.glyph_size <= 0:
            raise ConfigError(f"glyph_size must be a positive integer, got {self.glyph_size!r}")

        self.output = str(self.output).lower()
        if self.output not in {kind.value for kind in OutputKind}:
            raise ConfigError(f"output must be 'console' or 'html', got {self.output!r}")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return self


def _default_config_path() -> Optional[str]:
    env = os.environ.get(CONFIG_ENV_VAR)
    return os.path.expanduser(env) if env else None


def load_config(path: Optional[str] = None, **overrides: Any) -> AsciiArtConfig:
    """
    Build a validated configuration.

    Args:
        path: JSON file to read; falls back to $TILE_ASCII_CONFIG, then defaults
        **overrides: Values applied over the file, ignored when None

    Returns:
        AsciiArtConfig

    Raises:
        OSError: If an explicitly named file cannot be read
        ConfigError: If the file is not a JSON object or a value is invalid
    """
    cfg_path = os.path.expanduser(path) if path else _default_config_path()
    data: Dict[str, Any] = {}

    if cfg_path:
        with open(cfg_path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"{cfg_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{cfg_path}: expected a JSON object")
        logger.debug("Loaded configuration from %s", cfg_path)

    known = {f.name for f in fields(AsciiArtConfig)}
    for key in sorted(set(data) - known):
        logger.warning("Ignoring unknown config key %r", key)

    values = {k: v for k, v in data.items() if k in known}
    values.update({k: v for k, v in overrides.items() if v is not None})
    unknown = set(values) - known
    if unknown:
        raise ConfigError(f"Unknown config option(s): {', '.join(sorted(unknown))}")

    return AsciiArtConfig(**values).validate()
