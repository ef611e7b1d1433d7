#!/usr/bin/env python3
"""
Central logging setup for tile_ascii.
Console logging plus an optional rotating file log.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  rotate_bytes: int = 5 * 1024 * 1024, rotate_keep: int = 3) -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)

    if log_file:
        handler = RotatingFileHandler(
            log_file,
            maxBytes=rotate_bytes,
            backupCount=rotate_keep,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(handler)

    # Pillow logs every plugin it probes at DEBUG
    logging.getLogger("PIL").setLevel(max(numeric, logging.INFO))
