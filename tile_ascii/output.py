#!/usr/bin/env python3
"""
Tile ASCII Art - Output
=======================
Sinks for a rendered character grid: plain console text or an HTML page.
"""

import html
import logging
import sys
from typing import List, Optional, TextIO

from tile_ascii.constants import DEFAULT_FONT, DEFAULT_HTML_PATH, OutputKind

logger = logging.getLogger(__name__)


class AsciiOutput:
    """Base class for character grid sinks."""

    kind: OutputKind

    def out(self, grid: List[List[str]]) -> None:
        raise NotImplementedError


class ConsoleOutput(AsciiOutput):
    """Print the grid one row per line."""

    kind = OutputKind.CONSOLE

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def out(self, grid: List[List[str]]) -> None:
        stream = self.stream or sys.stdout
        for row in grid:
            stream.write(''.join(row) + '\n')
        stream.flush()


class HtmlOutput(AsciiOutput):
    """Write the grid as a standalone HTML page."""

    kind = OutputKind.HTML

    def __init__(self, path: str = DEFAULT_HTML_PATH, font: str = DEFAULT_FONT,
                 font_size: str = "8px", background_color: str = "#ffffff",
                 line_height: float = 1.0):
        self.path = path
        self.font = font
        self.font_size = font_size
        self.background_color = background_color
        self.line_height = line_height

    def format(self, grid: List[List[str]]) -> str:
        """Build the HTML document for a grid."""
        body = '\n'.join(html.escape(''.join(row)) for row in grid)
        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <style>
        .ascii-art {{
            font-family: "{html.escape(self.font)}", monospace;
            font-size: {self.font_size};
            line-height: {self.line_height};
            background-color: {self.background_color};
            white-space: pre;
            display: inline-block;
            padding: 10px;
        }}
    </style>
</head>
<body>
<div class="ascii-art">
{body}
</div>
</body>
</html>
"""

    def out(self, grid: List[List[str]]) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(self.format(grid))
        logger.info("Saved ASCII art to %s", self.path)


def make_output(kind, html_path: str = DEFAULT_HTML_PATH, font: str = DEFAULT_FONT,
                stream: Optional[TextIO] = None) -> AsciiOutput:
    """
    Create an output sink by name.

    Args:
        kind: 'console', 'html' or an OutputKind

    Raises:
        ValueError: For unknown kinds
    """
    kind = OutputKind(kind.lower() if isinstance(kind, str) else kind)
    if kind is OutputKind.HTML:
        return HtmlOutput(html_path, font)
    return ConsoleOutput(stream)
