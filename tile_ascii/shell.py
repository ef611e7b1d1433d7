#!/usr/bin/env python3
"""
Tile ASCII Art - Interactive Shell
==================================
Line-oriented command loop that owns one session: the current image, the
working character set, the resolution and the output sink.

Commands:
    exit                      - Leave the shell
    chars                     - Show the codepoints of the current characters
    add <c|a-z|all|space>     - Add characters
    remove <c|a-z|all|space>  - Remove characters
    res <up|down>             - Double or halve the resolution
    image <path>              - Load another image
    output <console|html>     - Choose where art is written
    asciiArt                  - Render the current image
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

from tile_ascii.char_matcher import GlyphBrightnessIndex
from tile_ascii.config import AsciiArtConfig
from tile_ascii.constants import MAX_ASCII, MIN_ASCII
from tile_ascii.exceptions import EmptyIndex, InvalidResolution
from tile_ascii.glyphs import GlyphRenderer
from tile_ascii.image_source import load_image
from tile_ascii.output import AsciiOutput, make_output
from tile_ascii.pipeline import AsciiArtGenerator
from tile_ascii.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

PROMPT = ">>> "

RES_FORMAT_ERROR_MSG = "Did not change resolution due to incorrect format."
RES_LIMITS_ERROR_MSG = "Did not change resolution due to exceeding boundaries."
RES_SUCCESS_MSG = "Resolution set to {}."
OUTPUT_ERROR_MSG = "Did not change output method due to incorrect format."
IMAGE_FORMAT_ERROR_MSG = "Did not change image file path due to incorrect format."
IMAGE_ERROR_MSG = "Did not execute due to problem with image file."
ADD_FORMAT_ERROR_MSG = "Did not add due to incorrect format."
REMOVE_FORMAT_ERROR_MSG = "Did not remove due to incorrect format."
EMPTY_CHARSET_ERROR_MSG = "Did not execute. Charset is empty."
RESOLUTION_ERROR_MSG = "Did not execute due to incorrect resolution."
OUTPUT_FILE_ERROR_MSG = "Did not execute due to problem with output file."
INCORRECT_COMMAND_ERROR_MSG = "Did not execute due to incorrect command."


def parse_char_spec(spec: str) -> Optional[List[str]]:
    """
    Expand an add/remove argument into characters.

    Accepts a single character, an inclusive range such as "a-z" (endpoints
    in either order), "all" for printable ASCII, or "space".

    Returns:
        The characters, or None if the argument is malformed
    """
    if spec == 'all':
        return [chr(code) for code in range(MIN_ASCII, MAX_ASCII + 1)]
    if spec == 'space':
        return [' ']
    if len(spec) == 1:
        return [spec]
    if len(spec) == 3 and spec[1] == '-':
        low, high = sorted((spec[0], spec[2]))
        return [chr(code) for code in range(ord(low), ord(high) + 1)]
    return None


class Shell:
    """Interactive ASCII art session."""

    def __init__(self, config: Optional[AsciiArtConfig] = None,
                 index: Optional[GlyphBrightnessIndex] = None,
                 image: Optional[PixelBuffer] = None,
                 input_func: Callable[[str], str] = input,
                 stream: Optional[TextIO] = None):
        """
        Args:
            config: Session settings; defaults are used when None
            index: Working character set; built from config.charset when None
            image: Starting image; loaded from config.image_path when None
            input_func: Line reader, `input` by default
            stream: Where messages and console art go, stdout by default
        """
        self.config = config or AsciiArtConfig()
        self.stream = stream
        self.input_func = input_func
        self.index = index if index is not None else GlyphBrightnessIndex(
            self.config.charset,
            GlyphRenderer(self.config.glyph_size, self.config.glyph_font),
        )
        self.resolution = self.config.resolution
        self.output: AsciiOutput = self._make_output(self.config.output)
        self.generator = AsciiArtGenerator(self.index, self.config)
        self.running = False

        self.image = image
        if self.image is None:
            try:
                self.image = load_image(self.config.image_path)
            except OSError as e:
                logger.warning("Could not load %s: %s", self.config.image_path, e)
                self._print(IMAGE_ERROR_MSG)

    # -------------------------------------------------------------------------
    # Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Read and execute commands until `exit` or end of input."""
        self.running = True
        while self.running:
            try:
                line = self.input_func(PROMPT)
            except EOFError:
                break
            except KeyboardInterrupt:
                self._print("\nUse 'exit' to quit.")
                continue
            self.running = self.handle_command(line)
        self.running = False

    def handle_command(self, line: str) -> bool:
        """
        Execute one command line.

        Returns:
            False if the session should end, True otherwise
        """
        parts = line.strip().split()
        if not parts:
            return True

        command, args = parts[0], parts[1:]
        logger.debug("Command %r args %r", command, args)

        if command == 'exit':
            return False
        elif command == 'chars':
            self._print(' '.join(str(ord(c)) for c in self.index.ordered_characters()))
        elif command == 'add':
            self._change_chars(args, self.index.add, ADD_FORMAT_ERROR_MSG)
        elif command == 'remove':
            self._change_chars(args, self.index.remove, REMOVE_FORMAT_ERROR_MSG)
        elif command == 'res':
            if len(args) == 1:
                self._change_resolution(args[0])
            else:
                self._print(RES_FORMAT_ERROR_MSG)
        elif command == 'image':
            if len(args) == 1:
                self._change_image(args[0])
            else:
                self._print(IMAGE_FORMAT_ERROR_MSG)
        elif command == 'output':
            if len(args) == 1:
                self._change_output(args[0])
            else:
                self._print(OUTPUT_ERROR_MSG)
        elif command == 'asciiArt':
            self._run_ascii_art()
        else:
            self._print(INCORRECT_COMMAND_ERROR_MSG)
        return True

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def _change_chars(self, args: List[str], apply: Callable[[str], None], error_msg: str) -> None:
        chars = parse_char_spec(args[0]) if len(args) == 1 else None
        if chars is None:
            self._print(error_msg)
            return
        for char in chars:
            apply(char)

    def _change_resolution(self, direction: str) -> None:
        if direction not in ('up', 'down'):
            self._print(RES_FORMAT_ERROR_MSG)
            return
        if self.image is None:
            self._print(IMAGE_ERROR_MSG)
            return

        max_resolution = self.image.width
        min_resolution = max(1, self.image.width // self.image.height)
        if direction == 'up':
            new_resolution = self.resolution * 2
        else:
            new_resolution = self.resolution // 2

        if min_resolution <= new_resolution <= max_resolution:
            self.resolution = new_resolution
            self._print(RES_SUCCESS_MSG.format(self.resolution))
        else:
            self._print(RES_LIMITS_ERROR_MSG)

    def _change_image(self, path: str) -> None:
        try:
            image = load_image(path)
        except OSError as e:
            logger.warning("Could not load %s: %s", path, e)
            self._print(IMAGE_ERROR_MSG)
            return
        self.image = image
        self.config.image_path = path

    def _change_output(self, kind: str) -> None:
        try:
            self.output = self._make_output(kind)
        except ValueError:
            self._print(OUTPUT_ERROR_MSG)
            return
        self.config.output = self.output.kind.value

    def _run_ascii_art(self) -> None:
        if self.image is None:
            self._print(IMAGE_ERROR_MSG)
            return
        try:
            result = self.generator.generate(self.image, self.resolution)
        except EmptyIndex:
            self._print(EMPTY_CHARSET_ERROR_MSG)
            return
        except InvalidResolution as e:
            logger.warning("%s", e)
            self._print(RESOLUTION_ERROR_MSG)
            return

        try:
            self.output.out(result.grid)
        except OSError as e:
            logger.error("Could not write output: %s", e)
            self._print(OUTPUT_FILE_ERROR_MSG)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _make_output(self, kind: str) -> AsciiOutput:
        return make_output(kind, html_path=self.config.html_path,
                           font=self.config.html_font, stream=self.stream)

    def _print(self, message: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(message + '\n')
