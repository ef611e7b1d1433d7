#!/usr/bin/env python3
"""
Tile ASCII Art Converter
========================
Command line front end for tile_ascii.

Renders an image once (to the terminal, a text file or an HTML page), or
starts the interactive shell where the character set, resolution, image and
output can be changed between renders.
"""

import logging
import sys

from PIL import Image, ImageDraw

from tile_ascii.char_matcher import GlyphBrightnessIndex
from tile_ascii.config import load_config
from tile_ascii.exceptions import AsciiArtError
from tile_ascii.glyphs import GlyphRenderer
from tile_ascii.image_source import from_pil, load_image
from tile_ascii.logging_conf import setup_logging
from tile_ascii.output import ConsoleOutput, HtmlOutput
from tile_ascii.pipeline import AsciiArtGenerator
from tile_ascii.shell import Shell

logger = logging.getLogger(__name__)


# =============================================================================
# EXAMPLE USAGE AND DEMO
# =============================================================================

def demo(resolution: int = 32) -> None:
    """Render a generated test image with the default digits charset."""
    print("=" * 60)
    print("Tile ASCII Art Demo")
    print("=" * 60)

    test_image = Image.new('RGB', (100, 100), color='white')
    draw = ImageDraw.Draw(test_image)
    draw.ellipse([10, 10, 90, 90], fill='red', outline='black')
    draw.rectangle([30, 30, 70, 70], fill='blue')

    index = GlyphBrightnessIndex('0123456789')
    result = AsciiArtGenerator(index).generate(from_pil(test_image), resolution)
    print(result.text)
    print(f"\n{result.rows} rows x {result.columns} columns "
          f"(image {result.original_size[0]}x{result.original_size[1]}, "
          f"padded {result.padded_size[0]}x{result.padded_size[1]})")


# =============================================================================
# COMMAND LINE INTERFACE
# =============================================================================

def create_argument_parser():
    """Create command line argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description='Convert images to ASCII art by tile brightness matching',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                          # Render with the default digits
  %(prog)s image.png -r 64                    # 64 characters per row
  %(prog)s image.png --charset " .:-=+*#%%@"   # Custom characters
  %(prog)s image.png -o art.html              # HTML output
  %(prog)s --interactive image.png            # Interactive shell
        """
    )

    parser.add_argument('input', nargs='?', help='Input image file')
    parser.add_argument('-o', '--output', help='Output file (.html for HTML, anything else for text)')
    parser.add_argument('-r', '--resolution', type=int, help='Characters per row (power of two)')
    parser.add_argument('--charset', help='Characters to draw with')
    parser.add_argument('--font', help='Font family used in HTML output')
    parser.add_argument('--glyph-font', help='TrueType font used to measure character brightness')
    parser.add_argument('--config', help='JSON configuration file')
    parser.add_argument('-i', '--interactive', action='store_true', help='Start the interactive shell')
    parser.add_argument('--demo', action='store_true', help='Run demo')
    parser.add_argument('--log-file', help='Also log to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    return parser


def main(argv=None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(
            args.config,
            resolution=args.resolution,
            charset=args.charset,
            html_font=args.font,
            glyph_font=args.glyph_font,
            image_path=args.input,
            log_file=args.log_file,
            log_level='DEBUG' if args.verbose else None,
        )
    except (OSError, AsciiArtError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, config.log_file)

    if args.demo:
        demo()
        return 0

    if args.interactive:
        Shell(config).run()
        return 0

    if not args.input:
        parser.print_help()
        return 1

    try:
        image = load_image(config.image_path)
    except OSError as e:
        print(f"Error loading image: {e}", file=sys.stderr)
        return 1
    logger.info("Loaded %s (%dx%d)", config.image_path, image.width, image.height)

    index = GlyphBrightnessIndex(config.charset, GlyphRenderer(config.glyph_size, config.glyph_font))
    try:
        result = AsciiArtGenerator(index, config).generate(image)
    except AsciiArtError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            if args.output.lower().endswith('.html'):
                HtmlOutput(args.output, config.html_font).out(result.grid)
            else:
                with open(args.output, 'w', encoding='utf-8') as f:
                    f.write(result.text + '\n')
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        print(f"Saved to {args.output}")
    else:
        ConsoleOutput().out(result.grid)

    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================

if __name__ == '__main__':
    sys.exit(main())
