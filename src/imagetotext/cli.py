import argparse
import logging
import sys

from imagetotext.charsets import PRESETS
from imagetotext.converter import convert
from imagetotext.palette import Palette

logger = logging.getLogger(__name__)


def _prompt(message: str) -> str:
    print(message)
    return input("> ")


def _shades(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("needs at least one character")
    return value


def build_palette(glyphs: str, commands: list[str]) -> Palette:
    """Apply trailing commands, case-insensitively, to the palette."""
    palette = Palette(glyphs)
    for command in commands:
        if command.lower() == "invert":
            palette = palette.invert()
        else:
            logger.warning("Ignoring unknown command: %s", command)
    return palette


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert an image to text art")
    parser.add_argument("source", nargs="?", help="Path to input image (prompted for if omitted)")
    parser.add_argument("destination", nargs="?", help="Path of the text file to write (prompted for if omitted)")
    parser.add_argument("commands", nargs="*", help="Extra commands; 'invert' swaps dark and bright")
    parser.add_argument(
        "-p", "--palette", default="default", choices=sorted(PRESETS), help="Glyph preset to use (default: default)"
    )
    parser.add_argument(
        "-s", "--shades", type=_shades, default=None, help="Custom glyphs, darkest first. Overrides --palette."
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    args = parser.parse_intermixed_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    glyphs = args.shades if args.shades is not None else PRESETS[args.palette]
    palette = build_palette(glyphs, args.commands)

    if args.source is not None and args.destination is not None:
        source, destination = args.source, args.destination
    else:
        try:
            source = _prompt("Image source path:")
            destination = _prompt("File destination path:")
        except EOFError:
            print("An error has occurred: no input paths given", file=sys.stderr)
            return 1

    result = convert(source, destination, palette)
    if result.ok:
        print(result.message)
        return 0
    print(result.message, file=sys.stderr)
    return 1
