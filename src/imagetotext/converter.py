import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from imagetotext.brightness import brightness_map, max_brightness
from imagetotext.palette import Palette
from imagetotext.render import render_lines, write_lines

logger = logging.getLogger(__name__)


class InvalidImageError(OSError):
    """The source exists but could not be decoded as an image."""


@dataclass
class Converted:
    source: Path
    destination: Path
    width: int
    height: int
    ok = True
    message = "Successfully converted image."


@dataclass
class InvalidImageSource:
    source: Path
    ok = False
    message = "Input source is not a valid image."


@dataclass
class ConversionFailure:
    source: Path
    error: Exception
    ok = False

    @property
    def message(self) -> str:
        return f"An error has occurred: {self.error}"


ConversionResult = Converted | InvalidImageSource | ConversionFailure


def load_image(path: str | Path) -> Image.Image:
    """Decode an image file into RGBA.

    Raises InvalidImageError if the file is not an image Pillow understands.
    Missing files and read errors surface as plain OSError.
    """
    try:
        with Image.open(path) as image:
            image.load()
            return image.convert("RGBA")
    except UnidentifiedImageError as e:
        raise InvalidImageError(f"Not an image: {path}") from e


def image_to_text(image: Image.Image, palette: Palette) -> list[str]:
    grid = brightness_map(image)
    return render_lines(grid, palette, peak=max_brightness(grid))


def convert(source: str | Path, destination: str | Path, palette: Palette | None = None) -> ConversionResult:
    """Convert the image at ``source`` to text art written to ``destination``."""
    if palette is None:
        palette = Palette()
    source = Path(source)
    destination = Path(destination)

    try:
        image = load_image(source)
        logger.debug("Decoded %s (%dx%d)", source, image.width, image.height)
        lines = image_to_text(image, palette)
        write_lines(lines, destination)
    except InvalidImageError:
        return InvalidImageSource(source)
    except Exception as e:
        logger.debug("Converting %s failed", source, exc_info=True)
        return ConversionFailure(source, e)

    logger.debug("Wrote %d rows to %s", len(lines), destination)
    return Converted(source, destination, image.width, image.height)
