import numbers

import numpy as np
from PIL import Image

# Perceived weight of each primary, per mille
RED_WEIGHT = 299
GREEN_WEIGHT = 587
BLUE_WEIGHT = 114

CHANNEL_MAX = 255


class ChannelRangeError(ValueError):
    """A colour channel fell outside 0-255."""

    def __init__(self, channel: str, value: int):
        super().__init__(f"{channel} value must be an integer from 0 to {CHANNEL_MAX}: {value}")
        self.channel = channel
        self.value = value


def _check_channel(channel: str, value) -> np.ndarray:
    if isinstance(value, numbers.Integral):
        if not 0 <= value <= CHANNEL_MAX:
            raise ChannelRangeError(channel, int(value))
        return np.asarray(int(value), dtype=np.int64)

    values = np.asarray(value)
    if values.dtype.kind in "iu":
        bad = values[(values < 0) | (values > CHANNEL_MAX)]
        if bad.size:
            raise ChannelRangeError(channel, int(bad.flat[0]))
    else:
        # Floats, and ints too large for a machine word (object dtype)
        for v in values.flat:
            if not isinstance(v, numbers.Integral) or not 0 <= v <= CHANNEL_MAX:
                raise ChannelRangeError(channel, v.item() if isinstance(v, np.generic) else v)
    return values.astype(np.int64)


def brightness(alpha, red, green, blue):
    """Brightness of a pixel as perceived by humans, 0 to 255.

    Integer division happens at every step, so ``alpha // 255`` is either 0 or
    1 and anything short of fully opaque comes out black.

    Takes plain ints or equally shaped arrays. Arrays come back as an array
    of the same shape, ints as an int.
    """
    a = _check_channel("alpha", alpha)
    r = _check_channel("red", red)
    g = _check_channel("green", green)
    b = _check_channel("blue", blue)

    result = a // CHANNEL_MAX * (r * RED_WEIGHT + g * GREEN_WEIGHT + b * BLUE_WEIGHT) // 1000
    if result.ndim == 0:
        return int(result)
    return result


def pack_pixels(image: Image.Image) -> np.ndarray:
    """Pack an image into a (height, width) uint32 grid of ARGB values."""
    rgba = np.asarray(image.convert("RGBA"), dtype=np.uint32).reshape(image.height, image.width, 4)
    r, g, b, a = rgba[..., 0], rgba[..., 1], rgba[..., 2], rgba[..., 3]
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack_pixel(pixel):
    """Split packed ARGB values into (alpha, red, green, blue)."""
    pixel = np.asarray(pixel, dtype=np.uint32)
    channels = (pixel >> 24, (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF)
    if pixel.ndim == 0:
        return tuple(int(c) for c in channels)
    return channels


def brightness_map(image: Image.Image) -> np.ndarray:
    """Brightness of every pixel, shaped (height, width)."""
    alpha, red, green, blue = unpack_pixel(pack_pixels(image))
    return brightness(alpha, red, green, blue)


def max_brightness(grid: np.ndarray) -> int:
    """Brightest value in the grid, or 0 if it has no cells."""
    grid = np.asarray(grid)
    if grid.size == 0:
        return 0
    return int(grid.max())
