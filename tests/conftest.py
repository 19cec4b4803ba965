import pytest
from PIL import Image


def solid_image(width, height, colour=(0, 0, 0, 255)):
    return Image.new("RGBA", (width, height), colour)


def gradient_image(width=8, height=2):
    """Opaque greyscale ramp, black on the left, white on the right."""
    img = Image.new("RGBA", (width, height))
    pixels = img.load()
    for y in range(height):
        for x in range(width):
            v = x * 255 // max(width - 1, 1)
            pixels[x, y] = (v, v, v, 255)
    return img


@pytest.fixture
def save_image(tmp_path):
    """Save a Pillow image as PNG under tmp_path and return its path."""

    def _save(img, name="source.png"):
        path = tmp_path / name
        img.save(path)
        return path

    return _save
