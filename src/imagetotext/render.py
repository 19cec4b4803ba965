from pathlib import Path

import numpy as np

from imagetotext.brightness import max_brightness
from imagetotext.palette import Palette


def shade_indices(grid: np.ndarray, peak: int, length: int) -> np.ndarray:
    """Scale brightness values to palette indices in [0, length).

    Dividing by ``peak + 1`` keeps the brightest pixel inside the palette and
    makes an all-black grid (peak 0) safe.
    """
    return np.asarray(grid, dtype=np.int64) * length // (peak + 1)


def render_lines(grid: np.ndarray, palette: Palette, peak: int | None = None) -> list[str]:
    if peak is None:
        peak = max_brightness(grid)
    shades = palette.shades
    indices = shade_indices(grid, peak, len(shades))
    return ["".join(shades[i] for i in row) for row in indices.tolist()]


def write_lines(lines: list[str], destination: str | Path) -> None:
    """Write each row followed by the platform line separator."""
    with Path(destination).open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line)
            f.write("\n")
