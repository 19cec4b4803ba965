import os

import numpy as np
import pytest

from imagetotext.palette import Palette
from imagetotext.render import render_lines, shade_indices, write_lines


def test_shade_indices_peak_maps_inside_palette():
    grid = np.array([[0, 127, 255]])
    np.testing.assert_array_equal(shade_indices(grid, 255, 8), [[0, 3, 7]])


def test_shade_indices_all_black_uses_first_glyph():
    grid = np.zeros((2, 2), dtype=np.int64)
    np.testing.assert_array_equal(shade_indices(grid, 0, 8), 0)


def test_shade_indices_scale_to_peak():
    # A dim image still spans the whole palette
    grid = np.array([[0, 50, 100]])
    np.testing.assert_array_equal(shade_indices(grid, 100, 4), [[0, 1, 3]])


def test_render_lines_single_black_pixel():
    assert render_lines(np.array([[0]]), Palette()) == ["@"]


def test_render_lines_uniform_grid():
    lines = render_lines(np.full((3, 5), 76), Palette())
    assert lines == ["     "] * 3


def test_render_lines_gradient():
    grid = np.array([[0, 36, 73, 109, 146, 182, 219, 255]])
    assert render_lines(grid, Palette()) == ["@%Xx+~- "]


def test_render_lines_inverted_uses_same_indices():
    rng = np.random.default_rng(3)
    grid = rng.integers(0, 256, size=(6, 9))
    palette = Palette()
    normal = render_lines(grid, palette)
    inverted = render_lines(grid, palette.invert())
    mirror = dict(zip(palette.shades, palette.invert().shades))
    assert inverted == ["".join(mirror[c] for c in line) for line in normal]
    assert inverted != [line[::-1] for line in normal]


def test_render_lines_explicit_peak():
    grid = np.array([[10, 20]])
    assert render_lines(grid, Palette("ab"), peak=255) == ["aa"]


def test_render_lines_empty_grid():
    assert render_lines(np.zeros((0, 0), dtype=np.int64), Palette()) == []


def test_write_lines_uses_platform_separator(tmp_path):
    path = tmp_path / "out.txt"
    write_lines(["ab", "cd"], path)
    assert path.read_bytes() == f"ab{os.linesep}cd{os.linesep}".encode()


def test_write_lines_missing_directory(tmp_path):
    path = tmp_path / "missing" / "out.txt"
    with pytest.raises(OSError):
        write_lines(["x"], path)
