"""
Shared fixtures for palette_extract tests.

Images are synthesised in memory with numpy and Pillow; files are written
to tmp_path only when a test needs a path.
"""
from typing import Iterable, Sequence, Tuple

import numpy as np
import pytest
from PIL import Image


def rgba_bytes(pixels: Iterable[Sequence[int]]) -> bytes:
    """Flatten (r, g, b, a) tuples into an interleaved RGBA buffer."""
    return bytes(v for px in pixels for v in px)


def solid_rgba(width: int, height: int, rgba: Tuple[int, int, int, int]) -> np.ndarray:
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    arr[..., :] = rgba
    return arr


@pytest.fixture
def four_pixel_buffer() -> bytes:
    """2x2 opaque image: red, red, green, blue."""
    return rgba_bytes(
        [
            (255, 0, 0, 255),
            (255, 0, 0, 255),
            (0, 255, 0, 255),
            (0, 0, 255, 255),
        ]
    )


@pytest.fixture
def stepped_reds_buffer() -> bytes:
    """
    15 opaque pixels: 8 black, 4 (40,0,0), 2 (80,0,0), 1 light grey.
    Each colour lands in its own quantization bucket.
    """
    pixels = (
        [(0, 0, 0, 255)] * 8
        + [(40, 0, 0, 255)] * 4
        + [(80, 0, 0, 255)] * 2
        + [(200, 200, 200, 255)]
    )
    return rgba_bytes(pixels)


@pytest.fixture
def write_png(tmp_path):
    """Factory: write an (H,W,4) uint8 array as PNG and return its path."""

    def _write(name: str, arr: np.ndarray):
        path = tmp_path / name
        Image.fromarray(arr, mode="RGBA").save(path)
        return path

    return _write
