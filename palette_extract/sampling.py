# palette_extract/sampling.py
from __future__ import annotations

"""
Pixel sampling over interleaved RGBA buffers.

Exports:
  as_rgba_pixels(buffer, width=None, height=None) -> (N,4) uint8
  sample_pixels(buffer, sample_step)              -> (M,3) uint8
  iter_samples(buffer, sample_step)               -> Iterator[(r, g, b)]

Notes:
  - Every `sample_step`-th pixel is read, starting with the first.
  - Pixels with alpha < ALPHA_CUTOFF are skipped entirely.
"""

import math
from typing import Iterator, Optional, Union

import numpy as np

from .constants import ALPHA_CUTOFF
from .core_types import RGBTuple, U8Pixels
from .errors import InputTypeError

BufferLike = Union[bytes, bytearray, memoryview, np.ndarray]


def as_rgba_pixels(
    buffer: BufferLike, width: Optional[int] = None, height: Optional[int] = None
) -> U8Pixels:
    """View an interleaved RGBA buffer as (N,4) uint8 rows without copying."""
    if isinstance(buffer, np.ndarray):
        if buffer.dtype != np.uint8:
            raise InputTypeError(f"expected uint8 RGBA buffer, got {buffer.dtype}")
        flat = buffer.reshape(-1)
    elif isinstance(buffer, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(buffer, dtype=np.uint8)
    else:
        raise InputTypeError(
            f"expected an RGBA byte buffer or uint8 array, got {type(buffer).__name__}"
        )

    if flat.size % 4 != 0:
        raise InputTypeError(f"RGBA buffer length {flat.size} is not a multiple of 4")
    if (width is None) != (height is None):
        raise InputTypeError("width and height must be given together")
    if width is not None and height is not None and flat.size != width * height * 4:
        raise InputTypeError(
            f"RGBA buffer length {flat.size} does not match {width}x{height}"
        )
    return flat.reshape(-1, 4)


def sample_pixels(buffer: BufferLike, sample_step: int = 1) -> U8Pixels:
    """Return (M,3) RGB samples for every `sample_step`-th opaque-enough pixel."""
    step = max(1, math.floor(sample_step))
    pixels = as_rgba_pixels(buffer)[::step]
    keep = pixels[:, 3] >= ALPHA_CUTOFF
    return pixels[keep, :3]


def iter_samples(buffer: BufferLike, sample_step: int = 1) -> Iterator[RGBTuple]:
    """Lazily yield (r, g, b) samples with the same rules as sample_pixels()."""
    step = max(1, math.floor(sample_step))
    pixels = as_rgba_pixels(buffer)
    for i in range(0, pixels.shape[0], step):
        r, g, b, a = pixels[i].tolist()
        if a < ALPHA_CUTOFF:
            continue
        yield (r, g, b)


__all__ = ["BufferLike", "as_rgba_pixels", "sample_pixels", "iter_samples"]
