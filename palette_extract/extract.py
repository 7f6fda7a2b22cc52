# palette_extract/extract.py
from __future__ import annotations

"""
Palette extraction entry points.

Pipeline:
  RGBA buffer -> sample_pixels -> bucket_samples -> sort_by_population
              -> merge_near_duplicates -> rank_clusters -> [PaletteColor]

Each call works on its own arrays and lists; nothing is shared between
calls, so extractions may run concurrently without locking.
"""

from typing import List, Optional

from .bucketing import bucket_samples, sort_by_population
from .constants import PALETTE_DEFAULTS, PaletteConfig
from .core_types import PaletteColor
from .image_io import ImageSource, acquire_pixels
from .merging import merge_near_duplicates
from .ranking import rank_clusters
from .sampling import BufferLike, as_rgba_pixels, sample_pixels


def extract_palette(
    buffer: BufferLike,
    width: Optional[int] = None,
    height: Optional[int] = None,
    *,
    palette_size: int = PALETTE_DEFAULTS.palette_size,
    sample_step: int = PALETTE_DEFAULTS.sample_step,
    near_duplicate_threshold: float = PALETTE_DEFAULTS.near_duplicate_threshold,
) -> List[PaletteColor]:
    """
    Extract a palette from an interleaved RGBA buffer.

    Args:
      buffer: bytes-like or uint8 array of RGBA values.
      width, height: optional pixel dimensions; when both are given the
        buffer length must equal width * height * 4.
      palette_size: maximum number of entries returned (clamped to >= 1).
      sample_step: read every Nth pixel (clamped to >= 1).
      near_duplicate_threshold: RGB distance for merging; <= 0 disables.

    Returns:
      PaletteColor list, most populous first. Empty when no pixel had
      alpha >= 128.

    Raises:
      InputTypeError: buffer is not a valid RGBA buffer.
    """
    pixels = as_rgba_pixels(buffer, width, height)
    samples = sample_pixels(pixels, sample_step)
    if samples.shape[0] == 0:
        return []

    buckets = sort_by_population(bucket_samples(samples))
    clusters = merge_near_duplicates(buckets, near_duplicate_threshold)
    return rank_clusters(clusters, palette_size)


def extract_palette_from_image(
    source: ImageSource,
    *,
    palette_size: int = PALETTE_DEFAULTS.palette_size,
    max_resolution: int = PALETTE_DEFAULTS.max_resolution,
    sample_step: int = PALETTE_DEFAULTS.sample_step,
    near_duplicate_threshold: float = PALETTE_DEFAULTS.near_duplicate_threshold,
) -> List[PaletteColor]:
    """
    Load `source` (PIL image, path, bytes or binary file), downscale so its
    longer side is at most `max_resolution`, and extract its palette.

    Raises:
      LoadError, AccessError, InputTypeError
    """
    buf = acquire_pixels(source, max_resolution)
    return extract_palette(
        buf.data,
        buf.width,
        buf.height,
        palette_size=palette_size,
        sample_step=sample_step,
        near_duplicate_threshold=near_duplicate_threshold,
    )


def extract_with_config(
    source: ImageSource, config: PaletteConfig = PALETTE_DEFAULTS
) -> List[PaletteColor]:
    cfg = config.normalised()
    return extract_palette_from_image(
        source,
        palette_size=cfg.palette_size,
        max_resolution=cfg.max_resolution,
        sample_step=cfg.sample_step,
        near_duplicate_threshold=cfg.near_duplicate_threshold,
    )


__all__ = ["extract_palette", "extract_palette_from_image", "extract_with_config"]
