# palette_extract/__init__.py
"""
palette_extract package.

Purpose:
  Extract a small, readable colour palette from a raster image: sample
  pixels, bucket them on a 16x16x16 grid, merge near-duplicates, and report
  each colour with its share and a contrast-safe text colour. See
  extract_palette.py for the CLI.

Public API:
  extract_palette            : palette from a raw RGBA buffer.
  extract_palette_from_image : palette from a PIL image, path, bytes or file.
  extract_with_config        : same, driven by a PaletteConfig.
  sort_palette               : reorder a palette for display.
  best_text_color            : WCAG black/white text choice for a colour.
  core_types                 : value objects (PaletteColor, Cluster, ColorMetrics).
  errors                     : LoadError, AccessError, InputTypeError.

Quick start:
  from palette_extract import extract_palette_from_image
  for c in extract_palette_from_image("photo.jpg", palette_size=6):
      print(c.palette_color, c.text_color, f"{c.percentage:.1%}")
"""

__version__ = "0.1.0"

from . import core_types
from . import constants
from . import errors
from . import utils

from .constants import PALETTE_DEFAULTS, PaletteConfig  # noqa: E402,F401
from .contrast import best_text_color  # noqa: E402,F401
from .core_types import ColorMetrics, PaletteColor, rgb_to_hex  # noqa: E402,F401
from .errors import AccessError, InputTypeError, LoadError, PaletteError  # noqa: E402,F401
from .extract import (  # noqa: E402,F401
    extract_palette,
    extract_palette_from_image,
    extract_with_config,
)
from .ranking import sort_palette  # noqa: E402,F401

__all__ = [
    "__version__",
    "core_types",
    "constants",
    "errors",
    "utils",
    "PALETTE_DEFAULTS",
    "PaletteConfig",
    "PaletteColor",
    "ColorMetrics",
    "rgb_to_hex",
    "best_text_color",
    "PaletteError",
    "LoadError",
    "AccessError",
    "InputTypeError",
    "extract_palette",
    "extract_palette_from_image",
    "extract_with_config",
    "sort_palette",
]
