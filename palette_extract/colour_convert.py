# palette_extract/colour_convert.py
from __future__ import annotations

"""
Colour conversions for swatch display.

Exports:
  rgb_to_hsl(rgb)       -> (hue_deg, saturation_pct, lightness_pct)
  swatch_metrics(color) -> ColorMetrics(hue, saturation, luminance)
"""

import colorsys
from typing import Sequence, Tuple, Union

from .contrast import relative_luminance
from .core_types import ColorMetrics, HexStr, hex_to_rgb


def rgb_to_hsl(rgb: Sequence[int]) -> Tuple[float, float, float]:
    """
    8-bit RGB to HSL.
    Returns hue in degrees [0, 360) and saturation / lightness in percent.
    Greys report hue 0 and saturation 0.
    """
    r, g, b = (int(v) / 255.0 for v in rgb[:3])
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)
    return (hue * 360.0) % 360.0, saturation * 100.0, lightness * 100.0


def swatch_metrics(color: Union[HexStr, Sequence[int]]) -> ColorMetrics:
    """Hue, saturation and WCAG luminance for a '#rrggbb' string or RGB triple."""
    rgb = hex_to_rgb(color) if isinstance(color, str) else tuple(int(v) for v in color[:3])
    hue, saturation, _lightness = rgb_to_hsl(rgb)
    return ColorMetrics(
        hue=hue,
        saturation=saturation,
        luminance=relative_luminance(rgb[0], rgb[1], rgb[2]),
    )


__all__ = ["rgb_to_hsl", "swatch_metrics"]
