# palette_extract/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 4) RGBA
U8Pixels = NDArray[np.uint8]  # (N, 4) RGBA rows or (N, 3) RGB samples

# Value objects


@dataclass(frozen=True)
class Cluster:
    """Averaged colour plus the number of sampled pixels it stands for."""

    rgb: RGBTuple
    population: int

    def absorb(self, other: "Cluster") -> "Cluster":
        """Population-weighted union of self and other."""
        total = self.population + other.population
        rgb = tuple(
            round_ratio(mine * self.population + theirs * other.population, total)
            for mine, theirs in zip(self.rgb, other.rgb)
        )
        return Cluster(rgb=rgb, population=total)  # type: ignore[arg-type]


@dataclass(frozen=True)
class PaletteColor:
    """Final palette entry."""

    palette_color: HexStr  # "#rrggbb"
    text_color: HexStr  # "#000000" | "#FFFFFF"
    population: int
    percentage: float  # 0..1

    def as_dict(self) -> Dict[str, Union[str, int, float]]:
        return {
            "paletteColor": self.palette_color,
            "textColor": self.text_color,
            "population": self.population,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class ColorMetrics:
    """Display metrics for a swatch."""

    hue: float  # degrees [0, 360)
    saturation: float  # percent [0, 100]
    luminance: float  # WCAG relative luminance [0, 1]


# Small helpers


def round_ratio(numerator: int, denominator: int) -> int:
    """round(numerator / denominator) with halves away from zero, for non-negative ints."""
    return (2 * numerator + denominator) // (2 * denominator)


def rgb_to_hex(rgb: Sequence[int]) -> HexStr:
    """RGB triple to lowercase hex string '#rrggbb'."""
    return f"#{int(rgb[0]):02x}{int(rgb[1]):02x}{int(rgb[2]):02x}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise ValueError("hex must start with '#'")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError("hex must be '#rrggbb' or '#rgb'")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Image",
    "U8Pixels",
    # value objects
    "Cluster",
    "PaletteColor",
    "ColorMetrics",
    # helpers
    "round_ratio",
    "rgb_to_hex",
    "hex_to_rgb",
]
