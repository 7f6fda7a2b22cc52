# palette_extract/contrast.py
from __future__ import annotations

"""
WCAG relative luminance and contrast ratio, used to pick a readable text
colour (black or white) for a swatch background.
"""

from .constants import LINEAR_THRESHOLD, LUMA_WEIGHTS, TEXT_BLACK, TEXT_WHITE

WHITE_LUMINANCE = 1.0
BLACK_LUMINANCE = 0.0


def channel_to_linear(value: int) -> float:
    """Linearise one 8-bit sRGB channel."""
    c = value / 255.0
    if c <= LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    wr, wg, wb = LUMA_WEIGHTS
    return (
        wr * channel_to_linear(r)
        + wg * channel_to_linear(g)
        + wb * channel_to_linear(b)
    )


def contrast_ratio(lum_a: float, lum_b: float) -> float:
    """(lighter + 0.05) / (darker + 0.05); order of arguments does not matter."""
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def best_text_color(r: int, g: int, b: int) -> str:
    """White text unless black gives strictly better contrast."""
    background = relative_luminance(r, g, b)
    with_white = contrast_ratio(background, WHITE_LUMINANCE)
    with_black = contrast_ratio(background, BLACK_LUMINANCE)
    return TEXT_WHITE if with_white >= with_black else TEXT_BLACK


__all__ = [
    "channel_to_linear",
    "relative_luminance",
    "contrast_ratio",
    "best_text_color",
]
