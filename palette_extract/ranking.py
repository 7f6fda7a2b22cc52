# palette_extract/ranking.py
from __future__ import annotations

"""
Ranking and formatting of merged clusters into PaletteColor entries, plus
display ordering of a finished palette.
"""

import math
from typing import List, Sequence

from .constants import SORT_MODES
from .contrast import best_text_color
from .core_types import Cluster, PaletteColor, rgb_to_hex


def rank_clusters(clusters: Sequence[Cluster], palette_size: int) -> List[PaletteColor]:
    """
    Turn clusters into the top `palette_size` palette entries.

    Percentages are computed over all clusters before truncation, so the
    returned shares sum to 1.0 only when nothing was cut.
    """
    total = sum(c.population for c in clusters)
    ranked = sorted(clusters, key=lambda c: -c.population)
    limit = max(1, math.floor(palette_size))

    out: List[PaletteColor] = []
    for c in ranked[:limit]:
        r, g, b = c.rgb
        out.append(
            PaletteColor(
                palette_color=rgb_to_hex(c.rgb),
                text_color=best_text_color(r, g, b),
                population=c.population,
                percentage=(c.population / total) if total > 0 else 0.0,
            )
        )
    return out


def sort_palette(palette: Sequence[PaletteColor], mode: str = "population") -> List[PaletteColor]:
    """
    Reorder a palette for display.
    - "population"     : most populous first
    - "population-asc" : least populous first
    - "hex"            : by hex string
    """
    if mode == "population":
        return sorted(palette, key=lambda p: -p.population)
    if mode == "population-asc":
        return sorted(palette, key=lambda p: p.population)
    if mode == "hex":
        return sorted(palette, key=lambda p: p.palette_color)
    raise ValueError(f"unknown sort mode {mode!r}; expected one of {', '.join(SORT_MODES)}")


__all__ = ["rank_clusters", "sort_palette"]
