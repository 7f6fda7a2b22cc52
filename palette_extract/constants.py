# palette_extract/constants.py
"""
Extraction defaults and tunables used across the project.

- PaletteConfig, PALETTE_DEFAULTS
- Sampling / quantization constants
- Contrast constants
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Tuple

# =========================
# Extraction configuration
# =========================


@dataclass(frozen=True)
class PaletteConfig:
    palette_size: int = 10
    max_resolution: int = 1024
    sample_step: int = 2
    near_duplicate_threshold: float = 50

    def normalised(self) -> "PaletteConfig":
        """Floor the integer knobs and clamp them to at least 1."""
        return replace(
            self,
            palette_size=max(1, math.floor(self.palette_size)),
            max_resolution=max(1, math.floor(self.max_resolution)),
            sample_step=max(1, math.floor(self.sample_step)),
        )


PALETTE_DEFAULTS = PaletteConfig()

# =========================
# Sampling / bucketing
# =========================
ALPHA_CUTOFF: int = 128  # alpha below this is treated as transparent
QUANT_SHIFT: int = 4  # keep the top 4 bits per channel (16 levels)

# =========================
# Contrast (WCAG 2.x)
# =========================
TEXT_BLACK: str = "#000000"
TEXT_WHITE: str = "#FFFFFF"
LINEAR_THRESHOLD: float = 0.03928
LUMA_WEIGHTS: Tuple[float, float, float] = (0.2126, 0.7152, 0.0722)

# =========================
# Presentation
# =========================
SORT_MODES: Tuple[str, ...] = ("population", "population-asc", "hex")
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp"}
