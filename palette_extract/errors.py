# palette_extract/errors.py
"""
Exception types raised at the image-acquisition and input boundaries.

The clustering pipeline itself has no failure path: given a valid buffer it
always returns a (possibly empty) palette.
"""


class PaletteError(Exception):
    """Base class for palette_extract errors."""


class LoadError(PaletteError):
    """The source image could not be opened or decoded."""


class AccessError(PaletteError):
    """Pixel data could not be read from a decoded image."""


class InputTypeError(PaletteError, TypeError):
    """The caller passed something that is not an image handle or RGBA buffer."""


__all__ = ["PaletteError", "LoadError", "AccessError", "InputTypeError"]
