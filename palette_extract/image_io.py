# palette_extract/image_io.py
from __future__ import annotations

import io
import os
from dataclasses import dataclass
from typing import BinaryIO, Tuple, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .errors import AccessError, InputTypeError, LoadError

"""
Image acquisition: open any Pillow-readable source as RGBA in sRGB, cap its
longer side, and expose the interleaved RGBA bytes for extraction.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]

ImageSource = Union[Image.Image, str, "os.PathLike[str]", bytes, bytearray, BinaryIO]

# single-channel modes wider than 8 bits; Pillow clips these on convert()
_WIDE_GREY_MODES = {"I", "I;16", "I;16B", "I;16L", "I;16N"}


@dataclass(frozen=True)
class PixelBuffer:
    """Interleaved RGBA bytes with their pixel dimensions."""

    data: bytes
    width: int
    height: int


def _wide_grey_to_l(im: Image.Image) -> Image.Image:
    """Scale a 16-bit greyscale image down to 8-bit "L" (keep the high byte)."""
    arr = np.clip(np.asarray(im, dtype=np.int64), 0, 65535) >> 8
    return Image.fromarray(arr.astype(np.uint8), mode="L")


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    if im.mode in _WIDE_GREY_MODES:
        im = _wide_grey_to_l(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is not None:
                return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            # unusable embedded profile; treat pixels as sRGB
            pass

    return im.convert("RGBA")


def open_image(source: ImageSource) -> Image.Image:
    """
    Open and fully decode `source` into an RGBA sRGB image.

    Accepts a PIL image, a filesystem path, encoded image bytes, or a binary
    file-like object.
    """
    if isinstance(source, Image.Image):
        try:
            source.load()
        except (OSError, Image.DecompressionBombError) as exc:
            raise LoadError(f"image failed to load: {exc}") from exc
        return _convert_to_srgb_rgba(source)

    if isinstance(source, (bytes, bytearray)):
        stream: Union[BinaryIO, str, os.PathLike] = io.BytesIO(bytes(source))
    elif isinstance(source, (str, os.PathLike)):
        stream = source
    elif hasattr(source, "read"):
        stream = source
    else:
        raise InputTypeError(
            f"expected an image, path, bytes or binary file, got {type(source).__name__}"
        )

    try:
        with Image.open(stream) as im0:
            im0.load()
            return _convert_to_srgb_rgba(im0)
    except FileNotFoundError as exc:
        raise LoadError(f"image not found: {source}") from exc
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as exc:
        raise LoadError(f"image failed to load: {exc}") from exc


def scaled_dimensions(width: int, height: int, max_resolution: int) -> Tuple[int, int]:
    """Cap the longer side at max_resolution, keeping aspect; each side >= 1."""
    largest = max(width, height)
    scale = (max_resolution / largest) if largest > max_resolution else 1.0
    # round half away from zero on positive values
    return (
        max(1, int(width * scale + 0.5)),
        max(1, int(height * scale + 0.5)),
    )


def acquire_pixels(
    source: ImageSource,
    max_resolution: int = 1024,
    resample: Image.Resampling = Image.Resampling.BICUBIC,
) -> PixelBuffer:
    """Load `source`, downscale if needed, and return its RGBA bytes."""
    im = open_image(source)
    width, height = scaled_dimensions(im.width, im.height, max(1, int(max_resolution)))
    if (width, height) != im.size:
        im = im.resize((width, height), resample=resample)

    try:
        arr = np.asarray(im, dtype=np.uint8)
    except (OSError, ValueError, TypeError) as exc:
        raise AccessError(
            "unable to read image pixel data; check that the image is fully "
            f"decoded and readable ({exc})"
        ) from exc
    if arr.ndim != 3 or arr.shape[-1] != 4:
        raise AccessError(f"unexpected pixel layout {arr.shape}; expected (H,W,4) RGBA")

    return PixelBuffer(data=arr.tobytes(), width=width, height=height)


__all__ = [
    "ImageSource",
    "PixelBuffer",
    "open_image",
    "scaled_dimensions",
    "acquire_pixels",
]
