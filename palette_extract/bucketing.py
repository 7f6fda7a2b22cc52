# palette_extract/bucketing.py
from __future__ import annotations

"""
Quantized bucketing of RGB samples.

Samples sharing the top QUANT_SHIFT bits of every channel land in the same
bucket. Each bucket is reduced to its exact average colour (rounded half
away from zero) and its sample count.
"""

from typing import Iterable, List, Union

import numpy as np

from .constants import QUANT_SHIFT
from .core_types import Cluster, RGBTuple, U8Pixels

_LEVEL_BITS = 8 - QUANT_SHIFT


def quantization_keys(samples: U8Pixels) -> np.ndarray:
    """Pack the high bits of r, g, b into one int64 key per row (r most significant)."""
    q = samples[:, :3].astype(np.int64) >> QUANT_SHIFT
    return (q[:, 0] << (2 * _LEVEL_BITS)) | (q[:, 1] << _LEVEL_BITS) | q[:, 2]


def bucket_samples(samples: Union[U8Pixels, Iterable[RGBTuple]]) -> List[Cluster]:
    """
    Group samples by quantization key and finalise each bucket.

    Returns one Cluster per occupied bucket, in the order its key was first
    seen in the sample stream. Populations sum to the number of samples.
    """
    arr = np.asarray(
        samples if isinstance(samples, np.ndarray) else list(samples), dtype=np.int64
    ).reshape(-1, 3)
    if arr.shape[0] == 0:
        return []

    keys = quantization_keys(arr)
    _uniq, first_seen, inverse, counts = np.unique(
        keys, return_index=True, return_inverse=True, return_counts=True
    )
    inverse = inverse.reshape(-1)

    sums = np.zeros((counts.shape[0], 3), dtype=np.int64)
    np.add.at(sums, inverse, arr)

    # round(sum / count), halves up; all operands are non-negative ints
    counts_col = counts.astype(np.int64)[:, None]
    averages = (2 * sums + counts_col) // (2 * counts_col)

    order = np.argsort(first_seen, kind="stable")
    return [
        Cluster(rgb=tuple(averages[i].tolist()), population=int(counts[i]))  # type: ignore[arg-type]
        for i in order
    ]


def sort_by_population(clusters: Iterable[Cluster]) -> List[Cluster]:
    """Stable sort, most populous first."""
    return sorted(clusters, key=lambda c: -c.population)


__all__ = ["quantization_keys", "bucket_samples", "sort_by_population"]
