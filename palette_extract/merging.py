# palette_extract/merging.py
from __future__ import annotations

"""
Greedy near-duplicate merging of bucket colours.

Buckets are visited in the order given (population-descending in the
pipeline). Each one is absorbed by the first existing cluster, in creation
order, whose colour lies within `threshold` in RGB space; otherwise it
seeds a new cluster. Absorption does not re-sort or re-scan.
"""

import math
from typing import List, Sequence

from .core_types import Cluster, RGBTuple


def color_distance(a: RGBTuple, b: RGBTuple) -> float:
    """Euclidean distance between two RGB triples."""
    dr = a[0] - b[0]
    dg = a[1] - b[1]
    db = a[2] - b[2]
    return math.sqrt(dr * dr + dg * dg + db * db)


def merge_near_duplicates(
    clusters: Sequence[Cluster], threshold: float
) -> List[Cluster]:
    """Merge clusters closer than `threshold`. threshold <= 0 disables merging."""
    if threshold <= 0:
        return list(clusters)

    merged: List[Cluster] = []
    for bucket in clusters:
        for i, cluster in enumerate(merged):
            if color_distance(bucket.rgb, cluster.rgb) <= threshold:
                merged[i] = cluster.absorb(bucket)
                break
        else:
            merged.append(bucket)
    return merged


__all__ = ["color_distance", "merge_near_duplicates"]
