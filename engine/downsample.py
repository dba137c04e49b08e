"""Chart downsampling for projection series."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def downsample_points(points: Sequence[T], max_points: int = 120) -> List[T]:
    """
    Evenly spaced subset of `points`, always keeping the first and last.
    Series already within `max_points` are returned unchanged (as a list).
    """
    if max_points < 2:
        raise ValueError(f"max_points must be >= 2, got {max_points}")
    n = len(points)
    if n <= max_points:
        return list(points)
    step = (n - 1) / (max_points - 1)
    # half-up rounding; Python's round() would bias even indices
    idx = np.floor(np.arange(max_points) * step + 0.5).astype(int)
    return [points[i] for i in idx]
