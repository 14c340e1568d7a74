from __future__ import annotations

import math
from typing import List

import numpy as np

from ..geometry import ImageRef


def get_circle(radius: float) -> List[ImageRef]:
    """
    Offsets of a circle outline around the origin.

    The outline is every point of the disk ``x*x + y*y <= radius**2`` that has
    a 4-neighbour outside the disk, ordered by polar angle starting at
    ``(radius, 0)``. Consecutive points are 8-adjacent, so the result can be
    passed straight to ``draw_shape``.

    Args:
        radius: Circle radius in pixels; negative values count as 0

    Returns:
        List of ImageRef offsets, ``[ImageRef(0, 0)]`` for radius 0
    """
    r = float(radius)
    if not r > 0:
        r = 0.0
    n = math.floor(r)

    # One ring of padding so the grid border is always outside the disk.
    yy, xx = np.ogrid[-n - 1 : n + 2, -n - 1 : n + 2]
    disk = xx * xx + yy * yy <= r * r

    core = disk[1:-1, 1:-1]
    enclosed = disk[:-2, 1:-1] & disk[2:, 1:-1] & disk[1:-1, :-2] & disk[1:-1, 2:]
    ys, xs = np.nonzero(core & ~enclosed)
    xs = xs - n
    ys = ys - n

    angles = np.mod(np.arctan2(ys, xs), 2 * np.pi)
    order = np.argsort(angles, kind="stable")
    return [ImageRef(int(xs[i]), int(ys[i])) for i in order]
