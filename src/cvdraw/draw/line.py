"""
Line rasteriser.

Lines are sampled uniformly along their L1 length: a line with
``L = |dx| + |dy|`` is sampled at ``t = 0, 1, ..., floor(L)`` plus the end
point, and every sample is rounded to the nearest pixel (``floor(v + 0.5)``).
Stepping by one in L1 reaches every pixel of the 4-connected path between
the rounded endpoints. Samples outside the image are dropped.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Tuple, Union

import numpy as np

from ..geometry import ImageRef

_LOGGER = logging.getLogger(__name__)

Point = Union[ImageRef, Tuple[int, int]]


def _visible_span(p0: float, d: float, length: float, extent: int) -> Tuple[float, float]:
    """Range of t for which ``p0 + t * d / length`` rounds into [0, extent)."""
    if d == 0:
        if -0.5 <= p0 < extent - 0.5:
            return -math.inf, math.inf
        return math.inf, -math.inf
    a = (-0.5 - p0) * length / d
    b = (extent - 0.5 - p0) * length / d
    return min(a, b), max(a, b)


def _line_pixels(
    x1: float, y1: float, x2: float, y2: float, width: int, height: int
) -> Tuple[np.ndarray, np.ndarray]:
    """In-image pixel coordinates (xs, ys) of the sampled line."""
    empty = np.empty(0, dtype=np.intp)
    if width <= 0 or height <= 0:
        return empty, empty

    dx = x2 - x1
    dy = y2 - y1
    length = abs(dx) + abs(dy)
    if not math.isfinite(length):
        _LOGGER.debug("Skipping line of overflowing length (%s, %s)-(%s, %s)", x1, y1, x2, y2)
        return empty, empty

    if length == 0:
        fx = np.array([x1])
        fy = np.array([y1])
    else:
        steps = math.floor(length)
        xlo, xhi = _visible_span(x1, dx, length, width)
        ylo, yhi = _visible_span(y1, dy, length, height)
        lo = max(0.0, xlo, ylo)
        hi = min(float(steps), xhi, yhi)
        if lo <= hi + 1:
            # one step of slack on each side, the bounds mask below is exact
            first = max(0, math.ceil(lo) - 1)
            last = min(steps, math.floor(hi) + 1)
            t = np.arange(first, last + 1, dtype=np.float64)
        else:
            t = np.empty(0, dtype=np.float64)
        # the end point itself is always sampled, floor(length) may stop short of it
        fx = np.append(x1 + t * dx / length, x2)
        fy = np.append(y1 + t * dy / length, y2)

    xs = np.floor(fx + 0.5)
    ys = np.floor(fy + 0.5)
    # mask before the integer cast so huge coordinates never overflow
    inside = (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)
    return xs[inside].astype(np.intp), ys[inside].astype(np.intp)


def draw_line(
    image: np.ndarray,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    color: Any,
) -> None:
    """
    Draw a line between two real valued points (in-place).

    Args:
        image: Target image, ``(H, W)`` or ``(H, W, C)``
        x1, y1: Start point
        x2, y2: End point
        color: Pixel value written along the line
    """
    x1, y1, x2, y2 = float(x1), float(y1), float(x2), float(y2)
    if not all(math.isfinite(v) for v in (x1, y1, x2, y2)):
        _LOGGER.debug("Skipping line with non-finite endpoint (%s, %s)-(%s, %s)", x1, y1, x2, y2)
        return
    h, w = image.shape[:2]
    xs, ys = _line_pixels(x1, y1, x2, y2, w, h)
    if xs.size:
        image[ys, xs] = color


def draw_line_between(image: np.ndarray, start: Point, end: Point, color: Any) -> None:
    """Draw a line between two integer points (in-place)."""
    p1 = ImageRef.of(start)
    p2 = ImageRef.of(end)
    draw_line(image, p1.x, p1.y, p2.x, p2.y, color)
