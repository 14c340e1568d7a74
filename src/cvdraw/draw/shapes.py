"""Outlines built from straight lines: polylines, boxes and crosses."""
from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from ..geometry import ImageRef
from .line import Point, draw_line, draw_line_between

_LOGGER = logging.getLogger(__name__)


def draw_shape(
    image: np.ndarray, offset: Point, points: Sequence[Point], color: Any
) -> None:
    """
    Draw a closed polyline (in-place).

    Every point is shifted by ``offset``; consecutive points are joined and
    the last point is joined back to the first. Fewer than two points draw
    nothing.
    """
    if len(points) < 2:
        _LOGGER.debug("Skipping shape with %d point(s)", len(points))
        return
    off = ImageRef.of(offset)
    shifted = [ImageRef.of(p) + off for p in points]
    for start, end in zip(shifted, shifted[1:]):
        draw_line_between(image, start, end, color)
    draw_line_between(image, shifted[-1], shifted[0], color)


def draw_box(
    image: np.ndarray, upper_left: Point, lower_right: Point, color: Any
) -> None:
    """Draw the outline of an axis-aligned box given two opposite corners (in-place)."""
    ul = ImageRef.of(upper_left)
    lr = ImageRef.of(lower_right)
    # Left line
    draw_line(image, ul.x, ul.y, ul.x, lr.y, color)
    # Top line
    draw_line(image, ul.x, ul.y, lr.x, ul.y, color)
    # Bottom line
    draw_line(image, ul.x, lr.y, lr.x, lr.y, color)
    # Right line
    draw_line(image, lr.x, ul.y, lr.x, lr.y, color)


def draw_cross(image: np.ndarray, center: Point, arm_length: float, color: Any) -> None:
    """Draw a horizontal and a vertical segment of half-length ``arm_length`` through ``center``."""
    c = ImageRef.of(center)
    draw_line(image, c.x - arm_length, c.y, c.x + arm_length, c.y, color)
    draw_line(image, c.x, c.y - arm_length, c.x, c.y + arm_length, color)
