from __future__ import annotations

from .circle import get_circle
from .line import draw_line, draw_line_between
from .shapes import draw_box, draw_cross, draw_shape

__all__ = [
    "draw_line",
    "draw_line_between",
    "draw_shape",
    "draw_box",
    "draw_cross",
    "get_circle",
]
