"""
Raster drawing primitives for numpy images.

Lines, closed polylines, boxes, crosses and circle outlines are drawn in
place into ``(H, W)`` or ``(H, W, C)`` arrays; writes outside the image are
dropped. ``color_traits`` provides canonical colours per pixel type and the
compose helpers join and add images.
"""
from __future__ import annotations

from .color import GrayColors, RGBColors, color_traits, color_traits_for
from .compose import combine_images, copy, join_images
from .draw import draw_box, draw_cross, draw_line, draw_line_between, draw_shape, get_circle
from .exceptions import DrawError, ImageRefNotInImage, IncompatibleImageSizes
from .geometry import ORIGIN, ImageRef, image_size, in_image, iter_region
from .pixel import FLOAT_MAX_INTENSITY, PixelType, max_intensity

__version__ = "0.1.0"

__all__ = [
    "FLOAT_MAX_INTENSITY",
    "ORIGIN",
    "DrawError",
    "GrayColors",
    "ImageRef",
    "ImageRefNotInImage",
    "IncompatibleImageSizes",
    "PixelType",
    "RGBColors",
    "color_traits",
    "color_traits_for",
    "combine_images",
    "copy",
    "draw_box",
    "draw_cross",
    "draw_line",
    "draw_line_between",
    "draw_shape",
    "get_circle",
    "image_size",
    "in_image",
    "iter_region",
    "join_images",
    "max_intensity",
]
