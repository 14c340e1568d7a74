"""
Colour constants for pixel types.

Single component pixel types get gray scale colours only. Three component
pixel types are read as R, G, B and get the eight corners of the colour
cube built from zero and full intensity per component.

Usage:
    colors = color_traits(np.uint8, 3)
    draw_line(image, 0, 0, 9, 9, colors.red)
    dim = colors.shade(colors.white, 0.5)
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Union

import numpy as np
from numpy.typing import DTypeLike

from ..pixel import Pixel, PixelType


class GrayColors:
    """Colours of a single component pixel type."""

    def __init__(self, pixel_type: PixelType) -> None:
        self.pixel_type = pixel_type
        hi = pixel_type.max_intensity
        half = hi // 2 if pixel_type.dtype.kind in "iu" else hi / 2
        self.black = pixel_type.make(0)
        self.gray = pixel_type.make(half)
        self.white = pixel_type.make(hi)

    def __repr__(self) -> str:
        return f"GrayColors({self.pixel_type.dtype})"


class RGBColors:
    """Colours of a three component (R, G, B) pixel type."""

    def __init__(self, pixel_type: PixelType) -> None:
        self.pixel_type = pixel_type
        self.hi = hi = pixel_type.max_intensity
        self.black = self.make(0, 0, 0)
        self.white = self.make(hi, hi, hi)
        self.red = self.make(hi, 0, 0)
        self.green = self.make(0, hi, 0)
        self.blue = self.make(0, 0, hi)
        self.cyan = self.make(0, hi, hi)
        self.magenta = self.make(hi, 0, hi)
        self.yellow = self.make(hi, hi, 0)

    def make(self, r: Any, g: Any, b: Any) -> Pixel:
        return self.pixel_type.make(r, g, b)

    def shade(self, color: Pixel, factor: float) -> Pixel:
        """Scale every component by ``factor``, truncating to the component type."""
        scaled = np.asarray(color, dtype=np.float64) * float(factor)
        # float -> int astype truncates toward zero
        px = scaled.astype(self.pixel_type.dtype)
        px.flags.writeable = False
        return px

    def __repr__(self) -> str:
        return f"RGBColors({self.pixel_type.dtype})"


ColorTraits = Union[GrayColors, RGBColors]


@lru_cache(maxsize=64)
def _traits_for(pixel_type: PixelType) -> ColorTraits:
    if pixel_type.count == 1:
        return GrayColors(pixel_type)
    if pixel_type.count == 3:
        return RGBColors(pixel_type)
    raise TypeError(f"no colour traits for {pixel_type.count}-component pixels")


def color_traits(
    pixel_type: Union[PixelType, DTypeLike], count: Optional[int] = None
) -> ColorTraits:
    """
    Colour constants for a pixel type.

    Args:
        pixel_type: A PixelType, or a component dtype when ``count`` is given
        count: Components per pixel (default 1 when a dtype is passed)

    Returns:
        GrayColors for one component, RGBColors for three. The returned object
        is shared per pixel type and its colours are read-only values.
    """
    if not isinstance(pixel_type, PixelType):
        pixel_type = PixelType(np.dtype(pixel_type), 1 if count is None else count)
    elif count is not None and count != pixel_type.count:
        raise ValueError(f"count {count} contradicts {pixel_type}")
    return _traits_for(pixel_type)


def color_traits_for(image: np.ndarray) -> ColorTraits:
    """Colour constants matching the pixel type of ``image``."""
    return _traits_for(PixelType.of(image))
