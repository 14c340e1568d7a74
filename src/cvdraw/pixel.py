"""
Pixel traits.

A pixel type is the pair (component dtype, component count). Images with
one component per pixel are ``(H, W)`` arrays, images with C components
are ``(H, W, C)`` arrays; ``PixelType.of`` recovers the pair from either.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Optional, Union

import numpy as np
from numpy.typing import DTypeLike, NDArray

# Full intensity for floating point components.
FLOAT_MAX_INTENSITY: Final[float] = 1.0

Pixel = Union[np.generic, NDArray[Any]]


def max_intensity(dtype: DTypeLike) -> Union[int, float]:
    """Largest value representing full intensity for a component dtype."""
    dt = np.dtype(dtype)
    if dt.kind in "iu":
        return int(np.iinfo(dt).max)
    if dt.kind == "f":
        return FLOAT_MAX_INTENSITY
    raise TypeError(f"no intensity range for component type {dt}")


@dataclass(frozen=True, slots=True)
class PixelType:
    """Component dtype plus number of components per pixel."""
    dtype: np.dtype
    count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "dtype", np.dtype(self.dtype))
        if self.count < 1:
            raise ValueError(f"pixel needs at least one component, got {self.count}")

    @classmethod
    def of(cls, image: np.ndarray) -> "PixelType":
        """Pixel type of an ``(H, W)`` or ``(H, W, C)`` image."""
        if image.ndim == 2:
            return cls(image.dtype, 1)
        if image.ndim == 3:
            return cls(image.dtype, int(image.shape[2]))
        raise ValueError(f"expected a 2D or 3D image array, got shape {image.shape}")

    @property
    def component_type(self) -> type:
        return self.dtype.type

    @property
    def max_intensity(self) -> Union[int, float]:
        return max_intensity(self.dtype)

    def make(self, *components: Any) -> Pixel:
        """Build a pixel from its components, in index order."""
        if len(components) != self.count:
            raise ValueError(
                f"expected {self.count} components, got {len(components)}"
            )
        if self.count == 1:
            return self.dtype.type(components[0])
        px = np.array(components, dtype=self.dtype)
        px.flags.writeable = False
        return px

    def component(self, pixel: Pixel, k: int) -> np.generic:
        """Read component ``k`` of ``pixel``."""
        self._check_index(k)
        if self.count == 1:
            return self.dtype.type(pixel)
        return np.asarray(pixel, dtype=self.dtype)[k]

    def with_component(self, pixel: Pixel, k: int, value: Any) -> Pixel:
        """Return a copy of ``pixel`` with component ``k`` set to ``value``."""
        self._check_index(k)
        if self.count == 1:
            return self.dtype.type(value)
        px = np.array(pixel, dtype=self.dtype)
        px[k] = value
        px.flags.writeable = False
        return px

    def new_image(self, width: int, height: int, fill: Optional[Any] = None) -> NDArray[Any]:
        """Allocate an image of this pixel type, zeroed unless ``fill`` is given."""
        shape = (height, width) if self.count == 1 else (height, width, self.count)
        image = np.zeros(shape, dtype=self.dtype)
        if fill is not None:
            image[...] = fill
        return image

    def _check_index(self, k: int) -> None:
        if not 0 <= k < self.count:
            raise IndexError(f"component {k} out of range for {self.count}-component pixel")
