"""
Integer image coordinates.

``ImageRef`` is the point/offset type shared by the drawing and
composition helpers. Images themselves are plain numpy arrays indexed
``image[y, x]``; ``image_size`` and ``in_image`` read their geometry.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterator, Optional, Tuple, Union

import numpy as np


@dataclass(frozen=True, slots=True)
class ImageRef:
    """Signed integer (x, y) coordinate or offset."""
    x: int = 0
    y: int = 0

    @classmethod
    def of(cls, value: Union["ImageRef", Tuple[int, int]]) -> "ImageRef":
        """Coerce an ``(x, y)`` pair into an ImageRef."""
        if isinstance(value, ImageRef):
            return value
        x, y = value
        return cls(int(x), int(y))

    def __add__(self, other: object) -> "ImageRef":
        if not isinstance(other, ImageRef):
            return NotImplemented
        return ImageRef(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "ImageRef":
        if not isinstance(other, ImageRef):
            return NotImplemented
        return ImageRef(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "ImageRef":
        return ImageRef(-self.x, -self.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def next(self, origin: "ImageRef", end: "ImageRef") -> Optional["ImageRef"]:
        """
        Step through the rectangle [origin, end) in row-major order.

        Returns the following point, or None once the walk has passed ``end``.
        """
        if self.x + 1 < end.x:
            return ImageRef(self.x + 1, self.y)
        if self.y + 1 < end.y:
            return ImageRef(origin.x, self.y + 1)
        return None


ORIGIN: Final[ImageRef] = ImageRef(0, 0)


def iter_region(origin: ImageRef, end: ImageRef) -> Iterator[ImageRef]:
    """Yield every point of [origin, end) row by row."""
    if end.x <= origin.x or end.y <= origin.y:
        return
    ref: Optional[ImageRef] = origin
    while ref is not None:
        yield ref
        ref = ref.next(origin, end)


def image_size(image: np.ndarray) -> ImageRef:
    """Width and height of an image as an ImageRef."""
    h, w = image.shape[:2]
    return ImageRef(int(w), int(h))


def in_image(image: np.ndarray, ref: ImageRef) -> bool:
    """True if ``ref`` addresses a pixel of ``image``."""
    h, w = image.shape[:2]
    return 0 <= ref.x < w and 0 <= ref.y < h
