"""
Image composition: rectangular copies, side-by-side joins and additive
combination of one image into a region of another.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

import numpy as np
from numpy.typing import DTypeLike

from ..exceptions import ImageRefNotInImage, IncompatibleImageSizes
from ..geometry import ORIGIN, ImageRef, image_size, in_image

_LOGGER = logging.getLogger(__name__)

Ref = Union[ImageRef, Tuple[int, int]]


def _clip_axis(
    length: int, src_off: int, src_ext: int, dst_off: int, dst_ext: int
) -> Tuple[int, int, int]:
    """Clip one axis of a copy to both images. Returns (src_start, dst_start, length)."""
    lead = max(0, -src_off, -dst_off)
    src_off += lead
    dst_off += lead
    length = min(length - lead, src_ext - src_off, dst_ext - dst_off)
    return src_off, dst_off, max(0, length)


def copy(
    src: np.ndarray,
    dst: np.ndarray,
    size: Optional[Ref] = None,
    src_offset: Ref = ORIGIN,
    dst_offset: Ref = ORIGIN,
) -> ImageRef:
    """
    Copy a rectangle of ``src`` into ``dst`` (in-place).

    The rectangle starts at ``src_offset`` in ``src`` and lands at
    ``dst_offset`` in ``dst``. It is clipped to both images, so any size or
    offset is safe. Values are converted to the dtype of ``dst``.

    Args:
        src: Source image
        dst: Destination image
        size: Rectangle size (default: all of ``src``)
        src_offset: Upper left corner in ``src``
        dst_offset: Upper left corner in ``dst``

    Returns:
        The size actually copied
    """
    s_off = ImageRef.of(src_offset)
    d_off = ImageRef.of(dst_offset)
    s_size = image_size(src)
    d_size = image_size(dst)
    req = s_size if size is None else ImageRef.of(size)

    sx, dx, w = _clip_axis(req.x, s_off.x, s_size.x, d_off.x, d_size.x)
    sy, dy, h = _clip_axis(req.y, s_off.y, s_size.y, d_off.y, d_size.y)
    if w and h:
        dst[dy : dy + h, dx : dx + w] = src[sy : sy + h, sx : sx + w]
    return ImageRef(w, h)


def join_images(a: np.ndarray, b: np.ndarray, dtype: Optional[DTypeLike] = None) -> np.ndarray:
    """
    Join two images side by side.

    ``a`` goes on the left, ``b`` on the right. The result is as tall as the
    taller input; the area below the shorter one is zero (black).

    Args:
        a: Left image
        b: Right image, same pixel layout as ``a``
        dtype: Component dtype of the result (default: common dtype of a and b)

    Returns:
        New image of width ``a.width + b.width``
    """
    if a.shape[2:] != b.shape[2:]:
        raise IncompatibleImageSizes("join_images")
    a_size = image_size(a)
    b_size = image_size(b)
    if dtype is None:
        dtype = np.result_type(a.dtype, b.dtype)

    shape = (max(a_size.y, b_size.y), a_size.x + b_size.x) + a.shape[2:]
    joined = np.zeros(shape, dtype=dtype)
    copy(a, joined)
    copy(b, joined, dst_offset=ImageRef(a_size.x, 0))
    return joined


def combine_images(
    a: np.ndarray,
    b: np.ndarray,
    out: np.ndarray,
    dst: Ref = ORIGIN,
    size: Optional[Ref] = None,
    from_: Ref = ORIGIN,
) -> ImageRef:
    """
    Copy ``a`` into ``out`` and add a region of ``b`` on top (in-place).

    Pixels of ``b`` starting at ``from_`` are added to ``out`` starting at
    ``dst``. The sum is computed in the dtype of ``out``, so integer
    components wrap around instead of saturating.

    Args:
        a: Base image
        b: Image whose pixels are added
        out: Result image, same width and height as ``a``; may be ``a`` itself
        dst: Upper left corner of the region in ``a``/``out``
        size: Region size (default: all of ``b``); clamped to fit every image
        from_: Upper left corner of the region in ``b``

    Returns:
        The region size actually combined

    Raises:
        ImageRefNotInImage: ``dst`` outside ``a`` or ``from_`` negative
        IncompatibleImageSizes: ``a`` and ``out`` differ in size
    """
    dst = ImageRef.of(dst)
    from_ = ImageRef.of(from_)
    if not in_image(a, dst):
        raise ImageRefNotInImage("combine_images")
    a_size = image_size(a)
    out_size = image_size(out)
    if a_size != out_size:
        raise IncompatibleImageSizes("combine_images")
    if from_.x < 0 or from_.y < 0:
        raise ImageRefNotInImage("combine_images")

    b_size = image_size(b)
    req = ORIGIN if size is None else ImageRef.of(size)
    if req == ORIGIN:
        req = b_size

    w = max(0, min(req.x, a_size.x - dst.x, out_size.x - dst.x, b_size.x - from_.x))
    h = max(0, min(req.y, a_size.y - dst.y, out_size.y - dst.y, b_size.y - from_.y))
    if (w, h) != (req.x, req.y):
        _LOGGER.debug("combine_images region clamped from %s to (%d, %d)", req, w, h)

    if out is not a:
        np.copyto(out, a, casting="unsafe")

    if w and h:
        region = out[dst.y : dst.y + h, dst.x : dst.x + w]
        np.add(
            region,
            b[from_.y : from_.y + h, from_.x : from_.x + w],
            out=region,
            casting="unsafe",
        )
    return ImageRef(w, h)
