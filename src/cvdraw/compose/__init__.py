from __future__ import annotations

from .compose import combine_images, copy, join_images

__all__ = ["copy", "join_images", "combine_images"]
