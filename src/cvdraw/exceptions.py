"""Errors raised by the composition helpers."""
from __future__ import annotations


class DrawError(Exception):
    """Base class for all drawing errors."""

    def __init__(self, function: str, message: str) -> None:
        super().__init__(message)
        self.function = function
        self.message = message


class ImageRefNotInImage(DrawError):
    """Input ImageRef not within image dimensions."""

    def __init__(self, function: str) -> None:
        super().__init__(function, f"Input ImageRefs not in image in {function}")


class IncompatibleImageSizes(DrawError):
    """Input images have incompatible dimensions."""

    def __init__(self, function: str) -> None:
        super().__init__(function, f"Incompatible image sizes in {function}")
