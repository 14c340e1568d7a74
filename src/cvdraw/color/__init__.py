"""Colour traits: canonical colours for gray and RGB pixel types."""

from .traits import ColorTraits, GrayColors, RGBColors, color_traits, color_traits_for

__all__ = ["ColorTraits", "GrayColors", "RGBColors", "color_traits", "color_traits_for"]
