"""Renderer package for the oracle's dithered pattern and text overlay."""

from .dither import BAYER_8X8, DitherMatrix
from .models import FrameBuffer, Palette, PatternParams
from .noise import NoiseField
from .overlay import compose, to_png_bytes
from .radial import RadialPatternRenderer, new_buffer
from .themes import DEFAULT_PALETTE_NAME, get_palette, list_palettes

__all__ = [
    "BAYER_8X8",
    "DEFAULT_PALETTE_NAME",
    "DitherMatrix",
    "FrameBuffer",
    "NoiseField",
    "Palette",
    "PatternParams",
    "RadialPatternRenderer",
    "compose",
    "get_palette",
    "list_palettes",
    "new_buffer",
    "to_png_bytes",
]
