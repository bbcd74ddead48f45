"""Pillow composition of the dithered pattern with the revealed text."""

from __future__ import annotations

from io import BytesIO

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .models import Palette
from .themes import get_palette


def _font(size: int):
    for name in ("JetBrainsMono-Regular.ttf", "DejaVuSansMono.ttf"):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def wrap_text(draw: ImageDraw.ImageDraw, text: str, font, max_width: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split(" "):
        candidate = word if not current else f"{current} {word}"
        if current and draw.textlength(candidate, font=font) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def pattern_image(frame: np.ndarray) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(frame))


def compose(frame: np.ndarray, text: str, palette: Palette | None = None, font_size: int = 16) -> Image.Image:
    """Paints the background, the floating pattern and the text on top."""
    palette = palette or get_palette(None)
    height, width = frame.shape[:2]
    image = Image.new("RGBA", (width, height), palette.background)
    if width and height:
        image.alpha_composite(pattern_image(frame))

    if text:
        draw = ImageDraw.Draw(image)
        font = _font(font_size)
        lines = wrap_text(draw, text, font, max_width=max(1, width - 24))
        block = "\n".join(lines)
        left, top, right, bottom = draw.multiline_textbbox((0, 0), block, font=font, align="center")
        x = (width - (right - left)) / 2 - left
        y = (height - (bottom - top)) / 2 - top
        draw.multiline_text((x, y), block, font=font, fill=palette.text, align="center")
    return image


def to_png_bytes(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
