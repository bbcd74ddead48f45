"""Noise-modulated radial field, quantized through the dither table into RGBA."""

from __future__ import annotations

import logging
import math

import numpy as np

from .dither import DitherMatrix
from .models import FrameBuffer, Palette, PatternParams
from .noise import NoiseField
from .themes import get_palette

logger = logging.getLogger("oracle.renderer")

CHANNELS = 4


def new_buffer(width: int, height: int) -> np.ndarray:
    return np.zeros((height, width, CHANNELS), dtype=np.uint8)


class RadialPatternRenderer:
    """Renders the blob-shaped oracle pattern, one flat color per block."""

    def __init__(
        self,
        params: PatternParams | None = None,
        palette: Palette | None = None,
        noise: NoiseField | None = None,
        matrix: DitherMatrix | None = None,
    ) -> None:
        self.params = params or PatternParams()
        self.palette = palette or get_palette(None)
        self.noise = noise or NoiseField()
        self.matrix = matrix or DitherMatrix(block_size=self.params.block_size)
        if self.matrix.block_size != self.params.block_size:
            raise ValueError("dither matrix block size does not match pattern block size")
        self._front = np.array(self.palette.front, dtype=np.uint8)
        self._back = np.array(self.palette.back, dtype=np.uint8)

    def intensity_field(self, width: int, height: int, time: float, active: bool) -> np.ndarray:
        p = self.params
        xs = np.arange(0, width, p.block_size, dtype=np.float64)
        ys = np.arange(0, height, p.block_size, dtype=np.float64)
        x, y = np.meshgrid(xs, ys)

        dx = (x - width / 2) * p.scale
        dy = (y - height / 2) * p.scale
        dist = np.hypot(dx, dy)
        n = self.noise(x * p.noise_scale, y * p.noise_scale)

        base = p.base_radius_active if active else p.base_radius_idle
        shape = np.sin(np.arctan2(dy, dx) * p.lobes + time * p.angular_speed) * p.shape_amplitude
        drift = np.sin(time * p.noise_speed + n * 2 * math.pi) * p.noise_amplitude
        radius = base + shape + drift

        inside = dist < radius
        # radius > dist >= 0 wherever inside holds
        ratio = np.divide(dist, radius, out=np.ones_like(dist), where=inside)
        intensity = np.where(inside, 1.0 - ratio + (n - 0.5) * p.noise_jitter, 0.0)

        if not np.isfinite(intensity).all():
            logger.warning("non-finite intensity clamped", extra={"event": "intensity_non_finite", "time": time})
            intensity = np.nan_to_num(intensity, nan=0.0, posinf=0.0, neginf=0.0)
        return np.clip(intensity, 0.0, 1.0)

    def render(self, buffer: np.ndarray, time: float, active: bool) -> None:
        if buffer.ndim != 3 or buffer.shape[2] != CHANNELS:
            raise ValueError(f"expected (height, width, {CHANNELS}) buffer, got {buffer.shape}")
        height, width = buffer.shape[:2]
        if width == 0 or height == 0:
            return

        bs = self.params.block_size
        intensity = self.intensity_field(width, height, time, active)
        thresholds = self.matrix.block_thresholds(*intensity.shape)
        blocks = np.where((intensity > thresholds)[..., None], self._front, self._back)

        frame = np.repeat(np.repeat(blocks, bs, axis=0), bs, axis=1)[:height, :width]
        buffer[...] = frame

    def render_frame(self, width: int, height: int, time: float, active: bool) -> FrameBuffer:
        buffer = new_buffer(width, height)
        self.render(buffer, time, active)
        return FrameBuffer(width=width, height=height, pixel_format="RGBA8888", bytes=buffer.tobytes())
