"""Cheap deterministic 2D hash used to texture the radial pattern."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_BELOW_ONE = float(np.nextafter(1.0, 0.0))


@dataclass(frozen=True)
class NoiseField:
    """fract(sin(x*c1 + y*c2) * k).

    Low quality and not uniform, but smooth enough for organic texture. The
    constants are part of the look of the pattern.
    """

    c1: float = 12.9898
    c2: float = 78.233
    k: float = 10000.0

    def noise(self, x, y):
        seed = np.multiply(x, self.c1) + np.multiply(y, self.c2)
        v = np.sin(seed) * self.k
        value = np.minimum(v - np.floor(v), _BELOW_ONE)
        if np.ndim(value) == 0:
            return float(value)
        return value

    __call__ = noise
