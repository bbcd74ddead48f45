"""Ordered-dither threshold table."""

from __future__ import annotations

import numpy as np

BAYER_8X8: tuple[tuple[int, ...], ...] = (
    (0, 32, 8, 40, 2, 34, 10, 42),
    (48, 16, 56, 24, 50, 18, 58, 26),
    (12, 44, 4, 36, 14, 46, 6, 38),
    (60, 28, 52, 20, 62, 30, 54, 22),
    (3, 35, 11, 43, 1, 33, 9, 41),
    (51, 19, 59, 27, 49, 17, 57, 25),
    (15, 47, 7, 39, 13, 45, 5, 37),
    (63, 31, 55, 23, 61, 29, 53, 21),
)

MATRIX_SIZE = 8
LEVELS = MATRIX_SIZE * MATRIX_SIZE


class DitherMatrix:
    """8x8 threshold table addressed in blocks of ``block_size`` pixels."""

    def __init__(self, block_size: int = 3, table=BAYER_8X8) -> None:
        if block_size < 1:
            raise ValueError("block_size must be >= 1")
        arr = np.asarray(table)
        if arr.shape != (MATRIX_SIZE, MATRIX_SIZE):
            raise ValueError("dither table must be 8x8")
        if sorted(arr.ravel().tolist()) != list(range(LEVELS)):
            raise ValueError("dither table must hold each of 0..63 exactly once")
        arr = arr.astype(np.uint8)
        arr.setflags(write=False)
        self.block_size = block_size
        self._table = arr

    @property
    def table(self) -> np.ndarray:
        return self._table

    def threshold(self, px: int, py: int) -> int:
        bx = (px // self.block_size) % MATRIX_SIZE
        by = (py // self.block_size) % MATRIX_SIZE
        return int(self._table[by, bx])

    def block_thresholds(self, rows: int, cols: int) -> np.ndarray:
        """Normalized thresholds (``value / 64``) for a ``rows x cols`` block raster."""
        r = np.arange(rows) % MATRIX_SIZE
        c = np.arange(cols) % MATRIX_SIZE
        return self._table[np.ix_(r, c)].astype(np.float64) / LEVELS
