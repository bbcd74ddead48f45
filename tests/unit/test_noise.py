import math
import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from oracle_renderer.noise import NoiseField


class NoiseFieldTests(unittest.TestCase):
    def setUp(self):
        self.field = NoiseField()

    def test_values_in_unit_interval(self):
        xs, ys = np.meshgrid(np.linspace(-50.0, 50.0, 211), np.linspace(-30.0, 80.0, 173))
        values = self.field.noise(xs, ys)
        self.assertTrue(np.all(values >= 0.0))
        self.assertTrue(np.all(values < 1.0))

    def test_deterministic(self):
        first = self.field.noise(1.23, 4.56)
        for _ in range(5):
            self.assertEqual(self.field.noise(1.23, 4.56), first)
        self.assertEqual(NoiseField().noise(1.23, 4.56), first)

    def test_scalar_matches_array(self):
        xs = np.array([0.0, 0.3, 2.4, 0.01])
        ys = np.array([0.0, 1.1, 0.05, 2.82])
        values = self.field.noise(xs, ys)
        for x, y, v in zip(xs, ys, values):
            self.assertAlmostEqual(self.field.noise(float(x), float(y)), float(v), places=9)

    def test_scalar_returns_float(self):
        self.assertIsInstance(self.field(0.5, 0.5), float)

    def test_origin_is_zero(self):
        self.assertEqual(self.field.noise(0.0, 0.0), 0.0)

    def test_matches_sine_hash(self):
        v = math.sin(1.0 * 12.9898 + 2.0 * 78.233) * 10000.0
        self.assertAlmostEqual(self.field.noise(1.0, 2.0), v - math.floor(v), places=9)
        v = math.sin(1.5 * 12.9898 + 1.2 * 78.233) * 10000.0
        self.assertAlmostEqual(self.field.noise(1.5, 1.2), v - math.floor(v), places=9)


if __name__ == "__main__":
    unittest.main()
