import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from oracle_core.animation import AnimationClock, AnimationDriver
from oracle_core.reveal import RevealScheduler, RevealSignal
from oracle_core.scheduling import ManualScheduler
from oracle_renderer import RadialPatternRenderer


class RecordingRenderer:
    def __init__(self):
        self.calls = []
        self.inner = RadialPatternRenderer()

    def render(self, buffer, time, active):
        self.calls.append((time, active))
        self.inner.render(buffer, time, active)


class AnimationClockTests(unittest.TestCase):
    def test_advance(self):
        clock = AnimationClock()
        self.assertEqual(clock.advance(0.5), 0.5)
        self.assertEqual(clock.advance(0.0), 0.5)
        with self.assertRaises(ValueError):
            clock.advance(-0.1)
        self.assertEqual(clock.time, 0.5)


class AnimationDriverTests(unittest.TestCase):
    def setUp(self):
        self.sched = ManualScheduler(frame_interval_ms=16)
        self.renderer = RecordingRenderer()

    def _driver(self, signal):
        return AnimationDriver(self.renderer, signal, self.sched, width=60, height=45)

    def test_idle_and_active_increments(self):
        signal = RevealSignal()
        driver = self._driver(signal)
        self.assertEqual(driver.tick(), 0.5)
        signal.set()
        self.assertEqual(driver.tick(), 4.5)
        signal.clear()
        self.assertEqual(driver.tick(), 5.0)
        self.assertEqual(self.renderer.calls, [(0.5, False), (4.5, True), (5.0, False)])

    def test_clock_follows_reveal(self):
        reveal = RevealScheduler(self.sched)
        driver = self._driver(reveal.signal)
        driver.start()
        reveal.show("HI")

        times = [driver.clock.time]
        actives = []
        for _ in range(20):
            self.sched.advance(self.sched.frame_interval_ms)
            active_at_tick = reveal.active
            self.sched.run_frame()
            actives.append(active_at_tick)
            times.append(driver.clock.time)

        deltas = [b - a for a, b in zip(times, times[1:])]
        for delta, active in zip(deltas, actives):
            self.assertEqual(delta, 4.0 if active else 0.5)
        self.assertIn(True, actives)
        self.assertIn(False, actives)
        self.assertTrue(all(d >= 0 for d in deltas))

    def test_frames_keep_running_until_stopped(self):
        driver = self._driver(RevealSignal())
        driver.start()
        driver.start()
        for _ in range(5):
            self.sched.step()
        self.assertEqual(driver.frames, 5)
        self.assertEqual(self.sched.pending_frames, 1)

        driver.stop()
        self.sched.step()
        self.sched.step()
        self.assertEqual(driver.frames, 5)
        self.assertEqual(self.sched.pending_frames, 0)
        self.assertFalse(driver.running)

    def test_frame_swaps_complete_buffers(self):
        driver = self._driver(RevealSignal())
        seen = []
        driver.add_listener(lambda frame, t, active: seen.append((frame.copy(), t, active)))
        driver.tick()
        first = driver.frame
        driver.tick()
        self.assertIsNot(driver.frame, first)
        self.assertEqual(driver.frame.shape, (45, 60, 4))
        self.assertEqual([(t, a) for _, t, a in seen], [(0.5, False), (1.0, False)])
        expected = RadialPatternRenderer().render_frame(60, 45, 1.0, False).bytes
        self.assertEqual(driver.frame.tobytes(), expected)
        self.assertTrue(np.array_equal(seen[-1][0], driver.frame))

    def test_rejects_negative_increments(self):
        with self.assertRaises(ValueError):
            AnimationDriver(self.renderer, RevealSignal(), self.sched, idle_increment=-1.0)


if __name__ == "__main__":
    unittest.main()
