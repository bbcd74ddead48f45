import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from oracle_core.scheduling import ManualScheduler


class ManualSchedulerTests(unittest.TestCase):
    def test_timers_fire_in_deadline_order(self):
        sched = ManualScheduler()
        fired = []
        sched.call_later(300, lambda: fired.append(("c", sched.now_ms)))
        sched.call_later(100, lambda: fired.append(("a", sched.now_ms)))
        sched.call_later(100, lambda: fired.append(("b", sched.now_ms)))

        self.assertEqual(sched.advance(99), 0)
        self.assertEqual(sched.advance(1), 2)
        self.assertEqual(fired, [("a", 100.0), ("b", 100.0)])
        sched.advance(500)
        self.assertEqual(fired[-1], ("c", 300.0))
        self.assertEqual(sched.now_ms, 600.0)
        self.assertEqual(sched.pending_timers, 0)

    def test_chained_timers_within_window(self):
        sched = ManualScheduler()
        fired = []

        def first():
            fired.append(sched.now_ms)
            sched.call_later(50, lambda: fired.append(sched.now_ms))

        sched.call_later(50, first)
        sched.advance(100)
        self.assertEqual(fired, [50.0, 100.0])

    def test_frame_requested_during_frame_waits(self):
        sched = ManualScheduler(frame_interval_ms=10)
        count = []

        def frame():
            count.append(sched.now_ms)
            sched.request_frame(frame)

        sched.request_frame(frame)
        self.assertEqual(sched.run_frame(), 1)
        self.assertEqual(sched.pending_frames, 1)
        sched.step()
        sched.step()
        self.assertEqual(count, [0.0, 10.0, 20.0])

    def test_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            ManualScheduler(frame_interval_ms=0)
        with self.assertRaises(ValueError):
            ManualScheduler().advance(-1)


if __name__ == "__main__":
    unittest.main()
