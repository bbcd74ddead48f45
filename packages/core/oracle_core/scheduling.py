"""Host scheduling contract and a virtual-clock implementation."""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, Protocol

Callback = Callable[[], None]


class HostScheduler(Protocol):
    def call_later(self, delay_ms: float, callback: Callback) -> None: ...

    def request_frame(self, callback: Callback) -> None: ...


class ManualScheduler:
    """Single-threaded scheduler driven by explicit ``advance``/``run_frame`` calls.

    Timers fire in deadline order, ties in the order they were scheduled. A
    frame callback requested while frames are running waits for the next frame.
    """

    def __init__(self, frame_interval_ms: float = 1000.0 / 60.0) -> None:
        if frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be > 0")
        self.frame_interval_ms = frame_interval_ms
        self._now_ms = 0.0
        self._seq = itertools.count()
        self._timers: list[tuple[float, int, Callback]] = []
        self._frame_callbacks: list[Callback] = []

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    @property
    def pending_frames(self) -> int:
        return len(self._frame_callbacks)

    def call_later(self, delay_ms: float, callback: Callback) -> None:
        deadline = self._now_ms + max(0.0, float(delay_ms))
        heapq.heappush(self._timers, (deadline, next(self._seq), callback))

    def request_frame(self, callback: Callback) -> None:
        self._frame_callbacks.append(callback)

    def advance(self, ms: float) -> int:
        if ms < 0:
            raise ValueError("cannot advance backwards")
        target = self._now_ms + ms
        fired = 0
        while self._timers and self._timers[0][0] <= target:
            deadline, _, callback = heapq.heappop(self._timers)
            self._now_ms = deadline
            callback()
            fired += 1
        self._now_ms = target
        return fired

    def run_frame(self) -> int:
        callbacks, self._frame_callbacks = self._frame_callbacks, []
        for callback in callbacks:
            callback()
        return len(callbacks)

    def step(self) -> int:
        self.advance(self.frame_interval_ms)
        return self.run_frame()
