"""Per-frame animation loop for the oracle pattern."""

from __future__ import annotations

from typing import Callable

import numpy as np

from oracle_renderer import RadialPatternRenderer, new_buffer

from .reveal import RevealSignal
from .scheduling import HostScheduler

FrameListener = Callable[[np.ndarray, float, bool], None]


class AnimationClock:
    def __init__(self, time: float = 0.0) -> None:
        self._time = float(time)

    @property
    def time(self) -> float:
        return self._time

    def advance(self, increment: float) -> float:
        if increment < 0:
            raise ValueError("animation clock cannot run backwards")
        self._time += increment
        return self._time


class AnimationDriver:
    """Advances the clock and re-renders once per host frame.

    Runs until ``stop``; a tick always completes before the next frame is
    requested.
    """

    def __init__(
        self,
        renderer: RadialPatternRenderer,
        signal: RevealSignal,
        scheduler: HostScheduler,
        width: int = 240,
        height: int = 282,
        active_increment: float = 4.0,
        idle_increment: float = 0.5,
        clock: AnimationClock | None = None,
    ) -> None:
        if active_increment < 0 or idle_increment < 0:
            raise ValueError("clock increments must be >= 0")
        self.renderer = renderer
        self.signal = signal
        self.scheduler = scheduler
        self.width = width
        self.height = height
        self.active_increment = active_increment
        self.idle_increment = idle_increment
        self.clock = clock or AnimationClock()
        self._front = new_buffer(width, height)
        self._back = new_buffer(width, height)
        self._listeners: list[FrameListener] = []
        self._running = False
        self._frames = 0

    @property
    def frame(self) -> np.ndarray:
        return self._front

    @property
    def frames(self) -> int:
        return self._frames

    @property
    def running(self) -> bool:
        return self._running

    def add_listener(self, listener: FrameListener) -> None:
        self._listeners.append(listener)

    def tick(self) -> float:
        active = self.signal.active
        now = self.clock.advance(self.active_increment if active else self.idle_increment)
        self.renderer.render(self._back, now, active)
        self._front, self._back = self._back, self._front
        self._frames += 1
        for listener in self._listeners:
            listener(self._front, now, active)
        return now

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self.scheduler.request_frame(self._on_frame)

    def stop(self) -> None:
        self._running = False

    def _on_frame(self) -> None:
        if not self._running:
            return
        self.tick()
        if self._running:
            self.scheduler.request_frame(self._on_frame)
