"""Runtime performance budgeting and adaptive frame pacing hints."""

from __future__ import annotations

from dataclasses import dataclass

import psutil


@dataclass(frozen=True)
class PerformanceTargets:
    cpu_percent_max: float = 25.0
    rss_mb_max: float = 300.0
    fps_min: float = 15.0
    fps_max: float = 60.0


@dataclass(frozen=True)
class BudgetStatus:
    cpu_percent: float
    rss_mb: float
    fps: float
    overloaded: bool
    warning: str | None
    recommended_frame_ms: int


class PerformanceController:
    def __init__(self, targets: PerformanceTargets | None = None) -> None:
        self.targets = targets or PerformanceTargets()
        self._process = psutil.Process()
        # Prime non-blocking CPU measurement.
        self._process.cpu_percent(interval=None)

    @property
    def min_frame_ms(self) -> int:
        return max(1, int(1000 / self.targets.fps_max))

    @property
    def max_frame_ms(self) -> int:
        return max(self.min_frame_ms, int(1000 / self.targets.fps_min))

    def sample(self, fps: float, frame_ms: int) -> BudgetStatus:
        cpu = float(self._process.cpu_percent(interval=None))
        rss_mb = float(self._process.memory_info().rss) / (1024 * 1024)
        overloaded = cpu > self.targets.cpu_percent_max or rss_mb > self.targets.rss_mb_max

        warning = None
        rec_frame = frame_ms

        if overloaded:
            warning = "resource_overload"
            rec_frame = int(frame_ms * 1.25) + 2
        elif fps < self.targets.fps_min:
            warning = "below_fps_target"
            rec_frame = frame_ms - 2
        elif fps > self.targets.fps_max:
            warning = "above_fps_target"
            rec_frame = frame_ms + 2

        return BudgetStatus(
            cpu_percent=cpu,
            rss_mb=rss_mb,
            fps=float(fps),
            overloaded=overloaded,
            warning=warning,
            recommended_frame_ms=max(self.min_frame_ms, min(self.max_frame_ms, rec_frame)),
        )
