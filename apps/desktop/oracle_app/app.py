"""Desktop window hosting the oracle display on the Qt event loop."""

from __future__ import annotations

import itertools
import sys
import time
from pathlib import Path

import numpy as np
from PySide6.QtCore import QTimer, Qt, QUrl
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtWidgets import QApplication, QLabel, QVBoxLayout, QWidget

from oracle_core import AppConfig, OracleDisplay, PerformanceController, PerformanceTargets, load_config, write_click_wav
from oracle_core.logging_setup import close_fault_log, config_root, configure_logging, get_logger, install_crash_hooks
from oracle_renderer import compose, get_palette


class QtScheduler:
    """Host scheduling on top of single-shot Qt timers."""

    def __init__(self, frame_ms: int) -> None:
        self.frame_ms = frame_ms

    def call_later(self, delay_ms: float, callback) -> None:
        QTimer.singleShot(int(round(delay_ms)), callback)

    def request_frame(self, callback) -> None:
        QTimer.singleShot(self.frame_ms, callback)


class QtAudioCue:
    """Small pool of sound effects so quick successive cues can overlap."""

    def __init__(self, path: Path, voices: int = 3) -> None:
        self._effects = []
        for _ in range(voices):
            effect = QSoundEffect()
            effect.setSource(QUrl.fromLocalFile(str(path)))
            self._effects.append(effect)
        self._cycle = itertools.cycle(self._effects)

    def play(self, volume: float) -> None:
        effect = next(self._cycle)
        effect.setVolume(volume)
        effect.play()


def _build_audio(config: AppConfig):
    if not config.audio.enabled:
        return None
    path = Path(config.audio.cue_path).expanduser() if config.audio.cue_path else config_root() / "click.wav"
    if not path.exists():
        write_click_wav(path)
    return QtAudioCue(path)


class OracleWindow(QWidget):
    def __init__(self, config: AppConfig) -> None:
        super().__init__()
        self.config = config
        self.logger = get_logger()
        self.oracle_palette = get_palette(config.display.palette)
        self.scheduler = QtScheduler(frame_ms=max(1, int(1000 / config.display.fps)))
        self.oracle = OracleDisplay(config, self.scheduler, audio=_build_audio(config))
        self.performance = PerformanceController(
            PerformanceTargets(
                cpu_percent_max=config.performance.cpu_percent_max,
                rss_mb_max=config.performance.rss_mb_max,
                fps_min=config.performance.fps_min,
                fps_max=config.performance.fps_max,
            )
        )
        self._window_start = time.perf_counter()
        self._window_frames = 0

        self.setWindowTitle("Oracle")
        self.setFixedSize(config.display.width, config.display.height)
        self.label = QLabel(self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.label)

        self.oracle.driver.add_listener(self._on_frame)

    def start(self) -> None:
        self.oracle.start()

    def shutdown(self) -> None:
        self.oracle.stop()

    def _on_frame(self, frame: np.ndarray, _time: float, _active: bool) -> None:
        image = compose(frame, self.oracle.displayed_text, self.oracle_palette)
        data = image.tobytes("raw", "RGBA")
        qimage = QImage(data, image.width, image.height, image.width * 4, QImage.Format.Format_RGBA8888)
        self.label.setPixmap(QPixmap.fromImage(qimage.copy()))
        self._pace()

    def _pace(self) -> None:
        self._window_frames += 1
        if self._window_frames < 60:
            return
        elapsed = max(time.perf_counter() - self._window_start, 1e-9)
        budget = self.performance.sample(self._window_frames / elapsed, self.scheduler.frame_ms)
        if budget.recommended_frame_ms != self.scheduler.frame_ms:
            self.logger.info(
                f"frame interval {self.scheduler.frame_ms} -> {budget.recommended_frame_ms} ms ({budget.warning})",
                extra={"event": "frame_pacing"},
            )
            self.scheduler.frame_ms = budget.recommended_frame_ms
        self._window_start = time.perf_counter()
        self._window_frames = 0

    def keyPressEvent(self, event) -> None:  # noqa: N802
        if event.key() in (Qt.Key.Key_Up, Qt.Key.Key_Down, Qt.Key.Key_Space):
            self.oracle.replay()
            return
        super().keyPressEvent(event)

    def wheelEvent(self, event) -> None:  # noqa: N802
        self.oracle.replay()
        event.accept()


def run_gui(config: AppConfig | None = None) -> int:
    config = config or load_config()
    configure_logging(keep_files=config.diagnostics.keep_log_files)
    install_crash_hooks()
    logger = get_logger()

    app = QApplication(sys.argv)
    app.setApplicationName("Oracle")

    window = OracleWindow(config)
    window.show()
    window.start()

    try:
        exit_code = app.exec()
        window.shutdown()
        logger.info("app shutdown", extra={"event": "shutdown", "exit_code": int(exit_code)})
    finally:
        close_fault_log()
    return int(exit_code)
