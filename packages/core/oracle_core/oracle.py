"""Oracle display: the pattern animation and the fortune reveal wired together."""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from oracle_renderer import DitherMatrix, RadialPatternRenderer, get_palette

from .animation import AnimationDriver
from .audio import AudioCue
from .config import AppConfig
from .logging_setup import get_logger
from .messages import ShakeDetector, extract_fortune
from .reveal import RevealScheduler
from .scheduling import HostScheduler


def build_renderer(config: AppConfig) -> RadialPatternRenderer:
    params = config.pattern.to_params()
    return RadialPatternRenderer(
        params=params,
        palette=get_palette(config.display.palette),
        matrix=DitherMatrix(block_size=params.block_size),
    )


class OracleDisplay:
    """Owns one reveal and one animation sharing the reveal's active flag.

    The latest fortune is remembered even when its reveal is dropped, so the
    next ``replay`` shows it.
    """

    def __init__(self, config: AppConfig, scheduler: HostScheduler, audio: AudioCue | None = None) -> None:
        self.config = config
        self.logger = get_logger()
        self.reveal = RevealScheduler(
            scheduler,
            audio=audio,
            char_delay_ms=config.reveal.char_delay_ms,
            space_delay_ms=config.reveal.space_delay_ms,
            cue_volume=config.reveal.cue_volume,
        )
        self.renderer = build_renderer(config)
        self.driver = AnimationDriver(
            self.renderer,
            self.reveal.signal,
            scheduler,
            width=config.display.width,
            height=config.display.height,
            active_increment=config.animation.active_increment,
            idle_increment=config.animation.idle_increment,
        )
        self.shake = ShakeDetector(threshold=config.shake.threshold, cooldown_ms=config.shake.cooldown_ms)
        self._fortune = config.reveal.placeholder

    @property
    def fortune(self) -> str:
        return self._fortune

    @property
    def displayed_text(self) -> str:
        return self.reveal.displayed_text

    @property
    def active(self) -> bool:
        return self.reveal.active

    @property
    def frame(self) -> np.ndarray:
        return self.driver.frame

    def start(self) -> None:
        self.driver.start()
        self.reveal.show(self._fortune)
        # No upstream source is wired in; offer the fallback the way a reply would arrive.
        self.set_fortune(self.config.reveal.fallback_fortune)

    def stop(self) -> None:
        self.driver.stop()

    def set_fortune(self, text: str) -> bool:
        self._fortune = text
        return self.reveal.show(text)

    def replay(self) -> bool:
        return self.reveal.show(self._fortune)

    def handle_message(self, data: Mapping[str, Any]) -> bool:
        fortune = extract_fortune(data)
        if fortune is None:
            self.logger.info("message without fortune ignored", extra={"event": "message_ignored"})
            return False
        self.set_fortune(fortune)
        return True

    def handle_shake(self, x: float, y: float, z: float, now_ms: float) -> bool:
        if not self.shake.update(x, y, z, now_ms):
            return False
        return self.replay()
