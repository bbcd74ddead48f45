"""Typewriter-style text reveal driven by host timers."""

from __future__ import annotations

from dataclasses import dataclass

from .audio import AudioCue, NullAudioCue
from .logging_setup import get_logger
from .scheduling import HostScheduler


class RevealSignal:
    """Active-reveal flag shared with the animation.

    Only ``RevealScheduler`` writes it; everything else reads ``active``.
    """

    def __init__(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def set(self) -> None:
        self._active = True

    def clear(self) -> None:
        self._active = False

    def __bool__(self) -> bool:
        return self._active


@dataclass
class RevealSession:
    text: str
    cursor: int = 0

    @property
    def done(self) -> bool:
        return self.cursor >= len(self.text)


class RevealScheduler:
    """Emits one character at a time; ``show`` while a reveal runs is dropped."""

    def __init__(
        self,
        scheduler: HostScheduler,
        audio: AudioCue | None = None,
        char_delay_ms: float = 100.0,
        space_delay_ms: float = 500.0,
        cue_volume: float = 0.3,
        initial_text: str = "",
    ) -> None:
        self._scheduler = scheduler
        self._audio = audio or NullAudioCue()
        self.char_delay_ms = char_delay_ms
        self.space_delay_ms = space_delay_ms
        self.cue_volume = cue_volume
        self._signal = RevealSignal()
        self._session: RevealSession | None = None
        self._displayed = initial_text
        self._logger = get_logger()

    @property
    def signal(self) -> RevealSignal:
        return self._signal

    @property
    def active(self) -> bool:
        return self._signal.active

    @property
    def session(self) -> RevealSession | None:
        return self._session

    @property
    def displayed_text(self) -> str:
        return self._displayed

    def delay_for(self, char: str) -> float:
        return self.space_delay_ms if char == " " else self.char_delay_ms

    def show(self, text: str) -> bool:
        if self._signal.active:
            self._logger.debug("reveal already active, dropping text", extra={"event": "reveal_dropped", "dropped_chars": len(text)})
            return False

        self._session = RevealSession(text=text)
        self._displayed = ""
        self._signal.set()
        self._logger.info("reveal started", extra={"event": "reveal_start", "chars": len(text)})
        self._schedule_next()
        return True

    def _schedule_next(self) -> None:
        session = self._session
        if session is None:
            return
        if session.done:
            self._finish()
            return
        self._scheduler.call_later(self.delay_for(session.text[session.cursor]), self._emit)

    def _emit(self) -> None:
        session = self._session
        if session is None:
            return
        char = session.text[session.cursor]
        self._displayed += char
        session.cursor += 1
        if char != " ":
            self._play_cue()
        self._schedule_next()

    def _play_cue(self) -> None:
        try:
            self._audio.play(self.cue_volume)
        except Exception as exc:
            self._logger.warning(f"audio cue failed: {exc}", extra={"event": "audio_cue_failed"})

    def _finish(self) -> None:
        self._session = None
        self._signal.clear()
        self._logger.info("reveal finished", extra={"event": "reveal_done", "chars": len(self._displayed)})
