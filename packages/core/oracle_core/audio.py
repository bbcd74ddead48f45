"""Fire-and-forget audio cue contract and a synthesized typewriter click."""

from __future__ import annotations

import wave
from pathlib import Path
from typing import Protocol

import numpy as np


class AudioCue(Protocol):
    def play(self, volume: float) -> None: ...


class NullAudioCue:
    def play(self, volume: float) -> None:
        return None


def click_samples(sample_rate: int = 22050, duration_ms: int = 30, freq_hz: float = 1800.0) -> np.ndarray:
    """Short decaying burst, int16 mono."""
    count = max(1, int(sample_rate * duration_ms / 1000))
    t = np.arange(count, dtype=np.float64) / sample_rate
    envelope = np.exp(-t * 220.0)
    tone = np.sin(2 * np.pi * freq_hz * t) * 0.6 + np.sin(2 * np.pi * freq_hz * 2.7 * t) * 0.25
    return (tone * envelope * 32767 * 0.8).astype(np.int16)


def write_click_wav(path: Path, sample_rate: int = 22050) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    samples = click_samples(sample_rate=sample_rate)
    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(samples.astype("<i2").tobytes())
    return path
