"""Core services for the oracle display: reveal, animation, config, and diagnostics."""

from .animation import AnimationClock, AnimationDriver
from .audio import AudioCue, NullAudioCue, write_click_wav
from .config import AppConfig, load_config, save_config
from .diagnostics import build_doctor_payload
from .messages import ShakeDetector, extract_fortune
from .oracle import OracleDisplay, build_renderer
from .performance import BudgetStatus, PerformanceController, PerformanceTargets
from .reveal import RevealScheduler, RevealSession, RevealSignal
from .scheduling import HostScheduler, ManualScheduler

__all__ = [
    "AnimationClock",
    "AnimationDriver",
    "AppConfig",
    "AudioCue",
    "BudgetStatus",
    "HostScheduler",
    "ManualScheduler",
    "NullAudioCue",
    "OracleDisplay",
    "PerformanceController",
    "PerformanceTargets",
    "RevealScheduler",
    "RevealSession",
    "RevealSignal",
    "ShakeDetector",
    "build_doctor_payload",
    "build_renderer",
    "extract_fortune",
    "load_config",
    "save_config",
    "write_click_wav",
]
