"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from oracle_renderer import PatternParams
from oracle_renderer.themes import PALETTES, DEFAULT_PALETTE_NAME

from .logging_setup import config_root


CONFIG_VERSION = 1

PLACEHOLDER_TEXT = "syncing with transistor chips..."
FALLBACK_FORTUNE = "SHADOWS CONSUME ALL"


@dataclass
class DisplayConfig:
    width: int = 240
    height: int = 282
    fps: int = 60
    palette: str = DEFAULT_PALETTE_NAME


@dataclass
class PatternConfig:
    block_size: int = 3
    scale: float = 0.8
    noise_scale: float = 0.01
    base_radius_idle: float = 80.0
    base_radius_active: float = 100.0
    lobes: int = 3
    angular_speed: float = 0.05
    shape_amplitude: float = 40.0
    noise_speed: float = 0.1
    noise_amplitude: float = 30.0
    noise_jitter: float = 0.3

    def to_params(self) -> PatternParams:
        return PatternParams(**asdict(self))


@dataclass
class AnimationConfig:
    active_increment: float = 4.0
    idle_increment: float = 0.5


@dataclass
class RevealConfig:
    char_delay_ms: int = 100
    space_delay_ms: int = 500
    cue_volume: float = 0.3
    placeholder: str = PLACEHOLDER_TEXT
    fallback_fortune: str = FALLBACK_FORTUNE


@dataclass
class AudioConfig:
    enabled: bool = True
    cue_path: str | None = None


@dataclass
class ShakeConfig:
    threshold: float = 15.0
    cooldown_ms: int = 1000


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7


@dataclass
class PerformanceConfig:
    cpu_percent_max: float = 25.0
    rss_mb_max: float = 300.0
    fps_min: float = 15.0
    fps_max: float = 60.0


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    display: DisplayConfig = field(default_factory=DisplayConfig)
    pattern: PatternConfig = field(default_factory=PatternConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    reveal: RevealConfig = field(default_factory=RevealConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    shake: ShakeConfig = field(default_factory=ShakeConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)


DEFAULT_CONFIG = AppConfig()


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_display(cfg: AppConfig) -> None:
    cfg.display.width = max(1, int(cfg.display.width))
    cfg.display.height = max(1, int(cfg.display.height))
    cfg.display.fps = max(1, min(120, int(cfg.display.fps)))
    if cfg.display.palette not in PALETTES:
        cfg.display.palette = DEFAULT_PALETTE_NAME


def _normalize_pattern(cfg: AppConfig) -> None:
    cfg.pattern.block_size = max(1, min(32, int(cfg.pattern.block_size)))
    cfg.pattern.lobes = max(0, int(cfg.pattern.lobes))
    cfg.pattern.scale = float(cfg.pattern.scale) if cfg.pattern.scale > 0 else 0.8


def _normalize_animation(cfg: AppConfig) -> None:
    cfg.animation.active_increment = float(max(0.0, cfg.animation.active_increment))
    cfg.animation.idle_increment = float(max(0.0, cfg.animation.idle_increment))


def _normalize_reveal(cfg: AppConfig) -> None:
    cfg.reveal.char_delay_ms = max(0, int(cfg.reveal.char_delay_ms))
    cfg.reveal.space_delay_ms = max(0, int(cfg.reveal.space_delay_ms))
    cfg.reveal.cue_volume = float(max(0.0, min(1.0, cfg.reveal.cue_volume)))


def _normalize_performance(cfg: AppConfig) -> None:
    cfg.performance.cpu_percent_max = float(max(1.0, cfg.performance.cpu_percent_max))
    cfg.performance.rss_mb_max = float(max(64.0, cfg.performance.rss_mb_max))
    cfg.performance.fps_min = float(max(1.0, cfg.performance.fps_min))
    cfg.performance.fps_max = float(max(cfg.performance.fps_min, cfg.performance.fps_max))


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        display=_merge(DisplayConfig, data.get("display", {})),
        pattern=_merge(PatternConfig, data.get("pattern", {})),
        animation=_merge(AnimationConfig, data.get("animation", {})),
        reveal=_merge(RevealConfig, data.get("reveal", {})),
        audio=_merge(AudioConfig, data.get("audio", {})),
        shake=_merge(ShakeConfig, data.get("shake", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
        performance=_merge(PerformanceConfig, data.get("performance", {})),
    )

    _normalize_display(cfg)
    _normalize_pattern(cfg)
    _normalize_animation(cfg)
    _normalize_reveal(cfg)
    _normalize_performance(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
