"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass

RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class Palette:
    name: str
    front: RGBA
    back: RGBA
    background: str
    text: str


@dataclass(frozen=True)
class PatternParams:
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


@dataclass(frozen=True)
class FrameBuffer:
    width: int
    height: int
    pixel_format: str
    bytes: bytes
