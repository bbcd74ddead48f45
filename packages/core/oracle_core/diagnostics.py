"""Doctor payload for local troubleshooting."""

from __future__ import annotations

import platform
from dataclasses import asdict
from datetime import datetime, timezone
from importlib import metadata
from typing import Any

from .config import AppConfig, config_path
from .logging_setup import config_root


def _version(dist: str) -> str | None:
    try:
        return metadata.version(dist)
    except metadata.PackageNotFoundError:
        return None


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "libraries": {name: _version(name) for name in ("numpy", "Pillow", "psutil", "PySide6")},
        "config_path": str(config_path()),
        "log_dir": str(config_root() / "logs"),
        "config": asdict(cfg),
    }
