"""Upstream plugin message parsing and shake detection."""

from __future__ import annotations

import json
import math
from typing import Any, Mapping


def _normalize(text: str) -> str:
    return text.strip().upper()


def extract_fortune(data: Mapping[str, Any]) -> str | None:
    payload = data.get("data")
    if payload:
        if isinstance(payload, str):
            try:
                parsed = json.loads(payload)
            except ValueError:
                return _normalize(payload)
            if parsed is None:
                return _normalize(payload)
            if isinstance(parsed, dict) and parsed.get("fortune"):
                return _normalize(str(parsed["fortune"]))
        elif isinstance(payload, Mapping) and payload.get("fortune"):
            return _normalize(str(payload["fortune"]))

    message = data.get("message")
    if message:
        return _normalize(str(message))
    return None


class ShakeDetector:
    def __init__(self, threshold: float = 15.0, cooldown_ms: float = 1000.0) -> None:
        self.threshold = threshold
        self.cooldown_ms = cooldown_ms
        self._last_ms: float | None = None

    def update(self, x: float, y: float, z: float, now_ms: float) -> bool:
        if math.sqrt(x * x + y * y + z * z) <= self.threshold:
            return False
        if self._last_ms is not None and now_ms - self._last_ms <= self.cooldown_ms:
            return False
        self._last_ms = now_ms
        return True
