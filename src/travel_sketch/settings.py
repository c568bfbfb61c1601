"""Environment-backed configuration."""

from __future__ import annotations

import os

DEFAULT_GEO_PROXY_URL = "http://localhost:3000/api/geo"


def _as_float(val: str | None, default: float) -> float:
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError:
        return default


class Settings:
    def __init__(self) -> None:
        self.GEO_PROXY_URL: str = os.getenv("TRAVEL_SKETCH_GEO_PROXY_URL", DEFAULT_GEO_PROXY_URL)
        self.GEO_TIMEOUT: float = _as_float(os.getenv("TRAVEL_SKETCH_GEO_TIMEOUT"), 10.0)
        self.LOG_LEVEL: str = os.getenv("TRAVEL_SKETCH_LOG_LEVEL", "WARNING")


settings = Settings()
