from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os

import yaml

__version__ = "0.1.0"

BASE_URL = "https://quickchart.io"
CHART_ENDPOINT = "/chart"
CREATE_ENDPOINT = "/chart/create"
USER_AGENT = f"quickchart-python/{__version__}"
DEFAULT_TIMEOUT_SECONDS: Optional[float] = None


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = BASE_URL
    # None leaves requests' own default (wait forever)
    timeout_seconds: Optional[float] = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = USER_AGENT


DEFAULT_CLIENT_CONFIG_PATH = os.path.join("config", "quickchart.yml")


def _default_config_path() -> str:
    return os.getenv("QUICKCHART_CONFIG", DEFAULT_CLIENT_CONFIG_PATH)


def load_client_config(path: str | os.PathLike | None = None) -> ClientConfig:
    cfg_path = Path(path or _default_config_path())
    if not cfg_path.exists():
        return ClientConfig()

    try:
        raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except Exception:
        return ClientConfig()
    if not isinstance(raw, dict):
        return ClientConfig()

    def _s(name: str, default: str) -> str:
        v = raw.get(name)
        if isinstance(v, str) and v.strip():
            return v.strip()
        return default

    def _timeout(default: Optional[float]) -> Optional[float]:
        v = raw.get("timeout_seconds", default)
        if v is None:
            return None
        try:
            f = float(v)
        except Exception:
            return default
        return f if f > 0 else default

    return ClientConfig(
        base_url=_s("base_url", BASE_URL).rstrip("/"),
        timeout_seconds=_timeout(DEFAULT_TIMEOUT_SECONDS),
        user_agent=_s("user_agent", USER_AGENT),
    )
