from __future__ import annotations

import os
from enum import Enum
from typing import Any


class Setting(str, Enum):
    HIBP_RANGE_URL = "HIBP_RANGE_URL"
    HIBP_USER_AGENT = "HIBP_USER_AGENT"
    HIBP_ADD_PADDING = "HIBP_ADD_PADDING"
    BREACH_TIMEOUT_SECONDS = "BREACH_TIMEOUT_SECONDS"
    YEAR_MIN = "YEAR_MIN"
    YEAR_MAX = "YEAR_MAX"
    MIN_LENGTH = "MIN_LENGTH"
    RECOMMENDED_LENGTH = "RECOMMENDED_LENGTH"
    PASSWORD_MAX_LENGTH = "PASSWORD_MAX_LENGTH"
    SERVER_HOST = "SERVER_HOST"
    SERVER_PORT = "SERVER_PORT"


DEFAULT_SETTINGS: dict[Setting, Any] = {
    Setting.HIBP_RANGE_URL: "https://api.pwnedpasswords.com/range",
    Setting.HIBP_USER_AGENT: "passcheck",
    Setting.HIBP_ADD_PADDING: True,
    Setting.BREACH_TIMEOUT_SECONDS: 8.0,
    # Upper bound goes stale after 2029; raise it here, not in the detector.
    Setting.YEAR_MIN: 1900,
    Setting.YEAR_MAX: 2029,
    Setting.MIN_LENGTH: 8,
    Setting.RECOMMENDED_LENGTH: 12,
    Setting.PASSWORD_MAX_LENGTH: 256,
    Setting.SERVER_HOST: "127.0.0.1",
    Setting.SERVER_PORT: 8000,
}

_TRUTHY = {"1", "true", "yes", "on"}


def _coerce(raw: str, default: Any) -> Any:
    if isinstance(default, bool):
        return raw.strip().lower() in _TRUTHY
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    return raw


def get_setting(setting: Setting | str) -> Any:
    resolved = Setting(setting) if isinstance(setting, str) else setting
    default = DEFAULT_SETTINGS[resolved]
    raw = os.getenv(resolved.value)
    if raw is None or not raw.strip():
        return default
    try:
        return _coerce(raw, default)
    except ValueError:
        raise RuntimeError(f"{resolved.value} has an invalid value: {raw!r}")


def get_year_range() -> tuple[int, int]:
    return get_setting(Setting.YEAR_MIN), get_setting(Setting.YEAR_MAX)


def get_cors_origins() -> list[str]:
    configured = os.getenv("CORS_ORIGINS", "").strip()
    if configured:
        return [origin.strip() for origin in configured.split(",") if origin.strip()]
    return [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
