"""Application configuration helpers for Streamlit surfaces."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import streamlit as st


DEFAULT_GEMINI_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_DATA_PATH = str(Path.home() / ".medisense" / "store.json")
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_PACING_DELAY = 0.4


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration bundle for MediSense."""

    gemini_base: str
    gemini_model: str
    data_path: str
    request_timeout: float
    pacing_delay: float
    seed_api_key: str | None
    debug: bool


def _safe_secret(key: str) -> Any:
    """Return a Streamlit secret when available."""

    try:
        return st.secrets.get(key)
    except Exception:
        return None


def _setting(key: str) -> Any:
    return _safe_secret(key) or os.getenv(key)


def _coerce_bool(value: Any, default: bool = False) -> bool:
    """Parse truthy/falsey strings and primitives into booleans."""

    if isinstance(value, bool):
        return value
    if value is None:
        return default
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if not text:
        return default
    if text in {"1", "true", "yes", "on", "enabled", "enable"}:
        return True
    if text in {"0", "false", "no", "off", "disabled", "disable"}:
        return False
    return default


def _coerce_float(value: Any, default: float) -> float:
    if value is None or value == "":
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 0 else default


def load_settings() -> AppSettings:
    """Collect runtime configuration from environment and secrets."""

    gemini_base = _setting("MEDISENSE_GEMINI_BASE") or DEFAULT_GEMINI_BASE
    gemini_model = _setting("MEDISENSE_GEMINI_MODEL") or DEFAULT_GEMINI_MODEL
    data_path = _setting("MEDISENSE_DATA_PATH") or DEFAULT_DATA_PATH
    seed_api_key = _setting("GEMINI_API_KEY") or _setting("API_KEY")
    return AppSettings(
        gemini_base=str(gemini_base).rstrip("/"),
        gemini_model=str(gemini_model),
        data_path=os.path.expanduser(str(data_path)),
        request_timeout=_coerce_float(_setting("MEDISENSE_REQUEST_TIMEOUT"), DEFAULT_REQUEST_TIMEOUT),
        pacing_delay=_coerce_float(_setting("MEDISENSE_PACING_DELAY"), DEFAULT_PACING_DELAY),
        seed_api_key=str(seed_api_key).strip() if seed_api_key else None,
        debug=_coerce_bool(_setting("MEDISENSE_DEBUG"), default=False),
    )


__all__ = ["AppSettings", "DEFAULT_GEMINI_BASE", "DEFAULT_GEMINI_MODEL", "load_settings"]
