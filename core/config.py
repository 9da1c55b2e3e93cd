from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def get_setting(name: str, default: str = "") -> str:
    # Streamlit Cloud Secrets
    try:
        import streamlit as st
        if name in st.secrets:
            return str(st.secrets[name]).strip()
    except Exception:
        # no secrets.toml outside Streamlit Cloud
        pass
    # fallback: env
    return os.getenv(name, default).strip()


def get_int_setting(name: str, default: int) -> int:
    raw = get_setting(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def media_source() -> str:
    """CSV path or URL with media rows; empty means the built-in samples."""
    return get_setting("MEDIA_CSV", "")


def cache_ttl() -> int:
    return get_int_setting("MEDIA_CACHE_TTL", 120)


def http_timeout() -> int:
    return get_int_setting("HTTP_TIMEOUT", 60)


def log_dir() -> Path:
    return Path(get_setting("LOG_DIR", str(BASE_DIR / "logs")))


def log_level() -> str:
    return get_setting("LOG_LEVEL", "INFO").upper()
