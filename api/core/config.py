"""
Environment-driven settings.

Each setting is a small function so values are read at call time; tests can
set or clear environment variables without reloading modules.
"""

from __future__ import annotations

import os

DEFAULT_PORT = 3000
TEST_PORT = 3001


def app_env() -> str:
    return os.environ.get("APP_ENV", "").strip().lower()


def is_test_env() -> bool:
    return app_env() == "test"


def listen_port() -> int:
    raw = os.environ.get("PORT", "").strip()
    if raw:
        return int(raw)
    return TEST_PORT if is_test_env() else DEFAULT_PORT


def listen_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip() or "INFO"


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url
