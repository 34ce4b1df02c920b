"""Runtime settings for the admin console."""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

from utils.path_utils import config_path

log = logging.getLogger(__name__)

# env var -> (config.ini section, option)
_SOURCES = {
    "api_url": ("ADMIN_API_URL", "api", "url"),
    "backend_url": ("ADMIN_BACKEND_URL", "api", "backend_url"),
    "access_token": ("ADMIN_ACCESS_TOKEN", "session", "access_token"),
    "role": ("ADMIN_ROLE", "session", "role"),
    "log_level": ("ADMIN_LOG_LEVEL", "logging", "level"),
}


@dataclass(frozen=True)
class Settings:
    """Connection and session values shared by the console pages."""

    api_url: str = "http://localhost:8000/api/"
    backend_url: str = "http://localhost:8000/"
    access_token: Optional[str] = None
    role: str = "admin"
    log_level: str = "INFO"

    def with_overrides(self, **changes: Any) -> "Settings":
        return replace(self, **changes)


def _read_config(path: Path) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    if path.exists():
        parser.read(path, encoding="utf-8")
        log.debug("Loaded console settings from %s", path)
    return parser


def load_settings(path: Optional[Path] = None) -> Settings:
    """Return settings from the environment, falling back to ``config.ini``.

    Environment variables win over the file; values missing from both keep
    the :class:`Settings` defaults. Blank values count as missing.
    """

    parser = _read_config(path or config_path())
    values: dict[str, str] = {}
    for field_name, (env_name, section, option) in _SOURCES.items():
        value = (os.getenv(env_name) or "").strip()
        if not value:
            value = (parser.get(section, option, fallback="") or "").strip()
        if value:
            values[field_name] = value

    settings = Settings(**values)
    if not settings.access_token:
        log.warning("No access token configured; API requests are anonymous")
    return settings


__all__ = ["Settings", "load_settings"]
