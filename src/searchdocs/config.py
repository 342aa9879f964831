"""
Runtime settings read from ``SEARCHDOCS_*`` environment variables.

Usage::

    settings = Settings.from_env()
    container = ApplicationContainer()
    container.config.from_dict(settings.to_container_config())
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from searchdocs.infrastructure.sources.base_client import DEFAULT_USER_AGENT
from searchdocs.infrastructure.sources.duckduckgo import DEFAULT_CORS_RELAY
from searchdocs.infrastructure.sources.jsonp import DEFAULT_JSONP_TIMEOUT

logger = logging.getLogger(__name__)

ENV_PREFIX = "SEARCHDOCS_"
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_API_PORT = 8765
DEFAULT_LOG_LEVEL = "INFO"


def default_output_dir() -> str:
    return str(Path(tempfile.gettempdir()) / "searchdocs_exports")


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(ENV_PREFIX + name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {ENV_PREFIX}{name}={raw!r}, using {default}")
        return default


def _read_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {ENV_PREFIX}{name}={raw!r}, using {default}")
        return default


def _read_str(env: Mapping[str, str], name: str, default: str) -> str:
    return env.get(ENV_PREFIX + name, "").strip() or default


@dataclass(frozen=True, slots=True)
class Settings:
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    jsonp_timeout: float = DEFAULT_JSONP_TIMEOUT
    cors_relay_url: str = DEFAULT_CORS_RELAY
    user_agent: str = DEFAULT_USER_AGENT
    output_dir: str = field(default_factory=default_output_dir)
    http_api_port: int = DEFAULT_API_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *env* (``os.environ`` by default); blank values fall back to defaults."""
        env = os.environ if env is None else env
        return cls(
            http_timeout=_read_float(env, "HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            jsonp_timeout=_read_float(env, "JSONP_TIMEOUT", DEFAULT_JSONP_TIMEOUT),
            cors_relay_url=_read_str(env, "CORS_RELAY_URL", DEFAULT_CORS_RELAY),
            user_agent=_read_str(env, "USER_AGENT", DEFAULT_USER_AGENT),
            output_dir=_read_str(env, "OUTPUT_DIR", default_output_dir()),
            http_api_port=_read_int(env, "HTTP_API_PORT", DEFAULT_API_PORT),
            log_level=_read_str(env, "LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def to_container_config(self) -> dict[str, Any]:
        return asdict(self)
