"""
Process configuration for the UniFuncs MCP server.

Environment Variables:
    UNIFUNCS_API_KEY: Bearer token for the UniFuncs API (required)
    UNIFUNCS_API_BASE: Base URL of the UniFuncs API
    UNIFUNCS_REQUEST_TIMEOUT: Outbound request timeout in seconds
    UNIFUNCS_SSE_SERVER: Any non-empty value selects the SSE transport
    UNIFUNCS_SSE_SERVER_HOST: Bind host for the SSE transport
    UNIFUNCS_SSE_SERVER_PORT: Port for the SSE transport
    LOG_LEVEL: Logging level (debug, info, warning, error)
"""

import os
import sys
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

DEFAULT_API_BASE = "https://api.unifuncs.com"
DEFAULT_SSE_HOST = "0.0.0.0"
DEFAULT_SSE_PORT = 5656
DEFAULT_REQUEST_TIMEOUT = 60.0
CONNECT_TIMEOUT = 10.0

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_base: str = DEFAULT_API_BASE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    sse_enabled: bool = False
    sse_host: str = DEFAULT_SSE_HOST
    sse_port: int = DEFAULT_SSE_PORT


def _parse_number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None, sse: bool = False) -> Settings:
    """
    Build the immutable process settings from the environment.

    Args:
        env: Mapping to read from, defaults to ``os.environ``
        sse: Force the SSE transport (the ``--sse`` command line flag)

    Raises:
        ConfigurationError: If the API key is missing or a numeric value is invalid
    """
    if env is None:
        env = os.environ

    api_key = env.get("UNIFUNCS_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("UNIFUNCS_API_KEY environment variable is not set")

    return Settings(
        api_key=api_key,
        api_base=env.get("UNIFUNCS_API_BASE") or DEFAULT_API_BASE,
        request_timeout=_parse_number(env, "UNIFUNCS_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT, float),
        sse_enabled=sse or bool(env.get("UNIFUNCS_SSE_SERVER")),
        sse_host=env.get("UNIFUNCS_SSE_SERVER_HOST") or DEFAULT_SSE_HOST,
        sse_port=_parse_number(env, "UNIFUNCS_SSE_SERVER_PORT", DEFAULT_SSE_PORT, int),
    )


def configure_logging(level_name: Optional[str] = None) -> None:
    """Configure root logging to stderr (stdout is reserved for JSON-RPC)"""
    level_name = (level_name or os.getenv("LOG_LEVEL", "info")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr
    )
