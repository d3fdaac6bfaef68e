"""Server settings for receipt-points.

Values come from environment variables, with command-line flags taking
precedence where the CLI exposes them.

Environment variables:
    RECEIPT_POINTS_HOST: Interface to bind. Default: 0.0.0.0
    RECEIPT_POINTS_PORT: Port to listen on. Default: 8080
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


def _host_from_env() -> str:
    return os.environ.get("RECEIPT_POINTS_HOST") or DEFAULT_HOST


def _port_from_env() -> int:
    raw = os.environ.get("RECEIPT_POINTS_PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"RECEIPT_POINTS_PORT must be an integer, got {raw!r}") from None


@dataclass
class ServerSettings:
    """Container for the HTTP server settings."""

    host: str = field(default_factory=_host_from_env)
    port: int = field(default_factory=_port_from_env)

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"Port out of range: {self.port}")


# Module-level singleton
_settings: ServerSettings | None = None


def get_settings() -> ServerSettings:
    """Get the singleton ServerSettings instance.

    Returns:
        The global ServerSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = ServerSettings()
    return _settings


def reset_settings() -> None:
    """Clear the singleton so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
