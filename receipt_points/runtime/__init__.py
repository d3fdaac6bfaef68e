"""Runtime infrastructure for receipt-points.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Server settings via get_settings(), ServerSettings
- The process-wide receipt store via get_receipt_store()

The FastAPI application lives in receipt_points.runtime.receipt_server and is
not imported here, so importing the runtime package does not build an app.

Usage:
    from receipt_points.runtime import get_logger, get_settings

    logger = get_logger(__name__)
    settings = get_settings()
    print(settings.host, settings.port)
"""

from receipt_points.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from receipt_points.runtime.receipt_store import (
    InMemoryReceiptStore,
    ReceiptStore,
    ScoreRecord,
    get_receipt_store,
    reset_receipt_store,
)
from receipt_points.runtime.settings import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    ServerSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Store
    "ReceiptStore",
    "InMemoryReceiptStore",
    "ScoreRecord",
    "get_receipt_store",
    "reset_receipt_store",
    # Settings
    "ServerSettings",
    "get_settings",
    "reset_settings",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
]
