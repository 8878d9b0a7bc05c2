"""Core Studyfi utilities: settings and structured logging."""

from studyfi.core.config import Settings, get_settings
from studyfi.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "bind_correlation_id",
    "clear_context",
]
