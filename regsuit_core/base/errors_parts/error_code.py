"""
Normalized registry error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the plugin loader, the registry
and the configuration layer. Values are lowercase snake_case and are
considered a stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    NOT_FOUND = "not_found"
    INVALID_PLUGIN = "invalid_plugin"
    INVALID_STATE = "invalid_state"
    INVALID_CONFIG = "invalid_config"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
