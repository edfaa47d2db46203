"""
Structured registry error exception type.

Wraps loader, registry and configuration failures with a normalized
`ErrorCode` so callers can decide to halt the run with a precise message.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class RegSuitError(Exception):
    """Represents a fatal registry error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        plugin: Plugin name the error relates to, when there is one.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    plugin: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining plugin, code, and message."""
        return f"{self.plugin or '-'} {self.code.value}: {self.message}"


__all__ = ["RegSuitError"]
