"""Unified registry error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``regsuit_core.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.regsuit_error import RegSuitError

__all__ = ["ErrorCode", "RegSuitError"]
