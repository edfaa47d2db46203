"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `regsuit_core.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .regsuit_error import RegSuitError

__all__ = ["ErrorCode", "RegSuitError"]
