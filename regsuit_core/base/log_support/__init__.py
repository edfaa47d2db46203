"""Auxiliary logging helpers (formatters, context, leveled logger) used by base.logging."""

from .json_formatter import JsonFormatter, ISO
from .logging_context import LogContext
from .reg_logger import RegLogger

__all__ = ["JsonFormatter", "ISO", "LogContext", "RegLogger"]
