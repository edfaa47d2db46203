"""Leveled logger handed to the registry and to every plugin.

:class:`RegLogger` adapts a stdlib :class:`logging.Logger` to the small
contract plugins rely on: ``verbose``/``info``/``warn``/``error`` plus
``fork(name)`` which returns a child logger attributed to one plugin.
Forked loggers attach ``plugin=<name>`` to every record so the JSON formatter
emits it as a top-level key.
"""
from __future__ import annotations

import logging
from typing import Any, Optional


class RegLogger:
    """Thin leveled wrapper around a stdlib logger.

    Attributes:
        logger: Underlying stdlib logger.
        plugin: Plugin name this logger is scoped to (``None`` for the root).
    """

    def __init__(self, logger: Optional[logging.Logger] = None, *, plugin: Optional[str] = None) -> None:
        if logger is None:
            # Local import keeps log_support free of a cycle with base.logging.
            from ..logging import get_logger

            logger = get_logger("regsuit")
        self.logger = logger
        self.plugin = plugin

    @property
    def name(self) -> str:
        return self.logger.name

    def _log(self, level: int, msg: str, *args: Any) -> None:
        extra = {"plugin": self.plugin} if self.plugin else None
        self.logger.log(level, msg, *args, extra=extra)

    def verbose(self, msg: str, *args: Any) -> None:
        """Emit a diagnostic line, shown only when DEBUG is enabled."""
        self._log(logging.DEBUG, msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self._log(logging.INFO, msg, *args)

    def warn(self, msg: str, *args: Any) -> None:
        self._log(logging.WARNING, msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self._log(logging.ERROR, msg, *args)

    def fork(self, name: str) -> "RegLogger":
        """Return a logger scoped to plugin ``name``.

        The child is a stdlib child logger (``<parent>.<name>``) so it shares
        the parent's handlers through propagation.
        """
        return RegLogger(self.logger.getChild(name), plugin=name)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"RegLogger(name={self.name!r}, plugin={self.plugin!r})"


__all__ = ["RegLogger"]
