"""PluginPreparer Protocol (single-class module).

Interactive-setup capability: asks questions, turns answers into options.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, Sequence, runtime_checkable

from .plugin_context import PluginContext

Question = Dict[str, Any]
"""Opaque interactive question descriptor (``{"name": ..., "type": ..., "message": ...}``)."""


@runtime_checkable
class PluginPreparer(Protocol):
    """Builds a plugin's options from interactive answers.

    ``prepare`` receives the answers as ``ctx.options`` and resolves to the
    options value that ends up in the plugins section of the document.
    """

    def inquire(self) -> Sequence[Question]:  # pragma: no cover - interface
        ...

    async def prepare(self, ctx: PluginContext) -> Any:  # pragma: no cover - interface
        ...
