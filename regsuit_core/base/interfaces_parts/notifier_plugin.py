"""NotifierPlugin Protocol (single-class module).

Capability for plugins that report a finished comparison somewhere.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from .plugin_context import PluginContext


@runtime_checkable
class NotifierPlugin(Protocol):
    """Announces comparison results (chat, pull request comment, ...).

    Any number of notifiers may be active in a run.
    """

    def init(self, ctx: PluginContext) -> None:  # pragma: no cover - interface
        ...

    async def notify(self, params: Mapping[str, Any]) -> Any:  # pragma: no cover - interface
        ...
