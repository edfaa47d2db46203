"""PublisherPlugin Protocol (single-class module).

Capability for plugins that store and fetch comparison results.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from .plugin_context import PluginContext


@runtime_checkable
class PublisherPlugin(Protocol):
    """Fetches the baseline snapshot set and publishes the current one.

    At most one publisher may be active in a run.
    """

    def init(self, ctx: PluginContext) -> None:  # pragma: no cover - interface
        ...

    async def fetch(self, key: str) -> Any:  # pragma: no cover - interface
        """Download the snapshot set stored under ``key`` into the working dir."""
        ...

    async def publish(self, key: str) -> Mapping[str, Any]:  # pragma: no cover - interface
        """Upload the current run under ``key``; may return ``{"report_url": ...}``."""
        ...
