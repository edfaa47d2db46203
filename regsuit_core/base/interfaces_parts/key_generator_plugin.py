"""KeyGeneratorPlugin Protocol (single-class module).

Capability for plugins that derive the expected/actual snapshot keys.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .plugin_context import PluginContext


@runtime_checkable
class KeyGeneratorPlugin(Protocol):
    """Produces the keys identifying the expected and actual snapshot sets.

    At most one key generator may be active in a run.
    """

    def init(self, ctx: PluginContext) -> None:  # pragma: no cover - interface
        ...

    async def get_expected_key(self) -> Optional[str]:  # pragma: no cover - interface
        """Return the key of the baseline snapshot set, or ``None`` when absent."""
        ...

    async def get_actual_key(self) -> str:  # pragma: no cover - interface
        """Return the key of the snapshot set produced by this run."""
        ...
