"""Plugin holder: the capability bundle a plugin module produces.

A holder is built once by the loader from whatever the module's factory
returned, validated against the capability interfaces, and never mutated or
re-classified afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Optional

from ..errors import ErrorCode, RegSuitError
from ..interfaces import KeyGeneratorPlugin, NotifierPlugin, PluginPreparer, PublisherPlugin
from .capability import CAPABILITY_FIELDS, Capability


@dataclass(frozen=True)
class PluginHolder:
    """Capabilities exposed by one loaded plugin.

    Attributes:
        name: Plugin name the holder was loaded under.
        key_generator: Key generator capability, if provided.
        publisher: Publisher capability, if provided.
        notifier: Notifier capability, if provided.
        preparer: Interactive setup capability, if provided.
        capabilities: Roles fulfilled, computed at construction.
    """

    name: str
    key_generator: Optional[KeyGeneratorPlugin] = None
    publisher: Optional[PublisherPlugin] = None
    notifier: Optional[NotifierPlugin] = None
    preparer: Optional[PluginPreparer] = None
    capabilities: FrozenSet[Capability] = field(init=False, default=frozenset())

    def __post_init__(self) -> None:
        for capability, (attr, _keys, interface) in CAPABILITY_FIELDS.items():
            value = getattr(self, attr)
            if not _is_set(value):
                object.__setattr__(self, attr, None)
                continue
            if not isinstance(value, interface):
                raise RegSuitError(
                    code=ErrorCode.INVALID_PLUGIN,
                    message=f"'{attr}' does not implement the {capability.value} interface ({interface.__name__})",
                    plugin=self.name,
                )
        caps = frozenset(c for c, (attr, _k, _i) in CAPABILITY_FIELDS.items() if getattr(self, attr) is not None)
        object.__setattr__(self, "capabilities", caps)

    def get(self, capability: Capability) -> Any:
        """Return the capability object for ``capability`` (``None`` if absent)."""
        return getattr(self, CAPABILITY_FIELDS[capability][0])

    @classmethod
    def from_bundle(cls, name: str, bundle: Any) -> "PluginHolder":
        """Build a holder from a factory result.

        ``bundle`` may be a mapping (snake_case or camelCase keys), any object
        exposing the capability attributes, or ``None`` for an empty plugin.
        """
        values = {}
        for attr, keys, _interface in CAPABILITY_FIELDS.values():
            values[attr] = _pick(bundle, keys)
        return cls(name=name, **values)


def _pick(bundle: Any, keys: tuple[str, ...]) -> Any:
    if bundle is None:
        return None
    for key in keys:
        value = bundle.get(key) if isinstance(bundle, Mapping) else getattr(bundle, key, None)
        if _is_set(value):
            return value
    return None


def _is_set(value: Any) -> bool:
    # False, 0 and "" mark a capability as absent, like None.
    if isinstance(value, (bool, int, float, str)):
        return bool(value)
    return value is not None


__all__ = ["PluginHolder"]
