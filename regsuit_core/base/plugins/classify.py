"""Capability predicates over plugin holders.

Pure functions; classification is re-evaluated on demand against the holder
list so it always reflects what has been loaded.
"""

from __future__ import annotations

from typing import Iterable, List

from .capability import Capability
from .holder import PluginHolder


def has_capability(holder: PluginHolder, capability: Capability) -> bool:
    return capability in holder.capabilities


def is_key_generator(holder: PluginHolder) -> bool:
    return Capability.KEY_GENERATOR in holder.capabilities


def is_publisher(holder: PluginHolder) -> bool:
    return Capability.PUBLISHER in holder.capabilities


def is_notifier(holder: PluginHolder) -> bool:
    return Capability.NOTIFIER in holder.capabilities


def is_preparer(holder: PluginHolder) -> bool:
    return Capability.PREPARER in holder.capabilities


def filter_holders(holders: Iterable[PluginHolder], capability: Capability) -> List[PluginHolder]:
    """Return holders fulfilling ``capability``, preserving load order."""
    return [h for h in holders if has_capability(h, capability)]


__all__ = [
    "has_capability",
    "is_key_generator",
    "is_publisher",
    "is_notifier",
    "is_preparer",
    "filter_holders",
]
