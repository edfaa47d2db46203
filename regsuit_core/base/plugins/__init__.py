"""Plugin system: loading, classification, setup negotiation, initialization.

Provides the plugin registry, the loader and its resolvers, the holder model
and the capability predicates.
"""

from .capability import Capability
from .holder import PluginHolder
from .classify import (
    filter_holders,
    has_capability,
    is_key_generator,
    is_notifier,
    is_preparer,
    is_publisher,
)
from .loader import DefaultModuleResolver, ModuleResolver, PluginLoader
from .setup import PluginSetupEntry, build_plugins_section, negotiate
from .registry import PluginRegistry

__all__ = [
    "Capability",
    "PluginHolder",
    "filter_holders",
    "has_capability",
    "is_key_generator",
    "is_notifier",
    "is_preparer",
    "is_publisher",
    "DefaultModuleResolver",
    "ModuleResolver",
    "PluginLoader",
    "PluginSetupEntry",
    "build_plugins_section",
    "negotiate",
    "PluginRegistry",
]
