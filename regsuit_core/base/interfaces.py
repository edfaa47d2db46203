"""
Capability interfaces (Protocols) for plugins managed by the registry.

This module re-exports Protocols split into single-class modules under
``regsuit_core.base.interfaces_parts`` to keep imports stable for plugin code.
"""

from __future__ import annotations

from .interfaces_parts import (
    KeyGeneratorPlugin,
    NotifierPlugin,
    PluginContext,
    PluginPreparer,
    PublisherPlugin,
    Question,
)

__all__ = [
    "PluginContext",
    "KeyGeneratorPlugin",
    "PublisherPlugin",
    "NotifierPlugin",
    "PluginPreparer",
    "Question",
]
