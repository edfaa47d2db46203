"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``regsuit_core.base.interfaces`` to re-export a stable API.
"""

from .plugin_context import PluginContext
from .key_generator_plugin import KeyGeneratorPlugin
from .publisher_plugin import PublisherPlugin
from .notifier_plugin import NotifierPlugin
from .plugin_preparer import PluginPreparer, Question

__all__ = [
    "PluginContext",
    "KeyGeneratorPlugin",
    "PublisherPlugin",
    "NotifierPlugin",
    "PluginPreparer",
    "Question",
]
