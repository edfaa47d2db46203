"""regsuit_core package

Plugin registry and lifecycle controller for a visual-regression test runner.

Purpose:
    Resolve the plugins named in a configuration document, classify them by
    capability (key generator, publisher, notifier, preparer), negotiate their
    options interactively and initialize the active ones. Comparison,
    publishing and notification themselves live in the plugins.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`RegSuitError`, :class:`ErrorCode`
    - Registry: :class:`PluginRegistry`, :class:`PluginHolder`,
      :class:`Capability`, :class:`PluginSetupEntry`, :func:`negotiate`
    - Interfaces: :class:`PluginContext`, :class:`KeyGeneratorPlugin`,
      :class:`PublisherPlugin`, :class:`NotifierPlugin`,
      :class:`PluginPreparer`
    - Configuration: :class:`ConfigManager`, :class:`RegSuitConfiguration`
    - Logging: :class:`RegLogger`, :func:`get_reg_logger`
"""

from .base.errors import ErrorCode, RegSuitError
from .base.dto import CoreConfig, RegSuitConfiguration
from .base.interfaces import (
    KeyGeneratorPlugin,
    NotifierPlugin,
    PluginContext,
    PluginPreparer,
    PublisherPlugin,
)
from .base.logging import RegLogger, configure_logger, get_reg_logger
from .base.plugins import (
    Capability,
    DefaultModuleResolver,
    ModuleResolver,
    PluginHolder,
    PluginRegistry,
    PluginSetupEntry,
    build_plugins_section,
    negotiate,
)
from .config import ConfigManager

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorCode",
    "RegSuitError",
    "CoreConfig",
    "RegSuitConfiguration",
    "KeyGeneratorPlugin",
    "NotifierPlugin",
    "PluginContext",
    "PluginPreparer",
    "PublisherPlugin",
    "RegLogger",
    "configure_logger",
    "get_reg_logger",
    "Capability",
    "DefaultModuleResolver",
    "ModuleResolver",
    "PluginHolder",
    "PluginRegistry",
    "PluginSetupEntry",
    "build_plugins_section",
    "negotiate",
    "ConfigManager",
]
