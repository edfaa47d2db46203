"""regsuit_core.config.defaults
============================

Central place for small, stable default values used across the registry and
the configuration layer. Only plain constants live here; nothing is imported
from other regsuit_core packages to avoid circular imports.
"""

from __future__ import annotations

# ---- Configuration document ----

# File read when no explicit path is given.
DEFAULT_CONFIG_FILE_NAME = "regconfig.json"
# Environment variable overriding the configuration file path.
CONFIG_FILE_ENV = "REG_SUIT_CONFIG_FILE"
# Environment variable naming the dotenv file used for ``$VAR`` substitution.
DOTENV_FILE_ENV = "DOTENV_FILE"
DEFAULT_DOTENV_FILE = ".env"
# Suffixes parsed with PyYAML instead of json.
YAML_SUFFIXES = (".yaml", ".yml")

# ---- Core section defaults ----

DEFAULT_WORKING_DIR = ".reg"
DEFAULT_ACTUAL_DIR = "directory_contains_actual_images"
DEFAULT_THRESHOLD_RATE = 0
DEFAULT_XIMGDIFF_INVOCATION_TYPE = "client"

# ---- Plugin resolution ----

# Module attribute called (without arguments) to obtain a plugin's bundle.
PLUGIN_FACTORY_ATTRIBUTE = "create_plugin"
# Distribution entry point group consulted for installed plugins.
PLUGIN_ENTRY_POINT_GROUP = "regsuit.plugins"
