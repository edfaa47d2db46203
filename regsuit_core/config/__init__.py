"""Configuration document layer for the registry.

Goals
-----
* Read the ``{core, plugins}`` document from ``regconfig.json`` (or the path in
  ``REG_SUIT_CONFIG_FILE``); ``.yaml``/``.yml`` files are parsed with PyYAML.
* Validate it into :class:`RegSuitConfiguration`.
* Produce the two documents the registry works with:
    1. ``raw_config``: exactly as authored (defaults when no file exists);
    2. ``replaced_config``: ``"$NAME"`` values substituted from the
       environment (after loading ``.env``).
* Persist a document back after interactive setup (``write_config``).

External Config File
--------------------
```
{
  "core": {"workingDir": ".reg", "actualDir": "screenshots", "thresholdRate": 0},
  "plugins": {
    "reg-keygen-git-hash-plugin": true,
    "reg-publish-s3-plugin": {"bucketName": "$REG_BUCKET"},
    "reg-notify-slack-plugin": {"disabled": true}
  }
}
```

Public API
----------
* read_config_file(path) -> dict | None
* default_config() -> RegSuitConfiguration
* ConfigManager(config_file_name=None)
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from ..base.dto.config import RegSuitConfiguration
from ..base.errors import ErrorCode, RegSuitError
from ..base.log_support import RegLogger
from .defaults import (
    CONFIG_FILE_ENV,
    DEFAULT_ACTUAL_DIR,
    DEFAULT_CONFIG_FILE_NAME,
    DEFAULT_THRESHOLD_RATE,
    DEFAULT_WORKING_DIR,
    DEFAULT_XIMGDIFF_INVOCATION_TYPE,
    YAML_SUFFIXES,
)
from .env import load_dotenv_once, replace_env_values


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def read_config_file(path: Union[str, Path]) -> Optional[Dict[str, Any]]:
    """Parse a configuration file; return ``None`` when it does not exist.

    Raises
    ------
    RegSuitError
        ``INVALID_CONFIG`` when the file cannot be parsed or its top level is
        not a mapping.
    """
    p = Path(path)
    if not p.exists():
        return None
    text = p.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) if _is_yaml(p) else json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise RegSuitError(
            code=ErrorCode.INVALID_CONFIG,
            message=f"Failed to parse configuration file '{p}': {exc}",
            raw=exc,
        ) from exc
    if not isinstance(data, dict):
        raise RegSuitError(
            code=ErrorCode.INVALID_CONFIG,
            message=f"Configuration file '{p}' must contain a mapping at top level",
        )
    return data


def validate_config(data: Mapping[str, Any], *, source: str = "<memory>") -> RegSuitConfiguration:
    """Validate a configuration mapping, normalizing pydantic failures."""
    try:
        return RegSuitConfiguration.model_validate(data)
    except ValidationError as exc:
        raise RegSuitError(
            code=ErrorCode.INVALID_CONFIG,
            message=f"Invalid configuration in {source}: {exc.error_count()} error(s)\n{exc}",
            raw=exc,
        ) from exc


def default_config() -> RegSuitConfiguration:
    """Return the configuration used when no file exists yet."""
    return RegSuitConfiguration.model_validate(
        {
            "core": {
                "workingDir": DEFAULT_WORKING_DIR,
                "actualDir": DEFAULT_ACTUAL_DIR,
                "thresholdRate": DEFAULT_THRESHOLD_RATE,
                "ximgdiff": {"invocationType": DEFAULT_XIMGDIFF_INVOCATION_TYPE},
            },
            "plugins": {},
        }
    )


class ConfigManager:
    """Loads, substitutes and writes the configuration document.

    Documents are read lazily and cached; ``write_config`` resets the cache.
    """

    def __init__(self, config_file_name: Optional[str] = None, *, logger: Optional[RegLogger] = None) -> None:
        self.config_file_name = config_file_name or os.getenv(CONFIG_FILE_ENV) or DEFAULT_CONFIG_FILE_NAME
        self.logger = logger
        self._raw: Optional[RegSuitConfiguration] = None
        self._replaced: Optional[RegSuitConfiguration] = None

    @property
    def raw_config(self) -> RegSuitConfiguration:
        if self._raw is None:
            data = read_config_file(self.config_file_name)
            if data is None:
                if self.logger:
                    self.logger.verbose("%s not found, using default configuration.", self.config_file_name)
                self._raw = default_config()
            else:
                self._raw = validate_config(data, source=self.config_file_name)
        return self._raw

    @property
    def replaced_config(self) -> RegSuitConfiguration:
        if self._replaced is None:
            load_dotenv_once()
            document = replace_env_values(self.raw_config.to_document())
            self._replaced = validate_config(document, source=f"{self.config_file_name} (replaced)")
        return self._replaced

    def with_plugins(self, plugins: Mapping[str, Any]) -> RegSuitConfiguration:
        """Return the raw document with ``plugins`` merged into its plugins section."""
        document = self.raw_config.to_document()
        document["plugins"] = {**(document.get("plugins") or {}), **plugins}
        return validate_config(document)

    def write_config(self, config: RegSuitConfiguration) -> Path:
        """Write ``config`` to the configuration file and drop cached documents."""
        path = Path(self.config_file_name)
        document = config.to_document()
        if _is_yaml(path):
            text = yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
        else:
            text = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
        path.write_text(text, encoding="utf-8")
        if self.logger:
            self.logger.verbose("Configuration written to %s.", path)
        self._raw = None
        self._replaced = None
        return path


__all__ = [
    "ConfigManager",
    "default_config",
    "read_config_file",
    "validate_config",
    "replace_env_values",
    "load_dotenv_once",
]
