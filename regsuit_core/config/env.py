"""regsuit_core.config.env
=======================

Environment helpers for the configuration document.

Purpose
-------
- Substitute ``"$NAME"`` string values in a configuration document with the
  value of environment variable ``NAME`` (credentials are usually kept out of
  ``regconfig.json`` this way).
- Load a ``.env`` file once so those variables can live next to the project.

Failure Modes
-------------
- Unset variables are left as the literal ``"$NAME"`` string; substitution
  never raises.
"""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from .defaults import DEFAULT_DOTENV_FILE, DOTENV_FILE_ENV

_DOTENV_LOADED = False


def load_dotenv_once(path: Optional[str] = None) -> None:
    """Load ``KEY=VALUE`` lines from a dotenv file into ``os.environ``.

    Ignores comments and blank lines. Variables already present in the
    environment always win over the file. Safe to call multiple times; the
    file is read at most once per process unless ``path`` is given.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED and path is None:
        return
    path = path or os.getenv(DOTENV_FILE_ENV, DEFAULT_DOTENV_FILE)
    try:
        if not os.path.isfile(path):
            return
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and k not in os.environ:
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def replace_env_value(value: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the environment value for a ``"$NAME"`` string, else ``value``."""
    env = os.environ if environ is None else environ
    if len(value) > 1 and value.startswith("$"):
        return env.get(value[1:], value)
    return value


def replace_env_values(value: Any, environ: Optional[Mapping[str, str]] = None) -> Any:
    """Recursively substitute ``"$NAME"`` strings inside a JSON-like value.

    Returns new containers; the input is not modified.
    """
    if isinstance(value, str):
        return replace_env_value(value, environ)
    if isinstance(value, Mapping):
        return {k: replace_env_values(v, environ) for k, v in value.items()}
    if isinstance(value, list):
        return [replace_env_values(v, environ) for v in value]
    return value


__all__ = ["load_dotenv_once", "replace_env_value", "replace_env_values"]
