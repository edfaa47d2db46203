"""Plugin loader: resolves plugin names to factories and builds holders.

Purpose
-------
Turn a plugin name from the configuration document into a
:class:`PluginHolder`. Name resolution is delegated to a
:class:`ModuleResolver` so the registry can be exercised without touching the
import system; :class:`DefaultModuleResolver` implements the real lookup.

Resolution order (``DefaultModuleResolver``)
--------------------------------------------
1. Explicit paths (``./plugins/mine.py``, ``plugins/mine``) under ``basedir``.
2. A local module ``<basedir>/<name>.py`` or package ``<basedir>/<name>/``;
   ``-`` in names maps to ``_``.
3. An entry point named ``<name>`` in the ``regsuit.plugins`` group.
4. ``importlib.import_module`` of an installed module.

Failure modes
-------------
- Unresolvable names raise :class:`RegSuitError` (``NOT_FOUND``) after an
  error line is logged. No retries.
- Modules without a callable ``create_plugin`` and bundles whose capabilities
  do not satisfy their interfaces raise ``INVALID_PLUGIN``.
"""

from __future__ import annotations

import hashlib
import logging
import os
import sys
from importlib import import_module, util as importlib_util
from importlib.metadata import EntryPoint, entry_points
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable

from ...config.defaults import PLUGIN_ENTRY_POINT_GROUP, PLUGIN_FACTORY_ATTRIBUTE
from ..errors import ErrorCode, RegSuitError
from ..log_support import LogContext, RegLogger
from ..logging import log_event
from .holder import PluginHolder

PluginFactory = Callable[[], Any]

_LOCAL_MODULE_PREFIX = "_regsuit_local_"


@runtime_checkable
class ModuleResolver(Protocol):
    """Resolves a plugin name to the zero-argument factory of its bundle."""

    def resolve(self, name: str) -> PluginFactory:  # pragma: no cover - interface
        """Return the factory for ``name``; raise ``ImportError`` if unresolvable."""
        ...


def _module_name(name: str) -> str:
    return name.replace("-", "_")


def _looks_like_path(name: str) -> bool:
    return name.startswith((".", "/", "~")) or name.endswith(".py") or "/" in name or os.sep in name


class DefaultModuleResolver:
    """Resolve plugin names the way a project-local install would.

    Attributes:
        basedir: Directory local plugins are searched from (``os.getcwd()``
            at construction by default).
        entry_point_group: Entry point group consulted for installed plugins.
    """

    def __init__(
        self,
        basedir: Union[str, Path, None] = None,
        *,
        entry_point_group: str = PLUGIN_ENTRY_POINT_GROUP,
        factory_attribute: str = PLUGIN_FACTORY_ATTRIBUTE,
    ) -> None:
        self.basedir = Path(basedir) if basedir is not None else Path(os.getcwd())
        self.entry_point_group = entry_point_group
        self.factory_attribute = factory_attribute

    def resolve(self, name: str) -> PluginFactory:
        local = self._find_local(name)
        if local is not None:
            return self._factory_of(self._import_file(name, local), name)
        ep = self._find_entry_point(name)
        if ep is not None:
            loaded = ep.load()
            return self._factory_of(loaded, name) if isinstance(loaded, ModuleType) else loaded
        return self._factory_of(import_module(_module_name(name)), name)

    def _find_local(self, name: str) -> Optional[Path]:
        if _looks_like_path(name):
            base = (self.basedir / Path(name).expanduser()).resolve()
            candidates = [base, base.with_suffix(".py"), base / "__init__.py"]
        else:
            mod = _module_name(name)
            candidates = [self.basedir / f"{mod}.py", self.basedir / mod / "__init__.py"]
        for candidate in candidates:
            if candidate.is_file():
                return candidate
        if _looks_like_path(name):
            raise ModuleNotFoundError(f"Cannot find module '{name}' from '{self.basedir}'", name=name)
        return None

    def _find_entry_point(self, name: str) -> Optional[EntryPoint]:
        for ep in entry_points(group=self.entry_point_group):
            if ep.name == name:
                return ep
        return None

    def _import_file(self, name: str, path: Path) -> ModuleType:
        is_package = path.name == "__init__.py"
        stem = path.parent.name if is_package else path.stem
        digest = hashlib.sha1(str(path.resolve()).encode("utf-8"), usedforsecurity=False).hexdigest()[:12]
        # Keyed on the file location; equal stems in different directories stay distinct.
        module_name = f"{_LOCAL_MODULE_PREFIX}{_module_name(stem)}_{digest}"
        if module_name in sys.modules:
            return sys.modules[module_name]
        spec = importlib_util.spec_from_file_location(
            module_name,
            path,
            submodule_search_locations=[str(path.parent)] if is_package else None,
        )
        if spec is None or spec.loader is None:
            raise ModuleNotFoundError(f"Cannot load module '{name}' from '{path}'", name=name)
        module = importlib_util.module_from_spec(spec)
        # Registered before execution so relative imports inside packages work.
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise
        return module

    def _factory_of(self, module: ModuleType, name: str) -> PluginFactory:
        factory = getattr(module, self.factory_attribute, None)
        if not callable(factory):
            raise RegSuitError(
                code=ErrorCode.INVALID_PLUGIN,
                message=f"Module '{module.__name__}' does not export a callable '{self.factory_attribute}'",
                plugin=name,
            )
        return factory


class PluginLoader:
    """Builds :class:`PluginHolder` objects from plugin names.

    The loader keeps no state of its own; the registry owns the holder list.
    """

    def __init__(self, logger: RegLogger, resolver: Optional[ModuleResolver] = None) -> None:
        self.logger = logger
        self.resolver: ModuleResolver = resolver if resolver is not None else DefaultModuleResolver()

    def load(self, name: str) -> PluginHolder:
        """Resolve ``name``, call its factory and wrap the bundle in a holder.

        Errors raised by the plugin module itself (at import time or inside
        its factory) are logged and propagate unchanged.

        Raises
        ------
        RegSuitError
            ``NOT_FOUND`` when the name cannot be resolved, ``INVALID_PLUGIN``
            when the module or its bundle is malformed.
        """
        try:
            factory = self.resolver.resolve(name)
        except ImportError as exc:
            self.logger.error("Failed to load plugin '%s'", name)
            raise RegSuitError(
                code=ErrorCode.NOT_FOUND,
                message=f"Cannot resolve plugin module '{name}': {exc}",
                plugin=name,
                raw=exc,
            ) from exc
        except Exception:
            self.logger.error("Failed to load plugin '%s'", name)
            raise
        try:
            holder = PluginHolder.from_bundle(name, factory())
        except Exception:
            self.logger.error("Failed to load plugin '%s'", name)
            raise
        log_event(
            self.logger.logger,
            "plugin.loaded",
            LogContext(plugin=name, phase="load"),
            level=logging.DEBUG,
            capabilities=sorted(c.value for c in holder.capabilities),
        )
        return holder


__all__ = ["ModuleResolver", "DefaultModuleResolver", "PluginLoader", "PluginFactory"]
