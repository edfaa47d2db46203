"""Plugin registry: loading, setup negotiation and initialization.

The registry owns the run's holder list and drives each plugin through
``Unloaded -> Loaded -> Classified -> {Disabled | Initialized}``:

- ``load_plugins`` / ``create_questions`` load holders (append-only, load
  order preserved, never duplicated);
- ``create_questions`` exposes interactive setup steps;
- ``init_key_generator`` / ``init_publisher`` activate the single winner of
  their role and refuse to guess when several plugins compete;
- ``init_notifiers`` activates every enabled notifier.

Initialization reads plugin options from the *replaced* configuration only.
A plugin without an entry there is disabled. There is no teardown here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple, TYPE_CHECKING

from ..dto.config import RegSuitConfiguration
from ..errors import ErrorCode, RegSuitError
from ..interfaces import KeyGeneratorPlugin, NotifierPlugin, PluginContext, PublisherPlugin
from ..log_support import RegLogger
from ..logging import get_reg_logger
from .capability import Capability
from .classify import filter_holders, is_preparer
from .holder import PluginHolder
from .loader import ModuleResolver, PluginLoader
from .setup import PluginSetupEntry, plain_setup_entry, preparer_setup_entry

if TYPE_CHECKING:
    from ...config import ConfigManager

DISABLED_OPTIONS = {"disabled": True}


def resolve_plugin_options(config: RegSuitConfiguration, name: str) -> Any:
    """Return the options ``config`` holds for plugin ``name``.

    Missing entries and falsy scalars (``None``, ``False``, ``0``, ``""``)
    resolve to ``{"disabled": True}``; ``True`` resolves to ``{}`` (enabled,
    no options). Mappings and lists pass through, even when empty.
    """
    options = (config.plugins or {}).get(name)
    if not options and not isinstance(options, (Mapping, list)):
        return dict(DISABLED_OPTIONS)
    if options is True:
        return {}
    return options


def is_disabled(options: Any) -> bool:
    return isinstance(options, Mapping) and options.get("disabled") is True


class PluginRegistry:
    """Registry of the plugins taking part in one run.

    Attributes:
        logger: Registry logger; plugins receive ``logger.fork(name)``.
        no_emit: Dry-run flag forwarded to every plugin context.
        raw_config: Document as authored; drives loading and setup.
        replaced_config: Document after setup/substitution; drives init.
    """

    def __init__(
        self,
        logger: Optional[RegLogger] = None,
        no_emit: bool = False,
        *,
        raw_config: Optional[RegSuitConfiguration] = None,
        replaced_config: Optional[RegSuitConfiguration] = None,
        resolver: Optional[ModuleResolver] = None,
    ) -> None:
        self.logger = logger if logger is not None else get_reg_logger()
        self.no_emit = no_emit
        self.raw_config = raw_config
        self.replaced_config = replaced_config
        self._loader = PluginLoader(self.logger, resolver)
        self._holders: List[PluginHolder] = []

    @classmethod
    def from_config(
        cls,
        manager: "ConfigManager",
        logger: Optional[RegLogger] = None,
        no_emit: bool = False,
        *,
        resolver: Optional[ModuleResolver] = None,
    ) -> "PluginRegistry":
        """Create a registry wired to both documents of ``manager``."""
        return cls(
            logger,
            no_emit,
            raw_config=manager.raw_config,
            replaced_config=manager.replaced_config,
            resolver=resolver,
        )

    @property
    def holders(self) -> Tuple[PluginHolder, ...]:
        return tuple(self._holders)

    def get(self, name: str) -> Optional[PluginHolder]:
        return next((h for h in self._holders if h.name == name), None)

    def is_loaded(self, name: str) -> bool:
        return self.get(name) is not None

    # ---------------------------------------------------------------- loading

    def load_plugins(self) -> None:
        """Load every plugin named in the raw document's plugins section."""
        for name in self._require_raw_config().plugin_names():
            self._load_plugin(name)

    def _load_plugin(self, name: str) -> PluginHolder:
        existing = self.get(name)
        if existing is not None:
            self.logger.verbose("%s is already loaded.", name)
            return existing
        holder = self._loader.load(name)
        self._holders.append(holder)
        return holder

    # ------------------------------------------------------------------ setup

    def create_questions(self, plugin_names: Iterable[str] = ()) -> List[PluginSetupEntry]:
        """Return setup entries for every loaded plugin.

        ``plugin_names`` are loaded first if needed. Plugins without a
        preparer come first, then preparer plugins, each group in load order.
        """
        config = self._require_raw_config()
        for name in plugin_names:
            self._load_plugin(name)
        plain = [plain_setup_entry(h.name) for h in self._holders if not is_preparer(h)]
        prepared = [
            preparer_setup_entry(h, config, self.logger, self.no_emit)
            for h in self._holders
            if is_preparer(h)
        ]
        return plain + prepared

    # ----------------------------------------------------------------- init

    def init_key_generator(self) -> Optional[KeyGeneratorPlugin]:
        return self._init_single(Capability.KEY_GENERATOR)

    def init_publisher(self) -> Optional[PublisherPlugin]:
        return self._init_single(Capability.PUBLISHER)

    def init_notifiers(self) -> List[NotifierPlugin]:
        """Initialize every enabled notifier, in load order."""
        notifiers: List[NotifierPlugin] = []
        candidates = filter_holders(self._holders, Capability.NOTIFIER)
        if not candidates:
            self.logger.verbose("No notifier plugin.")
            return notifiers
        for holder in candidates:
            plugin = self._init_plugin(holder.notifier, holder)
            if plugin is not None:
                notifiers.append(plugin)
        return notifiers

    def _init_single(self, capability: Capability) -> Any:
        candidates = filter_holders(self._holders, capability)
        if not candidates:
            self.logger.verbose("No %s plugin.", capability.value)
            return None
        if len(candidates) > 1:
            names = ", ".join(h.name for h in candidates)
            self.logger.warn("2 or more %s plugins are found. Select one of %s.", capability.value, names)
            return None
        holder = candidates[0]
        return self._init_plugin(holder.get(capability), holder)

    def _init_plugin(self, plugin: Any, holder: PluginHolder) -> Any:
        if self.replaced_config is None:
            raise RegSuitError(
                code=ErrorCode.INVALID_STATE,
                message="Replaced configuration is not set; plugins cannot be initialized before setup completes",
                plugin=holder.name,
            )
        config = self.replaced_config
        options = resolve_plugin_options(config, holder.name)
        if is_disabled(options):
            self.logger.verbose("%s is disabled.", holder.name)
            return None
        plugin.init(
            PluginContext(
                core_config=config.core,
                logger=self.logger.fork(holder.name),
                options=options,
                no_emit=self.no_emit,
            )
        )
        self.logger.verbose("%s is initialized with: %s", holder.name, options)
        return plugin

    def _require_raw_config(self) -> RegSuitConfiguration:
        if self.raw_config is None:
            raise RegSuitError(
                code=ErrorCode.INVALID_STATE,
                message="Raw configuration is not set; assign raw_config before loading plugins",
            )
        return self.raw_config


__all__ = ["PluginRegistry", "resolve_plugin_options", "is_disabled", "DISABLED_OPTIONS"]
