"""PluginContext value object (single-class module).

Context handed to ``init`` of every activated capability and to
``PluginPreparer.prepare``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from ..dto.config import CoreConfig
    from ..log_support import RegLogger


@dataclass(frozen=True)
class PluginContext:
    """Everything a plugin may read while it initializes or prepares.

    Attributes:
        core_config: Core section of the configuration document.
        logger: Logger forked for the plugin's name.
        options: Resolved plugin options (answers, for ``prepare``).
        no_emit: Dry-run flag; plugins must not perform real side effects.
    """

    core_config: "CoreConfig"
    logger: "RegLogger"
    options: Any
    no_emit: bool = False


__all__ = ["PluginContext"]
