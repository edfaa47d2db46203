"""Capability roles a plugin holder may fulfil."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from ..interfaces import KeyGeneratorPlugin, NotifierPlugin, PluginPreparer, PublisherPlugin


class Capability(str, Enum):
    """Enumerated capability roles. Values double as log labels."""

    KEY_GENERATOR = "key generator"
    PUBLISHER = "publisher"
    NOTIFIER = "notifier"
    PREPARER = "preparer"


# Capability -> (holder attribute, accepted bundle keys, interface)
CAPABILITY_FIELDS: Dict[Capability, Tuple[str, Tuple[str, ...], type]] = {
    Capability.KEY_GENERATOR: ("key_generator", ("key_generator", "keyGenerator"), KeyGeneratorPlugin),
    Capability.PUBLISHER: ("publisher", ("publisher",), PublisherPlugin),
    Capability.NOTIFIER: ("notifier", ("notifier",), NotifierPlugin),
    Capability.PREPARER: ("preparer", ("preparer",), PluginPreparer),
}


__all__ = ["Capability", "CAPABILITY_FIELDS"]
