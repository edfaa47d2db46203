"""DTO validation package for the configuration document."""

from .config import CoreConfig, RegSuitConfiguration, XimgdiffConfig

__all__ = ["CoreConfig", "RegSuitConfiguration", "XimgdiffConfig"]
