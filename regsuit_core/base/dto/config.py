"""
Pydantic DTOs for the configuration document consumed by the registry.

Purpose
-------
Validate the ``{core, plugins}`` document authored by users (``regconfig.json``
or YAML) before it reaches the registry. The core section is typed for the
options the runner understands and tolerates unknown keys; the plugins
section is an opaque mapping from plugin name to options.

External dependencies: Pydantic v2 only.

Notes
-----
- Field names are snake_case; the authored camelCase names are accepted as
  aliases and restored by ``to_document()``.
- Plugin option values are stored untouched (``Any``), so a structured value
  read from the document is the very object handed to ``configured``.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class XimgdiffConfig(BaseModel):
    """Options for the optional x-img-diff report renderer."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    invocation_type: Literal["none", "client", "cli"] = Field(default="client", alias="invocationType")


class CoreConfig(BaseModel):
    """Global (non plugin) options of a run.

    Attributes:
        actual_dir: Directory holding the screenshots of the current run.
        working_dir: Scratch directory for expected images and reports.
        threshold: Deprecated alias of ``matching_threshold``.
        threshold_rate: Allowed rate of differing pixels before failing.
        threshold_pixel: Allowed number of differing pixels before failing.
        matching_threshold: Per-pixel color distance tolerance.
        enable_antialias: Ignore anti-aliased pixels while comparing.
        add_ignore: Add the working directory to ``.gitignore``.
        concurrency: Number of parallel comparisons.
        ximgdiff: x-img-diff renderer options.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    actual_dir: str = Field(alias="actualDir")
    working_dir: str = Field(alias="workingDir")
    threshold: Optional[float] = None
    threshold_rate: Optional[float] = Field(default=None, alias="thresholdRate", ge=0)
    threshold_pixel: Optional[int] = Field(default=None, alias="thresholdPixel", ge=0)
    matching_threshold: Optional[float] = Field(default=None, alias="matchingThreshold", ge=0, le=1)
    enable_antialias: Optional[bool] = Field(default=None, alias="enableAntialias")
    add_ignore: Optional[bool] = Field(default=None, alias="addIgnore")
    concurrency: Optional[int] = Field(default=None, ge=1)
    ximgdiff: Optional[XimgdiffConfig] = None


class RegSuitConfiguration(BaseModel):
    """Configuration document: core section plus per-plugin options.

    ``plugins`` maps a plugin name to its options value, to a
    ``{"disabled": true}`` marker, or to ``true`` (enabled, no options).
    ``None`` means the document declares no plugins at all.
    """

    model_config = ConfigDict(populate_by_name=True)

    core: CoreConfig
    plugins: Optional[Dict[str, Any]] = None

    def plugin_names(self) -> list[str]:
        """Return the declared plugin names in document order."""
        return list(self.plugins or {})

    def to_document(self) -> Dict[str, Any]:
        """Dump back to the authored (camelCase, ``None``-free) shape."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = ["XimgdiffConfig", "CoreConfig", "RegSuitConfiguration"]
