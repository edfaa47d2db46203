"""Pytest configuration for the registry test suite.

Tests log through a dedicated propagating logger so ``caplog`` sees every
record, including DEBUG-level ``verbose`` lines and forked plugin loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterator, Optional

import pytest

from regsuit_core.base.dto import RegSuitConfiguration
from regsuit_core.base.log_support import RegLogger
from regsuit_core.base.plugins import PluginRegistry

from regsuit_core.tests.utils import DictResolver, make_config

TEST_LOGGER_NAME = "regsuit_test"
_UNSET = object()


@pytest.fixture()
def reg_logger(caplog: pytest.LogCaptureFixture) -> RegLogger:
    """Root RegLogger whose records (DEBUG and up) land in ``caplog``."""

    caplog.set_level(logging.DEBUG)
    logger = logging.getLogger(TEST_LOGGER_NAME)
    logger.propagate = True
    return RegLogger(logger)


@pytest.fixture()
def make_registry(reg_logger: RegLogger) -> Callable[..., PluginRegistry]:
    """Factory building a registry over a DictResolver.

    The replaced plugins section mirrors the raw one unless ``replaced`` is
    given; ``replaced=None`` leaves the replaced document unset.
    """

    def _make(
        factories: dict,
        plugins: Optional[dict] = None,
        *,
        replaced: object = _UNSET,
        no_emit: bool = False,
    ) -> PluginRegistry:
        raw = RegSuitConfiguration.model_validate(make_config(plugins))
        replaced_doc = None
        if replaced is not None:
            replaced_plugins = plugins if replaced is _UNSET else replaced
            replaced_doc = RegSuitConfiguration.model_validate(make_config(replaced_plugins))
        return PluginRegistry(
            reg_logger,
            no_emit,
            raw_config=raw,
            replaced_config=replaced_doc,
            resolver=DictResolver(factories),
        )

    return _make


@pytest.fixture()
def clean_local_modules() -> Iterator[None]:
    """Drop plugin modules imported from files during a test."""

    before = set(sys.modules)
    yield
    for name in set(sys.modules) - before:
        if name.startswith("_regsuit_local_") or name.startswith("regsuit_fixture_"):
            sys.modules.pop(name, None)
