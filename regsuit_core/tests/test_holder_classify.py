"""Unit tests for plugin holders and capability predicates.

Covers bundle shapes (mapping, camelCase keys, attribute objects, ``None``),
interface validation, immutability and predicate independence.
"""
from __future__ import annotations

import dataclasses
from types import SimpleNamespace

import pytest

from regsuit_core.base.errors import ErrorCode, RegSuitError
from regsuit_core.base.plugins import (
    Capability,
    PluginHolder,
    filter_holders,
    is_key_generator,
    is_notifier,
    is_preparer,
    is_publisher,
)
from regsuit_core.tests.utils import FakeKeyGenerator, FakeNotifier, FakePreparer, FakePublisher


def test_holder_from_mapping_with_camel_case_key_generator():
    kg = FakeKeyGenerator()
    holder = PluginHolder.from_bundle("keygen", {"keyGenerator": kg})

    assert holder.name == "keygen"  # nosec B101 - pytest assert in tests
    assert holder.key_generator is kg  # nosec B101 - pytest assert in tests
    assert holder.capabilities == frozenset({Capability.KEY_GENERATOR})  # nosec B101 - pytest assert in tests


def test_holder_from_attribute_object():
    notifier = FakeNotifier()
    holder = PluginHolder.from_bundle("notify", SimpleNamespace(notifier=notifier, publisher=None))

    assert is_notifier(holder)  # nosec B101 - pytest assert in tests
    assert not is_publisher(holder)  # nosec B101 - pytest assert in tests
    assert holder.get(Capability.NOTIFIER) is notifier  # nosec B101 - pytest assert in tests


def test_predicates_are_independent():
    everything = PluginHolder.from_bundle(
        "all",
        {
            "key_generator": FakeKeyGenerator(),
            "publisher": FakePublisher(),
            "notifier": FakeNotifier(),
            "preparer": FakePreparer(),
        },
    )
    only_prep = PluginHolder.from_bundle("prep", {"preparer": FakePreparer()})

    assert all(p(everything) for p in (is_key_generator, is_publisher, is_notifier, is_preparer))  # nosec B101
    assert [p(only_prep) for p in (is_key_generator, is_publisher, is_notifier, is_preparer)] == [
        False,
        False,
        False,
        True,
    ]  # nosec B101


@pytest.mark.parametrize("bundle", [None, {}, SimpleNamespace()])
def test_empty_bundles_have_no_capabilities(bundle):
    holder = PluginHolder.from_bundle("empty", bundle)
    assert holder.capabilities == frozenset()  # nosec B101 - pytest assert in tests


@pytest.mark.parametrize("marker", [False, 0, ""])
def test_falsy_capability_markers_count_as_absent(marker):
    notifier = FakeNotifier()
    holder = PluginHolder.from_bundle("partial", {"publisher": marker, "notifier": notifier})
    assert holder.capabilities == frozenset({Capability.NOTIFIER})  # nosec B101 - pytest assert in tests
    assert holder.publisher is None  # nosec B101 - pytest assert in tests
    assert not is_publisher(holder)  # nosec B101 - pytest assert in tests

    direct = PluginHolder(name="direct", key_generator=marker)
    assert direct.key_generator is None and direct.capabilities == frozenset()  # nosec B101


def test_capability_not_satisfying_interface_is_rejected():
    class Incomplete:
        def init(self, ctx):
            return None

    with pytest.raises(RegSuitError) as info:
        PluginHolder.from_bundle("broken", {"publisher": Incomplete()})
    assert info.value.code is ErrorCode.INVALID_PLUGIN  # nosec B101 - pytest assert in tests
    assert info.value.plugin == "broken"  # nosec B101 - pytest assert in tests


def test_holder_is_immutable():
    holder = PluginHolder.from_bundle("n", {"notifier": FakeNotifier()})
    with pytest.raises(dataclasses.FrozenInstanceError):
        holder.notifier = None  # type: ignore[misc]


def test_filter_holders_preserves_order():
    holders = [
        PluginHolder.from_bundle("b", {"notifier": FakeNotifier()}),
        PluginHolder.from_bundle("a", {"publisher": FakePublisher()}),
        PluginHolder.from_bundle("c", {"notifier": FakeNotifier()}),
    ]
    assert [h.name for h in filter_holders(holders, Capability.NOTIFIER)] == ["b", "c"]  # nosec B101
