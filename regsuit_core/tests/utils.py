"""Fake plugins and resolvers shared by the registry tests."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from regsuit_core.base.interfaces import PluginContext


class FakeKeyGenerator:
    def __init__(self) -> None:
        self.contexts: List[PluginContext] = []

    def init(self, ctx: PluginContext) -> None:
        self.contexts.append(ctx)

    async def get_expected_key(self) -> Optional[str]:
        return "expected"

    async def get_actual_key(self) -> str:
        return "actual"


class FakePublisher:
    def __init__(self) -> None:
        self.contexts: List[PluginContext] = []

    def init(self, ctx: PluginContext) -> None:
        self.contexts.append(ctx)

    async def fetch(self, key: str) -> Any:
        return key

    async def publish(self, key: str) -> Dict[str, Any]:
        return {"report_url": f"https://example.invalid/{key}"}


class FakeNotifier:
    def __init__(self) -> None:
        self.contexts: List[PluginContext] = []

    def init(self, ctx: PluginContext) -> None:
        self.contexts.append(ctx)

    async def notify(self, params: Any) -> None:
        return None


class FakePreparer:
    def __init__(self, questions: Optional[List[Dict[str, Any]]] = None, events: Optional[List[str]] = None, name: str = "") -> None:
        self.questions = questions if questions is not None else [{"name": "token", "type": "input"}]
        self.contexts: List[PluginContext] = []
        self.events = events if events is not None else []
        self.name = name

    def inquire(self) -> List[Dict[str, Any]]:
        return self.questions

    async def prepare(self, ctx: PluginContext) -> Any:
        self.events.append(f"prepare:{self.name}")
        self.contexts.append(ctx)
        return {"prepared": ctx.options}


class DictResolver:
    """Resolver backed by a ``{name: factory}`` mapping; counts lookups."""

    def __init__(self, factories: Dict[str, Callable[[], Any]]) -> None:
        self.factories = dict(factories)
        self.calls: List[str] = []

    def resolve(self, name: str) -> Callable[[], Any]:
        self.calls.append(name)
        try:
            return self.factories[name]
        except KeyError:
            raise ModuleNotFoundError(f"No module named '{name}'", name=name) from None


def bundle_factory(**capabilities: Any) -> Callable[[], Dict[str, Any]]:
    """Return a zero-argument factory producing ``capabilities`` as a bundle."""
    return lambda: dict(capabilities)


def make_config(plugins: Optional[Dict[str, Any]] = None, **core: Any) -> Dict[str, Any]:
    """Build a configuration document mapping."""
    core_section = {"workingDir": ".reg", "actualDir": "screenshots"}
    core_section.update(core)
    document: Dict[str, Any] = {"core": core_section}
    if plugins is not None:
        document["plugins"] = plugins
    return document
