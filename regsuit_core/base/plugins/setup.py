"""Interactive setup negotiation for loaded plugins.

The registry turns every loaded holder into a :class:`PluginSetupEntry`: the
questions to ask and a bound coroutine that converts answers into options.
Asking the questions is the caller's business (terminal UI, defaults, tests);
:func:`negotiate` only guarantees that preparers run one after another in
entry order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, TYPE_CHECKING

from ..interfaces import PluginContext, Question

if TYPE_CHECKING:
    from ..dto.config import RegSuitConfiguration
    from ..log_support import RegLogger
    from .holder import PluginHolder

AnswerProcessor = Callable[[Any], Awaitable[Any]]
AskQuestions = Callable[["PluginSetupEntry"], Awaitable[Any]]


@dataclass(frozen=True)
class PluginSetupEntry:
    """Setup step for one plugin.

    Attributes:
        name: Plugin name.
        questions: Questions to ask; empty for plugins without a preparer.
        prepare: Coroutine function turning answers into the plugin's options.
        configured: Structured options already present in the raw document,
            used to pre-fill answers; ``None`` otherwise.
    """

    name: str
    questions: List[Question]
    prepare: AnswerProcessor = field(repr=False)
    configured: Any = None


async def _no_options(_answers: Any) -> Any:
    return True


def configured_options(config: "RegSuitConfiguration", name: str) -> Optional[Any]:
    """Return the raw document's options for ``name`` if they are structured.

    Mappings and lists are returned as-is (same object); booleans, scalars and
    missing entries give ``None``.
    """
    value = (config.plugins or {}).get(name)
    return value if isinstance(value, (Mapping, list)) else None


def plain_setup_entry(name: str) -> PluginSetupEntry:
    """Entry for a plugin without a preparer: nothing to ask, no options."""
    return PluginSetupEntry(name=name, questions=[], prepare=_no_options, configured=None)


def preparer_setup_entry(
    holder: "PluginHolder",
    config: "RegSuitConfiguration",
    logger: "RegLogger",
    no_emit: bool,
) -> PluginSetupEntry:
    """Entry for a plugin with a preparer; ``inquire`` is called immediately."""
    preparer = holder.preparer
    questions = list(preparer.inquire())

    async def prepare(answers: Any) -> Any:
        return await preparer.prepare(
            PluginContext(
                core_config=config.core,
                logger=logger.fork(holder.name),
                options=answers,
                no_emit=no_emit,
            )
        )

    return PluginSetupEntry(
        name=holder.name,
        questions=questions,
        prepare=prepare,
        configured=configured_options(config, holder.name),
    )


async def negotiate(entries: Iterable[PluginSetupEntry], ask: AskQuestions) -> Dict[str, Any]:
    """Run every entry's answer processor sequentially.

    ``ask`` is awaited only for entries that have questions; others receive
    ``{}``. Returns ``{name: options}`` in entry order.
    """
    results: Dict[str, Any] = {}
    for entry in entries:
        answers = await ask(entry) if entry.questions else {}
        results[entry.name] = await entry.prepare(answers)
    return results


def build_plugins_section(results: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert :func:`negotiate` results into a plugins section.

    ``True`` (the "ok, no options" result) becomes an empty options mapping.
    """
    return {name: ({} if options is True else options) for name, options in results.items()}


__all__ = [
    "AnswerProcessor",
    "AskQuestions",
    "PluginSetupEntry",
    "configured_options",
    "plain_setup_entry",
    "preparer_setup_entry",
    "negotiate",
    "build_plugins_section",
]
