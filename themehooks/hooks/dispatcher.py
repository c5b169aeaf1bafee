"""
Hook Dispatcher

HookDispatcher: invokes the handlers registered for a hook name, in
registration order, combining them according to the hook's mode.

Contexts:
    HelpContext - passed to `help` handlers
    PageContext - passed to `page_attachments` handlers; carries the
                  mutable Attachments collection

The dispatcher keeps no state between calls. Handler exceptions propagate
to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from themehooks.hooks.names import HOOK_MODES, HookMode
from themehooks.hooks.registry import HookRegistry

logger = logging.getLogger(__name__)


@dataclass
class Attachments:
    """Assets attached to a rendered page."""

    libraries: list[str] = field(default_factory=list)

    def add_library(self, library: str) -> None:
        """Attach a library, e.g. "class_hooks/custom_styles". Re-adding is a no-op."""
        if library not in self.libraries:
            self.libraries.append(library)


@dataclass
class PageContext:
    """Page being assembled for the current route."""

    route_name: str
    attachments: Attachments = field(default_factory=Attachments)


@dataclass(frozen=True)
class HelpContext:
    """Help lookup for a route, e.g. "help.page.class_hooks"."""

    route_name: str
    route_parameters: Mapping[str, Any] = field(default_factory=dict)


class HookDispatcher:
    """Runs registered handlers for a hook."""

    def __init__(self, registry: HookRegistry, modes: Mapping[str, HookMode] | None = None) -> None:
        self._registry = registry
        self._modes = dict(HOOK_MODES if modes is None else modes)

    def mode_for(self, hook_name: str) -> HookMode:
        """Return the dispatch mode of hook_name; unknown hooks collect."""
        return self._modes.get(hook_name, HookMode.COLLECT)

    def dispatch(self, hook_name: str, context: Any = None) -> Any:
        """
        Invoke hook_name according to its mode.

        Handlers are called with `context` as their only argument, or with no
        arguments when `context` is None.

        Returns:
            FIRST   - the first non-empty result, or "" if there is none.
            ALTER   - the (mutated) context.
            COLLECT - a list of every handler's result.
        """
        mode = self.mode_for(hook_name)
        if mode is HookMode.FIRST:
            return self.invoke_first(hook_name, context)
        if mode is HookMode.ALTER:
            return self.alter(hook_name, context)
        return self.invoke_all(hook_name, context)

    def invoke_first(self, hook_name: str, context: Any = None) -> Any:
        """Return the first non-empty handler result, short-circuiting the rest."""
        for handler in self._registry.lookup(hook_name):
            result = handler(*_args(context))
            if result:
                return result
        return ""

    def alter(self, hook_name: str, context: Any = None) -> Any:
        """Let every handler mutate context in place; return context."""
        for handler in self._registry.lookup(hook_name):
            handler(*_args(context))
        return context

    def invoke_all(self, hook_name: str, context: Any = None) -> list[Any]:
        """Call every handler and return their results in registration order."""
        results = [handler(*_args(context)) for handler in self._registry.lookup(hook_name)]
        logger.debug("Hook %s collected %d results", hook_name, len(results))
        return results


def _args(context: Any) -> tuple[Any, ...]:
    return () if context is None else (context,)
