"""
Hook Registry

HookRegistry: in-process store of hook handlers, keyed by hook name.

Handlers are appended in registration order and never reordered. The
kernel populates the registry once at startup and then freezes it, so
request handling only ever reads from it.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from themehooks.exceptions import DuplicateHandlerError, RegistryFrozenError

logger = logging.getLogger(__name__)

HookHandler = Callable[..., Any]


@dataclass(frozen=True)
class HookRegistration:
    """
    One handler registered against one hook name.

    Attributes:
        hook_name: The hook constant, e.g. "theme".
        handler:   The callable invoked on dispatch.
        order:     Registry-wide registration sequence number.
        source:    Name of the extension that registered the handler.
    """

    hook_name: str
    handler: HookHandler
    order: int
    source: str = ""

    @property
    def handler_name(self) -> str:
        return getattr(self.handler, "__qualname__", repr(self.handler))


class HookRegistry:
    """
    Ordered, append-only registry of hook handlers.

    Registering the same handler twice for one hook name is a programming
    error and raises DuplicateHandlerError. Handlers are compared by
    identity; two lookups of the same bound method on the same object count
    as the same handler, while equal but distinct objects do not.
    """

    def __init__(self) -> None:
        self._registrations: dict[str, list[HookRegistration]] = defaultdict(list)
        self._counter = 0
        self._frozen = False

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, hook_name: str, handler: HookHandler, source: str = "") -> HookRegistration:
        """Append a handler for hook_name and return its registration."""
        if self._frozen:
            raise RegistryFrozenError(hook_name)
        if any(_same_handler(r.handler, handler) for r in self._registrations.get(hook_name, ())):
            raise DuplicateHandlerError(hook_name, handler)

        registration = HookRegistration(hook_name=hook_name, handler=handler, order=self._counter, source=source)
        self._counter += 1
        self._registrations[hook_name].append(registration)
        logger.debug("Hook registered: %s -> %s (%s)", hook_name, registration.handler_name, source or "-")
        return registration

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True
        logger.info("Hook registry frozen with %d handlers across %d hooks", len(self), len(self._registrations))

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Lookup ────────────────────────────────────────────────────────────────

    def lookup(self, hook_name: str) -> tuple[HookHandler, ...]:
        """Return the handlers for hook_name in registration order (empty if none)."""
        return tuple(r.handler for r in self._registrations.get(hook_name, ()))

    def registrations(self, hook_name: str) -> tuple[HookRegistration, ...]:
        """Return the full registrations for hook_name in registration order."""
        return tuple(self._registrations.get(hook_name, ()))

    def hook_names(self) -> list[str]:
        """Return every hook name with at least one handler, in first-registration order."""
        return [name for name, regs in self._registrations.items() if regs]

    def is_registered(self, hook_name: str) -> bool:
        """Return True if at least one handler is registered for hook_name."""
        return bool(self._registrations.get(hook_name))

    def __len__(self) -> int:
        return sum(len(regs) for regs in self._registrations.values())


def _same_handler(a: HookHandler, b: HookHandler) -> bool:
    if a is b:
        return True
    # Each attribute access builds a new bound method object.
    self_a, self_b = getattr(a, "__self__", None), getattr(b, "__self__", None)
    if self_a is None or self_a is not self_b:
        return False
    func = getattr(a, "__func__", None)
    return func is not None and func is getattr(b, "__func__", None)
