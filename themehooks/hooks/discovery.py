"""
Hook discovery for the two implementation styles.

Class-based hooks mark methods with @hook_implementation and are registered
per instance, so their collaborators can be injected through the
constructor:

    class HelpHook:
        def __init__(self, extension_handler):
            self.extension_handler = extension_handler

        @hook_implementation(HOOK_HELP)
        def help(self, context): ...

    register_hook_object(registry, HelpHook(handler), source="class_hooks")

Legacy procedural hooks are plain module functions named
`<prefix>_<hook_name>`, e.g. `legacy_hooks_theme`:

    register_procedural_hooks(registry, module, prefix="legacy_hooks")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from types import ModuleType
from typing import Any, TypeVar

from themehooks.hooks.names import ALL_HOOKS
from themehooks.hooks.registry import HookRegistration, HookRegistry

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_HOOK_ATTR = "__hook_names__"


def hook_implementation(hook_name: str) -> Callable[[F], F]:
    """Mark a method as implementing hook_name. May be stacked for several hooks."""

    def decorator(func: F) -> F:
        names = list(getattr(func, _HOOK_ATTR, ()))
        # Stacked decorators apply bottom-up; keep the order they are written in.
        names.insert(0, hook_name)
        setattr(func, _HOOK_ATTR, names)
        return func

    return decorator


def hook_names_of(func: Callable[..., Any]) -> list[str]:
    """Return the hook names a function was marked with."""
    return list(getattr(func, _HOOK_ATTR, ()))


def register_hook_object(registry: HookRegistry, obj: object, source: str = "") -> list[HookRegistration]:
    """
    Register every marked method of obj.

    Methods are visited in definition order, most-derived class first; a
    method overridden in a subclass is only registered once.
    """
    seen: set[str] = set()
    registrations: list[HookRegistration] = []
    for cls in type(obj).__mro__:
        for attr_name, member in vars(cls).items():
            if attr_name in seen:
                continue
            seen.add(attr_name)
            for hook_name in hook_names_of(member):
                registrations.append(registry.register(hook_name, getattr(obj, attr_name), source=source))

    logger.debug("Registered %d class-based hooks from %s", len(registrations), type(obj).__name__)
    return registrations


def register_procedural_hooks(
    registry: HookRegistry,
    module: ModuleType,
    prefix: str,
    hook_names: Iterable[str] = ALL_HOOKS,
) -> list[HookRegistration]:
    """Register every `<prefix>_<hook_name>` function found on module."""
    registrations: list[HookRegistration] = []
    for hook_name in hook_names:
        func = getattr(module, f"{prefix}_{hook_name}", None)
        if callable(func):
            registrations.append(registry.register(hook_name, func, source=prefix))

    logger.debug("Registered %d procedural hooks from %s", len(registrations), module.__name__)
    return registrations
