"""
class_hooks - hooks implemented as classes.

Hook methods are marked with @hook_implementation and registered per
instance, so HelpHook can be given the extension handler it depends on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from themehooks.extensions.base import ExtensionBase, ExtensionMeta
from themehooks.extensions.class_hooks.controller import ClassHooksController
from themehooks.extensions.class_hooks.hooks import PAGE_ROUTE, HelpHook, ThemeHook
from themehooks.hooks.discovery import register_hook_object
from themehooks.routing.renderer import Route

if TYPE_CHECKING:
    from themehooks.extensions.base import ExtensionHandler
    from themehooks.hooks.registry import HookRegistry


_META = ExtensionMeta(
    name="class_hooks",
    title="Class Hooks",
    description="Demonstrates the class-based way of implementing hooks with dependency injection",
)


class ClassHooksExtension(ExtensionBase):
    @property
    def meta(self) -> ExtensionMeta:
        return _META

    def register_hooks(self, registry: HookRegistry, handler: ExtensionHandler) -> None:
        for hook_object in (ThemeHook(), HelpHook(handler)):
            register_hook_object(registry, hook_object, source=_META.name)

    def routes(self) -> list[Route]:
        return [
            Route(
                route_id=PAGE_ROUTE,
                path="/class-hooks",
                title="Class Hooks",
                controller=ClassHooksController().build,
            ),
        ]


__all__ = ["ClassHooksExtension", "ClassHooksController", "HelpHook", "ThemeHook"]
