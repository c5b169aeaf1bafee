"""legacy_hooks - hooks implemented as procedural module functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from themehooks.extensions.base import ExtensionBase, ExtensionMeta
from themehooks.extensions.legacy_hooks import module
from themehooks.extensions.legacy_hooks.controller import LegacyHooksController
from themehooks.hooks.discovery import register_procedural_hooks
from themehooks.routing.renderer import Route

if TYPE_CHECKING:
    from themehooks.extensions.base import ExtensionHandler
    from themehooks.hooks.registry import HookRegistry

_META = ExtensionMeta(
    name="legacy_hooks",
    title="Legacy Hooks",
    description="Demonstrates the legacy procedural way of implementing hooks",
)


class LegacyHooksExtension(ExtensionBase):
    @property
    def meta(self) -> ExtensionMeta:
        return _META

    def register_hooks(self, registry: HookRegistry, handler: ExtensionHandler) -> None:
        register_procedural_hooks(registry, module, prefix=_META.name)

    def routes(self) -> list[Route]:
        return [
            Route(
                route_id="legacy_hooks.page",
                path="/legacy-hooks",
                title="Legacy Hooks",
                controller=LegacyHooksController().build,
            ),
        ]


__all__ = ["LegacyHooksExtension", "LegacyHooksController"]
