"""
Kernel

build_kernel() is the single startup routine: it installs the enabled
extensions, freezes the hook registry, collects the theme registry and the
route table, and returns everything bundled in one immutable Kernel. The
web layer keeps the kernel on app.state and passes it to every request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from themehooks.config import Settings
from themehooks.extensions.base import ExtensionHandler
from themehooks.extensions.loader import initialize_extensions
from themehooks.hooks.dispatcher import HookDispatcher
from themehooks.hooks.names import HOOK_THEME
from themehooks.hooks.registry import HookRegistry
from themehooks.routing.renderer import RouteRenderer
from themehooks.theme.registry import ThemeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Kernel:
    settings: Settings
    registry: HookRegistry
    dispatcher: HookDispatcher
    extensions: ExtensionHandler
    theme: ThemeRegistry
    renderer: RouteRenderer


def build_kernel(settings: Settings) -> Kernel:
    """Build the kernel for the given settings."""
    registry = HookRegistry()
    extensions = ExtensionHandler()
    installed = initialize_extensions(registry, extensions, settings.enabled_extensions)
    registry.freeze()

    dispatcher = HookDispatcher(registry)
    theme = ThemeRegistry.from_hook_results(dispatcher.dispatch(HOOK_THEME))
    renderer = RouteRenderer(
        (route for extension in installed for route in extension.routes()),
        theme=theme,
    )

    logger.info(
        "Kernel ready: %d extensions, %d hook handlers, %d templates, %d routes",
        len(installed),
        len(registry),
        len(theme),
        len(renderer.routes),
    )
    return Kernel(
        settings=settings,
        registry=registry,
        dispatcher=dispatcher,
        extensions=extensions,
        theme=theme,
        renderer=renderer,
    )
