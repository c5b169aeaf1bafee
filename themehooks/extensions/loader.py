"""
Extension Loader

Installs the enabled extensions at startup and lets each register its
hooks. Extensions are installed in the order they are enabled, which is
also the order their handlers run in.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from themehooks.exceptions import ExtensionNotFoundError

if TYPE_CHECKING:
    from themehooks.extensions.base import ExtensionBase, ExtensionHandler
    from themehooks.hooks.registry import HookRegistry

logger = logging.getLogger(__name__)


def available_extensions() -> dict[str, Callable[[], ExtensionBase]]:
    """
    Return the built-in extension factories keyed by machine name.

    Deferred imports keep extension modules from importing the kernel at
    module load time.
    """
    from themehooks.extensions.class_hooks import ClassHooksExtension
    from themehooks.extensions.legacy_hooks import LegacyHooksExtension

    return {
        "class_hooks": ClassHooksExtension,
        "legacy_hooks": LegacyHooksExtension,
    }


def initialize_extensions(
    registry: HookRegistry,
    handler: ExtensionHandler,
    enabled: Iterable[str],
) -> list[ExtensionBase]:
    """
    Install every enabled extension and register its hooks.

    Raises:
        ExtensionNotFoundError: An enabled name has no built-in extension.
    """
    factories = available_extensions()
    installed: list[ExtensionBase] = []

    for name in enabled:
        factory = factories.get(name)
        if factory is None:
            raise ExtensionNotFoundError(name)
        extension = factory()
        handler.install(extension)
        extension.register_hooks(registry, handler)
        installed.append(extension)

    logger.info("Extension initialisation complete - %d extensions installed", len(installed))
    return installed
