"""
Extension Base Classes

ExtensionMeta:    declarative metadata for an extension.
ExtensionBase:    abstract base class all extensions must subclass.
ExtensionHandler: installed extensions; injected into class-based hooks
                  that need to know what else is installed.
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from themehooks.hooks.registry import HookRegistry
    from themehooks.routing.renderer import Route

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtensionMeta:
    """
    Declarative metadata describing an extension.

    Attributes:
        name:        Machine name, e.g. "class_hooks". Also the prefix of its
                     procedural hook functions and of its route ids.
        title:       Human-readable name.
        description: One-line description shown in listings.
        version:     Semver string.
    """

    name: str
    title: str
    description: str = ""
    version: str = "1.0.0"


class ExtensionBase(ABC):
    """
    Abstract base class for extensions.

    Subclasses implement `meta` and `register_hooks`. `routes` defaults to
    no routes, and `template_dir` to the `templates/` folder next to the
    subclass's module when that folder exists.
    """

    @property
    @abstractmethod
    def meta(self) -> ExtensionMeta:
        """Return the extension's metadata."""
        ...

    @abstractmethod
    def register_hooks(self, registry: HookRegistry, handler: ExtensionHandler) -> None:
        """Register this extension's hook implementations."""
        ...

    def routes(self) -> list[Route]:
        return []

    @property
    def template_dir(self) -> Path | None:
        candidate = Path(inspect.getfile(type(self))).parent / "templates"
        return candidate if candidate.is_dir() else None


class ExtensionHandler:
    """Installed extensions, in installation order."""

    def __init__(self) -> None:
        self._extensions: dict[str, ExtensionBase] = {}

    def install(self, extension: ExtensionBase) -> None:
        self._extensions[extension.meta.name] = extension
        logger.info("Extension installed: %s v%s", extension.meta.name, extension.meta.version)

    def extension_exists(self, name: str) -> bool:
        return name in self._extensions

    def get(self, name: str) -> ExtensionBase | None:
        """Return the installed extension with the given name, or None."""
        return self._extensions.get(name)

    def all(self) -> list[ExtensionBase]:
        return list(self._extensions.values())

    def template_dirs(self) -> list[Path]:
        """Template folders of every installed extension that ships one."""
        return [ext.template_dir for ext in self._extensions.values() if ext.template_dir is not None]
