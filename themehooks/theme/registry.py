"""
Theme Registry

TemplateSchema:   a template declared by a `theme` hook, with its variables
                  and their defaults.
RenderDescriptor: the (template, variables) pair handed to the templating
                  pipeline.
ThemeRegistry:    every declared template, built once from the `theme`
                  hook results.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from themehooks.exceptions import DuplicateTemplateError, UndeclaredVariableError, UnknownTemplateError

logger = logging.getLogger(__name__)


def template_file_for(name: str) -> str:
    """Default template file for a theme hook name: class_template -> class-template.html."""
    return f"{name.replace('_', '-')}.html"


@dataclass(frozen=True)
class TemplateSchema:
    """
    A themeable template and the variables it accepts.

    Attributes:
        name:      Theme hook name, e.g. "class_template".
        variables: Declared variable names mapped to their default values.
        template:  Template file rendered for this hook.
    """

    name: str
    variables: Mapping[str, Any] = field(default_factory=dict)
    template: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))
        if not self.template:
            object.__setattr__(self, "template", template_file_for(self.name))


@dataclass(frozen=True)
class RenderDescriptor:
    template_name: str
    variables: Mapping[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {"template_name": self.template_name, "variables": dict(self.variables)}


class ThemeRegistry:
    """Declared templates, keyed by theme hook name."""

    def __init__(self, schemas: Iterable[TemplateSchema] = ()) -> None:
        self._schemas: dict[str, TemplateSchema] = {}
        for schema in schemas:
            if schema.name in self._schemas:
                raise DuplicateTemplateError(schema.name)
            self._schemas[schema.name] = schema

    @classmethod
    def from_hook_results(cls, results: Iterable[Mapping[str, Mapping[str, Any]] | None]) -> ThemeRegistry:
        """
        Build the registry from `theme` hook results.

        Each result maps a theme hook name to its definition:
            {"class_template": {"variables": {"message": ""}}}
        An optional "template" key overrides the template file name.
        """
        schemas: list[TemplateSchema] = []
        for result in results:
            for name, definition in (result or {}).items():
                schemas.append(
                    TemplateSchema(
                        name=name,
                        variables=definition.get("variables", {}),
                        template=definition.get("template", ""),
                    )
                )
        registry = cls(schemas)
        logger.info("Theme registry built with %d templates", len(registry))
        return registry

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get(self, name: str) -> TemplateSchema:
        try:
            return self._schemas[name]
        except KeyError:
            raise UnknownTemplateError(name) from None

    def names(self) -> list[str]:
        return list(self._schemas)

    def all(self) -> list[TemplateSchema]:
        return list(self._schemas.values())

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    # ── Rendering ─────────────────────────────────────────────────────────────

    def prepare(self, descriptor: RenderDescriptor) -> RenderDescriptor:
        """
        Fill in declared defaults for a descriptor.

        Raises:
            UnknownTemplateError: The template was never declared.
            UndeclaredVariableError: A variable is missing from the schema.
        """
        schema = self.get(descriptor.template_name)
        undeclared = sorted(set(descriptor.variables) - set(schema.variables))
        if undeclared:
            raise UndeclaredVariableError(descriptor.template_name, undeclared)
        return RenderDescriptor(
            template_name=descriptor.template_name,
            variables={**schema.variables, **descriptor.variables},
        )
