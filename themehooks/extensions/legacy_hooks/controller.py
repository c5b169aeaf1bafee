"""Returns responses for legacy_hooks routes."""

from __future__ import annotations

from themehooks.theme.registry import RenderDescriptor


class LegacyHooksController:
    def build(self) -> RenderDescriptor:
        """Build the legacy_hooks page."""
        return RenderDescriptor(
            template_name="legacy_template",
            variables={"message": "This is rendered using the legacy way of implementing theme hooks!"},
        )
