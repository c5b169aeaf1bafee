"""Returns responses for class_hooks routes."""

from __future__ import annotations

from themehooks.theme.registry import RenderDescriptor


class ClassHooksController:
    def build(self) -> RenderDescriptor:
        """Build the class_hooks page."""
        return RenderDescriptor(
            template_name="class_template",
            variables={"message": "This is rendered using the class-based way of implementing theme hooks!"},
        )
