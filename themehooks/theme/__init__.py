"""Theme registry and render descriptors."""

from .registry import RenderDescriptor, TemplateSchema, ThemeRegistry, template_file_for

__all__ = ["RenderDescriptor", "TemplateSchema", "ThemeRegistry", "template_file_for"]
