"""Theme Hooks - class-based and legacy procedural hook registration for a themed CMS."""

__version__ = "1.0.0"
