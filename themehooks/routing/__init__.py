"""Route table and renderer."""

from .renderer import Route, RouteRenderer

__all__ = ["Route", "RouteRenderer"]
