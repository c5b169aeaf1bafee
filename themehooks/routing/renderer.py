"""
Route Renderer

Maps route ids to the controllers that build their render descriptors.
The route table is filled at startup and only read afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from themehooks.exceptions import DuplicateRouteError, UnknownRouteError
from themehooks.theme.registry import RenderDescriptor, ThemeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    """
    A page route.

    Attributes:
        route_id:   Logical id, e.g. "class_hooks.page".
        path:       URL path the page is served under.
        title:      Page title.
        controller: Zero-argument callable returning the page's descriptor.
    """

    route_id: str
    path: str
    title: str
    controller: Callable[[], RenderDescriptor]


class RouteRenderer:
    """Resolves route ids (or paths) to render descriptors."""

    def __init__(self, routes: Iterable[Route] = (), theme: ThemeRegistry | None = None) -> None:
        self._routes: dict[str, Route] = {}
        self._paths: dict[str, str] = {}
        self._theme = theme
        for route in routes:
            self.add(route)

    def add(self, route: Route) -> None:
        if route.route_id in self._routes:
            raise DuplicateRouteError("route_id", route.route_id)
        if route.path in self._paths:
            raise DuplicateRouteError("path", route.path)
        self._routes[route.route_id] = route
        self._paths[route.path] = route.route_id
        logger.debug("Route added: %s -> %s", route.path, route.route_id)

    @property
    def routes(self) -> list[Route]:
        return list(self._routes.values())

    def get(self, route_id: str) -> Route:
        try:
            return self._routes[route_id]
        except KeyError:
            raise UnknownRouteError(route_id) from None

    def match(self, path: str) -> Route:
        """Return the route served under path."""
        route_id = self._paths.get(path)
        if route_id is None:
            raise UnknownRouteError(path)
        return self._routes[route_id]

    def render(self, route_id: str) -> RenderDescriptor:
        """
        Build the render descriptor for route_id.

        Raises:
            UnknownRouteError: route_id is not registered.
        """
        descriptor = self.get(route_id).controller()
        if self._theme is not None:
            descriptor = self._theme.prepare(descriptor)
        return descriptor
