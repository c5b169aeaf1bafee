"""
Page Routes

One GET route per renderer route, plus the help pages:

GET  /class-hooks          → class_hooks.page
GET  /legacy-hooks         → legacy_hooks.page
GET  /admin/help/{name}    → `help` hook for help.page.{name}

A page is rendered in three steps: the renderer builds the descriptor,
`page_attachments` collects the libraries for the route, and the declared
template is rendered into page.html.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from themehooks.dependencies import get_kernel, get_templates
from themehooks.hooks.dispatcher import HelpContext, PageContext
from themehooks.hooks.names import HOOK_HELP, HOOK_PAGE_ATTACHMENTS
from themehooks.kernel import Kernel
from themehooks.routing.renderer import RouteRenderer

logger = logging.getLogger(__name__)


def render_page(request: Request, kernel: Kernel, templates: Jinja2Templates, route_id: str) -> HTMLResponse:
    """Render route_id as a full HTML page."""
    route = kernel.renderer.get(route_id)
    descriptor = kernel.renderer.render(route_id)
    schema = kernel.theme.get(descriptor.template_name)
    page = kernel.dispatcher.dispatch(HOOK_PAGE_ATTACHMENTS, PageContext(route_name=route_id))

    content = templates.get_template(schema.template).render(dict(descriptor.variables))
    logger.debug("Rendered %s with %s (libraries=%s)", route_id, schema.template, page.attachments.libraries)
    return templates.TemplateResponse(
        request,
        "page.html",
        {
            "title": route.title,
            "app_name": kernel.settings.app_name,
            "content": Markup(content),
            "attachments": page.attachments,
        },
    )


def _page_endpoint(route_id: str) -> Callable[..., Coroutine[Any, Any, HTMLResponse]]:
    async def endpoint(
        request: Request,
        kernel: Kernel = Depends(get_kernel),
        templates: Jinja2Templates = Depends(get_templates),
    ) -> HTMLResponse:
        return render_page(request, kernel, templates, route_id)

    endpoint.__name__ = f"page_{route_id.replace('.', '_')}"
    return endpoint


async def help_page(
    name: str,
    request: Request,
    kernel: Kernel = Depends(get_kernel),
    templates: Jinja2Templates = Depends(get_templates),
) -> HTMLResponse:
    """Help page for an extension; 404 when no `help` handler answers."""
    help_text = kernel.dispatcher.dispatch(HOOK_HELP, HelpContext(route_name=f"help.page.{name}"))
    if not help_text:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No help available for: {name}",
        )
    return templates.TemplateResponse(
        request,
        "help.html",
        {"name": name, "app_name": kernel.settings.app_name, "help_text": Markup(help_text)},
    )


def build_pages_router(renderer: RouteRenderer) -> APIRouter:
    """Create the page router for every route the renderer knows."""
    router = APIRouter(tags=["Pages"])
    for route in renderer.routes:
        router.add_api_route(
            route.path,
            _page_endpoint(route.route_id),
            methods=["GET"],
            response_class=HTMLResponse,
            name=route.route_id,
            summary=route.title,
        )
    router.add_api_route(
        "/admin/help/{name}",
        help_page,
        methods=["GET"],
        response_class=HTMLResponse,
        name="help.page",
    )
    return router
