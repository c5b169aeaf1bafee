"""
Hook Introspection Routes

GET  /api/v1/hooks                      → list hooks and their handlers
GET  /api/v1/hooks/{name}               → single hook
GET  /api/v1/extensions                 → installed extensions
GET  /api/v1/theme                      → declared templates
GET  /api/v1/routes                     → page routes
GET  /api/v1/routes/{route_id}/render   → render descriptor for a route

Everything here reads the kernel built at startup; nothing is mutable.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from themehooks.dependencies import get_kernel
from themehooks.kernel import Kernel

router = APIRouter(tags=["Hooks"])
logger = logging.getLogger(__name__)


# ── Pydantic schemas ───────────────────────────────────────────────────────────


class HandlerResponse(BaseModel):
    handler: str
    source: str
    order: int


class HookResponse(BaseModel):
    name: str
    mode: str
    handlers: list[HandlerResponse]


class ExtensionResponse(BaseModel):
    name: str
    title: str
    description: str
    version: str
    routes: list[str]


class TemplateSchemaResponse(BaseModel):
    name: str
    template: str
    variables: dict[str, Any]


class RouteResponse(BaseModel):
    route_id: str
    path: str
    title: str


class RenderDescriptorResponse(BaseModel):
    template_name: str
    variables: dict[str, Any]


# ── Helpers ────────────────────────────────────────────────────────────────────


def _build_hook_response(kernel: Kernel, name: str) -> HookResponse:
    return HookResponse(
        name=name,
        mode=kernel.dispatcher.mode_for(name).value,
        handlers=[
            HandlerResponse(handler=r.handler_name, source=r.source, order=r.order)
            for r in kernel.registry.registrations(name)
        ],
    )


# ── Routes ─────────────────────────────────────────────────────────────────────


@router.get("/hooks", response_model=list[HookResponse])
async def list_hooks(kernel: Kernel = Depends(get_kernel)) -> list[HookResponse]:
    """List every hook with at least one handler, handlers in execution order."""
    return [_build_hook_response(kernel, name) for name in kernel.registry.hook_names()]


@router.get("/hooks/{name}", response_model=HookResponse)
async def get_hook(name: str, kernel: Kernel = Depends(get_kernel)) -> HookResponse:
    if not kernel.registry.is_registered(name):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Hook has no handlers: {name}",
        )
    return _build_hook_response(kernel, name)


@router.get("/extensions", response_model=list[ExtensionResponse])
async def list_extensions(kernel: Kernel = Depends(get_kernel)) -> list[ExtensionResponse]:
    """List installed extensions in installation order."""
    return [
        ExtensionResponse(
            name=ext.meta.name,
            title=ext.meta.title,
            description=ext.meta.description,
            version=ext.meta.version,
            routes=[route.route_id for route in ext.routes()],
        )
        for ext in kernel.extensions.all()
    ]


@router.get("/theme", response_model=list[TemplateSchemaResponse])
async def list_templates(kernel: Kernel = Depends(get_kernel)) -> list[TemplateSchemaResponse]:
    return [
        TemplateSchemaResponse(name=schema.name, template=schema.template, variables=dict(schema.variables))
        for schema in kernel.theme.all()
    ]


@router.get("/routes", response_model=list[RouteResponse])
async def list_routes(kernel: Kernel = Depends(get_kernel)) -> list[RouteResponse]:
    return [RouteResponse(route_id=r.route_id, path=r.path, title=r.title) for r in kernel.renderer.routes]


@router.get("/routes/{route_id}/render", response_model=RenderDescriptorResponse)
async def render_route(route_id: str, kernel: Kernel = Depends(get_kernel)) -> RenderDescriptorResponse:
    """Return the render descriptor for a route id (404 for unknown routes)."""
    descriptor = kernel.renderer.render(route_id)
    logger.debug("Rendered descriptor for %s", route_id)
    return RenderDescriptorResponse(**descriptor.as_dict())
