"""Request dependencies shared by the routers."""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from themehooks.kernel import Kernel


def get_kernel(request: Request) -> Kernel:
    """Return the kernel built at application startup."""
    return request.app.state.kernel


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
