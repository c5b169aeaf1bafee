"""Class-based hook implementations for the class_hooks extension."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from themehooks.hooks.discovery import hook_implementation
from themehooks.hooks.names import HOOK_HELP, HOOK_PAGE_ATTACHMENTS, HOOK_THEME

if TYPE_CHECKING:
    from themehooks.extensions.base import ExtensionHandler
    from themehooks.hooks.dispatcher import HelpContext, PageContext

PAGE_ROUTE = "class_hooks.page"
HELP_ROUTE = "help.page.class_hooks"
STYLES_LIBRARY = "class_hooks/custom_styles"

HELP_TEXT = (
    "<p>This module demonstrates the class-based way of implementing hooks with dependency injection.</p>"
)


class ThemeHook:
    """Declares the class_template theme hook and attaches its styles."""

    @hook_implementation(HOOK_THEME)
    def theme(self) -> dict[str, Any]:
        return {
            "class_template": {
                "variables": {"message": ""},
            },
        }

    @hook_implementation(HOOK_PAGE_ATTACHMENTS)
    def page_attachments(self, page: PageContext) -> None:
        if page.route_name == PAGE_ROUTE:
            page.attachments.add_library(STYLES_LIBRARY)


class HelpHook:
    """Help text for the extension; receives the extension handler through its constructor."""

    def __init__(self, extension_handler: ExtensionHandler) -> None:
        self.extension_handler = extension_handler

    @hook_implementation(HOOK_HELP)
    def help(self, context: HelpContext) -> str:
        if context.route_name == HELP_ROUTE and self.extension_handler.extension_exists("class_hooks"):
            return HELP_TEXT
        return ""
