"""
Procedural hook implementations for the legacy_hooks extension.

Each hook is a module-level function named legacy_hooks_<hook name>,
discovered by name when the extension registers its hooks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from themehooks.hooks.dispatcher import HelpContext


def legacy_hooks_theme() -> dict[str, Any]:
    """Implements hook theme."""
    return {
        "legacy_template": {
            "variables": {"message": ""},
        },
    }


def legacy_hooks_help(context: HelpContext) -> str:
    """Implements hook help."""
    if context.route_name == "help.page.legacy_hooks":
        return "<p>This module demonstrates the legacy procedural way of implementing hooks.</p>"
    return ""
