"""
Hook Name Constants

Centralised list of the hook names the kernel dispatches, and the dispatch
mode each one uses.
"""

from __future__ import annotations

from enum import Enum


class HookMode(str, Enum):
    """How the dispatcher combines the handlers of one hook."""

    FIRST = "first"  # first non-empty return value wins
    ALTER = "alter"  # handlers mutate the shared context in place
    COLLECT = "collect"  # every return value, in registration order


# ── Lifecycle hooks ───────────────────────────────────────────────────────────
HOOK_THEME = "theme"
HOOK_HELP = "help"
HOOK_PAGE_ATTACHMENTS = "page_attachments"

# ── Master list ───────────────────────────────────────────────────────────────
ALL_HOOKS: list[str] = [
    HOOK_THEME,
    HOOK_HELP,
    HOOK_PAGE_ATTACHMENTS,
]

HOOK_MODES: dict[str, HookMode] = {
    HOOK_THEME: HookMode.COLLECT,
    HOOK_HELP: HookMode.FIRST,
    HOOK_PAGE_ATTACHMENTS: HookMode.ALTER,
}
