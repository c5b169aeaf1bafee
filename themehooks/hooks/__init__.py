"""
Hook System

Public API:
    HookRegistry       - ordered registry of hook handlers
    HookRegistration   - one registered handler
    HookDispatcher     - runs handlers for a hook name
    HelpContext        - context for `help` handlers
    PageContext        - context for `page_attachments` handlers
    Attachments        - libraries attached to a page
    hook_implementation, register_hook_object, register_procedural_hooks
                       - class-based and procedural registration styles
"""

from .discovery import hook_implementation, register_hook_object, register_procedural_hooks
from .dispatcher import Attachments, HelpContext, HookDispatcher, PageContext
from .names import ALL_HOOKS, HOOK_HELP, HOOK_MODES, HOOK_PAGE_ATTACHMENTS, HOOK_THEME, HookMode
from .registry import HookRegistration, HookRegistry

__all__ = [
    "ALL_HOOKS",
    "HOOK_HELP",
    "HOOK_MODES",
    "HOOK_PAGE_ATTACHMENTS",
    "HOOK_THEME",
    "Attachments",
    "HelpContext",
    "HookDispatcher",
    "HookMode",
    "HookRegistration",
    "HookRegistry",
    "PageContext",
    "hook_implementation",
    "register_hook_object",
    "register_procedural_hooks",
]
