"""
Extensions

Public API:
    ExtensionMeta          - extension metadata dataclass
    ExtensionBase          - abstract base class for all extensions
    ExtensionHandler       - installed extensions
    initialize_extensions  - installs the enabled extensions at startup
"""

from .base import ExtensionBase, ExtensionHandler, ExtensionMeta
from .loader import available_extensions, initialize_extensions

__all__ = ["ExtensionBase", "ExtensionHandler", "ExtensionMeta", "available_extensions", "initialize_extensions"]
