from . import api, pages

__all__ = ["api", "pages"]
