"""Documentation providers; importing this package registers all of them."""

from orx_docs.providers import mdn

__all__ = ["mdn"]
