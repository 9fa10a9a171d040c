"""Content types, partials and MkDocs integration for the DL.com blog.
"""

from .categories import Category, UnknownCategory
from .model import InvalidPost, Page, Post
from .partials import footer_partial, navigation_partial, render_navigation

__all__ = [
    "Category",
    "UnknownCategory",
    "Page",
    "Post",
    "InvalidPost",
    "render_navigation",
    "navigation_partial",
    "footer_partial",
]
__version__ = "2.1.0"
