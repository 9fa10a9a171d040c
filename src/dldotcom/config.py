"""Configuration accepted by the plugin in ``mkdocs.yml``.

    plugins:
      - dldotcom:
          copyright: "&copy; 2024 DL"
          navigation:
            - {path: /, title: Home}
            - {path: /projects/, title: Projects}
"""

from mkdocs.config import base
from mkdocs.config import config_options as c

from .model import Page

__all__ = ["PageList", "SitePluginConfig"]

DEFAULT_NAVIGATION = [
    {"path": "/", "title": "Home"},
    {"path": "/projects/", "title": "Projects"},
]
DEFAULT_FOOTER = [
    {"path": "/privacy/", "title": "Privacy"},
    {"path": "/support/", "title": "Support"},
    {"path": "/about/", "title": "About"},
]
DEFAULT_COPYRIGHT = "&copy; 2024 DL"


class PageList(c.Type):
    """A list of ``{path, title}`` mappings, validated into `Page` objects."""

    def __init__(self, **kwargs):
        super().__init__(list, **kwargs)

    def run_validation(self, value):
        value = super().run_validation(value)

        pages = []
        for index, item in enumerate(value):
            if isinstance(item, Page):
                pages.append(item)
                continue
            if not isinstance(item, dict):
                raise base.ValidationError(
                    f"Entry {index} must be a mapping with 'path' and 'title'."
                )
            path, title = item.get("path"), item.get("title")
            if not isinstance(path, str) or not isinstance(title, str):
                raise base.ValidationError(
                    f"Entry {index} needs a string 'path' and a string 'title'."
                )
            pages.append(Page(path, title))
        return pages


class SitePluginConfig(base.Config):
    navigation = PageList(default=DEFAULT_NAVIGATION)
    footer = PageList(default=DEFAULT_FOOTER)
    copyright = c.Type(str, default=DEFAULT_COPYRIGHT)
    posts_dir = c.Type(str, default="posts")
    discussions_url = c.Optional(c.Type(str))
