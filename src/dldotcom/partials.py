"""Render the HTML fragments shared by every page: navigation bar and footer.

Both fragments are a list of site pages, where the page being rendered shows
its title instead of a link to itself.
"""

import os
from types import SimpleNamespace

import jinja2
from markupsafe import Markup

__all__ = [
    "navigation_entries",
    "render_navigation",
    "navigation_partial",
    "footer_partial",
]

Entry = SimpleNamespace

THEME_DIR = os.path.join(os.path.abspath(os.path.dirname(__file__)), "theme")

_environment = jinja2.Environment(
    loader=jinja2.FileSystemLoader(THEME_DIR),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def _render(template, environment=None, **context):
    environment = environment or _environment
    return Markup(environment.get_template(template).render(context))


def navigation_entries(pages, current=None):
    # Only the path identifies a page, duplicated paths are all current.
    return [
        Entry(
            title=page.title,
            path=page.path,
            is_current=current is not None and current.path == page.path,
        )
        for page in pages
    ]


def render_navigation(pages, current=None, environment=None):
    """Render ``pages`` as a ``<ul>``, in order, unlinking ``current``.

    ``environment`` is the Jinja2 environment to load the partial templates
    from, usually the theme's; the package's own theme directory otherwise.
    """
    return _render(
        "partials/nav_list.html",
        environment,
        entries=navigation_entries(pages, current),
    )


def navigation_partial(current, pages, environment=None):
    return _render(
        "partials/navigation.html",
        environment,
        links=render_navigation(pages, current, environment),
    )


def footer_partial(current, pages, copyright, environment=None):
    return _render(
        "partials/footer.html",
        environment,
        links=render_navigation(pages, current, environment),
        # Rendered verbatim, so it may carry entities such as &copy;
        copyright=Markup(copyright),
    )
