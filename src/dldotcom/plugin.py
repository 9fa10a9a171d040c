"""MkDocs plugin wiring the site's posts and partials into the build.
"""

import logging

from mkdocs.exceptions import PluginError
from mkdocs.plugins import BasePlugin

from .categories import UnknownCategory
from .config import SitePluginConfig
from .model import InvalidPost, Page, Post
from .partials import footer_partial, navigation_partial
from .posts import group_by_category, sort_posts, summarize

__all__ = ["SitePlugin"]

log = logging.getLogger(f"mkdocs.plugins.{__name__}")


class SitePlugin(BasePlugin[SitePluginConfig]):
    """Handles MkDocs events, to hook in at appropriate locations.

    The methods are ordered in the order that they would have their first-calls.
    """

    def __init__(self):
        super().__init__()
        self._posts = {}  # page url -> Post
        self._env = None

    # https://www.mkdocs.org/dev-guide/plugins/#on_config
    def on_config(self, config):
        # Configured paths and post links are written in directory-URL form.
        if not config["use_directory_urls"]:
            raise PluginError(
                "dldotcom requires use_directory_urls: pages are identified "
                "by paths such as \"/projects/\", not \"/projects.html\"."
            )
        return config

    # https://www.mkdocs.org/dev-guide/plugins/#on_pre_build
    def on_pre_build(self, *, config):
        # `mkdocs serve` reuses the plugin instance across rebuilds.
        self._posts = {}
        self._env = None

    # https://www.mkdocs.org/dev-guide/plugins/#on_page_markdown
    def on_page_markdown(self, markdown, *, page, config, files):
        if not self._is_post(page):
            return markdown

        try:
            post = Post.from_meta(Page.from_mkdocs(page).path, page.meta)
        except (InvalidPost, UnknownCategory) as err:
            raise PluginError(f"Invalid post {page.file.src_path}: {err}") from err

        log.debug("Collected post %s (%s)", post.path, post.date.date())
        self._posts[page.url] = post
        return markdown

    # https://www.mkdocs.org/dev-guide/plugins/#on_page_content
    def on_page_content(self, html, *, page, config, files):
        post = self._posts.get(page.url)
        if post is not None and not post.summary:
            post.summary = summarize(html)
        return html

    # https://www.mkdocs.org/dev-guide/plugins/#on_env
    def on_env(self, env, *, config, files):
        posts = list(self._posts.values())
        log.info("Publishing %d posts", len(posts))

        env.globals["posts"] = sort_posts(posts)
        env.globals["posts_by_category"] = group_by_category(posts)
        env.globals["discussions_url"] = self.config.discussions_url
        env.filters["category_label"] = lambda category: category.label
        self._env = env
        return env

    # https://www.mkdocs.org/dev-guide/plugins/#on_page_context
    def on_page_context(self, context, *, page, config, nav):
        context.update(self._partials(Page.from_mkdocs(page)))
        context["post"] = self._posts.get(page.url)
        return context

    # https://www.mkdocs.org/dev-guide/plugins/#on_template_context
    def on_template_context(self, context, *, template_name, config):
        # Static templates (404.html, ...) are not a page of the navigation.
        context.update(self._partials(None))
        return context

    def _partials(self, current):
        return {
            "navigation_partial": navigation_partial(
                current, self.config.navigation, self._env
            ),
            "footer_partial": footer_partial(
                current, self.config.footer, self.config.copyright, self._env
            ),
        }

    def _is_post(self, page):
        prefix = self.config.posts_dir.strip("/") + "/"
        return page.url.startswith(prefix) and page.url != prefix
