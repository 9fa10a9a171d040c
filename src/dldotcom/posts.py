"""Helpers over the collection of posts: ordering, grouping and summaries.
"""

import re

import bs4

from .categories import Category

__all__ = ["sort_posts", "group_by_category", "summarize"]

_WHITESPACE = re.compile(r"\s+")


def sort_posts(posts):
    """Newest first, posts published at the same time keep path order."""
    by_path = sorted(posts, key=lambda post: post.path)
    return sorted(by_path, key=lambda post: post.date, reverse=True)


def group_by_category(posts):
    groups = {category: [] for category in Category}
    for post in sort_posts(posts):
        for category in post.categories:
            groups[category].append(post)
    return {category: group for category, group in groups.items() if group}


def summarize(html, length=200):
    """Plain text of the first paragraph in ``html``, shortened to ``length``."""
    soup = bs4.BeautifulSoup(html, features="html.parser")
    paragraph = soup.find("p")
    if paragraph is None:
        return ""

    text = _WHITESPACE.sub(" ", paragraph.get_text()).strip()
    if len(text) <= length:
        return text

    cut = text[:length].rsplit(" ", 1)[0].rstrip(",;:.")
    return cut + "…"
