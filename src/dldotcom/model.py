"""Mimic the parts of mkdocs' page model that the site templates need.
"""

import datetime

from .categories import Category

__all__ = ["Page", "Post", "InvalidPost"]

_REQUIRED_POST_FIELDS = ("title", "author", "date", "categories")


class InvalidPost(ValueError):
    """Front matter that cannot describe a post."""


class Page:
    """A destination on the site.

    ``path`` is what identifies the page: it is used as the href and for
    deciding whether this is the page currently being rendered.
    """

    def __init__(self, path, title):
        self.path = path
        self.title = title

    def __repr__(self):
        return f"{type(self).__name__}(path={self.path!r}, title={self.title!r})"

    @classmethod
    def from_mkdocs(cls, page):
        # mkdocs urls are relative to the site root, the homepage being "".
        return cls("/" + page.url, page.title)


class Post(Page):
    def __init__(
        self,
        path,
        title,
        author,
        date,
        categories,
        tags=(),
        discussion=None,
        summary="",
        image=None,
    ):
        super().__init__(path, title)
        self.author = author
        self.date = date
        self.categories = tuple(categories)
        self.tags = tuple(tags)
        self.discussion = discussion
        self.summary = summary
        self.image = image

    @classmethod
    def from_meta(cls, path, meta):
        """Build a post from the front matter of its Markdown source."""
        missing = [name for name in _REQUIRED_POST_FIELDS if not meta.get(name)]
        if missing:
            raise InvalidPost("Missing front matter: {}".format(", ".join(missing)))

        categories = _as_list(meta["categories"])
        tags = _as_list(meta.get("tags") or ())

        discussion = meta.get("discussion")
        if discussion is not None:
            try:
                discussion = int(discussion)
            except (TypeError, ValueError):
                raise InvalidPost(f"Discussion is not a number: {discussion!r}") from None

        return cls(
            path,
            str(meta["title"]),
            author=str(meta["author"]),
            date=_parse_date(meta["date"]),
            # Repeated keys would list the post twice under the same category.
            categories=dict.fromkeys(Category.parse(key) for key in categories),
            tags=dict.fromkeys(str(tag) for tag in tags),
            discussion=discussion,
            summary=(meta.get("summary") or "").strip(),
            image=meta.get("image"),
        )


def _as_list(value):
    # A single value may be written without the YAML list brackets.
    if isinstance(value, str):
        return [value]
    return value


def _parse_date(value):
    # YAML already turns most timestamps into datetimes, quoted ones stay strings.
    if isinstance(value, str):
        try:
            value = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise InvalidPost(f"Not an ISO-8601 date: {value!r}") from None
    elif not isinstance(value, datetime.datetime):
        if not isinstance(value, datetime.date):
            raise InvalidPost(f"Not a date: {value!r}")
        value = datetime.datetime.combine(value, datetime.time())

    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value
