"""The closed set of categories a post can be filed under.
"""

import enum

__all__ = ["Category", "UnknownCategory"]


class UnknownCategory(ValueError):
    """A category key that is not part of the taxonomy."""


class Category(enum.Enum):
    # Values are the keys used in post front matter.
    SWIFT_UI = "swiftUI"
    SWIFT_SERVER_SIDE = "swiftServerSide"
    CONTENT_MANAGEMENT = "contentManagement"
    SWIFT_CONCURRENCY = "swiftConcurrency"
    XCODE = "xcode"
    DEV_OPS = "devOps"
    STANDARD_LIBRARY = "standardLibrary"
    REST_API = "restAPI"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, key) -> "Category":
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            raise UnknownCategory(f"Unknown category: {key!r}") from None


_LABELS = {
    Category.SWIFT_UI: "SwiftUI",
    Category.SWIFT_SERVER_SIDE: "Server-Side Swift",
    Category.CONTENT_MANAGEMENT: "Content Management",
    Category.SWIFT_CONCURRENCY: "Swift Concurrency",
    Category.XCODE: "Xcode",
    Category.DEV_OPS: "DevOps",
    Category.STANDARD_LIBRARY: "Standard Library",
    Category.REST_API: "REST APIs",
}


def _check_labels():
    missing = [category.name for category in Category if category not in _LABELS]
    if missing:
        raise RuntimeError("Categories without a label: {}".format(", ".join(missing)))


_check_labels()
