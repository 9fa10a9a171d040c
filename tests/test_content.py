"""The site's own content must build with the plugin's rules."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from mkdocs.utils.meta import get_data

from dldotcom.config import SitePluginConfig
from dldotcom.model import Post

ROOT = Path(__file__).resolve().parent.parent
POSTS = sorted((ROOT / "docs" / "posts").glob("*.md"))


@pytest.mark.parametrize("source", POSTS, ids=lambda path: path.stem)
def test_post_front_matter(source: Path) -> None:
    markdown, meta = get_data(source.read_text(encoding="utf-8"))
    post = Post.from_meta(f"/posts/{source.stem}/", meta)

    assert post.summary
    assert post.discussion is not None
    # Post file names start with their publication date.
    assert source.stem.startswith(post.date.strftime("%Y-%m-%d"))
    assert markdown.strip()


def test_there_are_posts() -> None:
    assert POSTS


def test_site_plugin_configuration() -> None:
    site = yaml.safe_load((ROOT / "mkdocs.yml").read_text(encoding="utf-8"))
    (options,) = [
        plugin["dldotcom"]
        for plugin in site["plugins"]
        if isinstance(plugin, dict) and "dldotcom" in plugin
    ]

    config = SitePluginConfig()
    config.load_dict(options)
    errors, warnings = config.validate()

    assert errors == []
    assert warnings == []
    navigation = {page.path for page in config.navigation + config.footer}
    for path in navigation:
        name = path.strip("/") or "index"
        assert (ROOT / "docs" / f"{name}.md").exists(), path
