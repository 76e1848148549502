"""Tests for PostStore layout and path handling."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from postctl.config.settings import PostSettings
from postctl.infrastructure.store import PostStore
from tests.conftest import CLR_POST, write_post


class TestPostStore:
    def test_default_layout(self, store: PostStore, site_root: Path) -> None:
        assert store.root == site_root
        assert store.posts_dir == site_root / "_posts"
        assert store.assets_dir == site_root / "assets"
        assert store.extensions == (".md", ".markdown")

    def test_configured_layout(self, site_root: Path) -> None:
        (site_root / "postctl.toml").write_text('[posts]\ndir = "content/posts"\nextensions = ["md"]\n')
        store = PostStore(PostSettings.from_cli(site_root=site_root))
        assert store.posts_dir == site_root / "content" / "posts"
        assert store.extensions == (".md",)

    def test_list_paths(self, store: PostStore, site_root: Path) -> None:
        write_post(site_root, "2021-03-04-clr.md", CLR_POST)
        assert store.list_paths() == [site_root / "_posts" / "2021-03-04-clr.md"]

    def test_resolve(self, store: PostStore, site_root: Path) -> None:
        path = write_post(site_root, "2021-03-04-clr.md", CLR_POST)
        assert store.resolve("_posts/2021-03-04-clr.md") == path
        assert store.resolve("2021-03-04-clr.md") == path
        assert store.resolve(path) == path

    def test_relative(self, store: PostStore, site_root: Path, tmp_path_factory) -> None:
        assert store.relative(site_root / "_posts" / "a.md") == "_posts/a.md"
        outside = tmp_path_factory.mktemp("elsewhere") / "b.md"
        assert store.relative(outside) == str(outside)

    def test_new_path(self, store: PostStore, site_root: Path) -> None:
        path = store.new_path("Hello World", date(2022, 1, 2))
        assert path == site_root / "_posts" / "2022-01-02-hello-world.md"

    def test_read_write(self, store: PostStore, site_root: Path) -> None:
        path = write_post(site_root, "a.md", CLR_POST)
        post = store.read(path)
        target = site_root / "_posts" / "copy.md"
        store.write(target, post)
        assert store.read(target).model_copy(update={"path": None}) == post.model_copy(update={"path": None})

    def test_asset_ref_bare_filename(self, store: PostStore) -> None:
        assert store.asset_ref("pcoa.png") == "assets/pcoa.png"

    def test_asset_ref_keeps_relative_path(self, store: PostStore) -> None:
        assert store.asset_ref("assets/images/pcoa.png") == "assets/images/pcoa.png"

    def test_asset_ref_configured_dir(self, site_root: Path) -> None:
        (site_root / "postctl.toml").write_text('[assets]\ndir = "static/img"\n')
        store = PostStore(PostSettings.from_cli(site_root=site_root))
        assert store.asset_ref("header.png") == "static/img/header.png"
