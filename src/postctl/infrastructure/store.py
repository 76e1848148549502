"""PostStore: the single dependency injected into every service.

Owns the resolved site layout (posts directory, assets directory, file
extensions) and routes all file access through
:mod:`postctl.infrastructure.filesystem`. Holds no per-post state, so every
call reads from disk and posts never see each other.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

from postctl.infrastructure.filesystem import (
    find_post_files,
    read_post_file,
    resolve_post_path,
    write_post_file,
)

if TYPE_CHECKING:
    from postctl.config.settings import PostSettings
    from postctl.domain.post import Post

logger = logging.getLogger(__name__)


class PostStore:
    """A directory of post files rooted at the site root."""

    def __init__(self, settings: PostSettings) -> None:
        self.settings = settings
        self.root = settings.site_root
        self.posts_dir = self.root / settings.posts.dir
        self.assets_dir = self.root / settings.assets.dir
        self.extensions = tuple(settings.posts.extensions)

    def list_paths(self) -> list[Path]:
        """All post files in the posts directory."""
        return find_post_files(self.posts_dir, extensions=self.extensions)

    def resolve(self, path: Path | str) -> Path:
        """Resolve a user-supplied path against the site root or posts dir.

        Absolute paths are returned as-is. Relative paths are tried against
        the site root first, then the posts directory.
        """
        p = Path(path)
        if p.is_absolute():
            return p
        candidate = self.root / p
        if candidate.exists():
            return candidate
        return self.posts_dir / p

    def read(self, path: Path) -> Post:
        logger.debug("Parsing %s", path)
        return read_post_file(path)

    def write(self, path: Path, post: Post) -> None:
        logger.debug("Writing %s", path)
        write_post_file(path, post)

    def new_path(self, title: str, published: date) -> Path:
        return resolve_post_path(self.posts_dir, title, published)

    def asset_ref(self, image: str) -> str:
        """Front-matter reference for *image*.

        A bare filename is placed under the assets directory; anything with
        a directory part is taken as already relative to the site root. The
        file itself is not required to exist.
        """
        if "/" in image:
            return image
        return self.relative(self.assets_dir / image)

    def relative(self, path: Path) -> str:
        """Display *path* relative to the site root when possible."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)
