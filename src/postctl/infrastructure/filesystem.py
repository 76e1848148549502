"""Filesystem operations for post files.

INVARIANT: Files are truth. A post exists because its file exists; there
is no index to keep in sync.

Pure parsing/rendering lives in :mod:`postctl.domain.content`. This module
handles actual file I/O, path resolution, and file discovery.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from collections.abc import Iterable
from datetime import date
from pathlib import Path

from postctl.domain.content import parse_post, render_post
from postctl.domain.errors import PostError
from postctl.domain.post import Post

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md", ".markdown")


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_post_file(path: Path) -> Post:
    """Read and parse a post file.

    Any :class:`PostError` raised while parsing carries *path*.
    """
    raw = path.read_bytes()
    try:
        return parse_post(raw, path=path)
    except PostError as exc:
        raise exc.with_path(path) from None


def write_post_file(path: Path, post: Post) -> None:
    """Render *post* and write it to *path*.

    Creates parent directories if they don't exist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_post(post), encoding="utf-8")


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def slugify(title: str) -> str:
    """Turn a title into a filename slug.

    Examples:
        >>> slugify("Microbiome Analysis in R!")
        'microbiome-analysis-in-r'
        >>> slugify("  CLR  &  PCoA ")
        'clr-pcoa'
    """
    text = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^\w\s-]", "", text.lower())
    text = re.sub(r"[\s_-]+", "-", text).strip("-")
    return text


def resolve_post_path(posts_dir: Path, title: str, published: date) -> Path:
    """Resolve ``{posts_dir}/YYYY-MM-DD-slug.md`` for a new post."""
    slug = slugify(title)
    if not slug:
        msg = f"Title {title!r} produces an empty filename slug"
        raise ValueError(msg)

    result = posts_dir / f"{published.isoformat()}-{slug}.md"

    if not result.resolve().is_relative_to(posts_dir.resolve()):
        msg = f"Path escapes posts directory: {result}"
        raise ValueError(msg)
    return result


def find_post_files(
    posts_dir: Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[Path]:
    """Discover all post files under *posts_dir*.

    Walks recursively, skipping hidden files and directories (any path part
    starting with ``.``). Results are sorted by path for stable output.
    """
    if not posts_dir.is_dir():
        logger.debug("Posts directory %s does not exist", posts_dir)
        return []

    suffixes = {ext.lower() for ext in extensions}
    results: list[Path] = []
    for path in posts_dir.rglob("*"):
        if not path.is_file():
            continue
        rel = path.relative_to(posts_dir)
        if any(part.startswith(".") for part in rel.parts):
            continue
        if path.suffix.lower() in suffixes:
            results.append(path)

    logger.debug("Found %d post files in %s", len(results), posts_dir)
    return sorted(results)
