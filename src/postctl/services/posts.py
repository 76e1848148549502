"""PostService: list, show, check, and create posts.

Each file is read and parsed on its own. A failure in one post becomes an
issue on the result and never stops processing of the others; invalid
posts are left out of the publishable set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from postctl.config.logging import post_context
from postctl.domain.content import build_post
from postctl.domain.errors import PostError
from postctl.domain.post import Post
from postctl.services.base import BaseService
from postctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

SEVERITY_ERROR = "error"

# A parsed post, or the issue dict describing why it failed
_Loaded = Post | dict[str, Any]


class PostService(BaseService):
    """Operations over the post store."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_posts(self) -> ServiceResult:
        """List every post file with its headline fields.

        Posts that fail to parse are still listed, marked ``valid: False``.
        """
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        for loaded in self._load_all(self._store.list_paths()):
            if isinstance(loaded, Post):
                items.append({**self._summary(loaded), "valid": True})
            else:
                items.append({"path": loaded["path"], "title": None, "valid": False})
                warnings.append(f"{loaded['path']}: {loaded['message']}")

        return ServiceResult(
            ok=True,
            op="list_posts",
            data={"items": items, "count": len(items)},
            warnings=warnings,
            meta=self._meta(),
        )

    def get_post(self, path: Path | str) -> ServiceResult:
        """Parse a single post and return its full record, body included."""
        op = "get_post"
        resolved = self._store.resolve(path)
        if not resolved.is_file():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="NOT_FOUND",
                    message=f"No post file at {path}",
                    detail={"path": str(path)},
                ),
            )

        with post_context(self._store.relative(resolved)):
            try:
                post = self._store.read(resolved)
            except PostError as exc:
                logger.warning("Invalid post: %s", exc.message)
                return self._fail(op, exc)

        return ServiceResult(ok=True, op=op, data=self._record(post))

    def check(self) -> ServiceResult:
        """Parse and validate every post, reporting one issue per invalid file.

        With ``check.workers > 1`` files are parsed on a thread pool;
        results keep path order either way.
        """
        paths = self._store.list_paths()
        workers = self._store.settings.check.workers

        posts: list[dict[str, Any]] = []
        issues: list[dict[str, Any]] = []
        for loaded in self._load_all(paths, workers=workers):
            if isinstance(loaded, Post):
                posts.append(self._summary(loaded))
            else:
                issues.append(loaded)

        return ServiceResult(
            ok=True,
            op="check",
            data={
                "posts": posts,
                "issues": issues,
                "count": len(issues),
                "checked": len(paths),
                "valid_count": len(posts),
                "invalid_count": len(issues),
                "healthy": not issues,
            },
            meta=self._meta(workers=workers),
        )

    def create_post(
        self,
        title: str,
        *,
        layout: str | None = None,
        author: str | None = None,
        categories: Iterable[str] = (),
        image: str | None = None,
        featured: bool = False,
        hidden: bool = False,
        published: date | None = None,
        body: str = "",
    ) -> ServiceResult:
        """Write a new ``YYYY-MM-DD-slug.md`` post with validated front matter."""
        op = "create_post"
        site = self._store.settings.site
        fm: dict[str, Any] = {
            "layout": layout or site.default_layout,
            "title": title,
            "author": author or site.default_author,
            "categories": list(categories),
            "image": self._store.asset_ref(image) if image else None,
            "featured": featured,
            "hidden": hidden,
        }

        try:
            path = self._store.new_path(title, published or datetime.now(UTC).date())
        except ValueError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="INVALID_TITLE", message=str(exc)),
            )

        if path.exists():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="ALREADY_EXISTS",
                    message=f"Post already exists: {self._store.relative(path)}",
                    detail={"path": self._store.relative(path)},
                ),
            )

        try:
            post = build_post(fm, body, path=path)
        except PostError as exc:
            return self._fail(op, exc)

        self._store.write(path, post)
        logger.debug("Created post %s", path)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": self._store.relative(path),
                "title": post.title,
                "layout": post.layout,
                "author": post.author,
                "categories": list(post.categories),
            },
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load(self, path: Path) -> _Loaded:
        rel = self._store.relative(path)
        with post_context(rel):
            try:
                return self._store.read(path)
            except PostError as exc:
                logger.warning("Skipping invalid post: %s", exc.message)
                return _issue(rel, exc.code, exc.field, exc.message)
            except OSError as exc:
                logger.warning("Cannot read post: %s", exc)
                return _issue(rel, "READ_ERROR", None, str(exc))

    def _load_all(self, paths: list[Path], *, workers: int = 1) -> list[_Loaded]:
        if workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                return list(pool.map(self._load, paths))
        return [self._load(p) for p in paths]

    def _meta(self, **extra: Any) -> dict[str, Any]:
        return {"site": self._store.settings.site.name, **extra}

    def _summary(self, post: Post) -> dict[str, Any]:
        data = post.summary()
        if post.path is not None:
            data["path"] = self._store.relative(post.path)
        return data

    def _record(self, post: Post) -> dict[str, Any]:
        data = post.model_dump(mode="json")
        if post.path is not None:
            data["path"] = self._store.relative(post.path)
        return data


def _issue(path: str, code: str, field: str | None, message: str) -> dict[str, Any]:
    return {
        "path": path,
        "code": code,
        "field": field,
        "message": message,
        "severity": SEVERITY_ERROR,
    }
